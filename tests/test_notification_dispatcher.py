"""Tests for Discord notification delivery."""

import json

import httpx
import pytest

from model.intent import ClaimAnnounced, ClaimExpired
from service.notification_dispatcher import NotificationDispatcher

BASE = "https://discord.test/api/v10"


def _dispatcher(handler) -> NotificationDispatcher:
    return NotificationDispatcher(
        token="bot-token", base_url=BASE, timeout=1.0, transport=httpx.MockTransport(handler)
    )


@pytest.mark.asyncio
async def test_announcement_posts_to_channel():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "m1"})

    d = _dispatcher(handler)
    ok = await d.dispatch(
        ClaimAnnounced(
            guild_id="g1", channel_id="chanA", filename="a.txt", holder="42", duration_days=1
        )
    )
    await d.aclose()

    assert ok is True
    (req,) = requests
    assert req.method == "POST"
    assert req.url.path == "/api/v10/channels/chanA/messages"
    assert req.headers["Authorization"] == "Bot bot-token"
    assert json.loads(req.content) == {"content": "<@42> has just claimed a.txt for 1 day."}


@pytest.mark.asyncio
async def test_expiry_opens_dm_then_sends():
    paths = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append((request.url.path, json.loads(request.content)))
        if request.url.path.endswith("/users/@me/channels"):
            return httpx.Response(200, json={"id": "dm9"})
        return httpx.Response(200, json={"id": "m1"})

    d = _dispatcher(handler)
    ok = await d.dispatch(ClaimExpired(holder="42", filename="a.txt"))
    await d.aclose()

    assert ok is True
    assert paths == [
        ("/api/v10/users/@me/channels", {"recipient_id": "42"}),
        ("/api/v10/channels/dm9/messages", {"content": "Your claim on `a.txt` has expired."}),
    ]


@pytest.mark.asyncio
async def test_http_error_is_swallowed():
    d = _dispatcher(lambda request: httpx.Response(403, json={"message": "Cannot send"}))
    ok = await d.dispatch(ClaimExpired(holder="42", filename="a.txt"))
    await d.aclose()
    assert ok is False


@pytest.mark.asyncio
async def test_transport_error_is_swallowed():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    d = _dispatcher(handler)
    ok = await d.dispatch(
        ClaimAnnounced(guild_id="g1", channel_id="c", filename="a.txt", holder="1", duration_days=2)
    )
    await d.aclose()
    assert ok is False
