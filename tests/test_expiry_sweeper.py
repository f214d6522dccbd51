"""Tests for the periodic expiry sweep."""

import asyncio
import logging
from datetime import timedelta

import pytest

from conftest import T0, RecordingDispatcher
from core.expiry_sweeper import ExpirySweeper
from model.claim import Claim
from model.intent import ClaimExpired

DAY = timedelta(days=1)


@pytest.fixture
async def seeded_store(store):
    await store.bootstrap()
    await store.save_claims(
        [
            Claim(filename="a.txt", userId="userX", expiresAt=T0 + DAY),
            Claim(filename="b.txt", userId="userY", expiresAt=T0 + 3 * DAY),
        ]
    )
    return store


@pytest.mark.asyncio
async def test_sweep_notifies_expired_holder_once(seeded_store, dispatcher):
    sweeper = ExpirySweeper(seeded_store, dispatcher, interval_seconds=1800)
    sweep_at = T0 + DAY + timedelta(minutes=1)

    intents = await sweeper.run_once(sweep_at)

    assert intents == [ClaimExpired(holder="userX", filename="a.txt")]
    assert dispatcher.sent == intents
    claims = {c.filename: c for c in await seeded_store.load_claims()}
    assert claims["a.txt"].notified is True
    assert claims["b.txt"].notified is False

    assert await sweeper.run_once(sweep_at + timedelta(minutes=30)) == []
    assert len(dispatcher.sent) == 1


@pytest.mark.asyncio
async def test_failed_delivery_is_not_retried(seeded_store):
    failing = RecordingDispatcher(fail=True)
    sweeper = ExpirySweeper(seeded_store, failing, interval_seconds=1800)

    await sweeper.run_once(T0 + 4 * DAY)
    await sweeper.run_once(T0 + 5 * DAY)

    assert sorted(i.filename for i in failing.sent) == ["a.txt", "b.txt"]
    assert all(c.notified for c in await seeded_store.load_claims())


@pytest.mark.asyncio
async def test_sweep_without_expired_claims_does_not_write(seeded_store, redis_client, dispatcher):
    before = dict(redis_client.values)
    sweeper = ExpirySweeper(seeded_store, dispatcher, interval_seconds=1800)

    assert await sweeper.run_once(T0) == []
    assert redis_client.values == before
    assert dispatcher.sent == []


@pytest.mark.asyncio
async def test_notified_flag_is_persisted_before_delivery(seeded_store):
    seen = []

    class CheckingDispatcher:
        async def dispatch(self, intent):
            claims = await seeded_store.load_claims()
            seen.append(next(c.notified for c in claims if c.filename == intent.filename))
            return True

    sweeper = ExpirySweeper(seeded_store, CheckingDispatcher(), interval_seconds=1800)
    await sweeper.run_once(T0 + 2 * DAY)
    assert seen == [True]


@pytest.mark.asyncio
async def test_loop_sweeps_until_stopped(store, dispatcher):
    await store.save_claims([Claim(filename="a.txt", userId="userX", expiresAt=T0)])
    sweeper = ExpirySweeper(store, dispatcher, interval_seconds=0.01)

    sweeper.start()
    for _ in range(100):
        if dispatcher.sent:
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()

    assert dispatcher.sent == [ClaimExpired(holder="userX", filename="a.txt")]


@pytest.mark.asyncio
async def test_sweep_logs_counts_on_done_line(seeded_store, dispatcher, caplog):
    sweeper = ExpirySweeper(seeded_store, dispatcher, interval_seconds=1800)

    with caplog.at_level(logging.INFO, logger="core.expiry_sweeper"):
        await sweeper.run_once(T0 + 2 * DAY)

    done = [r.getMessage() for r in caplog.records if r.getMessage().startswith("sweep.done")]
    assert len(done) == 1
    assert done[0].endswith(" claims=2 changed=1")
