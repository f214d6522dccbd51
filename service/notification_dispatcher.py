# service/notification_dispatcher.py
import logging
from typing import Optional
import httpx
from config.settings import settings
from model.intent import ClaimAnnounced, ClaimExpired, NotificationIntent
from util.constants import ExternalURIs
from util.functions import pluralize_day

logger = logging.getLogger(__name__)


def announcement_text(intent: ClaimAnnounced) -> str:
    days = intent.duration_days
    return (
        f"<@{intent.holder}> has just claimed {intent.filename} "
        f"for {days} {pluralize_day(days)}."
    )


def expiry_text(intent: ClaimExpired) -> str:
    return f"Your claim on `{intent.filename}` has expired."


class NotificationDispatcher:
    """
    Best-effort delivery of notification intents over the Discord REST API.

    Nothing raised while delivering ever leaves dispatch(): a failed notice
    is logged and dropped. The ledger change that produced the intent has
    already been persisted by the time we get here.
    """

    def __init__(
        self,
        token: str = settings.DISCORD_TOKEN,
        base_url: str = settings.DISCORD_API_URL,
        timeout: float = settings.NOTIFY_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bot {token}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout, connect=5.0),
            transport=transport,
        )

    async def dispatch(self, intent: NotificationIntent) -> bool:
        kind = type(intent).__name__
        try:
            if isinstance(intent, ClaimAnnounced):
                await self._post_message(intent.channel_id, announcement_text(intent))
            elif isinstance(intent, ClaimExpired):
                dm_channel = await self._open_dm(intent.holder)
                await self._post_message(dm_channel, expiry_text(intent))
            else:
                logger.error("notify.unknown kind=%s", kind)
                return False
        except httpx.HTTPStatusError as e:
            logger.warning(
                "notify.failed kind=%s status=%d", kind, e.response.status_code
            )
            return False
        except Exception as e:
            logger.warning("notify.failed kind=%s err=%s", kind, type(e).__name__)
            return False
        logger.info("notify.sent kind=%s", kind)
        return True

    async def _open_dm(self, user_id: str) -> str:
        res = await self._client.post(
            ExternalURIs.CREATE_DM, json={"recipient_id": user_id}
        )
        res.raise_for_status()
        return str(res.json()["id"])

    async def _post_message(self, channel_id: str, content: str) -> None:
        res = await self._client.post(
            ExternalURIs.CHANNEL_MESSAGES.format(channel_id=channel_id),
            json={"content": content},
        )
        res.raise_for_status()

    async def aclose(self) -> None:
        await self._client.aclose()
