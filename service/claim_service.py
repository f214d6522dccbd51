# service/claim_service.py
import logging
from datetime import timedelta
from typing import List, Optional
from core import claim_engine
from model.api import ActiveClaim, ClaimResponse
from model.claim import ServerConfig
from repository.ledger_store import LedgerStore
from service.notification_dispatcher import NotificationDispatcher
from util.constants import AUTOCOMPLETE_PAGE_SIZE
from util.functions import pluralize_day, utcnow

logger = logging.getLogger(__name__)


class ClaimService:
    """
    Runs claim engine decisions against the ledger.

    Each mutation is load -> decide -> save under the store's transaction;
    notifications go out only after that transaction has committed.
    """

    def __init__(
        self,
        store: LedgerStore,
        dispatcher: NotificationDispatcher,
        duration_days: int,
        autocomplete_limit: int = AUTOCOMPLETE_PAGE_SIZE,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._duration_days = duration_days
        self._autocomplete_limit = autocomplete_limit

    @property
    def duration(self) -> timedelta:
        return timedelta(days=self._duration_days)

    async def claim(
        self, filename: str, user_id: str, guild_id: Optional[str] = None
    ) -> ClaimResponse:
        now = utcnow()
        async with self._store.transaction():
            registry = await self._store.load_filenames()
            claims = await self._store.load_claims()
            config = await self._store.load_config(guild_id) if guild_id else None
            outcome = claim_engine.attempt_claim(
                registry,
                claims,
                filename,
                user_id,
                now,
                self.duration,
                config=config,
                guild_id=guild_id,
            )
            await self._store.save_claims(outcome.claims)

        logger.info(
            "claim.ok file=%s user=%s expires=%s",
            filename,
            user_id,
            outcome.claim.expiresAt.isoformat(),
        )
        if outcome.announcement is not None:
            await self._dispatcher.dispatch(outcome.announcement)

        days = self._duration_days
        return ClaimResponse(
            filename=filename,
            expiresAt=outcome.claim.expiresAt,
            message=f"You have claimed `{filename}` for {days} {pluralize_day(days)}.",
        )

    async def unclaim(self, filename: str, user_id: str) -> str:
        now = utcnow()
        async with self._store.transaction():
            claims = await self._store.load_claims()
            remaining = claim_engine.attempt_release(claims, filename, user_id, now)
            await self._store.save_claims(remaining)
        logger.info("claim.released file=%s user=%s", filename, user_id)
        return f"You have unclaimed `{filename}`."

    async def autocomplete_claim(self, partial: str | None) -> List[str]:
        registry = await self._store.load_filenames()
        claims = await self._store.load_claims()
        return claim_engine.list_available(
            registry, claims, utcnow(), partial, limit=self._autocomplete_limit
        )

    async def autocomplete_unclaim(self, partial: str | None, user_id: str) -> List[str]:
        claims = await self._store.load_claims()
        return claim_engine.list_mine(
            claims, user_id, utcnow(), partial, limit=self._autocomplete_limit
        )

    async def active_claims(self, user_id: str) -> List[ActiveClaim]:
        claims = await self._store.load_claims()
        return [
            ActiveClaim(filename=c.filename, expiresAt=c.expiresAt)
            for c in claim_engine.active_claims_of(claims, user_id, utcnow())
        ]

    async def set_ok_channel(
        self,
        guild_id: Optional[str],
        channel_id: str,
        channel_type: int,
        is_admin: bool,
    ) -> str:
        async with self._store.transaction():
            current = (
                await self._store.load_config(guild_id) if guild_id else ServerConfig()
            )
            updated = claim_engine.set_channel(
                current, guild_id, channel_id, channel_type, is_admin
            )
            await self._store.save_config(guild_id, updated)
        logger.info("config.ok_channel guild=%s channel=%s", guild_id, channel_id)
        return f"OK channel set to <#{channel_id}>."
