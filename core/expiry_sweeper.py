# core/expiry_sweeper.py
import asyncio
import logging
from datetime import datetime
from typing import List, Optional
from core.claim_engine import collect_expired
from model.intent import ClaimExpired
from repository.ledger_store import LedgerStore
from service.notification_dispatcher import NotificationDispatcher
from util.functions import utcnow
from util.timing import timed

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """
    Periodically finds claims that expired since the last pass and DMs the
    holder once.

    Each record is flagged `notified` before its notice goes out, so a crash
    or a failed delivery loses that notice instead of repeating it.
    """

    def __init__(
        self,
        store: LedgerStore,
        dispatcher: NotificationDispatcher,
        interval_seconds: float,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._interval = interval_seconds
        self._stopped = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    async def run_once(self, now: Optional[datetime] = None) -> List[ClaimExpired]:
        now = now or utcnow()
        with timed(logger, "sweep") as fields:
            async with self._store.transaction():
                claims = await self._store.load_claims()
                outcome = collect_expired(claims, now)
                if outcome.changed:
                    await self._store.save_claims(outcome.claims)
            fields["claims"] = len(claims)
            fields["changed"] = len(outcome.intents)
            # Delivery only starts once the notified flags are persisted.
            for intent in outcome.intents:
                await self._dispatcher.dispatch(intent)
        return outcome.intents

    async def run_forever(self) -> None:
        logger.info("sweep.loop.start interval=%ss", self._interval)
        while not self._stopped.is_set():
            try:
                await self.run_once()
            except Exception:
                # Storage trouble ends this pass only; the next tick retries.
                logger.exception("sweep.error")
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                pass
        logger.info("sweep.loop.stop")

    def start(self) -> asyncio.Task:
        if self._task is None or self._task.done():
            self._stopped.clear()
            self._task = asyncio.create_task(self.run_forever(), name="expiry-sweeper")
        return self._task

    async def stop(self) -> None:
        self._stopped.set()
        if self._task is not None:
            await self._task
            self._task = None
