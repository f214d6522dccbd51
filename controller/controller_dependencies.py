# controller/controller_dependencies.py
from functools import lru_cache
from fastapi_limiter.depends import RateLimiter
from config.settings import settings
from core.expiry_sweeper import ExpirySweeper
from repository.ledger_store import LedgerStore
from service.claim_service import ClaimService
from service.notification_dispatcher import NotificationDispatcher

# One limiter instance so tests can override it via app.dependency_overrides.
rate_limiter = RateLimiter(
    times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
)


@lru_cache(maxsize=1)
def get_ledger_store() -> LedgerStore:
    # Shared: the store's lock only serializes callers holding the same instance.
    return LedgerStore(seed_filenames=settings.SEED_FILENAMES)


@lru_cache(maxsize=1)
def get_notification_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher()


@lru_cache(maxsize=1)
def get_expiry_sweeper() -> ExpirySweeper:
    return ExpirySweeper(
        get_ledger_store(),
        get_notification_dispatcher(),
        interval_seconds=settings.SWEEP_INTERVAL_SECONDS,
    )


def get_claim_service() -> ClaimService:
    return ClaimService(
        get_ledger_store(),
        get_notification_dispatcher(),
        duration_days=settings.CLAIM_DURATION_DAYS,
        autocomplete_limit=settings.AUTOCOMPLETE_LIMIT,
    )
