# core/claim_engine.py
"""
Decision logic for the claim lifecycle.

Every function here is pure: it takes the current ledger state and the
evaluation time, and returns the next state (or raises a ClaimError). The
caller owns loading and persisting; see service.claim_service and
core.expiry_sweeper.

A claim record moves through

    Active               expiresAt > now
    ExpiredPendingNotice now >= expiresAt, notified is False
    ExpiredNotified      notified is True

Release deletes an Active record. A new claim on the same filename deletes
any expired records for it. Nothing ever goes back to Active.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional, Sequence
from core.errors import (
    AlreadyClaimed,
    InvalidChannel,
    NoActiveClaim,
    NoGuildContext,
    NotFound,
    PermissionDenied,
)
from model.claim import Claim, ServerConfig
from model.intent import ClaimAnnounced, ClaimExpired
from util.constants import AUTOCOMPLETE_PAGE_SIZE
from util.enums import ChannelType
from util.functions import first_n, matches_partial

TEXT_CHANNEL_TYPES = frozenset({ChannelType.GUILD_TEXT})


@dataclass(frozen=True)
class ClaimOutcome:
    claims: List[Claim]
    claim: Claim
    announcement: Optional[ClaimAnnounced] = None


@dataclass(frozen=True)
class SweepOutcome:
    claims: List[Claim]
    intents: List[ClaimExpired] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.intents)


def is_active(claim: Claim, now: datetime) -> bool:
    return claim.expiresAt > now


def is_pending_notice(claim: Claim, now: datetime) -> bool:
    return not claim.notified and now > claim.expiresAt


def attempt_claim(
    registry: Sequence[str],
    claims: Sequence[Claim],
    filename: str,
    holder: str,
    now: datetime,
    duration: timedelta,
    config: Optional[ServerConfig] = None,
    guild_id: Optional[str] = None,
) -> ClaimOutcome:
    """
    Claim `filename` for `holder` until now + duration.

    Re-claiming your own active claim is rejected, not extended. When the
    guild has an ok channel configured, the outcome carries a ClaimAnnounced
    intent for it.
    """
    if filename not in registry:
        raise NotFound(filename)
    if any(c.filename == filename and is_active(c, now) for c in claims):
        raise AlreadyClaimed(filename)

    claim = Claim(
        filename=filename, userId=holder, expiresAt=now + duration, notified=False
    )
    # No active record exists for filename here, so this drops only expired ones.
    kept = [c for c in claims if c.filename != filename]
    kept.append(claim)

    announcement = None
    if guild_id and config is not None and config.okChannelId:
        announcement = ClaimAnnounced(
            guild_id=guild_id,
            channel_id=config.okChannelId,
            filename=filename,
            holder=holder,
            duration_days=duration.days,
        )
    return ClaimOutcome(claims=kept, claim=claim, announcement=announcement)


def attempt_release(
    claims: Sequence[Claim], filename: str, holder: str, now: datetime
) -> List[Claim]:
    for i, c in enumerate(claims):
        if c.filename == filename and c.userId == holder and is_active(c, now):
            return [*claims[:i], *claims[i + 1 :]]
    raise NoActiveClaim(filename)


def list_available(
    registry: Sequence[str],
    claims: Sequence[Claim],
    now: datetime,
    prefix: str | None = "",
    limit: int = AUTOCOMPLETE_PAGE_SIZE,
) -> List[str]:
    claimed = {c.filename for c in claims if is_active(c, now)}
    return first_n(
        (f for f in registry if f not in claimed and matches_partial(f, prefix)),
        limit,
    )


def active_claims_of(
    claims: Sequence[Claim], holder: str, now: datetime
) -> List[Claim]:
    return [c for c in claims if c.userId == holder and is_active(c, now)]


def list_mine(
    claims: Sequence[Claim],
    holder: str,
    now: datetime,
    prefix: str | None = "",
    limit: int = AUTOCOMPLETE_PAGE_SIZE,
) -> List[str]:
    return first_n(
        (
            c.filename
            for c in active_claims_of(claims, holder, now)
            if matches_partial(c.filename, prefix)
        ),
        limit,
    )


def set_channel(
    current: ServerConfig,
    guild_id: Optional[str],
    channel_id: str,
    channel_type: int,
    is_admin: bool,
) -> ServerConfig:
    if not is_admin:
        raise PermissionDenied()
    if channel_type not in TEXT_CHANNEL_TYPES:
        raise InvalidChannel(str(channel_type))
    if not guild_id:
        raise NoGuildContext()
    return current.model_copy(update={"okChannelId": channel_id})


def collect_expired(claims: Sequence[Claim], now: datetime) -> SweepOutcome:
    """
    Mark every newly expired record notified and emit one ClaimExpired each.

    The flag flips whether or not the notice is later delivered; a failed
    delivery is not retried on the next sweep.
    """
    out: List[Claim] = []
    intents: List[ClaimExpired] = []
    for c in claims:
        if is_pending_notice(c, now):
            out.append(c.model_copy(update={"notified": True}))
            intents.append(ClaimExpired(holder=c.userId, filename=c.filename))
        else:
            out.append(c)
    return SweepOutcome(claims=out, intents=intents)
