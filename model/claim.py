# model/claim.py
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


class Claim(BaseModel):
    """
    One time-bounded reservation of a filename.

    Stored as {filename, userId, expiresAt, notified}; expiresAt is an
    ISO-8601 timestamp. Whether the claim is active is never stored, it is
    derived from expiresAt and the evaluation time (see core.claim_engine).
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    userId: str
    expiresAt: datetime
    notified: bool = False

    @field_validator("expiresAt")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # Naive timestamps are assumed to already be UTC.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class ServerConfig(BaseModel):
    okChannelId: Optional[str] = None
