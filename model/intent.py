# model/intent.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ClaimAnnounced:
    """Post to the guild's ok channel that a filename was just claimed."""

    guild_id: str
    channel_id: str
    filename: str
    holder: str
    duration_days: int


@dataclass(frozen=True)
class ClaimExpired:
    """DM the holder that their claim ran out."""

    holder: str
    filename: str


NotificationIntent = Union[ClaimAnnounced, ClaimExpired]
