# util/functions.py
from datetime import datetime, timezone
from itertools import islice
from typing import Iterable, List


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def pluralize_day(days: int) -> str:
    return "day" if days == 1 else "days"


def matches_partial(name: str, partial: str | None) -> bool:
    """Case-insensitive substring match used by every autocomplete list."""
    return (partial or "").lower() in name.lower()


def first_n(items: Iterable[str], limit: int) -> List[str]:
    return list(islice(items, limit))
