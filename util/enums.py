# util/enums.py
from enum import Enum, IntEnum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ChannelType(IntEnum):
    # Subset of Discord channel types; only GUILD_TEXT may carry announcements.
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    GUILD_FORUM = 15


class ErrorInfo(NamedTuple):
    code: str
    message: str
    http_status: int


class ErrorMessage(Enum):
    NOT_FOUND = ErrorInfo(
        "not_found", "Filename not found.", status.HTTP_404_NOT_FOUND
    )
    ALREADY_CLAIMED = ErrorInfo(
        "already_claimed",
        "This filename is already claimed.",
        status.HTTP_409_CONFLICT,
    )
    NO_ACTIVE_CLAIM = ErrorInfo(
        "no_active_claim",
        "You do not have an active claim on this filename.",
        status.HTTP_404_NOT_FOUND,
    )
    PERMISSION_DENIED = ErrorInfo(
        "permission_denied",
        "Only server admins can set the ok channel.",
        status.HTTP_403_FORBIDDEN,
    )
    INVALID_CHANNEL = ErrorInfo(
        "invalid_channel",
        "Please select a text channel.",
        status.HTTP_400_BAD_REQUEST,
    )
    NO_GUILD_CONTEXT = ErrorInfo(
        "no_guild_context",
        "This command can only be used in a server.",
        status.HTTP_400_BAD_REQUEST,
    )
    RATE_LIMITED = ErrorInfo(
        "rate_limited",
        "Too many requests. Try again later.",
        status.HTTP_429_TOO_MANY_REQUESTS,
    )
