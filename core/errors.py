# core/errors.py
from util.enums import ErrorMessage


class ClaimError(Exception):
    """
    Recoverable, user-facing outcome of a claim operation.

    The HTTP layer turns these into an {"ok": false, ...} envelope; nothing
    else is rolled back or retried.
    """

    kind: ErrorMessage

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.kind.value.message)
        self.detail = detail

    @property
    def code(self) -> str:
        return self.kind.value.code

    @property
    def message(self) -> str:
        return self.kind.value.message

    @property
    def http_status(self) -> int:
        return self.kind.value.http_status


class NotFound(ClaimError):
    kind = ErrorMessage.NOT_FOUND


class AlreadyClaimed(ClaimError):
    kind = ErrorMessage.ALREADY_CLAIMED


class NoActiveClaim(ClaimError):
    kind = ErrorMessage.NO_ACTIVE_CLAIM


class PermissionDenied(ClaimError):
    kind = ErrorMessage.PERMISSION_DENIED


class InvalidChannel(ClaimError):
    kind = ErrorMessage.INVALID_CHANNEL


class NoGuildContext(ClaimError):
    kind = ErrorMessage.NO_GUILD_CONTEXT
