# util/errors.py


class LedgerCorruptError(RuntimeError):
    """A stored ledger document could not be decoded. Treated as fatal."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"ledger record {key!r} is unreadable: {reason}")
        self.key = key
