from __future__ import annotations


class StoreError(Exception):
    """Raised by the persistence layer for query failures and unreadable rows."""


class UsageError(Exception):
    status_code: int = 500
    reason: str = "Internal Server Error"

    def __init__(self, reason: str | None = None) -> None:
        if reason is not None:
            self.reason = reason
        super().__init__(self.reason)


class BadRequestError(UsageError):
    status_code = 400
    reason = "Bad Request"

    def __init__(self, reason: str | None = None, *, missing: bool = False) -> None:
        super().__init__(reason)
        self.missing = missing


class UnauthorizedError(UsageError):
    status_code = 401
    reason = "Unauthorized"


class InternalError(UsageError):
    status_code = 500
    reason = "Internal Server Error"
