"""Exceptions raised by the buddy read core."""


class BuddyReadError(Exception):
    """Base exception for buddy read errors."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(BuddyReadError, ValueError):
    """Raised when the caller supplies missing or malformed input."""

    status_code = 400


class NotFoundError(BuddyReadError):
    """Raised when a requested resource does not exist."""

    status_code = 404


class UnauthorizedError(BuddyReadError):
    """Raised on bad credentials or insufficient rights."""

    status_code = 401
