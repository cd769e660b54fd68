"""
Error types shared by the services and the HTTP layer.

Services raise these; endpoints translate them into ``HTTPException``
responses.  None of the messages carried here for upstream or
formatting failures are returned to callers, they are only logged.
"""

from typing import Optional


class UpstreamError(Exception):
    """The event provider failed or returned an unusable payload."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MalformedInputError(ValueError):
    """A date or time string does not match the expected pattern."""

    def __init__(self, value: object, expected: str) -> None:
        super().__init__(f"Expected {expected}, got {value!r}")
        self.value = value
        self.expected = expected


class AccountError(Exception):
    """Registration or sign-in failure with a user-safe message."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
