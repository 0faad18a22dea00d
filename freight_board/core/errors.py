"""
Exceptions raised by the freight board core.

Store backends raise StoreError; the fan-out writer re-raises whatever its
store raised without wrapping it.
"""

from typing import Optional


class FreightBoardError(Exception):
    """Base error for this package."""


class StoreError(FreightBoardError):
    """Raised when the record store rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptySubmissionError(FreightBoardError, ValueError):
    """Raised when a submission carries no destinations."""


class FreightNotFoundError(FreightBoardError, LookupError):
    """Raised when a freight id does not exist in the store."""


class InvalidStatusTransition(FreightBoardError):
    """Raised when a status change is not allowed by the freight lifecycle."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Cannot move freight from '{current}' to '{requested}'")
        self.current = current
        self.requested = requested
