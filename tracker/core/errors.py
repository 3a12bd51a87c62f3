"""
Exception types for the todo tracker.
"""


class TrackerError(Exception):
    """
    Base class for recoverable action errors.

    Fields:
        message: Human-readable response line
        code: Short error code reported in the response details
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ValidationError(TrackerError):
    """Raised when a required field (text, items, id) is missing or empty."""
    pass


class NotFoundError(TrackerError):
    """Raised when a referenced item id does not exist in the current list."""
    pass


class SessionLogError(Exception):
    """Raised when session log operations fail."""
    pass
