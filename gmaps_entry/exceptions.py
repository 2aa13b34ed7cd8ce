"""Custom exceptions for the gmaps-entry library."""


class GMapsEntryError(Exception):
    """Base exception for all gmaps-entry errors."""
    pass


class MalformedDocumentError(GMapsEntryError):
    """Raised when a raw place document cannot be decoded or lacks the
    top-level structure needed to locate the place data array."""
    pass


class UnexpectedFaultError(GMapsEntryError):
    """Raised when extraction hits a structural fault the path guards did not
    anticipate.

    Usually means the offset map needs updating for a new response variant.

    Attributes:
        original: The exception raised during extraction.
        trace: Formatted traceback of the original exception.
    """

    def __init__(self, message: str, original: BaseException = None, trace: str = ""):
        super().__init__(message)
        self.original = original
        self.trace = trace


class EntryValidationError(GMapsEntryError):
    """Raised by Entry.ensure_valid() when a required field is empty."""

    def __init__(self, field: str):
        super().__init__(f"{field} is empty")
        self.field = field


class ConfigurationError(GMapsEntryError):
    """Raised when configuration is invalid or incomplete."""
    pass
