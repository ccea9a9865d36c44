"""Exceptions raised by the sanitizers."""

from typing import Optional


class SanitizeError(ValueError):
    """Base class for every sanitization failure."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class EmptyInputError(SanitizeError):
    """Input was empty or became empty after trimming."""


class EmptyPathError(EmptyInputError):
    """Path was empty, the current directory, or a bare root."""


class EmptySanitizedValueError(SanitizeError):
    """Nothing usable was left after stripping unsafe content."""


class ReservedNameError(SanitizeError):
    """Base name matches a platform-reserved device name."""


class InvalidFormatError(SanitizeError):
    """Structural validation of a hostname or URL failed."""


class MissingProtocolError(SanitizeError):
    """URL lacked a required http:// or https:// scheme."""


class LengthExceededError(SanitizeError):
    """Result exceeds its maximum length."""


class PathTooLongError(LengthExceededError):
    """Sanitized path exceeds the maximum path length."""


class PathEscapeError(SanitizeError):
    """Resolved path would leave its base directory."""
