"""Sanitizers for untrusted text, hostnames, filenames, paths and URLs."""

__version__ = "0.1.0"

from safe_input.errors import (
    EmptyInputError,
    EmptyPathError,
    EmptySanitizedValueError,
    InvalidFormatError,
    LengthExceededError,
    MissingProtocolError,
    PathEscapeError,
    PathTooLongError,
    ReservedNameError,
    SanitizeError,
)
from safe_input.models import ComponentRole, PathComponent, PathReport
from safe_input.services.components import sanitize_dirname, sanitize_filename
from safe_input.services.extension import sanitize_extension
from safe_input.services.paths import has_file_extension, inspect_path, sanitize_path
from safe_input.services.text import clean_text, sanitize_hostname
from safe_input.services.urls import sanitize_url

__all__ = [
    "ComponentRole",
    "EmptyInputError",
    "EmptyPathError",
    "EmptySanitizedValueError",
    "InvalidFormatError",
    "LengthExceededError",
    "MissingProtocolError",
    "PathComponent",
    "PathEscapeError",
    "PathReport",
    "PathTooLongError",
    "ReservedNameError",
    "SanitizeError",
    "clean_text",
    "has_file_extension",
    "inspect_path",
    "sanitize_dirname",
    "sanitize_extension",
    "sanitize_filename",
    "sanitize_hostname",
    "sanitize_path",
    "sanitize_url",
]
