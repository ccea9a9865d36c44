"""Helpers for code that writes client-supplied names to disk."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional

from safe_input.errors import EmptySanitizedValueError, LengthExceededError, PathEscapeError
from safe_input.rules import (
    MAX_NAME_LENGTH,
    UNSAFE_NAME_RE,
    byte_length,
    collapse_underscores,
    split_extension,
    truncate_bytes,
)
from safe_input.services.components import sanitize_filename
from safe_input.services.extension import sanitize_extension
from safe_input.services.paths import sanitize_path

logger = logging.getLogger("safe_input")

DEFAULT_MIME_TYPE = "application/octet-stream"


def storage_name(filename: str, suffix: Optional[str] = None) -> str:
    """
    Build the on-disk name for a client-supplied filename.

    Format: <base>_<suffix><ext>, or the sanitized filename when no suffix
    is given. The base is shortened so the name stays within 255 bytes.

    Args:
        filename: Filename as sent by the client
        suffix: Token to make the name unique (e.g. a random string)

    Returns:
        A sanitized filename
    """
    name = sanitize_filename(filename)
    if not suffix:
        return name

    clean_suffix = collapse_underscores(UNSAFE_NAME_RE.sub("", suffix))
    if not clean_suffix:
        raise EmptySanitizedValueError("sanitized suffix is empty", suffix)

    base, ext = split_extension(name)
    tail = f"_{clean_suffix}{ext}"
    budget = MAX_NAME_LENGTH - byte_length(tail)
    base = truncate_bytes(base, budget).rstrip("_")
    if not base:
        raise LengthExceededError("suffix leaves no room for a filename", filename)

    return base + tail


def resolve_target(base_dir: Path, user_path: str) -> Path:
    """
    Resolve a caller-supplied relative path under base_dir.

    Nothing is created on disk. Paths that would leave base_dir after
    sanitization are rejected.

    Raises:
        PathEscapeError: If the result is outside base_dir
    """
    relative = sanitize_path(user_path, allow_nav=False).lstrip("/")
    base = Path(base_dir).resolve()
    target = (base / relative).resolve()

    if target != base and base not in target.parents:
        raise PathEscapeError(f"path escapes {base}", user_path)

    logger.debug(f"Resolved {user_path!r} to {target}")
    return target


def mime_type_for(filename: str) -> str:
    """Return the MIME type for a filename's extension, or application/octet-stream."""
    _, ext = split_extension(filename)
    if not ext:
        return DEFAULT_MIME_TYPE

    try:
        ext = sanitize_extension(ext)
    except EmptySanitizedValueError:
        return DEFAULT_MIME_TYPE

    mime_type, _ = mimetypes.guess_type(f"file{ext}", strict=False)
    return mime_type or DEFAULT_MIME_TYPE
