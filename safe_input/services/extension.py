"""File extension normalization."""

from safe_input.errors import EmptySanitizedValueError
from safe_input.rules import UNSAFE_EXTENSION_RE


def sanitize_extension(ext: str) -> str:
    """
    Normalize a file extension (e.g. "TXT" -> ".txt", ".文档" -> ".文档").

    The extension is lower-cased and stripped of everything except Unicode
    letters, numbers and dots. When several dots remain only the last
    segment survives, so "a.b.c" becomes ".c".

    Args:
        ext: The extension, with or without its leading dot

    Returns:
        The extension with exactly one leading dot

    Raises:
        EmptySanitizedValueError: If no extension text is left
    """
    result = UNSAFE_EXTENSION_RE.sub("", ext.strip().lower())

    if not result.startswith("."):
        result = "." + result

    parts = result.split(".")
    if len(parts) > 2:
        result = "." + parts[-1]

    if result in ("", "."):
        raise EmptySanitizedValueError("sanitized extension is empty or invalid", ext)

    return result
