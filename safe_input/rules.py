"""Character classification and length rules shared by every sanitizer."""

import re
import unicodedata

# Maximum length of a single file or directory name, in UTF-8 bytes
MAX_NAME_LENGTH = 255

# Maximum length of a full path, in UTF-8 bytes
MAX_PATH_LENGTH = 4096

# Legacy device names, compared case-insensitively against the base name
RESERVED_NAMES: frozenset[str] = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

# Structurally dangerous characters in free text, replaced with a space
UNSAFE_TEXT_RE = re.compile(r"[<>{}|\\^~]")

WHITESPACE_RE = re.compile(r"\s+")

# Everything except Unicode letters, numbers, underscore and hyphen
UNSAFE_NAME_RE = re.compile(r"[^\w-]")

# Everything except Unicode letters, numbers and dot
UNSAFE_EXTENSION_RE = re.compile(r"[^\w.]|_")

UNDERSCORES_RE = re.compile(r"_+")

HOSTNAME_RE = re.compile(r"[A-Za-z0-9.-]+")

NAVIGATION_MARKERS = (".", "..")


def is_control(char: str) -> bool:
    """Return True for Unicode control characters (category Cc)."""
    return unicodedata.category(char) == "Cc"


def strip_control(text: str) -> str:
    """Remove every control character from text."""
    return "".join(c for c in text if not is_control(c))


def split_extension(name: str) -> tuple[str, str]:
    """
    Split a name into (base, extension) at its last dot.

    The extension keeps its leading dot. A name without a dot has an empty
    extension, and a name whose only dot is the first character is all
    extension (".hidden" -> ("", ".hidden")).
    """
    index = name.rfind(".")
    if index < 0 or "/" in name[index:]:
        return name, ""
    return name[:index], name[index:]


def collapse_underscores(name: str) -> str:
    """Collapse underscore runs and trim underscores from both ends."""
    return UNDERSCORES_RE.sub("_", name).strip("_")


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def truncate_bytes(text: str, limit: int) -> str:
    """Truncate text to at most limit UTF-8 bytes without splitting a character."""
    if limit <= 0:
        return ""
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")


def is_reserved(base: str) -> bool:
    return base.upper() in RESERVED_NAMES
