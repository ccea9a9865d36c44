"""File and directory name sanitization."""

from safe_input.errors import (
    EmptyInputError,
    EmptySanitizedValueError,
    LengthExceededError,
    ReservedNameError,
)
from safe_input.rules import (
    MAX_NAME_LENGTH,
    UNSAFE_NAME_RE,
    byte_length,
    collapse_underscores,
    is_reserved,
    split_extension,
    strip_control,
    truncate_bytes,
)
from safe_input.services.extension import sanitize_extension


def _clean_name(name: str) -> str:
    """Apply the name whitelist shared by files and directories."""
    result = UNSAFE_NAME_RE.sub("", name)
    result = strip_control(result)
    return collapse_underscores(result)


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a filename for use on Linux, macOS and Windows.

    The base name is stripped of everything except Unicode letters, numbers,
    underscores and hyphens, the extension is normalized with
    sanitize_extension, and the result is limited to 255 bytes by truncating
    the base so the extension always survives.

    Args:
        filename: The filename to sanitize (e.g. "my<file>.TXT")

    Returns:
        The sanitized filename (e.g. "myfile.txt")

    Raises:
        EmptyInputError: If the base name is empty
        EmptySanitizedValueError: If nothing usable is left
        ReservedNameError: If the base name is a reserved device name
        LengthExceededError: If the extension leaves no room for a base name
    """
    if filename == ".":
        raise EmptySanitizedValueError("sanitized filename is empty or invalid", filename)

    base, ext = split_extension(filename)

    base = base.strip()
    if not base:
        raise EmptyInputError("filename base is empty", filename)

    base = _clean_name(base)
    if not base:
        raise EmptySanitizedValueError("sanitized filename base is empty", filename)

    if is_reserved(base):
        raise ReservedNameError(f"filename is a reserved name: {base}", filename)

    clean_ext = sanitize_extension(ext) if ext else ""

    if byte_length(base + clean_ext) > MAX_NAME_LENGTH:
        budget = MAX_NAME_LENGTH - byte_length(clean_ext)
        base = truncate_bytes(base, budget).rstrip("_")
        if not base:
            raise LengthExceededError("extension leaves no room for a filename", filename)
        # Truncation can land on a reserved name ("CONSOLE" -> "CON")
        if is_reserved(base):
            raise ReservedNameError(f"filename is a reserved name: {base}", filename)

    result = base + clean_ext
    if result in ("", "."):
        raise EmptySanitizedValueError("sanitized filename is empty or invalid", filename)

    return result


def sanitize_dirname(dirname: str) -> str:
    """
    Sanitize a directory name.

    Leading dots are neutralized (".git" -> "dir_git") so the result is never
    a hidden directory. The same whitelist as filenames applies, and the
    result is limited to 255 bytes.

    Raises:
        EmptyInputError: If the name is empty after trimming
        EmptySanitizedValueError: If nothing usable is left
        ReservedNameError: If the name is a reserved device name
    """
    name = dirname.strip().strip("/\\")
    if not name:
        raise EmptyInputError("directory name is empty", dirname)

    if name.startswith("."):
        name = "dir_" + name.lstrip(".")

    name = _clean_name(name)
    if not name:
        raise EmptySanitizedValueError("sanitized directory name is empty", dirname)

    name = truncate_bytes(name, MAX_NAME_LENGTH).rstrip("_")

    if is_reserved(name):
        raise ReservedNameError(f"directory name is a reserved name: {name}", dirname)

    return name
