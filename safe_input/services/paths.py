"""Filesystem path sanitization."""

import logging
import posixpath

from safe_input.errors import EmptyPathError, PathTooLongError, SanitizeError
from safe_input.models import ComponentRole, PathComponent, PathReport
from safe_input.rules import (
    MAX_PATH_LENGTH,
    NAVIGATION_MARKERS,
    byte_length,
    split_extension,
)
from safe_input.services.components import sanitize_dirname, sanitize_filename

logger = logging.getLogger("safe_input")


def has_file_extension(name: str) -> bool:
    """Return True if name has a non-empty extension that is not the whole name."""
    _, ext = split_extension(name)
    return ext != "" and ext != name


def _classify(index: int, raw: str, is_last: bool) -> PathComponent:
    if raw in NAVIGATION_MARKERS:
        return PathComponent(index, raw, ComponentRole.NAVIGATION, sanitized=raw)

    role = ComponentRole.FILE if is_last and has_file_extension(raw) else ComponentRole.DIRECTORY
    sanitizer = sanitize_filename if role is ComponentRole.FILE else sanitize_dirname
    component = PathComponent(index, raw, role)
    try:
        component.sanitized = sanitizer(raw)
    except SanitizeError as e:
        component.error = str(e)
        logger.debug(f"Dropping path component {raw!r}: {e}")
    return component


def _is_file(name: str) -> bool:
    return name not in NAVIGATION_MARKERS and has_file_extension(name)


def inspect_path(path: str, allow_nav: bool = False) -> PathReport:
    """
    Sanitize a path and report how each component was handled.

    Components that fail sanitization are dropped from the result rather
    than failing the whole path; they are listed in PathReport.dropped.

    Args:
        path: The path to sanitize, with / or \\ separators
        allow_nav: Keep a leading ./ that cleaning would remove

    Returns:
        PathReport with the sanitized path and its components

    Raises:
        EmptyPathError: If nothing but the root or current directory is left
        PathTooLongError: If the sanitized path exceeds 4096 bytes
    """
    has_leading_dot = path.startswith("./")

    stripped = path.strip()
    if not stripped:
        raise EmptyPathError("path is empty", path)

    slashed = stripped.replace("\\", "/")
    is_abs = slashed.startswith("/")

    parts = slashed.split("/")
    last = len(parts) - 1
    components = [_classify(i, part, i == last) for i, part in enumerate(parts) if part]
    kept = [c.sanitized for c in components if not c.dropped]

    relative = posixpath.normpath("/".join(kept)) if kept else ""
    if relative == ".":
        relative = ""

    final = posixpath.normpath("/" + relative) if is_abs else relative

    if final in ("", ".", "/"):
        raise EmptyPathError("sanitized path is empty", path)

    # A leading ".." survives normpath, so only a leading "./" can need reattaching
    if allow_nav and has_leading_dot:
        if final != ".." and not final.startswith("../"):
            final = "./" + final

    if not _is_file(posixpath.basename(final)):
        final += "/"

    if byte_length(final) > MAX_PATH_LENGTH:
        raise PathTooLongError("sanitized path exceeds maximum length", path)

    return PathReport(path=final, components=components)


def sanitize_path(path: str, allow_nav: bool = False) -> str:
    """
    Sanitize a file or directory path.

    Every component is sanitized as a directory name, except a last component
    with an extension, which is sanitized as a filename. Navigation markers
    are kept and resolved. Directory results end with a separator:

        sanitize_path("path/to/dir")                 -> "path/to/dir/"
        sanitize_path("./a/../file.txt", True)       -> "./file.txt"
    """
    report = inspect_path(path, allow_nav)
    if report.dropped:
        logger.debug(f"Sanitized path {report.path!r} dropped {len(report.dropped)} component(s)")
    return report.path
