"""Free text and hostname sanitization."""

from safe_input.errors import EmptySanitizedValueError, InvalidFormatError
from safe_input.rules import HOSTNAME_RE, UNSAFE_TEXT_RE, WHITESPACE_RE, strip_control


def clean_text(text: str) -> str:
    """
    Sanitize free text.

    Removes control characters, replaces < > { } | \\ ^ ~ with spaces,
    trims the result and collapses whitespace runs into a single space.

    Args:
        text: Untrusted text

    Returns:
        The cleaned text

    Raises:
        EmptySanitizedValueError: If nothing is left after cleaning
    """
    result = strip_control(text)
    result = UNSAFE_TEXT_RE.sub(" ", result)
    result = WHITESPACE_RE.sub(" ", result.strip())

    if not result:
        raise EmptySanitizedValueError("sanitized string is empty", text)

    return result


def sanitize_hostname(text: str) -> str:
    """
    Sanitize a hostname or IP address.

    The text is cleaned with clean_text and must then consist only of ASCII
    letters, digits, dots and hyphens. Internationalized names are rejected.
    """
    result = clean_text(text)

    if not HOSTNAME_RE.fullmatch(result):
        raise InvalidFormatError("invalid hostname or IP format", text)

    return result
