"""URL validation."""

import re

from safe_input.errors import EmptyInputError, InvalidFormatError, MissingProtocolError
from safe_input.rules import strip_control

# Optional scheme, ASCII host, optional Unicode path and query string
URL_RE = re.compile(r"(https?://)?[a-zA-Z0-9.-]+(/[\w./-]*(\?[\w./&=?-]*)?)?")
PROTOCOLS = ("http://", "https://")


def sanitize_url(url: str, require_protocol: bool = True) -> str:
    """
    Validate a URL string.

    Control characters are removed and surrounding whitespace trimmed; the
    rest must already be a well-formed URL, nothing else is rewritten.

    Args:
        url: The URL to validate
        require_protocol: Reject URLs without http:// or https://

    Returns:
        The cleaned URL

    Raises:
        EmptyInputError: If the URL is empty
        InvalidFormatError: If the URL is malformed
        MissingProtocolError: If a protocol is required but absent
    """
    result = strip_control(url).strip()
    if not result:
        raise EmptyInputError("sanitized url is empty", url)

    if not URL_RE.fullmatch(result):
        raise InvalidFormatError("invalid url format", url)

    if require_protocol and not result.lower().startswith(PROTOCOLS):
        raise MissingProtocolError("url must have protocol", url)

    return result
