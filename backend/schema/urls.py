"""URL validation shared by the batch driver and the title synthesiser."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from backend.schema.errors import InvalidUrlError

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes that must carry a host to be well formed.
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

# Schemes whose paths treat a backslash as a separator.
SPECIAL_SCHEMES = _HOST_SCHEMES | {"file"}

_FORBIDDEN_HOST_CHARS = set(' \t\r\n<>^|\\"{}`')


def is_valid_url(value: str) -> bool:
    """Return ``True`` if *value* parses as an absolute URL.

    Relative references (``example.com/page``), hostless web URLs
    (``https://``) and hosts containing whitespace or forbidden characters
    are rejected.  No normalisation is applied to the accepted value.
    """
    if not value:
        return False
    try:
        parts = urlsplit(value)
        # Accessing .port validates it and raises ValueError if malformed.
        parts.port
    except ValueError:
        return False

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False

    if parts.scheme.lower() in _HOST_SCHEMES:
        host = parts.hostname
        if not host:
            return False
        if _FORBIDDEN_HOST_CHARS.intersection(host):
            return False
    return True


def require_valid_url(value: str) -> str:
    """Return *value* unchanged, or raise if it is not an absolute URL.

    Raises:
        InvalidUrlError: If :func:`is_valid_url` rejects *value*.
    """
    if not is_valid_url(value):
        raise InvalidUrlError(value)
    return value
