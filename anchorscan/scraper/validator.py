"""Validation of user-supplied URLs."""

from __future__ import annotations

from urllib.parse import urlsplit

_ALLOWED_SCHEMES = ("http", "https")


def is_valid_url(text: str) -> bool:
    """Return ``True`` if *text* is an absolute ``http``/``https`` URL.

    The scheme comparison is case-insensitive and surrounding whitespace is
    ignored.  Anything that fails to parse (missing host, whitespace inside
    the host, non-numeric port, ...) yields ``False``; this function never
    raises.
    """
    if not text or not text.strip():
        return False

    try:
        parts = urlsplit(text.strip())
        if parts.scheme.lower() not in _ALLOWED_SCHEMES:
            return False
        host = parts.hostname
        # Accessing .port validates it and raises ValueError when out of range.
        parts.port
    except ValueError:
        return False

    if not host:
        return False
    return not any(ch.isspace() for ch in host)
