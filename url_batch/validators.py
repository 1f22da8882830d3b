"""URL validation utilities."""

from __future__ import annotations

import re
from urllib.parse import urlsplit


class URLValidator:
    """Syntactic checks applied to pasted URLs.

    Only the scheme and the presence of a host are checked; nothing is
    resolved or fetched.
    """

    ALLOWED_SCHEMES = frozenset({"http", "https"})
    PROTOCOL_PREFIXES = ("http://", "https://")

    _LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    BARE_DOMAIN_PATTERN = re.compile(
        r"\s+(?:www\.)?"  # optional www. after whitespace
        + _LABEL
        + r"(?:\." + _LABEL + r")*"  # further labels
        + r"\.[a-zA-Z]{2,}"  # TLD
    )

    @classmethod
    def is_valid_url(cls, url: str) -> bool:
        """Check that ``url`` parses as an absolute http(s) URL with a host."""
        if not url or not isinstance(url, str):
            return False

        candidate = url.strip()
        if not candidate or any(char.isspace() for char in candidate):
            return False

        try:
            parsed = urlsplit(candidate)
            # Accessing the port validates it.
            parsed.port
        except ValueError:
            return False

        if parsed.scheme.lower() not in cls.ALLOWED_SCHEMES:
            return False
        return bool(parsed.hostname)

    @classmethod
    def has_protocol_prefix(cls, token: str) -> bool:
        """True when ``token`` literally starts with ``http://`` or ``https://``."""
        return token.startswith(cls.PROTOCOL_PREFIXES)

    @classmethod
    def has_bare_domain(cls, line: str) -> bool:
        """Detect a domain-looking token after whitespace with no protocol."""
        return bool(cls.BARE_DOMAIN_PATTERN.search(line))


__all__ = ["URLValidator"]
