"""Recover URLs that were pasted back to back without a separator."""

from __future__ import annotations

import re
from typing import List

from .validators import URLValidator

# "http" only starts a new URL where it opens a scheme, so
# "https://a.com/http-guide" stays one URL instead of being cut at "/http".
URL_START_PATTERN = re.compile(r"https?://")


def split_concatenated_urls(text: str) -> List[str]:
    """Cut ``text`` at every URL start and keep the segments that validate.

    ``"https://a.com/xhttps://b.com/y"`` yields ``["https://a.com/x",
    "https://b.com/y"]``. Segments that do not parse are dropped without
    being reported; the caller flags the line as a whole.
    """
    starts = [match.start() for match in URL_START_PATTERN.finditer(text)]
    urls: List[str] = []

    for position, start in enumerate(starts):
        end = starts[position + 1] if position + 1 < len(starts) else len(text)
        segment = text[start:end].strip()
        if URLValidator.is_valid_url(segment):
            urls.append(segment)

    return urls


__all__ = ["split_concatenated_urls", "URL_START_PATTERN"]
