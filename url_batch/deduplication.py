"""URL deduplication helpers."""

from __future__ import annotations

from typing import Iterable, Set, Tuple

from .models import DedupResult
from .parser import URLBatchParser


class URLDeduplicator:
    """Case-insensitive, order-preserving URL deduplication."""

    @classmethod
    def comparison_key(cls, url: str) -> str:
        """Key two URLs must share to count as duplicates.

        Only case and surrounding whitespace are ignored; trailing slashes,
        query strings and fragments still distinguish URLs.
        """
        return url.lower().strip()

    @classmethod
    def deduplicate(cls, urls: Iterable[str]) -> DedupResult:
        """Keep the first occurrence of every URL."""
        seen: Set[str] = set()
        result = DedupResult()
        total = 0

        for url in urls:
            total += 1
            key = cls.comparison_key(url)
            if key in seen:
                continue
            seen.add(key)
            result.unique_urls.append(url)

        result.duplicate_count = total - len(result.unique_urls)
        return result

    @classmethod
    def remove_duplicates(cls, raw: str) -> Tuple[str, int]:
        """Rewrite pasted text as its unique valid URLs, one per line.

        Returns the new text and how many duplicates were removed.
        """
        parsed = URLBatchParser.parse(raw)
        result = cls.deduplicate(parsed.urls)
        return "\n".join(result.unique_urls), result.duplicate_count


__all__ = ["URLDeduplicator"]
