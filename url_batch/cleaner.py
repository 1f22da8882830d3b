"""Permissive repair of pasted input."""

from __future__ import annotations

from typing import List

from .parser import URLBatchParser
from .validators import URLValidator


def clean_line(line: str) -> str:
    """Drop every space-separated token of ``line`` that is not a URL."""
    kept: List[str] = []
    for position, token in enumerate(line.split(" ")):
        if URLValidator.has_protocol_prefix(token):
            kept.append(token)
        elif position == 0 and URLValidator.is_valid_url(token):
            kept.append(token)
    return " ".join(kept)


def clean_invalid_strings(raw: str) -> str:
    """Strip stray tokens after URLs, line by line.

    Unlike the parser this never rejects a line; a line with nothing worth
    keeping becomes empty. Whitespace-only lines are left untouched.
    """
    cleaned = []
    for line in raw.split("\n"):
        cleaned.append(line if not line.strip() else clean_line(line))
    return "\n".join(cleaned)


def apply_corrections(raw: str) -> str:
    """Clean the input, then re-parse it and return the corrected rendering."""
    return URLBatchParser.parse(clean_invalid_strings(raw)).corrected_input


__all__ = ["clean_line", "clean_invalid_strings", "apply_corrections"]
