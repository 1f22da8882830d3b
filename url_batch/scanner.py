"""Split raw pasted text into candidate lines."""

from __future__ import annotations

from typing import List

from .models import CandidateLine


def scan_lines(raw: str) -> List[CandidateLine]:
    """Return every line of ``raw`` in order, blank lines included."""
    return [CandidateLine(index=index, text=text) for index, text in enumerate(raw.split("\n"))]


__all__ = ["scan_lines"]
