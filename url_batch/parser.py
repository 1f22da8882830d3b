"""Line-by-line parsing of pasted URL batches."""

from __future__ import annotations

from typing import List

from .logging import get_logger
from .models import CandidateLine, LineOutcome, LineStatus, ParseResult
from .scanner import scan_lines
from .splitter import split_concatenated_urls
from .validators import URLValidator

logger = get_logger(__name__)


class URLBatchParser:
    """Turn freeform pasted text into URLs, a corrected rendering and errors.

    Every call recomputes the whole result from the text it is given; the
    parser keeps no state between calls.
    """

    @classmethod
    def classify_line(cls, line: CandidateLine) -> LineOutcome:
        """Classify a single non-blank line.

        The checks run in a fixed order and the first one that matches wins:
        stray tokens after a space, bare domains, then the concatenation
        probe with a whole-line fallback.
        """
        trimmed = line.text.strip()

        tokens = trimmed.split(" ")
        for token in tokens[1:]:
            if token and not URLValidator.has_protocol_prefix(token):
                return LineOutcome(line, LineStatus.TRAILING_TOKEN_INVALID, corrected=trimmed)

        if URLValidator.has_bare_domain(trimmed):
            return LineOutcome(line, LineStatus.BARE_DOMAIN_INVALID, corrected=trimmed)

        urls = split_concatenated_urls(trimmed)
        if len(urls) > 1:
            return LineOutcome(
                line,
                LineStatus.CONCATENATED_VALID,
                urls=urls,
                corrected="\n".join(urls),
            )
        if len(urls) == 1:
            return LineOutcome(line, LineStatus.VALID, urls=urls, corrected=urls[0])

        if URLValidator.is_valid_url(trimmed):
            return LineOutcome(line, LineStatus.VALID, urls=[trimmed], corrected=trimmed)

        return LineOutcome(line, LineStatus.PLAIN_INVALID, corrected=trimmed)

    @classmethod
    def parse(cls, raw: str) -> ParseResult:
        """Parse a block of pasted text."""
        result = ParseResult()
        corrected_lines: List[str] = []

        for line in scan_lines(raw):
            if not line.text.strip():
                corrected_lines.append("")
                continue

            outcome = cls.classify_line(line)
            result.outcomes.append(outcome)
            result.urls.extend(outcome.urls)
            corrected_lines.append(outcome.corrected)

            if outcome.is_error:
                result.has_errors = True
                result.invalid_lines.append(line.text.strip())

        result.corrected_input = "\n".join(corrected_lines)

        logger.debug(
            "Parsed URL batch",
            lines=len(corrected_lines),
            urls=len(result.urls),
            error_lines=len(result.invalid_lines),
        )
        return result


__all__ = ["URLBatchParser"]
