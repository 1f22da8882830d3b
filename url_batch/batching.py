"""End-to-end preparation of a pasted URL batch."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .config import Settings, get_settings
from .credits import CreditEstimator
from .deduplication import URLDeduplicator
from .eligibility import EligibilityGate
from .logging import get_logger
from .models import BatchReport, CreditBalance, EligibilityInput
from .parser import URLBatchParser

logger = get_logger(__name__)


class BatchProcessor:
    """Run parse, dedup, pricing and gating over one snapshot of input text."""

    @classmethod
    def prepare(
        cls,
        raw: str,
        balance: Optional[CreditBalance],
        submission_in_flight: bool = False,
        settings: Optional[Settings] = None,
    ) -> BatchReport:
        """Build a fresh report for ``raw``.

        Nothing is cached between calls, so the same call made at submit
        time is the authoritative check regardless of what was displayed.
        """
        settings = settings or get_settings()

        parsed = URLBatchParser.parse(raw)
        dedup = URLDeduplicator.deduplicate(parsed.urls)
        quote = CreditEstimator(settings.credits_per_url).quote(dedup.unique_urls, balance)

        eligibility = EligibilityGate(settings.max_urls_per_task).evaluate(
            EligibilityInput(
                unique_count=len(dedup.unique_urls),
                duplicate_count=dedup.duplicate_count,
                required_credits=quote.required,
                available_credits=balance.credits_available if balance is not None else None,
                has_unresolved_validation_error=parsed.has_errors,
                submission_in_flight=submission_in_flight,
            )
        )

        return BatchReport(parse=parsed, dedup=dedup, quote=quote, eligibility=eligibility)

    @classmethod
    def get_processing_stats(cls, report: BatchReport) -> Dict[str, Any]:
        """Summarise a report for logs and API responses."""
        return {
            "total_urls": len(report.parse.urls),
            "unique_urls": len(report.dedup.unique_urls),
            "duplicate_urls": report.dedup.duplicate_count,
            "invalid_lines": len(report.parse.invalid_lines),
            "required_credits": report.quote.required,
            "available_credits": report.quote.available,
            "can_submit": report.can_submit,
        }


__all__ = ["BatchProcessor"]
