"""Credit estimation for URL batches."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import CreditBalance, CreditQuote


class CreditEstimator:
    """Flat per-URL pricing, independent of task type."""

    def __init__(self, credits_per_url: int = 1) -> None:
        self.credits_per_url = credits_per_url

    def required_credits(self, unique_urls: Sequence[str]) -> int:
        return len(unique_urls) * self.credits_per_url

    def quote(self, unique_urls: Sequence[str], balance: Optional[CreditBalance]) -> CreditQuote:
        """Price ``unique_urls`` against ``balance``.

        An unknown balance is quoted as zero available and never sufficient.
        """
        required = self.required_credits(unique_urls)
        available = balance.credits_available if balance is not None else 0
        sufficient = balance is not None and required <= available
        return CreditQuote(required=required, available=available, sufficient=sufficient)


__all__ = ["CreditEstimator"]
