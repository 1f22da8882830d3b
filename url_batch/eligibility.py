"""Submission gating for URL batches."""

from __future__ import annotations

from typing import List

from .models import BlockingCode, BlockingReason, EligibilityInput, EligibilityResult


class EligibilityGate:
    """Decide whether a batch may be submitted.

    The gate is a pure function of its input. It reports every reason that
    applies rather than stopping at the first, and an empty list of reasons
    is the signal to go ahead.
    """

    def __init__(self, max_urls_per_task: int = 10000) -> None:
        self.max_urls_per_task = max_urls_per_task

    def evaluate(self, state: EligibilityInput) -> EligibilityResult:
        reasons: List[BlockingReason] = []

        if state.unique_count == 0:
            reasons.append(BlockingReason(BlockingCode.NO_VALID_URLS, "No valid URL present."))

        if state.unique_count > self.max_urls_per_task:
            reasons.append(
                BlockingReason(
                    BlockingCode.OVER_CAPACITY,
                    f"Maximum {self.max_urls_per_task:,} URLs per task.",
                )
            )

        if state.duplicate_count > 0:
            reasons.append(
                BlockingReason(
                    BlockingCode.DUPLICATES_PRESENT,
                    "Duplicates must be removed before submission.",
                )
            )

        if state.available_credits is None:
            reasons.append(
                BlockingReason(
                    BlockingCode.CREDITS_UNAVAILABLE,
                    "Credit balance is not available yet.",
                )
            )
        elif state.required_credits > state.available_credits:
            reasons.append(
                BlockingReason(
                    BlockingCode.INSUFFICIENT_CREDITS,
                    f"Insufficient credits: need {state.required_credits}, "
                    f"have {state.available_credits}.",
                )
            )

        if state.has_unresolved_validation_error:
            reasons.append(
                BlockingReason(
                    BlockingCode.VALIDATION_ERRORS,
                    "Fix URL validation errors before submitting.",
                )
            )

        if state.submission_in_flight:
            reasons.append(
                BlockingReason(
                    BlockingCode.SUBMISSION_IN_FLIGHT,
                    "A submission is already in progress.",
                )
            )

        return EligibilityResult(reasons=reasons)


__all__ = ["EligibilityGate"]
