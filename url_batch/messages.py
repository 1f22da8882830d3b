"""User-facing messages derived from parse results and balances."""

from __future__ import annotations

from typing import Optional

from .models import CreditBalance, ParseResult


def validation_message(result: ParseResult, limit: int = 3) -> Optional[str]:
    """Summarise the lines that need attention, or ``None`` when there are none."""
    if not result.has_errors:
        return None

    examples = ", ".join(result.invalid_lines[:limit])
    suffix = " and more..." if len(result.invalid_lines) > limit else ""
    return (
        f'Invalid URLs detected: "{examples}"{suffix}. '
        "All URLs must start with http:// or https:// protocol. "
        'Use "Clean URLs" to remove invalid parts.'
    )


def out_of_credits_message(balance: Optional[CreditBalance]) -> Optional[str]:
    """Explain an exhausted balance, or return ``None`` while credits remain."""
    if balance is None or balance.credits_available > 0:
        return None

    if balance.held_credits > 0:
        return (
            f"You have used all available credits ({balance.used_credits} used, "
            f"{balance.held_credits} on hold). Please wait for your tasks to complete "
            "and credits to be released, or upgrade your plan."
        )
    return (
        "You have reached your monthly credit limit. "
        "Please upgrade your plan or wait for the next period."
    )


__all__ = ["validation_message", "out_of_credits_message"]
