"""Core data models for the URL batch service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class LineStatus(str, Enum):
    """Classification attached to a single line of pasted input."""

    VALID = "valid"
    CONCATENATED_VALID = "concatenated_valid"
    BARE_DOMAIN_INVALID = "bare_domain_invalid"
    TRAILING_TOKEN_INVALID = "trailing_token_invalid"
    PLAIN_INVALID = "plain_invalid"


class BlockingCode(str, Enum):
    """Batch-level reasons that prevent a submission."""

    NO_VALID_URLS = "no_valid_urls"
    OVER_CAPACITY = "over_capacity"
    DUPLICATES_PRESENT = "duplicates_present"
    CREDITS_UNAVAILABLE = "credits_unavailable"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    VALIDATION_ERRORS = "validation_errors"
    SUBMISSION_IN_FLIGHT = "submission_in_flight"


class TaskType(str, Enum):
    """Kinds of task the task API accepts."""

    INDEXER = "indexer"
    CHECKER = "checker"


@dataclass(frozen=True)
class CandidateLine:
    """One line of raw input and its zero-based position."""

    index: int
    text: str


@dataclass
class LineOutcome:
    """Validation result for a single candidate line."""

    line: CandidateLine
    status: LineStatus
    urls: List[str] = field(default_factory=list)
    corrected: str = ""

    @property
    def is_error(self) -> bool:
        return self.status is not LineStatus.VALID


@dataclass(frozen=True)
class URLRecord:
    """An extracted URL together with the line it came from."""

    url: str
    line_index: int


@dataclass
class ParseResult:
    """Aggregate outcome of parsing a block of pasted text."""

    urls: List[str] = field(default_factory=list)
    corrected_input: str = ""
    has_errors: bool = False
    invalid_lines: List[str] = field(default_factory=list)
    outcomes: List[LineOutcome] = field(default_factory=list)

    @property
    def records(self) -> List[URLRecord]:
        """Extracted URLs paired with their source line index."""
        return [
            URLRecord(url=url, line_index=outcome.line.index)
            for outcome in self.outcomes
            for url in outcome.urls
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "urls": list(self.urls),
            "correctedInput": self.corrected_input,
            "hasErrors": self.has_errors,
            "invalidLines": list(self.invalid_lines),
        }


@dataclass
class DedupResult:
    """Unique URLs in first-occurrence order and how many were dropped."""

    unique_urls: List[str] = field(default_factory=list)
    duplicate_count: int = 0


@dataclass(frozen=True)
class CreditBalance:
    """Read-only view of the account's credits as reported by the task API."""

    credits_available: int
    held_credits: int = 0
    used_credits: int = 0

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CreditBalance":
        return cls(
            credits_available=int(payload.get("creditsAvailable") or 0),
            held_credits=int(payload.get("heldCredits") or 0),
            used_credits=int(payload.get("usedCredits") or 0),
        )


@dataclass(frozen=True)
class CreditQuote:
    """Credits a batch needs against the credits that are available."""

    required: int
    available: int
    sufficient: bool


@dataclass(frozen=True)
class BlockingReason:
    code: BlockingCode
    message: str


@dataclass(frozen=True)
class EligibilityInput:
    """Everything the eligibility gate looks at.

    ``available_credits`` is ``None`` while the balance is unknown.
    """

    unique_count: int
    duplicate_count: int
    required_credits: int
    available_credits: Optional[int]
    has_unresolved_validation_error: bool
    submission_in_flight: bool = False


@dataclass
class EligibilityResult:
    """Submit/no-submit decision with every reason that applies."""

    reasons: List[BlockingReason] = field(default_factory=list)

    @property
    def can_submit(self) -> bool:
        return not self.reasons

    @property
    def blocking_reasons(self) -> List[str]:
        return [reason.message for reason in self.reasons]

    @property
    def codes(self) -> List[BlockingCode]:
        return [reason.code for reason in self.reasons]


@dataclass
class BatchReport:
    """Full pipeline output for one snapshot of the input text."""

    parse: ParseResult
    dedup: DedupResult
    quote: CreditQuote
    eligibility: EligibilityResult

    @property
    def unique_urls(self) -> List[str]:
        return self.dedup.unique_urls

    @property
    def can_submit(self) -> bool:
        return self.eligibility.can_submit


@dataclass
class TaskRequest:
    """Payload accepted by the task API."""

    title: str
    urls: List[str]
    type: TaskType

    def to_payload(self) -> Dict[str, Any]:
        return {"title": self.title, "urls": list(self.urls), "type": self.type.value}


@dataclass
class CreatedTask:
    """Task descriptor returned by the task API."""

    task_id: Optional[str]
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PendingTask:
    """Provisional task shown to the user until the task API answers."""

    pending_id: str
    title: str
    type: TaskType
    urls: List[str]
    created_at: datetime
    status: str = "creating"


__all__ = [
    "LineStatus",
    "BlockingCode",
    "TaskType",
    "CandidateLine",
    "LineOutcome",
    "URLRecord",
    "ParseResult",
    "DedupResult",
    "CreditBalance",
    "CreditQuote",
    "BlockingReason",
    "EligibilityInput",
    "EligibilityResult",
    "BatchReport",
    "TaskRequest",
    "CreatedTask",
    "PendingTask",
]
