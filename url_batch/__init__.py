"""URL batch normalisation and submission package."""

from __future__ import annotations

from .batching import BatchProcessor
from .cleaner import apply_corrections, clean_invalid_strings
from .clients import TaskAPIClient
from .config import Settings, get_settings
from .credits import CreditEstimator
from .deduplication import URLDeduplicator
from .eligibility import EligibilityGate
from .exceptions import TaskAPIError, TaskSubmissionError
from .factory import create_app
from .logging import configure_logging, get_logger
from .messages import out_of_credits_message, validation_message
from .models import (
    BatchReport,
    BlockingCode,
    BlockingReason,
    CandidateLine,
    CreatedTask,
    CreditBalance,
    CreditQuote,
    DedupResult,
    EligibilityInput,
    EligibilityResult,
    LineOutcome,
    LineStatus,
    ParseResult,
    PendingTask,
    TaskRequest,
    TaskType,
    URLRecord,
)
from .parser import URLBatchParser
from .scanner import scan_lines
from .splitter import split_concatenated_urls
from .storage import PendingTaskStorage
from .submission import SubmissionOutcome, SubmissionService, generate_task_title
from .validators import URLValidator

__all__ = [
    "BatchProcessor",
    "apply_corrections",
    "clean_invalid_strings",
    "TaskAPIClient",
    "Settings",
    "get_settings",
    "CreditEstimator",
    "URLDeduplicator",
    "EligibilityGate",
    "TaskAPIError",
    "TaskSubmissionError",
    "create_app",
    "configure_logging",
    "get_logger",
    "out_of_credits_message",
    "validation_message",
    "BatchReport",
    "BlockingCode",
    "BlockingReason",
    "CandidateLine",
    "CreatedTask",
    "CreditBalance",
    "CreditQuote",
    "DedupResult",
    "EligibilityInput",
    "EligibilityResult",
    "LineOutcome",
    "LineStatus",
    "ParseResult",
    "PendingTask",
    "TaskRequest",
    "TaskType",
    "URLRecord",
    "URLBatchParser",
    "scan_lines",
    "split_concatenated_urls",
    "PendingTaskStorage",
    "SubmissionOutcome",
    "SubmissionService",
    "generate_task_title",
    "URLValidator",
]
