"""Optimistic submission of prepared URL batches to the task API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .batching import BatchProcessor
from .clients import TaskAPIClient
from .config import Settings, get_settings
from .exceptions import TaskAPIError
from .logging import get_logger
from .models import BatchReport, CreatedTask, PendingTask, TaskRequest, TaskType
from .storage import PendingTaskStorage, random_suffix

logger = get_logger(__name__)


def generate_task_title(task_type: TaskType) -> str:
    """Default title such as ``"Indexer Task #k3j9x0a2b"``."""
    label = "Indexer" if task_type is TaskType.INDEXER else "Checker"
    return f"{label} Task #{random_suffix(9)}"


@dataclass
class SubmissionOutcome:
    """What happened to a submit action."""

    accepted: bool
    report: BatchReport
    title: str
    pending: Optional[PendingTask] = None

    @property
    def blocking_reasons(self) -> List[str]:
        return self.report.eligibility.blocking_reasons


@dataclass
class ReconciliationLog:
    """Results of background task creation, keyed by pending id."""

    created: Dict[str, CreatedTask] = field(default_factory=dict)
    failed: Dict[str, str] = field(default_factory=dict)


class SubmissionService:
    """Accept eligible batches immediately and create tasks in the background.

    A submit re-validates the raw text against a freshly fetched balance;
    nothing computed for display is trusted. Once the gate passes, a pending
    task is registered and returned straight away. The task API call then
    runs in the background: success or failure both remove the pending
    entry, and the result is recorded in ``log``.
    """

    def __init__(
        self,
        client: TaskAPIClient,
        storage: Optional[PendingTaskStorage] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.client = client
        self.storage = storage if storage is not None else PendingTaskStorage()
        self.settings = settings or get_settings()
        self.log = ReconciliationLog()
        self._in_flight = False
        self._background: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(
        self,
        raw: str,
        task_type: TaskType,
        title: Optional[str] = None,
    ) -> SubmissionOutcome:
        """Validate ``raw`` and, when eligible, start creating the task.

        Raises ``TaskAPIError`` only when the balance cannot be fetched.
        """
        title = (title or "").strip() or generate_task_title(task_type)
        already_in_flight = self._in_flight
        if not already_in_flight:
            self._in_flight = True

        try:
            balance = await self.client.get_credit_balance()
            report = BatchProcessor.prepare(
                raw,
                balance,
                submission_in_flight=already_in_flight,
                settings=self.settings,
            )

            if not report.can_submit:
                logger.info(
                    "Submission blocked",
                    title=title,
                    reasons=[code.value for code in report.eligibility.codes],
                )
                return SubmissionOutcome(accepted=False, report=report, title=title)

            pending = self.storage.add(title, task_type, report.unique_urls)
            request = TaskRequest(title=title, urls=report.unique_urls, type=task_type)
            self._schedule(self.reconcile(pending, request))

            logger.info(
                "Submission accepted",
                pending_id=pending.pending_id,
                task_type=task_type.value,
                **BatchProcessor.get_processing_stats(report),
            )
            return SubmissionOutcome(accepted=True, report=report, title=title, pending=pending)
        finally:
            if not already_in_flight:
                self._in_flight = False

    async def reconcile(self, pending: PendingTask, request: TaskRequest) -> Optional[CreatedTask]:
        """Create the task and retire the pending entry either way."""
        try:
            created = await self.client.create_task(request)
        except TaskAPIError as exc:
            logger.warning(
                "Task creation failed",
                pending_id=pending.pending_id,
                error=str(exc),
            )
            self.log.failed[pending.pending_id] = str(exc)
            return None
        finally:
            self.storage.remove(pending.pending_id)

        logger.info(
            "Task created",
            pending_id=pending.pending_id,
            task_id=created.task_id,
        )
        self.log.created[pending.pending_id] = created
        return created

    def _schedule(self, coroutine) -> None:
        task = asyncio.create_task(coroutine)
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def wait_for_reconciliation(self) -> None:
        """Wait until every background task creation has finished."""
        while self._background:
            results = await asyncio.gather(*list(self._background), return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error("Background task creation crashed", error=repr(result))


__all__ = [
    "SubmissionService",
    "SubmissionOutcome",
    "ReconciliationLog",
    "generate_task_title",
]
