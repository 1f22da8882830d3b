"""In-memory storage for provisional (pending) tasks."""

from __future__ import annotations

import random
import string
import time
from datetime import datetime, timezone
from typing import Dict, List

from .models import PendingTask, TaskType

_ID_ALPHABET = string.ascii_lowercase + string.digits


def random_suffix(length: int = 9) -> str:
    """Return ``length`` random lowercase alphanumerics."""
    return "".join(random.choice(_ID_ALPHABET) for _ in range(length))


class PendingTaskStorage:
    """Pending tasks shown while the task API has not answered yet."""

    def __init__(self) -> None:
        self._tasks: Dict[str, PendingTask] = {}

    def add(self, title: str, task_type: TaskType, urls: List[str]) -> PendingTask:
        """Register a provisional task and return it."""
        pending_id = f"pending-{int(time.time() * 1000)}-{random_suffix()}"
        task = PendingTask(
            pending_id=pending_id,
            title=title,
            type=task_type,
            urls=list(urls),
            created_at=datetime.now(timezone.utc),
        )
        self._tasks[pending_id] = task
        return task

    def remove(self, pending_id: str) -> None:
        """Remove a pending task if it exists."""
        self._tasks.pop(pending_id, None)

    def list(self) -> List[PendingTask]:
        """Return pending tasks, newest first."""
        return list(reversed(self._tasks.values()))

    def clear(self) -> None:
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, pending_id: str) -> bool:
        return pending_id in self._tasks


__all__ = ["PendingTaskStorage", "random_suffix"]
