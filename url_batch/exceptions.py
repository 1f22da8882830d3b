"""Errors raised at the boundary with the task API."""

from __future__ import annotations

from typing import Optional


class TaskAPIError(Exception):
    """The task API could not be reached or answered with an HTTP error."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TaskSubmissionError(TaskAPIError):
    """The task API rejected a task with a structured error."""


__all__ = ["TaskAPIError", "TaskSubmissionError"]
