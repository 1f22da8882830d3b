"""Endpoints for submitting batches and listing pending tasks."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..exceptions import TaskAPIError
from ..logging import get_logger
from ..submission import SubmissionService
from .dependencies import get_submission_service
from .schemas import PendingTaskResponse, SubmitRequest, SubmitResponse

router = APIRouter(prefix="/api/tasks")
logger = get_logger(__name__)


@router.post("/submit", response_model=SubmitResponse, status_code=status.HTTP_202_ACCEPTED)
async def submit_task(
    body: SubmitRequest,
    service: SubmissionService = Depends(get_submission_service),
):
    """Re-validate the batch and, when eligible, accept it optimistically."""
    try:
        outcome = await service.submit(body.text, body.type, title=body.title)
    except TaskAPIError as exc:
        logger.error("Could not fetch credit balance", error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Unable to fetch credit balance: {exc}",
        ) from exc

    if not outcome.accepted:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Submission blocked",
                "reasons": [
                    {"code": reason.code.value, "message": reason.message}
                    for reason in outcome.report.eligibility.reasons
                ],
            },
        )

    return SubmitResponse(
        accepted=True,
        title=outcome.title,
        pending_id=outcome.pending.pending_id if outcome.pending else None,
        url_count=len(outcome.report.unique_urls),
        required_credits=outcome.report.quote.required,
    )


@router.get("/pending", response_model=List[PendingTaskResponse])
async def list_pending_tasks(service: SubmissionService = Depends(get_submission_service)):
    """List provisional tasks still waiting on the task API."""
    return [
        PendingTaskResponse(
            pending_id=task.pending_id,
            title=task.title,
            type=task.type,
            url_count=len(task.urls),
            created_at=task.created_at.isoformat(),
            status=task.status,
        )
        for task in service.storage.list()
    ]


__all__ = ["router"]
