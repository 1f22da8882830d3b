"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import TaskType


class TextRequest(BaseModel):
    """A snapshot of the pasted text."""

    text: str = ""


class TextResponse(BaseModel):
    text: str


class DedupeResponse(BaseModel):
    text: str
    removed: int


class ParseResponse(BaseModel):
    """Parse output contract plus the rendered validation message."""

    urls: List[str]
    correctedInput: str
    hasErrors: bool
    invalidLines: List[str]
    validationMessage: Optional[str] = None


class PrepareRequest(BaseModel):
    """Text plus the balance the caller currently knows about."""

    text: str = ""
    credits_available: Optional[int] = Field(default=None, ge=0)
    held_credits: int = Field(default=0, ge=0)
    used_credits: int = Field(default=0, ge=0)
    submission_in_flight: bool = False


class CreditQuoteResponse(BaseModel):
    required: int
    available: int
    sufficient: bool


class BlockingReasonResponse(BaseModel):
    code: str
    message: str


class PrepareResponse(BaseModel):
    unique_urls: List[str]
    total_urls: int
    duplicate_count: int
    has_errors: bool
    invalid_lines: List[str]
    validation_message: Optional[str] = None
    out_of_credits_message: Optional[str] = None
    quote: CreditQuoteResponse
    can_submit: bool
    blocking_reasons: List[BlockingReasonResponse]


class SubmitRequest(BaseModel):
    text: str
    type: TaskType = TaskType.INDEXER
    title: Optional[str] = None


class PendingTaskResponse(BaseModel):
    pending_id: str
    title: str
    type: TaskType
    url_count: int
    created_at: str
    status: str


class SubmitResponse(BaseModel):
    accepted: bool
    title: str
    pending_id: Optional[str] = None
    url_count: int
    required_credits: int


__all__ = [
    "TextRequest",
    "TextResponse",
    "DedupeResponse",
    "ParseResponse",
    "PrepareRequest",
    "CreditQuoteResponse",
    "BlockingReasonResponse",
    "PrepareResponse",
    "SubmitRequest",
    "PendingTaskResponse",
    "SubmitResponse",
]
