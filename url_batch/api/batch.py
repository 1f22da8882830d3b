"""Endpoints that parse, repair and price pasted URL batches."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..batching import BatchProcessor
from ..cleaner import apply_corrections, clean_invalid_strings
from ..config import Settings
from ..deduplication import URLDeduplicator
from ..logging import get_logger
from ..messages import out_of_credits_message, validation_message
from ..models import CreditBalance
from ..parser import URLBatchParser
from .dependencies import get_settings
from .schemas import (
    BlockingReasonResponse,
    CreditQuoteResponse,
    DedupeResponse,
    ParseResponse,
    PrepareRequest,
    PrepareResponse,
    TextRequest,
    TextResponse,
)

router = APIRouter(prefix="/api/batch")
logger = get_logger(__name__)


@router.post("/parse", response_model=ParseResponse)
async def parse_batch(body: TextRequest, settings: Settings = Depends(get_settings)):
    """Parse pasted text into URLs, a corrected rendering and invalid lines."""
    result = URLBatchParser.parse(body.text)
    return ParseResponse(
        **result.to_dict(),
        validationMessage=validation_message(result, settings.invalid_line_preview_limit),
    )


@router.post("/clean", response_model=TextResponse)
async def clean_batch(body: TextRequest):
    """Drop everything that is not a URL from each line."""
    return TextResponse(text=clean_invalid_strings(body.text))


@router.post("/fix", response_model=TextResponse)
async def fix_batch(body: TextRequest):
    """Clean the text, then split concatenated URLs onto their own lines."""
    return TextResponse(text=apply_corrections(body.text))


@router.post("/dedupe", response_model=DedupeResponse)
async def dedupe_batch(body: TextRequest):
    """Rewrite the text as its unique valid URLs."""
    text, removed = URLDeduplicator.remove_duplicates(body.text)
    logger.info("Duplicates removed", removed=removed)
    return DedupeResponse(text=text, removed=removed)


@router.post("/prepare", response_model=PrepareResponse)
async def prepare_batch(body: PrepareRequest, settings: Settings = Depends(get_settings)):
    """Run the full pipeline against a caller-supplied balance."""
    balance = None
    if body.credits_available is not None:
        balance = CreditBalance(
            credits_available=body.credits_available,
            held_credits=body.held_credits,
            used_credits=body.used_credits,
        )

    report = BatchProcessor.prepare(
        body.text,
        balance,
        submission_in_flight=body.submission_in_flight,
        settings=settings,
    )

    return PrepareResponse(
        unique_urls=report.unique_urls,
        total_urls=len(report.parse.urls),
        duplicate_count=report.dedup.duplicate_count,
        has_errors=report.parse.has_errors,
        invalid_lines=report.parse.invalid_lines,
        validation_message=validation_message(report.parse, settings.invalid_line_preview_limit),
        out_of_credits_message=out_of_credits_message(balance),
        quote=CreditQuoteResponse(
            required=report.quote.required,
            available=report.quote.available,
            sufficient=report.quote.sufficient,
        ),
        can_submit=report.can_submit,
        blocking_reasons=[
            BlockingReasonResponse(code=reason.code.value, message=reason.message)
            for reason in report.eligibility.reasons
        ],
    )


__all__ = ["router"]
