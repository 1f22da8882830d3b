"""System endpoints for health and root status."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from ..config import Settings
from .dependencies import get_settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "url-batch", "timestamp": time.time()}


@router.get("/")
async def root(settings: Settings = Depends(get_settings)):
    """Root endpoint."""
    return {"service": settings.service_name, "version": settings.version, "status": "running"}


__all__ = ["router"]
