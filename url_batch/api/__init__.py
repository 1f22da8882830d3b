"""API router assembly for the URL batch service."""

from __future__ import annotations

from fastapi import APIRouter

from . import batch, health, tasks

router = APIRouter()
router.include_router(health.router)
router.include_router(batch.router)
router.include_router(tasks.router)

__all__ = ["router"]
