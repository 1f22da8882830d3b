"""Shared API dependencies."""

from __future__ import annotations

from fastapi import Request

from ..config import Settings
from ..submission import SubmissionService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_submission_service(request: Request) -> SubmissionService:
    return request.app.state.submission_service


__all__ = ["get_settings", "get_submission_service"]
