"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Make the service importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from url_batch.clients import TaskAPIClient  # noqa: E402
from url_batch.config import Settings  # noqa: E402


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, task_api_url="http://task-api.test", task_api_token="secret")


class TaskAPIStub:
    """Scripted task API behind an ``httpx.MockTransport``."""

    def __init__(self, credits_available=100, held_credits=0, used_credits=0):
        self.balance = {
            "creditsAvailable": credits_available,
            "heldCredits": held_credits,
            "usedCredits": used_credits,
        }
        self.balance_status = 200
        self.task_result = {"code": 0, "task": {"id": "task-1"}}
        self.requests = []

    @staticmethod
    def _json(status, body):
        # Serialised by hand so a ``None`` body is sent as a literal ``null``
        return httpx.Response(
            status,
            content=json.dumps(body).encode(),
            headers={"Content-Type": "application/json"},
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET" and request.url.path == "/user/credits":
            return self._json(self.balance_status, self.balance)
        if request.method == "POST" and request.url.path in {"/vip/create", "/proxy/speedyindex"}:
            return self._json(200, self.task_result)
        return httpx.Response(404, json={"error": "not found"})

    def posted(self):
        return [request for request in self.requests if request.method == "POST"]

    def client(self, settings):
        return TaskAPIClient(settings=settings, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def task_api():
    return TaskAPIStub()
