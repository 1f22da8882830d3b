"""Integration tests for the URL batch HTTP API."""

import pytest
from fastapi.testclient import TestClient

from url_batch.factory import create_app
from url_batch.models import TaskType
from url_batch.storage import PendingTaskStorage


@pytest.fixture
def storage():
    return PendingTaskStorage()


@pytest.fixture
def app(settings, task_api, storage):
    return create_app(settings=settings, client=task_api.client(settings), storage=storage)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


class TestSystemEndpoints:
    """Test health and root endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        data = client.get("/").json()

        assert data["service"] == "URL Batch Service"
        assert data["status"] == "running"


class TestBatchEndpoints:
    """Test parse, clean, fix, dedupe and prepare."""

    def test_parse(self, client):
        response = client.post(
            "/api/batch/parse",
            json={"text": "https://a.com/xhttps://b.com/y\nhttps://c.com extra"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["urls"] == ["https://a.com/x", "https://b.com/y"]
        assert data["hasErrors"] is True
        assert data["invalidLines"] == ["https://a.com/xhttps://b.com/y", "https://c.com extra"]
        assert data["correctedInput"] == "https://a.com/x\nhttps://b.com/y\nhttps://c.com extra"
        assert data["validationMessage"].startswith("Invalid URLs detected:")

    def test_parse_clean_input(self, client):
        data = client.post("/api/batch/parse", json={"text": "https://a.com"}).json()

        assert data["hasErrors"] is False
        assert data["validationMessage"] is None

    def test_clean(self, client):
        response = client.post("/api/batch/clean", json={"text": "https://a.com junk\nwords"})

        assert response.json() == {"text": "https://a.com\n"}

    def test_fix(self, client):
        response = client.post("/api/batch/fix", json={"text": "https://a.comhttps://b.com junk"})

        assert response.json() == {"text": "https://a.com\nhttps://b.com"}

    def test_dedupe(self, client):
        response = client.post(
            "/api/batch/dedupe", json={"text": "https://a.com\nhttps://A.COM\nhttps://b.com"}
        )

        assert response.json() == {"text": "https://a.com\nhttps://b.com", "removed": 1}

    def test_prepare_eligible(self, client):
        response = client.post(
            "/api/batch/prepare",
            json={"text": "https://a.com\nhttps://b.com", "credits_available": 10},
        )

        data = response.json()
        assert data["can_submit"] is True
        assert data["blocking_reasons"] == []
        assert data["quote"] == {"required": 2, "available": 10, "sufficient": True}
        assert data["out_of_credits_message"] is None

    def test_prepare_reports_all_reasons(self, client):
        response = client.post(
            "/api/batch/prepare",
            json={
                "text": "https://a.com\nhttps://a.com\nbad line here",
                "credits_available": 0,
                "held_credits": 2,
                "used_credits": 8,
            },
        )

        data = response.json()
        assert data["can_submit"] is False
        assert [reason["code"] for reason in data["blocking_reasons"]] == [
            "duplicates_present",
            "insufficient_credits",
            "validation_errors",
        ]
        assert "(8 used, 2 on hold)" in data["out_of_credits_message"]

    def test_prepare_without_balance(self, client):
        data = client.post("/api/batch/prepare", json={"text": "https://a.com"}).json()

        assert [reason["code"] for reason in data["blocking_reasons"]] == ["credits_unavailable"]


class TestTaskEndpoints:
    """Test submission and pending task listing."""

    def test_submit_accepted(self, app, task_api, settings, storage):
        with TestClient(app) as client:
            response = client.post(
                "/api/tasks/submit",
                json={"text": "https://a.com\nhttps://b.com", "type": "checker", "title": "Check"},
            )

        assert response.status_code == 202
        data = response.json()
        assert data["accepted"] is True
        assert data["title"] == "Check"
        assert data["url_count"] == 2
        assert data["required_credits"] == 2
        assert data["pending_id"].startswith("pending-")

        service = app.state.submission_service
        assert data["pending_id"] in service.log.created
        assert len(storage) == 0
        assert task_api.posted()[0].url.path == "/proxy/speedyindex"

    def test_submit_blocked(self, client, task_api):
        task_api.balance["creditsAvailable"] = 0

        response = client.post("/api/tasks/submit", json={"text": "https://a.com"})

        assert response.status_code == 409
        reasons = response.json()["detail"]["reasons"]
        assert [reason["code"] for reason in reasons] == ["insufficient_credits"]
        assert task_api.posted() == []

    def test_submit_with_unreachable_balance(self, client, task_api):
        task_api.balance_status = 500

        response = client.post("/api/tasks/submit", json={"text": "https://a.com"})

        assert response.status_code == 502

    def test_submit_rejects_unknown_type(self, client):
        response = client.post("/api/tasks/submit", json={"text": "https://a.com", "type": "crawler"})

        assert response.status_code == 422

    def test_list_pending(self, client, storage):
        storage.add("Waiting", TaskType.INDEXER, ["https://a.com", "https://b.com"])

        data = client.get("/api/tasks/pending").json()

        assert len(data) == 1
        assert data[0]["title"] == "Waiting"
        assert data[0]["type"] == "indexer"
        assert data[0]["url_count"] == 2
        assert data[0]["status"] == "creating"

    def test_submit_with_non_object_balance(self, client, task_api):
        task_api.balance = [1, 2]

        response = client.post("/api/tasks/submit", json={"text": "https://a.com"})

        assert response.status_code == 502
        assert task_api.posted() == []

    def test_submit_with_non_object_task_body(self, app, task_api, storage):
        task_api.task_result = ["unexpected"]

        with TestClient(app) as client:
            response = client.post("/api/tasks/submit", json={"text": "https://a.com"})

        assert response.status_code == 202
        pending_id = response.json()["pending_id"]
        assert pending_id in app.state.submission_service.log.failed
        assert len(storage) == 0
