"""Client for the external task API (credit balance and task creation)."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from .config import Settings, get_settings
from .exceptions import TaskAPIError, TaskSubmissionError
from .logging import get_logger
from .models import CreatedTask, CreditBalance, TaskRequest, TaskType

logger = get_logger(__name__)

TASK_ENDPOINTS = {
    TaskType.INDEXER: "/vip/create",
    TaskType.CHECKER: "/proxy/speedyindex",
}


class TaskAPIClient:
    """Thin async wrapper around the task API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = str(self.settings.task_api_url).rstrip("/")
        self._transport = transport
        self.http_client: Optional[httpx.AsyncClient] = None

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.task_api_token:
            headers["Authorization"] = f"Bearer {self.settings.task_api_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.settings.task_api_timeout,
                transport=self._transport,
            )
        return self.http_client

    async def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        client = await self._get_client()
        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Task API returned an error status",
                path=path,
                status=exc.response.status_code,
            )
            raise TaskAPIError(
                f"Task API returned {exc.response.status_code} for {path}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Task API request failed", path=path, error=str(exc))
            raise TaskAPIError(f"Task API request failed: {exc}") from exc
        except ValueError as exc:
            raise TaskAPIError(f"Task API returned invalid JSON for {path}") from exc

        if not isinstance(payload, dict):
            logger.warning(
                "Task API returned a non-object body",
                path=path,
                body_type=type(payload).__name__,
            )
            raise TaskAPIError(f"Task API returned a non-object body for {path}")
        return payload

    async def get_credit_balance(self) -> CreditBalance:
        """Fetch the account's current credit balance."""
        payload = await self._request("GET", "/user/credits")
        return CreditBalance.from_payload(payload)

    async def create_task(self, request: TaskRequest) -> CreatedTask:
        """Create a task; the endpoint depends on the task type."""
        endpoint = TASK_ENDPOINTS[request.type]
        logger.info(
            "Submitting task",
            endpoint=endpoint,
            task_type=request.type.value,
            url_count=len(request.urls),
        )

        result = await self._request("POST", endpoint, json=request.to_payload())
        if result.get("code") != 0:
            message = result.get("message") or result.get("error") or "Failed to submit task"
            raise TaskSubmissionError(message)

        task = result.get("task")
        task_id = task.get("id") if isinstance(task, dict) else None
        return CreatedTask(task_id=str(task_id) if task_id is not None else None, payload=result)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None


__all__ = ["TaskAPIClient", "TASK_ENDPOINTS"]
