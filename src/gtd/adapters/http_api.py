"""Task backend REST adapter - HTTP client for task fetching."""

import logging

import requests

from gtd.config import Config, load_config
from gtd.core.tasks import Task

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when the task backend rejects or lacks credentials."""

    pass


class HttpTaskAdapter:
    """
    Task backend REST adapter.

    Implements TaskRepository protocol. Handles bearer auth and API calls.
    No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def _api_request(self, endpoint: str, params: dict | None = None) -> requests.Response:
        """Make authenticated API request."""
        if not self.config.api_token:
            raise AuthenticationError("No API token. Set API_TOKEN in gtd.conf or GTD_API_TOKEN.")

        url = f"{self.config.api_url}{endpoint}"
        logger.debug(f"GET {url} params={params}")
        resp = self._session.get(
            url,
            params=params,
            headers={"Authorization": f"Bearer {self.config.api_token}"},
            timeout=self.config.request_timeout,
        )
        if resp.status_code in (401, 403):
            raise AuthenticationError(f"Task backend rejected credentials ({resp.status_code})")
        return resp

    @staticmethod
    def _unwrap(payload: dict | list) -> list[dict]:
        # Some endpoints wrap results as {"success": ..., "data": [...]}
        if isinstance(payload, dict):
            return payload.get("data") or []
        return payload

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks with nested subtasks."""
        resp = self._api_request("/tasks", params={"includeSubtasks": "true"})
        resp.raise_for_status()
        tasks = [Task.from_api(t) for t in self._unwrap(resp.json())]
        logger.info(f"Fetched {len(tasks)} tasks from {self.config.api_url}")
        return tasks

    def fetch_root(self) -> list[Task]:
        """Fetch top-level tasks."""
        resp = self._api_request("/tasks/root")
        resp.raise_for_status()
        return [Task.from_api(t) for t in self._unwrap(resp.json())]

    def fetch_one(self, task_id: str) -> Task | None:
        """Fetch a single task. Returns None if not found."""
        resp = self._api_request(f"/tasks/{task_id}")
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        payload = resp.json()
        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]
        return Task.from_api(payload)
