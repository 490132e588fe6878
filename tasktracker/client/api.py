import logging
from typing import Any, Dict, List, Optional

import requests

from tasktracker.config import API_URL

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request to the task API did not succeed.

    ``status_code`` is None when no response came back at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TaskClient:
    """Calls the task HTTP API.

    ``session`` only needs a requests-style ``request(method, url, json=, timeout=)``
    method, so a ``requests.Session`` or FastAPI's ``TestClient`` both work.
    """

    def __init__(self, base_url: str = API_URL, session=None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"{method} {path} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise ApiError(f"{method} {path} returned {response.status_code}", response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"{method} {path} returned a non-JSON body", response.status_code) from exc

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/tasks")

    def create_task(self, title: str) -> Dict[str, Any]:
        return self._request("POST", "/tasks", {"title": title})

    def set_completion(self, task_id: int, completed: bool) -> Dict[str, Any]:
        return self._request("PATCH", f"/tasks/{task_id}", {"completed": completed})

    def delete_task(self, task_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/tasks/{task_id}")

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
