"""Thin HTTP wrapper around the travel API, used by the Streamlit client."""

import logging
from typing import Any, Dict, List, Optional

import requests

from app.core.config import BACKEND_URL

logger = logging.getLogger("travel_companion_client")


class ApiError(Exception):
    def __init__(self, status: int, data: Any):
        self.status = status
        self.data = data
        message = data.get("error") if isinstance(data, dict) else None
        super().__init__(message or f"Request failed with status {status}")

    @property
    def message(self) -> str:
        return str(self)


class TravelApiClient:
    def __init__(self, base_url: str = BACKEND_URL, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict] = None):
        url = f"{self.base_url}/api/{path}"
        response = self.session.request(method, url, json=payload, timeout=self.timeout)
        try:
            data = response.json()
        except ValueError:
            data = None
        if response.status_code >= 400:
            logger.warning(f"{method} {url} -> {response.status_code}")
            raise ApiError(response.status_code, data)
        return data

    def get_all(self, resource: str) -> List[Dict[str, Any]]:
        # Most list endpoints answer 404 when empty
        try:
            return self._request("GET", resource)
        except ApiError as e:
            if e.status == 404:
                return []
            raise

    def get_by_id(self, resource: str, item_id: str) -> Dict[str, Any]:
        return self._request("GET", f"{resource}/{item_id}")

    def create_item(self, resource: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", resource, payload)

    def update_item(
        self, resource: str, item_id: str, payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        return self._request("PUT", f"{resource}/{item_id}", payload)

    def delete_item(self, resource: str, item_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"{resource}/{item_id}")

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        return self._request(
            "POST",
            "users/register",
            {"username": username, "email": email, "password": password},
        )

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._request("POST", "users/login", {"email": email, "password": password})
