"""HTTP client for the tea preference API.

Every call returns the full list the server answers with, so callers can
replace their local copy wholesale.
"""

import logging

import requests

from ..models import Preference

logger = logging.getLogger(__name__)


class ClientNetworkError(Exception):
    """Raised when a request fails in transport or the server answers non-2xx."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class PreferencesClient:
    """Thin wrapper over ``/api/preferences``."""

    def __init__(self, base_url: str, timeout: float = 5.0, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_all(self) -> list[Preference]:
        return self._request("GET", "/api/preferences")

    def add(self, name: str, sugar: int, milk: bool) -> list[Preference]:
        return self._request(
            "POST",
            "/api/preferences",
            json={"name": name, "sugar": sugar, "milk": milk},
        )

    def remove(self, index: int) -> list[Preference]:
        return self._request("DELETE", f"/api/preferences/{index}")

    def remove_all(self) -> list[Preference]:
        return self._request("DELETE", "/api/preferences/all")

    def _request(self, method: str, path: str, **kwargs) -> list[Preference]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            message = _error_message(e.response)
            logger.error(f"{method} {path} failed with {e.response.status_code}: {message}")
            raise ClientNetworkError(message, e.response.status_code) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ClientNetworkError(str(e)) from e

        try:
            return [Preference.model_validate(item) for item in response.json()]
        except (ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError
            raise ClientNetworkError(f"Unexpected response from {path}: {e}", response.status_code) from e


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("error") or response.reason
    except (ValueError, AttributeError):
        return response.reason or f"HTTP {response.status_code}"
