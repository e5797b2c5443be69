"""HTTP client for OpenSocial REST API."""

import logging
from typing import Any, Dict, Optional

import requests

from .config import get_server, get_token
from .services import REGISTRY, ServiceTemplateRegistry
from .url import UrlBuilder

logger = logging.getLogger(__name__)


class APIError(Exception):
    """API error with status code and message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error {status_code}: {message}")


class OpenSocialClient:
    """Client for OpenSocial REST API."""

    def __init__(
        self,
        server: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 30,
        registry: ServiceTemplateRegistry = REGISTRY,
    ):
        self.server = server or get_server()
        self.token = token or get_token()
        self.timeout = timeout
        self.registry = registry

    def build_url(self, service: str, *path: str) -> UrlBuilder:
        """Build a request URL for a service.

        Raises:
            ValueError: unknown service, or more path parts than the service
                template has after the service name
        """
        if self.registry.get_template(service) is None:
            raise ValueError(
                f"Invalid service: {service}. "
                f"Valid services: {', '.join(self.registry.services)}"
            )
        parts = self.registry.path_parts(service)
        if len(path) > len(parts):
            raise ValueError(
                f"Too many path segments for {service}: expected at most "
                f"{len(parts)} ({'/'.join(parts)}), got {len(path)}"
            )

        url = UrlBuilder(self.server, service)
        for segment in path:
            url.add_segment(segment)
        if self.token:
            url.add_query_param("oauth_token", self.token)
        return url

    def wrap_body(self, service: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Wrap a request body under the service alias, if it has one."""
        alias = self.registry.get_alias(service)
        if alias is None:
            return data
        return {alias: data}

    def _request(
        self, method: str, url: UrlBuilder, data: Optional[Dict] = None
    ) -> Dict[str, Any]:
        """Make HTTP request to API."""
        target = url.serialize()
        logger.debug(f"{method} {target}")
        try:
            response = requests.request(
                method,
                target,
                json=data,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.ConnectionError:
            raise APIError(0, f"Failed to connect to server: {self.server}")
        except requests.exceptions.Timeout:
            raise APIError(0, "Request timeout")

        if response.status_code >= 400:
            try:
                error = response.json()
                message = error.get("error", {}).get("message") or str(error)
            except (ValueError, AttributeError):
                message = response.text or response.reason
            raise APIError(response.status_code, message)

        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError:
            logger.debug(f"Non-JSON response body from {target}")
            return {}

    def fetch(
        self, service: str, *path: str, params: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """GET any service path with optional extra query parameters."""
        url = self.build_url(service, *path)
        for key, value in (params or {}).items():
            url.add_query_param(key, value)
        return self._request("GET", url)

    def fetch_person(self, user_id: str = "@me") -> Dict[str, Any]:
        return self.fetch("people", user_id, "@self")

    def fetch_friends(self, user_id: str = "@me") -> Dict[str, Any]:
        return self.fetch("people", user_id, "@friends")

    def fetch_app_data(
        self, user_id: str = "@me", group_id: str = "@self", app_id: str = "@app"
    ) -> Dict[str, Any]:
        return self.fetch("appdata", user_id, group_id, app_id)

    def update_app_data(
        self, data: Dict[str, Any], user_id: str = "@me", app_id: str = "@app"
    ) -> Dict[str, Any]:
        """Store key/value app data for a user."""
        url = self.build_url("appdata", user_id, "@self", app_id)
        url.add_query_param("fields", ",".join(data))
        return self._request("PUT", url, self.wrap_body("appdata", data))

    def fetch_activities(
        self, user_id: str = "@me", group_id: str = "@self"
    ) -> Dict[str, Any]:
        return self.fetch("activities", user_id, group_id)

    def create_activity(
        self, activity: Dict[str, Any], user_id: str = "@me", app_id: str = "@app"
    ) -> Dict[str, Any]:
        """Post a new activity to a user's stream."""
        url = self.build_url("activities", user_id, "@self", app_id)
        return self._request("POST", url, self.wrap_body("activities", activity))
