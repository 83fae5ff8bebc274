# ABOUTME: Humanitec API client using requests
# ABOUTME: Lists, reads, creates, renames and deletes applications in an organization

"""Humanitec API clients for application operations."""

import logging
from collections.abc import Callable
from typing import Any, Protocol
from urllib.parse import quote

import requests

from humctl_wrapper.config import DEFAULT_API_URL
from humctl_wrapper.errors import APIError, DecodeError, MissingCredentialError, TransportError
from humctl_wrapper.models import Application

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30  # seconds

ERR_MISSING_TOKEN = "Humanitec API token is required"
ERR_MISSING_ORG = "Humanitec organization ID is required"


class Client(Protocol):
    """Operations every Humanitec client implements."""

    def get_apps(self) -> list[Application]: ...

    def get_app(self, app_id: str) -> Application: ...

    def create_app(self, app_id: str, name: str, skip_env_creation: bool = False) -> Application: ...

    def update_app(self, app_id: str, new_name: str) -> Application: ...

    def delete_app(self, app_id: str) -> None: ...


ClientFactory = Callable[..., Client]


class HumanitecClient:
    """
    Client for the Humanitec REST API.

    Every operation checks credentials before touching the network and
    performs exactly one request.
    """

    def __init__(self, token: str, organization: str, base_url: str = DEFAULT_API_URL, timeout: int = REQUEST_TIMEOUT):
        """
        Initialize the client.

        Args:
            token: Humanitec API token, sent as a bearer token
            organization: Organization ID that owns the applications
            base_url: API root URL
            timeout: Request timeout in seconds
        """
        self.token = token
        self.organization = organization
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def validate(self) -> None:
        """Check that the client has the credentials it needs."""
        if not self.token:
            raise MissingCredentialError(ERR_MISSING_TOKEN)
        if not self.organization:
            raise MissingCredentialError(ERR_MISSING_ORG)

    @property
    def apps_url(self) -> str:
        """URL of the organization's application collection."""
        return f"{self.base_url}/orgs/{quote(self.organization, safe='')}/apps"

    def app_url(self, app_id: str) -> str:
        """URL of a single application."""
        return f"{self.apps_url}/{quote(app_id, safe='')}"

    def get_apps(self) -> list[Application]:
        """List all applications in the organization."""
        self.validate()
        response = self._request("GET", self.apps_url, expected=(200,))
        data = self._decode(response)
        if not isinstance(data, list):
            raise DecodeError(f"failed to decode response: expected a list, got {type(data).__name__}")
        return [self._to_app(item) for item in data]

    def get_app(self, app_id: str) -> Application:
        """Get a single application by ID."""
        self.validate()
        response = self._request("GET", self.app_url(app_id), expected=(200,))
        return self._to_app(self._decode(response))

    def create_app(self, app_id: str, name: str, skip_env_creation: bool = False) -> Application:
        """
        Create an application.

        Args:
            app_id: Unique application ID
            name: Human-friendly display name
            skip_env_creation: Do not create the default environment

        Returns:
            The application as stored by the API
        """
        self.validate()
        payload = {"id": app_id, "name": name, "skip_environment_creation": skip_env_creation}
        response = self._request("POST", self.apps_url, expected=(201,), payload=payload)
        return self._to_app(self._decode(response))

    def update_app(self, app_id: str, new_name: str) -> Application:
        """Rename an application. The ID and all other settings are kept."""
        self.validate()
        response = self._request("PATCH", self.app_url(app_id), expected=(200,), payload={"name": new_name})
        return self._to_app(self._decode(response))

    def delete_app(self, app_id: str) -> None:
        """Delete an application together with its environments and history."""
        self.validate()
        self._request("DELETE", self.app_url(app_id), expected=(204, 202))

    def _request(
        self, method: str, url: str, expected: tuple[int, ...], payload: dict[str, Any] = None
    ) -> requests.Response:
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        logger.debug("%s %s", method, url)
        try:
            response = requests.request(method, url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"failed to make request: {e}") from e

        logger.debug("%s %s returned %s", method, url, response.status_code)
        if response.status_code not in expected:
            raise APIError(response.status_code)
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode response: {e}") from e

    @staticmethod
    def _to_app(data: Any) -> Application:
        try:
            return Application.from_dict(data)
        except ValueError as e:
            raise DecodeError(f"failed to decode response: {e}") from e


class InMemoryClient:
    """
    Client that keeps applications in memory instead of calling the API.

    Setting ``error`` makes every operation raise it, which is how callers
    exercise their failure handling.
    """

    def __init__(self, apps: list[Application] = None, error: Exception = None):
        self.apps: dict[str, Application] = {app.id: app for app in apps or []}
        self.error = error
        self.calls: list[tuple[str, tuple]] = []

    def get_apps(self) -> list[Application]:
        self._record("get_apps")
        return list(self.apps.values())

    def get_app(self, app_id: str) -> Application:
        self._record("get_app", app_id)
        return self._lookup(app_id)

    def create_app(self, app_id: str, name: str, skip_env_creation: bool = False) -> Application:
        self._record("create_app", app_id, name, skip_env_creation)
        if app_id in self.apps:
            raise APIError(409)
        app = Application(id=app_id, name=name)
        self.apps[app_id] = app
        return app

    def update_app(self, app_id: str, new_name: str) -> Application:
        self._record("update_app", app_id, new_name)
        app = self._lookup(app_id)
        updated = Application(id=app.id, name=new_name)
        self.apps[app_id] = updated
        return updated

    def delete_app(self, app_id: str) -> None:
        self._record("delete_app", app_id)
        self._lookup(app_id)
        del self.apps[app_id]

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        if self.error is not None:
            raise self.error

    def _lookup(self, app_id: str) -> Application:
        if app_id not in self.apps:
            raise APIError(404)
        return self.apps[app_id]
