"""Pytest configuration and fixtures for auth0-management tests."""

import json
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from auth0_management.http import ApiConnection, HttpApiConnection


# ============================================================================
# Mock API payloads
# ============================================================================


@pytest.fixture
def connection_data():
    """A single connection as returned by the API."""
    return {
        "id": "con_0000000000000001",
        "name": "Username-Password-Authentication",
        "display_name": "Database",
        "strategy": "auth0",
        "enabled_clients": ["client-1"],
        "realms": ["Username-Password-Authentication"],
        "is_domain_connection": False,
        "options": {"brute_force_protection": True},
    }


@pytest.fixture
def connections_list():
    """Connections as a bare array."""
    return [
        {"id": "con_1", "name": "db", "strategy": "auth0"},
        {"id": "con_2", "name": "google", "strategy": "google-oauth2"},
        {"id": "con_3", "name": "github", "strategy": "github"},
    ]


@pytest.fixture
def role_data():
    """A single role as returned by the API."""
    return {
        "id": "rol_123",
        "name": "admin",
        "description": "Administrators",
    }


@pytest.fixture
def not_found_body():
    """Auth0 error body for a missing resource."""
    return {
        "statusCode": 404,
        "error": "Not Found",
        "message": "The connection does not exist.",
        "errorCode": "inexistent_connection",
    }


# ============================================================================
# Connection mocking
# ============================================================================


@pytest.fixture
def mock_connection():
    """An ApiConnection whose verbs are AsyncMocks."""
    return AsyncMock(spec=ApiConnection)


def respond_with(payload: Any) -> Callable[..., Any]:
    """
    Side effect for a mocked connection verb.

    Applies the ``converter`` the resource client passed, the way a real
    connection does with the decoded body.
    """

    def _respond(path, **kwargs):
        converter = kwargs.get("converter")
        return converter(payload) if converter else payload

    return _respond


@pytest.fixture
def respond():
    """Factory for converter-applying side effects, see ``respond_with``."""
    return respond_with


class RecordingTransport:
    """Collects requests and answers them from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Optional[Dict[str, Any]]:
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def make_http_connection():
    """Build an HttpApiConnection backed by httpx.MockTransport."""

    def _make(handler, **kwargs):
        recorder = RecordingTransport(handler)
        connection = HttpApiConnection(
            "tenant.auth0.com",
            "test-token",
            transport=httpx.MockTransport(recorder),
            **kwargs,
        )
        return connection, recorder

    return _make
