"""Tests for the API connection module."""

import base64
import json
import logging

import httpx
import pytest

from auth0_management import __version__
from auth0_management.http import (
    HttpApiConnection,
    normalize_domain,
    serialize_body,
    telemetry_header,
)
from auth0_management.exceptions import (
    AuthenticationError,
    ConnectionError as ClientConnectionError,
    DeserializationError,
    ManagementApiError,
    MissingPathParameterError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError as ClientTimeoutError,
    ValidationError,
)
from auth0_management.models import (
    Connection,
    ConnectionUpdateRequest,
)
from auth0_management.paging import PagedListConverter


def json_response(status_code=200, payload=None, headers=None):
    def handler(request):
        return httpx.Response(status_code, json=payload, headers=headers)

    return handler


class TestHelpers:
    """Tests for module level helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("tenant.auth0.com", "tenant.auth0.com"),
            ("https://tenant.auth0.com/", "tenant.auth0.com"),
            ("http://tenant.auth0.com", "tenant.auth0.com"),
        ],
    )
    def test_normalize_domain(self, value, expected):
        """Test scheme and slash stripping."""
        assert normalize_domain(value) == expected

    def test_telemetry_header_decodes_to_json(self):
        """Test Auth0-Client header contents."""
        value = telemetry_header()
        padded = value + "=" * (-len(value) % 4)
        decoded = json.loads(base64.urlsafe_b64decode(padded))
        assert decoded == {"name": "auth0-management-python", "version": __version__}

    def test_serialize_body_excludes_unset(self):
        """Test that only fields set by the caller are dumped."""
        request = ConnectionUpdateRequest(display_name="New name")
        assert serialize_body(request) == {"display_name": "New name"}

    def test_serialize_body_keeps_explicit_none(self):
        """Test that an explicitly set None is still sent."""
        request = ConnectionUpdateRequest(metadata=None)
        assert serialize_body(request) == {"metadata": None}

    def test_serialize_body_passes_dicts(self):
        """Test that plain mappings are sent unchanged."""
        assert serialize_body({"a": 1}) == {"a": 1}
        assert serialize_body(None) is None


class TestHttpApiConnection:
    """Tests for HttpApiConnection configuration."""

    def test_initialization(self):
        """Test connection initialization."""
        connection = HttpApiConnection("https://tenant.auth0.com/", "token")
        assert connection.domain == "tenant.auth0.com"
        assert connection.base_url == "https://tenant.auth0.com/api/v2/"
        assert connection.timeout == 30.0

    def test_build_headers(self):
        """Test default headers."""
        connection = HttpApiConnection("tenant.auth0.com", "secret")
        headers = connection._build_headers()
        assert headers["Authorization"] == "Bearer secret"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == f"auth0-management-python/{__version__}"
        assert headers["Auth0-Client"] == telemetry_header()

    def test_build_headers_without_telemetry(self):
        """Test disabling the telemetry header."""
        connection = HttpApiConnection("tenant.auth0.com", "secret", telemetry=False)
        assert "Auth0-Client" not in connection._build_headers()

    def test_build_headers_with_extra(self):
        """Test default and per-request headers."""
        connection = HttpApiConnection(
            "tenant.auth0.com", "secret", headers={"X-Default": "1"}
        )
        headers = connection._build_headers({"X-Custom": "value"})
        assert headers["X-Default"] == "1"
        assert headers["X-Custom"] == "value"

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test connection as context manager."""
        async with HttpApiConnection("tenant.auth0.com", "token") as connection:
            assert connection._client is not None
        assert connection._client is None

    def test_repr_hides_token(self):
        """Test that the token never shows in repr."""
        connection = HttpApiConnection("tenant.auth0.com", "super-secret")
        assert "super-secret" not in repr(connection)


class TestRequests:
    """Tests for request assembly."""

    @pytest.mark.asyncio
    async def test_get_resolves_path_and_query(self, make_http_connection, connection_data):
        """Test URL, query and converter handling of a GET."""
        connection, recorder = make_http_connection(json_response(200, connection_data))

        result = await connection.get(
            "connections/{id}",
            path_params={"id": "con_1"},
            query=[("fields", None), ("include_fields", True)],
            converter=Connection.model_validate,
        )

        request = recorder.last
        assert request.method == "GET"
        assert request.url.path == "/api/v2/connections/con_1"
        assert list(request.url.params.multi_items()) == [("include_fields", "true")]
        assert request.headers["Authorization"] == "Bearer test-token"
        assert isinstance(result, Connection)
        assert result.id == connection_data["id"]

    @pytest.mark.asyncio
    async def test_repeated_query_keys(self, make_http_connection):
        """Test that list values become repeated parameters."""
        connection, recorder = make_http_connection(json_response(200, []))

        await connection.get(
            "connections",
            query={"strategy": ["google-oauth2", "auth0"], "name": None},
        )

        assert recorder.last.url.params.get_list("strategy") == ["google-oauth2", "auth0"]
        assert "name" not in recorder.last.url.params

    @pytest.mark.asyncio
    async def test_path_values_are_encoded(self, make_http_connection):
        """Test that ids with reserved characters stay one segment."""
        connection, recorder = make_http_connection(json_response(200, {}))

        await connection.get("users/{id}", path_params={"id": "auth0|abc"})

        assert recorder.last.url.raw_path == b"/api/v2/users/auth0%7Cabc"

    @pytest.mark.asyncio
    async def test_missing_path_param_sends_nothing(self, make_http_connection):
        """Test that an unresolved placeholder fails before the request."""
        connection, recorder = make_http_connection(json_response(200, {}))

        with pytest.raises(MissingPathParameterError):
            await connection.get("connections/{id}")

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_post_serializes_model(self, make_http_connection, connection_data):
        """Test that model bodies are sent as JSON with only set fields."""
        connection, recorder = make_http_connection(json_response(200, connection_data))

        await connection.patch(
            "connections/{id}",
            path_params={"id": "con_1"},
            body=ConnectionUpdateRequest(enabled_clients=["a", "b"]),
        )

        assert recorder.last.method == "PATCH"
        assert recorder.last.headers["Content-Type"] == "application/json"
        assert recorder.last_json() == {"enabled_clients": ["a", "b"]}

    @pytest.mark.asyncio
    async def test_delete_with_body(self, make_http_connection):
        """Test DELETE with a JSON body."""
        connection, recorder = make_http_connection(lambda request: httpx.Response(204))

        result = await connection.delete(
            "roles/{id}/permissions",
            path_params={"id": "rol_1"},
            body={"permissions": []},
        )

        assert result is None
        assert recorder.last.method == "DELETE"
        assert recorder.last_json() == {"permissions": []}

    @pytest.mark.asyncio
    async def test_put(self, make_http_connection):
        """Test PUT requests."""
        connection, recorder = make_http_connection(json_response(200, {"ok": True}))

        result = await connection.put("things/{id}", path_params={"id": "1"}, body={"a": 1})

        assert recorder.last.method == "PUT"
        assert result == {"ok": True}

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, make_http_connection):
        """Test that empty responses are decoded as None."""
        connection, _ = make_http_connection(lambda request: httpx.Response(204))

        result = await connection.delete("connections/{id}", path_params={"id": "con_1"})

        assert result is None

    @pytest.mark.asyncio
    async def test_paged_converter(self, make_http_connection, connections_list):
        """Test the connection applies the paged list converter."""
        payload = {"connections": connections_list, "total": 3, "limit": 3}
        connection, _ = make_http_connection(json_response(200, payload))

        result = await connection.get(
            "connections",
            converter=PagedListConverter("connections", Connection),
        )

        assert len(result) == 3
        assert result.paging.total == 3

    @pytest.mark.asyncio
    async def test_debug_logging_omits_token(self, make_http_connection, caplog):
        """Test that requests are logged without credentials."""
        connection, _ = make_http_connection(json_response(200, []))

        with caplog.at_level(logging.DEBUG, logger="auth0_management.http"):
            await connection.get("connections", query={"strategy": ["auth0"]})

        assert "GET connections?strategy=auth0" in caplog.text
        assert "test-token" not in caplog.text


class TestErrorHandling:
    """Tests for error handling in HttpApiConnection."""

    @pytest.mark.asyncio
    async def test_not_found(self, make_http_connection, not_found_body):
        """Test that 404 surfaces as NotFoundError with the Auth0 body."""
        connection, _ = make_http_connection(json_response(404, not_found_body))

        with pytest.raises(NotFoundError) as exc_info:
            await connection.delete("connections/{id}", path_params={"id": "missing"})

        error = exc_info.value
        assert error.status_code == 404
        assert error.message == "The connection does not exist."
        assert error.error_code == "inexistent_connection"
        assert error.details == not_found_body

    @pytest.mark.asyncio
    async def test_error_code_only_from_error_code_field(self, make_http_connection):
        """Test that the HTTP reason phrase is not used as an Auth0 error code."""
        body = {"statusCode": 404, "error": "Not Found", "message": "No such role."}
        connection, _ = make_http_connection(json_response(404, body))

        with pytest.raises(NotFoundError) as exc_info:
            await connection.get("roles/{id}", path_params={"id": "rol_missing"})

        assert exc_info.value.error_code is None
        assert exc_info.value.message == "No such role."
        assert str(exc_info.value) == "No such role. (HTTP 404)"

    @pytest.mark.parametrize(
        "status_code,expected_class",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (500, ServerError),
            (418, ManagementApiError),
        ],
    )
    @pytest.mark.asyncio
    async def test_status_mapping(self, make_http_connection, status_code, expected_class):
        """Test mapping of error statuses."""
        body = {"statusCode": status_code, "error": "Error", "message": "failed"}
        connection, _ = make_http_connection(json_response(status_code, body))

        with pytest.raises(expected_class) as exc_info:
            await connection.get("connections")
        assert exc_info.value.status_code == status_code

    @pytest.mark.asyncio
    async def test_rate_limit_retry_after(self, make_http_connection):
        """Test that Retry-After is exposed and no retry happens."""
        connection, recorder = make_http_connection(
            json_response(429, {"message": "Too Many Requests"}, headers={"Retry-After": "7"})
        )

        with pytest.raises(RateLimitError) as exc_info:
            await connection.get("connections")

        assert exc_info.value.retry_after == 7
        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, make_http_connection):
        """Test error responses without JSON."""
        connection, _ = make_http_connection(
            lambda request: httpx.Response(502, text="Bad Gateway")
        )

        with pytest.raises(ServerError) as exc_info:
            await connection.get("connections")
        assert exc_info.value.message == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_timeout(self, make_http_connection):
        """Test that timeouts map to TimeoutError."""

        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        connection, _ = make_http_connection(handler)

        with pytest.raises(ClientTimeoutError) as exc_info:
            await connection.get("connections")
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_connect_error(self, make_http_connection):
        """Test that connection failures map to ConnectionError."""

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        connection, _ = make_http_connection(handler)

        with pytest.raises(ClientConnectionError):
            await connection.get("connections")

    @pytest.mark.asyncio
    async def test_other_transport_error(self, make_http_connection):
        """Test that other transport errors map to NetworkError."""

        def handler(request):
            raise httpx.RemoteProtocolError("boom", request=request)

        connection, _ = make_http_connection(handler)

        with pytest.raises(NetworkError):
            await connection.get("connections")

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_http_connection):
        """Test that a non-JSON success body is a deserialization error."""
        connection, _ = make_http_connection(
            lambda request: httpx.Response(200, text="<html>")
        )

        with pytest.raises(DeserializationError):
            await connection.get("connections")

    @pytest.mark.asyncio
    async def test_model_mismatch(self, make_http_connection):
        """Test that converter validation errors become DeserializationError."""
        connection, _ = make_http_connection(json_response(200, {"id": ["x"]}))

        with pytest.raises(DeserializationError):
            await connection.get(
                "connections/{id}",
                path_params={"id": "1"},
                converter=Connection.model_validate,
            )
