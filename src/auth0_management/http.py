"""
API connection for the Auth0 Management API.

Resource clients talk to an ``ApiConnection``. This module provides the
abstract contract and ``HttpApiConnection``, an implementation built on
httpx with:
- Path placeholder resolution and query assembly
- Bearer token and telemetry headers
- JSON body serialization of Pydantic models
- Error responses mapped to ``ManagementApiError`` subclasses

It makes one attempt per call. Retries, token renewal and rate-limit
backoff belong to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar, Union
import base64
import json
import logging

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from auth0_management import __version__
from auth0_management.exceptions import (
    ConnectionError as ClientConnectionError,
    DeserializationError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from auth0_management.paths import resolve_path
from auth0_management.query import QueryParams, build_query, encode_query

logger = logging.getLogger(__name__)

T = TypeVar("T")

SDK_NAME = "auth0-management-python"

Converter = Callable[[Any], T]
Body = Union[BaseModel, Mapping[str, Any], list, None]


def telemetry_header(name: str = SDK_NAME, version: str = __version__) -> str:
    """Value of the ``Auth0-Client`` header: base64url encoded JSON."""
    payload = json.dumps({"name": name, "version": version}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def serialize_body(body: Body) -> Any:
    """Dump Pydantic models keeping only the fields the caller set."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_unset=True, by_alias=True)
    return body


class ApiConnection(ABC):
    """
    Contract between resource clients and the transport.

    ``path`` is a template relative to ``/api/v2/`` (e.g. ``"connections/{id}"``),
    resolved with ``path_params``. ``converter`` is applied to the decoded
    JSON body; without one the decoded JSON is returned. Empty bodies
    yield None.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        body: Body = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        ...

    async def get(
        self,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """Make a GET request."""
        return await self.request(
            "GET",
            path,
            path_params=path_params,
            query=query,
            headers=headers,
            converter=converter,
        )

    async def post(
        self,
        path: str,
        *,
        body: Body = None,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """Make a POST request."""
        return await self.request(
            "POST",
            path,
            path_params=path_params,
            query=query,
            body=body,
            headers=headers,
            converter=converter,
        )

    async def put(
        self,
        path: str,
        *,
        body: Body = None,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """Make a PUT request."""
        return await self.request(
            "PUT",
            path,
            path_params=path_params,
            query=query,
            body=body,
            headers=headers,
            converter=converter,
        )

    async def patch(
        self,
        path: str,
        *,
        body: Body = None,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """Make a PATCH request."""
        return await self.request(
            "PATCH",
            path,
            path_params=path_params,
            query=query,
            body=body,
            headers=headers,
            converter=converter,
        )

    async def delete(
        self,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        body: Body = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """Make a DELETE request."""
        return await self.request(
            "DELETE",
            path,
            path_params=path_params,
            query=query,
            body=body,
            headers=headers,
            converter=converter,
        )

    async def close(self) -> None:
        """Release transport resources. No-op by default."""


class HttpApiConnection(ApiConnection):
    """
    httpx-backed connection to ``https://{domain}/api/v2/``.

    One ``httpx.AsyncClient`` is created lazily and shared by all calls.
    """

    def __init__(
        self,
        domain: str,
        token: str,
        *,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        telemetry: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the connection.

        Args:
            domain: Tenant domain (e.g., "tenant.eu.auth0.com")
            token: Management API access token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            telemetry: Send the ``Auth0-Client`` header
            transport: Custom httpx transport (e.g., ``httpx.MockTransport``)
        """
        self.domain = normalize_domain(domain)
        self.base_url = f"https://{self.domain}/api/v2/"
        self.timeout = timeout
        self._token = token
        self._telemetry = telemetry
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpApiConnection":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Accept": "application/json",
            "User-Agent": f"{SDK_NAME}/{__version__}",
            "Authorization": f"Bearer {self._token}",
        }
        if self._telemetry:
            headers["Auth0-Client"] = telemetry_header()
        headers.update(self._default_headers)
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert an HTTP error response to the matching exception."""
        status_code = response.status_code

        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            message = (
                error_data.get("message")
                or error_data.get("error_description")
                or error_data.get("error")
                or f"HTTP {status_code}"
            )
            error_code = error_data.get("errorCode")
            details = error_data
        else:
            message = response.text or f"HTTP {status_code}"
            error_code = None
            details = None

        retry_after = response.headers.get("Retry-After")

        logger.warning(
            f"{response.request.method} {response.request.url.path} failed: "
            f"HTTP {status_code} {error_code or ''}".rstrip()
        )
        raise exception_from_response(
            status_code,
            message,
            error_code=error_code,
            details=details,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )

    def _decode(self, response: httpx.Response, converter: Optional[Converter]) -> Any:
        if not response.content:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise DeserializationError(f"Response is not valid JSON: {e}") from e

        if converter is None:
            return data
        try:
            return converter(data)
        except PydanticValidationError as e:
            raise DeserializationError(
                f"Unexpected response body: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[QueryParams] = None,
        body: Body = None,
        headers: Optional[Dict[str, str]] = None,
        converter: Optional[Converter] = None,
    ) -> Any:
        """
        Send one request and decode the response.

        Raises:
            MissingPathParameterError: If ``path`` has an unresolved placeholder
            InvalidPathParameterError: If a placeholder value is empty, "." or ".."
            ManagementApiError: On HTTP error responses
            NetworkError: On connection failures
            TimeoutError: On request timeout
            DeserializationError: If the body does not match ``converter``
        """
        url = resolve_path(path, path_params)
        params = build_query(query) if query else []
        json_body = serialize_body(body)

        client = await self._get_client()

        if params:
            logger.debug(f"{method} {url}?{encode_query(params)}")
        else:
            logger.debug(f"{method} {url}")

        try:
            response = await client.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=self._build_headers(headers),
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            self._handle_error_response(response)

        return self._decode(response, converter)

    def __repr__(self) -> str:
        return f"HttpApiConnection(base_url={self.base_url!r})"


def normalize_domain(domain: str) -> str:
    """Strip a scheme and trailing slashes from a tenant domain."""
    for scheme in ("https://", "http://"):
        if domain.startswith(scheme):
            domain = domain[len(scheme):]
    return domain.strip("/")
