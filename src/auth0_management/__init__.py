"""
Auth0 Management API client library.

A type-safe async HTTP client for the Auth0 Management API.

Example usage:
    ```python
    from auth0_management import ManagementApiClient, PaginationInfo
    from auth0_management.models import GetConnectionsRequest

    async with ManagementApiClient("tenant.eu.auth0.com", token) as client:
        # List resources
        page = await client.connections.get_all(
            GetConnectionsRequest(strategy=["auth0", "google-oauth2"]),
            PaginationInfo(per_page=25, include_totals=True),
        )
        print(page.paging.total)

        # Get a single resource
        connection = await client.connections.get("con_123", fields=["name"])
    ```
"""

__version__ = "0.1.0"

# Main client
from auth0_management.client import ManagementApiClient

# Connection components (for advanced usage)
from auth0_management.http import (
    ApiConnection,
    HttpApiConnection,
)

# Base classes (for building custom clients)
from auth0_management.base import BaseResourceClient

# Plumbing
from auth0_management.paging import (
    PagedList,
    PagedListConverter,
    PaginationInfo,
    PagingInformation,
)
from auth0_management.paths import resolve_path
from auth0_management.query import build_query, encode_query

# Configuration
from auth0_management.config import ManagementApiSettings, get_settings

# Exceptions
from auth0_management.exceptions import (
    ManagementApiError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    DeserializationError,
    MissingArgumentError,
    MissingPathParameterError,
    InvalidPathParameterError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "ManagementApiClient",
    # Connection
    "ApiConnection",
    "HttpApiConnection",
    # Base classes
    "BaseResourceClient",
    # Plumbing
    "PagedList",
    "PagedListConverter",
    "PaginationInfo",
    "PagingInformation",
    "resolve_path",
    "build_query",
    "encode_query",
    # Configuration
    "ManagementApiSettings",
    "get_settings",
    # Exceptions
    "ManagementApiError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "DeserializationError",
    "MissingArgumentError",
    "MissingPathParameterError",
    "InvalidPathParameterError",
    "exception_from_response",
]
