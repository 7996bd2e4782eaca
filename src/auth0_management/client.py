"""
Main Management API client.

This module provides the ManagementApiClient class, the primary entry point
for interacting with the Auth0 Management API. It owns the API connection
and hands it to lazily created resource clients.
"""

from typing import Any, Dict, Optional
import logging

from auth0_management.config import ManagementApiSettings, get_settings
from auth0_management.http import ApiConnection, HttpApiConnection

logger = logging.getLogger(__name__)


class ManagementApiClient:
    """
    Main client for the Auth0 Management API.

    Example usage:
        ```python
        async with ManagementApiClient("tenant.eu.auth0.com", token) as client:
            connections = await client.connections.get_all(
                GetConnectionsRequest(strategy=["auth0"]),
                PaginationInfo(page_no=0, per_page=25, include_totals=True),
            )
            role = await client.roles.get("rol_123")
        ```

    A custom ``ApiConnection`` can be injected instead of the httpx one.
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        token: Optional[str] = None,
        *,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        telemetry: bool = True,
        connection: Optional[ApiConnection] = None,
    ):
        """
        Initialize the client.

        Args:
            domain: Tenant domain (e.g., "tenant.eu.auth0.com")
            token: Management API access token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            telemetry: Send the ``Auth0-Client`` header
            connection: Pre-built connection; ``domain`` and ``token`` are
                then ignored and the caller stays responsible for closing it

        Raises:
            ValueError: If neither ``connection`` nor ``domain`` and ``token`` are given
        """
        self._owns_connection = connection is None
        if connection is None:
            if not domain or not token:
                raise ValueError("domain and token are required when no connection is given")
            connection = HttpApiConnection(
                domain,
                token,
                timeout=timeout,
                headers=headers,
                telemetry=telemetry,
            )
        self._connection = connection

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ManagementApiSettings] = None,
    ) -> "ManagementApiClient":
        """
        Build a client from settings (environment variables by default).
        """
        if settings is None:
            settings = get_settings()
        return cls(
            settings.domain,
            settings.token,
            timeout=settings.timeout,
            telemetry=settings.telemetry,
        )

    @property
    def connection(self) -> ApiConnection:
        """Get the underlying API connection for custom requests."""
        return self._connection

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def __getattr__(self, name: str) -> Any:
        """
        Dynamically access resource clients by name.

        ``client.connections`` resolves to ``ConnectionsClient``,
        ``client.roles`` to ``RolesClient``. Instances are cached.

        Raises:
            AttributeError: If no client exists for the given name
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name in self._endpoint_clients:
            return self._endpoint_clients[name]

        from auth0_management import endpoints

        class_name = "".join(p.capitalize() for p in name.split("_")) + "Client"
        client_class = getattr(endpoints, class_name, None)
        if client_class is None:
            raise AttributeError(
                f"No endpoint client found for '{name}'. "
                f"Expected class: {class_name}"
            )

        client = client_class(self._connection)
        self._endpoint_clients[name] = client
        return client

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """
        Close the client and release resources.

        A connection passed in through ``connection=`` belongs to the caller
        and is left open.
        """
        if self._owns_connection:
            await self._connection.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "ManagementApiClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        return f"ManagementApiClient(connection={self._connection!r})"
