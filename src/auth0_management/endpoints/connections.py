"""
Client for the ``/connections`` endpoints.
"""

import warnings
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from auth0_management.base import BaseResourceClient
from auth0_management.exceptions import require
from auth0_management.models.connections import (
    Connection,
    ConnectionCreateRequest,
    ConnectionUpdateRequest,
    GetConnectionsRequest,
)
from auth0_management.paging import PagedList, PaginationInfo


def _join_fields(fields: Union[str, Sequence[str], None]) -> Optional[str]:
    if fields is None or isinstance(fields, str):
        return fields
    return ",".join(fields)


class ConnectionsClient(BaseResourceClient):
    """
    Client for connections endpoints.
    """

    base_path = "connections"

    @staticmethod
    def _list_query(
        *,
        fields: Union[str, Sequence[str], None] = None,
        include_fields: Optional[bool] = None,
        name: Optional[str] = None,
        strategy: Optional[Iterable[str]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
    ) -> List[Tuple[str, Any]]:
        """Query shared by every list form; ``strategy`` repeats its key."""
        if isinstance(strategy, str):
            strategy = [strategy]
        return [
            ("fields", _join_fields(fields)),
            ("include_fields", include_fields),
            ("name", name),
            ("page", page),
            ("per_page", per_page),
            ("include_totals", include_totals),
            ("strategy", list(strategy) if strategy is not None else None),
        ]

    async def create(self, request: ConnectionCreateRequest) -> Connection:
        """
        Create a new connection.

        Args:
            request: Properties of the new connection

        Returns:
            The connection as created by the server
        """
        require(request, "request")
        return await self._connection.post(
            self.base_path,
            body=request,
            converter=Connection.model_validate,
        )

    async def get(
        self,
        id: str,
        fields: Union[str, Sequence[str], None] = None,
        include_fields: bool = True,
    ) -> Connection:
        """
        Retrieve a connection by id.

        Args:
            id: Connection identifier
            fields: Fields to include or exclude, all fields when None
            include_fields: Include (True) or exclude (False) ``fields``

        Raises:
            NotFoundError: If the connection doesn't exist
        """
        require(id, "id")
        return await self._connection.get(
            self._build_path("{id}"),
            path_params={"id": id},
            query=[
                ("fields", _join_fields(fields)),
                ("include_fields", include_fields),
            ],
            converter=Connection.model_validate,
        )

    async def get_all(
        self,
        request: GetConnectionsRequest,
        pagination: Optional[PaginationInfo] = None,
    ) -> PagedList[Connection]:
        """
        List connections matching ``request``.

        Without ``pagination`` the server's unpaged behaviour applies and the
        result carries no paging metadata.

        Args:
            request: Filter options
            pagination: Page number, page size and totals flag

        Raises:
            MissingArgumentError: If ``request`` is None
        """
        require(request, "request")
        query = self._list_query(
            fields=request.fields,
            include_fields=request.include_fields,
            name=request.name,
            strategy=request.strategy,
            **self._pagination_params(pagination),
        )
        return await self._connection.get(
            self.base_path,
            query=query,
            converter=self._paged("connections", Connection),
        )

    async def get_all_legacy(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        include_totals: Optional[bool] = None,
        fields: Union[str, Sequence[str], None] = None,
        include_fields: Optional[bool] = None,
        name: Optional[str] = None,
        strategy: Optional[Iterable[str]] = None,
    ) -> PagedList[Connection]:
        """Deprecated. Use ``get_all(GetConnectionsRequest(...), PaginationInfo(...))``."""
        warnings.warn(
            "get_all_legacy is deprecated. "
            "Use get_all(GetConnectionsRequest, PaginationInfo) instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        query = self._list_query(
            fields=fields,
            include_fields=include_fields,
            name=name,
            strategy=strategy,
            page=page,
            per_page=per_page,
            include_totals=include_totals,
        )
        return await self._connection.get(
            self.base_path,
            query=query,
            converter=self._paged("connections", Connection),
        )

    async def get_all_by_strategy(
        self,
        strategy: Optional[str],
        fields: Union[str, Sequence[str], None] = None,
        include_fields: bool = True,
        name: Optional[str] = None,
    ) -> List[Connection]:
        """Deprecated. Use the paged ``get_all`` instead."""
        warnings.warn(
            "get_all_by_strategy is deprecated. Use get_all instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        query = self._list_query(
            fields=fields,
            include_fields=include_fields,
            name=name,
            strategy=strategy,
        )
        connections = await self._connection.get(
            self.base_path,
            query=query,
            converter=self._paged("connections", Connection),
        )
        return list(connections)

    async def update(self, id: str, request: ConnectionUpdateRequest) -> Connection:
        """
        Update a connection. Only fields set on ``request`` are sent.

        Raises:
            NotFoundError: If the connection doesn't exist
        """
        require(id, "id")
        require(request, "request")
        return await self._connection.patch(
            self._build_path("{id}"),
            body=request,
            path_params={"id": id},
            converter=Connection.model_validate,
        )

    async def delete(self, id: str) -> None:
        """
        Delete a connection and all its users.

        Raises:
            NotFoundError: If the connection doesn't exist
        """
        require(id, "id")
        await self._connection.delete(
            self._build_path("{id}"),
            path_params={"id": id},
        )

    async def delete_user(self, id: str, email: str) -> None:
        """
        Delete a user of a database connection by email.

        Args:
            id: Connection identifier
            email: Email of the user to delete
        """
        require(id, "id")
        require(email, "email")
        await self._connection.delete(
            self._build_path("{id}", "users"),
            path_params={"id": id},
            query=[("email", email)],
        )
