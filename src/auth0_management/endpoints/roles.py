"""
Client for the ``/roles`` endpoints.
"""

from typing import Optional

from auth0_management.base import BaseResourceClient
from auth0_management.exceptions import require
from auth0_management.models.roles import (
    AssignedUser,
    AssignPermissionsRequest,
    AssignUsersRequest,
    GetRolesRequest,
    Permission,
    Role,
    RoleCreateRequest,
    RoleUpdateRequest,
)
from auth0_management.paging import PagedList, PaginationInfo


class RolesClient(BaseResourceClient):
    """
    Client for roles endpoints.
    """

    base_path = "roles"

    async def create(self, request: RoleCreateRequest) -> Role:
        """Create a role."""
        require(request, "request")
        return await self._connection.post(
            self.base_path,
            body=request,
            converter=Role.model_validate,
        )

    async def get(self, id: str) -> Role:
        """Retrieve a role by id."""
        require(id, "id")
        return await self._connection.get(
            self._build_path("{id}"),
            path_params={"id": id},
            converter=Role.model_validate,
        )

    async def get_all(
        self,
        request: GetRolesRequest,
        pagination: Optional[PaginationInfo] = None,
    ) -> PagedList[Role]:
        """
        List roles matching ``request``.

        Raises:
            MissingArgumentError: If ``request`` is None
        """
        require(request, "request")
        query = {
            "name_filter": request.name_filter,
            **self._pagination_params(pagination),
        }
        return await self._connection.get(
            self.base_path,
            query=query,
            converter=self._paged("roles", Role),
        )

    async def update(self, id: str, request: RoleUpdateRequest) -> Role:
        """Update a role. Only fields set on ``request`` are sent."""
        require(id, "id")
        require(request, "request")
        return await self._connection.patch(
            self._build_path("{id}"),
            body=request,
            path_params={"id": id},
            converter=Role.model_validate,
        )

    async def delete(self, id: str) -> None:
        """Delete a role."""
        require(id, "id")
        await self._connection.delete(
            self._build_path("{id}"),
            path_params={"id": id},
        )

    async def get_users(
        self,
        id: str,
        pagination: Optional[PaginationInfo] = None,
    ) -> PagedList[AssignedUser]:
        """List the users assigned to a role."""
        require(id, "id")
        return await self._connection.get(
            self._build_path("{id}", "users"),
            path_params={"id": id},
            query=self._pagination_params(pagination),
            converter=self._paged("users", AssignedUser),
        )

    async def assign_users(self, id: str, request: AssignUsersRequest) -> None:
        """Assign users to a role."""
        require(id, "id")
        require(request, "request")
        await self._connection.post(
            self._build_path("{id}", "users"),
            body=request,
            path_params={"id": id},
        )

    async def get_permissions(
        self,
        id: str,
        pagination: Optional[PaginationInfo] = None,
    ) -> PagedList[Permission]:
        """List the permissions granted by a role."""
        require(id, "id")
        return await self._connection.get(
            self._build_path("{id}", "permissions"),
            path_params={"id": id},
            query=self._pagination_params(pagination),
            converter=self._paged("permissions", Permission),
        )

    async def assign_permissions(self, id: str, request: AssignPermissionsRequest) -> None:
        """Grant permissions to a role."""
        require(id, "id")
        require(request, "request")
        await self._connection.post(
            self._build_path("{id}", "permissions"),
            body=request,
            path_params={"id": id},
        )

    async def remove_permissions(self, id: str, request: AssignPermissionsRequest) -> None:
        """Revoke permissions from a role."""
        require(id, "id")
        require(request, "request")
        await self._connection.delete(
            self._build_path("{id}", "permissions"),
            body=request,
            path_params={"id": id},
        )
