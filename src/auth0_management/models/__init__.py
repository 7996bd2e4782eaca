"""Request and response models for the Management API."""

from auth0_management.models.connections import (
    Connection,
    ConnectionCreateRequest,
    ConnectionUpdateRequest,
    GetConnectionsRequest,
)
from auth0_management.models.roles import (
    AssignedUser,
    AssignPermissionsRequest,
    AssignUsersRequest,
    GetRolesRequest,
    Permission,
    PermissionIdentity,
    Role,
    RoleCreateRequest,
    RoleUpdateRequest,
    deprecated_alias,
)

__all__ = [
    "Connection",
    "ConnectionCreateRequest",
    "ConnectionUpdateRequest",
    "GetConnectionsRequest",
    "AssignedUser",
    "AssignPermissionsRequest",
    "AssignUsersRequest",
    "GetRolesRequest",
    "Permission",
    "PermissionIdentity",
    "Role",
    "RoleCreateRequest",
    "RoleUpdateRequest",
]


def __getattr__(name: str):
    return deprecated_alias(__name__, name)
