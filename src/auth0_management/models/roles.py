import warnings
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(BaseModel):
    id: Optional[str] = Field(None, description="Role identifier")
    name: Optional[str] = Field(None, description="Role name")
    description: Optional[str] = Field(None, description="Role description")

    model_config = ConfigDict(extra="allow")


class RoleCreateRequest(BaseModel):
    name: str = Field(min_length=1, description="Role name")
    description: Optional[str] = Field(None, description="Role description")


class RoleUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, description="Role name")
    description: Optional[str] = Field(None, description="Role description")


class GetRolesRequest(BaseModel):
    """
    Filter for listing roles.

    - ``name_filter``: case-insensitive substring of the role name
      (None lists every role).
    """

    name_filter: Optional[str] = None


class Permission(BaseModel):
    permission_name: Optional[str] = None
    resource_server_identifier: Optional[str] = None
    resource_server_name: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class PermissionIdentity(BaseModel):
    """Reference to a permission of a resource server (API)."""

    identifier: str = Field(
        serialization_alias="resource_server_identifier",
        validation_alias="resource_server_identifier",
        description="Identifier (audience) of the resource server",
    )
    name: str = Field(
        serialization_alias="permission_name",
        validation_alias="permission_name",
        description="Name of the permission",
    )

    model_config = ConfigDict(populate_by_name=True)


class AssignPermissionsRequest(BaseModel):
    """Permissions to assign to, or remove from, a role."""

    permissions: List[PermissionIdentity]


class AssignUsersRequest(BaseModel):
    """User ids to assign to a role."""

    users: List[str] = Field(min_length=1)


class AssignedUser(BaseModel):
    user_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None

    model_config = ConfigDict(extra="allow")


_DEPRECATED_ALIASES = {
    "AssociatePermissionsRequest": "AssignPermissionsRequest",
}


def deprecated_alias(module: str, name: str, stacklevel: int = 3):
    """Resolve a renamed model, warning that the old name is deprecated."""
    if name not in _DEPRECATED_ALIASES:
        raise AttributeError(f"module {module!r} has no attribute {name!r}")
    replacement = _DEPRECATED_ALIASES[name]
    warnings.warn(
        f"{name} is deprecated. Use {replacement} instead.",
        DeprecationWarning,
        stacklevel=stacklevel,
    )
    return globals()[replacement]


def __getattr__(name: str):
    return deprecated_alias(__name__, name)
