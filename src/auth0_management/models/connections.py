from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Connection(BaseModel):
    id: Optional[str] = Field(None, description="Connection identifier")
    name: Optional[str] = Field(None, description="Connection name")
    display_name: Optional[str] = Field(None, description="Name shown on the login screen")
    strategy: Optional[str] = Field(None, description="Identity provider strategy, e.g. 'auth0' or 'google-oauth2'")
    options: Optional[Dict[str, Any]] = Field(None, description="Strategy specific options")
    enabled_clients: Optional[List[str]] = Field(None, description="Client ids for which the connection is enabled")
    realms: Optional[List[str]] = Field(None, description="Realms the connection serves")
    metadata: Optional[Dict[str, str]] = Field(None, description="Free-form string metadata")
    is_domain_connection: Optional[bool] = Field(None, description="Shared across tenants as a domain connection")
    show_as_button: Optional[bool] = Field(None, description="Show as a button on the login screen")
    provisioning_ticket_url: Optional[str] = Field(None, description="AD/LDAP provisioning ticket URL")

    model_config = ConfigDict(extra="allow")


class ConnectionCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=128, description="Connection name")
    strategy: str = Field(min_length=1, description="Identity provider strategy")
    display_name: Optional[str] = Field(None, description="Name shown on the login screen")
    options: Optional[Dict[str, Any]] = Field(None, description="Strategy specific options")
    enabled_clients: Optional[List[str]] = Field(None, description="Client ids for which the connection is enabled")
    realms: Optional[List[str]] = Field(None, description="Realms the connection serves")
    metadata: Optional[Dict[str, str]] = Field(None, description="Free-form string metadata")
    is_domain_connection: Optional[bool] = None
    show_as_button: Optional[bool] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Username-Password-Authentication",
                "strategy": "auth0",
                "enabled_clients": ["AaiyAPdpYdesoKnqjj8HJqRn4T5titww"],
            }
        }
    )


class ConnectionUpdateRequest(BaseModel):
    """Partial update; only fields that were set are sent."""

    display_name: Optional[str] = None
    options: Optional[Dict[str, Any]] = None
    enabled_clients: Optional[List[str]] = None
    realms: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    is_domain_connection: Optional[bool] = None
    show_as_button: Optional[bool] = None


class GetConnectionsRequest(BaseModel):
    """
    Filter for listing connections.

    Every option defaults to None, which sends nothing and leaves the
    server default in place:

    - ``fields``: attribute names to include or exclude (all fields when None).
      A comma separated string is split.
    - ``include_fields``: True includes ``fields``, False excludes them
      (server default: include).
    - ``name``: exact connection name.
    - ``strategy``: accepted strategies; each one is sent as its own
      ``strategy`` query parameter.
    """

    fields: Optional[List[str]] = None
    include_fields: Optional[bool] = None
    name: Optional[str] = None
    strategy: Optional[List[str]] = None

    @field_validator("fields", "strategy", mode="before")
    @classmethod
    def split_comma_separated(cls, value):
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value
