"""
Resource clients, one per group of Management API endpoints.
"""

from auth0_management.endpoints.connections import ConnectionsClient
from auth0_management.endpoints.roles import RolesClient

__all__ = [
    "ConnectionsClient",
    "RolesClient",
]
