"""
Base class for resource clients.

A resource client maps each method to one verb + path template + query +
body on the shared ``ApiConnection``. It holds no per-call state, so one
instance can serve concurrent tasks.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from auth0_management.http import ApiConnection
from auth0_management.paging import PagedListConverter, PaginationInfo

T = TypeVar("T", bound=BaseModel)


class BaseResourceClient:
    """
    Common plumbing for resource clients.

    Subclasses set ``base_path`` and expose one coroutine per API operation.
    """

    base_path: str = ""

    def __init__(self, connection: ApiConnection) -> None:
        """
        Initialize the resource client.

        Args:
            connection: The connection used to communicate with the API
        """
        self._connection = connection

    @property
    def connection(self) -> ApiConnection:
        """Get the underlying API connection."""
        return self._connection

    def _build_path(self, *parts: str) -> str:
        """Join ``base_path`` with further template segments."""
        clean_parts = [p.strip("/") for p in parts if p]
        if clean_parts:
            return f"{self.base_path}/{'/'.join(clean_parts)}"
        return self.base_path

    @staticmethod
    def _pagination_params(pagination: Optional[PaginationInfo]) -> Dict[str, Any]:
        """Query parameters for a page request, empty when unpaged."""
        if pagination is None:
            return {}
        return {
            "page": pagination.page_no,
            "per_page": pagination.per_page,
            "include_totals": pagination.include_totals,
        }

    @staticmethod
    def _paged(collection_field: str, item_model: Type[T]) -> PagedListConverter[T]:
        return PagedListConverter(collection_field, item_model)
