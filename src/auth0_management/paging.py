"""
Paged list support.

List endpoints answer with a bare JSON array when no paging was requested
and with an envelope such as ``{"connections": [...], "total": 3}`` when
``include_totals`` was set. ``PagedListConverter`` accepts both.
"""

from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from auth0_management.exceptions import DeserializationError

T = TypeVar("T", bound=BaseModel)

PAGING_FIELDS = ("total", "start", "limit", "length")


class PaginationInfo(BaseModel):
    """Page request sent with list operations."""

    page_no: int = Field(0, ge=0, description="Zero-based page index")
    per_page: int = Field(50, gt=0, description="Number of items per page")
    include_totals: bool = Field(False, description="Wrap results in an envelope with totals")

    model_config = ConfigDict(frozen=True)


class PagingInformation(BaseModel):
    """Totals returned alongside an enveloped list."""

    total: Optional[int] = None
    start: Optional[int] = None
    limit: Optional[int] = None
    length: Optional[int] = None


class PagedList(List[T]):
    """A list of resource models plus optional paging metadata."""

    def __init__(self, items: Iterable[T] = (), paging: Optional[PagingInformation] = None):
        super().__init__(items)
        self.paging = paging

    def __repr__(self) -> str:
        return f"PagedList({list.__repr__(self)}, paging={self.paging!r})"


class PagedListConverter(Generic[T]):
    """Convert a list response, enveloped or bare, into a ``PagedList``."""

    def __init__(self, collection_field: str, item_model: Type[T]):
        self.collection_field = collection_field
        self.item_model = item_model

    def _validate_items(self, items: Any) -> List[T]:
        if not isinstance(items, list):
            raise DeserializationError(
                f"Expected a list of {self.item_model.__name__}, got {type(items).__name__}"
            )
        try:
            return [self.item_model.model_validate(item) for item in items]
        except PydanticValidationError as e:
            raise DeserializationError(
                f"Invalid {self.item_model.__name__} in response: {e}",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def __call__(self, data: Any) -> PagedList[T]:
        if isinstance(data, dict) and self.collection_field in data:
            items = self._validate_items(data[self.collection_field])
            paging = PagingInformation(
                **{key: data[key] for key in PAGING_FIELDS if key in data}
            )
            return PagedList(items, paging)

        if isinstance(data, list):
            return PagedList(self._validate_items(data))

        raise DeserializationError(
            f"Expected '{self.collection_field}' envelope or a JSON array"
        )
