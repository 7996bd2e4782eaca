"""Query string assembly for Management API requests."""

from enum import Enum
from typing import Any, Iterable, List, Mapping, Tuple, Union
from urllib.parse import urlencode

QueryParams = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

_REPEATABLE = (list, tuple, set, frozenset)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _format_value(value.value)
    return str(value)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def build_query(params: QueryParams) -> List[Tuple[str, str]]:
    """
    Flatten query parameters into ``(key, value)`` pairs.

    None and empty values are dropped, booleans become ``"true"``/``"false"``
    and list values repeat their key once per element in order.

    Args:
        params: Mapping or iterable of pairs

    Returns:
        Pairs ready for ``httpx`` ``params=`` or ``urlencode``
    """
    items = params.items() if isinstance(params, Mapping) else params
    pairs: List[Tuple[str, str]] = []
    for key, value in items:
        if isinstance(value, _REPEATABLE):
            pairs.extend(
                (key, _format_value(element))
                for element in value
                if not _is_absent(element)
            )
        elif not _is_absent(value):
            pairs.append((key, _format_value(value)))
    return pairs


def encode_query(params: QueryParams) -> str:
    """Build the encoded query component (without the leading ``?``)."""
    return urlencode(build_query(params))
