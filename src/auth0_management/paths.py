"""Path template resolution for Management API endpoints."""

import re
from typing import Any, Mapping, Optional
from urllib.parse import quote

from auth0_management.exceptions import InvalidPathParameterError, MissingPathParameterError

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")
_UNSAFE_SEGMENTS = ("", ".", "..")


def resolve_path(template: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute ``{name}`` placeholders in ``template``.

    Values are percent-encoded as a single path segment, so ``auth0|123``
    becomes ``auth0%7C123`` and a ``/`` inside a value never adds a segment.

    Args:
        template: Path such as ``"connections/{id}/users"``
        path_params: Placeholder name to value

    Returns:
        The resolved path

    Raises:
        MissingPathParameterError: If a placeholder has no value or its value is None
        InvalidPathParameterError: If a value is empty, "." or ".."
    """
    params = path_params or {}

    def _substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            raise MissingPathParameterError(template, name)
        segment = str(value)
        # Empty and dot segments are collapsed by URL normalization.
        if segment in _UNSAFE_SEGMENTS:
            raise InvalidPathParameterError(template, name, value)
        return quote(segment, safe="")

    return _PLACEHOLDER.sub(_substitute, template)

