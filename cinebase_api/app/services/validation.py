"""
Presence checks and comparisons used when creating records.

Request bodies are accepted as arbitrary JSON objects.  The only
validation performed is a presence check: a required field counts as
missing when it is absent or holds a falsy scalar (``None``, ``False``,
``""``, ``0`` or NaN).  Empty lists and objects count as present.
"""

import math
from typing import Any, Dict, Iterable, List

from ..core.errors import BadRequestError


def is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return False


def require_fields(payload: Dict[str, Any], required: Iterable[str]) -> None:
    """Raise ``BadRequestError`` listing every blank required field."""
    required = list(required)
    missing: List[str] = [name for name in required if is_blank(payload.get(name))]
    if missing:
        raise BadRequestError(
            "Missing required fields",
            missing=missing,
            required=required,
        )


def same_name(left: Any, right: Any) -> bool:
    """Case-insensitive equality for strings, plain equality otherwise."""
    if isinstance(left, str) and isinstance(right, str):
        return left.lower() == right.lower()
    return left == right


def as_list(value: Any) -> List[Any]:
    """Wrap a bare scalar in a list; lists pass through untouched."""
    return value if isinstance(value, list) else [value]


def or_default(value: Any, default: Any) -> Any:
    return default if is_blank(value) else value
