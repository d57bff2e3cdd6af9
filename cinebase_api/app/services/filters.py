"""
Query-string filtering helpers shared by the list endpoints.

Query parameters arrive as strings.  Numeric filters are parsed
leniently: the longest numeric prefix after leading whitespace wins
(``"7.5abc"`` is 7.5, ``"2000.9"`` is 2000 for year filters) and
anything unparseable becomes NaN.  A NaN bound never compares true, so such a
filter excludes every record instead of raising an error.

Filters are built as a list of predicates and combined with AND.
"""

import math
import re
from typing import Any, Callable, Iterable, List, Optional

from ..core.store import Record


Predicate = Callable[[Record], bool]

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def parse_float(value: str) -> float:
    """Parse the leading decimal number of ``value``; NaN when there is none."""
    match = _FLOAT_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    return float(match.group(0))


def parse_int(value: str) -> float:
    """Parse the leading integer of ``value``; NaN when there is none.

    Returned as a float so NaN can be represented.
    """
    match = _INT_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    return float(int(match.group(0)))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def at_least(field: str, bound: float) -> Predicate:
    """Records whose numeric ``field`` is >= ``bound``."""
    def predicate(record: Record) -> bool:
        value = record.get(field)
        return _is_number(value) and value >= bound
    return predicate


def at_most(field: str, bound: float) -> Predicate:
    """Records whose numeric ``field`` is <= ``bound``."""
    def predicate(record: Record) -> bool:
        value = record.get(field)
        return _is_number(value) and value <= bound
    return predicate


def contains_text(field: str, needle: str) -> Predicate:
    """Case-insensitive substring match against a string field."""
    needle = needle.lower()

    def predicate(record: Record) -> bool:
        value = record.get(field)
        return isinstance(value, str) and needle in value.lower()
    return predicate


def any_tag_contains(field: str, needle: str) -> Predicate:
    """Case-insensitive substring match against any tag of a list field."""
    needle = needle.lower()

    def predicate(record: Record) -> bool:
        tags = record.get(field)
        if isinstance(tags, str):
            tags = [tags]
        if not isinstance(tags, list):
            return False
        return any(isinstance(tag, str) and needle in tag.lower() for tag in tags)
    return predicate


def apply_filters(records: Iterable[Record], predicates: List[Predicate]) -> List[Record]:
    """Return the records matching every predicate, in their original order."""
    return [record for record in records if all(p(record) for p in predicates)]


def nationality_filters(nationality: Optional[str], min_birth_year: Optional[str]) -> List[Predicate]:
    """Predicates for the director and actor list endpoints."""
    predicates: List[Predicate] = []
    if nationality:
        predicates.append(contains_text("nationality", nationality))
    if min_birth_year:
        predicates.append(at_least("birthYear", parse_int(min_birth_year)))
    return predicates
