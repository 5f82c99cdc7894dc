# /classboard/services/reporting_helpers/grouping.py

"""
Shared grouping and ranking helpers for the reporting engine.

Both report pipelines (the assignment tree and the behavior leaderboard) start
from flat rows and need the same two primitives: "group rows by a key while
preserving insertion order" and "find every entry tied at the maximum". They
live here so neither pipeline carries its own copy of the loops.

Rows may be plain mappings (what the repositories return) or attribute objects
(ORM instances, test doubles). A field that is missing reads as None, and a row
whose grouping key is None is excluded rather than reported as an error.
"""

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Union

ExactNumber = Union[int, Decimal]


# --- Row Access ---

def row_value(row: Any, field: str) -> Any:
    """Reads `field` from a mapping or an attribute object; missing reads as None."""
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def group_by_key(rows: Iterable[Any], key: Union[str, Callable[[Any], Any]]) -> Dict[Hashable, List[Any]]:
    """
    Partitions `rows` into {key: [rows...]}.

    Group order follows the first appearance of each key and rows keep their
    input order within a group. Keys are compared exactly; no case folding or
    type coercion is applied. Rows whose key is None, or is unhashable, are
    left out of every group.
    """
    key_of = key if callable(key) else (lambda row: row_value(row, key))
    groups: Dict[Hashable, List[Any]] = {}
    for row in rows:
        group_key = key_of(row)
        if group_key is None:
            continue
        try:
            groups.setdefault(group_key, []).append(row)
        except TypeError:
            # Unhashable key: the row cannot match any group.
            continue
    return groups


# --- Numeric Helpers ---

def exact_quantity(value: Any) -> Optional[ExactNumber]:
    """
    Converts a point quantity into a value that sums exactly.

    Integral quantities stay ints. Fractional quantities become Decimals built
    from their shortest decimal text, so 0.1 + 0.2 equals 0.3 and equal logical
    totals compare equal no matter the summation order. Returns None for
    anything that is not a finite number (booleans included).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else Decimal(repr(value))
    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None
    return None


def as_number(value: Any) -> Optional[Union[int, float]]:
    """
    Converts an exact or raw numeric value into a JSON-friendly int or float.
    Integral values come back as ints; unreadable values come back as None.
    """
    exact = exact_quantity(value)
    if exact is None:
        return None
    if isinstance(exact, int):
        return exact
    if exact == exact.to_integral_value():
        return int(exact)
    return float(exact)


# --- Shared-Rank Ranking ---

def max_total(totals: Dict[Hashable, ExactNumber]) -> Optional[ExactNumber]:
    """First pass: the maximum total, or None when there are no totals."""
    maximum = None
    for total in totals.values():
        if maximum is None or total > maximum:
            maximum = total
    return maximum


def leaders_at(totals: Dict[Hashable, ExactNumber], maximum: Optional[ExactNumber]) -> List[Hashable]:
    """Second pass: every key whose total is exactly equal to `maximum`, in input order."""
    if maximum is None:
        return []
    return [entity for entity, total in totals.items() if total == maximum]


def co_leaders(totals: Dict[Hashable, ExactNumber]) -> List[Hashable]:
    """All keys sharing the top total. Ties are never broken."""
    return leaders_at(totals, max_total(totals))
