"""
Path Extractor

Typed, fault-tolerant access into the nested arrays of a Google Maps place
response. The format has no field names, so every field is addressed by a
path of integer indices, e.g. data[4][7] for the rating.

    get_nth(data, 4, 7, cast=float)   -> 4.6, or 0.0 if anything is off
    get_nth(data, 13, cast=list)      -> ['Restaurant', ...], or []

Any structural mismatch along the path (index out of range, null, scalar
where a list was expected, wrong final type) yields the zero value of the
requested type instead of raising.
"""

import math
from typing import Any, Tuple

Path = Tuple[int, ...]

_ZERO_VALUES = {
    str: "",
    float: 0.0,
    int: 0,
    bool: False,
}


def zero_value(cast: type) -> Any:
    """Return the zero value for a cast type ("" for str, [] for list, ...)."""
    if cast is list:
        return []
    try:
        return _ZERO_VALUES[cast]
    except KeyError:
        raise TypeError(f"Unsupported cast type: {cast!r}")


def is_number(value: Any) -> bool:
    """Whether value is a finite JSON number (bools, NaN and infinities are not)."""
    # bool is an int subclass; JSON true/false are never numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _coerce(value: Any, cast: type) -> Any:
    if cast is float:
        if is_number(value):
            return float(value)
    elif cast is int:
        if is_number(value):
            return int(value)
    elif isinstance(value, cast):
        return value
    return zero_value(cast)


def get_nth(arr: Any, *indices: int, cast: type = str) -> Any:
    """Walk arr by indices and return the value found, coerced to cast.

    Args:
        arr: Root node (normally a list from json.loads)
        *indices: Path of non-negative integer indices
        cast: Target type: str, float, int, bool or list

    Returns:
        The value at the path, or zero_value(cast) on any mismatch
    """
    default = zero_value(cast)

    if not indices:
        return default

    current = arr
    for idx in indices[:-1]:
        if not isinstance(current, list) or not 0 <= idx < len(current):
            return default
        current = current[idx]
        if current is None:
            return default

    last = indices[-1]
    if not isinstance(current, list) or not current or not 0 <= last < len(current):
        return default

    return _coerce(current[last], cast)


def get_strings(arr: Any, *indices: int) -> list:
    """Return the list at the path with every item as text ("" for non-text)."""
    items = get_nth(arr, *indices, cast=list)
    return [item if isinstance(item, str) else "" for item in items]
