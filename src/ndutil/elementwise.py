"""Element-wise helpers over sequences and mappings."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .errors import DimensionMismatch
from .values import is_sequence


def map_values(obj: Any, fn: Callable[[Any], Any]) -> list | dict:
    """Apply *fn* to every element of a sequence or every value of a mapping.

    Sequences map to a list, mappings to a dict with the same keys.
    """
    if is_sequence(obj):
        return [fn(x) for x in obj]
    if isinstance(obj, Mapping):
        return {k: fn(v) for k, v in obj.items()}
    raise TypeError(f"Sequence or mapping expected, got {type(obj).__name__}")


def map2(a: Any, b: Any, fn: Callable[[Any, Any], Any]) -> Any:
    """Apply *fn* pairwise, broadcasting a scalar against a sequence.

    - sequence, sequence → ``[fn(a[i], b[i]) ...]`` (lengths must match)
    - sequence, scalar   → ``[fn(a[i], b) ...]``
    - scalar, sequence   → ``[fn(a, b[i]) ...]``
    - scalar, scalar     → ``fn(a, b)``
    """
    a_seq = is_sequence(a)
    b_seq = is_sequence(b)

    if a_seq and b_seq:
        if len(a) != len(b):
            raise DimensionMismatch(len(a), len(b))
        return [fn(x, y) for x, y in zip(a, b)]
    if a_seq:
        return [fn(x, b) for x in a]
    if b_seq:
        return [fn(a, y) for y in b]
    return fn(a, b)


def for_each(obj: Any, callback: Callable[[Any, Any, Any], Any]) -> None:
    """Call ``callback(value, index_or_key, obj)`` for each element of *obj*."""
    if is_sequence(obj):
        for i, x in enumerate(obj):
            callback(x, i, obj)
        return
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            callback(v, k, obj)
        return
    raise TypeError(f"Sequence or mapping expected, got {type(obj).__name__}")
