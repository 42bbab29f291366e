"""Rendering of scalars and nested arrays as display strings."""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

import numpy as np

from .errors import CyclicStructureError, DimensionMismatch
from .number_format import format_number
from .shape import size
from .values import NodeKind, _Empty, classify, is_missing


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """Format any value for compact one-line display."""
    return _format_value(value, frozenset())


def _format_value(value: Any, path: frozenset[int]) -> str:
    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()
    if isinstance(value, _Empty):
        return "Empty"
    if value is None:
        return "None"
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, Real):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"'
    if classify(value) is NodeKind.Sequence:
        return _format_array(value, path)
    if isinstance(value, Mapping):
        if id(value) in path:
            raise CyclicStructureError(value)
        inner = path | {id(value)}
        items = ", ".join(
            f"{_format_value(k, inner)}: {_format_value(v, inner)}"
            for k, v in value.items()
        )
        return "{" + items + "}"
    if callable(value):
        return "function"
    return str(value)


# ---------------------------------------------------------------------------
# Nested arrays
# ---------------------------------------------------------------------------

def format_array(array: Any) -> str:
    """Recursively format an n-dimensional array without checking its shape.

    Example output: ``"[[1, 2], [3, 4]]"``.  Ragged input is rendered as-is.
    """
    return _format_array(array, frozenset())


def _format_array(array: Any, path: frozenset[int]) -> str:
    if classify(array) is not NodeKind.Sequence:
        return _format_value(array, path)
    if id(array) in path:
        raise CyclicStructureError(array)
    inner = path | {id(array)}
    return "[" + ", ".join(_format_array(x, inner) for x in array) + "]"


def format_array2d(array: Any) -> str:
    """Format a two dimensional array as ``"[1, 2; 3, 4]"``.

    Rows are separated by ``"; "`` and cells by ``", "``.  Missing cells
    (``Empty`` / ``None``) are left blank.

    Raises:
        DimensionMismatch: *array* is not rectangular or not two dimensional.
    """
    s = size(array)
    if len(s) != 2:
        raise DimensionMismatch(
            len(s),
            2,
            message=f"Array must be two dimensional (size: {format_array(s)})",
        )

    rows = []
    for row in array:
        cells = ["" if is_missing(cell) else format_value(cell) for cell in row]
        rows.append(", ".join(cells))
    return "[" + "; ".join(rows) + "]"
