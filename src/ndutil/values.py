"""Value kinds for nested arrays."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, ClassVar

import numpy as np


class _Empty:
    """Marker for a cell with no value.

    ``format_array2d`` renders such cells as a blank segment.  There is only
    one instance, ``Empty``; it is falsy and compares by identity.
    """

    __slots__ = ()
    _instance: ClassVar["_Empty | None"] = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Empty"

    __str__ = __repr__


Empty = _Empty()


# ---------------------------------------------------------------------------
# NodeKind
# ---------------------------------------------------------------------------

class NodeKind(Enum):
    Sequence = auto()
    Scalar = auto()


def classify(value: Any) -> NodeKind:
    """Tag *value* as a Sequence or a Scalar.

    - list / tuple → Sequence
    - numpy.ndarray with at least one axis → Sequence
    - everything else (str, bytes, dict, 0-d arrays, numbers …) → Scalar
    """
    if isinstance(value, (list, tuple)):
        return NodeKind.Sequence
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return NodeKind.Sequence
    return NodeKind.Scalar


def is_sequence(value: Any) -> bool:
    return classify(value) is NodeKind.Sequence


def is_missing(value: Any) -> bool:
    """True for ``Empty`` and ``None``."""
    return value is None or isinstance(value, _Empty)


NestedArray = Any  # scalar, or list / tuple / ndarray of NestedArray
SizeVector = list[int]
