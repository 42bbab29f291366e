"""Shape inference and validation for nested arrays.

Shape is inferred from the *first* element at each depth only
(:func:`compute_size`), then every branch is checked against it
(:func:`validate`).  :func:`size` combines both and is the entry point
callers should use; ``compute_size`` alone is an unchecked hint.
"""

from __future__ import annotations

import logging

from .errors import CyclicStructureError, DimensionMismatch
from .values import NestedArray, NodeKind, SizeVector, classify

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------

def compute_size(value: NestedArray) -> SizeVector:
    """Infer the size vector of *value* from its first branch.

    Examples::

        compute_size(5)               → []
        compute_size([])              → [0]
        compute_size([[1, 2], [3]])   → [2, 2]   (second row never inspected)
    """
    return _compute_size(value, frozenset())


def _compute_size(value: NestedArray, path: frozenset[int]) -> SizeVector:
    if classify(value) is NodeKind.Scalar:
        return []

    n = len(value)
    if n == 0:
        return [0]

    if id(value) in path:
        raise CyclicStructureError(value)
    return [n] + _compute_size(value[0], path | {id(value)})


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate(value: NestedArray, size: SizeVector, dim: int = 0) -> None:
    """Check that every branch of *value* matches *size*, starting at *dim*.

    Walks the whole structure depth-first, index-ascending, and raises
    :class:`DimensionMismatch` at the first disagreement.
    """
    if size and not 0 <= dim < len(size):
        raise DimensionMismatch(
            dim,
            len(size),
            message=f"Dimension {dim} out of range for size {size}",
        )
    _validate(value, size, dim, frozenset())


def _validate(value: NestedArray, size: SizeVector, dim: int, path: frozenset[int]) -> None:
    kind = classify(value)

    if not size:
        if kind is NodeKind.Sequence:
            raise DimensionMismatch(len(value), 0)
        return

    if kind is NodeKind.Scalar:
        raise DimensionMismatch(
            dim,
            len(size),
            message=(
                f"Dimension mismatch ({dim} < {len(size)}): "
                f"expected a sequence at depth {dim}, got {type(value).__name__}"
            ),
        )

    n = len(value)
    if n != size[dim]:
        raise DimensionMismatch(n, size[dim])

    if id(value) in path:
        raise CyclicStructureError(value)

    last = len(size) - 1
    if dim < last:
        child_path = path | {id(value)}
        for child in value:
            if classify(child) is not NodeKind.Sequence:
                raise DimensionMismatch(
                    last,
                    len(size),
                    message=f"Dimension mismatch ({last} < {len(size)})",
                )
            _validate(child, size, dim + 1, child_path)
    else:
        # last dimension: no element may be a sequence
        for child in value:
            if classify(child) is NodeKind.Sequence:
                raise DimensionMismatch(
                    len(size) + 1,
                    len(size),
                    message=f"Dimension mismatch ({len(size) + 1} > {len(size)})",
                )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def size(value: NestedArray) -> SizeVector:
    """Return the validated size vector of *value*.

    Raises :class:`DimensionMismatch` if *value* is not rectangular.
    """
    s = compute_size(value)
    try:
        validate(value, s)
    except DimensionMismatch as exc:
        logger.debug("Rejected nested array with inferred size %s: %s", s, exc)
        raise
    return s
