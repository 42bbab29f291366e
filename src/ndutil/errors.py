"""Exceptions raised by ndutil."""

from __future__ import annotations


class NDUtilError(Exception):
    """Base class for all ndutil errors."""


class DimensionMismatch(NDUtilError, ValueError):
    """Actual structure disagrees with the inferred or declared size.

    ``expected`` and ``actual`` hold the concrete lengths (or numbers of
    dimensions) that were compared.
    """

    def __init__(
        self,
        actual: int | None = None,
        expected: int | None = None,
        message: str | None = None,
    ) -> None:
        self.actual = actual
        self.expected = expected
        if message is None:
            message = f"Dimension mismatch ({actual} != {expected})"
        super().__init__(message)


class CyclicStructureError(NDUtilError, ValueError):
    """A sequence contains itself somewhere below its own position."""

    def __init__(self, value: object) -> None:
        self.value_type = type(value).__name__
        super().__init__(f"Cyclic structure detected ({self.value_type} contains itself)")
