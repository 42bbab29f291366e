"""ndutil — shape validation and display formatting for nested arrays."""

from .elementwise import for_each, map2, map_values
from .errors import CyclicStructureError, DimensionMismatch, NDUtilError
from .formatter import format_array, format_array2d, format_value
from .ident import random_uuid
from .number_format import format_number, round_number
from .options import DEFAULT_OPTIONS, FormatOptions, load_options
from .shape import compute_size, size, validate
from .values import Empty, NodeKind, classify, is_missing, is_sequence

__all__ = [
    "size",
    "compute_size",
    "validate",
    "format_number",
    "round_number",
    "format_value",
    "format_array",
    "format_array2d",
    "FormatOptions",
    "DEFAULT_OPTIONS",
    "load_options",
    "map_values",
    "map2",
    "for_each",
    "random_uuid",
    "Empty",
    "NodeKind",
    "classify",
    "is_sequence",
    "is_missing",
    "NDUtilError",
    "DimensionMismatch",
    "CyclicStructureError",
]
