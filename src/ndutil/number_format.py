"""Number formatting with a scientific-notation fallback."""

from __future__ import annotations

import math
from numbers import Integral, Real

from .options import DEFAULT_OPTIONS, FormatOptions

# floats at or above this magnitude have no fractional part left
_EXACT_LIMIT = 2.0 ** 52


def _round_half_up(x: float) -> float:
    return math.floor(x + 0.5)


def round_number(value: float, digits: int | None = None) -> float:
    """Round *value* to *digits* decimal places, halves rounding up.

    ``digits=None`` falls back to ``DEFAULT_OPTIONS.precision``.
    Non-finite values, and values too large to carry any fractional
    digits, are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    if digits is None:
        digits = DEFAULT_OPTIONS.precision
    p = 10.0 ** digits
    scaled = value * p
    if not math.isfinite(scaled) or abs(scaled) >= _EXACT_LIMIT:
        return value
    return _round_half_up(scaled) / p


def _plain(v: float) -> str:
    """Render a rounded float without a spurious ``.0``."""
    if v == int(v):
        return str(int(v))
    return repr(v)


def _scientific(value: Real, digits: int) -> str:
    # math.log10 and true division both accept ints beyond float range
    exp = int(_round_half_up(math.log10(abs(value))))
    if isinstance(value, Integral) and exp >= 0:
        mantissa = int(value) / 10 ** exp
    else:
        mantissa = float(value) / (10.0 ** exp)
    return f"{_plain(round_number(mantissa, digits))}E{exp}"


def format_number(
    value: Real,
    digits: int | None = None,
    *,
    options: FormatOptions | None = None,
) -> str:
    """Convert a number to a display string.

    Examples::

        format_number(0)                → "0"
        format_number(123.456, 2)       → "123.46"
        format_number(123456789, 3)     → "1.235E8"
        format_number(0.00005, 3)       → "0.5E-4"
        format_number(10 ** 400)        → "1E400"
        format_number(float("-inf"))    → "-Infinity"
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Number expected, got {type(value).__name__}")

    opts = options or DEFAULT_OPTIONS
    if digits is None:
        digits = opts.precision

    try:
        v = float(value)
    except OverflowError:
        if isinstance(value, Integral):
            return _scientific(value, digits)
        v = math.inf if value > 0 else -math.inf

    if math.isnan(v):
        return "NaN"
    if v == math.inf:
        return "Infinity"
    if v == -math.inf:
        return "-Infinity"

    a = abs(v)
    if a == 0.0 or opts.lower < a < opts.upper:
        return _plain(round_number(v, digits))
    return _scientific(v, digits)
