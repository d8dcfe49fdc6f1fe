"""Display formatting for temperature values.

Purely presentational: nothing here changes a stored value.
"""

from __future__ import annotations

# Beyond 2**53 floats are spaced wider than 1; keep exponent notation there.
_EXACT_INT_LIMIT = 2.0**53


def format_value(value: float, precision: int | None = None) -> str:
    """Render *value* without trailing-zero padding.

    With *precision* None the natural float representation is used, and
    integral values drop the decimal point (``0.0`` -> ``"0"``).  With a
    precision the value is rounded to that many decimal places first
    (``36.99999999999999``, precision 2 -> ``"37"``).
    """
    value = float(value)
    if precision is not None:
        if precision < 0:
            msg = f"precision must be >= 0, got {precision}"
            raise ValueError(msg)
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    elif value.is_integer() and abs(value) < _EXACT_INT_LIMIT:
        text = str(int(value))
    else:
        text = repr(value)
    if text in ("-0", "-0.0"):
        return "0"
    return text
