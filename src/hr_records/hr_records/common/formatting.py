from __future__ import annotations

import math
import re
from typing import Optional, Union

Number = Union[int, float]

# ASCII decimal or exponent notation only.
DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_number(value: Optional[str]) -> Optional[float]:
    """Read a form value as a finite real number, or None if it is not one."""
    if value is None:
        return None
    v = value.strip()
    if not DECIMAL_RE.fullmatch(v):
        return None
    number = float(v)
    if not math.isfinite(number):
        return None
    return number


def plain_number(value: Number) -> str:
    """Render a number without grouping; whole floats drop the trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_amount(value: Number) -> str:
    """Render an amount with thousands separators, e.g. 100000 -> '100,000'.

    Up to three fraction digits are kept and trailing zeros are dropped.
    This is the single place the money display policy lives.
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
