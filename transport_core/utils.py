# MIT License
from __future__ import annotations

import math


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round ``x`` with ties going towards positive infinity.

    Python's :func:`round` uses banker's rounding, which would report
    ``0.5`` tons as ``0``.  Reported figures use the commercial rule
    instead, so ``2.5 -> 3`` and ``-2.5 -> -2``.

    Parameters
    ----------
    x:
        Value to round.
    ndigits:
        Number of decimals to keep.

    Returns
    -------
    float
        The rounded value.
    """
    if not math.isfinite(x):
        return x
    scale = 10.0 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def round_int(x: float) -> int:
    """Round half-up to the nearest integer."""
    return int(round_half_up(x))


def kg_to_tonnes(kg: float) -> float:
    """Convert kilograms to metric tonnes."""
    return kg / 1000.0


def sek_to_msek(sek: float) -> float:
    """Convert SEK to millions of SEK."""
    return sek / 1_000_000.0


def format_tons(tons: float) -> str:
    """Format a tonnage with thousands separators and at most three decimals.

    ``195000 -> "195,000"``, ``1000.5 -> "1,000.5"``.
    """
    return f"{tons:,.3f}".rstrip("0").rstrip(".")
