"""Render byte counts as human readable strings such as "1.5GB"."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Sequence

from loguru import logger

from .errors import FormatError
from .units import FORMAT_UNITS, STEP


def _round_half_up(value: float, precision: int) -> Decimal:
    """Round `value` to `precision` decimals, halves away from zero."""
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        return exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def format_bytes(size: float, precision: int = 0, units: Sequence[str] = FORMAT_UNITS) -> str:
    """Format a byte count using the largest unit that keeps it below 1024.

    The magnitude is compared against 1024 before rounding, so a value just
    under a unit boundary may render as e.g. "1024.0MB" rather than "1.0GB".

    Args:
        size: Number of bytes
        precision: Digits after the decimal point
        units: Unit ladder, each step 1024 times the previous one

    Returns:
        Formatted size, e.g. "512B", "2MB" or "2.60EB"

    Raises:
        ValueError: If precision is negative
        FormatError: If the size cannot be placed on the unit ladder
    """
    if precision < 0:
        raise ValueError(f"Precision must be non-negative: {precision}")

    if size == 0:
        return "0B"

    if not math.isfinite(size):
        raise FormatError(size)

    magnitude = float(size)
    for i, unit in enumerate(units):
        if magnitude < STEP or i == len(units) - 1:
            rounded = _round_half_up(magnitude, precision)
            result = f"{rounded:.{precision}f}{unit}"
            logger.debug(f"Formatted {size!r} bytes as {result}")
            return result
        magnitude /= STEP

    raise FormatError(size)
