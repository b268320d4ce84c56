"""Compile data size expressions such as "100MB" into exact byte counts."""

import math
from dataclasses import dataclass
from decimal import Decimal, DecimalException, MAX_EMAX, MIN_EMIN, localcontext
from fractions import Fraction

from loguru import logger

from .errors import ParseError
from .formatter import format_bytes
from .grammar import match_size, match_unit
from .units import MULTIPLIERS, resolve_multiplier

UINT64_MAX = (1 << 64) - 1

# Digits in the largest multiplier (2**60)
_MULTIPLIER_DIGITS = len(str(max(MULTIPLIERS)))


@dataclass(frozen=True)
class CompiledSize:
    """A successfully compiled data size expression.

    Attributes:
        input: The expression exactly as it was passed to compile()
        multiplier: Power of 1024 selected by the unit token
        raw: Exact compiled value (numeric literal x multiplier)
    """

    input: str
    multiplier: int
    raw: Decimal

    def __post_init__(self):
        if self.multiplier not in MULTIPLIERS:
            raise ValueError(f"Invalid multiplier: {self.multiplier}")
        if self.raw < 0:
            raise ValueError(f"Negative size: {self.raw}")

    def __str__(self) -> str:
        return self.input

    def __int__(self) -> int:
        return self.exact_value()

    def exact_value(self) -> int:
        """Return the compiled size in bytes, truncating any fractional byte."""
        return int(self.raw)

    def as_uint64(self) -> int:
        """Return the compiled size clamped to the unsigned 64-bit range.

        Values above 2**64 - 1 saturate, so use this only with sizes known
        to fit.
        """
        return min(self.exact_value(), UINT64_MAX)

    def in_unit(self, unit: str) -> float:
        """Return the compiled size expressed in another unit, e.g. "MiB".

        The result is a float and carries the usual rounding error; do not
        use it for exact comparisons. Sizes beyond the float range give inf.

        Raises:
            ParseError: If `unit` is neither empty nor a valid unit token
        """
        multiplier = resolve_multiplier(match_unit(unit))
        try:
            return float(Fraction(self.raw) / multiplier)
        except OverflowError:
            return math.inf

    def humanize(self, precision: int = 0) -> str:
        """Format the compiled size with format_bytes().

        Raises:
            FormatError: If the size is beyond the float range
        """
        return format_bytes(float(self.raw), precision)


def compile(text: str) -> CompiledSize:
    """Parse a data size expression and return its compiled value.

    Args:
        text: Expression such as "100MB", "1.5GiB", "10" or "2Bytes"

    Returns:
        The compiled size

    Raises:
        ParseError: If the expression is malformed or its number is invalid
    """
    number, unit = match_size(text)
    multiplier = resolve_multiplier(unit)

    try:
        literal = Decimal(number)
        with localcontext() as ctx:
            # Enough digits to hold the product exactly
            ctx.prec = len(number) + _MULTIPLIER_DIGITS
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            raw = literal * multiplier
    except DecimalException as e:
        raise ParseError(text, "invalid numeric literal") from e

    if not raw.is_finite():
        raise ParseError(text, "invalid numeric literal")

    logger.debug(f"Compiled {text!r}: {number} x {multiplier} = {raw}")
    return CompiledSize(input=text, multiplier=multiplier, raw=raw)


def must_compile(text: str) -> CompiledSize:
    """Compile an expression that is known to be valid, e.g. a constant.

    A malformed expression is treated as a programming error: it is logged
    and the process exits. Never use this with user supplied input.
    """
    try:
        return compile(text)
    except ParseError as e:
        logger.critical(f"Invalid built-in data size {text!r}: {e}")
        raise SystemExit(f"humansize: {e}") from e
