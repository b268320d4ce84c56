"""
Property tests
Property 1: grammar membership and compile outcome agree
Property 2: compiled value equals literal x multiplier
Property 3: formatted values compile back to the same size
"""

import re
from decimal import Decimal
from fractions import Fraction

from hypothesis import given, settings, strategies as st

from humansize import ParseError, compile, format_bytes, validate_unit
from humansize.units import resolve_multiplier


UNIT = r"[bB][yY][tT][eE][sS]|[bB]|[kmgtpeKMGTPE](?:[iI]?[bB]|[iI])?"
EXPRESSION = re.compile(rf"([0-9]+|[0-9]*\.[0-9]+)({UNIT})?")

valid_expressions = st.from_regex(EXPRESSION, fullmatch=True)

# Text built from the grammar's own alphabet hits the boundary far more often
near_expressions = st.text(alphabet="0123456789.bBkKmMgGiIyYtTeEsSxX -+\t", max_size=12)


def _compiles(text: str) -> bool:
    try:
        compile(text)
    except ParseError:
        return False
    return True


@settings(max_examples=300, deadline=None)
@given(st.one_of(valid_expressions, near_expressions, st.text()))
def test_grammar_agrees_with_compile(text):
    """
    Property 1: compile succeeds exactly for inputs in the expression grammar
    """
    assert _compiles(text) == (EXPRESSION.fullmatch(text) is not None)


@settings(max_examples=200, deadline=None)
@given(st.one_of(st.from_regex(rf"(?:{UNIT})", fullmatch=True), st.text(max_size=8)))
def test_validate_unit_agrees_with_grammar(token):
    assert validate_unit(token) == (re.fullmatch(UNIT, token) is not None)


@settings(max_examples=200, deadline=None)
@given(valid_expressions)
def test_compiled_value_is_exact(text):
    """
    Property 2: value is the literal times the unit multiplier, input kept verbatim
    """
    number, unit = EXPRESSION.fullmatch(text).groups(default="")
    size = compile(text)

    assert size.input == text
    assert size.multiplier == resolve_multiplier(unit)
    assert Fraction(size.raw) == Fraction(Decimal(number)) * size.multiplier
    assert size.exact_value() == int(Fraction(Decimal(number)) * size.multiplier)


@settings(max_examples=200, deadline=None)
@given(st.integers(min_value=1, max_value=1 << 62), st.integers(min_value=0, max_value=4))
def test_format_then_compile(n, precision):
    """
    Property 3: a formatted size compiles back within the unit's resolution
    """
    text = format_bytes(n, precision)
    back = compile(text)

    tolerance = Fraction(back.multiplier, 2 * 10 ** precision) + Fraction(n, 10 ** 12)
    assert abs(Fraction(back.raw) - n) <= tolerance
