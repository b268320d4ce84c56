"""Grammar for unit tokens and data size expressions using pyparsing."""

from typing import Tuple

from pyparsing import Opt, ParseException, ParserElement, Regex, StringEnd

from .errors import ParseError


# Every letter is listed in both cases so only ASCII letters ever match
UNIT_PATTERN = (
    r"[bB][yY][tT][eE][sS]"
    r"|[kmgtpeKMGTPE](?:[iI]?[bB]|[iI])?"
    r"|[bB]"
)
NUMBER_PATTERN = r"[0-9]*\.[0-9]+|[0-9]+"


def _strict(expr: ParserElement) -> ParserElement:
    """Match the input exactly: no whitespace skipping, no tab expansion."""
    return expr.leave_whitespace().parse_with_tabs()


def create_unit_parser(optional: bool = False) -> ParserElement:
    """Create a parser for a standalone unit token.

    Args:
        optional: Whether the empty string is accepted as a unit

    Returns:
        Parser whose "unit" result holds the matched token
    """
    unit = Regex(UNIT_PATTERN)
    if optional:
        unit = Opt(unit, default="")
    return _strict(unit("unit") + StringEnd())


def create_size_parser() -> ParserElement:
    """Create a parser for `<number><unit>` expressions such as "1.5GiB"."""
    number = Regex(NUMBER_PATTERN)("number")
    unit = Opt(Regex(UNIT_PATTERN), default="")("unit")
    return _strict(number + unit + StringEnd())


# Global parser instances
_unit_parser = create_unit_parser()
_optional_unit_parser = create_unit_parser(optional=True)
_size_parser = create_size_parser()


def validate_unit(token: str) -> bool:
    """Report whether `token` is an accepted unit such as "MB", "ki" or "Bytes".

    The empty string is not a unit and yields False. Never raises.
    """
    if not token:
        return False
    try:
        _unit_parser.parse_string(token)
    except ParseException:
        return False
    return True


def match_unit(token: str) -> str:
    """Return `token` if it is a unit or empty, else raise ParseError."""
    try:
        result = _optional_unit_parser.parse_string(token)
    except ParseException as e:
        raise ParseError(token, "unsupported measure format") from e
    return result["unit"]


def match_size(text: str) -> Tuple[str, str]:
    """Split a data size expression into its numeric literal and unit token.

    Args:
        text: Expression such as "100MB", "1.5GiB" or "10"

    Returns:
        Tuple of (number, unit); unit is "" when the expression has none

    Raises:
        ParseError: If the text does not match the expression grammar
    """
    try:
        result = _size_parser.parse_string(text)
    except ParseException as e:
        raise ParseError(text) from e
    return result["number"], result["unit"]
