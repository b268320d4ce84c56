"""humansize - Parse and format human readable data sizes.

Converts expressions such as "100MB" or "1.5GiB" into exact byte counts
and renders byte counts back as strings such as "1.5GB".
"""

__version__ = "0.1.0"
__author__ = "humansize contributors"

from loguru import logger

from .compiler import CompiledSize, compile, must_compile
from .errors import FormatError, HumanSizeError, ParseError
from .formatter import format_bytes
from .grammar import validate_unit
from .units import FORMAT_UNITS, UNIT_MULTIPLIERS

# Silent unless the application calls logger.enable("humansize")
logger.disable(__name__)

__all__ = [
    "CompiledSize",
    "compile",
    "must_compile",
    "validate_unit",
    "format_bytes",
    "HumanSizeError",
    "ParseError",
    "FormatError",
    "FORMAT_UNITS",
    "UNIT_MULTIPLIERS",
]
