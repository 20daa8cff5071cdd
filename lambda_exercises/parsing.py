import re
import logging

from lambda_exercises import config
from lambda_exercises.exceptions import ParseError

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# int() also takes surrounding whitespace and underscores; these are rejected.
# \d matches any Unicode decimal digit ("٣" is 3), as Character.digit(ch, 10) does
_INT_PATTERN = re.compile(r"[+-]?\d+")


def parse_int(text: str) -> int:
    """Parse a signed base-10 integer string.

    Accepts an optional sign followed by decimal digits (any script), leading
    zeros allowed.
    When the configured width is 32, values outside the signed 32-bit range
    are rejected as well.

    Args:
        text: String to parse

    Returns:
        The integer value

    Raises:
        ParseError: If the string is not a valid integer
    """
    if not isinstance(text, str):
        raise ParseError(text, f"expected str, got {type(text).__name__}")
    if _INT_PATTERN.fullmatch(text) is None:
        raise ParseError(text)

    value = int(text)
    if config.get_int_width() == 32 and not INT32_MIN <= value <= INT32_MAX:
        raise ParseError(text, "out of 32-bit range")
    return value


def wrap_int(value: int) -> int:
    """Wrap an integer to the configured width (two's complement)."""
    if config.get_int_width() != 32:
        return value
    wrapped = (value - INT32_MIN) % (2 ** 32) + INT32_MIN
    if wrapped != value:
        logger.debug("Wrapped %d to %d (32-bit overflow)", value, wrapped)
    return wrapped
