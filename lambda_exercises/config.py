"""
Run-wide defaults for the lambda exercises.

Values live in module globals and are changed through the set_/get_ pairs
below, so a CLI run (or a test) can override them and reset() puts them back.
"""

from typing import Optional, Tuple

SAMPLE_NUMBERS: Tuple[str, ...] = ("10", "5", "100", "25", "3")
SAMPLE_OPERANDS: Tuple[int, int] = (10, 20)

SORT_STRATEGIES = ("comparator", "key")
INT_WIDTHS = (32, None)

# 'comparator' re-parses both strings on every comparison; 'key' parses each once
SORT_STRATEGY = "comparator"

# 32 mirrors a signed 32-bit host int; None means unbounded Python ints
INT_WIDTH: Optional[int] = 32


def set_sort_strategy(name: str):
    """Set the strategy used by the numeric sorts.

    Args:
        name: One of SORT_STRATEGIES

    Raises:
        ValueError: If the name is not a known strategy
    """
    global SORT_STRATEGY
    if name not in SORT_STRATEGIES:
        raise ValueError(f"Unknown sort strategy {name!r}, expected one of {SORT_STRATEGIES}")
    SORT_STRATEGY = name


def get_sort_strategy() -> str:
    return SORT_STRATEGY


def set_int_width(width: Optional[int]):
    """Set the integer width enforced by parsing and arithmetic.

    Args:
        width: 32 for signed 32-bit semantics, None for unbounded

    Raises:
        ValueError: If the width is not supported
    """
    global INT_WIDTH
    if width not in INT_WIDTHS:
        raise ValueError(f"Unsupported integer width {width!r}, expected one of {INT_WIDTHS}")
    INT_WIDTH = width


def get_int_width() -> Optional[int]:
    return INT_WIDTH


def reset():
    """Restore every default."""
    global SORT_STRATEGY, INT_WIDTH
    SORT_STRATEGY = "comparator"
    INT_WIDTH = 32
