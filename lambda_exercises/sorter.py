"""
Sorting of integer strings by numeric value.

Strings compare as numbers, not text: "100" sorts after "25". The comparators
are plain lambdas over parse_int, and every sort is stable, so strings with
equal values ("5" and "05") keep their input order.

sort_ascending/sort_descending reorder the list they are given in place and
return that same list; callers that need the original order must copy first,
or use sorted_ascending/sorted_descending.
"""

import functools
import logging
from typing import Callable, List, Optional, Sequence

import numpy as np

from lambda_exercises import config
from lambda_exercises.parsing import parse_int

logger = logging.getLogger(__name__)

NumberList = List[str]
Comparator = Callable[[str, str], int]

ASCENDING: Comparator = lambda a, b: parse_int(a) - parse_int(b)
DESCENDING: Comparator = lambda a, b: parse_int(b) - parse_int(a)


def sort_with(numbers: NumberList, comparator: Comparator) -> NumberList:
    """Stable in-place sort with any string comparator; returns the same list."""
    numbers.sort(key=functools.cmp_to_key(comparator))
    return numbers


def sort_numbers(numbers: NumberList, descending: bool = False,
                 strategy: Optional[str] = None) -> NumberList:
    """Stable in-place sort of integer strings by numeric value.

    Args:
        numbers: List of integer strings, reordered in place
        descending: Largest value first when True
        strategy: 'comparator' or 'key'; defaults to config.get_sort_strategy()

    Returns:
        The same list object, now sorted

    Raises:
        ParseError: If any element is not a valid integer string
        ValueError: If the strategy is unknown
    """
    if strategy is None:
        strategy = config.get_sort_strategy()
    logger.debug("Sorting %d numbers %s with %s strategy", len(numbers),
                 "descending" if descending else "ascending", strategy)

    if strategy == "comparator":
        return sort_with(numbers, DESCENDING if descending else ASCENDING)
    if strategy == "key":
        # all parsing happens before any reordering
        values = [parse_int(s) for s in numbers]
        # reverse=True keeps equal values in input order
        order = sorted(range(len(numbers)), key=values.__getitem__, reverse=descending)
        numbers[:] = [numbers[i] for i in order]
        return numbers
    raise ValueError(f"Unknown sort strategy {strategy!r}, expected one of {config.SORT_STRATEGIES}")


def sort_ascending(numbers: NumberList) -> NumberList:
    return sort_numbers(numbers)


def sort_descending(numbers: NumberList) -> NumberList:
    return sort_numbers(numbers, descending=True)


def sorted_ascending(numbers: Sequence[str]) -> NumberList:
    """Copy-producing variant of sort_ascending."""
    return sort_ascending(list(numbers))


def sorted_descending(numbers: Sequence[str]) -> NumberList:
    """Copy-producing variant of sort_descending."""
    return sort_descending(list(numbers))


def format_numbers(numbers: Sequence[str]) -> str:
    return "[" + ", ".join(numbers) + "]"


class Sorter:
    """Index orderings of integer strings, for reporting ranks without reordering."""

    @staticmethod
    def _values(x):
        values = [parse_int(s) for s in x]
        # unbounded ints may not fit int64
        dtype = np.int64 if config.get_int_width() == 32 else object
        return np.array(values, dtype=dtype)

    @staticmethod
    def ascending_sort(x):
        return np.argsort(Sorter._values(x), kind='stable')

    @staticmethod
    def descending_sort(x):
        return np.argsort(-Sorter._values(x), kind='stable')
