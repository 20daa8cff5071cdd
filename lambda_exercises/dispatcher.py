"""
Calling a two-argument integer function through one contract.

A BinaryIntOperation is any callable taking two ints and returning an int.
There is no base class: a reference to a named function and an inline lambda
are both just values of that shape, and apply() accepts either.
"""

import logging
from typing import Callable, Dict

from lambda_exercises.parsing import wrap_int

logger = logging.getLogger(__name__)

BinaryIntOperation = Callable[[int, int], int]


def addition(a: int, b: int) -> int:
    return a + b


class Arithmetic:
    """Named operations reachable through the class, without an instance."""

    addition = staticmethod(addition)


NAMED_OPERATION: BinaryIntOperation = Arithmetic.addition
INLINE_OPERATION: BinaryIntOperation = lambda a, b: a + b

OPERATIONS: Dict[str, BinaryIntOperation] = {
    'method': NAMED_OPERATION,
    'lambda': INLINE_OPERATION,
}


def get_operation(name: str) -> BinaryIntOperation:
    """Look up one of the OPERATIONS by name.

    Raises:
        KeyError: If the name is not registered
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation {name!r}, expected one of {sorted(OPERATIONS)}") from None


def apply(op: BinaryIntOperation, x: int, y: int) -> int:
    """Invoke op with (x, y) and return its result, wrapped to the configured int width."""
    result = wrap_int(op(x, y))
    logger.debug("apply(%s, %d, %d) -> %d", getattr(op, '__name__', op), x, y, result)
    return result
