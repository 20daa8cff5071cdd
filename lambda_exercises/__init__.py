"""
Two small exercises in passing functions as values.

- sorter: integer strings sorted by numeric value with lambda comparators
- dispatcher: a two-argument int function called through one contract,
  built either from a named function or an inline lambda
"""

from lambda_exercises.exceptions import LambdaExercisesError, ParseError
from lambda_exercises.parsing import parse_int
from lambda_exercises.sorter import (
    ASCENDING,
    DESCENDING,
    Sorter,
    format_numbers,
    sort_ascending,
    sort_descending,
    sort_numbers,
    sort_with,
    sorted_ascending,
    sorted_descending,
)
from lambda_exercises.dispatcher import (
    INLINE_OPERATION,
    NAMED_OPERATION,
    BinaryIntOperation,
    addition,
    apply,
    get_operation,
)

__all__ = [
    'LambdaExercisesError',
    'ParseError',
    'parse_int',
    'ASCENDING',
    'DESCENDING',
    'Sorter',
    'format_numbers',
    'sort_ascending',
    'sort_descending',
    'sort_numbers',
    'sort_with',
    'sorted_ascending',
    'sorted_descending',
    'INLINE_OPERATION',
    'NAMED_OPERATION',
    'BinaryIntOperation',
    'addition',
    'apply',
    'get_operation',
]
