"""Exception hierarchy for lambda_exercises.

All package-specific exceptions inherit from LambdaExercisesError.
"""


class LambdaExercisesError(Exception):
    """Base exception for all lambda_exercises errors."""


class ParseError(LambdaExercisesError, ValueError):
    """Raised when a string cannot be read as a base-10 integer."""

    def __init__(self, value, reason: str = None) -> None:
        self.value = value
        self.reason = reason
        message = f'For input string: "{value}"'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
