"""
Exception hierarchy for the outcomes package.

Every error the package raises derives from OutcomeError.
"""

from typing import Any

NOT_OUTCOME_MESSAGE = "1st argument: not a Success or Failure outcome"
NOT_SUCCESS_MESSAGE = "1st argument: not a Success outcome"


class OutcomeError(Exception):
    """Base exception for all outcomes errors."""
    pass


class InvalidShapeError(OutcomeError, TypeError):
    """Raised when an argument does not have the outcome shape an operation requires."""

    def __init__(self, message: str, position: int = 1, expected: str = 'success_or_failure', value: Any = None):
        super().__init__(message)
        self.position = position
        self.expected = expected
        self.value = value

    @classmethod
    def not_outcome(cls, value: Any) -> 'InvalidShapeError':
        """Error for the lenient family: argument is neither Success nor Failure."""
        return cls(NOT_OUTCOME_MESSAGE, expected='success_or_failure', value=value)

    @classmethod
    def not_success(cls, value: Any) -> 'InvalidShapeError':
        """Error for the strict family: argument is not a Success."""
        return cls(NOT_SUCCESS_MESSAGE, expected='success', value=value)
