"""
Outcome objects for pipeline-style error handling.

An outcome is either ``Success(value)`` or ``Failure(error)`` and nothing
else. The helpers here wrap, unwrap and transform outcomes so a pipeline
stage can either keep working on a value or pass a failure along untouched.

Two families of helpers are provided:

- ``*_or_passthrough``: a Failure is a valid state and is returned unchanged.
- ``*_strict``: anything other than a Success is a programming error and
  raises InvalidShapeError.

Example:
    >>> map_or_passthrough(Success(1), lambda x: x + 1)
    Success(value=2)
    >>> map_or_passthrough(Failure('boom'), lambda x: x + 1)
    Failure(error='boom')
"""

from typing import Any, Callable, Generic, TypeVar, Union
from dataclasses import dataclass

from .exceptions import InvalidShapeError

T = TypeVar('T')
E = TypeVar('E')
U = TypeVar('U')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed, valid computation result."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed computation carrying an error payload of any shape."""

    error: E


Outcome = Union[Success[T], Failure[E]]


def is_outcome(value: Any) -> bool:
    """
    Check whether a value is an outcome.

    Only Success and Failure instances qualify; tuples or other look-alikes
    never do. Safe to use directly in a conditional, never raises.

    Args:
        value: Any value

    Returns:
        True if value is a Success or a Failure
    """
    return isinstance(value, (Success, Failure))


def to_success(value: Any) -> Outcome:
    """
    Wrap a value in a Success.

    A Success is returned as-is so wrapping is idempotent. A Failure also
    passes through unchanged instead of being nested inside a Success.

    Args:
        value: Raw value or outcome

    Returns:
        Success wrapping value, or value itself if it is already an outcome
    """
    if is_outcome(value):
        return value
    return Success(value)


def to_failure(value: Any) -> Outcome:
    """
    Wrap a value in a Failure.

    Mirrors to_success: a Failure is returned as-is and a Success passes
    through unchanged.

    Args:
        value: Raw error value or outcome

    Returns:
        Failure wrapping value, or value itself if it is already an outcome
    """
    if is_outcome(value):
        return value
    return Failure(value)


def is_success(value: Any) -> bool:
    """Check if a value is a Success. False for anything else."""
    return isinstance(value, Success)


def is_failure(value: Any) -> bool:
    """Check if a value is a Failure. False for anything else."""
    return isinstance(value, Failure)


def unwrap_or_passthrough(outcome: Outcome) -> Any:
    """
    Unwrap the value of a Success, or return a Failure as-is.

    Args:
        outcome: Success or Failure

    Returns:
        The inner value of a Success, or the Failure unchanged

    Raises:
        InvalidShapeError: If outcome is not a Success or Failure
    """
    if isinstance(outcome, Success):
        return outcome.value
    if isinstance(outcome, Failure):
        return outcome
    raise InvalidShapeError.not_outcome(outcome)


def unwrap_strict(outcome: Outcome) -> Any:
    """
    Unwrap the value of a Success.

    Raises:
        InvalidShapeError: If outcome is a Failure or not an outcome at all
    """
    if isinstance(outcome, Success):
        return outcome.value
    raise InvalidShapeError.not_success(outcome)


def map_or_passthrough(outcome: Outcome, transform: Callable[[Any], Any]) -> Outcome:
    """
    Transform the value of a Success, or return a Failure as-is.

    The transform result is always wrapped in a new Success, even when it is
    an outcome itself. The transform is not called for a Failure.

    Args:
        outcome: Success or Failure
        transform: Function applied to the inner value

    Returns:
        Success of the transformed value, or the Failure unchanged

    Raises:
        InvalidShapeError: If outcome is not a Success or Failure
    """
    if isinstance(outcome, Success):
        return Success(transform(outcome.value))
    if isinstance(outcome, Failure):
        return outcome
    raise InvalidShapeError.not_outcome(outcome)


def map_strict(outcome: Outcome, transform: Callable[[Any], Any]) -> Outcome:
    """
    Transform the value of a Success.

    Raises:
        InvalidShapeError: If outcome is not a Success; transform is not called
    """
    if isinstance(outcome, Success):
        return Success(transform(outcome.value))
    raise InvalidShapeError.not_success(outcome)


def flat_map_or_passthrough(outcome: Outcome, transform: Callable[[Any], U]) -> Union[U, Failure]:
    """
    Unwrap a Success and return the transform result directly.

    No re-wrapping happens: the transform decides the shape of what comes
    back. A Failure is returned unchanged without calling the transform.

    Args:
        outcome: Success or Failure
        transform: Function applied to the inner value

    Returns:
        Whatever transform returns, or the Failure unchanged

    Raises:
        InvalidShapeError: If outcome is not a Success or Failure
    """
    if isinstance(outcome, Success):
        return transform(outcome.value)
    if isinstance(outcome, Failure):
        return outcome
    raise InvalidShapeError.not_outcome(outcome)


def flat_map_strict(outcome: Outcome, transform: Callable[[Any], U]) -> U:
    """
    Unwrap a Success and return the transform result directly.

    Raises:
        InvalidShapeError: If outcome is not a Success; transform is not called
    """
    if isinstance(outcome, Success):
        return transform(outcome.value)
    raise InvalidShapeError.not_success(outcome)


# Names used by earlier releases
update_or_passthrough = map_or_passthrough
update_strict = map_strict
unwrap_and_update_or_passthrough = flat_map_or_passthrough
unwrap_and_update_strict = flat_map_strict
