"""
Core module providing the outcome types and helpers.

Includes the Success/Failure variants, their combinators and exceptions.
"""

from .exceptions import OutcomeError, InvalidShapeError
from .results import (
    Success,
    Failure,
    Outcome,
    is_outcome,
    to_success,
    to_failure,
    is_success,
    is_failure,
    unwrap_or_passthrough,
    unwrap_strict,
    map_or_passthrough,
    map_strict,
    flat_map_or_passthrough,
    flat_map_strict,
    update_or_passthrough,
    update_strict,
    unwrap_and_update_or_passthrough,
    unwrap_and_update_strict,
)

__all__ = [
    'OutcomeError',
    'InvalidShapeError',
    'Success',
    'Failure',
    'Outcome',
    'is_outcome',
    'to_success',
    'to_failure',
    'is_success',
    'is_failure',
    'unwrap_or_passthrough',
    'unwrap_strict',
    'map_or_passthrough',
    'map_strict',
    'flat_map_or_passthrough',
    'flat_map_strict',
    'update_or_passthrough',
    'update_strict',
    'unwrap_and_update_or_passthrough',
    'unwrap_and_update_strict',
]
