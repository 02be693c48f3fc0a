"""
Helpers for wrapping, unwrapping, and transforming Success/Failure outcomes.
"""

from .core import (
    OutcomeError,
    InvalidShapeError,
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
from .core.logging_config import setup_logging, get_logger
from .config import Settings, get_settings
from .pipeline import Pipeline, attempt

__version__ = '1.0.0'

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
    'setup_logging',
    'get_logger',
    'Settings',
    'get_settings',
    'Pipeline',
    'attempt',
]
