"""
Pipeline runner.

Chains stages over an outcome: each stage receives the unwrapped value of a
Success and the first Failure short-circuits the rest of the run.
"""

from typing import Any, Callable, List, Optional, Tuple, Type
from .config.settings import get_settings
from .core.logging_config import get_logger
from .core.results import (
    Failure,
    Outcome,
    flat_map_or_passthrough,
    flat_map_strict,
    is_failure,
    to_success,
)

logger = get_logger(__name__)


def attempt(
    func: Callable,
    *args,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    **kwargs
) -> Outcome:
    """
    Call a function and capture selected exceptions as a Failure.

    Args:
        func: Function to call
        *args: Function arguments
        exceptions: Exception types turned into a Failure
        **kwargs: Function keyword arguments

    Returns:
        Success of the return value (outcomes pass through), or Failure(exc)

    Raises:
        Exception: Anything not listed in exceptions propagates unchanged
    """
    try:
        result = func(*args, **kwargs)
    except exceptions as e:
        logger.debug(f"{getattr(func, '__name__', func)!s} raised {type(e).__name__}: {e}")
        return Failure(e)
    return to_success(result)


class Pipeline:
    """
    Ordered sequence of stages run over an outcome.

    A stage may return a plain value (wrapped as Success) or an outcome. In
    lenient mode a Failure stops the run and is returned. In strict mode a
    Failure reaching a stage raises InvalidShapeError.
    """

    def __init__(
        self,
        stages: Optional[List[Callable[[Any], Any]]] = None,
        strict: Optional[bool] = None,
        name: Optional[str] = None
    ):
        """
        Initialize pipeline.

        Args:
            stages: Optional initial stages
            strict: Strict mode (defaults to settings.pipeline_strict)
            name: Name used in log messages (defaults to settings.pipeline_name)
        """
        settings = get_settings()
        self.stages: List[Callable[[Any], Any]] = list(stages or [])
        self.strict = settings.pipeline_strict if strict is None else strict
        self.name = name or settings.pipeline_name

    def then(self, stage: Callable[[Any], Any]) -> 'Pipeline':
        """Append a stage and return the pipeline."""
        self.stages.append(stage)
        return self

    def run(self, value: Any) -> Outcome:
        """
        Run every stage over value.

        Args:
            value: Raw input or outcome

        Returns:
            Final outcome

        Raises:
            InvalidShapeError: In strict mode, if a Failure reaches a stage
        """
        outcome = to_success(value)
        step = self._step_strict if self.strict else self._step_lenient

        for index, stage in enumerate(self.stages, start=1):
            if is_failure(outcome) and not self.strict:
                logger.info(
                    f"{self.name}: short-circuited before stage {index}/{len(self.stages)}: {outcome.error!r}"
                )
                return outcome

            logger.debug(f"{self.name}: running stage {index}/{len(self.stages)} ({_stage_name(stage)})")
            outcome = step(outcome, stage)

        return outcome

    __call__ = run

    def __len__(self) -> int:
        return len(self.stages)

    @staticmethod
    def _step_lenient(outcome: Outcome, stage: Callable[[Any], Any]) -> Outcome:
        return to_success(flat_map_or_passthrough(outcome, stage))

    @staticmethod
    def _step_strict(outcome: Outcome, stage: Callable[[Any], Any]) -> Outcome:
        return to_success(flat_map_strict(outcome, stage))


def _stage_name(stage: Callable) -> str:
    return getattr(stage, '__name__', repr(stage))
