"""
Tests for the pipeline runner.

Tests stage chaining, short-circuiting and exception capture.
"""

import logging

import pytest
from unittest.mock import Mock
from outcomes.pipeline import Pipeline, attempt
from outcomes.config.settings import Settings, set_settings
from outcomes.core.results import Success, Failure
from outcomes.core.exceptions import InvalidShapeError


def parse_int(text):
    return int(text)


def reject_negative(value):
    if value < 0:
        return Failure(f"negative: {value}")
    return value


class TestPipeline:
    """Test Pipeline business logic."""

    def setup_method(self):
        """Set up test fixtures."""
        self.pipeline = Pipeline([parse_int, reject_negative, lambda x: x * 2], strict=False)

    def test_run_success(self):
        """Test all stages run over a raw input."""
        assert self.pipeline.run('21') == Success(42)

    def test_run_accepts_outcome_input(self):
        """Test a Success input is not double-wrapped."""
        assert self.pipeline.run(Success('3')) == Success(6)

    def test_run_short_circuits(self):
        """Test later stages are skipped after a Failure."""
        last = Mock()
        pipeline = Pipeline([parse_int, reject_negative], strict=False).then(last)

        result = pipeline.run('-1')

        assert result == Failure('negative: -1')
        last.assert_not_called()

    def test_failure_input_passes_through(self):
        """Test a Failure input skips every stage."""
        stage = Mock()
        pipeline = Pipeline([stage], strict=False)

        assert pipeline.run(Failure('foo')) == Failure('foo')
        stage.assert_not_called()

    def test_empty_pipeline(self):
        """Test a pipeline with no stages just wraps its input."""
        assert Pipeline(strict=False).run(1) == Success(1)

    def test_then_chains(self):
        """Test then returns the pipeline."""
        pipeline = Pipeline(strict=False)

        assert pipeline.then(parse_int) is pipeline
        assert len(pipeline) == 1
        assert pipeline('5') == Success(5)

    def test_stage_errors_propagate(self):
        """Test stage exceptions are not captured."""
        with pytest.raises(ValueError):
            self.pipeline.run('not a number')

    def test_strict_success(self):
        """Test strict mode with only successes."""
        pipeline = Pipeline([parse_int, lambda x: x + 1], strict=True)

        assert pipeline.run('1') == Success(2)

    def test_strict_raises_on_failure(self):
        """Test strict mode raises when a Failure reaches a stage."""
        last = Mock()
        pipeline = Pipeline([parse_int, reject_negative, last], strict=True)

        with pytest.raises(InvalidShapeError):
            pipeline.run('-1')
        last.assert_not_called()

    def test_strict_last_stage_failure_returned(self):
        """Test strict mode returns a Failure produced by the last stage."""
        pipeline = Pipeline([parse_int, reject_negative], strict=True)

        assert pipeline.run('-3') == Failure('negative: -3')

    def test_short_circuit_logged(self, caplog):
        """Test short-circuiting is logged at INFO."""
        caplog.set_level(logging.INFO, logger='outcomes.pipeline')

        self.pipeline.run('-1')

        assert 'short-circuited before stage 3/3' in caplog.text

    def test_stages_logged_at_debug(self, caplog):
        """Test every stage is logged at DEBUG."""
        caplog.set_level(logging.DEBUG, logger='outcomes.pipeline')

        Pipeline([parse_int], strict=False, name='numbers').run('1')

        assert 'numbers: running stage 1/1 (parse_int)' in caplog.text


class TestPipelineSettings:
    """Test pipeline defaults from settings."""

    def teardown_method(self):
        """Reset the global settings."""
        set_settings(None)

    def test_defaults_from_settings(self, monkeypatch):
        """Test strict mode and name come from the environment."""
        monkeypatch.setenv('OUTCOMES_PIPELINE_STRICT', 'true')
        monkeypatch.setenv('OUTCOMES_PIPELINE_NAME', 'ingest')
        set_settings(Settings())

        pipeline = Pipeline()

        assert pipeline.strict is True
        assert pipeline.name == 'ingest'

    def test_explicit_arguments_win(self, monkeypatch):
        """Test constructor arguments override settings."""
        monkeypatch.setenv('OUTCOMES_PIPELINE_STRICT', 'true')
        set_settings(Settings())

        pipeline = Pipeline(strict=False, name='custom')

        assert pipeline.strict is False
        assert pipeline.name == 'custom'


class TestAttempt:
    """Test attempt helper."""

    def test_attempt_success(self):
        """Test a return value is wrapped."""
        assert attempt(parse_int, '7') == Success(7)

    def test_attempt_outcome_passthrough(self):
        """Test an outcome returned by the function is not nested."""
        assert attempt(reject_negative, -2) == Failure('negative: -2')

    def test_attempt_captures_exception(self):
        """Test a listed exception becomes a Failure."""
        result = attempt(parse_int, 'x', exceptions=(ValueError,))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValueError)

    def test_attempt_other_exceptions_propagate(self):
        """Test unlisted exceptions are raised."""
        with pytest.raises(TypeError):
            attempt(parse_int, None, exceptions=(ValueError,))

    def test_attempt_kwargs(self):
        """Test keyword arguments are forwarded."""
        assert attempt(int, '10', base=2) == Success(2)

    def test_attempt_as_stage(self):
        """Test attempt composes with a pipeline."""
        pipeline = Pipeline([lambda text: attempt(parse_int, text)], strict=False)

        result = pipeline.run('oops')

        assert isinstance(result.error, ValueError)
