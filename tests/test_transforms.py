"""
test_transforms.py
------------------

Tests for acuity unit conversions and trial records.
"""

import numpy as np
import pytest

from zestacuity.data import (
    Trial,
    decimal_to_logmar,
    logmar_to_decimal,
    logmar_to_snellen,
    snellen_to_logmar,
    trials_to_numpy,
)


class TestConversions:
    def test_logmar_zero_is_unit_decimal(self):
        assert logmar_to_decimal(0) == 1.0

    def test_logmar_zero_is_20_20(self):
        assert logmar_to_snellen(0) == "20/20"

    @pytest.mark.parametrize(
        "logmar, snellen",
        [
            (1.0, "20/200"),
            (0.5, "20/63"),
            (0.3, "20/40"),
            (0.1, "20/25"),
            (-0.1, "20/16"),
            (-0.3, "20/10"),
            (-0.4, "20/8"),
        ],
    )
    def test_snellen_chart_rows(self, logmar, snellen):
        assert logmar_to_snellen(logmar) == snellen

    def test_metric_notation(self):
        assert logmar_to_snellen(0.0, numerator=6) == "6/6"
        assert logmar_to_snellen(0.3, numerator=6) == "6/12"

    def test_decimal_values(self):
        assert logmar_to_decimal(1.0) == pytest.approx(0.1)
        assert logmar_to_decimal(-0.3) == pytest.approx(1.995, abs=1e-3)

    def test_decimal_to_logmar(self):
        assert decimal_to_logmar(1.0) == 0.0
        assert decimal_to_logmar(0.5) == pytest.approx(0.30103, abs=1e-5)
        assert decimal_to_logmar(logmar_to_decimal(0.35)) == pytest.approx(0.35)

    def test_decimal_to_logmar_rejects_non_positive(self):
        with pytest.raises(ValueError):
            decimal_to_logmar(0.0)

    def test_snellen_to_logmar(self):
        assert snellen_to_logmar("20/20") == pytest.approx(0.0)
        assert snellen_to_logmar("20/200") == pytest.approx(1.0)
        assert snellen_to_logmar(" 6 / 12 ") == pytest.approx(0.30103, abs=1e-5)

    @pytest.mark.parametrize("text", ["20-20", "twenty/20", "20/0", "", "20/"])
    def test_snellen_to_logmar_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            snellen_to_logmar(text)


class TestTrial:
    def test_fields(self):
        trial = Trial(stimulus=0.2, is_correct=True, reaction_time_ms=640.0, ordinal=3)
        assert trial.stimulus == 0.2
        assert trial.ordinal == 3

    def test_immutable(self):
        trial = Trial(stimulus=0.2, is_correct=True, reaction_time_ms=640.0, ordinal=1)
        with pytest.raises(AttributeError):
            trial.is_correct = False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"reaction_time_ms": -5.0},
            {"reaction_time_ms": float("nan")},
            {"ordinal": 0},
            {"stimulus": float("inf")},
        ],
    )
    def test_invalid_records(self, kwargs):
        fields = {"stimulus": 0.2, "is_correct": True, "reaction_time_ms": 640.0, "ordinal": 1}
        fields.update(kwargs)
        with pytest.raises(ValueError):
            Trial(**fields)

    def test_zero_reaction_time_allowed(self):
        assert Trial(0.0, False, 0.0, 1).reaction_time_ms == 0.0

    def test_trials_to_numpy(self):
        trials = [Trial(0.4, True, 800.0, 1), Trial(0.0, False, 1200.0, 2)]
        stimuli, correct, rts = trials_to_numpy(trials)
        np.testing.assert_array_equal(stimuli, [0.4, 0.0])
        np.testing.assert_array_equal(correct, [True, False])
        np.testing.assert_array_equal(rts, [800.0, 1200.0])
        assert correct.dtype == bool

    def test_trials_to_numpy_empty(self):
        stimuli, correct, rts = trials_to_numpy([])
        assert stimuli.shape == correct.shape == rts.shape == (0,)
