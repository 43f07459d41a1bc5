"""
test_psychometric.py
--------------------

Tests for the asymmetric psychometric response model.
"""

import math

import jax.numpy as jnp
import pytest

from zestacuity import ZestConfig
from zestacuity.model.psychometric import (
    P_MAX,
    PsychometricFunction,
    guess_rate_for,
    likelihood,
    p_correct,
)


class TestPCorrect:
    def test_at_threshold_equals_guess_rate(self):
        assert float(p_correct(0.0, 0.0, 0.2, 0.25)) == pytest.approx(0.25)

    def test_above_threshold_formula(self):
        diff = 0.1
        expected = 0.25 + 0.75 * (1 - math.exp(-diff / 0.2))
        assert float(p_correct(0.3, 0.2, 0.2, 0.25)) == pytest.approx(expected)

    def test_below_threshold_formula_is_half_weighted(self):
        diff = 0.1
        expected = 0.25 + 0.75 * (1 - math.exp(-diff / 0.2)) * 0.5
        assert float(p_correct(0.2, 0.3, 0.2, 0.25)) == pytest.approx(expected)

    def test_clamped_to_upper_bound(self):
        assert float(p_correct(1.0, -0.4, 0.2, 0.25)) == pytest.approx(P_MAX)

    def test_sub_threshold_never_reaches_upper_half(self):
        p = float(p_correct(-0.4, 1.0, 0.2, 0.25))
        assert 0.25 < p < 0.25 + 0.75 * 0.5

    def test_range_over_grid(self, levels):
        for stimulus in (1.0, 0.4, 0.0, -0.2, -0.4):
            p = p_correct(stimulus, levels, 0.2, 0.25)
            assert p.shape == levels.shape
            assert bool(jnp.all(p >= 0.25))
            assert bool(jnp.all(p <= P_MAX))

    def test_increases_with_easier_stimulus(self):
        stimuli = jnp.linspace(0.0, 1.0, 11)
        p = jnp.array([float(p_correct(float(s), 0.0, 0.2, 0.25)) for s in stimuli])
        assert bool(jnp.all(jnp.diff(p) >= 0))

    def test_sharper_slope_saturates_faster(self):
        sharp = float(p_correct(0.1, 0.0, 0.05, 0.25))
        shallow = float(p_correct(0.1, 0.0, 0.5, 0.25))
        assert sharp > shallow

    def test_zero_guess_rate_floor(self):
        assert float(p_correct(0.0, 0.0, 0.2, 0.0)) == pytest.approx(0.01)


class TestLikelihood:
    def test_correct_and_incorrect_sum_to_one(self, levels):
        p_yes = likelihood(0.2, True, levels, 0.2, 0.25)
        p_no = likelihood(0.2, False, levels, 0.2, 0.25)
        assert jnp.allclose(p_yes + p_no, 1.0)

    def test_likelihood_strictly_positive(self, levels):
        for is_correct in (True, False):
            assert bool(jnp.all(likelihood(0.0, is_correct, levels, 0.2, 0.25) > 0))


class TestPsychometricFunction:
    def test_from_config(self):
        pf = PsychometricFunction.from_config(ZestConfig(slope=0.1, guess_rate=0.5))
        assert pf.slope == 0.1
        assert pf.guess_rate == 0.5

    def test_predict_matches_function(self, levels):
        pf = PsychometricFunction()
        assert jnp.array_equal(pf.predict(0.1, levels), p_correct(0.1, levels, 0.2, 0.25))

    @pytest.mark.parametrize("kwargs", [{"slope": 0.0}, {"slope": -1.0}, {"guess_rate": 1.0}])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            PsychometricFunction(**kwargs)


def test_guess_rate_for_alternatives():
    assert guess_rate_for(4) == 0.25
    assert guess_rate_for(2) == 0.5
    with pytest.raises(ValueError):
        guess_rate_for(1)
