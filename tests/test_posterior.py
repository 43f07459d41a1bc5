"""
test_posterior.py
-----------------

Tests for the discrete posterior: prior construction, Bayes update,
summary statistics, credible-interval width and the stopping rule.
"""

import jax.numpy as jnp
import pytest

from zestacuity import ZestConfig
from zestacuity.model.prior import GaussianPrior
from zestacuity.posterior import (
    NO_INFORMATION_WIDTH,
    bayes_update,
    confidence_width,
    credible_bounds,
    normalize,
    posterior_mean,
    posterior_sd,
    should_terminate,
)


class TestGaussianPrior:
    def test_weights_normalized(self, levels):
        weights = GaussianPrior(0.0, 0.8).weights(levels)
        assert abs(float(jnp.sum(weights)) - 1.0) < 1e-9
        assert bool(jnp.all(weights > 0))

    def test_peak_at_prior_mean(self, levels):
        weights = GaussianPrior(0.3, 0.2).weights(levels)
        assert float(levels[int(jnp.argmax(weights))]) == pytest.approx(0.3)

    def test_mean_of_centered_prior(self, levels):
        # grid is asymmetric around 0 (1.0 .. -0.4), so the truncated mean is pulled up
        weights = GaussianPrior(0.0, 0.8).weights(levels)
        assert posterior_mean(weights, levels) > 0.0

    def test_narrow_prior_concentrates_mass(self, levels):
        weights = GaussianPrior(0.0, 0.01).weights(levels)
        assert float(jnp.max(weights)) > 0.99

    def test_far_prior_falls_back_to_uniform(self, levels):
        weights = GaussianPrior(500.0, 0.01).weights(levels)
        assert jnp.allclose(weights, 1.0 / levels.shape[0])

    def test_invalid_sd(self):
        with pytest.raises(ValueError):
            GaussianPrior(0.0, 0.0)


class TestBayesUpdate:
    @pytest.fixture
    def prior(self, levels):
        return GaussianPrior(0.0, 0.8).weights(levels)

    def test_update_stays_normalized(self, prior, levels):
        weights, degenerate = bayes_update(prior, levels, 0.2, True, 0.2, 0.25)
        assert not degenerate
        assert abs(float(jnp.sum(weights)) - 1.0) < 1e-9

    def test_correct_response_lowers_mean(self, prior, levels):
        weights, _ = bayes_update(prior, levels, 0.4, True, 0.2, 0.25)
        assert posterior_mean(weights, levels) < posterior_mean(prior, levels)

    def test_incorrect_response_raises_mean(self, prior, levels):
        weights, _ = bayes_update(prior, levels, 0.0, False, 0.2, 0.25)
        assert posterior_mean(weights, levels) > posterior_mean(prior, levels)

    def test_zero_mass_keeps_previous_weights(self, levels):
        empty = jnp.zeros_like(levels)
        weights, degenerate = bayes_update(empty, levels, 0.0, True, 0.2, 0.25)
        assert degenerate
        assert weights is empty

    def test_zero_mass_logs_warning(self, levels, caplog):
        with caplog.at_level("WARNING", logger="zestacuity.posterior.update"):
            bayes_update(jnp.zeros_like(levels), levels, 0.0, True, 0.2, 0.25)
        assert "keeping previous distribution" in caplog.text

    def test_input_not_modified(self, prior, levels):
        before = jnp.array(prior)
        bayes_update(prior, levels, 0.2, False, 0.2, 0.25)
        assert jnp.array_equal(prior, before)


class TestSummaries:
    def test_point_mass(self, levels):
        weights = jnp.zeros_like(levels).at[10].set(1.0)
        assert posterior_mean(weights, levels) == pytest.approx(0.5)
        assert posterior_sd(weights, levels) == pytest.approx(0.0)
        assert confidence_width(weights, levels) == 0.0

    def test_two_point_mass(self):
        levels = jnp.array([0.2, 0.1, 0.0])
        weights = jnp.array([0.5, 0.0, 0.5])
        assert posterior_mean(weights, levels) == pytest.approx(0.1)
        assert posterior_sd(weights, levels) == pytest.approx(0.1)
        assert credible_bounds(weights, levels) == (0.2, 0.0)
        assert confidence_width(weights, levels) == pytest.approx(0.2)

    def test_unnormalized_weights_give_same_summaries(self, levels):
        weights = GaussianPrior(0.2, 0.3).weights(levels)
        assert posterior_mean(weights * 7.0, levels) == pytest.approx(
            posterior_mean(weights, levels)
        )
        assert confidence_width(weights * 7.0, levels) == pytest.approx(
            confidence_width(weights, levels)
        )

    def test_zero_mass_fallbacks(self, levels):
        empty = jnp.zeros_like(levels)
        assert posterior_mean(empty, levels) == pytest.approx(0.3)
        assert posterior_sd(empty, levels) == pytest.approx(0.8)
        assert credible_bounds(empty, levels) is None
        assert confidence_width(empty, levels) == NO_INFORMATION_WIDTH

    def test_width_non_negative_and_bounded(self, levels):
        for sd in (0.05, 0.2, 0.8, 5.0):
            width = confidence_width(GaussianPrior(0.0, sd).weights(levels), levels)
            assert 0.0 <= width <= 1.4 + 1e-9

    def test_wider_prior_has_wider_interval(self, levels):
        narrow = confidence_width(GaussianPrior(0.3, 0.1).weights(levels), levels)
        wide = confidence_width(GaussianPrior(0.3, 0.4).weights(levels), levels)
        assert wide > narrow

    def test_normalize(self):
        assert jnp.allclose(normalize(jnp.array([1.0, 3.0])), jnp.array([0.25, 0.75]))
        empty = jnp.zeros(3)
        assert jnp.array_equal(normalize(empty), empty)

    def test_invalid_quantiles(self, levels):
        with pytest.raises(ValueError):
            credible_bounds(jnp.ones_like(levels), levels, lower=0.9, upper=0.1)


class TestStoppingRule:
    def test_width_criterion(self):
        config = ZestConfig(confidence_threshold=0.1, max_trials=15)
        assert should_terminate(0.1, 3, config)
        assert should_terminate(0.05, 3, config)
        assert not should_terminate(0.15, 3, config)

    def test_trial_cap(self):
        config = ZestConfig(confidence_threshold=0.1, max_trials=15)
        assert should_terminate(1.0, 15, config)
        assert not should_terminate(1.0, 14, config)
