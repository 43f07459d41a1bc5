"""
distribution.py
---------------

Summaries of a discrete posterior over the level grid.

A distribution is a non-negative weight vector aligned index-for-index with
the level grid. This module provides:

- normalize : rescale weights to sum to 1
- posterior_mean : weighted average of the levels
- posterior_sd : weighted standard deviation of the levels
- credible_bounds : 2.5% / 97.5% levels from a cumulative scan
- confidence_width : |upper - lower|, the stopping statistic
- should_terminate : two-sided stopping rule

Every cumulative quantity is accumulated in stored grid order (high to low
logMAR) so that repeated runs reproduce the same floating-point results.
"""

from __future__ import annotations

import jax.numpy as jnp

from zestacuity.config import ZestConfig
from zestacuity.model.levels import grid_midpoint

# Width reported when the distribution carries no mass at all
NO_INFORMATION_WIDTH = 2.0
# SD reported when the distribution carries no mass at all
NO_INFORMATION_SD = 0.8

LOWER_QUANTILE = 0.025
UPPER_QUANTILE = 0.975


def total_mass(weights: jnp.ndarray) -> float:
    return float(jnp.sum(weights))


def normalize(weights: jnp.ndarray) -> jnp.ndarray:
    """
    Rescale weights to sum to 1.

    Zero-mass input is returned unchanged.
    """
    weights = jnp.asarray(weights)
    total = jnp.sum(weights)
    if not total > 0:
        return weights
    return weights / total


def posterior_mean(weights: jnp.ndarray, levels: jnp.ndarray) -> float:
    """
    Posterior mean threshold.

    Parameters
    ----------
    weights : jnp.ndarray, shape (N,)
        Distribution over the grid (need not be normalized).
    levels : jnp.ndarray, shape (N,)
        Level grid.

    Returns
    -------
    float
        Weighted mean of `levels`; the grid midpoint if total mass is zero.
    """
    weight_sum = jnp.sum(weights)
    if not weight_sum > 0:
        return grid_midpoint(levels)
    return float(jnp.sum(weights * levels) / weight_sum)


def posterior_sd(weights: jnp.ndarray, levels: jnp.ndarray) -> float:
    """Posterior standard deviation; 0.8 if total mass is zero."""
    weight_sum = jnp.sum(weights)
    if not weight_sum > 0:
        return NO_INFORMATION_SD
    mean = jnp.sum(weights * levels) / weight_sum
    var = jnp.sum(weights * (levels - mean) ** 2) / weight_sum
    return float(jnp.sqrt(var))


def credible_bounds(
    weights: jnp.ndarray,
    levels: jnp.ndarray,
    lower: float = LOWER_QUANTILE,
    upper: float = UPPER_QUANTILE,
) -> tuple[float, float] | None:
    """
    Levels at which the cumulative mass first reaches `lower` and `upper`.

    The scan walks the grid in stored order. Because the grid is
    descending, the "lower" bound is the higher logMAR value.

    Parameters
    ----------
    weights : jnp.ndarray, shape (N,)
        Distribution over the grid.
    levels : jnp.ndarray, shape (N,)
        Level grid.
    lower, upper : float
        Cumulative-mass quantiles, 0 < lower < upper <= 1.

    Returns
    -------
    tuple of float or None
        (lower_level, upper_level), or None if total mass is zero.
        A bound that the cumulative mass never reaches (rounding just
        below 1) defaults to the first / last grid level respectively.
    """
    if not 0.0 < lower < upper <= 1.0:
        raise ValueError(f"need 0 < lower < upper <= 1, got lower={lower}, upper={upper}")
    total = jnp.sum(weights)
    if not total > 0:
        return None

    cdf = jnp.cumsum(weights / total)

    reached_lower = cdf >= lower
    reached_upper = cdf >= upper
    lower_level = (
        float(levels[int(jnp.argmax(reached_lower))])
        if bool(jnp.any(reached_lower))
        else float(levels[0])
    )
    upper_level = (
        float(levels[int(jnp.argmax(reached_upper))])
        if bool(jnp.any(reached_upper))
        else float(levels[-1])
    )
    return lower_level, upper_level


def confidence_width(weights: jnp.ndarray, levels: jnp.ndarray) -> float:
    """
    Width of the 95% credible interval in logMAR.

    Returns 2.0 ("no information") when the distribution has no mass.

    Examples
    --------
    >>> import jax.numpy as jnp
    >>> levels = jnp.array([0.2, 0.1, 0.0])
    >>> confidence_width(jnp.array([0.0, 1.0, 0.0]), levels)
    0.0
    """
    bounds = credible_bounds(weights, levels)
    if bounds is None:
        return NO_INFORMATION_WIDTH
    lower_level, upper_level = bounds
    return abs(upper_level - lower_level)


def should_terminate(width: float, trial_count: int, config: ZestConfig) -> bool:
    """
    Two-sided stopping rule.

    Stop when the credible interval is narrow enough or the trial cap is
    reached, whichever happens first.
    """
    return width <= config.confidence_threshold or trial_count >= config.max_trials
