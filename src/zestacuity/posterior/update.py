"""
update.py
---------

Bayes update of the discrete threshold posterior.

For every grid level θ_i treated as a candidate threshold:

    w_i' ∝ w_i · P(response | stimulus, θ_i)

followed by renormalization. If the product underflows to zero mass (every
candidate judged implausible), the previous weights are kept unchanged.
That fallback is the only recovery path in the estimator.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp

from zestacuity.model.psychometric import likelihood

logger = logging.getLogger(__name__)


def bayes_update(
    weights: jnp.ndarray,
    levels: jnp.ndarray,
    stimulus: float,
    is_correct: bool,
    slope: float,
    guess_rate: float,
) -> tuple[jnp.ndarray, bool]:
    """
    Fold one binary response into the posterior.

    Parameters
    ----------
    weights : jnp.ndarray, shape (N,)
        Current distribution.
    levels : jnp.ndarray, shape (N,)
        Level grid (candidate thresholds).
    stimulus : float
        Presented level (logMAR).
    is_correct : bool
        Observed response.
    slope : float
        Psychometric slope.
    guess_rate : float
        Chance rate.

    Returns
    -------
    new_weights : jnp.ndarray, shape (N,)
        Normalized posterior, or `weights` itself on zero mass.
    degenerate : bool
        True if the zero-mass fallback was taken.
    """
    unnormalized = weights * likelihood(stimulus, is_correct, levels, slope, guess_rate)
    total = jnp.sum(unnormalized)
    if not (bool(jnp.isfinite(total)) and total > 0):
        logger.warning(
            "Posterior mass collapsed after stimulus=%.2f correct=%s; "
            "keeping previous distribution",
            stimulus,
            is_correct,
        )
        return weights, True
    return unnormalized / total, False
