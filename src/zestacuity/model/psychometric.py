"""
psychometric.py
---------------

Psychometric response model for acuity trials.

Maps (stimulus level, candidate threshold) to the probability of a correct
response. Used only as the likelihood inside the Bayes update.

Convention
----------
Lower logMAR means sharper vision and a smaller, harder optotype. A stimulus
is easier to see than a candidate threshold when

    diff = stimulus - threshold >= 0

Form
----
diff >= 0 (at or above threshold):

    p = g + (1 - g) * (1 - exp(-diff / slope)),    clamped to [0.01, 0.99]

diff < 0 (below threshold):

    p = g + (1 - g) * (1 - exp(-|diff| / slope)) * 0.5,    clamped to [g, 0.99]

where g is the guess rate. For diff >= 0 the value never drops below g,
so every output lies in [g, 0.99].

The half-weighted sub-threshold branch is a heuristic: a near-threshold
miss still carries some information above pure chance. It is kept as-is
pending validation against the source literature:

    [1] King-Smith PE, et al. (1994). Efficient and unbiased modifications
        of the QUEST threshold method. Vision Research 34(7).
    [2] Turpin A, et al. (2003). Properties of perimetric threshold
        estimates from full threshold, ZEST, and SITA-like strategies.
        IOVS 44(8).

Connections
-----------
- posterior.update.bayes_update() evaluates likelihood() over the whole grid.
- simulation.SimulatedObserver samples responses from predict().
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from zestacuity.config import ZestConfig

P_MAX = 0.99
P_MIN = 0.01
SUBTHRESHOLD_ATTENUATION = 0.5


def p_correct(
    stimulus: float,
    threshold: jnp.ndarray,
    slope: float,
    guess_rate: float,
) -> jnp.ndarray:
    """
    Probability of a correct response.

    Parameters
    ----------
    stimulus : float
        Presented level (logMAR).
    threshold : jnp.ndarray
        Candidate threshold(s) (logMAR). Scalars and arrays both work.
    slope : float
        Psychometric slope (> 0).
    guess_rate : float
        Chance performance, 1 / n_alternatives.

    Returns
    -------
    jnp.ndarray
        P(correct), same shape as `threshold`, in [guess_rate, 0.99].
    """
    diff = stimulus - jnp.asarray(threshold, dtype=jnp.float64)
    saturation = 1.0 - jnp.exp(-jnp.abs(diff) / slope)
    above = jnp.clip(guess_rate + (1.0 - guess_rate) * saturation, P_MIN, P_MAX)
    below = jnp.clip(
        guess_rate + (1.0 - guess_rate) * saturation * SUBTHRESHOLD_ATTENUATION,
        guess_rate,
        P_MAX,
    )
    return jnp.where(diff >= 0, above, below)


def likelihood(
    stimulus: float,
    is_correct: bool,
    thresholds: jnp.ndarray,
    slope: float,
    guess_rate: float,
) -> jnp.ndarray:
    """
    Likelihood of the observed response under each candidate threshold.

    Returns p_correct for a correct response and 1 - p_correct otherwise.
    """
    p = p_correct(stimulus, thresholds, slope, guess_rate)
    return p if is_correct else 1.0 - p


def guess_rate_for(n_alternatives: int) -> float:
    """
    Chance rate of an n-alternative forced-choice task.

    >>> guess_rate_for(4)
    0.25
    """
    if n_alternatives < 2:
        raise ValueError(f"n_alternatives must be >= 2, got {n_alternatives}")
    return 1.0 / n_alternatives


@dataclass(frozen=True)
class PsychometricFunction:
    """
    Psychometric function bound to a slope and guess rate.

    Parameters
    ----------
    slope : float, default=0.2
        Typical value for letter/optotype acuity.
    guess_rate : float, default=0.25
        4AFC chance level.

    Examples
    --------
    >>> pf = PsychometricFunction(slope=0.2, guess_rate=0.25)
    >>> float(pf.predict(0.0, 0.0))
    0.25
    """

    slope: float = 0.2
    guess_rate: float = 0.25

    def __post_init__(self):
        if not self.slope > 0:
            raise ValueError(f"slope must be positive, got {self.slope}")
        if not 0.0 <= self.guess_rate < 1.0:
            raise ValueError(f"guess_rate must lie in [0, 1), got {self.guess_rate}")

    @classmethod
    def from_config(cls, config: ZestConfig) -> PsychometricFunction:
        return cls(slope=config.slope, guess_rate=config.guess_rate)

    def predict(self, stimulus: float, threshold: jnp.ndarray) -> jnp.ndarray:
        """P(correct | stimulus, threshold)."""
        return p_correct(stimulus, threshold, self.slope, self.guess_rate)

    def likelihood(
        self, stimulus: float, is_correct: bool, thresholds: jnp.ndarray
    ) -> jnp.ndarray:
        """P(observed response | stimulus, threshold) for each threshold."""
        return likelihood(stimulus, is_correct, thresholds, self.slope, self.guess_rate)
