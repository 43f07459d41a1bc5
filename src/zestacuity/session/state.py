"""
state.py
--------

SessionState: the complete, immutable state of one ZEST session.

Lifecycle
---------
- Created by session.engine.initialize(config).
- Replaced (never mutated) by session.engine.update(state, ...).
- Discarded by the caller once results are consumed.

Exactly one SessionState chain exists per test session. States from
different sessions share nothing except, possibly, the read-only level grid.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from zestacuity.data.dataset import Trial


@dataclass(frozen=True, eq=False)
class SessionState:
    """
    Posterior, history and stopping status of a session.

    Attributes
    ----------
    weights : jnp.ndarray, shape (N,)
        Probability mass over the level grid, summing to 1.
    levels : jnp.ndarray, shape (N,)
        Level grid the weights are aligned to (descending logMAR).
    trials : tuple of Trial
        Ordered trial history.
    trial_count : int
        Number of answered trials.
    is_complete : bool
        Whether the stopping rule has fired.
    final_estimate : float or None
        Posterior-mean threshold, set only once the session is complete.
    confidence_width : float
        Current 95% credible-interval width (logMAR).

    Notes
    -----
    JAX arrays are immutable, so successive states may share `levels`
    (and, after a zero-mass update, `weights`) without copying.
    """

    weights: jnp.ndarray
    levels: jnp.ndarray
    trials: tuple[Trial, ...]
    trial_count: int
    is_complete: bool
    final_estimate: float | None
    confidence_width: float

    def __post_init__(self):
        if self.weights.shape != self.levels.shape:
            raise ValueError(
                f"weights and levels must align, got {self.weights.shape} vs {self.levels.shape}"
            )

    def __len__(self) -> int:
        """Return number of trials."""
        return self.trial_count

    @property
    def last_trial(self) -> Trial | None:
        return self.trials[-1] if self.trials else None
