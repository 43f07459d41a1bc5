"""
dataset.py
-----------

Trial records for a ZEST session.

defines:
- Trial: one presented-and-answered stimulus (immutable)
- trials_to_numpy: export a history to NumPy arrays for analysis

Notes
-----
- A session history is a plain tuple of Trial objects; it grows by building
  a new tuple, never by mutating an existing one.
- Use numpy for I/O and analysis; the estimator itself works on jax.numpy.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Trial:
    """
    One presented-and-answered stimulus.

    Attributes
    ----------
    stimulus : float
        Presented level (logMAR), from the grid or the bracketing list.
    is_correct : bool
        Whether the subject answered correctly.
    reaction_time_ms : float
        Response latency in milliseconds (>= 0).
    ordinal : int
        1-indexed position within the session.
    """

    stimulus: float
    is_correct: bool
    reaction_time_ms: float
    ordinal: int

    def __post_init__(self):
        """Validate the record."""
        if not math.isfinite(self.stimulus):
            raise ValueError(f"stimulus must be finite, got {self.stimulus}")
        if not (math.isfinite(self.reaction_time_ms) and self.reaction_time_ms >= 0):
            raise ValueError(
                f"reaction_time_ms must be a non-negative duration, got {self.reaction_time_ms}"
            )
        if self.ordinal < 1:
            raise ValueError(f"ordinal must be >= 1, got {self.ordinal}")


def trials_to_numpy(trials: Iterable[Trial]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Return stimuli, correctness flags and reaction times as numpy arrays.

    Returns
    -------
    stimuli : np.ndarray of float
    correct : np.ndarray of bool
    reaction_times_ms : np.ndarray of float
    """
    trials = list(trials)
    return (
        np.array([t.stimulus for t in trials], dtype=float),
        np.array([t.is_correct for t in trials], dtype=bool),
        np.array([t.reaction_time_ms for t in trials], dtype=float),
    )
