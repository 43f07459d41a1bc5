"""
utils
=====

Shared utility functions and helpers for zestacuity.

This subpackage provides:
- diagnostics : guessing detection from reaction times.
- math : Gaussian density and nearest-value lookup.
- rng : PRNG keys for reproducible simulated sessions.
"""

from .diagnostics import GuessingReport, detect_guessing
from .math import closest_index, gaussian_pdf
from .rng import seed, session_keys, split, trial_keys

__all__ = [
    # diagnostics
    "GuessingReport",
    "detect_guessing",
    # math
    "gaussian_pdf",
    "closest_index",
    # rng
    "seed",
    "split",
    "session_keys",
    "trial_keys",
]
