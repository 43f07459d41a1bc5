"""
zestacuity.model
================

Model-layer API: the level grid, the prior and the psychometric function.

Includes
--------
- Level grid (LevelGridSpec, level_grid, snap_to_grid)
- Prior (GaussianPrior)
- Psychometric response model (PsychometricFunction, p_correct, likelihood)

All array functions use JAX arrays (jax.numpy as jnp).

Typical usage
-------------
    from zestacuity.model import level_grid, GaussianPrior, PsychometricFunction
"""

from .levels import (
    LEVEL_GRID_SPEC,
    LevelGridSpec,
    closest_level_index,
    grid_midpoint,
    level_grid,
    snap_to_grid,
)
from .prior import GaussianPrior
from .psychometric import PsychometricFunction, guess_rate_for, likelihood, p_correct

__all__ = [
    # Level grid
    "LEVEL_GRID_SPEC",
    "LevelGridSpec",
    "level_grid",
    "grid_midpoint",
    "closest_level_index",
    "snap_to_grid",
    # Prior
    "GaussianPrior",
    # Psychometric model
    "PsychometricFunction",
    "p_correct",
    "likelihood",
    "guess_rate_for",
]
