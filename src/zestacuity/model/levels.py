"""
levels.py
---------

The discretized logMAR level grid.

The posterior lives on a fixed, descending grid of candidate thresholds.
The reference grid runs from 1.0 logMAR (20/200, poor vision) down to
-0.4 logMAR (20/8, excellent vision) in 0.05 steps: 29 levels.

Values are generated by index, `round(maximum - i * step, decimals)`,
so no floating-point drift accumulates along the grid.

Connections
-----------
- GaussianPrior.weights(levels) samples the prior on this grid.
- PosteriorMeanPlacement snaps continuous estimates onto it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import jax.numpy as jnp

from zestacuity.utils.math import closest_index


@dataclass(frozen=True)
class LevelGridSpec:
    """
    Bounds and resolution of the level grid.

    Parameters
    ----------
    maximum : float, default=1.0
        Worst acuity on the grid (first element).
    minimum : float, default=-0.4
        Best acuity on the grid (last element).
    step : float, default=0.05
        Spacing between consecutive levels.
    decimals : int, default=2
        Rounding precision applied to every level.
    """

    maximum: float = 1.0
    minimum: float = -0.4
    step: float = 0.05
    decimals: int = 2

    def __post_init__(self):
        """Validate bounds."""
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if not self.maximum > self.minimum:
            raise ValueError(
                f"maximum must exceed minimum, got maximum={self.maximum}, "
                f"minimum={self.minimum}"
            )
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")
        intervals = (self.maximum - self.minimum) / self.step
        if abs(intervals - round(intervals)) > 1e-9:
            raise ValueError(
                f"step must divide maximum - minimum evenly, got maximum={self.maximum}, "
                f"minimum={self.minimum}, step={self.step}"
            )

    @property
    def size(self) -> int:
        """Number of levels, (maximum - minimum) / step + 1."""
        return int(round((self.maximum - self.minimum) / self.step)) + 1


LEVEL_GRID_SPEC = LevelGridSpec()


def level_grid(spec: LevelGridSpec = LEVEL_GRID_SPEC) -> jnp.ndarray:
    """
    Build the ordered (descending) grid of candidate logMAR levels.

    Parameters
    ----------
    spec : LevelGridSpec, optional
        Grid bounds. Defaults to the reference 1.0 .. -0.4 grid.

    Returns
    -------
    jnp.ndarray, shape (spec.size,)
        Strictly descending levels.

    Examples
    --------
    >>> levels = level_grid()
    >>> levels.shape
    (29,)
    >>> float(levels[0]), float(levels[-1])
    (1.0, -0.4)
    """
    values = [
        round(spec.maximum - i * spec.step, spec.decimals) for i in range(spec.size)
    ]
    # round() can map -0.0 onto the grid; keep a plain zero
    values = [0.0 if v == 0 else v for v in values]
    return jnp.asarray(values, dtype=jnp.float64)


def grid_midpoint(levels: jnp.ndarray) -> float:
    """Middle level of the grid, the fallback estimate when no mass is left."""
    return float(levels[len(levels) // 2])


def closest_level_index(value: float, levels: jnp.ndarray) -> int:
    """
    Index of the grid level nearest to `value`.

    Ties go to the earlier (higher logMAR) level.
    """
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    return closest_index(value, levels)


def snap_to_grid(value: float, levels: jnp.ndarray) -> float:
    """Return the grid level nearest to `value`."""
    return float(levels[closest_level_index(value, levels)])
