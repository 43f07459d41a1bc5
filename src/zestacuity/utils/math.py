"""
math.py
-------

Math utilities for zestacuity.

Includes:
- gaussian_pdf : normal density used to build the prior over the level grid.
- closest_index : nearest-value lookup used to snap estimates onto a grid.

All array functions use JAX (jax.numpy).

Examples
--------
>>> import jax.numpy as jnp
>>> from zestacuity.utils import math
>>> levels = jnp.array([0.2, 0.1, 0.0])
>>> math.closest_index(0.07, levels)
1
"""

from __future__ import annotations

import math

import jax.numpy as jnp


def gaussian_pdf(x: jnp.ndarray, mean: float, sd: float) -> jnp.ndarray:
    """
    Evaluate the normal probability density at x.

    Parameters
    ----------
    x : jnp.ndarray
        Points at which to evaluate the density.
    mean : float
        Mean of the normal distribution.
    sd : float
        Standard deviation (> 0).

    Returns
    -------
    jnp.ndarray
        Density values, same shape as x.

    Raises
    ------
    ValueError
        If `sd` is not positive.
    """
    if sd <= 0:
        raise ValueError(f"sd must be positive, got {sd}")
    z = (jnp.asarray(x) - mean) / sd
    return jnp.exp(-0.5 * z**2) / (sd * math.sqrt(2.0 * math.pi))


def closest_index(value: float, values: jnp.ndarray) -> int:
    """
    Index of the entry in `values` closest to `value`.

    Ties resolve to the first index with the minimal absolute difference,
    so on a descending grid the higher level wins.

    Parameters
    ----------
    value : float
        Target value.
    values : jnp.ndarray, shape (N,)
        Candidate values (N >= 1).

    Returns
    -------
    int
        Index into `values`.
    """
    values = jnp.asarray(values)
    if values.ndim != 1 or values.shape[0] == 0:
        raise ValueError("values must be a non-empty 1-D array")
    # argmin returns the first occurrence of the minimum
    return int(jnp.argmin(jnp.abs(values - value)))
