"""
prior.py
--------

Gaussian prior over the logMAR level grid.

The prior is a normal density sampled at every grid level and renormalized
to a probability mass vector. It is built exactly once per session; after
that the distribution is only ever replaced by Bayes updates.

Connections
-----------
- session.engine.initialize() calls GaussianPrior.weights(levels).
- ZestConfig.prior_mean / prior_sd set the hyperparameters.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp

from zestacuity.config import ZestConfig
from zestacuity.utils.math import gaussian_pdf


@dataclass(frozen=True)
class GaussianPrior:
    """
    Normal prior belief about the threshold.

    Parameters
    ----------
    mean : float, default=0.0
        Prior mean in logMAR (0.0 is 20/20).
    sd : float, default=0.8
        Prior standard deviation in logMAR; wide enough to cover the grid.
    """

    mean: float = 0.0
    sd: float = 0.8

    def __post_init__(self):
        if not self.sd > 0:
            raise ValueError(f"sd must be positive, got {self.sd}")

    @classmethod
    def from_config(cls, config: ZestConfig) -> GaussianPrior:
        return cls(mean=config.prior_mean, sd=config.prior_sd)

    def density(self, levels: jnp.ndarray) -> jnp.ndarray:
        """Unnormalized density at each level."""
        return gaussian_pdf(levels, self.mean, self.sd)

    def weights(self, levels: jnp.ndarray) -> jnp.ndarray:
        """
        Prior probability mass at each level.

        Parameters
        ----------
        levels : jnp.ndarray, shape (N,)
            Level grid.

        Returns
        -------
        jnp.ndarray, shape (N,)
            Non-negative weights summing to 1.
        """
        pdf = self.density(levels)
        total = jnp.sum(pdf)
        if not total > 0:
            # prior mean far outside the grid underflows everywhere
            return jnp.full(pdf.shape, 1.0 / pdf.shape[0], dtype=pdf.dtype)
        return pdf / total
