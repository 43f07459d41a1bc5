"""
posterior_mean.py
-----------------

ZEST adaptive placement: present the posterior mean.

The posterior mean minimizes expected squared error of the threshold
estimate. It is snapped to the nearest grid level so every adaptive
stimulus is a presentable optotype size; ties go to the higher level.
"""

from __future__ import annotations

from zestacuity.model.levels import snap_to_grid
from zestacuity.posterior.distribution import posterior_mean
from zestacuity.session.state import SessionState


class PosteriorMeanPlacement:
    """Posterior mean, snapped to the grid."""

    def propose(self, state: SessionState) -> float:
        """
        Return the grid level nearest the current posterior mean.

        Falls back to the grid midpoint when the posterior has no mass.
        """
        mean = posterior_mean(state.weights, state.levels)
        return snap_to_grid(mean, state.levels)
