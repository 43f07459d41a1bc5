"""
zest.py
-------

Two-phase ZEST stimulus selection.

Phase 1 (trial index < len(bracketing_trials)):
    BracketingPlacement, irrespective of responses so far.
Phase 2:
    PosteriorMeanPlacement.
"""

from __future__ import annotations

from zestacuity.config import ZestConfig
from zestacuity.session.state import SessionState
from zestacuity.trial_placement.bracketing import BracketingPlacement
from zestacuity.trial_placement.posterior_mean import PosteriorMeanPlacement


class ZestPlacement:
    """
    Bracketing followed by posterior-mean placement.

    Parameters
    ----------
    config : ZestConfig
        Supplies the bracketing sequence.

    Examples
    --------
    >>> from zestacuity import ZestConfig, initialize
    >>> placement = ZestPlacement(ZestConfig())
    >>> placement.propose(initialize())
    0.4
    """

    def __init__(self, config: ZestConfig):
        self.bracketing = BracketingPlacement(config.bracketing_trials)
        self.adaptive = PosteriorMeanPlacement()

    def phase(self, state: SessionState) -> str:
        """Return "bracketing" or "adaptive" for the next trial."""
        return "bracketing" if self.bracketing.is_active(state) else "adaptive"

    def propose(self, state: SessionState) -> float:
        level = self.bracketing.propose(state)
        if level is not None:
            return level
        return self.adaptive.propose(state)
