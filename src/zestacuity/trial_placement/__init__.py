"""
trial_placement
===============

Stimulus selection strategies.

- BracketingPlacement: fixed opening levels, response-independent
- PosteriorMeanPlacement: ZEST posterior mean snapped to the level grid
- ZestPlacement: bracketing first, then posterior mean

Examples
--------
>>> from zestacuity import ZestConfig, initialize
>>> from zestacuity.trial_placement import ZestPlacement
>>> placement = ZestPlacement(ZestConfig())
>>> level = placement.propose(initialize())
"""

from zestacuity.trial_placement.bracketing import BracketingPlacement
from zestacuity.trial_placement.posterior_mean import PosteriorMeanPlacement
from zestacuity.trial_placement.zest import ZestPlacement

__all__ = [
    "BracketingPlacement",
    "PosteriorMeanPlacement",
    "ZestPlacement",
]
