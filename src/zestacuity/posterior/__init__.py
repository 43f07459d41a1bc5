"""
posterior
=========

Discrete posterior over the level grid.

This subpackage provides:
- update.bayes_update : fold one response into the weights
- distribution : mean, sd, credible bounds, CI width, stopping rule
"""

from .distribution import (
    NO_INFORMATION_WIDTH,
    confidence_width,
    credible_bounds,
    normalize,
    posterior_mean,
    posterior_sd,
    should_terminate,
)
from .diagnostics import PosteriorSummary, posterior_summary, print_posterior_summary
from .update import bayes_update

__all__ = [
    "bayes_update",
    "normalize",
    "posterior_mean",
    "posterior_sd",
    "credible_bounds",
    "confidence_width",
    "should_terminate",
    "NO_INFORMATION_WIDTH",
    "PosteriorSummary",
    "posterior_summary",
    "print_posterior_summary",
]
