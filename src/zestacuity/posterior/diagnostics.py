"""
diagnostics.py
--------------

Posterior summaries for reporting.

posterior_summary() collects the point estimate, spread and 95% credible
interval of a session in one record, for the presentation layer to show
alongside the Snellen result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from zestacuity.posterior.distribution import (
    confidence_width,
    credible_bounds,
    posterior_mean,
    posterior_sd,
)

if TYPE_CHECKING:
    from zestacuity.session.state import SessionState


class PosteriorSummary(NamedTuple):
    """Point estimate and 95% credible interval of a session posterior."""

    mean: float
    sd: float
    lower: float
    upper: float
    width: float
    trials: int


def posterior_summary(state: SessionState) -> PosteriorSummary:
    """
    Summarize the current posterior of a session.

    `lower` and `upper` are sorted by logMAR: `lower` is the better-acuity
    end of the interval and `upper` the worse-acuity end.
    """
    bounds = credible_bounds(state.weights, state.levels)
    if bounds is None:
        bounds = (float(state.levels[0]), float(state.levels[-1]))
    lower, upper = min(bounds), max(bounds)
    return PosteriorSummary(
        mean=posterior_mean(state.weights, state.levels),
        sd=posterior_sd(state.weights, state.levels),
        lower=lower,
        upper=upper,
        width=confidence_width(state.weights, state.levels),
        trials=state.trial_count,
    )


def print_posterior_summary(state: SessionState) -> None:
    """Print a one-line human-readable posterior summary."""
    s = posterior_summary(state)
    print(
        f"trials={s.trials}  mean={s.mean:+.3f} logMAR  sd={s.sd:.3f}  "
        f"95% CI=[{s.lower:+.2f}, {s.upper:+.2f}]  width={s.width:.2f}"
    )
