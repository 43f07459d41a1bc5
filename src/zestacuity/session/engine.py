"""
engine.py
---------

The ZEST estimator as pure state-transition functions.

    state = initialize(config)
    while not state.is_complete:
        level = next_stimulus(state, config)
        is_correct, rt_ms = present(level)          # external collaborator
        state = update(state, level, is_correct, rt_ms, config)
    estimate = threshold_estimate(state)

Every function takes an immutable SessionState and returns a value or a new
SessionState. Nothing is stored between calls; the caller owns the state
and must serialize updates within one session.

Each entry point accepts a ZestConfig, keyword overrides of its fields, or
nothing (defaults). The same config must be used for every call in a
session.
"""

from __future__ import annotations

import logging

from zestacuity.config import ZestConfig, resolve_config
from zestacuity.data.dataset import Trial
from zestacuity.model.levels import LEVEL_GRID_SPEC, LevelGridSpec, level_grid
from zestacuity.model.prior import GaussianPrior
from zestacuity.posterior.distribution import (
    confidence_width,
    posterior_mean,
    should_terminate,
)
from zestacuity.posterior.update import bayes_update
from zestacuity.session.state import SessionState
from zestacuity.trial_placement.zest import ZestPlacement

logger = logging.getLogger(__name__)


def initialize(
    config: ZestConfig | None = None,
    *,
    grid: LevelGridSpec = LEVEL_GRID_SPEC,
    **overrides,
) -> SessionState:
    """
    Start a session from the Gaussian prior.

    Parameters
    ----------
    config : ZestConfig, optional
        Procedure parameters; defaults when omitted.
    grid : LevelGridSpec, optional
        Level grid bounds; the reference 1.0 .. -0.4 / 0.05 grid by default.
    **overrides
        Individual ZestConfig fields to override.

    Returns
    -------
    SessionState
        Zero trials, not complete, no final estimate, CI width of the prior.
    """
    config = resolve_config(config, **overrides)
    levels = level_grid(grid)
    weights = GaussianPrior.from_config(config).weights(levels)
    return SessionState(
        weights=weights,
        levels=levels,
        trials=(),
        trial_count=0,
        is_complete=False,
        final_estimate=None,
        confidence_width=confidence_width(weights, levels),
    )


def next_stimulus(
    state: SessionState, config: ZestConfig | None = None, **overrides
) -> float:
    """
    Level to present next.

    Bracketing levels for the first len(config.bracketing_trials) trials,
    then the posterior mean snapped to the grid.
    """
    config = resolve_config(config, **overrides)
    return ZestPlacement(config).propose(state)


def update(
    state: SessionState,
    stimulus: float,
    is_correct: bool,
    reaction_time_ms: float,
    config: ZestConfig | None = None,
    **overrides,
) -> SessionState:
    """
    Fold one response into the session.

    Parameters
    ----------
    state : SessionState
        State before the trial. Left untouched.
    stimulus : float
        Level that was presented (logMAR).
    is_correct : bool
        Whether the response was correct.
    reaction_time_ms : float
        Response latency in milliseconds (>= 0).
    config : ZestConfig, optional
        Same config as the rest of the session.

    Returns
    -------
    SessionState
        The next state. If every candidate threshold becomes implausible
        (zero posterior mass), the previous distribution is carried over.
    """
    config = resolve_config(config, **overrides)
    stimulus = float(stimulus)
    is_correct = bool(is_correct)
    trial = Trial(
        stimulus=stimulus,
        is_correct=is_correct,
        reaction_time_ms=float(reaction_time_ms),
        ordinal=state.trial_count + 1,
    )

    weights, _ = bayes_update(
        state.weights,
        state.levels,
        stimulus,
        is_correct,
        config.slope,
        config.guess_rate,
    )
    width = confidence_width(weights, state.levels)
    trial_count = state.trial_count + 1
    complete = should_terminate(width, trial_count, config)
    estimate = posterior_mean(weights, state.levels) if complete else None

    logger.debug(
        "trial %d: stimulus=%.2f correct=%s rt=%.0fms width=%.3f",
        trial.ordinal,
        stimulus,
        is_correct,
        trial.reaction_time_ms,
        width,
    )
    if complete:
        logger.info(
            "Session complete after %d trials: threshold=%.3f logMAR (CI width %.3f)",
            trial_count,
            estimate,
            width,
        )

    return SessionState(
        weights=weights,
        levels=state.levels,
        trials=state.trials + (trial,),
        trial_count=trial_count,
        is_complete=complete,
        final_estimate=estimate,
        confidence_width=width,
    )


def threshold_estimate(state: SessionState) -> float:
    """
    Current threshold estimate in logMAR.

    The attached final estimate once complete, otherwise the posterior mean.
    """
    if state.final_estimate is not None:
        return state.final_estimate
    return posterior_mean(state.weights, state.levels)
