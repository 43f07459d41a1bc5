"""
observer.py
-----------

Simulated observers for offline validation of the estimator.

A SimulatedObserver has a known true threshold and answers each presented
level by sampling the psychometric model, so complete sessions can be run
without a presentation layer and the final estimate compared with ground
truth.

Examples
--------
>>> from zestacuity.simulation import SimulatedObserver, run_session
>>> from zestacuity.utils.rng import seed
>>> observer = SimulatedObserver(true_threshold=0.3)
>>> state = run_session(observer, key=seed(0))
>>> state.is_complete
True
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.random as jr

from zestacuity.config import ZestConfig, resolve_config
from zestacuity.model.psychometric import p_correct
from zestacuity.session.engine import initialize, next_stimulus, update
from zestacuity.session.state import SessionState
from zestacuity.utils.rng import split, trial_keys


@dataclass(frozen=True)
class SimulatedObserver:
    """
    Observer with a fixed true threshold.

    Parameters
    ----------
    true_threshold : float
        Ground-truth acuity (logMAR).
    slope : float, default=0.2
        Psychometric slope used to generate responses.
    guess_rate : float, default=0.25
        Chance rate used to generate responses.
    mean_rt_ms : float, default=1200.0
        Mean reaction time.
    rt_sd_ms : float, default=300.0
        Reaction-time standard deviation. Samples are clipped at 0.
    """

    true_threshold: float
    slope: float = 0.2
    guess_rate: float = 0.25
    mean_rt_ms: float = 1200.0
    rt_sd_ms: float = 300.0

    def __post_init__(self):
        if not self.slope > 0:
            raise ValueError(f"slope must be positive, got {self.slope}")
        if not 0.0 <= self.guess_rate < 1.0:
            raise ValueError(f"guess_rate must lie in [0, 1), got {self.guess_rate}")
        if self.rt_sd_ms < 0:
            raise ValueError(f"rt_sd_ms must be non-negative, got {self.rt_sd_ms}")

    def p_correct(self, stimulus: float) -> float:
        return float(p_correct(stimulus, self.true_threshold, self.slope, self.guess_rate))

    def respond(self, stimulus: float, key: jax.Array) -> tuple[bool, float]:
        """
        Sample one response.

        Parameters
        ----------
        stimulus : float
            Presented level (logMAR).
        key : jax.Array
            PRNG key.

        Returns
        -------
        is_correct : bool
        reaction_time_ms : float
        """
        k_resp, k_rt = trial_keys(key)
        is_correct = bool(jr.bernoulli(k_resp, self.p_correct(stimulus)))
        rt = self.mean_rt_ms + self.rt_sd_ms * float(jr.normal(k_rt))
        return is_correct, max(0.0, rt)


def run_session(
    observer: SimulatedObserver,
    config: ZestConfig | None = None,
    *,
    key: jax.Array,
    **overrides,
) -> SessionState:
    """
    Run a closed-loop session against `observer` until it completes.

    Parameters
    ----------
    observer : SimulatedObserver
        Source of responses.
    config : ZestConfig, optional
        Procedure parameters.
    key : jax.Array
        PRNG key; the same key replays the same session.

    Returns
    -------
    SessionState
        The completed session.
    """
    config = resolve_config(config, **overrides)
    state = initialize(config)
    while not state.is_complete:
        key, subkey = split(key)
        level = next_stimulus(state, config)
        is_correct, rt_ms = observer.respond(level, subkey)
        state = update(state, level, is_correct, rt_ms, config)
    return state
