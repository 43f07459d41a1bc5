"""
experiment_session.py
---------------------

ExperimentSession holds the state of one running test for a caller.

Responsibilities
----------------
1. Keep the current SessionState (and every earlier one).
2. Hand out the next stimulus.
3. Fold responses back in through the pure engine functions.

The engine functions in session.engine are the source of truth; this class
only stores their results so a presentation layer does not have to thread
state through its own code. One instance per test run; never share an
instance between concurrently running tests.
"""

from __future__ import annotations

from zestacuity.config import ZestConfig, resolve_config
from zestacuity.posterior.diagnostics import PosteriorSummary, posterior_summary
from zestacuity.session import engine
from zestacuity.session.state import SessionState
from zestacuity.utils.diagnostics import GuessingReport, detect_guessing


class ExperimentSession:
    """
    Stateful wrapper around the ZEST engine.

    Parameters
    ----------
    config : ZestConfig, optional
        Procedure parameters. Defaults when omitted.
    **overrides
        Individual ZestConfig fields to override.

    Attributes
    ----------
    config : ZestConfig
        Parameters used for every call in this session.
    state : SessionState
        Current state.
    history : list of SessionState
        Every state so far, starting with the prior.

    Examples
    --------
    >>> session = ExperimentSession(max_trials=12)
    >>> while not session.is_complete:
    ...     level = session.next_stimulus()
    ...     correct, rt_ms = present(level)
    ...     session.record(level, correct, rt_ms)
    >>> session.threshold_estimate
    """

    def __init__(self, config: ZestConfig | None = None, **overrides):
        self.config = resolve_config(config, **overrides)
        self.state = engine.initialize(self.config)
        self.history: list[SessionState] = [self.state]

    # ------------------------------------------------------------------
    # TRIAL INTERFACE
    # ------------------------------------------------------------------
    def next_stimulus(self) -> float:
        """
        Level to present next.

        Raises
        ------
        RuntimeError
            If the session is already complete.
        """
        if self.state.is_complete:
            raise RuntimeError("Session is complete. Start a new ExperimentSession.")
        return engine.next_stimulus(self.state, self.config)

    def record(
        self, stimulus: float, is_correct: bool, reaction_time_ms: float
    ) -> SessionState:
        """
        Fold one response into the session.

        Returns
        -------
        SessionState
            The new current state.

        Raises
        ------
        RuntimeError
            If the session is already complete.
        """
        if self.state.is_complete:
            raise RuntimeError("Session is complete. Start a new ExperimentSession.")
        self.state = engine.update(
            self.state, stimulus, is_correct, reaction_time_ms, self.config
        )
        self.history.append(self.state)
        return self.state

    # ------------------------------------------------------------------
    # REPORTING
    # ------------------------------------------------------------------
    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def trial_count(self) -> int:
        return self.state.trial_count

    @property
    def threshold_estimate(self) -> float:
        """Current estimate (authoritative once complete)."""
        return engine.threshold_estimate(self.state)

    def summary(self) -> PosteriorSummary:
        return posterior_summary(self.state)

    def guessing_report(self) -> GuessingReport:
        """Advisory check for implausibly fast responding."""
        return detect_guessing(self.state.trials)
