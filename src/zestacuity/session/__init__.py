"""
session
=======

Session state and the estimator's state-transition functions.

This subpackage provides:
- SessionState : immutable posterior + history of one session
- initialize / next_stimulus / update / threshold_estimate : the pure engine
- ExperimentSession : a caller-side holder of the current state

Separation of concerns
----------------------
- engine functions never store state; every update returns a new state.
- ExperimentSession only keeps the returned states for convenience.
"""

from .engine import initialize, next_stimulus, threshold_estimate, update
from .experiment_session import ExperimentSession
from .state import SessionState

__all__ = [
    "SessionState",
    "initialize",
    "next_stimulus",
    "update",
    "threshold_estimate",
    "ExperimentSession",
]
