"""
bracketing.py
-------------

Fixed, response-independent opening trials.

The first few presentations walk through a fixed list of levels spanning a
wide range, so the posterior has informative data before adaptive selection
takes over.
"""

from __future__ import annotations

from collections.abc import Sequence

from zestacuity.session.state import SessionState


class BracketingPlacement:
    """
    Fixed opening sequence.

    Parameters
    ----------
    levels : sequence of float
        Levels presented in order, one per trial.

    Notes
    -----
    Stateless: the position in the list is the state's trial count, so the
    same state always yields the same level regardless of earlier responses.
    """

    def __init__(self, levels: Sequence[float]):
        self.levels = tuple(float(level) for level in levels)

    def __len__(self) -> int:
        return len(self.levels)

    def is_active(self, state: SessionState) -> bool:
        """True while the session is still inside the bracketing phase."""
        return state.trial_count < len(self.levels)

    def propose(self, state: SessionState) -> float | None:
        """
        Return the bracketing level for the next trial.

        Returns
        -------
        float or None
            The level at position `state.trial_count`, or None once the
            list is exhausted.
        """
        if not self.is_active(state):
            return None
        return self.levels[state.trial_count]
