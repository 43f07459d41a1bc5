"""
diagnostics.py
--------------

Response-pattern diagnostics.

Provides tools for:
- Detecting non-attentive ("guessing") response patterns from reaction times

The check is advisory. The estimator never consults it; it exists for the
presentation layer to report on.

Examples
--------
>>> from zestacuity.utils.diagnostics import detect_guessing
>>> report = detect_guessing(state.trials)
>>> if report.is_likely_guessing:
...     print(f"{report.too_fast_count} responses under 500 ms")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from zestacuity.data.dataset import Trial

MIN_TRIALS_FOR_GUESSING = 5
FAST_RESPONSE_MS = 500.0
MAX_FAST_FRACTION = 0.4


class GuessingReport(NamedTuple):
    """Result of detect_guessing()."""

    is_likely_guessing: bool
    average_response_time_ms: float
    too_fast_count: int


def detect_guessing(
    trials: Sequence[Trial],
    *,
    min_trials: int = MIN_TRIALS_FOR_GUESSING,
    fast_cutoff_ms: float = FAST_RESPONSE_MS,
    max_fast_fraction: float = MAX_FAST_FRACTION,
) -> GuessingReport:
    """
    Flag sessions where too many responses were implausibly fast.

    Parameters
    ----------
    trials : sequence of Trial
        Session history.
    min_trials : int, default=5
        Below this many trials the check always reports "not guessing".
    fast_cutoff_ms : float, default=500
        Responses strictly faster than this count as too fast.
    max_fast_fraction : float, default=0.4
        Flag when the fraction of too-fast responses exceeds this.

    Returns
    -------
    GuessingReport
        (is_likely_guessing, average_response_time_ms, too_fast_count).
        Histories shorter than `min_trials` give (False, 0.0, 0).
    """
    n = len(trials)
    if n < min_trials or n == 0:
        return GuessingReport(False, 0.0, 0)

    average = sum(t.reaction_time_ms for t in trials) / n
    too_fast = sum(1 for t in trials if t.reaction_time_ms < fast_cutoff_ms)
    return GuessingReport(too_fast / n > max_fast_fraction, average, too_fast)
