"""
compat.py
---------

camelCase aliases of the engine API.

Kept for callers ported from the browser implementation. Each alias emits a
DeprecationWarning and forwards to the snake_case function. Configs are
passed as ZestConfig or as a dict of camelCase keys.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence

from zestacuity.config import ZestConfig, resolve_config
from zestacuity.data.dataset import Trial
from zestacuity.data.transforms import logmar_to_decimal, logmar_to_snellen
from zestacuity.session import engine
from zestacuity.session.state import SessionState
from zestacuity.utils.diagnostics import GuessingReport, detect_guessing

_CAMEL_TO_SNAKE = {
    "maxTrials": "max_trials",
    "confidenceThreshold": "confidence_threshold",
    "priorMean": "prior_mean",
    "priorSD": "prior_sd",
    "slope": "slope",
    "guessRate": "guess_rate",
    "bracketingTrials": "bracketing_trials",
}


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old}() is deprecated. Use {new}() instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def _config(config: ZestConfig | Mapping | None) -> ZestConfig:
    if config is None or isinstance(config, ZestConfig):
        return resolve_config(config)
    unknown = sorted(set(config) - set(_CAMEL_TO_SNAKE))
    if unknown:
        raise TypeError(f"Unknown ZEST option(s): {', '.join(unknown)}")
    return resolve_config(**{_CAMEL_TO_SNAKE[k]: v for k, v in config.items()})


def initializeZest(config: ZestConfig | Mapping | None = None) -> SessionState:
    _deprecated("initializeZest", "initialize")
    return engine.initialize(_config(config))


def getNextStimulus(
    state: SessionState, config: ZestConfig | Mapping | None = None
) -> float:
    _deprecated("getNextStimulus", "next_stimulus")
    return engine.next_stimulus(state, _config(config))


def updateZestState(
    state: SessionState,
    stimulusLogMAR: float,
    isCorrect: bool,
    responseTimeMs: float,
    config: ZestConfig | Mapping | None = None,
) -> SessionState:
    _deprecated("updateZestState", "update")
    return engine.update(state, stimulusLogMAR, isCorrect, responseTimeMs, _config(config))


def getThresholdEstimate(state: SessionState) -> float:
    _deprecated("getThresholdEstimate", "threshold_estimate")
    return engine.threshold_estimate(state)


def logMARToDecimal(logMAR: float) -> float:
    _deprecated("logMARToDecimal", "logmar_to_decimal")
    return logmar_to_decimal(logMAR)


def logMARToSnellen(logMAR: float) -> str:
    _deprecated("logMARToSnellen", "logmar_to_snellen")
    return logmar_to_snellen(logMAR)


def detectGuessing(trials: Sequence[Trial]) -> GuessingReport:
    _deprecated("detectGuessing", "detect_guessing")
    return detect_guessing(trials)
