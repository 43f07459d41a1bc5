"""
test_compat.py
--------------

Tests for the deprecated camelCase aliases.
"""

import jax.numpy as jnp
import pytest

from zestacuity import ZestConfig, compat, initialize, next_stimulus, threshold_estimate, update


def test_aliases_warn_and_delegate():
    with pytest.warns(DeprecationWarning, match="initialize"):
        state = compat.initializeZest()
    with pytest.warns(DeprecationWarning):
        level = compat.getNextStimulus(state)
    assert level == 0.4
    with pytest.warns(DeprecationWarning):
        new_state = compat.updateZestState(state, level, True, 900.0)
    assert new_state.trial_count == 1
    with pytest.warns(DeprecationWarning):
        assert compat.getThresholdEstimate(new_state) == threshold_estimate(new_state)


def test_camel_case_config_dict():
    with pytest.warns(DeprecationWarning):
        state = compat.initializeZest({"priorMean": 0.5, "priorSD": 0.1})
    expected = initialize(ZestConfig(prior_mean=0.5, prior_sd=0.1))
    assert jnp.array_equal(state.weights, expected.weights)


def test_camel_case_config_used_for_selection():
    config = {"bracketingTrials": [0.7], "maxTrials": 3}
    with pytest.warns(DeprecationWarning):
        state = compat.initializeZest(config)
    with pytest.warns(DeprecationWarning):
        assert compat.getNextStimulus(state, config) == 0.7
    native = ZestConfig(bracketing_trials=(0.7,), max_trials=3)
    assert next_stimulus(state, native) == 0.7
    assert update(state, 0.7, True, 900.0, native).trial_count == 1


def test_unknown_camel_case_key():
    with pytest.warns(DeprecationWarning):
        with pytest.raises(TypeError):
            compat.initializeZest({"maxTrial": 3})


def test_unit_aliases():
    with pytest.warns(DeprecationWarning):
        assert compat.logMARToDecimal(0.0) == 1.0
    with pytest.warns(DeprecationWarning):
        assert compat.logMARToSnellen(0.0) == "20/20"


def test_detect_guessing_alias():
    with pytest.warns(DeprecationWarning):
        report = compat.detectGuessing([])
    assert not report.is_likely_guessing
