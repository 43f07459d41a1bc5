"""
Central pytest configuration for this project.

This file is automatically discovered by pytest and is intended for:

- **Fixtures**: reusable objects or setup logic shared across multiple test files.
- **Pytest hooks**: project-wide customizations of pytest behavior.

Notes
-----
- Contributors should install the package in editable mode
  (`pip install -e .[test]`) so that imports are resolved consistently in
  local dev and CI environments.
- Keep this file focused on test setup. Do not add application logic here.
"""

import pytest

from zestacuity import ZestConfig, initialize, next_stimulus, update
from zestacuity.model import level_grid


@pytest.fixture
def config():
    """Reference configuration (15 trials, 0.10 width, 4AFC)."""
    return ZestConfig()


@pytest.fixture
def levels():
    """Reference 29-level grid, 1.0 .. -0.4 logMAR."""
    return level_grid()


@pytest.fixture
def fresh_state(config):
    """Session state straight after initialization."""
    return initialize(config)


@pytest.fixture
def run_responder():
    """Return a helper that answers every engine-chosen stimulus the same way."""

    def _run(config, is_correct, n_trials=15, reaction_time_ms=1000.0):
        state = initialize(config)
        for _ in range(n_trials):
            if state.is_complete:
                break
            level = next_stimulus(state, config)
            state = update(state, level, is_correct, reaction_time_ms, config)
        return state

    return _run
