"""
rng.py
------

PRNG key handling for simulated sessions.

The estimator is deterministic; randomness enters only through
zestacuity.simulation. Every stochastic draw there takes an explicit JAX
key derived through this module, so one integer seed fixes a whole
simulation study:

    seed(s) -> session_keys(...) -> one key per session
    session key -> split(...) -> one key per trial
    trial key -> trial_keys(...) -> (response key, reaction-time key)

Examples
--------
>>> from zestacuity.utils.rng import session_keys, trial_keys
>>> keys = session_keys(0, 20)
>>> k_resp, k_rt = trial_keys(keys[0])
"""

from __future__ import annotations

import jax
import jax.random as jr


def seed(seed_value: int) -> jax.Array:
    """PRNG key for an integer seed."""
    return jr.PRNGKey(seed_value)


def split(key: jax.Array, num: int = 2) -> jax.Array:
    """
    Split `key` into `num` independent keys, stacked along axis 0.

    run_session() calls this once per trial to advance its key.
    """
    return jr.split(key, num=num)


def session_keys(seed_value: int, n_sessions: int) -> jax.Array:
    """
    Independent keys for a batch of simulated sessions.

    Parameters
    ----------
    seed_value : int
        Seed for the whole batch.
    n_sessions : int
        Number of sessions.

    Returns
    -------
    jax.Array, shape (n_sessions, ...)
        One key per session; keys[i] replays session i on its own.
    """
    if n_sessions < 1:
        raise ValueError(f"n_sessions must be at least 1, got {n_sessions}")
    return split(seed(seed_value), n_sessions)


def trial_keys(key: jax.Array) -> tuple[jax.Array, jax.Array]:
    """Split a trial key into (response key, reaction-time key)."""
    k_resp, k_rt = split(key)
    return k_resp, k_rt
