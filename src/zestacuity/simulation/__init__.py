"""
simulation
==========

Offline validation helpers.

- SimulatedObserver : known-threshold observer sampling the psychometric model
- run_session : closed-loop session against a simulated observer
"""

from .observer import SimulatedObserver, run_session

__all__ = ["SimulatedObserver", "run_session"]
