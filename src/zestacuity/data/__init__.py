"""
zestacuity.data
===============

submodule for trial records and acuity units.

Includes:
- dataset: Trial, trials_to_numpy
- transforms: logMAR / decimal / Snellen conversions
"""

from .dataset import Trial, trials_to_numpy
from .transforms import (
    decimal_to_logmar,
    logmar_to_decimal,
    logmar_to_snellen,
    snellen_to_logmar,
)

__all__ = [
    "Trial",
    "trials_to_numpy",
    "logmar_to_decimal",
    "decimal_to_logmar",
    "logmar_to_snellen",
    "snellen_to_logmar",
]
