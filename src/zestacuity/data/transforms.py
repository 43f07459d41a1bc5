"""
transforms.py
-------------

Acuity unit conversions.

functions:
- logmar_to_decimal / decimal_to_logmar : decimal = 10 ** (-logMAR)
- logmar_to_snellen / snellen_to_logmar : "20/<round(20 / decimal)>"

Examples
--------
>>> logmar_to_decimal(0.0)
1.0
>>> logmar_to_snellen(0.0)
'20/20'
>>> logmar_to_snellen(1.0)
'20/200'
>>> logmar_to_snellen(0.0, numerator=6)
'6/6'
"""

from __future__ import annotations

import math
import re

_SNELLEN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)\s*$")


def logmar_to_decimal(logmar: float) -> float:
    """
    Convert logMAR to decimal acuity.

    Parameters
    ----------
    logmar : float
        Acuity on the logMAR scale.

    Returns
    -------
    float
        Decimal acuity, 10 ** (-logmar).
    """
    return 10.0 ** (-logmar)


def decimal_to_logmar(decimal: float) -> float:
    """Convert decimal acuity (> 0) to logMAR."""
    if not decimal > 0:
        raise ValueError(f"decimal acuity must be positive, got {decimal}")
    return -math.log10(decimal)


def logmar_to_snellen(logmar: float, numerator: int = 20) -> str:
    """
    Convert logMAR to Snellen notation.

    Parameters
    ----------
    logmar : float
        Acuity on the logMAR scale.
    numerator : int, default=20
        Test distance (20 ft; use 6 for metric notation).

    Returns
    -------
    str
        "<numerator>/<denominator>" with the denominator rounded half-up
        to an integer.
    """
    denominator = math.floor(numerator / logmar_to_decimal(logmar) + 0.5)
    return f"{numerator}/{denominator}"


def snellen_to_logmar(snellen: str) -> float:
    """
    Parse Snellen notation ("20/40", "6/12") into logMAR.

    Raises
    ------
    ValueError
        If `snellen` is not of the form "N/D" with positive N and D.
    """
    match = _SNELLEN.match(snellen)
    if match is None:
        raise ValueError(f"not a Snellen fraction: {snellen!r}")
    numerator, denominator = float(match.group(1)), float(match.group(2))
    if numerator <= 0 or denominator <= 0:
        raise ValueError(f"Snellen fraction must be positive, got {snellen!r}")
    return decimal_to_logmar(numerator / denominator)
