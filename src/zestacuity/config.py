"""
config.py
---------

Configuration for a ZEST acuity session.

ZestConfig collects every parameter of the procedure: trial cap, stopping
width, prior shape, psychometric slope, guess rate and the fixed bracketing
sequence. It is a frozen value object. The engine never mutates it; callers
override individual fields with `ZestConfig.from_overrides(...)` or
`dataclasses.replace(...)`.

Defaults
--------
- max_trials=15
- confidence_threshold=0.10 logMAR
- prior_mean=0.0 (20/20), prior_sd=0.8
- slope=0.2
- guess_rate=0.25 (4AFC, e.g. tumbling E with four orientations)
- bracketing_trials=(0.4, 0.0, -0.2)
"""

from __future__ import annotations

import dataclasses
import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ZestConfig:
    """
    Parameters of the ZEST procedure.

    Attributes
    ----------
    max_trials : int
        Hard cap on session length (>= 1).
    confidence_threshold : float
        Width of the 95% credible interval (logMAR) at or below which the
        session stops early (> 0).
    prior_mean : float
        Mean of the Gaussian prior over thresholds (logMAR).
    prior_sd : float
        Standard deviation of the prior (logMAR, > 0).
    slope : float
        Psychometric slope. Smaller values give a sharper transition (> 0).
    guess_rate : float
        Probability of a correct response by chance, 1 / n_alternatives.
        Must lie in [0, 1).
    bracketing_trials : tuple of float
        Stimulus levels presented, in order, before adaptive selection
        starts. May be empty.

    Examples
    --------
    >>> config = ZestConfig()
    >>> config.max_trials
    15
    >>> strict = ZestConfig.from_overrides(confidence_threshold=0.05, max_trials=25)
    """

    max_trials: int = 15
    confidence_threshold: float = 0.10
    prior_mean: float = 0.0
    prior_sd: float = 0.8
    slope: float = 0.2
    guess_rate: float = 0.25
    bracketing_trials: tuple[float, ...] = field(default=(0.4, 0.0, -0.2))

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.bracketing_trials, (str, bytes)) or not isinstance(
            self.bracketing_trials, Sequence
        ):
            raise TypeError(
                "bracketing_trials must be a sequence of floats, "
                f"got {type(self.bracketing_trials).__name__}"
            )
        # frozen: normalize through object.__setattr__
        object.__setattr__(
            self, "bracketing_trials", tuple(float(b) for b in self.bracketing_trials)
        )

        if (
            isinstance(self.max_trials, bool)
            or not isinstance(self.max_trials, numbers.Integral)
            or self.max_trials < 1
        ):
            raise ValueError(f"max_trials must be a positive integer, got {self.max_trials!r}")
        object.__setattr__(self, "max_trials", int(self.max_trials))
        if not self.confidence_threshold > 0:
            raise ValueError(
                f"confidence_threshold must be positive, got {self.confidence_threshold}"
            )
        if not self.prior_sd > 0:
            raise ValueError(f"prior_sd must be positive, got {self.prior_sd}")
        if not self.slope > 0:
            raise ValueError(f"slope must be positive, got {self.slope}")
        if not 0.0 <= self.guess_rate < 1.0:
            raise ValueError(f"guess_rate must lie in [0, 1), got {self.guess_rate}")
        if not math.isfinite(self.prior_mean):
            raise ValueError(f"prior_mean must be finite, got {self.prior_mean}")
        for level in self.bracketing_trials:
            if not math.isfinite(level):
                raise ValueError(f"bracketing_trials must be finite, got {level}")

    @classmethod
    def default(cls) -> ZestConfig:
        """Convenience constructor with the reference defaults."""
        return cls()

    @classmethod
    def from_overrides(cls, **overrides) -> ZestConfig:
        """
        Build a config from the defaults plus any overridden fields.

        Parameters
        ----------
        **overrides
            Field names of ZestConfig with their new values.

        Raises
        ------
        TypeError
            If an override does not name a ZestConfig field.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown ZestConfig option(s): {', '.join(unknown)}")
        return cls(**overrides)

    @property
    def n_bracketing(self) -> int:
        """Number of fixed opening trials."""
        return len(self.bracketing_trials)


def resolve_config(config: ZestConfig | None = None, **overrides) -> ZestConfig:
    """
    Return `config` (or the defaults) with `overrides` applied.

    Used by the engine entry points so that every operation accepts either a
    full config, keyword overrides, or nothing.
    """
    base = ZestConfig() if config is None else config
    if not overrides:
        return base
    known = {f.name for f in dataclasses.fields(ZestConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown ZestConfig option(s): {', '.join(unknown)}")
    return dataclasses.replace(base, **overrides)
