"""
zestacuity
==========

Bayesian adaptive visual acuity testing (ZEST).

This package estimates a subject's acuity threshold on the logMAR scale
from a short sequence of binary-response trials. It keeps a discrete
posterior over candidate thresholds and presents, at every step, the
posterior mean. Clinical precision (95% credible interval of about
0.1 logMAR) is typically reached in 12-15 trials instead of the 50+ a
fixed-step staircase needs.

----------------------------------------------------------------------
Workflow
----------------------------------------------------------------------

Core design
-----------
1. Level grid (model/levels.py):
   - Descending logMAR levels 1.0 .. -0.4 in 0.05 steps (29 levels).

2. Prior (model/prior.py):
   - Gaussian density sampled on the grid, renormalized.

3. Psychometric function (model/psychometric.py):
   - P(correct | stimulus, threshold), asymmetric exponential saturation
     between the guess rate and 0.99.

4. Trial placement (trial_placement/):
   - Fixed bracketing levels first, then the posterior mean snapped to
     the grid.

5. Posterior (posterior/):
   - Bayes update over the grid; CI width from a cumulative scan;
     two-sided stopping rule (width or trial cap).

6. Session (session/):
   - Immutable SessionState and pure transition functions.

Unified import style
--------------------
Top-level:
  from zestacuity import ZestConfig, initialize, next_stimulus, update
  from zestacuity import threshold_estimate, logmar_to_snellen, detect_guessing
  from zestacuity import ExperimentSession

Subpackages:
  from zestacuity.model import level_grid, GaussianPrior, PsychometricFunction
  from zestacuity.posterior import bayes_update, confidence_width
  from zestacuity.trial_placement import ZestPlacement
  from zestacuity.simulation import SimulatedObserver, run_session

Data flow
---------
    state = initialize(config)
    level = next_stimulus(state, config)
    state = update(state, level, is_correct, reaction_time_ms, config)
    ...
    threshold_estimate(state)

Precision
---------
64-bit floats are enabled in JAX on import so that normalization holds to
1e-9 and replayed sessions are bit-identical.

----------------------------------------------------------------------
"""

import jax

jax.config.update("jax_enable_x64", True)

# Re-export subpackages for unified import style (e.g., zestacuity.model)
from . import data as data  # noqa: E402
from . import model as model  # noqa: E402
from . import posterior as posterior  # noqa: E402
from . import session as session  # noqa: E402
from . import simulation as simulation  # noqa: E402
from . import trial_placement as trial_placement  # noqa: E402
from . import utils as utils  # noqa: E402

# Configuration
from .config import ZestConfig  # noqa: E402

# Data
from .data.dataset import Trial  # noqa: E402
from .data.transforms import (  # noqa: E402
    decimal_to_logmar,
    logmar_to_decimal,
    logmar_to_snellen,
    snellen_to_logmar,
)
from .model.levels import level_grid  # noqa: E402

# Engine
from .session.engine import (  # noqa: E402
    initialize,
    next_stimulus,
    threshold_estimate,
    update,
)

# Experiment orchestration
from .session.experiment_session import ExperimentSession  # noqa: E402
from .session.state import SessionState  # noqa: E402

# Reporting
from .posterior.diagnostics import PosteriorSummary, posterior_summary  # noqa: E402
from .utils.diagnostics import GuessingReport, detect_guessing  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ZestConfig",
    # Engine
    "initialize",
    "next_stimulus",
    "update",
    "threshold_estimate",
    "SessionState",
    "level_grid",
    # Session orchestration
    "ExperimentSession",
    # Data handling
    "Trial",
    "logmar_to_decimal",
    "decimal_to_logmar",
    "logmar_to_snellen",
    "snellen_to_logmar",
    # Reporting
    "detect_guessing",
    "GuessingReport",
    "posterior_summary",
    "PosteriorSummary",
    # Subpackages
    "data",
    "model",
    "posterior",
    "session",
    "simulation",
    "trial_placement",
    "utils",
]
