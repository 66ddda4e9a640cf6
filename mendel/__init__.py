"""
mendel: probability estimation by simulation.

mendel predicts the odds of population selections, such as drawing a
green ball from a bag of coloured balls or picking two boys and one girl
from a classroom, by running many random draws and counting how often a
predicate holds instead of working out the combinatorics by hand.
"""

from .bag import Bag

from .config import (
    DEFAULT_MAX_SIMS,
    Settings,
    get_default_max_sims,
    load_settings,
)

from .errors import (
    MendelError,
    EmptyPopulation,
    InvalidSampleSize,
    InvalidRange,
    InvalidConfiguration,
)

from .utils import (
    NamedCallable,
    named,
    predicate_name,
    standard_error,
)

__version__ = "0.1.0"

__all__ = [
    "Bag",
    # Configuration
    "DEFAULT_MAX_SIMS",
    "Settings",
    "get_default_max_sims",
    "load_settings",
    # Errors
    "MendelError",
    "EmptyPopulation",
    "InvalidSampleSize",
    "InvalidRange",
    "InvalidConfiguration",
    # Utilities
    "NamedCallable",
    "named",
    "predicate_name",
    "standard_error",
]
