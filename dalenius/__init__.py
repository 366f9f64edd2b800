"""Dalenius: Cumulative Square-Root-of-Frequency Stratification
=============================================================

Computes stratum boundaries for a one-dimensional numeric sample with the
Dalenius–Hodge method, a classical survey-sampling technique that splits a
population into strata of roughly equal "information weight" before
stratified sampling.

Method:
    1. Split [min, max] into floor(4.3 * log10(n)) equal-width sub-intervals
    2. Accumulate sqrt(frequency) across sub-intervals
    3. Close stratum j at the sub-interval whose cumulative value is nearest
       to j / L of the total, never reusing a sub-interval

Quick Start:
    >>> from dalenius import dalenius_hodge
    >>>
    >>> strata = dalenius_hodge(sample, num_levels=4)
    >>> for stratum in strata:
    ...     print(stratum.name, stratum.lower_bound, stratum.upper_bound)
"""

from dalenius.api import dalenius_hodge, frequency_table, stratify
from dalenius.config import ConfigManager, StratificationConfig
from dalenius.core import (
    DegenerateSampleError,
    ExhaustedIntervalsError,
    InsufficientDataError,
    InvalidParameterError,
    StratificationError,
    StratificationResult,
    Stratum,
    SubInterval,
    TooManyLevelsError,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # API
    "dalenius_hodge",
    "stratify",
    "frequency_table",
    # Configuration
    "ConfigManager",
    "StratificationConfig",
    # Types
    "SubInterval",
    "Stratum",
    "StratificationResult",
    # Errors
    "StratificationError",
    "InvalidParameterError",
    "InsufficientDataError",
    "DegenerateSampleError",
    "TooManyLevelsError",
    "ExhaustedIntervalsError",
]
