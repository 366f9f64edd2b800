"""Core Dalenius–Hodge computation.

Pipeline stages, executed strictly in order:

- intervals.py: sample cleaning, interval count and per-bin counts
- curve.py: cumulative square-root-of-frequency curve
- levels.py: targets, distance matrix and sequential level assignment
"""

from dalenius.core.curve import apply_cumulative_curve, curve_values
from dalenius.core.exceptions import (
    DegenerateSampleError,
    ExhaustedIntervalsError,
    InsufficientDataError,
    InvalidParameterError,
    StratificationError,
    TooManyLevelsError,
)
from dalenius.core.intervals import (
    build_sub_intervals,
    compute_number_intervals,
    prepare_sample,
)
from dalenius.core.levels import (
    assign_levels,
    compute_distance_matrix,
    compute_targets,
    validate_num_levels,
)
from dalenius.core.types import StratificationResult, Stratum, SubInterval

__all__ = [
    # Types
    "SubInterval",
    "Stratum",
    "StratificationResult",
    # Interval construction
    "prepare_sample",
    "compute_number_intervals",
    "build_sub_intervals",
    # Curve
    "apply_cumulative_curve",
    "curve_values",
    # Level assignment
    "validate_num_levels",
    "compute_targets",
    "compute_distance_matrix",
    "assign_levels",
    # Errors
    "StratificationError",
    "InvalidParameterError",
    "InsufficientDataError",
    "DegenerateSampleError",
    "TooManyLevelsError",
    "ExhaustedIntervalsError",
]
