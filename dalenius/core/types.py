"""Shared Data Types for the Stratification Pipeline
===================================================

Dataclasses passed between the interval builder, the cumulative curve and
the level assigner, plus the full result record returned by
:func:`dalenius.api.stratify`.
"""

from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np

from dalenius.io.json_utils import json_safe


@dataclass(frozen=True)
class SubInterval:
    """One fixed-width bin over the sorted sample's value range."""

    index: int  # 1-indexed position in the sequence
    lower_limit: float
    upper_limit: float
    cumulative_count: int
    discrete_count: int
    sqrt_frequency: float = 0.0
    cumulative_sqrt_frequency: float = 0.0

    def with_curve(
        self, sqrt_frequency: float, cumulative_sqrt_frequency: float
    ) -> "SubInterval":
        return replace(
            self,
            sqrt_frequency=sqrt_frequency,
            cumulative_sqrt_frequency=cumulative_sqrt_frequency,
        )


@dataclass(frozen=True)
class Stratum:
    """One contiguous value range of the output partition."""

    level: int
    name: str
    lower_bound: float
    upper_bound: float


@dataclass
class StratificationResult:
    """Strata together with the intermediate quantities that produced them."""

    strata: list[Stratum]
    sub_intervals: list[SubInterval]
    distance_matrix: np.ndarray  # shape (number_intervals, num_levels)
    targets: np.ndarray
    total_curve_value: float
    target_step: float
    interval_width: float
    sample_size: int
    sample_min: float
    sample_max: float
    n_missing: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def num_levels(self) -> int:
        return len(self.strata)

    @property
    def number_intervals(self) -> int:
        return len(self.sub_intervals)

    def bounds(self) -> list[tuple[float, float]]:
        """Return ``(lower_bound, upper_bound)`` per stratum, in level order."""
        return [(s.lower_bound, s.upper_bound) for s in self.strata]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the result."""
        return json_safe(
            {
                "strata": [
                    {
                        "level": s.level,
                        "name": s.name,
                        "lower_bound": s.lower_bound,
                        "upper_bound": s.upper_bound,
                    }
                    for s in self.strata
                ],
                "sub_intervals": [
                    {
                        "index": b.index,
                        "lower_limit": b.lower_limit,
                        "upper_limit": b.upper_limit,
                        "cumulative_count": b.cumulative_count,
                        "discrete_count": b.discrete_count,
                        "sqrt_frequency": b.sqrt_frequency,
                        "cumulative_sqrt_frequency": b.cumulative_sqrt_frequency,
                    }
                    for b in self.sub_intervals
                ],
                "distance_matrix": self.distance_matrix,
                "targets": self.targets,
                "total_curve_value": self.total_curve_value,
                "target_step": self.target_step,
                "number_intervals": self.number_intervals,
                "interval_width": self.interval_width,
                "sample_size": self.sample_size,
                "sample_min": self.sample_min,
                "sample_max": self.sample_max,
                "n_missing": self.n_missing,
                "metadata": self.metadata,
            }
        )


__all__ = [
    "SubInterval",
    "Stratum",
    "StratificationResult",
]
