"""Custom exceptions for Dalenius–Hodge stratification.

This module defines the exception hierarchy raised by the stratification
pipeline. Every error is raised as soon as it is detected, at the start of
the component that detects it; nothing is retried internally because the
computation is deterministic and a retry without changed inputs cannot
succeed.

Exception Hierarchy:
    StratificationError (base)
    ├── InvalidParameterError (bad num_levels or non-finite sample values)
    ├── InsufficientDataError (too few observations for one sub-interval)
    ├── DegenerateSampleError (zero-range sample)
    ├── TooManyLevelsError (more levels than sub-intervals)
    └── ExhaustedIntervalsError (no sub-intervals left mid-assignment)

Examples
--------
Adjusting the request when there are not enough sub-intervals:

>>> try:
...     strata = dalenius_hodge(sample, num_levels=12)
... except TooManyLevelsError as e:
...     limit = e.error_context["number_intervals"]
...     strata = dalenius_hodge(sample, num_levels=limit)

Generic handling through the base class:

>>> try:
...     strata = dalenius_hodge(sample, num_levels=4)
... except StratificationError as e:
...     logger.error(f"Stratification failed: {e}")
"""

from __future__ import annotations


class StratificationError(Exception):
    """Base exception for all stratification errors.

    Attributes
    ----------
    error_context : dict
        Additional context about the error (sample size, interval count, ...)
    """

    def __init__(self, message: str, error_context: dict | None = None):
        super().__init__(message)
        self.error_context = error_context or {}

    def __str__(self) -> str:
        """Return formatted error message with context."""
        base_msg = super().__str__()
        if self.error_context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.error_context.items())
            return f"{base_msg} (context: {context_str})"
        return base_msg


class InvalidParameterError(StratificationError):
    """Raised when ``num_levels`` is not a positive integer or the sample
    holds infinite values.
    """


class InsufficientDataError(StratificationError):
    """Raised when the sample cannot produce a single sub-interval.

    The interval count ``floor(4.3 * log10(n))`` is zero for ``n <= 1``, so
    at least two non-missing observations are needed.

    Attributes
    ----------
    sample_size : int
        Number of non-missing observations
    number_intervals : int
        Interval count computed for that sample size
    """

    def __init__(
        self,
        message: str,
        sample_size: int | None = None,
        number_intervals: int | None = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if sample_size is not None:
            context["sample_size"] = sample_size
        if number_intervals is not None:
            context["number_intervals"] = number_intervals
        super().__init__(message, context)
        self.sample_size = sample_size
        self.number_intervals = number_intervals


class DegenerateSampleError(StratificationError):
    """Raised when every observation has the same value.

    A zero range gives a zero interval width, so cumulative counts cannot
    vary across sub-intervals.
    """

    def __init__(
        self,
        message: str,
        value: float | None = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if value is not None:
            context["value"] = value
        super().__init__(message, context)
        self.value = value


class TooManyLevelsError(StratificationError):
    """Raised when more levels are requested than there are sub-intervals.

    Attributes
    ----------
    num_levels : int
        Requested number of strata
    number_intervals : int
        Available sub-intervals
    """

    def __init__(
        self,
        message: str,
        num_levels: int | None = None,
        number_intervals: int | None = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if num_levels is not None:
            context["num_levels"] = num_levels
        if number_intervals is not None:
            context["number_intervals"] = number_intervals
        super().__init__(message, context)
        self.num_levels = num_levels
        self.number_intervals = number_intervals


class ExhaustedIntervalsError(StratificationError):
    """Raised when sequential consumption leaves no sub-interval for a level.

    Attributes
    ----------
    level : int
        The level (1-indexed) that found an empty search window
    """

    def __init__(
        self,
        message: str,
        level: int | None = None,
        error_context: dict | None = None,
    ):
        context = error_context or {}
        if level is not None:
            context["level"] = level
        super().__init__(message, context)
        self.level = level


__all__ = [
    "StratificationError",
    "InvalidParameterError",
    "InsufficientDataError",
    "DegenerateSampleError",
    "TooManyLevelsError",
    "ExhaustedIntervalsError",
]
