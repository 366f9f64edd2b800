"""Utilities for the dalenius package.

Logging helpers shared by the stratification pipeline.
"""

from dalenius.utils.logging import (
    configure_logging,
    get_logger,
    log_calls,
    log_operation,
    log_performance,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "log_performance",
    "log_calls",
    "log_operation",
]
