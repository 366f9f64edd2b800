"""
Logging for the dalenius package.

All loggers live under the ``dalenius`` hierarchy, which gets a single
console handler on import. Pipeline stages are wrapped with
:func:`log_calls` (DEBUG trace), the public API with :func:`log_performance`
and :func:`log_operation`. A failure is logged at ERROR once, by the
enclosing :func:`log_operation`; the decorators let exceptions pass through.
"""

import functools
import logging
import time
from contextlib import contextmanager

ROOT_LOGGER_NAME = "dalenius"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set the level of the ``dalenius`` hierarchy and attach a console handler.

    Args:
        level: Level name such as ``"DEBUG"`` or ``"WARNING"``; unknown
            names fall back to INFO.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, placed under the ``dalenius`` hierarchy."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_calls(level: int = logging.DEBUG):
    """
    Decorator tracing entry to and exit from a pipeline stage.

    Args:
        level: Logging level for the trace messages.
    """

    def decorator(func):
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.log(level, f"Calling {func_name}")
            result = func(*args, **kwargs)
            logger.log(level, f"Completed {func_name}")
            return result

        return wrapper

    return decorator


def log_performance(threshold: float = 0.1, level: int = logging.INFO):
    """
    Decorator reporting calls that take at least ``threshold`` seconds.

    Args:
        threshold: Minimum duration (seconds) to log.
        level: Logging level to use.
    """

    def decorator(func):
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            result = func(*args, **kwargs)
            duration = time.perf_counter() - start_time

            if duration >= threshold:
                logger.log(
                    level,
                    f"Performance: {func.__qualname__} completed in {duration:.3f}s",
                )
            return result

        return wrapper

    return decorator


@contextmanager
def log_operation(
    operation_name: str,
    logger: logging.Logger,
    level: int = logging.INFO,
):
    """
    Context manager logging start, completion and failure of an operation.

    Args:
        operation_name: Name of the operation.
        logger: Logger to report through.
        level: Logging level for start and completion messages.
    """
    logger.log(level, f"Starting operation: {operation_name}")
    start_time = time.perf_counter()

    try:
        yield logger
    except Exception as e:
        duration = time.perf_counter() - start_time
        logger.error(f"Failed operation: {operation_name} after {duration:.3f}s: {e}")
        raise

    duration = time.perf_counter() - start_time
    logger.log(level, f"Completed operation: {operation_name} in {duration:.3f}s")


configure_logging()
