"""Standardized error handling and performance utilities.

This module provides:
1. Performance timing decorator for profiling the generation hot paths
2. Structured context logging for errors
3. User-friendly error message formatting for collaborator failures

Usage at an operation boundary (pipeline stage, CLI command):
    from utils.error_handling import handle_operation_error

    try:
        table = extractor.extract(image_bytes, mime_type)
    except ExtractionError as e:
        self.extraction_error = handle_operation_error(e, "Extraction failed", path)

Performance timing usage:
    from utils.error_handling import timed

    @timed
    def generate(...):
        ...

    # Enable timing with: LCG_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from utils.env import perf_debug_enabled

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Decorator to log execution time of functions.

    Only active when the LCG_PERF_DEBUG=1 environment variable is set.
    Logs timing at DEBUG level to avoid noise in normal runs.

    Args:
        func: Function to wrap with timing

    Returns:
        Wrapped function that logs execution time
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not perf_debug_enabled():
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__qualname__} took {elapsed:.3f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__qualname__} failed after {elapsed:.3f}s")
            raise

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context describing what was being done
        include_type: Whether to include the exception type name

    Returns:
        Formatted error message suitable for display to users
    """
    error_str = str(error)

    # Handle empty error messages
    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts) if len(parts) > 1 else parts[0]


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context and its traceback.

    Args:
        error: The exception that occurred
        context: Description of what was being done when error occurred
        extra: Additional context to include in the log record
        level: Logging level (default ERROR)
    """
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)


def handle_operation_error(
    error: Exception,
    context: str,
    *args: Any,
    include_type: bool = False,
) -> str:
    """Log a failed user-triggered operation and return a readable message.

    Failures are terminal for the single operation; callers keep whatever
    tables they already computed and surface the returned string.

    Args:
        error: The exception that occurred
        context: Description of what was being done (e.g., "Extraction failed")
        *args: Additional context items to include in log (e.g., file path)
        include_type: Whether the message names the exception class

    Returns:
        Formatted error message suitable for showing to the user
    """
    extra = {}
    for i, arg in enumerate(args):
        extra[f"context_{i}"] = str(arg)

    log_exception(error, context, extra)

    return format_error_message(error, context, include_type=include_type)
