# -*- coding: utf-8 -*-
"""
Logging Decorators and Context Managers
=======================================

``log_execution`` / ``log_exceptions`` wrap engine operations;
``log_context`` / ``timed_operation`` scope annotations and timing to a
``with`` block. All of them emit through the ``ahp_engine`` logger tree.
"""

from __future__ import annotations

import time
import logging
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional

from .context import LOGGER_NAME, LogContext


# =============================================================================
# Decorators
# =============================================================================

def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    show_result: bool = False,
) -> Callable:
    """Decorator that logs function entry, exit, and timing."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(LOGGER_NAME)
            func_name = func.__qualname__
            log.log(level, 'Calling %s', func_name)

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                elapsed = time.perf_counter() - start
                log.error('%s failed after %.3fs: %s', func_name, elapsed, exc)
                raise
            elapsed = time.perf_counter() - start
            if show_result:
                log.log(level, '%s returned %s (%.3fs)',
                        func_name, repr(result)[:100], elapsed)
            else:
                log.log(level, '%s completed (%.3fs)', func_name, elapsed)
            return result

        return wrapper
    return decorator


def log_exceptions(
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> Callable:
    """Decorator that logs an escaping exception with traceback, then re-raises."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(LOGGER_NAME)
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                log.log(level, 'Exception in %s: %s', func.__qualname__, exc,
                        exc_info=True)
                raise
        return wrapper
    return decorator


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def log_context(**kwargs: Any) -> Generator[None, None, None]:
    """Temporarily inject key/value pairs into the thread-local log context."""
    previous = {k: LogContext.get().get(k) for k in kwargs}
    for key, value in kwargs.items():
        LogContext.set(key, value)
    try:
        yield
    finally:
        for key, value in previous.items():
            if value is None:
                LogContext.remove(key)
            else:
                LogContext.set(key, value)


@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Generator[None, None, None]:
    """Context manager that logs start / finish with elapsed time."""
    start = time.perf_counter()
    logger.log(level, 'Starting: %s', operation)
    try:
        yield
    finally:
        logger.log(level, 'Finished: %s (%.3fs)', operation,
                   time.perf_counter() - start)


__all__ = [
    'log_execution',
    'log_exceptions',
    'log_context',
    'timed_operation',
]
