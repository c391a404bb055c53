# -*- coding: utf-8 -*-
"""
AHP Engine Logging Package
==========================

Two-channel logging system:
  * **ConsoleLogger** — concise, colour-coded monitoring output
  * **DebugLogger** — exhaustive structured JSON for post-hoc inspection

Engine modules log through the stdlib ``ahp_engine`` logger tree
(``get_module_logger``); the debug logger intercepts that tree.

Usage::

    from loggers import setup_logging
    console, debug = setup_logging('result')
"""

import logging
from typing import Tuple

from .context import LOGGER_NAME, Colors, LogContext, PhaseMetrics
from .console_logger import ConsoleLogger
from .debug_logger import DebugLogger
from .decorators import log_execution, log_exceptions, log_context, timed_operation


def setup_logging(
    output_dir: str = 'result',
    use_color: bool = None,
) -> Tuple[ConsoleLogger, DebugLogger]:
    """Create and return both loggers.

    Parameters
    ----------
    output_dir : str
        Root output directory; debug JSON goes to ``<output_dir>/logs/``.
    use_color : bool, optional
        Force colour on / off; auto-detected when ``None``.

    Returns
    -------
    tuple[ConsoleLogger, DebugLogger]
    """
    console = ConsoleLogger(use_color=use_color)
    debug = DebugLogger(output_dir=f'{output_dir}/logs')
    return console, debug


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def get_module_logger(module_name: str) -> logging.Logger:
    """Return the ``ahp_engine.<module_name>`` child logger."""
    return logging.getLogger(f'{LOGGER_NAME}.{module_name}')


__all__ = [
    # Primary API
    'setup_logging',
    'get_logger',
    'get_module_logger',
    'ConsoleLogger',
    'DebugLogger',

    # Context & metrics
    'LOGGER_NAME',
    'Colors',
    'LogContext',
    'PhaseMetrics',

    # Decorators & context managers
    'log_execution',
    'log_exceptions',
    'log_context',
    'timed_operation',
]
