# -*- coding: utf-8 -*-
"""
Shared Context, Metrics, and Color Utilities for AHP Engine Logging
===================================================================

Context tracking (current phase, current model), phase-timing metrics,
and ANSI colour helpers used by both the console and debug loggers.
"""

import os
import re
import sys
import time
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


LOGGER_NAME = 'ahp_engine'


# =============================================================================
# ANSI Colour Helpers
# =============================================================================

class Colors:
    """ANSI escape sequences for terminal styling."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_GREEN = "\033[92m"
    BRIGHT_WHITE = "\033[97m"

    ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove all ANSI codes from *text*."""
        return cls.ANSI_PATTERN.sub('', text)

    @classmethod
    def supports_color(cls) -> bool:
        """Return ``True`` if stdout is a terminal that accepts ANSI codes."""
        if os.getenv("NO_COLOR"):
            return False
        if os.getenv("FORCE_COLOR"):
            return True
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        return sys.platform != "win32" or os.getenv("TERM") == "xterm"


# =============================================================================
# Thread-Local Log Context
# =============================================================================

class LogContext:
    """Thread-local key/value store for contextual log annotations.

    The pipeline sets ``phase`` and ``model`` so that every debug entry
    records which decision problem and which step produced it.
    """

    _local = threading.local()

    @classmethod
    def get(cls) -> Dict[str, Any]:
        if not hasattr(cls._local, 'context'):
            cls._local.context = {}
        return cls._local.context

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        cls.get()[key] = value

    @classmethod
    def remove(cls, key: str) -> None:
        cls.get().pop(key, None)

    @classmethod
    def clear(cls) -> None:
        cls._local.context = {}


# =============================================================================
# Phase Metrics
# =============================================================================

@dataclass
class PhaseMetrics:
    """Timing information for a single pipeline phase."""

    name: str
    start_time: float
    end_time: Optional[float] = None
    status: str = "running"
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed(self) -> float:
        end = self.end_time or time.time()
        return end - self.start_time

    def finish(self, status: str) -> None:
        self.end_time = time.time()
        self.status = status


__all__ = [
    'LOGGER_NAME',
    'Colors',
    'LogContext',
    'PhaseMetrics',
]
