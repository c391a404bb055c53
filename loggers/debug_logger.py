# -*- coding: utf-8 -*-
"""
Structured Debug Logger for the AHP Engine
===========================================

Records every detail of a decision run into a single JSON array file
(``<output>/logs/debug_<timestamp>.json``): comparison matrices, weight
vectors, consistency figures, sensitivity sweeps.

Each entry carries: timestamp, level, module, function, line, phase,
model, message, and an optional structured *data* payload.
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .context import LOGGER_NAME, Colors, LogContext


class DebugLogger:
    """Accumulates structured log entries and flushes to a JSON array file."""

    def __init__(self, output_dir: str = 'result/logs'):
        self._dir = Path(output_dir)
        self._dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime('%Y%m%d_%H%M%S')
        self._path = self._dir / f'debug_{ts}.json'
        self._entries: List[Dict[str, Any]] = []

        # Route stdlib records from the engine's logger tree into the file
        self._stdlib_logger = logging.getLogger(LOGGER_NAME)
        self._stdlib_logger.setLevel(logging.DEBUG)
        self._handler = _InterceptHandler(self)
        self._stdlib_logger.addHandler(self._handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def debug(self, message: str, *, data: Any = None,
              module: str = '', function: str = '') -> None:
        self._add('DEBUG', message, data=data, module=module, function=function)

    def info(self, message: str, *, data: Any = None,
             module: str = '', function: str = '') -> None:
        self._add('INFO', message, data=data, module=module, function=function)

    def warning(self, message: str, *, data: Any = None,
                module: str = '', function: str = '') -> None:
        self._add('WARNING', message, data=data, module=module, function=function)

    def error(self, message: str, *, data: Any = None,
              module: str = '', function: str = '') -> None:
        self._add('ERROR', message, data=data, module=module, function=function)

    def exception(self, message: str, exc: Optional[BaseException] = None) -> None:
        tb = traceback.format_exc() if exc is None else traceback.format_exception(
            type(exc), exc, exc.__traceback__)
        self._add('ERROR', message, data={'traceback': tb})

    def log_data(self, label: str, payload: Any, *, module: str = '') -> None:
        """Store an arbitrary structured payload (matrices, dicts, ...)."""
        self._add('DATA', label, data=payload, module=module)

    # ------------------------------------------------------------------
    # Flush / close
    # ------------------------------------------------------------------

    def flush(self) -> str:
        """Write accumulated entries to disk and return the file path."""
        with open(self._path, 'w', encoding='utf-8') as fh:
            json.dump(self._entries, fh, indent=2, default=_json_default,
                      ensure_ascii=False)
        return str(self._path)

    def close(self) -> str:
        """Flush and detach the stdlib intercept handler."""
        path = self.flush()
        self._stdlib_logger.removeHandler(self._handler)
        return path

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def entries(self) -> List[Dict[str, Any]]:
        return list(self._entries)

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add(self, level: str, message: str, *, data: Any = None,
             module: str = '', function: str = '', line: int = 0) -> None:
        ctx = LogContext.get()
        entry: Dict[str, Any] = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'module': module,
            'function': function,
            'line': line,
            'phase': ctx.get('phase', ''),
            'model': ctx.get('model', ''),
            'message': Colors.strip(str(message)),
        }
        if data is not None:
            entry['data'] = data
        self._entries.append(entry)


# ------------------------------------------------------------------
# Stdlib-compatible intercept handler
# ------------------------------------------------------------------

class _InterceptHandler(logging.Handler):
    """Bridges stdlib ``logging`` records into :class:`DebugLogger`."""

    def __init__(self, debug_logger: DebugLogger):
        super().__init__(level=logging.DEBUG)
        self._dl = debug_logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._dl._add(
                level=record.levelname,
                message=record.getMessage(),
                module=record.name,
                function=record.funcName,
                line=record.lineno,
            )
        except Exception:
            self.handleError(record)


# ------------------------------------------------------------------
# JSON serialisation helper
# ------------------------------------------------------------------

def _json_default(obj: Any) -> Any:
    """Fallback serialiser for numpy / pandas / dataclass objects."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, pd.DataFrame):
        return obj.to_dict(orient='index')
    if isinstance(obj, pd.Series):
        return obj.to_dict()
    if hasattr(obj, 'to_dict'):
        return obj.to_dict()
    return str(obj)


__all__ = ['DebugLogger']
