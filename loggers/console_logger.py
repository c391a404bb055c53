# -*- coding: utf-8 -*-
"""
Console Logger for the AHP Engine
=================================

Concise, colour-coded, structured terminal output for decision runs.
All console output of the pipeline goes through this single class so
that monitoring stays consistent.

Design goals
------------
* One-line status per step
* Phase banners with timing
* Compact metric / table display
* Final decision summary (weights, consistency, ranking, stability)
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import Any, Generator, List, Optional, Sequence, TextIO

from .context import Colors, LogContext, PhaseMetrics


# Width of the banner / separator lines
_LINE_W = 70


class ConsoleLogger:
    """Structured console logger for monitoring AHP pipeline runs."""

    def __init__(self, use_color: Optional[bool] = None,
                 stream: Optional[TextIO] = None):
        self._color = Colors.supports_color() if use_color is None else use_color
        self._stream = stream
        self._phase_stack: List[PhaseMetrics] = []
        self._all_phases: List[PhaseMetrics] = []

    # ------------------------------------------------------------------
    # Colour helpers
    # ------------------------------------------------------------------

    def _c(self, text: str, *codes: str) -> str:
        if not self._color:
            return text
        return ''.join(codes) + text + Colors.RESET

    # ------------------------------------------------------------------
    # Low-level write
    # ------------------------------------------------------------------

    def _write(self, msg: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(msg + '\n')
        stream.flush()

    # ------------------------------------------------------------------
    # Banners & separators
    # ------------------------------------------------------------------

    def banner(self, title: str, subtitle: str = '') -> None:
        """Print a prominent banner (e.g. at startup)."""
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))
        self._write(self._c(f'  {title}', Colors.BOLD, Colors.BRIGHT_WHITE))
        if subtitle:
            self._write(self._c(f'  {subtitle}', Colors.DIM))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

    def separator(self, char: str = '-') -> None:
        self._write(self._c(char * _LINE_W, Colors.DIM))

    # ------------------------------------------------------------------
    # Phase management (context manager)
    # ------------------------------------------------------------------

    @contextmanager
    def phase(self, name: str, number: Optional[int] = None,
              total_phases: int = 5) -> Generator['_PhaseCtx', None, None]:
        """Context manager that prints phase start / end with timing.

        Example::

            with console.phase('Weight Derivation') as p:
                result = derive_weights(model)
                p.metric('CR', result.consistency.consistency_ratio)
        """
        if number is None:
            number = len(self._all_phases) + 1
        label = f'[{number}/{total_phases}] {name}'
        metrics = PhaseMetrics(name=name, start_time=time.time())
        self._phase_stack.append(metrics)
        self._all_phases.append(metrics)
        LogContext.set('phase', name)

        self._write('')
        self._write(self._c(f'>> {label}', Colors.BOLD, Colors.CYAN))

        ctx = _PhaseCtx(self, metrics)
        try:
            yield ctx
        except Exception as exc:
            metrics.finish('failed')
            self._phase_stack.pop()
            LogContext.remove('phase')
            self._write(self._c(
                f'   FAIL  {label}  ({metrics.elapsed:.2f}s) {type(exc).__name__}: {exc}',
                Colors.RED, Colors.BOLD,
            ))
            raise
        else:
            metrics.finish('completed')
            self._phase_stack.pop()
            LogContext.remove('phase')
            self._write(self._c(f'   OK    {label}  ({metrics.elapsed:.2f}s)',
                                Colors.GREEN))

    @property
    def phases(self) -> List[PhaseMetrics]:
        return list(self._all_phases)

    # ------------------------------------------------------------------
    # Step / metric / table helpers (used inside phases)
    # ------------------------------------------------------------------

    def step(self, message: str) -> None:
        """Print a substep inside the current phase."""
        self._write(self._c(f'   . {message}', Colors.WHITE))

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        """Print a key-value metric."""
        val_str = f'{value:.4f}' if isinstance(value, float) else str(value)
        suffix = f' {unit}' if unit else ''
        self._write(self._c(f'     {label}: ', Colors.DIM) + f'{val_str}{suffix}')

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]],
              col_widths: Optional[Sequence[int]] = None, indent: int = 6) -> None:
        """Print a compact fixed-width table."""
        if col_widths is None:
            col_widths = [
                max([len(h)] + [len(str(r[i])) for r in rows]) + 2
                for i, h in enumerate(headers)
            ]
        pad = ' ' * indent
        hdr = pad + '  '.join(f'{h:^{w}}' for h, w in zip(headers, col_widths))
        self._write(self._c(hdr, Colors.BOLD))
        self._write(pad + '  '.join('-' * w for w in col_widths))
        for row in rows:
            cells = []
            for c, w in zip(row, col_widths):
                try:
                    float(str(c).replace('+', '').replace('%', ''))
                    cells.append(f'{c:>{w}}')
                except ValueError:
                    cells.append(f'{c:<{w}}')
            self._write(pad + '  '.join(cells))

    # ------------------------------------------------------------------
    # Informational / warning / error
    # ------------------------------------------------------------------

    def info(self, message: str) -> None:
        self._write(self._c(f'  i {message}', Colors.GREEN))

    def success(self, message: str) -> None:
        self._write(self._c(f'  OK {message}', Colors.BRIGHT_GREEN, Colors.BOLD))

    def warning(self, message: str) -> None:
        self._write(self._c(f'  ! {message}', Colors.YELLOW))

    def error(self, message: str) -> None:
        self._write(self._c(f'  X {message}', Colors.RED, Colors.BOLD))

    # ------------------------------------------------------------------
    # Decision summary
    # ------------------------------------------------------------------

    def show_model_summary(self, result: Any) -> None:
        """Print weights, consistency, ranking and stability of a pipeline run."""
        model = result.model
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))
        self._write(self._c(f'  RESULTS  {model.name}', Colors.BOLD, Colors.BRIGHT_WHITE))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

        self._write(self._c('\n  CRITERION WEIGHTS', Colors.BOLD))
        self.table(
            ['Criterion', 'Kind', 'Weight'],
            [[c.name, c.kind.value, f'{c.weight * 100:.2f}%'] for c in model.criteria],
        )

        cons = result.weight_result.consistency
        status = 'PASS' if cons.is_consistent else 'FAIL'
        colour = Colors.GREEN if cons.is_consistent else Colors.RED
        self._write(self._c('\n  CONSISTENCY', Colors.BOLD))
        self.metric('lambda_max', cons.lambda_max)
        self.metric('CI', cons.consistency_index)
        self.metric('CR', f'{cons.consistency_ratio * 100:.2f}%')
        self._write(self._c(f'     Status: {status}', colour, Colors.BOLD))

        self._write(self._c('\n  RANKING', Colors.BOLD))
        self.table(
            ['Rank', 'Alternative', 'Score'],
            [[str(r.rank), r.name, r.formatted_score] for r in result.rankings],
        )

        if result.sensitivity:
            self._write(self._c('\n  SENSITIVITY', Colors.BOLD))
            for name, sens in result.sensitivity.items():
                reversals = len(sens.rank_reversals)
                state = 'stable' if sens.is_stable else f'{reversals} rank reversal(s)'
                self.metric(name, state)

        self._write(self._c(f'\n  RUNTIME : {result.execution_time:.3f}s', Colors.BOLD))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.BLUE))

    def show_completion(self, output_dir: str = 'result') -> None:
        """Print the final 'analysis complete' box."""
        self._write('')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.GREEN))
        self._write(self._c('  ANALYSIS COMPLETE', Colors.BOLD, Colors.BRIGHT_GREEN))
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.GREEN))
        self._write(f'  All outputs saved to {output_dir}/:')
        self._write('    figures/  weight, matrix and sensitivity charts')
        self._write('    results/  weights, rankings, sweeps (CSV) and model.json')
        self._write('    reports/  Markdown decision report')
        self._write(self._c('=' * _LINE_W, Colors.BOLD, Colors.GREEN))


# ------------------------------------------------------------------
# Phase context helper returned by ConsoleLogger.phase()
# ------------------------------------------------------------------

class _PhaseCtx:
    """Lightweight proxy for logging detail inside a phase block."""

    def __init__(self, logger: ConsoleLogger, metrics: PhaseMetrics):
        self._logger = logger
        self.metrics = metrics

    def detail(self, message: str) -> None:
        self._logger.step(message)

    def metric(self, label: str, value: Any, unit: str = '') -> None:
        self.metrics.details[label] = value
        self._logger.metric(label, value, unit)

    def warning(self, message: str) -> None:
        self._logger.warning(message)


__all__ = ['ConsoleLogger']
