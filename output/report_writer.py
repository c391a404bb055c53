# -*- coding: utf-8 -*-
"""
Markdown Decision Report Writer
===============================

Generates ``<base_dir>/reports/report.md``: the consistency check with
its PASS / FAIL status, criterion weights, the final ranking and, when
available, the sensitivity sweeps. Renderable with any Markdown viewer.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from loggers import get_module_logger

_logger = get_module_logger('output')


class ReportWriter:
    """Build and save a Markdown decision report."""

    def __init__(self, base_output_dir: str = 'result'):
        self.reports_dir = Path(base_output_dir) / 'reports'
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        self._path = self.reports_dir / 'report.md'

    @property
    def path(self) -> str:
        return str(self._path)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def build_report(
        self,
        model: Any,
        rankings: List[Any],
        sensitivity: Optional[Dict[str, Any]] = None,
        figure_paths: Optional[List[str]] = None,
    ) -> str:
        """Return the report text for *model*."""
        L: List[str] = []
        cons = model.consistency
        now = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

        L.append(f'# AHP Decision Analysis Report: {model.name}')
        L.append('')
        L.append(f'> **Generated:** {now}  ')
        L.append(f'> **Criteria:** {len(model.criteria)}  ')
        L.append(f'> **Alternatives:** {len(model.alternatives)}')
        L.append('')

        # ── Consistency ──────────────────────────────────────────
        L.append('## Consistency Check')
        L.append('')
        L.append('| Measure | Value |')
        L.append('|---|---:|')
        L.append(f'| λ_max | {cons.lambda_max:.4f} |')
        L.append(f'| Consistency Index | {cons.consistency_index:.4f} |')
        L.append(f'| Consistency Ratio | {cons.consistency_ratio * 100:.2f}% |')
        L.append(f'| Status | {"PASS" if cons.is_consistent else "FAIL"} |')
        L.append('')
        if not cons.is_consistent:
            L.append(f'The consistency ratio exceeds {cons.threshold:.0%}; '
                     'the pairwise judgments should be revisited.')
            L.append('')

        # ── Weights ──────────────────────────────────────────────
        L.append('## Criterion Weights')
        L.append('')
        L.append('| Criterion | Kind | Unit | Weight |')
        L.append('|---|---|---|---:|')
        for c in model.criteria:
            L.append(f'| {c.name} | {c.kind.value} | {c.unit} | {c.weight * 100:.2f}% |')
        L.append('')

        # ── Rankings ─────────────────────────────────────────────
        L.append('## Rankings')
        L.append('')
        for r in rankings:
            L.append(f'{r.rank}. **{r.name}**: {r.formatted_score}/100')
        L.append('')

        # ── Sensitivity ──────────────────────────────────────────
        if sensitivity:
            L.append('## Sensitivity Analysis')
            L.append('')
            L.append('| Criterion | Original Weight | Samples | Rank Reversals |')
            L.append('|---|---:|---:|---:|')
            for name, res in sensitivity.items():
                L.append(f'| {name} | {res.original_weight:.4f} | '
                         f'{len(res.points)} | {len(res.rank_reversals)} |')
            L.append('')
            for name, res in sensitivity.items():
                if res.is_stable:
                    continue
                L.append(f'### {name}')
                L.append('')
                L.append('| Variation | Ranking |')
                L.append('|---:|---|')
                for p in res.points:
                    L.append(f'| {p.label} | {" > ".join(p.ranking)} |')
                L.append('')

        if figure_paths:
            L.append('## Figures')
            L.append('')
            for fig in figure_paths:
                L.append(f'![{Path(fig).stem}]({Path(fig).as_posix()})')
            L.append('')

        return '\n'.join(L)

    def save_report(self, model: Any, rankings: List[Any],
                    sensitivity: Optional[Dict[str, Any]] = None,
                    figure_paths: Optional[List[str]] = None) -> str:
        """Build the report and write it to ``reports/report.md``."""
        text = self.build_report(model, rankings, sensitivity, figure_paths)
        with open(self._path, 'w', encoding='utf-8') as fh:
            fh.write(text)
        _logger.info('Saved: %s', self._path.name)
        return str(self._path)
