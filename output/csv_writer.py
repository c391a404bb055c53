# -*- coding: utf-8 -*-
"""
CSV & JSON Data Writer for AHP Decision Runs
============================================

All structured numerical output (criterion weights, comparison matrix,
rankings, sensitivity sweeps, the model export record) is persisted
through this single writer class. Every file lands in
``<base_dir>/results/``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from loggers import get_module_logger

_logger = get_module_logger('output')


class CsvWriter:
    """Write CSV / JSON result files into ``<base_dir>/results/``."""

    def __init__(self, base_output_dir: str = 'result'):
        self.results_dir = Path(base_output_dir) / 'results'
        self.results_dir.mkdir(parents=True, exist_ok=True)
        self._saved_files: List[str] = []

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _record(self, path: Path) -> str:
        s = str(path)
        self._saved_files.append(s)
        _logger.info('Saved: %s', path.name)
        return s

    def _save_csv(self, df: pd.DataFrame, name: str,
                  float_fmt: str = '%.6f', **kwargs) -> str:
        path = self.results_dir / name
        df.to_csv(path, float_format=float_fmt, **kwargs)
        return self._record(path)

    def _save_json(self, obj: Any, name: str) -> str:
        path = self.results_dir / name
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(obj, f, indent=2, default=str, ensure_ascii=False)
        return self._record(path)

    def get_saved_files(self) -> List[str]:
        return list(self._saved_files)

    # ==================================================================
    #  1. WEIGHTS
    # ==================================================================

    def save_weights(self, model: Any) -> str:
        """Criterion table with kind, unit and derived weight."""
        df = pd.DataFrame([
            {'Criterion': c.name, 'Description': c.description,
             'Kind': c.kind.value, 'Unit': c.unit, 'Weight': c.weight}
            for c in model.criteria
        ], columns=['Criterion', 'Description', 'Kind', 'Unit', 'Weight'])
        return self._save_csv(df, 'criterion_weights.csv', index=False)

    def save_comparison_matrix(self, weight_result: Any) -> Optional[str]:
        matrix = weight_result.details.get('comparison_matrix')
        if matrix is None:
            return None
        return self._save_csv(matrix, 'comparison_matrix.csv')

    # ==================================================================
    #  2. RANKINGS
    # ==================================================================

    def save_rankings(self, model: Any, rankings: List[Any]) -> str:
        """Rank, name, overall score and the raw score per criterion."""
        names = [c.name for c in model.criteria]
        rows = []
        for r in rankings:
            row: Dict[str, Any] = {'Rank': r.rank, 'Alternative': r.name,
                                   'Overall_Score': r.overall_score}
            for c in names:
                row[c] = r.criteria_scores.get(c)
            rows.append(row)
        df = pd.DataFrame(rows, columns=['Rank', 'Alternative', 'Overall_Score'] + names)
        return self._save_csv(df, 'rankings.csv', float_fmt='%.4f', index=False)

    # ==================================================================
    #  3. SENSITIVITY
    # ==================================================================

    def save_sensitivity(self, sensitivity: Dict[str, Any]) -> Optional[str]:
        """All sweeps stacked into one long table keyed by criterion."""
        if not sensitivity:
            return None
        frames = []
        for name, result in sensitivity.items():
            df = result.to_frame()
            df.insert(0, 'Criterion', name)
            frames.append(df)
        combined = pd.concat(frames, ignore_index=True)
        return self._save_csv(combined, 'sensitivity_analysis.csv', index=False)

    # ==================================================================
    #  4. MODEL RECORD
    # ==================================================================

    def save_model(self, record: Dict[str, Any], name: str = 'model.json') -> str:
        return self._save_json(record, name)
