# -*- coding: utf-8 -*-
"""
Output Orchestrator
===================

Central hub coordinating all output writers: delegates to ``CsvWriter``
for data files and ``ReportWriter`` for the Markdown report.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from loggers import get_module_logger, timed_operation
from .csv_writer import CsvWriter
from .report_writer import ReportWriter
from .serialization import export_model

_logger = get_module_logger('output')


class OutputOrchestrator:
    """Coordinate saving all results in one call."""

    def __init__(self, base_output_dir: str = 'result'):
        self.base_dir = base_output_dir
        self.csv = CsvWriter(base_output_dir)
        self.report = ReportWriter(base_output_dir)

    def save_all(
        self,
        model: Any,
        weight_result: Any,
        rankings: List[Any],
        sensitivity: Optional[Dict[str, Any]] = None,
        figure_paths: Optional[List[str]] = None,
    ) -> List[str]:
        """Persist every artefact and return the written paths."""
        with timed_operation(_logger, 'Saving results', logging.DEBUG):
            self.csv.save_weights(model)
            self.csv.save_comparison_matrix(weight_result)
            self.csv.save_rankings(model, rankings)
            self.csv.save_sensitivity(sensitivity or {})
            self.csv.save_model(export_model(model))
            report = self.report.save_report(model, rankings, sensitivity, figure_paths)
        return self.csv.get_saved_files() + [report]
