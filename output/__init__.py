# -*- coding: utf-8 -*-
"""
Output Package
==============

Export / import records, CSV / JSON result files, Markdown reports, and
orchestration thereof.

Quick start::

    from output import OutputOrchestrator, export_model
    record = export_model(model)
    OutputOrchestrator('result').save_all(model, weight_result, rankings)
"""

from .serialization import export_model, import_model
from .csv_writer import CsvWriter
from .report_writer import ReportWriter
from .orchestrator import OutputOrchestrator

__all__ = [
    'export_model', 'import_model',
    'CsvWriter', 'ReportWriter', 'OutputOrchestrator',
]
