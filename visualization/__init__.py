# -*- coding: utf-8 -*-
"""
Visualization Package
=====================

Figures for AHP decision runs (matplotlib, Agg backend):

* fig01 — criterion weights (cost criteria highlighted)
* fig02 — pairwise comparison matrix heatmap
* fig03 — sensitivity rank trajectories

Usage::

    from visualization import AHPPlotter
    plotter = AHPPlotter(output_dir='result/figures')
    plotter.generate_all(model, weight_result, sensitivity)
"""

from .base import BasePlotter, apply_style, PALETTE, CATEGORICAL_COLORS
from .ahp_plots import AHPPlotter

__all__ = [
    'BasePlotter', 'AHPPlotter',
    'apply_style', 'PALETTE', 'CATEGORICAL_COLORS',
]
