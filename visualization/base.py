# -*- coding: utf-8 -*-
"""
Visualization Shared Utilities
==============================

Palette constants, the styling helper, and the ``BasePlotter`` base
class shared by the AHP plotters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from loggers import LOGGER_NAME

_logger = logging.getLogger(f'{LOGGER_NAME}.visualization')


# =========================================================================
# Color constants
# =========================================================================

PALETTE = {
    'deep_blue':   '#1B2838',
    'royal_blue':  '#2E86AB',
    'emerald':     '#17B169',
    'amber':       '#F18F01',
    'crimson':     '#C73E1D',
    'slate':       '#626D71',
    'light_gray':  '#F0F0F0',
}

CATEGORICAL_COLORS = [
    '#2E86AB', '#A23B72', '#F18F01', '#17B169', '#C73E1D',
    '#7B68EE', '#0E7C7B', '#F4A100', '#E5625E', '#626D71',
    '#1B9AAA', '#D81159', '#8F2D56', '#218380', '#FBB13C',
]


def apply_style(dpi: int = 150) -> None:
    """Apply a consistent style to all figures."""
    plt.rcParams.update({
        'figure.dpi': dpi,
        'savefig.dpi': dpi,
        'font.family': 'sans-serif',
        'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'sans-serif'],
        'font.size': 10,
        'axes.titlesize': 13,
        'axes.titleweight': 'bold',
        'axes.labelsize': 11,
        'axes.grid': True,
        'grid.alpha': 0.25,
        'grid.linestyle': '--',
        'legend.fontsize': 9,
        'figure.facecolor': 'white',
        'savefig.facecolor': 'white',
        'savefig.bbox': 'tight',
    })


# =========================================================================
# BasePlotter
# =========================================================================

class BasePlotter:
    """
    Shared functionality for plotter subclasses.

    Subclasses call ``self._save(fig, name)`` and ``self._truncate(label)``
    without duplicating logic.
    """

    def __init__(self,
                 output_dir: str = 'result/figures',
                 dpi: int = 150,
                 figsize: Tuple[int, int] = (10, 6)):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.dpi = dpi
        self.figsize = figsize
        self.generated_figures: List[str] = []
        apply_style(dpi)

    def _save(self, fig, name: str) -> str:
        """Save *fig* to *output_dir/name*, record it, close it."""
        path = self.output_dir / name
        try:
            fig.savefig(path, dpi=self.dpi, bbox_inches='tight',
                        facecolor='white', edgecolor='none')
        finally:
            plt.close(fig)
        self.generated_figures.append(str(path))
        _logger.debug('Figure saved: %s', path.name)
        return str(path)

    @staticmethod
    def _truncate(label: str, n: int = 18) -> str:
        return label if len(label) <= n else label[:n - 1] + '…'

    def get_generated_figures(self) -> List[str]:
        return list(self.generated_figures)


__all__ = [
    'PALETTE', 'CATEGORICAL_COLORS',
    'apply_style', 'BasePlotter', 'plt',
]
