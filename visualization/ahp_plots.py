# -*- coding: utf-8 -*-
"""
AHP Plots (fig01–fig03)
=======================

Criterion weight bar chart, comparison-matrix heatmap, and sensitivity
rank trajectories (one panel per swept criterion).
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from typing import Any, Dict, List, Optional

from .base import BasePlotter, CATEGORICAL_COLORS, PALETTE, plt


class AHPPlotter(BasePlotter):
    """Figures for weight derivation and sensitivity analysis."""

    # ==================================================================
    #  FIG 01 – Criterion Weights
    # ==================================================================

    def plot_weights(
        self,
        model: Any,
        save_name: str = 'fig01_criterion_weights.png',
    ) -> Optional[str]:
        if not model.criteria:
            return None

        names = [c.name for c in model.criteria]
        weights = np.array([c.weight for c in model.criteria])
        colors = [PALETTE['crimson'] if c.is_cost else PALETTE['royal_blue']
                  for c in model.criteria]

        fig, ax = plt.subplots(figsize=self.figsize)
        bars = ax.bar(range(len(names)), weights, color=colors,
                      edgecolor='white', linewidth=0.6, zorder=2)
        for bar, w in zip(bars, weights):
            ax.text(bar.get_x() + bar.get_width() / 2, w + 0.005,
                    f'{w:.1%}', ha='center', va='bottom', fontsize=9)

        ax.set_xticks(range(len(names)))
        ax.set_xticklabels([self._truncate(n) for n in names],
                           rotation=30, ha='right')
        ax.set_ylabel('Weight')
        ax.set_ylim(0, max(weights.max() * 1.15, 0.1))
        cons = model.consistency
        ax.set_title(f'{model.name}: Criterion Weights '
                     f'(CR = {cons.consistency_ratio:.3f})', pad=12)
        return self._save(fig, save_name)

    # ==================================================================
    #  FIG 02 – Comparison Matrix Heatmap
    # ==================================================================

    def plot_comparison_matrix(
        self,
        matrix: pd.DataFrame,
        cmap: str = 'YlOrRd',
        save_name: str = 'fig02_comparison_matrix.png',
    ) -> Optional[str]:
        if matrix is None or matrix.empty:
            return None

        n = len(matrix)
        # log scale keeps reciprocal pairs symmetric around 0
        values = np.log(matrix.values.astype(float))
        vmax = max(np.abs(values).max(), 1e-9)

        fig, ax = plt.subplots(figsize=(max(6, n * 1.1), max(5, n * 0.9)))
        im = ax.imshow(values, cmap=cmap, vmin=-vmax, vmax=vmax)
        for i in range(n):
            for j in range(n):
                v = matrix.values[i, j]
                text = f'{v:.0f}' if v >= 1 and float(v).is_integer() else f'{v:.2f}'
                ax.text(j, i, text, ha='center', va='center', fontsize=9)

        labels = [self._truncate(str(c), 14) for c in matrix.columns]
        ax.set_xticks(range(n))
        ax.set_yticks(range(n))
        ax.set_xticklabels(labels, rotation=45, ha='right')
        ax.set_yticklabels(labels)
        ax.grid(False)
        fig.colorbar(im, ax=ax, shrink=0.8, label='log(intensity)')
        ax.set_title('Pairwise Comparison Matrix', pad=12)
        return self._save(fig, save_name)

    # ==================================================================
    #  FIG 03 – Sensitivity Rank Trajectories
    # ==================================================================

    def plot_sensitivity(
        self,
        sensitivity: Dict[str, Any],
        save_name: str = 'fig03_sensitivity_ranks.png',
    ) -> Optional[str]:
        if not sensitivity:
            return None

        n_panels = len(sensitivity)
        n_cols = min(3, n_panels)
        n_rows = int(np.ceil(n_panels / n_cols))
        fig, axes = plt.subplots(n_rows, n_cols,
                                 figsize=(5 * n_cols, 3.8 * n_rows),
                                 squeeze=False)

        for ax, (name, res) in zip(axes.flat, sensitivity.items()):
            x = [p.variation * 100 for p in res.points]
            alternatives: List[str] = list(res.baseline_ranking)
            for k, alt in enumerate(alternatives):
                ranks = [p.ranking.index(alt) + 1 for p in res.points]
                ax.plot(x, ranks, marker='o', markersize=3, linewidth=1.4,
                        color=CATEGORICAL_COLORS[k % len(CATEGORICAL_COLORS)],
                        label=self._truncate(alt, 14))
            ax.set_title(self._truncate(name, 28), fontsize=11)
            ax.set_xlabel('Weight variation (%)')
            ax.set_ylabel('Rank')
            ax.set_yticks(range(1, len(alternatives) + 1))
            ax.invert_yaxis()
            ax.axvline(0, color=PALETTE['slate'], linewidth=0.8, linestyle=':')

        for ax in list(axes.flat)[n_panels:]:
            ax.set_visible(False)

        handles, labels = axes.flat[0].get_legend_handles_labels()
        if handles:
            fig.legend(handles, labels, loc='lower center',
                       ncol=min(len(labels), 5), frameon=False)
        fig.suptitle('Ranking Sensitivity to Criterion Weights', fontweight='bold')
        fig.tight_layout(rect=(0, 0.06, 1, 0.96))
        return self._save(fig, save_name)

    # ==================================================================
    #  All figures
    # ==================================================================

    def generate_all(self, model: Any, weight_result: Any,
                     sensitivity: Optional[Dict[str, Any]] = None,
                     cmap: str = 'YlOrRd') -> int:
        """Produce every figure; return the number written."""
        before = len(self.generated_figures)
        self.plot_weights(model)
        self.plot_comparison_matrix(
            weight_result.details.get('comparison_matrix'), cmap=cmap)
        self.plot_sensitivity(sensitivity or {})
        return len(self.generated_figures) - before
