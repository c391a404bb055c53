# -*- coding: utf-8 -*-
"""
One-Criterion Weight Sensitivity for AHP Rankings
=================================================

Perturbs the weight of a single criterion over ``[-delta, +delta]`` and
re-ranks the alternatives at every sample point:

    w'_t = max(0, w_t + v)            (target criterion)
    w'_c = w_c                        (every other criterion)
    w''  = w' / Σ w'                  (renormalised to sum 1)

The sweep uses ``v = k · delta / n_steps`` for ``k = -n_steps .. n_steps``
(11 points for the default five steps), with an exact zero at the centre
so that the unperturbed sample reproduces the model's own ranking.

The stored model weights are never modified; every sample works on a
copy.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from config import Config, get_config
from loggers import get_module_logger, log_execution
from mcdm.scoring import AHPScorer


_logger = get_module_logger('sensitivity')


@dataclass
class SensitivityPoint:
    """One sample of the sweep."""
    variation: float
    weights: Dict[str, float]
    ranking: List[str]

    @property
    def label(self) -> str:
        """Variation as a percentage string, e.g. ``'-2.00%'``."""
        return f"{self.variation * 100:.2f}%"

    def to_dict(self) -> Dict[str, object]:
        return {'variation': self.label, 'ranking': list(self.ranking)}


@dataclass
class SensitivityResult:
    """Sweep results for one criterion."""
    criterion: str
    original_weight: float
    baseline_ranking: List[str]
    points: List[SensitivityPoint] = field(default_factory=list)
    weight_decimals: int = 4

    @property
    def variations(self) -> List[str]:
        return [p.label for p in self.points]

    @property
    def rankings(self) -> List[List[str]]:
        return [list(p.ranking) for p in self.points]

    @property
    def rank_reversals(self) -> List[SensitivityPoint]:
        """Sample points whose ranking differs from the unperturbed one."""
        return [p for p in self.points if p.ranking != self.baseline_ranking]

    @property
    def is_stable(self) -> bool:
        return not self.rank_reversals

    def to_dict(self) -> Dict[str, object]:
        return {
            'criterion': self.criterion,
            'originalWeight': round(self.original_weight, self.weight_decimals),
            'sensitivityAnalysis': [p.to_dict() for p in self.points],
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per sample: variation, target weight, positions 1..m."""
        rows = []
        for p in self.points:
            row = {'Variation': p.label,
                   'Weight': p.weights.get(self.criterion, 0.0)}
            for pos, name in enumerate(p.ranking, start=1):
                row[f'Rank_{pos}'] = name
            rows.append(row)
        return pd.DataFrame(rows)

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            f"SENSITIVITY: {self.criterion}",
            f"{'='*60}",
            f"Original weight: {self.original_weight:.{self.weight_decimals}f}",
            f"Baseline ranking: {' > '.join(self.baseline_ranking)}",
            "",
        ]
        for p in self.points:
            marker = '' if p.ranking == self.baseline_ranking else '  *'
            lines.append(f"  {p.label:>8}  {' > '.join(p.ranking)}{marker}")
        lines.append(
            "Ranking stable over the sweep" if self.is_stable
            else f"{len(self.rank_reversals)} sample(s) change the ranking (*)"
        )
        lines.append("=" * 60)
        return "\n".join(lines)


class SensitivityAnalysis:
    """
    Sweep one criterion's weight and observe ranking stability.

    Parameters
    ----------
    config : Config, optional
        Uses ``config.sensitivity`` (delta, steps) and ``config.scoring``
        (missing score, ranking precision). The global config when omitted.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.scorer = AHPScorer(self.config.scoring)

    def variations(self, delta: Optional[float] = None) -> np.ndarray:
        """Sample points ``k · delta / n_steps`` for ``k = -n_steps .. n_steps``."""
        if delta is None:
            delta = self.config.sensitivity.delta
        n = self.config.sensitivity.n_steps
        return np.arange(-n, n + 1) * float(delta) / n

    @staticmethod
    def perturb_weights(weights: Dict[str, float], criterion: str,
                        variation: float) -> Dict[str, float]:
        """Shift *criterion* by *variation* (floored at 0) and renormalise.

        A zero total (every weight 0) is returned unnormalised.
        """
        perturbed = dict(weights)
        perturbed[criterion] = max(0.0, weights[criterion] + variation)
        total = sum(perturbed.values())
        if total > 0:
            perturbed = {k: v / total for k, v in perturbed.items()}
        return perturbed

    @log_execution()
    def analyze(self, model, criterion: str,
                delta: Optional[float] = None) -> SensitivityResult:
        """
        Run the sweep for *criterion*.

        Parameters
        ----------
        model : AHPModel
            Model whose weights have been derived.
        criterion : str
            Criterion to perturb.
        delta : float, optional
            Maximum absolute weight change (default ``0.05``).

        Returns
        -------
        SensitivityResult

        Raises
        ------
        KeyError
            If *criterion* has no derived weight.
        """
        if criterion not in model.weights:
            raise KeyError(f"Criterion {criterion!r} has no derived weight")

        base = dict(model.weights)
        baseline = self.scorer.ranking(model)

        points = []
        for v in self.variations(delta):
            weights = self.perturb_weights(base, criterion, float(v))
            points.append(SensitivityPoint(
                variation=float(v),
                weights=weights,
                ranking=self.scorer.ranking(model, weights),
            ))

        result = SensitivityResult(
            criterion=criterion,
            original_weight=float(base[criterion]),
            baseline_ranking=baseline,
            points=points,
            weight_decimals=self.config.scoring.weight_decimals,
        )
        if result.is_stable:
            _logger.info("Sensitivity %r: ranking stable over %d samples",
                         criterion, len(points))
        else:
            _logger.info("Sensitivity %r: %d of %d samples reverse the ranking (%s)",
                         criterion, len(result.rank_reversals), len(points),
                         ', '.join(p.label for p in result.rank_reversals))
        return result

    def analyze_all(self, model,
                    delta: Optional[float] = None) -> Dict[str, SensitivityResult]:
        """Run :meth:`analyze` for every criterion with a derived weight."""
        return {
            c.name: self.analyze(model, c.name, delta)
            for c in model.criteria
            if c.name in model.weights
        }
