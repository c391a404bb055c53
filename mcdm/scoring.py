# -*- coding: utf-8 -*-
"""
AHP Scoring and Ranking (Weighted Sum Model)

    Overall_i = Σ_c  s_ic × w_c

where s_ic is the alternative's raw score for criterion c (0 when
missing) and w_c the derived criterion weight. Raw scores are used as
given: cost criteria are not inverted.

Ranking sorts alternatives by descending overall score at the reported
precision (two decimals by default). The sort is stable, so equal
scores keep the order in which alternatives were added.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config import ScoringConfig
from loggers import get_module_logger, log_execution


_logger = get_module_logger('scoring')


@dataclass
class RankedAlternative:
    """One row of the ranking with snapshots of its inputs."""
    name: str
    overall_score: float
    rank: int
    criteria_scores: Dict[str, float] = field(default_factory=dict)
    weights: Dict[str, float] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)
    score_decimals: int = 2

    @property
    def formatted_score(self) -> str:
        return f"{self.overall_score:.{self.score_decimals}f}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'overallScore': round(self.overall_score, self.score_decimals),
            'details': {
                'criteriaScores': dict(self.criteria_scores),
                'weights': dict(self.weights),
                'data': dict(self.data),
            },
        }


def decision_matrix(model, missing_score: float = 0.0) -> pd.DataFrame:
    """Alternatives × criteria matrix of raw scores (missing → *missing_score*)."""
    names = model.criterion_names
    rows = [[alt.score_for(c, missing_score) for c in names]
            for alt in model.alternatives]
    values = np.array(rows, dtype=float).reshape(len(model.alternatives), len(names))
    return pd.DataFrame(values, index=model.alternative_names, columns=names)


def weighted_scores(model, weights: Optional[Mapping[str, float]] = None,
                    missing_score: float = 0.0) -> np.ndarray:
    """
    Weighted-sum score of every alternative, in alternative order.

    Parameters
    ----------
    model : AHPModel
    weights : mapping, optional
        Criterion name → weight. Defaults to each criterion's stored
        ``weight``; criteria absent from the mapping weigh 0.
    """
    if weights is None:
        w = np.array([c.weight for c in model.criteria], dtype=float)
    else:
        w = np.array([weights.get(c.name, 0.0) for c in model.criteria], dtype=float)
    return decision_matrix(model, missing_score).values @ w


def rank_by_score(scores: Sequence[float], decimals: Optional[int] = 2) -> np.ndarray:
    """
    Indices ordering *scores* from best to worst.

    Scores are compared after rounding to *decimals* (raw when ``None``);
    ties keep their input order.
    """
    keys = np.asarray(scores, dtype=float)
    if decimals is not None:
        keys = np.round(keys, decimals)
    return np.argsort(-keys, kind='stable')


class AHPScorer:
    """
    Weighted-sum scoring and ranking of a decision model's alternatives.

    Parameters
    ----------
    config : ScoringConfig, optional
        Missing-score default and display / ranking precision.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def scores(self, model, weights: Optional[Mapping[str, float]] = None) -> pd.Series:
        """Overall score per alternative, in alternative order."""
        values = weighted_scores(model, weights, self.config.missing_score)
        return pd.Series(values, index=model.alternative_names, name='AHP_Score')

    def ranking(self, model, weights: Optional[Mapping[str, float]] = None) -> List[str]:
        """Alternative names from best to worst."""
        values = weighted_scores(model, weights, self.config.missing_score)
        order = rank_by_score(values, self.config.ranking_decimals)
        return [model.alternatives[i].name for i in order]

    @log_execution()
    def rank(self, model) -> List[RankedAlternative]:
        """
        Score every alternative with the model's stored weights and sort.

        Before weights have been derived every weight is 0, so every score
        is 0 and the input order is kept.

        Returns
        -------
        list of RankedAlternative
            Best first.
        """
        cfg = self.config
        values = weighted_scores(model, None, cfg.missing_score)
        order = rank_by_score(values, cfg.ranking_decimals)
        weight_snapshot = {c.name: round(c.weight, cfg.weight_decimals)
                           for c in model.criteria}

        ranked: List[RankedAlternative] = []
        for position, idx in enumerate(order, start=1):
            alt = model.alternatives[idx]
            ranked.append(RankedAlternative(
                name=alt.name,
                overall_score=float(values[idx]),
                rank=position,
                criteria_scores=dict(alt.scores),
                weights=dict(weight_snapshot),
                data=alt.data,
                score_decimals=cfg.score_decimals,
            ))

        if ranked:
            _logger.info("Top alternative of %r: %s (%s)", model.name,
                         ranked[0].name, ranked[0].formatted_score)
        return ranked
