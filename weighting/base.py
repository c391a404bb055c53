# -*- coding: utf-8 -*-
"""Result container for weight derivation."""

import numpy as np
import pandas as pd
from typing import Any, Dict, List
from dataclasses import dataclass, field


@dataclass
class WeightResult:
    """Result container for weight calculations.

    ``weights`` keeps criteria order (dict insertion order); ``details``
    holds the intermediate matrices and the consistency result.
    """
    weights: Dict[str, float]
    method: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def criteria(self) -> List[str]:
        return list(self.weights.keys())

    @property
    def as_array(self) -> np.ndarray:
        """Weights as numpy array in criteria order."""
        return np.array(list(self.weights.values()), dtype=float)

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.weights, dtype=float)

    @property
    def consistency(self):
        """The :class:`~weighting.consistency.ConsistencyResult`, if computed."""
        return self.details.get('consistency')

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'method': self.method,
            'weights': dict(self.weights),
        }
        if self.consistency is not None:
            out['consistency'] = self.consistency.to_dict()
        return out
