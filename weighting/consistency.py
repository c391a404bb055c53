# -*- coding: utf-8 -*-
"""
Consistency Check for Pairwise Comparison Matrices
==================================================

Measures how far a judgment matrix departs from perfect transitivity.

Mathematical Formula:
    ws    = M · w
    λ_i   = ws_i / w_i
    λ_max = mean(λ_i)
    CI    = (λ_max − n) / (n − 1)        (0 for n ≤ 2)
    CR    = CI / RI(n)                   (0 when RI(n) is 0 or undefined)

A matrix is acceptable when CR ≤ 0.10.

References
----------
Saaty, T.L. (1980). The Analytic Hierarchy Process. McGraw-Hill.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional

from config import ConsistencyConfig


@dataclass
class ConsistencyResult:
    """Consistency figures of one weight derivation."""
    lambda_max: float
    consistency_index: float
    consistency_ratio: float
    random_index: float = 0.0
    n: int = 0
    threshold: float = 0.10

    @property
    def is_consistent(self) -> bool:
        return self.consistency_ratio <= self.threshold

    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, object]:
        def _r(x: float) -> float:
            return round(float(x), decimals) if decimals is not None else float(x)
        return {
            'lambdaMax': _r(self.lambda_max),
            'consistencyIndex': _r(self.consistency_index),
            'consistencyRatio': _r(self.consistency_ratio),
            'isConsistent': self.is_consistent,
        }

    @classmethod
    def empty(cls, threshold: float = 0.10) -> 'ConsistencyResult':
        """State before any derivation has run."""
        return cls(lambda_max=0.0, consistency_index=0.0,
                   consistency_ratio=0.0, threshold=threshold)


def random_index(n: int, table: Optional[Dict[int, float]] = None) -> float:
    """Random index RI(n); 0 for orders outside the table."""
    if table is None:
        table = ConsistencyConfig().random_index
    return float(table.get(n, 0.0))


class ConsistencyChecker:
    """
    Consistency index / ratio for a comparison matrix and its weights.

    Parameters
    ----------
    config : ConsistencyConfig, optional
        Random-index table and acceptability threshold.

    Examples
    --------
    >>> import numpy as np
    >>> m = np.array([[1, 2, 4], [0.5, 1, 2], [0.25, 0.5, 1]])
    >>> w = np.array([4, 2, 1]) / 7
    >>> ConsistencyChecker().check(m, w).consistency_ratio < 1e-12
    True
    """

    def __init__(self, config: Optional[ConsistencyConfig] = None):
        self.config = config or ConsistencyConfig()

    def check(self, matrix: np.ndarray, weights: np.ndarray) -> ConsistencyResult:
        """
        Compute λ_max, CI and CR.

        Parameters
        ----------
        matrix : np.ndarray
            n × n reciprocal comparison matrix.
        weights : np.ndarray
            Priority vector derived from *matrix* (length n).

        Returns
        -------
        ConsistencyResult
        """
        M = np.asarray(matrix, dtype=float)
        w = np.asarray(weights, dtype=float)
        n = M.shape[0]
        threshold = self.config.threshold

        if n == 0:
            return ConsistencyResult.empty(threshold)

        weighted_sum = M @ w
        lambdas = weighted_sum / w
        lambda_max = float(lambdas.mean())

        # One or two criteria are consistent by definition
        if n <= 2:
            ci = 0.0
        else:
            ci = (lambda_max - n) / (n - 1)

        ri = random_index(n, self.config.random_index)
        cr = ci / ri if ri > 0 else 0.0

        return ConsistencyResult(
            lambda_max=lambda_max,
            consistency_index=float(ci),
            consistency_ratio=float(cr),
            random_index=ri,
            n=n,
            threshold=threshold,
        )
