# -*- coding: utf-8 -*-
"""
AHP Priority Weights
====================

Approximates the principal eigenvector of a pairwise comparison matrix
by normalising every column to sum 1 and averaging across each row.

Mathematical Formula:
    s_j = Σ_i M_ij                 [column sums]
    N_ij = M_ij / s_j              [column-normalised matrix]
    w_i = (Σ_j N_ij) / n           [row averages]

The row averages of a column-normalised matrix sum to 1, so no further
renormalisation is applied. The approximation is exact for n ≤ 2 and for
perfectly consistent matrices.
"""

import numpy as np
import pandas as pd
from typing import Optional

from config import ConsistencyConfig
from loggers import get_module_logger, log_execution
from .base import WeightResult
from .consistency import ConsistencyChecker, ConsistencyResult
from .pairwise import build_comparison_matrix


_logger = get_module_logger('weighting')


class AHPWeightCalculator:
    """
    Normalised-column-average AHP weights with a consistency check.

    Parameters
    ----------
    consistency : ConsistencyConfig, optional
        Random-index table and CR threshold for the consistency check.

    Examples
    --------
    >>> import pandas as pd
    >>> matrix = pd.DataFrame([[1, 3], [1 / 3, 1]],
    ...                       index=['Quality', 'Cost'],
    ...                       columns=['Quality', 'Cost'])
    >>> result = AHPWeightCalculator().calculate(matrix)
    >>> round(result.weights['Quality'], 2)
    0.75
    """

    method = 'ahp_column_average'

    def __init__(self, consistency: Optional[ConsistencyConfig] = None):
        self.checker = ConsistencyChecker(consistency)

    def calculate(self, matrix: pd.DataFrame) -> WeightResult:
        """
        Derive priority weights from a comparison matrix.

        Parameters
        ----------
        matrix : pd.DataFrame
            Square reciprocal comparison matrix labelled by criterion.

        Returns
        -------
        WeightResult
            Weights in criteria order; ``details`` holds the comparison
            matrix, column sums, the normalised matrix and the
            :class:`ConsistencyResult`.

        Raises
        ------
        ValueError
            If the matrix is not square.
        """
        n_rows, n_cols = matrix.shape
        if n_rows != n_cols:
            raise ValueError(f"Comparison matrix must be square, got {n_rows}x{n_cols}")

        names = [str(c) for c in matrix.index]
        if n_rows == 0:
            return WeightResult(
                weights={}, method=self.method,
                details={
                    'weight_vector': np.array([], dtype=float),
                    'consistency': ConsistencyResult.empty(self.checker.config.threshold),
                },
            )

        M = matrix.values.astype(float)
        column_sums = M.sum(axis=0)
        normalized = M / column_sums
        w = normalized.sum(axis=1) / n_rows

        consistency = self.checker.check(M, w)

        return WeightResult(
            weights=dict(zip(names, (float(x) for x in w))),
            method=self.method,
            details={
                'comparison_matrix': matrix,
                'column_sums': pd.Series(column_sums, index=names),
                'normalized_matrix': pd.DataFrame(normalized, index=names, columns=names),
                'weight_vector': w,
                'consistency': consistency,
            },
        )


@log_execution()
def derive_weights(model, consistency: Optional[ConsistencyConfig] = None) -> WeightResult:
    """
    Derive the criterion weights of *model* and store them back on it.

    Overwrites every criterion's ``weight``, the model's name → weight
    map and its consistency state. Inconsistent judgments are logged as a
    warning, never raised.

    Parameters
    ----------
    model : AHPModel
        Decision model with criteria and pairwise judgments.
    consistency : ConsistencyConfig, optional
        Overrides the default random-index table / threshold.

    Returns
    -------
    WeightResult
    """
    names = [c.name for c in model.criteria]
    missing = model.judgments.missing_pairs(names)
    if missing:
        _logger.debug("%d unjudged pair(s) default to 1: %s", len(missing), missing)

    matrix = build_comparison_matrix(names, model.judgments)
    result = AHPWeightCalculator(consistency).calculate(matrix)

    for criterion, weight in zip(model.criteria, result.details['weight_vector']):
        criterion.weight = float(weight)
    model.weights = dict(result.weights)
    model.consistency = result.consistency

    cons = result.consistency
    _logger.info(
        "Weights for %r: %s", model.name,
        ', '.join(f"{k}={v:.4f}" for k, v in result.weights.items()),
    )
    _logger.info(
        "Consistency: lambda_max=%.4f, CI=%.4f, CR=%.4f",
        cons.lambda_max, cons.consistency_index, cons.consistency_ratio,
    )
    if not cons.is_consistent:
        _logger.warning(
            "Judgments of %r are inconsistent: CR=%.4f exceeds %.2f",
            model.name, cons.consistency_ratio, cons.threshold,
        )
    return result
