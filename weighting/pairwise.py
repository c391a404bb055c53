# -*- coding: utf-8 -*-
"""
Pairwise Judgments and the Comparison Matrix
============================================

A judgment states how much more important criterion A is than criterion
B on Saaty's 1/9..9 scale. Judgments are stored in a two-level mapping
``row -> column -> intensity`` and are reciprocal by construction:
setting (A, B) = v also sets (B, A) = 1/v.

The comparison matrix is built from the upper triangle in criteria
order::

    M[i][i] = 1
    M[i][j] = judgment(criteria[i], criteria[j])   (1 when unjudged)
    M[j][i] = 1 / M[i][j]
"""

import numpy as np
import pandas as pd
from typing import Dict, Iterator, Sequence, Tuple


DEFAULT_INTENSITY = 1.0


def _reciprocal(value: float) -> float:
    """1 / value; a zero intensity gives an infinite reciprocal."""
    with np.errstate(divide='ignore'):
        return float(np.float64(1.0) / np.float64(value))


class PairwiseJudgments:
    """Reciprocal table of pairwise criterion judgments.

    Self-pairs are never stored; they are implicitly 1. Intensities are not
    range-checked: callers supply values on the conventional 1/9..9 scale.

    Examples
    --------
    >>> judgments = PairwiseJudgments()
    >>> judgments.set('Quality', 'Cost', 3)
    >>> judgments.get('Cost', 'Quality')
    0.3333333333333333
    >>> judgments.get('Quality', 'Delivery')
    1.0
    """

    def __init__(self):
        self._table: Dict[str, Dict[str, float]] = {}

    def set(self, first: str, second: str, intensity: float) -> None:
        """Record ``first`` over ``second`` with *intensity* and its reciprocal."""
        if first == second:
            return
        value = float(intensity)
        self._table.setdefault(first, {})[second] = value
        self._table.setdefault(second, {})[first] = _reciprocal(value)

    def get(self, first: str, second: str,
            default: float = DEFAULT_INTENSITY) -> float:
        if first == second:
            return 1.0
        return self._table.get(first, {}).get(second, default)

    def is_judged(self, first: str, second: str) -> bool:
        return second in self._table.get(first, {})

    def missing_pairs(self, criteria: Sequence[str]) -> list:
        """Upper-triangle pairs of *criteria* that carry no judgment."""
        return [
            (a, b)
            for i, a in enumerate(criteria)
            for b in criteria[i + 1:]
            if not self.is_judged(a, b)
        ]

    def __iter__(self) -> Iterator[Tuple[str, str, float]]:
        for first, row in self._table.items():
            for second, value in row.items():
                yield first, second, value

    def __len__(self) -> int:
        return sum(len(row) for row in self._table.values())

    def __contains__(self, pair: Tuple[str, str]) -> bool:
        first, second = pair
        return self.is_judged(first, second)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {first: dict(row) for first, row in self._table.items()}


def build_comparison_matrix(criteria: Sequence[str],
                            judgments: PairwiseJudgments) -> pd.DataFrame:
    """Build the reciprocal n × n comparison matrix in criteria order.

    Parameters
    ----------
    criteria : sequence of str
        Criterion names; their order defines rows and columns.
    judgments : PairwiseJudgments
        Judgment table; unjudged pairs default to 1 (indifference).

    Returns
    -------
    pd.DataFrame
        Matrix labelled by criterion name on both axes.
    """
    names = list(criteria)
    n = len(names)
    matrix = np.ones((n, n), dtype=float)

    for i in range(n):
        for j in range(i + 1, n):
            value = judgments.get(names[i], names[j])
            matrix[i, j] = value
            matrix[j, i] = _reciprocal(value)

    return pd.DataFrame(matrix, index=names, columns=names)
