# -*- coding: utf-8 -*-
"""
Weighting Module
================

Subjective criterion weights from pairwise judgments (AHP):

**Judgments:**
- PairwiseJudgments: Reciprocal two-level judgment table
- build_comparison_matrix: n × n reciprocal matrix in criteria order

**Weight derivation:**
- AHPWeightCalculator: Normalised-column-average eigenvector approximation
- derive_weights: Derive and store the weights of a decision model

**Consistency:**
- ConsistencyChecker: λ_max, consistency index and ratio
- ConsistencyResult: Result container with ``is_consistent``
- random_index: Saaty's random index lookup
"""

from .base import WeightResult
from .pairwise import PairwiseJudgments, build_comparison_matrix, DEFAULT_INTENSITY
from .consistency import ConsistencyChecker, ConsistencyResult, random_index
from .ahp import AHPWeightCalculator, derive_weights

__all__ = [
    # Core result types
    'WeightResult',
    'ConsistencyResult',

    # Judgments
    'PairwiseJudgments',
    'build_comparison_matrix',
    'DEFAULT_INTENSITY',

    # Weight derivation
    'AHPWeightCalculator',
    'derive_weights',

    # Consistency
    'ConsistencyChecker',
    'random_index',
]
