# -*- coding: utf-8 -*-
"""
Analysis Module
===============

Weight sensitivity of AHP rankings.

Components
----------
Sensitivity Analysis
    One-criterion sweep over ±delta with renormalised weights,
    re-ranking at every sample point and rank-reversal detection.

Example
-------
>>> from analysis import SensitivityAnalysis
>>> result = SensitivityAnalysis().analyze(model, 'Quality', delta=0.05)
>>> print(result.summary())
"""

from .sensitivity import (
    SensitivityAnalysis,
    SensitivityPoint,
    SensitivityResult,
)

__all__ = [
    'SensitivityAnalysis',
    'SensitivityPoint',
    'SensitivityResult',
]
