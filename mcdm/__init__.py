# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

AHP decision model state, weighted-sum scoring, and preset models.

Submodules
----------
model
    AHPModel, Criterion, Alternative (setup surface)
scoring
    AHPScorer, RankedAlternative (weighted sum + stable ranking)
presets
    Preset fashion-retail decision models
errors
    AHPError, NotFoundError

Usage
-----
>>> from mcdm import AHPModel
>>> model = AHPModel('Product Selection')
>>> _ = model.add_criterion('Profit Margin')
"""

from .errors import AHPError, NotFoundError
from .model import AHPModel, Alternative, Criterion
from .scoring import (
    AHPScorer, RankedAlternative,
    decision_matrix, weighted_scores, rank_by_score,
)
from .presets import (
    PRESETS, get_preset,
    create_sales_forecast_model,
    create_product_selection_model,
    create_supplier_evaluation_model,
)


__all__ = [
    # Model state
    'AHPModel', 'Criterion', 'Alternative',

    # Errors
    'AHPError', 'NotFoundError',

    # Scoring
    'AHPScorer', 'RankedAlternative',
    'decision_matrix', 'weighted_scores', 'rank_by_score',

    # Presets
    'PRESETS', 'get_preset',
    'create_sales_forecast_model',
    'create_product_selection_model',
    'create_supplier_evaluation_model',
]
