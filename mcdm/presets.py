# -*- coding: utf-8 -*-
"""
Preset Decision Models
======================

Ready-made criteria sets for recurring fashion-retail decisions. Each
factory returns a fresh :class:`~mcdm.model.AHPModel` with criteria only;
callers add alternatives, judgments and scores.

Usage
-----
>>> from mcdm.presets import get_preset
>>> model = get_preset('supplier_evaluation')()
>>> model.criterion_names
['Quality', 'Delivery Time', 'Cost', 'Sustainability']
"""

from typing import Callable, Dict, List, Optional, Tuple

from config import Config, CriterionConfig, CriterionKind
from .model import AHPModel


B, C = CriterionKind.BENEFIT, CriterionKind.COST


# (name, description, kind, unit)
SALES_FORECAST_CRITERIA: List[Tuple[str, str, CriterionKind, str]] = [
    ('Demand Accuracy', 'Accuracy of demand predictions', B, '%'),
    ('Trend Alignment', 'Alignment with fashion trends', B, 'score'),
    ('Seasonal Fit', 'Seasonal appropriateness', B, 'score'),
    ('Price Competitiveness', 'Price positioning', B, 'score'),
    ('Inventory Risk', 'Stock management risk', C, 'score'),
]

PRODUCT_SELECTION_CRITERIA: List[Tuple[str, str, CriterionKind, str]] = [
    ('Customer Demand', 'Expected customer interest', B, ''),
    ('Profit Margin', 'Expected profitability', B, ''),
    ('Supply Chain Risk', 'Supply chain complexity', C, ''),
    ('Brand Alignment', 'Brand value alignment', B, ''),
]

SUPPLIER_EVALUATION_CRITERIA: List[Tuple[str, str, CriterionKind, str]] = [
    ('Quality', 'Product quality standards', B, ''),
    ('Delivery Time', 'Lead time reliability', B, ''),
    ('Cost', 'Unit pricing', C, ''),
    ('Sustainability', 'Environmental practices', B, ''),
]


def _build(name: str, criteria: List[Tuple[str, str, CriterionKind, str]],
           config: Optional[Config]) -> AHPModel:
    model = AHPModel(name) if config is None else AHPModel(name, config=config)
    for crit_name, description, kind, unit in criteria:
        model.add_criterion(crit_name, CriterionConfig(description, kind, unit))
    return model


def create_sales_forecast_model(config: Optional[Config] = None) -> AHPModel:
    """Evaluate competing sales forecasts."""
    return _build('Fashion Sales Forecast Evaluation', SALES_FORECAST_CRITERIA, config)


def create_product_selection_model(config: Optional[Config] = None) -> AHPModel:
    """Choose which products to carry."""
    return _build('Fashion Product Selection', PRODUCT_SELECTION_CRITERIA, config)


def create_supplier_evaluation_model(config: Optional[Config] = None) -> AHPModel:
    """Compare suppliers."""
    return _build('Fashion Supplier Evaluation', SUPPLIER_EVALUATION_CRITERIA, config)


PRESETS: Dict[str, Callable[..., AHPModel]] = {
    'sales_forecast': create_sales_forecast_model,
    'product_selection': create_product_selection_model,
    'supplier_evaluation': create_supplier_evaluation_model,
}


def get_preset(name: str) -> Callable[..., AHPModel]:
    """Return the factory registered under *name*.

    Raises
    ------
    KeyError
        If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; available: {sorted(PRESETS)}") from None
