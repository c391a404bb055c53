# -*- coding: utf-8 -*-
"""
Export / Import Records
=======================

A decision model is exchanged as a plain JSON-compatible record::

    {
      "modelName": str,
      "timestamp": ISO-8601 (UTC),
      "criteria": [{"name", "description", "type", "unit", "weight"}],
      "alternatives": [{"name", "scores", "data"}],
      "consistency": {"lambdaMax", "consistencyIndex",
                      "consistencyRatio", "isConsistent"},
      "rankings": [...]
    }

Import trusts the record: values are loaded as given, without the setup
validation of :class:`~mcdm.model.AHPModel` and without re-deriving
weights.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from config import CriterionKind
from loggers import get_module_logger, log_exceptions
from mcdm.model import AHPModel, Alternative, Criterion
from mcdm.scoring import AHPScorer
from weighting.consistency import ConsistencyResult


_logger = get_module_logger('serialization')


def export_model(model: AHPModel) -> Dict[str, Any]:
    """Build the export record of *model* (current weights and rankings)."""
    decimals = model.config.scoring.weight_decimals
    return {
        'modelName': model.name,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'criteria': [
            {
                'name': c.name,
                'description': c.description,
                'type': c.kind.value,
                'unit': c.unit,
                'weight': round(c.weight, decimals),
            }
            for c in model.criteria
        ],
        'alternatives': [
            {'name': a.name, 'scores': dict(a.scores), 'data': dict(a.data)}
            for a in model.alternatives
        ],
        'consistency': model.consistency.to_dict(decimals),
        'rankings': [r.to_dict() for r in AHPScorer(model.config.scoring).rank(model)],
    }


def _kind(value: Any) -> CriterionKind:
    try:
        return CriterionKind.parse(value)
    except ValueError:
        _logger.warning("Unknown criterion type %r imported as benefit", value)
        return CriterionKind.BENEFIT


@log_exceptions()
def import_model(model: AHPModel, record: Mapping[str, Any]) -> AHPModel:
    """
    Replace *model*'s name, criteria, alternatives and consistency state
    with the contents of *record*.

    The name → weight map is rebuilt from the imported criterion weights.
    Numeric fields stored as strings (``"0.0312"``) are accepted.

    Criterion ``type`` is the one field that is coerced: values other than
    ``'benefit'`` / ``'cost'`` are loaded as benefit with a warning, so a
    re-export reports ``'benefit'`` rather than the original string.

    Returns
    -------
    AHPModel
        The same *model*, repopulated.
    """
    model.name = str(record.get('modelName', model.name))
    model.criteria = [
        Criterion(
            name=c['name'],
            description=c.get('description', ''),
            kind=_kind(c.get('type', c.get('kind', 'benefit'))),
            unit=c.get('unit', ''),
            weight=float(c.get('weight', 0.0)),
        )
        for c in record.get('criteria', [])
    ]
    model.alternatives = [
        Alternative(
            name=a['name'],
            data=dict(a.get('data') or {}),
            scores={k: float(v) for k, v in (a.get('scores') or {}).items()},
        )
        for a in record.get('alternatives', [])
    ]
    model.weights = {c.name: c.weight for c in model.criteria}

    cons = record.get('consistency') or {}
    model.consistency = ConsistencyResult(
        lambda_max=float(cons.get('lambdaMax', 0.0)),
        consistency_index=float(cons.get('consistencyIndex', 0.0)),
        consistency_ratio=float(cons.get('consistencyRatio', 0.0)),
        n=len(model.criteria),
        threshold=model.config.consistency.threshold,
    )
    _logger.info("Imported %r: %d criteria, %d alternatives",
                 model.name, len(model.criteria), len(model.alternatives))
    return model
