# -*- coding: utf-8 -*-
"""
AHP Decision Model State
========================

The in-memory state of one decision problem: criteria (ordered, the
order defines comparison-matrix indices), alternatives with their sparse
criterion scores, the pairwise judgment table, and the derived weights
and consistency figures.

The model is populated during a setup phase through the ``add_*`` /
``set_*`` / ``score_*`` methods and read during analysis. Criteria and
alternatives are append-only. The analysis operations live in their own
modules (``weighting.ahp``, ``mcdm.scoring``, ``analysis.sensitivity``)
and take the model as an argument; the methods below are thin shortcuts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from config import Config, CriterionConfig, CriterionKind, get_config
from loggers import get_module_logger
from weighting.consistency import ConsistencyResult
from weighting.pairwise import PairwiseJudgments
from .errors import NotFoundError


_logger = get_module_logger('model')


@dataclass
class Criterion:
    """An evaluation criterion.

    ``kind`` and ``unit`` are descriptive; ``weight`` is 0 until weight
    derivation runs.
    """
    name: str
    description: str = ''
    kind: CriterionKind = CriterionKind.BENEFIT
    unit: str = ''
    weight: float = 0.0

    @property
    def is_cost(self) -> bool:
        return self.kind is CriterionKind.COST


@dataclass
class Alternative:
    """An option under evaluation with opaque auxiliary ``data``."""
    name: str
    data: Dict[str, Any] = field(default_factory=dict)
    scores: Dict[str, float] = field(default_factory=dict)

    def score_for(self, criterion: str, missing: float = 0.0) -> float:
        return self.scores.get(criterion, missing)


@dataclass
class AHPModel:
    """
    Mutable state of one AHP decision problem.

    Parameters
    ----------
    name : str
        Name of the decision model.
    config : Config, optional
        Engine configuration; the global config when omitted.

    Examples
    --------
    >>> model = AHPModel('Supplier Evaluation')
    >>> _ = model.add_criterion('Quality')
    >>> _ = model.add_criterion('Cost', kind='cost')
    >>> model.set_pairwise_comparison('Quality', 'Cost', 3)
    >>> _ = model.calculate_weights()
    >>> round(model.weights['Quality'], 2)
    0.75
    """
    name: str
    criteria: List[Criterion] = field(default_factory=list)
    alternatives: List[Alternative] = field(default_factory=list)
    judgments: PairwiseJudgments = field(default_factory=PairwiseJudgments, repr=False)
    weights: Dict[str, float] = field(default_factory=dict)
    consistency: ConsistencyResult = field(default_factory=ConsistencyResult.empty)
    config: Config = field(default_factory=get_config, repr=False, compare=False)

    # ------------------------------------------------------------------
    # Setup surface
    # ------------------------------------------------------------------

    def add_criterion(self, name: str,
                      config: Union[CriterionConfig, Mapping[str, Any], None] = None,
                      **fields: Any) -> Criterion:
        """
        Append a criterion.

        Parameters
        ----------
        name : str
            Unique, case-sensitive criterion name.
        config : CriterionConfig or mapping, optional
            ``description`` / ``kind`` / ``unit``; keyword arguments are
            accepted instead.

        Raises
        ------
        ValueError
            If ``kind`` is neither ``'benefit'`` nor ``'cost'``.
        """
        if config is None:
            config = CriterionConfig(**fields)
        elif not isinstance(config, CriterionConfig):
            config = CriterionConfig(**dict(config))

        if self.find_criterion(name) is not None:
            _logger.warning("Criterion %r is already defined in %r", name, self.name)

        criterion = Criterion(
            name=name,
            description=config.description,
            kind=config.kind,
            unit=config.unit,
        )
        self.criteria.append(criterion)
        return criterion

    def add_alternative(self, name: str,
                        data: Optional[Mapping[str, Any]] = None) -> Alternative:
        """Append an alternative carrying an opaque *data* payload."""
        if self.find_alternative(name) is not None:
            _logger.warning("Alternative %r is already defined in %r", name, self.name)
        alternative = Alternative(name=name, data=dict(data or {}))
        self.alternatives.append(alternative)
        return alternative

    def set_pairwise_comparison(self, first: str, second: str,
                                intensity: float) -> None:
        """Judge *first* over *second*; the reciprocal is stored too."""
        self.judgments.set(first, second, intensity)

    def score_alternative(self, alternative: str, criterion: str,
                          score: float) -> float:
        """
        Set an alternative's score for a criterion, clamped into the
        configured range ([0, 100] by default).

        The criterion name is not checked; scores for unknown criteria are
        stored but never used in aggregation.

        Returns
        -------
        float
            The stored (clamped) score.

        Raises
        ------
        NotFoundError
            If *alternative* was never added.
        """
        target = self.find_alternative(alternative)
        if target is None:
            raise NotFoundError('alternative', alternative)

        scoring = self.config.scoring
        value = max(scoring.min_score, min(scoring.max_score, float(score)))
        target.scores[criterion] = value
        return value

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_criterion(self, name: str) -> Optional[Criterion]:
        return next((c for c in self.criteria if c.name == name), None)

    def find_alternative(self, name: str) -> Optional[Alternative]:
        return next((a for a in self.alternatives if a.name == name), None)

    @property
    def criterion_names(self) -> List[str]:
        return [c.name for c in self.criteria]

    @property
    def alternative_names(self) -> List[str]:
        return [a.name for a in self.alternatives]

    @property
    def is_consistent(self) -> bool:
        return self.consistency.is_consistent

    # ------------------------------------------------------------------
    # Analysis shortcuts
    # ------------------------------------------------------------------

    def calculate_weights(self):
        """Derive and store criterion weights; see :func:`weighting.derive_weights`."""
        from weighting.ahp import derive_weights
        return derive_weights(self, self.config.consistency)

    def calculate_overall_scores(self):
        """Rank alternatives by weighted score; see :class:`mcdm.scoring.AHPScorer`."""
        from .scoring import AHPScorer
        return AHPScorer(self.config.scoring).rank(self)

    def sensitivity_analysis(self, criterion: str, delta: Optional[float] = None):
        """Sweep one criterion's weight; see :class:`analysis.SensitivityAnalysis`."""
        from analysis.sensitivity import SensitivityAnalysis
        return SensitivityAnalysis(self.config).analyze(self, criterion, delta)

    def export(self) -> Dict[str, Any]:
        """Structured export record; see :func:`output.serialization.export_model`."""
        from output.serialization import export_model
        return export_model(self)

    @classmethod
    def from_record(cls, record: Mapping[str, Any],
                    config: Optional[Config] = None) -> 'AHPModel':
        """Build a model from an export record without validation."""
        from output.serialization import import_model
        model = cls(name=str(record.get('modelName', '')),
                    config=config or get_config())
        return import_model(model, record)
