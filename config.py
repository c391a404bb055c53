# -*- coding: utf-8 -*-
"""
Centralised Configuration for the AHP Engine
=============================================

All configurable parameters are defined here as typed dataclasses.
The master ``Config`` class composes every sub-config and provides
serialisation, summary printing, and global singleton management.

Configuration Groups
--------------------
- PathConfig          — output directory structure
- CriterionConfig     — per-criterion setup fields (description, kind, unit)
- ConsistencyConfig   — random-index table and acceptability threshold
- ScoringConfig       — score bounds, display precision, ranking precision
- SensitivityConfig   — one-criterion weight sweep
- VisualizationConfig — figure appearance defaults
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union
from enum import Enum
import json


# =========================================================================
# Enumerations
# =========================================================================

class CriterionKind(Enum):
    """Whether higher raw scores are desirable (benefit) or not (cost).

    Descriptive only: cost criteria are not inverted during scoring.
    """
    BENEFIT = "benefit"
    COST = "cost"

    @classmethod
    def parse(cls, value: Union[str, "CriterionKind"]) -> "CriterionKind":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ', '.join(k.value for k in cls)
        raise ValueError(f"Unknown criterion kind {value!r} (expected one of: {valid})")


# Saaty's random consistency index for matrices of order n = 1..15.
RANDOM_INDEX: Dict[int, float] = {
    1: 0.0, 2: 0.0, 3: 0.58, 4: 0.90, 5: 1.12, 6: 1.24, 7: 1.32, 8: 1.41,
    9: 1.45, 10: 1.49, 11: 1.51, 12: 1.56, 13: 1.57, 14: 1.59, 15: 1.60,
}


# =========================================================================
# Path Configuration
# =========================================================================

@dataclass
class PathConfig:
    """File and directory paths, all derived from *base_dir*."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())
    output_name: str = "result"

    @property
    def output_dir(self) -> Path:
        return Path(self.base_dir) / self.output_name

    @property
    def figures_dir(self) -> Path:
        return self.output_dir / "figures"

    @property
    def reports_dir(self) -> Path:
        return self.output_dir / "reports"

    @property
    def results_dir(self) -> Path:
        return self.output_dir / "results"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create every output directory if missing."""
        for d in [self.output_dir, self.figures_dir, self.reports_dir,
                  self.results_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


# =========================================================================
# Model Setup
# =========================================================================

@dataclass
class CriterionConfig:
    """Recognised setup fields for a criterion.

    Parameters
    ----------
    description : str
        Free-text description.
    kind : CriterionKind or str
        ``'benefit'`` (default) or ``'cost'``.
    unit : str
        Measurement unit label, e.g. ``'%'`` or ``'score'``.
    """
    description: str = ""
    kind: CriterionKind = CriterionKind.BENEFIT
    unit: str = ""

    def __post_init__(self):
        self.kind = CriterionKind.parse(self.kind)
        if self.description is None:
            self.description = ""
        if self.unit is None:
            self.unit = ""
        if not isinstance(self.description, str):
            raise ValueError(f"description must be a string, got {type(self.description).__name__}")
        if not isinstance(self.unit, str):
            raise ValueError(f"unit must be a string, got {type(self.unit).__name__}")


# =========================================================================
# Analysis Parameters
# =========================================================================

@dataclass
class ConsistencyConfig:
    """Consistency-ratio parameters (Saaty, 1980)."""
    random_index: Dict[int, float] = field(default_factory=lambda: dict(RANDOM_INDEX))
    threshold: float = 0.10


@dataclass
class ScoringConfig:
    """Alternative scoring and ranking parameters.

    ``ranking_decimals`` is the precision at which overall scores are
    compared when ranking; ``None`` compares the raw floats.
    """
    min_score: float = 0.0
    max_score: float = 100.0
    missing_score: float = 0.0
    score_decimals: int = 2
    weight_decimals: int = 4
    ranking_decimals: Optional[int] = 2

    def __post_init__(self):
        if self.min_score > self.max_score:
            raise ValueError(
                f"min_score ({self.min_score}) must not exceed max_score ({self.max_score})")


@dataclass
class SensitivityConfig:
    """One-criterion weight sweep.

    The sweep runs over ``[-delta, +delta]`` in steps of ``delta / n_steps``,
    giving ``2 * n_steps + 1`` sample points.
    """
    delta: float = 0.05
    n_steps: int = 5

    def __post_init__(self):
        if self.delta <= 0:
            raise ValueError(f"delta must be positive, got {self.delta}")
        if self.n_steps < 1:
            raise ValueError(f"n_steps must be >= 1, got {self.n_steps}")


# =========================================================================
# Visualisation
# =========================================================================

@dataclass
class VisualizationConfig:
    """Figure appearance defaults."""
    enabled: bool = True
    figsize: tuple = (10, 6)
    dpi: int = 150
    heatmap_cmap: str = "YlOrRd"


# =========================================================================
# Master Configuration
# =========================================================================

@dataclass
class Config:
    """Master configuration composing every sub-config."""
    paths: PathConfig = field(default_factory=PathConfig)
    consistency: ConsistencyConfig = field(default_factory=ConsistencyConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    sensitivity: SensitivityConfig = field(default_factory=SensitivityConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # --- convenience properties ---

    @property
    def output_dir(self) -> str:
        return str(self.paths.output_dir)

    # --- serialisation ---

    def to_dict(self) -> Dict:
        def _cvt(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _cvt(v) for k, v in obj.__dict__.items()}
            if isinstance(obj, Enum):
                return obj.value
            if isinstance(obj, Path):
                return str(obj)
            if isinstance(obj, (list, tuple)):
                return [_cvt(i) for i in obj]
            if isinstance(obj, dict):
                return {k: _cvt(v) for k, v in obj.items()}
            return obj
        return _cvt(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        return (
            f"\n{'='*72}\n"
            f"  AHP Engine Configuration Summary\n"
            f"{'='*72}\n\n"
            f"  CONSISTENCY\n"
            f"    CR threshold    : {self.consistency.threshold:.2f}\n"
            f"    RI table        : n = 1..{max(self.consistency.random_index)}\n\n"
            f"  SCORING\n"
            f"    Score range     : [{self.scoring.min_score:g}, {self.scoring.max_score:g}]\n"
            f"    Missing score   : {self.scoring.missing_score:g}\n"
            f"    Rank precision  : {self.scoring.ranking_decimals}\n\n"
            f"  SENSITIVITY\n"
            f"    Delta           : ±{self.sensitivity.delta:.2%}\n"
            f"    Sample points   : {2 * self.sensitivity.n_steps + 1}\n\n"
            f"  OUTPUT\n"
            f"    Directory       : {self.output_dir}\n"
            f"    Figures         : {'on' if self.visualization.enabled else 'off'}\n"
            f"{'='*72}\n"
        )


# =========================================================================
# Global Config Singleton
# =========================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """Return global config (create default on first call)."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_default_config() -> Config:
    """Return a *fresh* default Config instance."""
    return Config()


def set_config(config: Config) -> None:
    """Replace the global config singleton."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset to a fresh default Config."""
    global _config
    _config = Config()
