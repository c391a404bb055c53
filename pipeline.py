# -*- coding: utf-8 -*-
"""
AHP Pipeline Orchestrator
=========================

Five-phase decision run over a populated :class:`~mcdm.model.AHPModel`:

  Phase 1  Weight Derivation      (comparison matrix + consistency check)
  Phase 2  Ranking                (weighted sum, stable sort)
  Phase 3  Sensitivity Analysis   (±delta sweep per criterion)
  Phase 4  Visualization          (weights, matrix, rank trajectories)
  Phase 5  Result Export          (CSV / JSON / Markdown report)

Phases 1–3 propagate errors; phases 4–5 report failures as warnings and
let the run finish.
"""

import time
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from config import Config, get_default_config
from loggers import get_logger, setup_logging, log_context
from mcdm.model import AHPModel
from mcdm.scoring import AHPScorer, RankedAlternative
from weighting import WeightResult, derive_weights
from analysis import SensitivityAnalysis, SensitivityResult
from output import OutputOrchestrator


# =========================================================================
# Result container
# =========================================================================

@dataclass
class PipelineResult:
    """Container for all pipeline results."""
    model: AHPModel
    weight_result: WeightResult
    rankings: List[RankedAlternative]
    sensitivity: Dict[str, SensitivityResult] = field(default_factory=dict)
    figure_paths: List[str] = field(default_factory=list)
    saved_files: List[str] = field(default_factory=list)
    execution_time: float = 0.0

    @property
    def best(self) -> Optional[RankedAlternative]:
        return self.rankings[0] if self.rankings else None


# =========================================================================
# Pipeline
# =========================================================================

class AHPPipeline:
    """
    End-to-end AHP decision run with console monitoring, a JSON debug log,
    figures and result files.

    Parameters
    ----------
    config : Config, optional
        Engine configuration; a fresh default when omitted.
    save_outputs : bool
        Write figures, CSV / JSON files and the report.
    use_color : bool, optional
        Force console colours on / off.
    """

    def __init__(self, config: Optional[Config] = None,
                 save_outputs: bool = True,
                 use_color: Optional[bool] = None):
        self.config = config or get_default_config()
        self.save_outputs = save_outputs

        if save_outputs:
            self.config.paths.ensure_directories()

        # Logging (console + debug JSON)
        self.console, self.debug_log = setup_logging(self.config.output_dir,
                                                     use_color=use_color)
        self.logger = get_logger()

    # -----------------------------------------------------------------
    # Main entry point
    # -----------------------------------------------------------------

    def run(self, model: AHPModel, delta: Optional[float] = None) -> PipelineResult:
        """Execute the full analysis on *model* and return results."""
        start_time = time.time()
        total = 5 if self.save_outputs else 3

        try:
            with log_context(model=model.name):
                self.console.banner(f'AHP Decision Analysis: {model.name}',
                                    subtitle=f'{len(model.criteria)} criteria, '
                                             f'{len(model.alternatives)} alternatives')

                # Phase 1: Weight Derivation
                with self.console.phase('Weight Derivation', total_phases=total) as ph:
                    weight_result = derive_weights(model, self.config.consistency)
                    cons = weight_result.consistency
                    ph.metric('lambda_max', cons.lambda_max)
                    ph.metric('CR', cons.consistency_ratio)
                    if not cons.is_consistent:
                        ph.warning(f'Judgments inconsistent (CR={cons.consistency_ratio:.3f} '
                                   f'> {cons.threshold:.2f})')
                    self.debug_log.log_data('comparison_matrix',
                                            weight_result.details.get('comparison_matrix'),
                                            module='weighting')
                    self.debug_log.log_data('weights', weight_result.to_dict(),
                                            module='weighting')

                # Phase 2: Ranking
                with self.console.phase('Ranking', total_phases=total) as ph:
                    rankings = AHPScorer(self.config.scoring).rank(model)
                    if rankings:
                        ph.detail(f'Best: {rankings[0].name} ({rankings[0].formatted_score})')
                    self.debug_log.log_data('rankings', [r.to_dict() for r in rankings],
                                            module='scoring')

                # Phase 3: Sensitivity Analysis
                with self.console.phase('Sensitivity Analysis', total_phases=total) as ph:
                    sensitivity = SensitivityAnalysis(self.config).analyze_all(model, delta)
                    unstable = [n for n, r in sensitivity.items() if not r.is_stable]
                    ph.metric('Criteria swept', len(sensitivity))
                    if unstable:
                        ph.warning(f'Ranking changes under: {", ".join(unstable)}')
                    self.debug_log.log_data(
                        'sensitivity', {n: r.to_dict() for n, r in sensitivity.items()},
                        module='sensitivity')

                result = PipelineResult(
                    model=model,
                    weight_result=weight_result,
                    rankings=rankings,
                    sensitivity=sensitivity,
                )

                if self.save_outputs:
                    self._save(result)

                result.execution_time = time.time() - start_time
                self.console.separator()
                self.console.success(f'Pipeline completed in {result.execution_time:.2f}s')
                return result
        finally:
            # Always flush & close the debug log, even if a phase raises
            self.debug_log.close()

    # -----------------------------------------------------------------
    # Phases 4–5
    # -----------------------------------------------------------------

    def _save(self, result: PipelineResult) -> None:
        with self.console.phase('Generating Figures', total_phases=5) as ph:
            if self.config.visualization.enabled:
                try:
                    from visualization import AHPPlotter
                    plotter = AHPPlotter(
                        output_dir=str(self.config.paths.figures_dir),
                        dpi=self.config.visualization.dpi,
                        figsize=self.config.visualization.figsize,
                    )
                    count = plotter.generate_all(result.model, result.weight_result,
                                                 result.sensitivity,
                                                 cmap=self.config.visualization.heatmap_cmap)
                    result.figure_paths = plotter.get_generated_figures()
                    ph.metric('Figures', count)
                except Exception as e:
                    ph.warning(f'Visualization failed: {e}')
                    self.logger.debug(traceback.format_exc())
            else:
                ph.detail('Figures disabled')

        with self.console.phase('Saving Results', total_phases=5) as ph:
            try:
                orch = OutputOrchestrator(self.config.output_dir)
                result.saved_files = orch.save_all(
                    model=result.model,
                    weight_result=result.weight_result,
                    rankings=result.rankings,
                    sensitivity=result.sensitivity,
                    # report.md sits in reports/, next to figures/
                    figure_paths=[
                        (Path('..') / Path(p).relative_to(self.config.paths.output_dir)).as_posix()
                        for p in result.figure_paths
                    ],
                )
                ph.metric('Files', len(result.saved_files))
            except Exception as e:
                ph.warning(f'Result saving failed: {e}')
                self.logger.debug(traceback.format_exc())
