# -*- coding: utf-8 -*-
"""
Integration tests for pipeline.py and main.py.
"""

import json

import pytest

from pipeline import AHPPipeline, PipelineResult
import main as entry


class TestPipeline:
    def test_run_without_outputs(self, tmp_config, example_model):
        pipeline = AHPPipeline(tmp_config, save_outputs=False, use_color=False)
        result = pipeline.run(example_model)
        assert isinstance(result, PipelineResult)
        assert result.best.name == 'X'
        assert result.best.formatted_score == '76.62'
        assert list(result.sensitivity) == ['A', 'B', 'C']
        assert result.saved_files == []
        assert result.execution_time >= 0.0

    def test_phases_recorded(self, tmp_config, example_model):
        pipeline = AHPPipeline(tmp_config, save_outputs=False, use_color=False)
        pipeline.run(example_model)
        phases = pipeline.console.phases
        assert [p.name for p in phases] == ['Weight Derivation', 'Ranking',
                                            'Sensitivity Analysis']
        assert all(p.status == 'completed' for p in phases)

    def test_run_with_outputs(self, tmp_config, tmp_path, example_model):
        tmp_config.visualization.dpi = 60
        pipeline = AHPPipeline(tmp_config, use_color=False)
        result = pipeline.run(example_model, delta=0.1)

        out = tmp_path / 'result'
        assert (out / 'results' / 'rankings.csv').exists()
        assert (out / 'results' / 'model.json').exists()
        assert len(result.figure_paths) == 3
        report = (out / 'reports' / 'report.md').read_text(encoding='utf-8')
        assert '(../figures/fig01_criterion_weights.png)' in report
        assert result.sensitivity['A'].variations[0] == '-10.00%'

    def test_debug_log_written(self, tmp_config, tmp_path, example_model):
        pipeline = AHPPipeline(tmp_config, save_outputs=False, use_color=False)
        pipeline.run(example_model)
        with open(pipeline.debug_log.path, encoding='utf-8') as fh:
            entries = json.load(fh)
        labels = [e['message'] for e in entries if e['level'] == 'DATA']
        assert labels == ['comparison_matrix', 'weights', 'rankings', 'sensitivity']
        assert all(e['model'] == 'Example' for e in entries if e['level'] == 'DATA')

    def test_failure_propagates_and_closes_log(self, tmp_config, example_model, monkeypatch):
        pipeline = AHPPipeline(tmp_config, save_outputs=False, use_color=False)

        def boom(*args, **kwargs):
            raise RuntimeError('scoring failed')

        monkeypatch.setattr('pipeline.AHPScorer.rank', boom)
        with pytest.raises(RuntimeError, match='scoring failed'):
            pipeline.run(example_model)
        assert [p.status for p in pipeline.console.phases] == ['completed', 'failed']
        with open(pipeline.debug_log.path, encoding='utf-8') as fh:
            assert json.load(fh)

    def test_model_summary_printed(self, tmp_config, example_model, capsys):
        pipeline = AHPPipeline(tmp_config, save_outputs=False, use_color=False)
        result = pipeline.run(example_model)
        pipeline.console.show_model_summary(result)
        out = capsys.readouterr().out
        assert 'CRITERION WEIGHTS' in out
        assert 'PASS' in out
        assert '76.62' in out


class TestMain:
    @pytest.mark.parametrize('preset', sorted(entry.DEMO_INPUTS))
    def test_demo_models(self, preset):
        model = entry.build_demo_model(preset)
        assert len(model.alternatives) == 3
        model.calculate_weights()
        assert sum(model.weights.values()) == pytest.approx(1.0)
        assert len(model.calculate_overall_scores()) == 3

    def test_main_runs(self, tmp_path):
        out = tmp_path / 'run'
        code = entry.main(['--preset', 'product_selection',
                           '--output', str(out), '--no-figures'])
        assert code == 0
        assert (out / 'reports' / 'report.md').exists()
        assert not any((out / 'figures').iterdir())
