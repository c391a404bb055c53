# -*- coding: utf-8 -*-
"""
Unit tests for analysis/sensitivity.py — one-criterion weight sweep.

Covers:
  - Sample grid (11 points, exact zero at the centre, percentage labels)
  - Renormalisation and the floor at zero
  - Unperturbed sample reproduces the model ranking
  - Stored weights are never modified
  - Rank-reversal detection and output helpers
"""

import numpy as np
import pytest

from config import Config, SensitivityConfig
from analysis import SensitivityAnalysis, SensitivityPoint, SensitivityResult
from mcdm.model import AHPModel


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _close_call_model():
    """Two alternatives separated by a small margin that a 5 % shift reverses.

    Weights A=0.5, B=0.5; P scores (60, 40), Q scores (41, 60): P=50.0,
    Q=50.5. Raising A favours P.
    """
    model = AHPModel('Close call')
    model.add_criterion('A')
    model.add_criterion('B')
    model.add_alternative('P')
    model.add_alternative('Q')
    model.score_alternative('P', 'A', 60)
    model.score_alternative('P', 'B', 40)
    model.score_alternative('Q', 'A', 41)
    model.score_alternative('Q', 'B', 60)
    model.calculate_weights()
    return model


# ---------------------------------------------------------------------------
# TestVariationGrid
# ---------------------------------------------------------------------------

class TestVariationGrid:
    def test_eleven_points(self):
        v = SensitivityAnalysis().variations(0.05)
        assert len(v) == 11
        assert v[0] == pytest.approx(-0.05)
        assert v[-1] == pytest.approx(0.05)
        assert v[5] == 0.0

    def test_custom_steps(self):
        cfg = Config(sensitivity=SensitivityConfig(delta=0.1, n_steps=2))
        v = SensitivityAnalysis(cfg).variations()
        np.testing.assert_allclose(v, [-0.1, -0.05, 0.0, 0.05, 0.1])

    def test_labels(self, weighted_model):
        result = weighted_model.sensitivity_analysis('A', 0.05)
        assert result.variations == [
            '-5.00%', '-4.00%', '-3.00%', '-2.00%', '-1.00%', '0.00%',
            '1.00%', '2.00%', '3.00%', '4.00%', '5.00%',
        ]


# ---------------------------------------------------------------------------
# TestPerturbWeights
# ---------------------------------------------------------------------------

class TestPerturbWeights:
    def test_renormalised(self):
        w = SensitivityAnalysis.perturb_weights({'A': 0.5, 'B': 0.3, 'C': 0.2}, 'A', 0.1)
        assert sum(w.values()) == pytest.approx(1.0)
        assert w['A'] == pytest.approx(0.6 / 1.1)
        assert w['B'] / w['C'] == pytest.approx(1.5)

    def test_floored_at_zero(self):
        w = SensitivityAnalysis.perturb_weights({'A': 0.1, 'B': 0.9}, 'A', -0.3)
        assert w == {'A': 0.0, 'B': 1.0}

    def test_all_zero_left_unnormalised(self):
        w = SensitivityAnalysis.perturb_weights({'A': 0.0, 'B': 0.0}, 'A', -0.05)
        assert w == {'A': 0.0, 'B': 0.0}

    def test_input_not_modified(self):
        original = {'A': 0.5, 'B': 0.5}
        SensitivityAnalysis.perturb_weights(original, 'A', 0.05)
        assert original == {'A': 0.5, 'B': 0.5}


# ---------------------------------------------------------------------------
# TestAnalyze
# ---------------------------------------------------------------------------

class TestAnalyze:
    def test_example_sweep_is_stable(self, weighted_model):
        result = weighted_model.sensitivity_analysis('A', 0.05)
        assert len(result.points) == 11
        assert all(p.ranking == ['X', 'Y'] for p in result.points)
        assert result.is_stable
        assert result.rank_reversals == []

    def test_centre_matches_model_ranking(self, weighted_model):
        ranked = [r.name for r in weighted_model.calculate_overall_scores()]
        for crit in ('A', 'B', 'C'):
            result = weighted_model.sensitivity_analysis(crit)
            assert result.points[5].ranking == ranked
            assert result.baseline_ranking == ranked

    def test_weights_not_mutated(self, weighted_model):
        before = dict(weighted_model.weights)
        stored = [c.weight for c in weighted_model.criteria]
        weighted_model.sensitivity_analysis('B', 0.2)
        assert weighted_model.weights == before
        assert [c.weight for c in weighted_model.criteria] == stored

    def test_every_sample_sums_to_one(self, weighted_model):
        result = weighted_model.sensitivity_analysis('C', 0.05)
        for p in result.points:
            assert sum(p.weights.values()) == pytest.approx(1.0)

    def test_large_delta_clamps_target(self, weighted_model):
        result = weighted_model.sensitivity_analysis('C', 0.5)
        first = result.points[0]
        assert first.weights['C'] == 0.0
        assert first.weights['A'] + first.weights['B'] == pytest.approx(1.0)

    def test_rank_reversal_detected(self):
        model = _close_call_model()
        result = model.sensitivity_analysis('A', 0.05)
        assert result.baseline_ranking == ['Q', 'P']
        assert result.points[0].ranking == ['Q', 'P']
        assert result.points[-1].ranking == ['P', 'Q']
        assert not result.is_stable
        assert len(result.rank_reversals) > 0
        assert all(p.variation > 0 for p in result.rank_reversals)

    def test_unknown_criterion_raises(self, weighted_model):
        with pytest.raises(KeyError):
            weighted_model.sensitivity_analysis('Colour')

    def test_before_weights_raises(self, example_model):
        with pytest.raises(KeyError):
            example_model.sensitivity_analysis('A')

    def test_analyze_all(self, weighted_model):
        results = SensitivityAnalysis().analyze_all(weighted_model)
        assert list(results) == ['A', 'B', 'C']
        assert results['B'].original_weight == pytest.approx(0.229871, abs=1e-6)


# ---------------------------------------------------------------------------
# TestSensitivityResult
# ---------------------------------------------------------------------------

class TestSensitivityResult:
    def test_to_dict(self, weighted_model):
        d = weighted_model.sensitivity_analysis('A').to_dict()
        assert d['criterion'] == 'A'
        assert d['originalWeight'] == 0.6479
        assert d['sensitivityAnalysis'][0] == {'variation': '-5.00%', 'ranking': ['X', 'Y']}

    def test_to_frame(self, weighted_model):
        df = weighted_model.sensitivity_analysis('A').to_frame()
        assert list(df.columns) == ['Variation', 'Weight', 'Rank_1', 'Rank_2']
        assert len(df) == 11
        assert df['Weight'].iloc[5] == pytest.approx(weighted_model.weights['A'])

    def test_summary_marks_reversals(self):
        result = SensitivityResult(
            criterion='A', original_weight=0.5, baseline_ranking=['P', 'Q'],
            points=[
                SensitivityPoint(-0.05, {'A': 0.45, 'B': 0.55}, ['Q', 'P']),
                SensitivityPoint(0.0, {'A': 0.5, 'B': 0.5}, ['P', 'Q']),
            ],
        )
        text = result.summary()
        assert 'SENSITIVITY: A' in text
        assert '1 sample(s) change the ranking' in text
