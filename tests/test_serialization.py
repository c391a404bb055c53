# -*- coding: utf-8 -*-
"""
Unit tests for output/serialization.py — export / import records.
"""

import json
from datetime import datetime

import pytest

from config import CriterionKind
from mcdm.model import AHPModel
from output.serialization import export_model, import_model


@pytest.fixture()
def record(weighted_model):
    weighted_model.find_criterion('C').kind = CriterionKind.COST
    weighted_model.find_alternative('X').data['origin'] = 'PT'
    return weighted_model.export()


class TestExport:
    def test_top_level_keys(self, record):
        assert set(record) == {'modelName', 'timestamp', 'criteria',
                               'alternatives', 'consistency', 'rankings'}
        assert record['modelName'] == 'Example'
        assert datetime.fromisoformat(record['timestamp']).tzinfo is not None

    def test_criteria(self, record):
        names = [c['name'] for c in record['criteria']]
        assert names == ['A', 'B', 'C']
        assert record['criteria'][0]['weight'] == 0.6479
        assert record['criteria'][2]['type'] == 'cost'
        assert set(record['criteria'][0]) == {'name', 'description', 'type', 'unit', 'weight'}

    def test_alternatives(self, record):
        x = record['alternatives'][0]
        assert x['name'] == 'X'
        assert x['scores'] == {'A': 80.0, 'B': 60.0, 'C': 90.0}
        assert x['data'] == {'origin': 'PT'}

    def test_consistency(self, record):
        cons = record['consistency']
        assert cons['isConsistent'] is True
        assert cons['consistencyRatio'] == pytest.approx(0.0032, abs=1e-3)

    def test_rankings(self, record):
        assert [r['name'] for r in record['rankings']] == ['X', 'Y']
        assert record['rankings'][0]['overallScore'] == 76.62
        assert record['rankings'][1]['overallScore'] == 74.7

    def test_json_serialisable(self, record):
        json.loads(json.dumps(record))

    def test_export_before_weights(self, example_model):
        rec = export_model(example_model)
        assert all(c['weight'] == 0.0 for c in rec['criteria'])
        assert all(r['overallScore'] == 0.0 for r in rec['rankings'])


class TestImport:
    def test_round_trip(self, record):
        model = AHPModel.from_record(json.loads(json.dumps(record)))
        assert model.name == 'Example'
        assert model.criterion_names == ['A', 'B', 'C']
        assert model.find_criterion('C').is_cost
        assert model.weights == {'A': 0.6479, 'B': 0.2299, 'C': 0.1222}
        assert model.find_alternative('X').data == {'origin': 'PT'}
        assert [r.name for r in model.calculate_overall_scores()] == ['X', 'Y']

    def test_consistency_restored(self, record):
        model = AHPModel.from_record(record)
        assert model.consistency.consistency_ratio == record['consistency']['consistencyRatio']
        assert model.is_consistent

    def test_replaces_existing_state(self, weighted_model, record):
        other = AHPModel('Other')
        other.add_criterion('Z')
        import_model(other, record)
        assert other.name == 'Example'
        assert 'Z' not in other.criterion_names
        assert 'Z' not in other.weights

    def test_string_numbers_and_unknown_type(self, caplog):
        rec = {
            'modelName': 'Loose',
            'criteria': [
                {'name': 'A', 'type': 'neutral', 'weight': '0.75'},
                {'name': 'B', 'weight': '0.25'},
            ],
            'alternatives': [{'name': 'X', 'scores': {'A': '40', 'B': '80'}}],
        }
        with caplog.at_level('WARNING', logger='ahp_engine'):
            model = AHPModel.from_record(rec)
        assert model.find_criterion('A').kind is CriterionKind.BENEFIT
        assert model.weights == {'A': 0.75, 'B': 0.25}
        assert model.find_alternative('X').scores == {'A': 40.0, 'B': 80.0}
        assert model.find_alternative('X').data == {}
        assert model.consistency.consistency_ratio == 0.0
        assert any('imported as benefit' in r.getMessage() for r in caplog.records)
        assert model.export()['criteria'][0]['type'] == 'benefit'

    def test_scores_not_clamped(self):
        rec = {'modelName': 'Raw', 'criteria': [{'name': 'A', 'weight': 1.0}],
               'alternatives': [{'name': 'X', 'scores': {'A': 150}}]}
        model = AHPModel.from_record(rec)
        assert model.find_alternative('X').scores['A'] == 150.0
