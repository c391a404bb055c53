# -*- coding: utf-8 -*-
"""Shared fixtures for the AHP engine test suite."""

import pytest

from config import Config, PathConfig, reset_config
from mcdm.model import AHPModel


@pytest.fixture(autouse=True)
def _fresh_global_config():
    """Every test starts from the default global config."""
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def example_model():
    """Three criteria, two alternatives; A/B=3, A/C=5, B/C=2.

    Derived weights are A≈0.6479, B≈0.2299, C≈0.1222, giving
    X≈76.62 and Y≈74.70.
    """
    model = AHPModel('Example')
    for name in ('A', 'B', 'C'):
        model.add_criterion(name)
    model.set_pairwise_comparison('A', 'B', 3)
    model.set_pairwise_comparison('A', 'C', 5)
    model.set_pairwise_comparison('B', 'C', 2)

    model.add_alternative('X')
    model.add_alternative('Y')
    for crit, score in {'A': 80, 'B': 60, 'C': 90}.items():
        model.score_alternative('X', crit, score)
    for crit, score in {'A': 90, 'B': 50, 'C': 40}.items():
        model.score_alternative('Y', crit, score)
    return model


@pytest.fixture()
def weighted_model(example_model):
    """``example_model`` with weights already derived."""
    example_model.calculate_weights()
    return example_model


@pytest.fixture()
def tmp_config(tmp_path):
    """Config writing every output under a temporary directory."""
    return Config(paths=PathConfig(base_dir=tmp_path))
