"""Pytest configuration for regboost tests."""

from __future__ import annotations

import numpy as np
import pytest

from regboost.data import Metadata


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def regression_data(rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Labels, scores and positive weights for 257 examples."""
    n = 257
    label = rng.normal(0.0, 3.0, n).astype(np.float32)
    score = rng.normal(0.0, 3.0, n)
    weights = rng.uniform(0.1, 2.0, n).astype(np.float32)
    return label, score, weights


@pytest.fixture
def unweighted_metadata(regression_data: tuple[np.ndarray, np.ndarray, np.ndarray]) -> Metadata:
    label, _, _ = regression_data
    return Metadata.from_arrays(label)


@pytest.fixture
def weighted_metadata(regression_data: tuple[np.ndarray, np.ndarray, np.ndarray]) -> Metadata:
    label, _, weights = regression_data
    return Metadata.from_arrays(label, weights)
