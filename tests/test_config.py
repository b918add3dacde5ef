"""Tests for objective configuration validation."""

from __future__ import annotations

import math

import pytest
from joblib import effective_n_jobs
from pydantic import ValidationError

from regboost.config import ConfigError, ObjectiveConfig


class TestObjectiveConfig:
    """Tests for ObjectiveConfig model."""

    def test_default_values(self) -> None:
        """Test default values are populated correctly."""
        config = ObjectiveConfig()
        assert config.gaussian_eta == 1.0
        assert config.huber_delta == 1.0
        assert config.fair_c == 1.0
        assert config.num_threads == 1

    def test_custom_values(self) -> None:
        """Test custom values are accepted."""
        config = ObjectiveConfig(gaussian_eta=0.5, huber_delta=2.0, fair_c=0.1, num_threads=4)
        assert config.gaussian_eta == 0.5
        assert config.huber_delta == 2.0
        assert config.fair_c == 0.1
        assert config.num_threads == 4

    @pytest.mark.parametrize("field", ["gaussian_eta", "huber_delta", "fair_c"])
    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf, -math.inf])
    def test_invalid_loss_parameter(self, field: str, value: float) -> None:
        """Test non-positive and non-finite loss parameters raise ValidationError."""
        with pytest.raises(ValidationError, match=f"{field} must be positive"):
            ObjectiveConfig(**{field: value})

    def test_invalid_num_threads(self) -> None:
        """Test zero num_threads raises ValidationError."""
        with pytest.raises(ValidationError, match="num_threads must be positive"):
            ObjectiveConfig(num_threads=0)

    def test_frozen(self) -> None:
        """Test ObjectiveConfig is immutable."""
        config = ObjectiveConfig()
        with pytest.raises(ValidationError):
            config.huber_delta = 2.0  # type: ignore[misc]

    def test_config_roundtrip(self) -> None:
        """Test serialize/deserialize produces same config."""
        config = ObjectiveConfig(gaussian_eta=0.3, fair_c=2.5)
        restored = ObjectiveConfig(**config.model_dump())
        assert restored == config


class TestFromParams:
    """Tests for building configs from booster parameter dicts."""

    def test_none_gives_defaults(self) -> None:
        """Test missing params fall back to defaults."""
        assert ObjectiveConfig.from_params(None) == ObjectiveConfig()

    def test_ignores_unrelated_keys(self) -> None:
        """Test training params unrelated to objectives are skipped."""
        config = ObjectiveConfig.from_params({"learning_rate": 0.1, "num_leaves": 31, "fair_c": 2.0})
        assert config.fair_c == 2.0

    def test_aliases(self) -> None:
        """Test LightGBM aliases map onto config fields."""
        config = ObjectiveConfig.from_params({"alpha": 0.9, "n_jobs": 2})
        assert config.huber_delta == 0.9
        assert config.num_threads == 2

    def test_none_values_skipped(self) -> None:
        """Test None values keep defaults."""
        config = ObjectiveConfig.from_params({"huber_delta": None})
        assert config.huber_delta == 1.0

    def test_conflicting_aliases(self) -> None:
        """Test different values for the same field raise ConfigError."""
        with pytest.raises(ConfigError, match="Conflicting values for huber_delta"):
            ObjectiveConfig.from_params({"huber_delta": 1.0, "alpha": 2.0})

    def test_invalid_value_raises_config_error(self) -> None:
        """Test invalid values surface as ConfigError."""
        with pytest.raises(ConfigError, match="gaussian_eta must be positive"):
            ObjectiveConfig.from_params({"gaussian_eta": -0.5})

    def test_config_error_is_value_error(self) -> None:
        """Test ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            ObjectiveConfig.from_params({"fair_c": 0})

    def test_infinite_value_raises_config_error(self) -> None:
        """Test an infinite bandwidth is rejected before it can zero the hessians."""
        with pytest.raises(ConfigError, match="gaussian_eta must be positive and finite"):
            ObjectiveConfig.from_params({"gaussian_eta": math.inf})

    @pytest.mark.parametrize("params", [{"num_threads": 0}, {"n_jobs": -1}, {"nthread": -1}])
    def test_all_cores_thread_defaults(self, params: dict[str, int]) -> None:
        """Test LightGBM's 0 and joblib's -1 resolve to every available core."""
        config = ObjectiveConfig.from_params(params)
        assert config.num_threads == effective_n_jobs(-1)
        assert config.num_threads >= 1

    def test_negative_thread_count_resolves(self) -> None:
        """Test joblib-style negative counts become a concrete positive count."""
        config = ObjectiveConfig.from_params({"n_jobs": -2})
        assert config.num_threads == effective_n_jobs(-2)
        assert config.num_threads >= 1

    def test_direct_zero_threads_still_rejected(self) -> None:
        """Test the model itself only accepts concrete thread counts."""
        with pytest.raises(ValidationError, match="num_threads must be positive"):
            ObjectiveConfig(num_threads=-1)
