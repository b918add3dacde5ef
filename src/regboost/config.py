"""Configuration models for regression objectives.

This module defines the Pydantic model holding loss hyperparameters.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from joblib import effective_n_jobs
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

# Accepted parameter names, LightGBM style, mapped to config fields
PARAM_ALIASES: dict[str, str] = {
    "gaussian_eta": "gaussian_eta",
    "huber_delta": "huber_delta",
    "alpha": "huber_delta",
    "fair_c": "fair_c",
    "num_threads": "num_threads",
    "n_jobs": "num_threads",
    "nthread": "num_threads",
}


class ConfigError(ValueError):
    """Raised when objective parameters fail validation."""


class ObjectiveConfig(BaseModel):
    """Loss hyperparameters - captured once when an objective is built.

    Parameter notes:
    - gaussian_eta: bandwidth of the hessian smoothing kernel (L1, Huber)
    - huber_delta: residual threshold between the quadratic and linear regions
    - fair_c: scale constant of the Fair loss
    - num_threads: worker threads for derivative computation
    """

    model_config = ConfigDict(frozen=True)

    gaussian_eta: float = 1.0
    huber_delta: float = 1.0
    fair_c: float = 1.0
    num_threads: int = 1

    @field_validator("gaussian_eta", "huber_delta", "fair_c")
    @classmethod
    def validate_positive(cls, v: float, info: ValidationInfo) -> float:
        """Validate loss parameters are finite and strictly positive."""
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"{info.field_name} must be positive and finite")
        return v

    @field_validator("num_threads")
    @classmethod
    def validate_num_threads(cls, v: int) -> int:
        """Validate num_threads is positive."""
        if v <= 0:
            raise ValueError("num_threads must be positive")
        return v

    @classmethod
    def from_params(cls, params: Mapping[str, Any] | None = None) -> ObjectiveConfig:
        """Build a config from a booster parameter mapping.

        Keys unrelated to regression objectives are ignored, so a complete
        training parameter dict can be passed as-is. Thread counts <= 0 follow the
        LightGBM and joblib conventions (0 and -1 mean all cores, -2 all but one)
        and are resolved to a concrete count.

        Args:
            params: Parameter mapping, LightGBM naming (aliases accepted).

        Returns:
            Validated config.

        Raises:
            ConfigError: If a recognized parameter is invalid.
        """
        fields: dict[str, Any] = {}
        for key, value in (params or {}).items():
            field = PARAM_ALIASES.get(key)
            if field is None or value is None:
                continue
            if field in fields and fields[field] != value:
                raise ConfigError(f"Conflicting values for {field}: {fields[field]!r} and {value!r}")
            fields[field] = value

        if isinstance(fields.get("num_threads"), int) and fields["num_threads"] <= 0:
            n_jobs = fields["num_threads"]
            fields["num_threads"] = effective_n_jobs(-1 if n_jobs == 0 else n_jobs)

        try:
            return cls(**fields)
        except ValidationError as e:
            messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in e.errors())
            raise ConfigError(f"Invalid objective parameters: {messages}") from e
