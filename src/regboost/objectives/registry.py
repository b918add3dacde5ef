"""Objective registry and factory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from regboost.config import ObjectiveConfig
from regboost.objectives.base import ObjectiveFunction
from regboost.objectives.regression import AbsoluteError, Fair, Huber, SquaredError

_OBJECTIVES: dict[str, type[ObjectiveFunction]] = {
    SquaredError.name: SquaredError,
    AbsoluteError.name: AbsoluteError,
    Huber.name: Huber,
    Fair.name: Fair,
}

# LightGBM objective aliases
_ALIASES: dict[str, str] = {
    "regression_l2": "regression",
    "l2": "regression",
    "mse": "regression",
    "mean_squared_error": "regression",
    "l1": "regression_l1",
    "mae": "regression_l1",
    "mean_absolute_error": "regression_l1",
}


def canonical_name(name: str) -> str:
    """Resolve an objective alias to its registered name.

    Raises:
        KeyError: If the name is neither registered nor an alias.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _OBJECTIVES:
        raise KeyError(f"Unknown objective: {name}")
    return key


def get_objective(name: str) -> type[ObjectiveFunction]:
    """Get an objective class by name.

    Args:
        name: Objective name (regression, regression_l1, huber, fair) or alias.

    Returns:
        Objective class.

    Raises:
        KeyError: If objective not found.
    """
    return _OBJECTIVES[canonical_name(name)]


def create_objective(
    name: str,
    config: ObjectiveConfig | Mapping[str, Any] | None = None,
) -> ObjectiveFunction:
    """Build an objective by name.

    Args:
        name: Objective name or alias.
        config: Config instance, or a parameter mapping validated via
            ``ObjectiveConfig.from_params``.

    Raises:
        KeyError: If objective not found.
        ConfigError: If the parameter mapping is invalid.
    """
    objective_cls = get_objective(name)
    if not isinstance(config, ObjectiveConfig):
        config = ObjectiveConfig.from_params(config)
    return objective_cls(config)


def available_objectives() -> list[str]:
    """Get list of registered objective names."""
    return list(_OBJECTIVES)


__all__ = ["available_objectives", "canonical_name", "create_objective", "get_objective"]
