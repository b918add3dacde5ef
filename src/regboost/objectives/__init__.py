"""Regression objective implementations.

Regression:
    - SquaredError: Mean squared error (L2), ``"regression"``
    - AbsoluteError: Mean absolute error (L1), ``"regression_l1"``
    - Huber: Huber loss (robust), ``"huber"``
    - Fair: Fair loss (smooth robust), ``"fair"``
"""

from __future__ import annotations

from regboost.objectives.adapters import as_booster_objective, as_sklearn_objective
from regboost.objectives.base import ObjectiveFunction, ObjectiveNotInitializedError, static_partition
from regboost.objectives.regression import AbsoluteError, Fair, Huber, SquaredError
from regboost.objectives.registry import (
    available_objectives,
    canonical_name,
    create_objective,
    get_objective,
)
from regboost.objectives.smoothing import approximate_hessian_with_gaussian

# Type alias for all objectives
type Objective = SquaredError | AbsoluteError | Huber | Fair

__all__ = [
    "AbsoluteError",
    "Fair",
    "Huber",
    "Objective",
    "ObjectiveFunction",
    "ObjectiveNotInitializedError",
    "SquaredError",
    "approximate_hessian_with_gaussian",
    "as_booster_objective",
    "as_sklearn_objective",
    "available_objectives",
    "canonical_name",
    "create_objective",
    "get_objective",
    "static_partition",
]
