"""regboost - gradient and hessian computation for regression boosting objectives.

Example:
    >>> import numpy as np
    >>> from regboost import Metadata, create_objective
    >>> objective = create_objective("huber", {"huber_delta": 1.0})
    >>> objective.init(Metadata.from_arrays([1.0, 2.0, 3.0]), 3)
    >>> grad, hess = objective.get_gradients(np.ones(3))
    >>> grad.tolist()
    [0.0, -1.0, -1.0]
"""

from regboost.config import ConfigError, ObjectiveConfig
from regboost.data import LABEL_DTYPE, SCORE_DTYPE, Metadata, empty_derivatives
from regboost.objectives import (
    AbsoluteError,
    Fair,
    Huber,
    Objective,
    ObjectiveFunction,
    ObjectiveNotInitializedError,
    SquaredError,
    approximate_hessian_with_gaussian,
    as_booster_objective,
    as_sklearn_objective,
    available_objectives,
    create_objective,
    get_objective,
)

__all__ = [
    # Configuration
    "ConfigError",
    "ObjectiveConfig",
    # Data
    "LABEL_DTYPE",
    "SCORE_DTYPE",
    "Metadata",
    "empty_derivatives",
    # Objectives
    "AbsoluteError",
    "Fair",
    "Huber",
    "Objective",
    "ObjectiveFunction",
    "ObjectiveNotInitializedError",
    "SquaredError",
    "approximate_hessian_with_gaussian",
    # Registry
    "available_objectives",
    "create_objective",
    "get_objective",
    # Adapters
    "as_booster_objective",
    "as_sklearn_objective",
]

__version__ = "0.1.0"
