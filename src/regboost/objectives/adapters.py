"""Custom-objective callables for XGBoost, LightGBM and scikit-learn style APIs.

None of these import the boosting libraries: they only rely on the
``get_label()`` / ``get_weight()`` accessors of the training data object.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

from regboost.data import Metadata

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from regboost.objectives.base import ObjectiveFunction

GradHess = tuple["NDArray[np.floating[Any]]", "NDArray[np.floating[Any]]"]


def as_booster_objective(objective: ObjectiveFunction) -> Callable[[ArrayLike, Any], GradHess]:
    """Wrap an objective as ``(preds, train_data) -> (grad, hess)``.

    Works with ``xgboost.train(obj=...)`` and LightGBM's ``objective``
    callable. The objective is bound to the training data on first call and
    rebound whenever a different data object is passed.
    """
    bound: dict[str, Any] = {"data": None}

    def _objective(preds: ArrayLike, train_data: Any) -> GradHess:
        if bound["data"] is not train_data:
            metadata = Metadata.from_arrays(train_data.get_label(), train_data.get_weight())
            objective.init(metadata, metadata.num_data)
            bound["data"] = train_data
        return objective.get_gradients(np.asarray(preds).ravel())

    return _objective


def as_sklearn_objective(objective: ObjectiveFunction) -> Callable[..., GradHess]:
    """Wrap an objective as ``(y_true, y_pred[, weight]) -> (grad, hess)``.

    Labels are rebound on every call since the estimator API passes them
    alongside predictions. The estimator wrappers do not apply sample weights
    to custom objectives, so pass them as the third argument.
    """

    def _objective(y_true: ArrayLike, y_pred: ArrayLike, weight: ArrayLike | None = None) -> GradHess:
        metadata = Metadata.from_arrays(y_true, weight)
        objective.init(metadata, metadata.num_data)
        return objective.get_gradients(np.asarray(y_pred).ravel())

    return _objective


__all__ = ["as_booster_objective", "as_sklearn_objective"]
