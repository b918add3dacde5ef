"""Regression objectives: squared error, absolute error, Huber and Fair loss.

Each objective writes derivatives with respect to the raw score. Residuals
are ``score - label`` throughout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from regboost.config import ObjectiveConfig
from regboost.objectives.base import ObjectiveFunction
from regboost.objectives.smoothing import approximate_hessian_with_gaussian

if TYPE_CHECKING:
    from numpy.typing import NDArray


class SquaredError(ObjectiveFunction):
    """L2 loss. Constant unit curvature."""

    name = "regression"

    def _unweighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        np.subtract(score, self._label[index], out=gradients)
        hessians.fill(1.0)

    def _weighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        weights = self._weights[index]
        np.multiply(score - self._label[index], weights, out=gradients)
        hessians[...] = weights


class AbsoluteError(ObjectiveFunction):
    """L1 loss.

    The gradient is the sign of the residual (zero counts as positive). The
    true hessian is zero away from the kink, so a Gaussian approximation
    controlled by ``gaussian_eta`` is used instead.
    """

    name = "regression_l1"

    def __init__(self, config: ObjectiveConfig | None = None) -> None:
        super().__init__(config)
        self._eta = self.config.gaussian_eta

    def _unweighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        label = self._label[index]
        np.copyto(gradients, np.where(score - label >= 0.0, 1.0, -1.0), casting="same_kind")
        approximate_hessian_with_gaussian(score, label, gradients, self._eta, out=hessians)

    def _weighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        label = self._label[index]
        weights = self._weights[index]
        np.copyto(gradients, np.where(score - label >= 0.0, weights, -weights), casting="same_kind")
        approximate_hessian_with_gaussian(score, label, gradients, self._eta, out=hessians)


class Huber(ObjectiveFunction):
    """Huber loss.

    Quadratic for ``|residual| <= huber_delta``, linear beyond. In the linear
    region the gradient saturates at ``±huber_delta`` and the hessian comes
    from the Gaussian approximation. A NaN residual is not ``> huber_delta``
    and falls in the quadratic region (NaN gradient, unit hessian).
    """

    name = "huber"

    def __init__(self, config: ObjectiveConfig | None = None) -> None:
        super().__init__(config)
        self._delta = self.config.huber_delta
        self._eta = self.config.gaussian_eta

    def _saturated(self, diff: NDArray[np.float64]) -> tuple[NDArray[np.bool_], NDArray[np.float64]]:
        linear = np.abs(diff) > self._delta
        grad = np.where(linear, np.where(diff >= 0.0, self._delta, -self._delta), diff)
        return linear, grad

    def _unweighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        label = self._label[index]
        linear, grad = self._saturated(score - label)
        smoothed = approximate_hessian_with_gaussian(score, label, grad, self._eta)
        np.copyto(gradients, grad, casting="same_kind")
        np.copyto(hessians, np.where(linear, smoothed, 1.0), casting="same_kind")

    def _weighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        label = self._label[index]
        weights = self._weights[index]
        linear, grad = self._saturated(score - label)
        grad *= weights
        smoothed = approximate_hessian_with_gaussian(score, label, grad, self._eta)
        np.copyto(gradients, grad, casting="same_kind")
        np.copyto(hessians, np.where(linear, smoothed, weights), casting="same_kind")


class Fair(ObjectiveFunction):
    """Fair loss: ``c^2 * (|x|/c - log(1 + |x|/c))``.

    Smooth everywhere, so the hessian is exact. It equals 1 at ``x = 0`` and
    decays towards 0 as ``|x|`` grows, bounding the step for outliers.
    """

    name = "fair"

    def __init__(self, config: ObjectiveConfig | None = None) -> None:
        super().__init__(config)
        self._c = self.config.fair_c

    def _unweighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        c = self._c
        x = score - self._label[index]
        denom = np.abs(x) + c
        np.divide(c * x, denom, out=gradients)
        np.divide(c * c, denom * denom, out=hessians)

    def _weighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        c = self._c
        weights = self._weights[index]
        x = score - self._label[index]
        denom = np.abs(x) + c
        np.multiply(c * x / denom, weights, out=gradients)
        np.multiply(c * c / (denom * denom), weights, out=hessians)


__all__: list[str] = ["AbsoluteError", "Fair", "Huber", "SquaredError"]
