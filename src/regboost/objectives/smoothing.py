"""Gaussian approximation of the hessian for non-smooth losses.

L1 and the linear region of Huber have a second derivative that is zero
everywhere except at the kink, where it is undefined. Convolving the kink
with a Gaussian of width ``sigma`` turns the jump ``2|g|`` of the first
derivative into a density:

    h(r) = 2|g| * exp(-r^2 / (2 sigma^2)) / (sigma * sqrt(2 pi))

with ``sigma = eta * max(|score| + |label|, 1)`` so the width follows the
magnitude of the target. The residual ``r`` is clipped at ``sigma``: beyond
one bandwidth the estimate stays at the density's value there instead of
decaying towards zero. This keeps the estimate strictly positive and makes
it strictly decreasing in ``eta`` for every residual.

Weights enter through ``g``, which callers pass already multiplied by the
sample weight, so a weighted hessian is exactly ``w`` times the unweighted one.

Positivity holds in float64. Objectives store hessians as float32, so for
``eta * (|score| + |label|)`` beyond roughly 1e45 the stored value underflows
to 0.0.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def gaussian_bandwidth(score: ArrayLike, label: ArrayLike, eta: float) -> NDArray[np.float64]:
    """Kernel width for each example."""
    scale = np.abs(score) + np.abs(np.asarray(label, dtype=np.float64))
    return eta * np.maximum(scale, 1.0)


def approximate_hessian_with_gaussian(
    score: ArrayLike,
    label: ArrayLike,
    gradient: ArrayLike,
    eta: float,
    out: NDArray[np.floating] | None = None,
) -> NDArray[np.floating]:
    """Smoothed curvature of a kinked loss at ``score``.

    Args:
        score: Current predictions.
        label: Targets.
        gradient: First derivative at ``score`` (already weighted).
        eta: Bandwidth, relative to ``|score| + |label|``.
        out: Optional buffer receiving the result.

    Returns:
        Hessian estimates, written to ``out`` when given.
    """
    score = np.asarray(score, dtype=np.float64)
    label = np.asarray(label, dtype=np.float64)
    sigma = gaussian_bandwidth(score, label, eta)
    r = np.minimum(np.abs(score - label), sigma)
    density = np.exp(-(r * r) / (2.0 * sigma * sigma)) * _INV_SQRT_2PI / sigma
    return np.multiply(2.0 * np.abs(gradient), density, out=out)


__all__: list[str] = ["approximate_hessian_with_gaussian", "gaussian_bandwidth"]
