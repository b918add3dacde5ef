"""Per-example metadata consumed by objectives.

Objectives never own label or weight storage: they keep references to the
read-only arrays held here for as long as the metadata object lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

# Storage types of the boosting learner
LABEL_DTYPE = np.float32
SCORE_DTYPE = np.float32


def _readonly(values: ArrayLike, name: str) -> NDArray[np.float32]:
    arr = np.asarray(values, dtype=LABEL_DTYPE)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got shape {arr.shape}")
    view = arr.view()
    view.flags.writeable = False
    return view


@dataclass(frozen=True)
class Metadata:
    """Labels and optional sample weights of a training set.

    Attributes:
        label: Per-example label values.
        weights: Per-example weights, or None when every example counts once.
    """

    label: NDArray[np.float32]
    weights: NDArray[np.float32] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", _readonly(self.label, "label"))
        if self.weights is not None:
            weights = _readonly(self.weights, "weights")
            if len(weights) != len(self.label):
                raise ValueError(
                    f"weights length ({len(weights)}) does not match label length ({len(self.label)})"
                )
            object.__setattr__(self, "weights", weights)

    @property
    def num_data(self) -> int:
        """Number of examples."""
        return len(self.label)

    @property
    def has_weights(self) -> bool:
        return self.weights is not None

    @classmethod
    def from_arrays(cls, label: ArrayLike, weights: ArrayLike | None = None) -> Metadata:
        """Create metadata from array-likes.

        An empty weight array is treated as absent, matching how XGBoost and
        LightGBM report unweighted datasets.
        """
        if weights is not None and np.size(weights) == 0:
            weights = None
        return cls(label=label, weights=weights)  # type: ignore[arg-type]


def empty_derivatives(num_data: int) -> tuple[NDArray[np.float32], NDArray[np.float32]]:
    """Allocate gradient and hessian buffers for ``num_data`` examples."""
    return np.empty(num_data, dtype=SCORE_DTYPE), np.empty(num_data, dtype=SCORE_DTYPE)


__all__: list[str] = ["LABEL_DTYPE", "SCORE_DTYPE", "Metadata", "empty_derivatives"]
