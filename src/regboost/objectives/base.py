"""Objective base type shared by all regression losses."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from joblib import Parallel, delayed

from regboost.config import ObjectiveConfig
from regboost.data import Metadata, empty_derivatives

if TYPE_CHECKING:
    from collections.abc import Callable

    from numpy.typing import ArrayLike, NDArray

    # Computes one contiguous slice: (score, gradients, hessians, index_slice)
    Kernel = Callable[[NDArray[np.float64], NDArray[np.floating], NDArray[np.floating], slice], None]

logger = logging.getLogger(__name__)


class ObjectiveNotInitializedError(RuntimeError):
    """Raised when derivatives are requested before ``init``."""


def static_partition(num_data: int, num_chunks: int) -> list[slice]:
    """Split ``[0, num_data)`` into at most ``num_chunks`` contiguous, near-equal slices."""
    num_chunks = max(1, min(num_chunks, num_data))
    bounds = np.linspace(0, num_data, num_chunks + 1).astype(np.int64)
    return [slice(int(lo), int(hi)) for lo, hi in zip(bounds[:-1], bounds[1:], strict=True)]


class ObjectiveFunction(ABC):
    """Base class for regression objectives.

    Lifecycle: construct with a config, call ``init`` once with the training
    metadata, then ``get_gradients`` once per boosting iteration.
    """

    name: ClassVar[str]

    def __init__(self, config: ObjectiveConfig | None = None) -> None:
        self.config = config if config is not None else ObjectiveConfig()
        self._num_data: int | None = None
        self._label: NDArray[np.float32] | None = None
        self._weights: NDArray[np.float32] | None = None
        self._kernel: Kernel | None = None
        logger.debug("Created %s objective with %s", self.name, self.config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"

    @property
    def num_data(self) -> int | None:
        return self._num_data

    @property
    def is_initialized(self) -> bool:
        return self._kernel is not None

    def get_name(self) -> str:
        """Registry identifier of this objective."""
        return self.name

    def init(self, metadata: Metadata, num_data: int) -> None:
        """Bind labels and weights of the training set.

        Args:
            metadata: Training labels and optional weights.
            num_data: Number of training examples.

        Raises:
            ValueError: If metadata length differs from ``num_data``.
        """
        if metadata.num_data != num_data:
            raise ValueError(f"metadata holds {metadata.num_data} examples, expected {num_data}")

        self._num_data = num_data
        self._label = metadata.label
        self._weights = metadata.weights

        if self._weights is None:
            self._kernel = self._unweighted
        else:
            if num_data and np.min(self._weights) <= 0:
                logger.warning("%s: non-positive sample weights yield zero or negative hessians", self.name)
            self._kernel = self._weighted

        logger.debug(
            "Initialized %s objective: num_data=%d, weighted=%s",
            self.name,
            num_data,
            self._weights is not None,
        )

    def get_gradients(
        self,
        score: ArrayLike,
        gradients: NDArray[np.floating] | None = None,
        hessians: NDArray[np.floating] | None = None,
    ) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
        """Compute first and second derivatives of the loss at ``score``.

        Every index of ``gradients`` and ``hessians`` is overwritten. Buffers are
        allocated when not given.

        Args:
            score: Current prediction for every example.
            gradients: Output buffer of length ``num_data``.
            hessians: Output buffer of length ``num_data``.

        Returns:
            The ``(gradients, hessians)`` buffers.

        Raises:
            ObjectiveNotInitializedError: If ``init`` was not called.
            ValueError: If an array length differs from ``num_data``.
        """
        kernel = self._kernel
        if kernel is None or self._num_data is None:
            raise ObjectiveNotInitializedError(f"{self.name} objective used before init()")

        n = self._num_data
        score = np.asarray(score, dtype=np.float64)
        if score.shape != (n,):
            raise ValueError(f"score has shape {score.shape}, expected ({n},)")

        if gradients is None or hessians is None:
            new_gradients, new_hessians = empty_derivatives(n)
            gradients = new_gradients if gradients is None else gradients
            hessians = new_hessians if hessians is None else hessians
        for buf_name, buf in (("gradients", gradients), ("hessians", hessians)):
            if buf.shape != (n,):
                raise ValueError(f"{buf_name} has shape {buf.shape}, expected ({n},)")

        chunks = static_partition(n, self.config.num_threads)
        if len(chunks) == 1:
            kernel(score, gradients, hessians, slice(0, n))
        else:
            Parallel(n_jobs=len(chunks), backend="threading")(
                delayed(kernel)(score[s], gradients[s], hessians[s], s) for s in chunks
            )
        return gradients, hessians

    @abstractmethod
    def _unweighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        """Fill derivatives for ``index`` when no weights are bound."""
        ...

    @abstractmethod
    def _weighted(
        self,
        score: NDArray[np.float64],
        gradients: NDArray[np.floating],
        hessians: NDArray[np.floating],
        index: slice,
    ) -> None:
        """Fill derivatives for ``index`` scaled by the bound weights."""
        ...
