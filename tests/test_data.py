"""Tests for training metadata."""

from __future__ import annotations

import numpy as np
import pytest

from regboost.data import SCORE_DTYPE, Metadata, empty_derivatives


class TestMetadata:
    """Tests for Metadata."""

    def test_label_is_borrowed_read_only_view(self) -> None:
        """Test labels share memory with the caller but cannot be written."""
        label = np.arange(4, dtype=np.float32)
        metadata = Metadata(label)

        assert np.shares_memory(metadata.label, label)
        assert not metadata.label.flags.writeable
        assert label.flags.writeable
        with pytest.raises(ValueError):
            metadata.label[0] = 1.0

    def test_converts_lists(self) -> None:
        """Test array-likes are converted to float32."""
        metadata = Metadata.from_arrays([1, 2, 3], [1.0, 0.5, 2.0])
        assert metadata.label.dtype == np.float32
        assert metadata.weights is not None
        assert metadata.weights.dtype == np.float32
        assert metadata.num_data == 3
        assert metadata.has_weights

    def test_no_weights(self) -> None:
        """Test weights default to None."""
        metadata = Metadata.from_arrays([1.0, 2.0])
        assert metadata.weights is None
        assert not metadata.has_weights

    def test_empty_weights_treated_as_absent(self) -> None:
        """Test empty weight arrays mean unweighted."""
        metadata = Metadata.from_arrays([1.0, 2.0], np.array([], dtype=np.float32))
        assert metadata.weights is None

    def test_weight_length_mismatch(self) -> None:
        """Test mismatched weights raise ValueError."""
        with pytest.raises(ValueError, match="does not match label length"):
            Metadata.from_arrays([1.0, 2.0, 3.0], [1.0, 1.0])

    def test_label_must_be_1d(self) -> None:
        """Test 2D labels are rejected."""
        with pytest.raises(ValueError, match="1-dimensional"):
            Metadata(np.zeros((2, 2), dtype=np.float32))

    def test_frozen(self) -> None:
        """Test metadata fields cannot be rebound."""
        metadata = Metadata.from_arrays([1.0])
        with pytest.raises(AttributeError):
            metadata.label = np.zeros(1, dtype=np.float32)  # type: ignore[misc]


def test_empty_derivatives() -> None:
    """Test buffers are allocated with the score dtype."""
    grad, hess = empty_derivatives(5)
    assert grad.shape == hess.shape == (5,)
    assert grad.dtype == hess.dtype == SCORE_DTYPE
    assert not np.shares_memory(grad, hess)
