import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchpad.pad import (
    FILL,
    IllegalPadOnEmptyDimension,
    axis_indices,
    map_index,
)
from torchpad.testing import padding_modes


class TestMapIndex:
    @pytest.mark.parametrize("mode", ["constant", "edge", "reflect"])
    def test_direct_copy_region(self, mode):
        """In-range coordinates copy the source for every mode."""
        assert [map_index(k, 4, 2, 1, mode) for k in range(2, 6)] == [
            0,
            1,
            2,
            3,
        ]

    def test_constant(self):
        assert [map_index(k, 2, 1, 2, "constant") for k in range(5)] == [
            FILL,
            0,
            1,
            FILL,
            FILL,
        ]

    def test_edge(self):
        assert [map_index(k, 3, 2, 2, "edge") for k in range(7)] == [
            0,
            0,
            0,
            1,
            2,
            2,
            2,
        ]

    def test_reflect(self):
        assert [map_index(k, 3, 2, 2, "reflect") for k in range(7)] == [
            2,
            1,
            0,
            1,
            2,
            1,
            0,
        ]

    def test_reflect_folds_repeatedly(self):
        # [1, 2, 3, 4] padded (2, 2) reads [3, 2, 1, 2, 3, 4, 3, 2]
        assert [map_index(k, 4, 2, 2, "reflect") for k in range(8)] == [
            2,
            1,
            0,
            1,
            2,
            3,
            2,
            1,
        ]
        assert map_index(0, 2, 5, 0, "reflect") == 1

    def test_reflect_single_element(self):
        assert [map_index(k, 1, 2, 3, "reflect") for k in range(6)] == [0] * 6

    def test_cropping_shifts_source(self):
        assert [map_index(k, 5, -2, -1, "constant") for k in range(2)] == [
            2,
            3,
        ]

    def test_crop_then_extend(self):
        assert [map_index(k, 3, -1, 2, "edge") for k in range(4)] == [
            1,
            2,
            2,
            2,
        ]

    def test_empty_axis_constant(self):
        assert [map_index(k, 0, 1, 1, "constant") for k in range(2)] == [
            FILL,
            FILL,
        ]

    @pytest.mark.parametrize("mode", ["edge", "reflect"])
    def test_empty_axis_needs_constant(self, mode):
        with pytest.raises(IllegalPadOnEmptyDimension, match="size 0"):
            map_index(0, 0, 1, 0, mode)

    @pytest.mark.parametrize("k", [-1, 5])
    def test_out_of_range(self, k):
        with pytest.raises(IndexError, match="out of range"):
            map_index(k, 3, 1, 1, "edge")


class TestAxisIndices:
    def test_dtype_and_shape(self):
        indices = axis_indices(3, 2, 1, "reflect")
        assert indices.dtype == torch.int64
        assert indices.shape == (6,)

    def test_constant(self):
        torch.testing.assert_close(
            axis_indices(2, 1, 2, "constant"),
            torch.tensor([FILL, 0, 1, FILL, FILL]),
        )

    def test_empty_extent(self):
        assert axis_indices(3, -2, -1, "edge").numel() == 0

    def test_negative_extent(self):
        with pytest.raises(ValueError, match="negative extent"):
            axis_indices(3, -2, -2, "edge")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="mode must be one of"):
            axis_indices(3, 1, 1, "wrap")

    @pytest.mark.parametrize("mode", ["edge", "reflect"])
    def test_empty_axis_needs_constant(self, mode):
        with pytest.raises(IllegalPadOnEmptyDimension, match="size 0"):
            axis_indices(0, 0, 2, mode)
        assert axis_indices(0, 0, 0, mode).numel() == 0

    @hypothesis.given(
        size=hypothesis.strategies.integers(min_value=0, max_value=7),
        lower=hypothesis.strategies.integers(min_value=-7, max_value=12),
        upper=hypothesis.strategies.integers(min_value=-7, max_value=12),
        mode=padding_modes,
    )
    def test_matches_map_index(self, size, lower, upper, mode):
        extent = size + lower + upper
        hypothesis.assume(extent >= 0)
        hypothesis.assume(size > 0 or mode == "constant")

        indices = axis_indices(size, lower, upper, mode)
        expected = [map_index(k, size, lower, upper, mode) for k in range(extent)]
        assert indices.tolist() == expected

    @hypothesis.given(
        size=hypothesis.strategies.integers(min_value=1, max_value=7),
        lower=hypothesis.strategies.integers(min_value=0, max_value=12),
        upper=hypothesis.strategies.integers(min_value=0, max_value=12),
        mode=hypothesis.strategies.sampled_from(["edge", "reflect"]),
    )
    def test_never_fill_outside_constant(self, size, lower, upper, mode):
        indices = axis_indices(size, lower, upper, mode)
        assert bool(((indices >= 0) & (indices < size)).all())
