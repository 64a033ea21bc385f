"""Hypothesis strategies for pad operator testing."""

from ._pad_dtypes import pad_dtypes
from ._pad_specs import pad_specs
from ._padding_modes import padding_modes
from ._shapes import shapes
from ._tensors import tensors

__all__ = [
    # Tensor strategies
    "shapes",
    "tensors",
    # Dtype strategies
    "pad_dtypes",
    # Pad strategies
    "padding_modes",
    "pad_specs",
]
