"""Testing utilities for the pad operator.

Example usage:

    import hypothesis

    from torchpad.pad import pad
    from torchpad.testing import pad_specs

    @hypothesis.given(pad_specs())
    def test_shape(spec):
        input, pads, axes, mode = spec
        ...
"""

from .strategies import (
    pad_dtypes,
    pad_specs,
    padding_modes,
    shapes,
    tensors,
)

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
