"""N-dimensional pad operator.

Pads or crops a tensor along any subset of its axes with constant, edge or
reflect boundaries. The operator is split into independent stages that can
also be used on their own.

Operations
----------
pad : Pad with runtime pads, value and axes.
pad_legacy : Pad with pads and a float value given as fixed attributes.
Pad : ``nn.Module`` wrapper around :func:`pad`.
normalize_pads : Raw pads and axes to a dense per-axis pad table.
resolve_output_shape : Padded shape from a pad table, with validation.
infer_output_shape : Padded shape from raw pads and axes.
map_index : Source coordinate (or FILL) for one output coordinate of an axis.
axis_indices : :func:`map_index` for a whole axis, as a tensor.
pad_normalized : Pad from an already normalized pad table.
"""

from torchpad.pad._axis import FILL, axis_indices, map_index
from torchpad.pad._engine import pad_normalized
from torchpad.pad._exceptions import (
    IllegalPadOnEmptyDimension,
    MalformedPadSpec,
    NegativeOutputDimension,
    PadError,
    PadWarning,
)
from torchpad.pad._mode import Mode, PaddingMode
from torchpad.pad._module import Pad
from torchpad.pad._normalize import normalize_pads
from torchpad.pad._pad import pad, pad_legacy
from torchpad.pad._shape import infer_output_shape, resolve_output_shape

__all__ = [
    "FILL",
    "IllegalPadOnEmptyDimension",
    "MalformedPadSpec",
    "Mode",
    "NegativeOutputDimension",
    "Pad",
    "PadError",
    "PadWarning",
    "PaddingMode",
    "axis_indices",
    "infer_output_shape",
    "map_index",
    "normalize_pads",
    "pad",
    "pad_legacy",
    "pad_normalized",
    "resolve_output_shape",
]
