"""Output shape resolution for the pad operator."""

from typing import Optional, Sequence, Union

import torch

from torchpad.pad._exceptions import (
    IllegalPadOnEmptyDimension,
    NegativeOutputDimension,
)
from torchpad.pad._mode import Mode, PaddingMode
from torchpad.pad._normalize import PadTable, normalize_pads


def _format_shape(shape: Sequence[int]) -> str:
    return "{" + ",".join(str(int(d)) for d in shape) + "}"


def resolve_output_shape(
    input_shape: Sequence[int],
    pad_table: PadTable,
    mode: Union[PaddingMode, Mode] = "constant",
) -> torch.Size:
    """
    Compute the padded shape and reject shapes the kernel cannot produce.

    Parameters
    ----------
    input_shape : sequence of int
        Shape of the input tensor.
    pad_table : tuple of (int, int)
        Normalized ``(lower, upper)`` pair per axis, as returned by
        :func:`normalize_pads`.
    mode : {"constant", "edge", "reflect"}
        Boundary mode.

    Returns
    -------
    torch.Size
        ``input_shape[i] + lower_i + upper_i`` for every axis.

    Raises
    ------
    IllegalPadOnEmptyDimension
        If ``mode`` is not ``"constant"`` and a size-0 axis has nonzero pads.
    NegativeOutputDimension
        If an output dimension would be negative.
    """
    mode = Mode.parse(mode, "resolve_output_shape")

    if len(pad_table) != len(input_shape):
        raise ValueError(
            f"resolve_output_shape: pad table has {len(pad_table)} entries "
            f"for input of rank {len(input_shape)}"
        )

    output_shape = []
    for axis, (size, (lower, upper)) in enumerate(zip(input_shape, pad_table)):
        size = int(size)
        if size == 0 and mode is not Mode.CONSTANT and (lower, upper) != (0, 0):
            raise IllegalPadOnEmptyDimension(
                f"Cannot use '{mode.value}' mode to pad dimension with a value "
                f"of 0. Input shape:{_format_shape(input_shape)}"
            )

        padded = size + lower + upper
        if padded < 0:
            raise NegativeOutputDimension(
                f"negative output dimension: axis {axis} has input size "
                f"{size} and pads ({lower}, {upper}), giving {padded}"
            )
        output_shape.append(padded)

    return torch.Size(output_shape)


def infer_output_shape(
    input_shape: Sequence[int],
    pads: Sequence[int],
    axes: Optional[Sequence[int]] = None,
    mode: PaddingMode = "constant",
) -> torch.Size:
    """
    Shape inference for the pad operator without touching any data.

    Examples
    --------
    >>> infer_output_shape((2, 3), [1, 2, 1, -1])
    torch.Size([4, 4])
    >>> infer_output_shape((1, 2, 2, 2), [1, 0, 1, 0], axes=[3, 2])
    torch.Size([1, 2, 2, 4])
    """
    pad_table = normalize_pads(len(input_shape), pads, axes)
    return resolve_output_shape(input_shape, pad_table, mode)
