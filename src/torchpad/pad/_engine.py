"""Execution engine: compose per-axis mappings into the padded tensor."""

import functools
from numbers import Number
from typing import List, Optional, Union

import torch
from torch import Tensor

from torchpad.pad._axis import FILL, axis_indices
from torchpad.pad._exceptions import MalformedPadSpec
from torchpad.pad._mode import Mode, PaddingMode
from torchpad.pad._normalize import PadTable
from torchpad.pad._shape import resolve_output_shape

# Advanced indexing and where are not implemented for these; gather through a
# same-width signed view instead.
_INDEXABLE_VIEWS = {
    torch.uint16: torch.int16,
    torch.uint32: torch.int32,
    torch.uint64: torch.int64,
}


def fill_tensor(
    value: Union[Number, Tensor, None],
    dtype: torch.dtype,
    device: torch.device,
) -> Tensor:
    """Turn a scalar or single-element tensor into a 0-d tensor of ``dtype``."""
    if value is None:
        return torch.zeros((), dtype=dtype, device=device)

    if isinstance(value, Tensor):
        if value.numel() != 1:
            raise MalformedPadSpec(
                f"value must be a scalar or a 1-element tensor, got shape "
                f"{tuple(value.shape)}"
            )
        return value.detach().reshape(()).to(dtype=dtype, device=device)

    return torch.tensor(value, dtype=dtype, device=device)


def _open_grid(indices: List[Tensor]) -> List[Tensor]:
    rank = len(indices)
    return [
        index.reshape([-1 if d == axis else 1 for d in range(rank)])
        for axis, index in enumerate(indices)
    ]


def _compute(
    input: Tensor,
    pad_table: PadTable,
    output_shape: torch.Size,
    mode: Mode,
    value: Union[Number, Tensor, None],
) -> Tensor:
    if input.is_meta or output_shape.numel() == 0:
        return input.new_empty(output_shape)

    if input.numel() == 0:
        # Only reachable in constant mode: every output element is fill.
        fill = fill_tensor(value, input.dtype, input.device)
        return fill.expand(output_shape).contiguous()

    if input.dim() == 0:
        return input.clone()

    view_dtype = _INDEXABLE_VIEWS.get(input.dtype)
    source = input if view_dtype is None else input.view(view_dtype)

    indices = [
        axis_indices(size, lower, upper, mode, device=input.device)
        for size, (lower, upper) in zip(input.shape, pad_table)
    ]
    grid = _open_grid(indices)

    result = source[tuple(index.clamp(min=0) for index in grid)]

    if mode is Mode.CONSTANT:
        # An axis can only produce FILL where it is extended.
        masks = [
            index.ne(FILL)
            for index, (lower, upper) in zip(grid, pad_table)
            if lower > 0 or upper > 0
        ]
        if masks:
            inside = functools.reduce(torch.logical_and, masks)
            fill = fill_tensor(value, input.dtype, input.device)
            if view_dtype is not None:
                fill = fill.view(view_dtype)
            result = torch.where(inside, result, fill)

    if view_dtype is not None:
        result = result.view(input.dtype)

    return result


def pad_normalized(
    input: Tensor,
    pad_table: PadTable,
    mode: Union[PaddingMode, Mode] = "constant",
    value: Union[Number, Tensor, None] = None,
    *,
    out: Optional[Tensor] = None,
) -> Tensor:
    """
    Pad ``input`` according to an already normalized pad table.

    Output coordinate ``(k_0, ..., k_{R-1})`` is mapped axis by axis with
    :func:`axis_indices`. If any axis maps to ``FILL`` the element is
    ``value``; otherwise it copies ``input[s_0, ..., s_{R-1}]``. All axes are
    gathered at once through an open index grid, so no element depends on any
    other.

    Parameters
    ----------
    input : Tensor
        Input tensor of any shape and dtype. Never modified.
    pad_table : tuple of (int, int)
        One ``(lower, upper)`` pair per axis of ``input``.
    mode : {"constant", "edge", "reflect"}, default "constant"
        Boundary mode.
    value : scalar or Tensor, optional
        Fill value for ``mode="constant"``, cast to ``input.dtype``. Defaults
        to zero. Receives no gradient.
    out : Tensor, optional
        Output tensor with the resolved shape and ``input.dtype``.

    Returns
    -------
    Tensor
        Padded tensor of shape ``input.shape[i] + lower_i + upper_i``.

    Raises
    ------
    IllegalPadOnEmptyDimension, NegativeOutputDimension
        From shape resolution, before anything is written.
    ValueError
        If ``out`` has the wrong shape or dtype.
    """
    mode = Mode.parse(mode, "pad")
    output_shape = resolve_output_shape(input.shape, pad_table, mode)

    if out is not None:
        if out.shape != output_shape:
            raise ValueError(
                f"pad: out has shape {tuple(out.shape)}, expected "
                f"{tuple(output_shape)}"
            )
        if out.dtype != input.dtype:
            raise ValueError(
                f"pad: out has dtype {out.dtype}, expected {input.dtype}"
            )

    result = _compute(input, pad_table, output_shape, mode, value)

    if out is None:
        return result

    if not out.is_meta:
        out.copy_(result)
    return out
