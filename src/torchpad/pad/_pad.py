import math
import warnings
from numbers import Number
from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from torchpad.pad._engine import pad_normalized
from torchpad.pad._exceptions import MalformedPadSpec, PadWarning
from torchpad.pad._mode import Mode, PaddingMode
from torchpad.pad._normalize import flatten_pad_pairs, normalize_pads

Pads = Union[Tensor, Sequence[int], Sequence[Tuple[int, int]]]


def _as_int_list(values: Union[Tensor, Sequence[int]], name: str) -> list:
    if isinstance(values, Tensor):
        if values.is_floating_point() or values.is_complex():
            raise MalformedPadSpec(
                f"pad: {name} must be an integer tensor, got {values.dtype}"
            )
        if values.dtype == torch.bool:
            raise MalformedPadSpec(
                f"pad: {name} must be an integer tensor, got {values.dtype}"
            )
        if values.dim() > 1:
            raise MalformedPadSpec(
                f"pad: {name} must be 1-D, got shape {tuple(values.shape)}"
            )
        return [int(v) for v in values.reshape(-1).tolist()]

    return [int(v) for v in values]


def _flat_pads(pads: Pads) -> list:
    if isinstance(pads, Tensor):
        return _as_int_list(pads, "pads")

    pads = list(pads)
    if pads and isinstance(pads[0], (tuple, list)):
        # NumPy-style: ((before_0, after_0), (before_1, after_1), ...)
        return list(flatten_pad_pairs(pads))

    return _as_int_list(pads, "pads")


def pad(
    input: Tensor,
    pads: Pads,
    mode: PaddingMode = "constant",
    value: Union[Number, Tensor, None] = None,
    axes: Union[Tensor, Sequence[int], None] = None,
    *,
    out: Optional[Tensor] = None,
) -> Tensor:
    """
    Pad or crop a tensor along the given axes.

    Parameters
    ----------
    input : Tensor
        Input tensor of any shape and dtype, including zero-size dimensions.
    pads : Tensor, sequence of int, or sequence of (int, int)
        Pad amounts. Accepts two formats:

        - Flat ``[lower_0, ..., lower_m-1, upper_0, ..., upper_m-1]`` (a
          sequence or a 1-D integer tensor), where entry ``j`` of each half
          applies to ``axes[j]``
        - NumPy-style ``((lower_0, upper_0), (lower_1, upper_1), ...)``, one
          pair per entry of ``axes``

        Negative amounts crop elements from that side.
    mode : str, default "constant"
        Padding mode. One of:

        - ``"constant"``: Fill with ``value``
        - ``"edge"``: Repeat edge values
        - ``"reflect"``: Mirror about the edge without repeating it

    value : scalar or Tensor, optional
        Fill value for ``mode="constant"``. A Python scalar, a 0-d tensor or
        a 1-element tensor; cast to ``input.dtype``. Defaults to zero.
    axes : Tensor or sequence of int, optional
        Axes to pad, in any order. Negative axes count from the end. If None,
        all axes in natural order.
    out : Tensor, optional
        Output tensor. Must have the padded shape and ``input.dtype``. If
        provided, the result is written to this tensor.

    Returns
    -------
    Tensor
        Padded tensor with ``input.dtype`` and shape
        ``input.shape[i] + lower_i + upper_i``.

    Raises
    ------
    MalformedPadSpec
        If ``pads``, ``axes`` or ``value`` are malformed.
    NegativeOutputDimension
        If cropping makes a dimension negative.
    IllegalPadOnEmptyDimension
        If ``"edge"`` or ``"reflect"`` pads a dimension of size 0.

    Examples
    --------
    Constant padding (default):

    >>> x = torch.tensor([1, 2])
    >>> pad(x, [1, 2], value=123)
    tensor([123,   1,   2, 123, 123])

    Reflect padding:

    >>> x = torch.tensor([[1, 2]])
    >>> pad(x, [0, 1, 0, 1], mode="reflect")
    tensor([[2, 1, 2, 1]])

    Cropping and padding at once:

    >>> x = torch.tensor([[11, 21, 31], [12, 22, 32]])
    >>> pad(x, [1, 2, 1, -1], value=0)
    tensor([[ 0,  0,  0,  0],
            [ 0,  0, 11, 21],
            [ 0,  0, 12, 22],
            [ 0,  0,  0,  0]])

    Explicit axes:

    >>> x = torch.ones(1, 2, 2, 2)
    >>> pad(x, [1, 0, 1, 0], axes=[3, 2]).shape
    torch.Size([1, 2, 2, 4])

    Notes
    -----
    - ``"reflect"`` does not repeat the edge element and folds back and forth
      when the pad exceeds ``size - 1``; a size-1 axis repeats its element.
    - Zero-size dimensions may be padded in ``"constant"`` mode only.
    - Gradients flow to ``input``; edge and reflect accumulate them at the
      source positions.

    See Also
    --------
    pad_legacy : Same operator with pads and value as fixed attributes.
    """
    mode = Mode.parse(mode, "pad")

    flat_pads = _flat_pads(pads)
    axes_list = _as_int_list(axes, "axes") if axes is not None else None

    pad_table = normalize_pads(input.dim(), flat_pads, axes_list)

    return pad_normalized(input, pad_table, mode, value, out=out)


def _coerce_legacy_value(value: float, dtype: torch.dtype) -> Tensor:
    value = float(value)
    fill = torch.tensor(value, dtype=torch.float64).to(dtype)

    if dtype == torch.bool:
        lossy = value not in (0.0, 1.0)
    elif dtype.is_floating_point:
        # Rounding to a narrower float is an ordinary cast; overflow is not.
        lossy = math.isfinite(value) and not math.isfinite(fill.item())
    elif dtype.is_complex:
        lossy = False
    else:
        lossy = fill.item() != value

    if lossy:
        warnings.warn(
            f"Fill value {value} is not representable as {dtype}; "
            f"padding with {fill.item()} instead.",
            PadWarning,
            stacklevel=3,
        )

    return fill


def pad_legacy(
    input: Tensor,
    pads: Sequence[int],
    mode: PaddingMode = "constant",
    value: float = 0.0,
    *,
    out: Optional[Tensor] = None,
) -> Tensor:
    """
    Pad with ``pads`` and ``value`` given as fixed attributes.

    ``pads`` must cover every axis, ``[lower_0, ..., lower_R-1, upper_0, ...,
    upper_R-1]``, and ``value`` is taken as a float before being cast to
    ``input.dtype``. For equivalent values this matches :func:`pad`.

    Warns
    -----
    PadWarning
        If ``mode="constant"`` and the float ``value`` changes when cast to an
        integer or bool ``input.dtype``, or overflows a floating ``input.dtype``.
    """
    mode = Mode.parse(mode, "pad_legacy")
    fill = None
    if mode is Mode.CONSTANT:
        fill = _coerce_legacy_value(value, input.dtype)

    pad_table = normalize_pads(input.dim(), _as_int_list(pads, "pads"))

    return pad_normalized(input, pad_table, mode, fill, out=out)
