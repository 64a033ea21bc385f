"""Per-axis mapping from output coordinates to source coordinates.

Each axis is mapped independently. The engine composes the per-axis results
into full source coordinates, so nothing here knows about the other axes.
"""

from typing import Optional, Union

import torch
from torch import Tensor

from torchpad.pad._exceptions import IllegalPadOnEmptyDimension
from torchpad.pad._mode import Mode, PaddingMode

FILL = -1


def map_index(
    k: int,
    size: int,
    lower: int,
    upper: int,
    mode: Union[PaddingMode, Mode],
) -> int:
    """
    Map output coordinate ``k`` of one axis to a source coordinate.

    Parameters
    ----------
    k : int
        Output coordinate, in ``[0, size + lower + upper)``.
    size : int
        Input size of the axis.
    lower, upper : int
        Pads before and after the axis. Negative values crop.
    mode : {"constant", "edge", "reflect"}
        Boundary mode.

    Returns
    -------
    int
        Source coordinate in ``[0, size)``, or :data:`FILL` when the output
        element takes the constant fill value.

    Raises
    ------
    IllegalPadOnEmptyDimension
        If ``size`` is 0 and ``mode`` is ``"edge"`` or ``"reflect"``.

    Examples
    --------
    >>> [map_index(k, 3, 2, 2, "reflect") for k in range(7)]
    [2, 1, 0, 1, 2, 1, 0]
    >>> [map_index(k, 3, 2, 2, "edge") for k in range(7)]
    [0, 0, 0, 1, 2, 2, 2]
    >>> [map_index(k, 2, 1, 2, "constant") for k in range(5)]
    [-1, 0, 1, -1, -1]
    """
    mode = Mode.parse(mode, "map_index")

    extent = size + lower + upper
    if not 0 <= k < extent:
        raise IndexError(
            f"map_index: output coordinate {k} is out of range [0, {extent})"
        )

    s = k - lower
    if 0 <= s < size:
        return s

    if mode is Mode.CONSTANT:
        return FILL

    if size == 0:
        raise IllegalPadOnEmptyDimension(
            f"map_index: cannot use '{mode.value}' mode on an axis of size 0"
        )

    if mode is Mode.EDGE:
        return min(max(s, 0), size - 1)

    if size == 1:
        return 0

    while not 0 <= s < size:
        if s < 0:
            s = -s
        else:
            s = 2 * (size - 1) - s

    return s


def axis_indices(
    size: int,
    lower: int,
    upper: int,
    mode: Union[PaddingMode, Mode],
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Evaluate :func:`map_index` for every output coordinate of one axis.

    Returns
    -------
    Tensor, shape (size + lower + upper,)
        ``int64`` source coordinates, with :data:`FILL` marking fill positions.

    Notes
    -----
    Reflection is computed in closed form: with period ``p = 2 * (size - 1)``,
    ``r = s mod p`` lands on ``r`` when ``r < size`` and on ``p - r``
    otherwise, which is what repeated mirroring converges to.
    """
    mode = Mode.parse(mode, "axis_indices")

    extent = size + lower + upper
    if extent < 0:
        raise ValueError(
            f"axis_indices: pads ({lower}, {upper}) on size {size} give "
            f"negative extent {extent}"
        )

    if size == 0 and extent > 0 and mode is not Mode.CONSTANT:
        raise IllegalPadOnEmptyDimension(
            f"axis_indices: cannot use '{mode.value}' mode on an axis of size 0"
        )

    s = torch.arange(extent, dtype=torch.int64, device=device)
    s = s - lower

    if mode is Mode.CONSTANT:
        inside = (s >= 0) & (s < size)
        return torch.where(inside, s, torch.full_like(s, FILL))

    if mode is Mode.EDGE:
        return s.clamp(min=0, max=max(size - 1, 0))

    if size <= 1:
        return torch.zeros_like(s)

    period = 2 * (size - 1)
    r = torch.remainder(s, period)
    return torch.where(r < size, r, period - r)
