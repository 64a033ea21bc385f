"""Normalization of raw pads and axes into a dense per-axis pad table."""

from typing import Optional, Sequence, Tuple

from torchpad.pad._exceptions import MalformedPadSpec

PadTable = Tuple[Tuple[int, int], ...]


def normalize_axes(rank: int, axes: Optional[Sequence[int]]) -> Tuple[int, ...]:
    """Resolve negative axes and check range and uniqueness."""
    if axes is None:
        return tuple(range(rank))

    resolved = []
    for axis in axes:
        axis = int(axis)
        normalized = axis + rank if axis < 0 else axis
        if not 0 <= normalized < rank:
            raise MalformedPadSpec(
                f"axis {axis} is out of range for input of rank {rank}"
            )
        resolved.append(normalized)

    if len(set(resolved)) != len(resolved):
        raise MalformedPadSpec(
            f"axes must be unique, got {list(axes)} (normalized {resolved})"
        )

    return tuple(resolved)


def normalize_pads(
    rank: int,
    pads: Sequence[int],
    axes: Optional[Sequence[int]] = None,
) -> PadTable:
    """
    Build the dense ``(lower, upper)`` table for every axis of the input.

    Parameters
    ----------
    rank : int
        Rank of the input tensor.
    pads : sequence of int
        Flat pad amounts ``[lower_0, ..., lower_m-1, upper_0, ..., upper_m-1]``
        where entry ``j`` of each half belongs to ``axes[j]``. Negative values
        crop.
    axes : sequence of int, optional
        Axes the pads apply to, in any order. Negative values count from the
        end. Defaults to all axes in natural order.

    Returns
    -------
    tuple of (int, int)
        One ``(lower, upper)`` pair per input axis; ``(0, 0)`` for axes not
        named in ``axes``.

    Raises
    ------
    MalformedPadSpec
        If an axis is out of range, axes repeat, or ``len(pads)`` is not
        ``2 * len(axes)``.

    Examples
    --------
    >>> normalize_pads(2, [1, 2, 1, -1])
    ((1, 1), (2, -1))
    >>> normalize_pads(4, [1, 0, 1, 0], axes=[3, 2])
    ((0, 0), (0, 0), (0, 0), (1, 1))
    """
    resolved_axes = normalize_axes(rank, axes)
    pads = [int(p) for p in pads]

    n_axes = len(resolved_axes)
    if len(pads) != 2 * n_axes:
        raise MalformedPadSpec(
            f"pads length ({len(pads)}) must be twice the number of axes "
            f"({n_axes})"
        )

    table = [(0, 0)] * rank
    for i, axis in enumerate(resolved_axes):
        table[axis] = (pads[i], pads[i + n_axes])

    return tuple(table)


def flatten_pad_pairs(pairs: Sequence[Tuple[int, int]]) -> Tuple[int, ...]:
    """NumPy-style ``((before, after), ...)`` to the flat begins-then-ends layout."""
    lowers = []
    uppers = []
    for pair in pairs:
        if len(pair) != 2:
            raise MalformedPadSpec(
                f"pad pairs must have exactly 2 entries, got {tuple(pair)}"
            )
        lowers.append(int(pair[0]))
        uppers.append(int(pair[1]))
    return tuple(lowers + uppers)
