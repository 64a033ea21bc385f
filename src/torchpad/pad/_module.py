from numbers import Number
from typing import Optional, Sequence

from torch import Tensor, nn

from torchpad.pad._mode import Mode, PaddingMode
from torchpad.pad._pad import Pads, pad


class Pad(nn.Module):
    r"""Pads the input tensor with fixed pads, mode and fill value.

    Parameters
    ----------
    pads : sequence of int or sequence of (int, int)
        Pad amounts, in any format accepted by :func:`pad`.
    mode : {"constant", "edge", "reflect"}, default "constant"
        Boundary mode.
    value : scalar, optional
        Fill value for ``mode="constant"``. Defaults to zero.
    axes : sequence of int, optional
        Axes the pads apply to. Defaults to all axes.

    Examples
    --------
    >>> m = Pad(((1, 1),), axes=[0], value=9)
    >>> m(torch.tensor([[1., 2., 3.], [4., 5., 6.]]))
    tensor([[9., 9., 9.],
            [1., 2., 3.],
            [4., 5., 6.],
            [9., 9., 9.]])
    >>> m = Pad(((1, 1), (1, 2)), mode="edge")
    >>> m(torch.tensor([[1., 2., 3.], [4., 5., 6.]]))
    tensor([[1., 1., 2., 3., 3., 3.],
            [1., 1., 2., 3., 3., 3.],
            [4., 4., 5., 6., 6., 6.],
            [4., 4., 5., 6., 6., 6.]])
    """

    def __init__(
        self,
        pads: Pads,
        mode: PaddingMode = "constant",
        value: Optional[Number] = None,
        axes: Optional[Sequence[int]] = None,
    ):
        super().__init__()
        self.pads = pads
        self.mode = Mode.parse(mode, "Pad").value
        self.value = value
        self.axes = axes

    def forward(self, input: Tensor) -> Tensor:
        return pad(input, self.pads, self.mode, self.value, self.axes)

    def extra_repr(self) -> str:
        s = f"pads={self.pads}, mode={self.mode!r}"
        if self.value is not None:
            s += f", value={self.value}"
        if self.axes is not None:
            s += f", axes={self.axes}"
        return s
