"""torchpad: N-dimensional pad operator for PyTorch."""

from . import pad

__all__ = [
    "pad",
]

__version__ = "0.1.0"
