import enum
from typing import Literal, Union

PaddingMode = Literal["constant", "edge", "reflect"]


class Mode(str, enum.Enum):
    """Boundary mode of the pad operator.

    Only ``CONSTANT`` uses a fill value; ``EDGE`` and ``REFLECT`` synthesize
    padding from the input itself.
    """

    CONSTANT = "constant"
    EDGE = "edge"
    REFLECT = "reflect"

    @classmethod
    def parse(cls, mode: Union[str, "Mode"], caller: str = "pad") -> "Mode":
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            raise ValueError(
                f"{caller}: mode must be one of {[m.value for m in cls]}, "
                f"got '{mode}'"
            ) from None
