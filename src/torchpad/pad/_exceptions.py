"""Exceptions and warnings for the pad operator."""


class PadWarning(UserWarning):
    """Warning for pad issues (e.g., lossy fill value coercion)."""

    pass


class PadError(ValueError):
    """Base exception for all pad validation errors.

    Every subclass names its error kind in ``kind`` so callers can dispatch
    on it without matching message text.
    """

    kind = "PadError"


class MalformedPadSpec(PadError):
    """Raised when pads, axes or value do not form a valid pad spec."""

    kind = "MalformedPadSpec"


class NegativeOutputDimension(PadError):
    """Raised when cropping makes an output dimension negative."""

    kind = "NegativeOutputDimension"


class IllegalPadOnEmptyDimension(PadError):
    """Raised when edge or reflect mode pads a dimension of size 0."""

    kind = "IllegalPadOnEmptyDimension"
