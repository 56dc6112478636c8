from typing import Tuple


class NCSError(ValueError):
    """Base class for errors raised by ncscolor."""


class InvalidFormatError(NCSError):
    """Raised when a string is not a valid NCS notation such as ``"3010-Y10R"``."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"ncs: invalid format: {text}")


class InvalidColorError(NCSError):
    """Raised when (blackness, chromaticness, hue) break the NCSColor invariants."""

    def __init__(self, value: Tuple[int, int, int], reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"ncs: invalid color {value!r}: {reason}")
