from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.to_rgba import ncs_to_rgba16
from ..errors import InvalidColorError
from ..notation import parse_ncs, format_ncs
from ..types.color_types import ColorSpace, NCSTriple, RGBA16
from ..types.format_type import FormatType, HUE_BAND, HUE_CYCLE
from .color_base import ColorBase


def _check_invariants(blackness: int, chromaticness: int, hue: int) -> None:
    value = (blackness, chromaticness, hue)
    for name, v in zip(("blackness", "chromaticness", "hue"), value):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{name} must be an int, got {type(v).__name__}")
    if not 0 <= blackness <= 99:
        raise InvalidColorError(value, "blackness must be in [0, 99]")
    if not 0 <= chromaticness <= min(100 - blackness, 99):
        raise InvalidColorError(value, "chromaticness must be in [0, min(100 - blackness, 99)]")
    if not 0 <= hue < HUE_CYCLE:
        raise InvalidColorError(value, f"hue must be in [0, {HUE_CYCLE - 1}]")
    if chromaticness == 0 and hue != 0:
        raise InvalidColorError(value, "a monochrome color must have hue 0")


class NCSColor(ColorBase):
    """
    A color in the Natural Color System.

    Immutable. Build one with :meth:`parse`; the constructor only accepts
    values that already satisfy::

        0 <= blackness <= 99
        0 <= chromaticness <= min(100 - blackness, 99)
        0 <= hue <= 399, and hue == 0 when chromaticness == 0

    Hue runs 0-99 for Y to R, 100-199 for R to B, 200-299 for B to G and
    300-399 for G to Y.
    """

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "ncs"
    maxima:     ClassVar[Tuple[int, int, int]] = (99, 99, HUE_CYCLE - 1)
    format_type: ClassVar[FormatType] = FormatType.INT

    def __init__(self, blackness: int, chromaticness: int, hue: int = 0) -> None:
        _check_invariants(blackness, chromaticness, hue)
        super().__init__((blackness, chromaticness, hue))

    @classmethod
    def parse(cls, text: str) -> NCSColor:
        """
        Parse an NCS code such as ``"3010-Y10R"``.

        Over-range chromaticness is clamped to ``100 - blackness`` and the hue
        of a color without chromaticness is dropped, so ``"3080-Y10R"``
        becomes ``3070-Y10R`` and ``"3000-Y10R"`` becomes ``3000-N``.

        Raises:
            InvalidFormatError: if ``text`` is not a valid NCS code
        """
        return cls(*parse_ncs(text))

    def __reduce__(self):
        return (self.__class__, self._value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def blackness(self) -> int:
        return self._value[0]

    @property
    def chromaticness(self) -> int:
        return self._value[1]

    @property
    def hue(self) -> int:
        return self._value[2]

    @property
    def is_monochrome(self) -> bool:
        return self.chromaticness == 0

    @property
    def hue_band(self) -> int:
        """Index of the Y->R, R->B, B->G, G->Y band holding the hue."""
        return self.hue // HUE_BAND

    def to_tuple(self) -> NCSTriple:
        return self._value

    def to_text(self) -> str:
        return format_ncs(*self._value)

    def rgba(self) -> RGBA16:
        """(r, g, b, a) with 16-bit channels; alpha is always 0xFFFF."""
        return ncs_to_rgba16(*self._value)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"NCSColor.parse({self.to_text()!r})"


def parse(text: str) -> NCSColor:
    """Parse an NCS code. See :meth:`NCSColor.parse`."""
    return NCSColor.parse(text)


def to_text(color: NCSColor) -> str:
    """Canonical NCS code of ``color``, e.g. ``"3010-Y10R"``."""
    return color.to_text()
