"""
ncscolor Color Classes
======================

Immutable color classes: the NCS color itself and the RGB classes it
converts to.

Usage
-----
>>> from ncscolor.colors import NCSColor
>>> from ncscolor.types.format_type import FormatType
>>> color = NCSColor.parse("3010-Y10R")
>>> color.blackness, color.chromaticness, color.hue
(30, 10, 10)
>>> str(color)
'3010-Y10R'
>>> color.rgba()
(45489, 43947, 39321, 65535)
>>> color.convert("rgb", FormatType.INT).value
(177, 171, 153)

Color Classes
-------------
    - NCSColor: blackness, chromaticness, hue
    - ColorRGB16INT / ColorRGBA16INT: 16-bit channels (0-65535)
    - ColorRGBINT / ColorRGBAINT: 8-bit channels (0-255)
    - ColorUnitRGB / ColorUnitRGBA: float channels (0.0-1.0)
    - ColorPercentageRGB / ColorPercentageRGBA: percentage channels (0-100)

Notes
-----
- RGB values are clamped to maxima during initialization
- RGB classes accept numpy arrays with last dimension equal to num_channels
- NCSColor rejects values outside its invariants instead of clamping them
"""

from .color_base import ColorBase
from .color import color_convert, unified_tuple_to_class, get_color_class
from .ncs import NCSColor, parse, to_text
from .rgb import (
    ColorRGB16INT,
    ColorRGBA16INT,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)


__all__ = [
    'ColorBase',
    'NCSColor',
    'parse',
    'to_text',
    'color_convert',
    'get_color_class',
    'ColorRGB16INT',
    'ColorRGBA16INT',
    'ColorRGBINT',
    'ColorRGBAINT',
    'ColorUnitRGB',
    'ColorUnitRGBA',
    'ColorPercentageRGB',
    'ColorPercentageRGBA',
]
