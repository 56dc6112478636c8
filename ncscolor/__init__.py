"""ncscolor: Natural Color System notation and NCS to RGB conversion."""

import logging

from .colors.ncs import NCSColor, parse, to_text
from .colors.rgb import (
    ColorRGB16INT,
    ColorRGBA16INT,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
from .colors.color_base import ColorBase
from .colors.color import color_convert
from .conversions import (
    ncs_to_rgba16,
    np_ncs_to_rgba16,
    convert,
    np_convert,
    FormatType,
)
from .errors import NCSError, InvalidFormatError, InvalidColorError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # NCS
    "NCSColor",
    "parse",
    "to_text",
    # RGB color classes
    "ColorBase",
    "ColorRGB16INT",
    "ColorRGBA16INT",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "color_convert",
    # conversions
    "ncs_to_rgba16",
    "np_ncs_to_rgba16",
    "convert",
    "np_convert",
    "FormatType",
    # errors
    "NCSError",
    "InvalidFormatError",
    "InvalidColorError",
    "__version__",
]
