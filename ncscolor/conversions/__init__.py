"""
ncscolor Color Conversions
==========================

NCS → RGB conversion with scalar and vectorized (numpy) implementations.

Conversion Functions
-------------------

NCS → RGBA (16-bit):
    ncs_to_rgba16(blackness, chromaticness, hue)
        Scalar conversion, returns (r, g, b, a) in [0, 0xFFFF]
    np_ncs_to_rgba16(blackness, chromaticness, hue)
        Vectorized conversion, returns a uint16 array of shape (..., 4)

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
        Converter with format handling ("ncs" → "rgb"/"rgba", and between RGB formats)
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized converter for arrays of shape (..., channels)

Examples
--------
>>> from ncscolor.conversions import ncs_to_rgba16, convert, FormatType
>>> ncs_to_rgba16(0, 0, 0)
(65535, 65535, 65535, 65535)
>>> convert((0, 0, 0), "ncs", "rgb", output_type=FormatType.INT)
(255, 255, 255)
"""

from .to_rgba import ncs_to_rgba16, np_ncs_to_rgba16

from .wrapper import convert, np_convert

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'ncs_to_rgba16',
    'np_ncs_to_rgba16',
    'convert',
    'np_convert',
    'ColorSpace',
    'FormatType',
]
