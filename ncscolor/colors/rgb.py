from typing import ClassVar, Tuple
from ..types.format_type import FormatType, max_channel
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha, build_registry


class _RGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"


class _RGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"


class ColorRGB16INT(_RGB):
    format_type: ClassVar[FormatType] = FormatType.INT16
    maxima: ClassVar[Tuple[int, ...]] = (max_channel[FormatType.INT16],) * 3


class ColorRGBA16INT(_RGBA):
    format_type: ClassVar[FormatType] = FormatType.INT16
    maxima: ClassVar[Tuple[int, ...]] = (max_channel[FormatType.INT16],) * 4
    alpha_max: ClassVar[int] = max_channel[FormatType.INT16]


class ColorRGBINT(_RGB):
    format_type: ClassVar[FormatType] = FormatType.INT
    maxima: ClassVar[Tuple[int, ...]] = (max_channel[FormatType.INT],) * 3


class ColorRGBAINT(_RGBA):
    format_type: ClassVar[FormatType] = FormatType.INT
    maxima: ClassVar[Tuple[int, ...]] = (max_channel[FormatType.INT],) * 4
    alpha_max: ClassVar[int] = max_channel[FormatType.INT]


class ColorUnitRGB(_RGB):
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    maxima: ClassVar[Tuple[float, ...]] = (max_channel[FormatType.FLOAT],) * 3


class ColorUnitRGBA(_RGBA):
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    maxima: ClassVar[Tuple[float, ...]] = (max_channel[FormatType.FLOAT],) * 4
    alpha_max: ClassVar[float] = max_channel[FormatType.FLOAT]


class ColorPercentageRGB(_RGB):
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    maxima: ClassVar[Tuple[float, ...]] = (max_channel[FormatType.PERCENTAGE],) * 3


class ColorPercentageRGBA(_RGBA):
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE
    maxima: ClassVar[Tuple[float, ...]] = (max_channel[FormatType.PERCENTAGE],) * 4
    alpha_max: ClassVar[float] = max_channel[FormatType.PERCENTAGE]


rgb_tuple_to_class = build_registry(
    ColorRGB16INT,
    ColorRGBA16INT,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
