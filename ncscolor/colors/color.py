from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from ..types.format_type import FormatType
from ..conversions import convert, np_convert
from ..types.color_types import ColorSpace
from numpy import ndarray

unified_tuple_to_class: dict[tuple[str, FormatType], type[ColorBase]] = {**rgb_tuple_to_class}

def color_convert(self: ColorBase, to_space: ColorSpace = "rgba", to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to an RGB color class.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space ("rgb" or "rgba")
        to_format: Target format type (INT16, INT, FLOAT, PERCENTAGE).
            Defaults to INT16 for NCS colors and to the current format otherwise.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = to_space.lower()  # type: ignore
    from_format = self.format_type
    if to_format is None:
        to_format = FormatType.INT16 if self.mode == "ncs" else from_format

    cls = get_color_class(to_space, to_format)

    if isinstance(self.value, ndarray):
        result = np_convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=from_format.value,
            output_type=FormatType(to_format).value,
        )
    else:
        result = convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=from_format,
            output_type=to_format,
        )
    return cls(result)

ColorBase.convert = color_convert


def get_color_class(color_space: str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space, FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class
