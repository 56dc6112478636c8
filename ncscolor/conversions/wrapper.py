import numpy as np
from typing import Literal, cast

from ..types.format_type import FormatType, max_channel, INTEGER_FORMATS
from ..types.color_types import ColorElement, element_to_array, ColorSpace, RGB_SPACES

from .to_rgba import np_ncs_to_rgba16


def normalize(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    return color / max_channel[fmt]

def scale(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    scaled = color * max_channel[fmt]
    return np.round(scaled).astype(int) if fmt in INTEGER_FORMATS else scaled

def _split_source(color: np.ndarray, from_space: str, input_fmt: FormatType) -> tuple[np.ndarray, np.ndarray | None, FormatType]:
    """Return (rgb, alpha or None, format of both) for any supported source space."""
    if from_space == "ncs":
        if color.shape[-1] != 3:
            raise ValueError(f"ncs expects last dimension to be 3, got shape {color.shape}")
        rgba = np_ncs_to_rgba16(color[..., 0], color[..., 1], color[..., 2])
        return rgba[..., :3], rgba[..., 3], FormatType.INT16

    if from_space not in RGB_SPACES:
        raise ValueError(f"Unknown space: {from_space}")

    expected = 4 if from_space == "rgba" else 3
    if color.shape[-1] != expected:
        raise ValueError(f"{from_space} expects last dimension to be {expected}, got shape {color.shape}")
    if from_space == "rgba":
        return color[..., :3], color[..., 3], input_fmt
    return color, None, input_fmt

def _check_target(to_space: str) -> None:
    if to_space.lower() not in RGB_SPACES:
        raise ValueError(f"Cannot convert to {to_space}: only {sorted(RGB_SPACES)} are supported")


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    base, alpha, base_fmt = _split_source(color, from_space, input_fmt)

    # normalize → scale
    out = scale(normalize(base, base_fmt), output_fmt)

    if to_space != "rgba":
        return out

    if alpha is None:
        # Default alpha value when no alpha in input
        alpha_array = np.full(out.shape[:-1] + (1,), max_channel[output_fmt])
        return np.concatenate([out, alpha_array], axis=-1)
    new_alpha = scale(normalize(alpha, base_fmt), output_fmt)
    return np.concatenate([out, new_alpha[..., None]], axis=-1)


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT16,
) -> ColorElement:
    """
    Convert a single color between NCS and the RGB format types.

    Args:
        color: (blackness, chromaticness, hue) for "ncs", channel tuple otherwise
        from_space: "ncs", "rgb" or "rgba"
        to_space: "rgb" or "rgba"
        input_type: format of RGB input channels (ignored for "ncs")
        output_type: format of the output channels

    Returns:
        Tuple of channel values
    """
    _check_target(to_space)
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    color_array = element_to_array(color)
    if from_space.lower() != "ncs":
        color_array = color_array.astype(float)
    result = _convert_core(
        color_array,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
    # Convert back to tuple for scalar output
    return tuple(result.tolist()) if result.ndim == 1 else cast(ColorElement, result)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: Literal["int16", "int", "float", "percentage"] = "int",
    output_type: Literal["int16", "int", "float", "percentage"] = "int16",
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays of shape (..., channels)."""
    _check_target(to_space)
    if from_space.lower() == to_space.lower() and input_type == output_type:
        return color  # No conversion needed
    color = np.asarray(color)
    if from_space.lower() != "ncs":
        color = color.astype(float)
    return _convert_core(
        color,
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
    )
