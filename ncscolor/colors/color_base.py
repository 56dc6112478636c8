from __future__ import annotations
from typing import ClassVar, Tuple, Callable
from ..conversions import convert, FormatType, np_convert
from ..types.format_type import format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, Scalar, ColorSpace
from abc import ABC
from numpy import ndarray
import numpy as np


class ColorBase:
    """
    Immutable color value.

    Subclasses describe their channels through ClassVars; the value is a
    tuple for a single color or a read-only array of shape (..., num_channels).
    Channels are clamped to ``[0, maxima]`` on construction.
    """
    __slots__ = ('_value',)

    num_channels: ClassVar[int]
    mode:        ClassVar[ColorSpace]
    maxima:      ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        if isinstance(value, ColorBase):
            value = self._from_color(value)

        if isinstance(value, ndarray):
            value = self._check_array(value)
        else:
            value = self._check_tuple(value)

        self._value = value
        # no writes past this point
        super().__setattr__('_is_frozen', True)

    def _from_color(self, other: ColorBase) -> ColorValue:
        """Value of ``other`` expressed in this class's mode and format."""
        if (other.mode, other.format_type) == (self.mode, self.format_type):
            return other.value
        if isinstance(other.value, ndarray):
            return np_convert(
                other.value,
                other.mode,
                self.mode,
                input_type=other.format_type.value,
                output_type=self.format_type.value,
            )
        return convert(other.value, other.mode, self.mode, other.format_type, self.format_type)

    def _check_array(self, arr: ndarray) -> ndarray:
        valid_types = format_valid_dtypes[self.format_type]
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                f"got {arr.dtype}"
            )
        if arr.shape[-1] != self.num_channels:
            raise ValueError(
                f"{self.mode} expects last dimension to be {self.num_channels}, "
                f"got shape {arr.shape}"
            )
        arr = np.clip(arr, 0, np.array(self.maxima)).astype(default_format_dtypes[self.format_type])
        arr.flags.writeable = False
        return arr

    def _check_tuple(self, value) -> Tuple[Scalar, ...]:
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")
        cast_channel = format_classes[self.format_type]
        return tuple(max(0, min(cast_channel(v), m)) for v, m in zip(value, self.maxima))

    # copy/deepcopy/pickle rebuild through the constructor, never through __setattr__
    def __reduce__(self):
        return (self.__class__, (self._value,))

    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Shape of the array, or None for a single color."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        return self.mode.endswith('a')

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if (self.mode, self.format_type) != (other.mode, other.format_type):
            return False
        if self.is_array or other.is_array:
            return bool(np.array_equal(self.value, other.value))
        return self.value == other.value

    def __hash__(self) -> int:
        if self.is_array:
            raise TypeError(f"unhashable array-valued {self.__class__.__name__}")
        return hash((self.mode, self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """Mixin for RGBA classes; alpha is the last channel."""

    value: ColorValue

    alpha_max: ClassVar[Scalar]

    @property
    def alpha(self) -> Scalar | ndarray:
        """Alpha channel: a scalar for one color, an array for an array of colors."""
        if isinstance(self.value, ndarray):
            return self.value[..., -1]
        return self.value[-1]


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
