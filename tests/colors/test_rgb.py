import copy
import pickle

import numpy as np
import pytest

from ncscolor.colors.rgb import (
    ColorRGB16INT,
    ColorRGBA16INT,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
)
from ncscolor.colors import get_color_class
from ncscolor.types.format_type import FormatType


def test_values_are_clamped():
    assert ColorRGBINT((300, -5, 128)).value == (255, 0, 128)
    assert ColorUnitRGB((1.5, 0.5, -0.1)).value == (1.0, 0.5, 0.0)
    assert ColorRGB16INT((70000, 0, 1)).value == (0xFFFF, 0, 1)

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGBINT((1, 2, 3, 4))
    with pytest.raises(ValueError):
        ColorRGBAINT((1, 2, 3))

def test_immutable():
    color = ColorRGBINT((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)

def test_copy_and_pickle():
    color = ColorRGBAINT((10, 20, 30, 40))
    for clone in (copy.copy(color), copy.deepcopy(color), pickle.loads(pickle.dumps(color))):
        assert isinstance(clone, ColorRGBAINT)
        assert clone == color
        assert clone.alpha == 40
        with pytest.raises(AttributeError):
            clone._value = (1, 2, 3, 4)

def test_copy_and_pickle_array():
    color = ColorRGBA16INT(np.array([[0xFFFF, 0, 0, 0xFFFF]], dtype=np.uint16))
    for clone in (copy.deepcopy(color), pickle.loads(pickle.dumps(color))):
        assert clone == color
        assert not clone.value.flags.writeable

def test_alpha():
    assert ColorRGBAINT((10, 20, 30, 40)).alpha == 40
    assert ColorUnitRGBA((0.1, 0.2, 0.3, 0.5)).alpha == 0.5

def test_class_conversion():
    rgb = ColorRGBINT((255, 0, 51))
    rgba16 = rgb.convert("rgba", FormatType.INT16)
    assert isinstance(rgba16, ColorRGBA16INT)
    assert rgba16.value == (0xFFFF, 0, 51 * 0x101, 0xFFFF)

    unit = rgba16.convert("rgb", FormatType.FLOAT)
    assert isinstance(unit, ColorUnitRGB)
    assert np.allclose(unit.value, (1.0, 0.0, 0.2))

def test_construct_from_other_format():
    pct = ColorPercentageRGB(ColorRGBINT((255, 0, 0)))
    assert pct.value == (100.0, 0.0, 0.0)

def test_array_values():
    arr = np.array([[0xFFFF, 0, 0, 0xFFFF], [0, 0x101, 0, 0xFFFF]], dtype=np.uint16)
    color = ColorRGBA16INT(arr)
    assert color.is_array
    assert color.shape == (2, 4)
    assert np.array_equal(color.alpha, [0xFFFF, 0xFFFF])

    rgb = color.convert("rgb", FormatType.INT)
    assert isinstance(rgb, ColorRGBINT)
    assert np.array_equal(rgb.value, [[255, 0, 0], [0, 1, 0]])

def test_array_values_are_read_only():
    color = ColorRGB16INT(np.array([[1, 2, 3]], dtype=np.uint16))
    with pytest.raises(ValueError):
        color.value[0, 0] = 5

def test_array_dtype_is_validated():
    with pytest.raises(TypeError):
        ColorRGBINT(np.array([[0.5, 0.5, 0.5]]))

def test_equality():
    assert ColorRGBINT((1, 2, 3)) == ColorRGBINT((1, 2, 3))
    assert ColorRGBINT((1, 2, 3)) != ColorRGB16INT((1, 2, 3))
    assert hash(ColorRGBINT((1, 2, 3))) == hash(ColorRGBINT((1, 2, 3)))

def test_get_color_class():
    assert get_color_class("rgba", FormatType.INT16) is ColorRGBA16INT
    assert get_color_class("rgb", FormatType.FLOAT) is ColorUnitRGB
    with pytest.raises(ValueError):
        get_color_class("ncs", FormatType.INT)
