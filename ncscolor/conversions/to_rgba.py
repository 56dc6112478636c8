import numpy as np
from numpy import ndarray as NDArray

from ..samples.colors import HUE_STOPS, NP_HUE_STOPS
from ..types.color_types import RGBA16
from ..types.format_type import HUE_BAND, HUE_CYCLE

OPAQUE = 0xFFFF
# 8-bit -> 16-bit channel expansion (0xAB -> 0xABAB)
EXPAND_8_TO_16 = 0x101


def _hue_band(hue: int) -> tuple[tuple[int, int, int], tuple[int, int, int], int]:
    """Return the two reference colors enclosing ``hue`` and its offset in the band."""
    assert 0 <= hue < HUE_CYCLE, f"hue out of range: {hue}"
    band, v = divmod(hue, HUE_BAND)
    return HUE_STOPS[band], HUE_STOPS[band + 1], v


def ncs_to_rgba16(blackness: int, chromaticness: int, hue: int) -> RGBA16:
    """
    Convert an NCS color to 16-bit RGBA.

    The blend is done in 8-bit fixed point with truncating division at every
    step, then each channel is expanded to 16 bits. Alpha is always opaque.

    Args:
        blackness: 0 to 99
        chromaticness: 0 to min(100 - blackness, 99)
        hue: 0 to 399, 0 when chromaticness is 0

    Returns:
        Tuple[int, int, int, int]: (r, g, b, a) in [0, 0xFFFF]
    """
    if chromaticness == 0:
        gray = (100 - blackness) * 0xFFFF // 100
        return gray, gray, gray, OPAQUE

    c0, c1, v = _hue_band(hue)
    ch = chromaticness

    # pure hue at full chromaticness
    c2 = tuple((a * (100 - v) + b * v) // 100 for a, b in zip(c0, c1))
    # zero blackness
    cw = tuple((0xFF * (100 - ch) + c * ch) // 100 for c in c2)
    # maximum blackness for this chromaticness
    cb = tuple(c * ch // 100 for c in c2)

    blmax = 100 - ch
    if blmax == 0:
        r, g, b = cw
        return r * EXPAND_8_TO_16, g * EXPAND_8_TO_16, b * EXPAND_8_TO_16, OPAQUE
    if blackness > blmax:
        return 0, 0, 0, OPAQUE

    r, g, b = (
        (w * (blmax - blackness) + k * blackness) // blmax
        for w, k in zip(cw, cb)
    )
    return r * EXPAND_8_TO_16, g * EXPAND_8_TO_16, b * EXPAND_8_TO_16, OPAQUE


def np_ncs_to_rgba16(blackness: NDArray, chromaticness: NDArray, hue: NDArray) -> NDArray:
    """
    Vectorized: Convert NCS colors to 16-bit RGBA.

    Element-wise identical to :func:`ncs_to_rgba16`.

    Args:
        blackness: integer array-like, 0 to 99
        chromaticness: integer array-like, 0 to 99
        hue: integer array-like, 0 to 399

    Returns:
        rgba: uint16 array of shape (..., 4)
    """
    arrays = [np.asarray(x) for x in (blackness, chromaticness, hue)]
    for name, arr in zip(("blackness", "chromaticness", "hue"), arrays):
        if not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"{name} must be an integer array, got {arr.dtype}")

    out_shape = np.broadcast(*arrays).shape
    bl, ch, h = (np.broadcast_to(a, out_shape).astype(np.int64) for a in arrays)

    if np.any((bl < 0) | (bl > 99)):
        raise ValueError("blackness must be in [0, 99]")
    if np.any((ch < 0) | (ch > 99)):
        raise ValueError("chromaticness must be in [0, 99]")
    if np.any((h < 0) | (h >= HUE_CYCLE)):
        raise ValueError(f"hue must be in [0, {HUE_CYCLE - 1}]")

    band, v = np.divmod(h, HUE_BAND)
    stops = NP_HUE_STOPS.astype(np.int64)
    c0 = stops[band]
    c1 = stops[band + 1]

    # broadcast per-color scalars against the channel axis
    v = v[..., None]
    ch3 = ch[..., None]
    bl3 = bl[..., None]

    c2 = (c0 * (100 - v) + c1 * v) // 100
    cw = (0xFF * (100 - ch3) + c2 * ch3) // 100
    cb = c2 * ch3 // 100

    blmax = 100 - ch3
    safe_blmax = np.where(blmax == 0, 1, blmax)
    c4 = (cw * (blmax - bl3) + cb * bl3) // safe_blmax
    c4 = np.where(blmax == 0, cw, c4)
    c4 = np.where(bl3 > blmax, 0, c4)
    rgb = c4 * EXPAND_8_TO_16

    gray = (100 - bl) * 0xFFFF // 100
    rgb = np.where(ch3 == 0, gray[..., None], rgb)

    alpha = np.full(out_shape + (1,), OPAQUE, dtype=np.int64)
    return np.concatenate([rgb, alpha], axis=-1).astype(np.uint16)
