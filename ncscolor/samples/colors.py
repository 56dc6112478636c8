"""
Reference hue colors of the Natural Color System.

See https://en.wikipedia.org/wiki/Natural_Color_System

Channels are 8-bit values stored as uint16 so that the fixed-point blends
in ``ncscolor.conversions.to_rgba`` never overflow.
"""
import numpy as np


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.uint16)
    arr.flags.writeable = False
    return arr

# YELLOW
YELLOW_INT_RGB = (0xFF, 0xD3, 0x00)
YELLOW_NP_RGB = _frozen(YELLOW_INT_RGB)

# RED
RED_INT_RGB = (0xC4, 0x02, 0x33)
RED_NP_RGB = _frozen(RED_INT_RGB)

# BLUE
BLUE_INT_RGB = (0x00, 0x87, 0xBD)
BLUE_NP_RGB = _frozen(BLUE_INT_RGB)

# GREEN
GREEN_INT_RGB = (0x00, 0x9F, 0x6B)
GREEN_NP_RGB = _frozen(GREEN_INT_RGB)

# Hue bands in cycle order: band i runs from HUE_STOPS[i] to HUE_STOPS[i + 1].
HUE_STOPS = (YELLOW_INT_RGB, RED_INT_RGB, BLUE_INT_RGB, GREEN_INT_RGB, YELLOW_INT_RGB)

# Same stops as a (5, 3) array, indexed by band for vectorized lookups.
NP_HUE_STOPS = _frozen(HUE_STOPS)

HUE_LETTERS = ("Y", "R", "B", "G")
