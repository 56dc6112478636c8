from .colors import (
    YELLOW_INT_RGB,
    RED_INT_RGB,
    BLUE_INT_RGB,
    GREEN_INT_RGB,
    YELLOW_NP_RGB,
    RED_NP_RGB,
    BLUE_NP_RGB,
    GREEN_NP_RGB,
    HUE_STOPS,
    NP_HUE_STOPS,
    HUE_LETTERS,
)
