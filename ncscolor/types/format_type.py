from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT16 = "int16"
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_channel = {
    FormatType.INT16: 0xFFFF,
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

format_classes = {
    FormatType.INT16: int,
    FormatType.INT: int,
    FormatType.FLOAT: float,
    FormatType.PERCENTAGE: float,
}

default_format_dtypes = {
    FormatType.INT16: np.uint16,
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
    FormatType.PERCENTAGE: np.float32,
}

format_valid_dtypes = {
    FormatType.INT16: (int, np.integer),
    FormatType.INT: (int, np.integer),
    FormatType.FLOAT: (float, np.floating),
    FormatType.PERCENTAGE: (float, np.floating),
}

INTEGER_FORMATS = {FormatType.INT16, FormatType.INT}

# Width of one hue band; four bands make the full Y->R->B->G->Y cycle.
HUE_BAND = 100
HUE_CYCLE = 4 * HUE_BAND
