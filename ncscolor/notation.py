"""
NCS notation parsing and formatting.

An NCS code is written ``BBCC-H`` where ``BB`` is blackness, ``CC`` is
chromaticness and ``H`` is the hue: ``N`` for neutral, one of ``Y R B G``,
or an interpolation such as ``Y10R`` (10% of the way from yellow to red).

The conversion is approximate: over-range chromaticness is clamped to
``100 - blackness`` and a color with no chromaticness carries no hue.
"""
import logging
import re

from .errors import InvalidFormatError
from .samples.colors import HUE_LETTERS
from .types.color_types import NCSTriple
from .types.format_type import HUE_BAND

logger = logging.getLogger(__name__)

NCS_PATTERN = re.compile(
    r"(?P<blackness>[0-9]{2})(?P<chromaticness>[0-9]{2})-"
    r"(?P<hue>N|Y|R|B|G|Y[0-9]{2}R|R[0-9]{2}B|B[0-9]{2}G|G[0-9]{2}Y)"
)

HUE_OFFSETS = {letter: i * HUE_BAND for i, letter in enumerate(HUE_LETTERS)}


def _resolve_hue(code: str) -> int:
    """Hue for the part after ``-``. ``code`` already matched NCS_PATTERN."""
    if len(code) == 1:
        return HUE_OFFSETS[code]
    assert len(code) == 4, f"not reached: {code!r}"
    return HUE_OFFSETS[code[0]] + int(code[1:3])


def parse_ncs(text: str) -> NCSTriple:
    """
    Parse an NCS code into a normalized (blackness, chromaticness, hue) triple.

    Args:
        text: NCS code such as ``"3010-Y10R"``; must match the whole string

    Returns:
        Tuple[int, int, int]: normalized (blackness, chromaticness, hue)

    Raises:
        TypeError: if ``text`` is not a string
        InvalidFormatError: if ``text`` is not a valid NCS code
    """
    if not isinstance(text, str):
        raise TypeError(f"NCS code must be a str, got {type(text).__name__}")
    m = NCS_PATTERN.fullmatch(text)
    if m is None:
        raise InvalidFormatError(text)

    b = int(m.group("blackness"))
    c = int(m.group("chromaticness"))
    code = m.group("hue")

    if code == "N":
        c = 0
        h = 0
    else:
        h = _resolve_hue(code)

    if c > 100 - b:
        logger.debug("%s: chromaticness %d clamped to %d", text, c, 100 - b)
        c = 100 - b
    if c == 0 and h != 0:
        logger.debug("%s: hue %d dropped for monochrome color", text, h)
        h = 0
    return b, c, h


def format_hue(chromaticness: int, hue: int) -> str:
    """Hue part of an NCS code: ``N``, a single letter, or e.g. ``B50G``."""
    if chromaticness == 0:
        return "N"
    band, v = divmod(hue, HUE_BAND)
    lead = HUE_LETTERS[band]
    if v == 0:
        return lead
    trail = HUE_LETTERS[(band + 1) % len(HUE_LETTERS)]
    return f"{lead}{v:02d}{trail}"


def format_ncs(blackness: int, chromaticness: int, hue: int) -> str:
    """Canonical NCS code for a normalized triple, e.g. ``"3010-Y10R"``."""
    return f"{blackness:02d}{chromaticness:02d}-{format_hue(chromaticness, hue)}"
