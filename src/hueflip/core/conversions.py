"""RGB <-> HSL conversions for hueflip.

All values are floats: red, green and blue in [0, 1], hue in degrees
[0, 360), saturation and lightness in [0, 1].
"""

from typing import NamedTuple


class HSL(NamedTuple):
    """Hue (degrees), saturation and lightness."""

    h: float
    s: float
    l: float


class UnitRGB(NamedTuple):
    """Red, green and blue channels normalized to [0, 1]."""

    r: float
    g: float
    b: float


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert normalized RGB to HSL.

    Achromatic colors (all channels equal) get hue 0 and saturation 0.
    When two channels share the maximum, red wins over green and green
    over blue.

    Args:
        r: Red channel in [0, 1].
        g: Green channel in [0, 1].
        b: Blue channel in [0, 1].

    Returns:
        HSL with h in [0, 360), s and l in [0, 1].
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    delta = max_c - min_c

    if delta == 0:
        return HSL(0.0, 0.0, lightness)

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return HSL(hue * 60, saturation, lightness)


def hsl_to_rgb(h: float, s: float, l: float) -> UnitRGB:
    """Convert HSL to normalized RGB.

    Hue is expected in [0, 360). Anything outside that range falls in no
    sector and yields a gray of lightness ``l - c/2``.

    Args:
        h: Hue in degrees.
        s: Saturation in [0, 1].
        l: Lightness in [0, 1].

    Returns:
        UnitRGB with each channel in [0, 1].
    """
    chroma = (1 - abs(2 * l - 1)) * s
    sector = h / 60
    second = chroma * (1 - abs(sector % 2 - 1))

    if 0 <= sector < 1:
        r1, g1, b1 = chroma, second, 0.0
    elif 1 <= sector < 2:
        r1, g1, b1 = second, chroma, 0.0
    elif 2 <= sector < 3:
        r1, g1, b1 = 0.0, chroma, second
    elif 3 <= sector < 4:
        r1, g1, b1 = 0.0, second, chroma
    elif 4 <= sector < 5:
        r1, g1, b1 = second, 0.0, chroma
    elif 5 <= sector < 6:
        r1, g1, b1 = chroma, 0.0, second
    else:
        r1 = g1 = b1 = 0.0

    offset = l - chroma / 2
    return UnitRGB(r1 + offset, g1 + offset, b1 + offset)
