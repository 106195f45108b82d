"""Public conversions between sRGB and OKLCH.

Example:
    from okgamut import LCH, RGB, ConversionOptions, from_rgb, to_rgb

    lch = from_rgb(RGB(1.0, 0.0, 0.0))   # LCH(lightness≈0.628, chroma≈0.258, hue≈29.2)

    to_rgb(LCH(0.5, 0.5, 0.0))           # None, too vivid for sRGB
    to_rgb(LCH(0.5, 0.5, 0.0), ConversionOptions(gamut_correct_if_needed=True))
"""

from dataclasses import dataclass
import math

import numpy as np

from okgamut import defaults
from okgamut.colorspace import find_in_gamut, srgb_to_oklch
from okgamut.errors import InvalidColorError
from okgamut.types import LCH, RGB


@dataclass(frozen=True)
class ConversionOptions:
    """Options for to_rgb().

    Attributes:
        gamut_correct_if_needed: Reduce chroma until the color is
            displayable instead of returning None for out-of-gamut colors
    """
    gamut_correct_if_needed: bool = False


def from_rgb(rgb: RGB) -> LCH:
    """Convert a gamma-encoded sRGB color to OKLCH.

    Total for finite input. Channels outside [0, 1] are accepted and map
    to correspondingly out-of-range OKLCH values. Hue comes back in
    (-180, 180] degrees.
    """
    L, C, H = srgb_to_oklch(np.array(rgb.as_tuple(), dtype=np.float64))
    return LCH.from_tuple((L, C, H))


def to_rgb(lch: LCH, options: ConversionOptions | None = None) -> RGB | None:
    """Convert an OKLCH color to gamma-encoded sRGB.

    Args:
        lch: Color to convert. Hue is used as given, in any range.
        options: Conversion options; defaults to no gamut correction

    Returns:
        The sRGB color. Without correction, None if the color cannot be
        displayed. With correction, always a color with chroma reduced to
        just inside the gamut boundary.

    Raises:
        InvalidColorError: If lightness is outside [0, 1] or chroma is
            negative or not finite, or hue is not finite
    """
    if options is None:
        options = ConversionOptions()
    _validate(lch)

    rgb = find_in_gamut(lch.lightness, lch.chroma, lch.hue, options.gamut_correct_if_needed)
    if rgb is None:
        return None
    return RGB.from_tuple(rgb)


def to_rgb_corrected(lch: LCH) -> RGB:
    """to_rgb() with gamut correction enabled, so a color is always returned."""
    return to_rgb(lch, ConversionOptions(gamut_correct_if_needed=True))


def _validate(lch: LCH) -> None:
    # Written so that NaN fails both checks
    if not (defaults.MIN_LIGHTNESS <= lch.lightness <= defaults.MAX_LIGHTNESS):
        raise InvalidColorError(
            f"Lightness must be at least {defaults.MIN_LIGHTNESS} and at most {defaults.MAX_LIGHTNESS}",
            "lightness", lch.lightness,
        )
    if not (lch.chroma >= defaults.MIN_CHROMA and math.isfinite(lch.chroma)):
        raise InvalidColorError(
            f"Chroma must be finite and at least {defaults.MIN_CHROMA}",
            "chroma", lch.chroma,
        )
    if not math.isfinite(lch.hue):
        raise InvalidColorError("Hue must be finite", "hue", lch.hue)
