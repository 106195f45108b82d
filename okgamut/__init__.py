"""Conversions between sRGB and OKLCH with chroma-reducing gamut mapping."""

from .types import LCH, RGB, Triplet
from .errors import ColorError, InvalidColorError
from .convert import ConversionOptions, from_rgb, to_rgb, to_rgb_corrected

__all__ = [
    'LCH',
    'RGB',
    'Triplet',
    'ColorError',
    'InvalidColorError',
    'ConversionOptions',
    'from_rgb',
    'to_rgb',
    'to_rgb_corrected',
]
