"""OKLCH color space conversions and gamut mapping.

This module provides:
- sRGB <-> linear RGB <-> OKLab <-> OKLCH stage conversions
- Gamut checking and chroma-reduction search
- Reference safe-chroma table
- Backend-agnostic: works with floats, numpy arrays or torch tensors

Example:
    import numpy as np
    from okgamut.colorspace import srgb_to_oklch, is_in_gamut

    L, C, H = srgb_to_oklch(np.array([[1.0, 0.0, 0.0]]))
    is_in_gamut(L, C * 1.2, H)  # -> array([False])
"""

from .oklch import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklch_to_srgb,
    srgb_to_oklch,
    oklch_to_linear_rgb,
)

from .gamut import (
    is_in_gamut,
    is_rgb_in_gamut,
    find_in_gamut,
    max_chroma_for_lh,
)

from .presets import SAFE_CHROMA, SafeChroma, safe_chroma

__all__ = [
    # OKLCH conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklch_to_srgb',
    'srgb_to_oklch',
    'oklch_to_linear_rgb',
    # Gamut mapping
    'is_in_gamut',
    'is_rgb_in_gamut',
    'find_in_gamut',
    'max_chroma_for_lh',
    # Reference data
    'SAFE_CHROMA',
    'SafeChroma',
    'safe_chroma',
]
