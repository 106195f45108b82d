"""Gamut checking and chroma search for out-of-gamut OKLCH values.

Not all (L, C, H) combinations produce valid sRGB. High chroma at
extreme lightness is particularly problematic. Correction reduces
chroma at fixed lightness and hue until the color becomes displayable,
which preserves the lightness and hue intent of the original color.
"""

import logging

from . import _backend as B
from ._backend import Array
from .oklch import oklch_to_srgb
from okgamut.defaults import GAMUT_TOLERANCE, MAX_SEARCH_ITERATIONS, SEARCH_TOLERANCE
from okgamut.types import Triplet

logger = logging.getLogger(__name__)


# === Gamut checking ===

def is_rgb_in_gamut(rgb: Array, tolerance: float = GAMUT_TOLERANCE) -> Array:
    """Check that every channel along the last axis lies in [0, 1]."""
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return B.all_along_axis(in_range, axis=-1)


def is_in_gamut(L: Array, C: Array, H: Array, tolerance: float = GAMUT_TOLERANCE) -> Array:
    """Check if OKLCH values produce valid sRGB (all channels in [0,1])."""
    return is_rgb_in_gamut(oklch_to_srgb(L, C, H), tolerance)


# === Chroma search ===

def find_in_gamut(
    lightness: float,
    chroma: float,
    hue: float,
    correct_if_needed: bool = False,
) -> Triplet | None:
    """Convert one OKLCH color to sRGB, reducing chroma if it is out of gamut.

    The first candidate is the literal color. If it is displayable it is
    returned unchanged. Otherwise, without correction, the result is None.
    With correction, chroma is bisected: each out-of-gamut candidate moves
    chroma down by the current step, each in-gamut candidate moves it back
    up, and the step halves every iteration. The search accepts the first
    in-gamut candidate seen once the step has shrunk to SEARCH_TOLERANCE,
    so the result sits at most two final steps (about 0.01 chroma) inside
    the gamut boundary. With correction the result is clipped to [0, 1],
    which only moves channels that sat within GAMUT_TOLERANCE of the edges.

    Args:
        lightness: OKLCH lightness, assumed already validated
        chroma: OKLCH chroma, assumed already validated
        hue: Hue in degrees
        correct_if_needed: Search for a displayable chroma instead of
            returning None for out-of-gamut input

    Returns:
        (red, green, blue) sRGB triplet, or None when the color is out of
        gamut and correction was not requested
    """
    needs_correction = False
    step = chroma / 2
    rgb = None

    for iteration in range(MAX_SEARCH_ITERATIONS):
        rgb = oklch_to_srgb(lightness, chroma, hue)
        in_gamut = bool(is_rgb_in_gamut(rgb))

        if in_gamut and not needs_correction:
            return _as_triplet(B.clip(rgb, 0.0, 1.0) if correct_if_needed else rgb)
        if in_gamut and step <= SEARCH_TOLERANCE:
            logger.debug(
                "Gamut search converged after %d iterations at chroma %.4f (L=%.4f, H=%.2f)",
                iteration, chroma, lightness, hue,
            )
            # corrected output lands inside [0, 1], not just within the slack
            return _as_triplet(B.clip(rgb, 0.0, 1.0))
        if in_gamut:
            chroma += step
        elif correct_if_needed:
            chroma -= step
        else:
            return None

        needs_correction = True
        step /= 2

    logger.warning(
        "Gamut search hit %d iterations without converging (L=%.4f, C=%.4g, H=%.2f); clipping",
        MAX_SEARCH_ITERATIONS, lightness, chroma, hue,
    )
    return _as_triplet(B.clip(rgb, 0.0, 1.0))


def _as_triplet(rgb: Array) -> Triplet:
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


# === Max chroma computation ===

def max_chroma_for_lh(L: Array, H: Array, steps: int = 16) -> Array:
    """Find maximum valid chroma for given L and H via binary search.

    Vectorized over arrays; useful for analysing the gamut boundary. The
    per-color search behind to_rgb is find_in_gamut().
    """
    lo = B.zeros_like(L)
    hi = B.full_like(L, 0.5)  # 0.5 is always out of gamut

    for _ in range(steps):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid, H)
        lo = B.where(valid, mid, lo)
        hi = B.where(~valid, mid, hi)

    return lo
