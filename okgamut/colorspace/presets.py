"""Reference chroma limits per lightness.

Chroma at or below these values is documented as displayable at every
hue for the given gamut. Higher chroma leads to non-displayable colors
at some hues, which to_rgb() replaces with less chromatic ones when
correction is on.

The table is documentation for callers picking palette values. Nothing
in the conversion pipeline computes or consults it. Only sRGB is a
supported output gamut; the Display P3 column is kept for comparison.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SafeChroma:
    """Largest chroma documented as safe at one lightness."""
    lightness: float
    chroma: float


SAFE_CHROMA: dict[str, tuple[SafeChroma, ...]] = {
    "srgb": (
        SafeChroma(lightness=0.15, chroma=0.025),
        SafeChroma(lightness=0.25, chroma=0.042),
        SafeChroma(lightness=0.50, chroma=0.085),
        SafeChroma(lightness=0.75, chroma=0.127),
        SafeChroma(lightness=0.90, chroma=0.048),
    ),
    "p3": (
        SafeChroma(lightness=0.15, chroma=0.034),
        SafeChroma(lightness=0.25, chroma=0.056),
        SafeChroma(lightness=0.50, chroma=0.113),
        SafeChroma(lightness=0.75, chroma=0.138),
        SafeChroma(lightness=0.90, chroma=0.052),
    ),
}


def safe_chroma(lightness: float, gamut: str = "srgb") -> float:
    """Look up the documented safe chroma for a tabulated lightness.

    Raises:
        KeyError: If the gamut or lightness is not in the table
    """
    for entry in SAFE_CHROMA[gamut]:
        if entry.lightness == lightness:
            return entry.chroma
    raise KeyError(f"No safe chroma listed for lightness {lightness} in {gamut!r}")
