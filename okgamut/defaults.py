"""Central place for okgamut constants."""

# sRGB transfer function (IEC 61966-2-1)
SRGB_ENCODE_THRESHOLD: float = 0.0031308  # linear-side breakpoint
SRGB_DECODE_THRESHOLD: float = 0.04045    # encoded-side breakpoint
SRGB_LINEAR_SLOPE: float = 12.92
SRGB_GAMMA: float = 2.4
SRGB_OFFSET: float = 0.055

# Gamut search
SEARCH_TOLERANCE: float = 0.0051  # accept once the chroma step is this small
MAX_SEARCH_ITERATIONS: int = 1100  # > log2(float max / SEARCH_TOLERANCE)
GAMUT_TOLERANCE: float = 1e-5  # slack on [0, 1] for matrix rounding

# Valid OKLCH input ranges
MIN_LIGHTNESS: float = 0.0
MAX_LIGHTNESS: float = 1.0
MIN_CHROMA: float = 0.0
