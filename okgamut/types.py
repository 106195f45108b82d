"""Color value types shared by the conversion stages and the public API."""

from dataclasses import astuple, dataclass

# Ordered 3-tuple passed between stages. Its meaning (linear RGB, OKLab
# (L, a, b) or OKLCH (L, C, H)) depends on which stage produced it.
Triplet = tuple[float, float, float]


@dataclass(frozen=True)
class RGB:
    """Nonlinear (gamma-encoded) sRGB color.

    Channels are nominally in [0, 1]. Values outside that range are
    representable so that out-of-gamut intermediates can be inspected.

    Attributes:
        red: Red channel intensity
        green: Green channel intensity
        blue: Blue channel intensity
    """
    red: float
    green: float
    blue: float

    def as_tuple(self) -> Triplet:
        return astuple(self)

    @classmethod
    def from_tuple(cls, values: Triplet) -> "RGB":
        red, green, blue = values
        return cls(float(red), float(green), float(blue))


@dataclass(frozen=True)
class LCH:
    """OKLCH color.

    Attributes:
        lightness: Perceived lightness, 0 (black) to 1 (white)
        chroma: Colorfulness, >= 0. The displayable maximum depends on
                lightness and hue (roughly 0.37 at most for sRGB).
        hue: Hue angle in degrees. Periodic, never normalized.
    """
    lightness: float
    chroma: float
    hue: float

    def as_tuple(self) -> Triplet:
        return astuple(self)

    @classmethod
    def from_tuple(cls, values: Triplet) -> "LCH":
        lightness, chroma, hue = values
        return cls(float(lightness), float(chroma), float(hue))
