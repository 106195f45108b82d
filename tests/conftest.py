"""Test configuration for okgamut."""

import numpy as np
import pytest

from okgamut import RGB


@pytest.fixture
def primaries() -> dict[str, RGB]:
    """sRGB primaries and secondaries."""
    return {
        'red': RGB(1.0, 0.0, 0.0),
        'green': RGB(0.0, 1.0, 0.0),
        'blue': RGB(0.0, 0.0, 1.0),
        'yellow': RGB(1.0, 1.0, 0.0),
        'magenta': RGB(1.0, 0.0, 1.0),
        'cyan': RGB(0.0, 1.0, 1.0),
    }


@pytest.fixture
def random_rgbs() -> list[RGB]:
    """Reproducible in-gamut colors."""
    rng = np.random.default_rng(7)
    return [RGB.from_tuple(row) for row in rng.random((200, 3))]
