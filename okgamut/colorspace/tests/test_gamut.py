"""Tests for gamut checking and the chroma search."""

import logging

import numpy as np
import pytest

from okgamut import defaults
from okgamut.colorspace import (
    SAFE_CHROMA,
    find_in_gamut,
    is_in_gamut,
    is_rgb_in_gamut,
    max_chroma_for_lh,
    oklch_to_srgb,
    safe_chroma,
    srgb_to_oklch,
)
from okgamut.colorspace import gamut


class TestGamutCheck:
    """Test gamut checking."""

    def test_in_gamut_grays(self):
        """Neutral grays should always be in gamut."""
        L = np.linspace(0, 1, 11)
        assert is_in_gamut(L, np.zeros(11), np.zeros(11)).all()

    def test_out_of_gamut_high_chroma(self):
        """Very high chroma should be out of gamut."""
        assert not is_in_gamut(np.array([0.5]), np.array([0.5]), np.array([0.0])).any()

    def test_rgb_bounds(self):
        rgb = np.array([
            [0.0, 0.5, 1.0],
            [-0.01, 0.5, 0.5],
            [0.5, 0.5, 1.01],
            [-1e-7, 1 + 1e-7, 0.5],  # within rounding slack
        ])
        assert is_rgb_in_gamut(rgb).tolist() == [True, False, False, True]
        assert is_rgb_in_gamut(rgb, tolerance=0.0).tolist() == [True, False, False, False]


class TestFindInGamut:
    """Test the per-color chroma search."""

    def test_in_gamut_returned_unchanged(self):
        """A displayable color comes back exactly as converted, with or without correction."""
        expected = tuple(oklch_to_srgb(0.7, 0.05, 120.0))
        assert find_in_gamut(0.7, 0.05, 120.0) == pytest.approx(expected, abs=0)
        assert find_in_gamut(0.7, 0.05, 120.0, correct_if_needed=True) == pytest.approx(expected, abs=0)

    def test_out_of_gamut_without_correction(self):
        assert find_in_gamut(0.5, 0.5, 0.0) is None

    def test_correction_is_displayable(self):
        rgb = find_in_gamut(0.5, 0.5, 0.0, correct_if_needed=True)
        assert rgb is not None
        assert all(0.0 <= v <= 1.0 for v in rgb)

    @pytest.mark.parametrize("L,C,H", [
        (0.5, 0.5, 0.0),
        (0.7, 0.4, 30.0),
        (0.9, 0.3, 240.0),
        (0.2, 0.3, 140.0),
        (0.6, 1.5, -75.0),
    ])
    def test_converges_near_boundary(self, L, C, H):
        """Result chroma lands within two search steps below the gamut boundary."""
        boundary = float(max_chroma_for_lh(np.array([L]), np.array([H]), steps=30)[0])

        rgb = find_in_gamut(L, C, H, correct_if_needed=True)
        L2, C2, _ = srgb_to_oklch(np.array(rgb))

        assert float(L2) == pytest.approx(L, abs=1e-6)
        assert float(C2) <= boundary + 1e-6
        assert float(C2) >= boundary - 2 * defaults.SEARCH_TOLERANCE

    def test_corrected_channels_within_unit_range(self):
        """Corrected output stays inside [0, 1] across random colors, edge slack included."""
        rng = np.random.default_rng(11)
        samples = np.column_stack([
            rng.random(2000),
            rng.random(2000) * 0.5,
            rng.random(2000) * 360.0,
        ])
        for L, C, H in samples:
            rgb = find_in_gamut(L, C, H, correct_if_needed=True)
            assert all(0.0 <= v <= 1.0 for v in rgb), (L, C, H, rgb)

    def test_dark_cyan_near_edge(self):
        """A candidate accepted within the rounding slack is clipped to zero."""
        rgb = find_in_gamut(0.21677, 0.19325, 195.025, correct_if_needed=True)
        assert min(rgb) >= 0.0
        assert max(rgb) <= 1.0

    def test_literal_within_slack_kept_without_correction(self):
        """Without correction the literal candidate is returned unclipped."""
        L, C, H = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        rgb = find_in_gamut(float(L), float(C), float(H))
        assert rgb == tuple(float(v) for v in oklch_to_srgb(float(L), float(C), float(H)))

    def test_preserves_hue(self):
        rgb = find_in_gamut(0.7, 0.4, 30.0, correct_if_needed=True)
        _, _, H = srgb_to_oklch(np.array(rgb))
        assert float(H) == pytest.approx(30.0, abs=1e-4)

    def test_zero_chroma(self):
        """Gray needs no search."""
        rgb = find_in_gamut(0.5, 0.0, 0.0, correct_if_needed=True)
        assert rgb[0] == pytest.approx(rgb[1])
        assert rgb[1] == pytest.approx(rgb[2])

    def test_logs_convergence(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="okgamut.colorspace.gamut"):
            find_in_gamut(0.5, 0.5, 0.0, correct_if_needed=True)
        assert "converged" in caplog.text

    def test_iteration_cap_clips(self, monkeypatch, caplog):
        """When the cap trips, the last candidate is clipped into gamut."""
        monkeypatch.setattr(gamut, "MAX_SEARCH_ITERATIONS", 1)

        with caplog.at_level(logging.WARNING, logger="okgamut.colorspace.gamut"):
            rgb = find_in_gamut(0.5, 0.5, 0.0, correct_if_needed=True)

        assert all(0.0 <= v <= 1.0 for v in rgb)
        assert "without converging" in caplog.text

    def test_iteration_count_bounded(self, monkeypatch):
        """Search depth is set by halving the step, well under the cap."""
        calls = []
        original = gamut.oklch_to_srgb

        def counting(L, C, H):
            calls.append(C)
            return original(L, C, H)

        monkeypatch.setattr(gamut, "oklch_to_srgb", counting)
        find_in_gamut(0.6, 1.5, 0.0, correct_if_needed=True)

        # step must halve from 0.75 down to SEARCH_TOLERANCE before accepting
        assert 9 <= len(calls) < defaults.MAX_SEARCH_ITERATIONS
        # first probe is the literal chroma, second halves it
        assert calls[:2] == [1.5, 0.75]


class TestMonotoneAcceptance:
    """Lower chroma at fixed L and H stays in gamut once higher chroma is."""

    @pytest.mark.parametrize("H", [0.0, 60.0, 120.0, 180.0, 240.0, 300.0])
    def test_monotone_at_mid_lightness(self, H):
        C = np.linspace(0.0, 0.3, 301)
        inside = is_in_gamut(np.full_like(C, 0.5), C, np.full_like(C, H))
        # once out, never back in
        assert not np.any(np.diff(inside.astype(int)) > 0)

    def test_documented_safe_chroma_near_boundary(self):
        """The narrowest sRGB boundary at L=0.5 is close to the documented 0.085."""
        H = np.arange(0, 360, 2.0)
        boundary = max_chroma_for_lh(np.full_like(H, 0.5), H, steps=24)
        assert abs(boundary.min() - safe_chroma(0.5)) < 0.01

        below = boundary.min() * 0.98
        assert is_in_gamut(np.full_like(H, 0.5), np.full_like(H, below), H).all()


class TestMaxChroma:
    """Test max chroma computation."""

    def test_max_chroma_black_white(self):
        """At L=0 and L=1, max chroma should be very small."""
        max_c = max_chroma_for_lh(np.array([0.0, 1.0]), np.array([0.0, 180.0]))
        assert max_c[0] < 0.05
        assert max_c[1] < 0.01

    def test_max_chroma_mid_lightness(self):
        max_c = max_chroma_for_lh(np.array([0.6]), np.array([180.0]))
        assert max_c[0] > 0.1

    def test_torch_matches_numpy(self):
        torch = pytest.importorskip('torch')
        L = np.array([0.3, 0.5, 0.7])
        H = np.array([0.0, 120.0, 240.0])
        c_np = max_chroma_for_lh(L, H)
        c_t = max_chroma_for_lh(torch.tensor(L), torch.tensor(H))
        np.testing.assert_allclose(c_t.numpy(), c_np, atol=1e-9)


class TestSafeChroma:
    """Reference table lookups."""

    def test_lookup(self):
        assert safe_chroma(0.5) == 0.085
        assert safe_chroma(0.75, gamut="p3") == 0.138

    def test_p3_exceeds_srgb(self):
        for srgb, p3 in zip(SAFE_CHROMA["srgb"], SAFE_CHROMA["p3"]):
            assert srgb.lightness == p3.lightness
            assert p3.chroma > srgb.chroma

    def test_unknown_entries(self):
        with pytest.raises(KeyError):
            safe_chroma(0.5, gamut="rec2020")
        with pytest.raises(KeyError, match="lightness 0.4"):
            safe_chroma(0.4)
