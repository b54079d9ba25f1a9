"""Tests for ycbcr_to_rgb."""

import torch

from torchchroma.gamut import ycbcr_to_rgb


class TestYcbcrToRgbKnownValues:
    """Tests for known conversions."""

    def test_grey(self):
        """Zero chroma gives R = G = B = Y."""
        r, g, b = ycbcr_to_rgb(100.0, 128.0, 128.0)
        assert r.item() == 100.0
        assert g.item() == 100.0
        assert b.item() == 100.0

    def test_blue_difference(self):
        r, g, b = ycbcr_to_rgb(100.0, 138.0, 128.0)
        assert torch.isclose(r, torch.tensor(100.0, dtype=torch.float64))
        assert torch.isclose(g, torch.tensor(100.0 - 3.441363, dtype=torch.float64))
        assert torch.isclose(b, torch.tensor(117.72, dtype=torch.float64))

    def test_red_difference(self):
        r, g, b = ycbcr_to_rgb(100.0, 128.0, 138.0)
        assert torch.isclose(r, torch.tensor(114.02, dtype=torch.float64))
        assert torch.isclose(g, torch.tensor(100.0 - 7.1413636, dtype=torch.float64))
        assert torch.isclose(b, torch.tensor(100.0, dtype=torch.float64))

    def test_unclamped(self):
        r, _, b = ycbcr_to_rgb(250.0, 255.0, 255.0)
        assert r.item() > 255.0
        assert b.item() > 255.0


class TestYcbcrToRgbDtypes:
    """Tests for argument promotion."""

    def test_python_floats_become_float64(self):
        r, g, b = ycbcr_to_rgb(1.0, 2.0, 3.0)
        assert r.dtype == g.dtype == b.dtype == torch.float64

    def test_float32_preserved(self):
        y = torch.rand(4, dtype=torch.float32) * 255
        r, _, _ = ycbcr_to_rgb(y, torch.full((4,), 128.0), torch.full((4,), 128.0))
        assert r.dtype == torch.float32

    def test_broadcasting(self):
        r, g, b = ycbcr_to_rgb(torch.zeros(3, 1), torch.zeros(1, 4), 128.0)
        assert r.shape == g.shape == b.shape == (3, 4)
