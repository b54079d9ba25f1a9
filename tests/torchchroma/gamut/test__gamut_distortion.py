"""Tests for gamut_distortion."""

import hypothesis
import pytest
import torch

from torchchroma.gamut import gamut_distortion, ycbcr_to_rgb
from torchchroma.testing.strategies import chroma_values, legal_ycbcr, luma_values


class TestGamutDistortion:
    """Tests for the out-of-gamut measure."""

    def test_grey_is_zero(self):
        assert gamut_distortion(100.0, 128.0, 128.0).item() == 0.0

    def test_single_channel_excursion(self):
        """Only blue overshoots: the distortion is the overshoot."""
        b = ycbcr_to_rgb(200.0, 200.0, 128.0)[2].item()
        assert b > 255.0
        r, g, _ = ycbcr_to_rgb(200.0, 200.0, 128.0)
        assert 0.0 <= r.item() <= 255.0
        assert 0.0 <= g.item() <= 255.0
        assert gamut_distortion(200.0, 200.0, 128.0).item() == pytest.approx(b - 255.0)

    def test_sums_channels(self):
        r, g, b = ycbcr_to_rgb(10.0, 0.0, 0.0)
        expected = sum(max(-c.item(), 0.0) + max(c.item() - 255.0, 0.0) for c in (r, g, b))
        assert gamut_distortion(10.0, 0.0, 0.0).item() == pytest.approx(expected)

    def test_batched(self):
        d = gamut_distortion(torch.tensor([100.0, 200.0]), torch.tensor([128.0, 200.0]), 128.0)
        assert d.shape == (2,)
        assert d[0].item() == 0.0
        assert d[1].item() > 0.0

    @hypothesis.settings(deadline=None)
    @hypothesis.given(sample=legal_ycbcr())
    def test_zero_inside_gamut(self, sample):
        assert gamut_distortion(*sample).item() == 0.0

    @hypothesis.settings(deadline=None)
    @hypothesis.given(y=luma_values(), cb=chroma_values(), cr=chroma_values())
    def test_non_negative(self, y, cb, cr):
        assert gamut_distortion(y, cb, cr).item() >= 0.0
