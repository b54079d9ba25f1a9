"""Tests for adaptive_supersample and supersample_weights."""

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchchroma.interpolation import adaptive_supersample, supersample_weights
from torchchroma.testing.strategies import chroma_values, luma_values


class TestSupersampleWeights:
    """Tests for the gradient weights."""

    def test_flat_luma(self):
        k12, k32, k13 = supersample_weights(*[80.0] * 6)
        assert (k12.item(), k32.item(), k13.item()) == (0.25, 0.25, 0.5)

    def test_hand_computed(self):
        # a = 1, b = 101, c = 11, d = 11, e = 11
        k12, k32, k13 = supersample_weights(0.0, 0.0, 100.0, 110.0, 120.0, 130.0)
        assert k12.item() == pytest.approx(121 / (12 * 112))
        assert k32.item() == pytest.approx(121 / (22 * 22))
        assert k13.item() == pytest.approx(1 / 12)

    def test_edge_between_centre_samples_raises_weights(self):
        """A strong step between l3 and l4 pulls towards the neighbours."""
        smooth = supersample_weights(10.0, 10.0, 10.0, 11.0, 11.0, 11.0)
        edge = supersample_weights(10.0, 10.0, 10.0, 200.0, 200.0, 200.0)
        assert edge[0] > smooth[0]
        assert edge[1] > smooth[1]

    def test_edge_beside_neighbour_lowers_weight(self):
        calm = supersample_weights(50.0, 50.0, 50.0, 50.0, 50.0, 50.0)
        rough = supersample_weights(50.0, 250.0, 50.0, 50.0, 50.0, 50.0)
        assert rough[0] < calm[0]

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        luma=hypothesis.strategies.lists(luma_values(), min_size=6, max_size=6)
    )
    def test_weights_in_unit_interval(self, luma):
        for weight in supersample_weights(*luma):
            assert 0.0 < weight.item() < 1.0


class TestAdaptiveSupersample:
    """Tests for the two-way split."""

    def test_flat_field_equal_neighbours_replicates_centre(self):
        bl, br, rl, rr = adaptive_supersample(*[50.0] * 6, 10.0, 20.0, 10.0, 1.0, 2.0, 1.0)
        assert (bl.item(), br.item()) == (20.0, 20.0)
        assert (rl.item(), rr.item()) == (2.0, 2.0)

    def test_flat_field_general_neighbours(self):
        """Flat luma weights (1/4, 1/4, 1/2) split B2 into B2 +/- (B1 - B3) / 8."""
        bl, br, rl, rr = adaptive_supersample(*[50.0] * 6, 10.0, 20.0, 40.0, 3.0, 5.0, 1.0)
        assert bl.item() == pytest.approx(20.0 + (10.0 - 40.0) / 8)
        assert br.item() == pytest.approx(20.0 - (10.0 - 40.0) / 8)
        assert rl.item() == pytest.approx(5.0 + (3.0 - 1.0) / 8)
        assert rr.item() == pytest.approx(5.0 - (3.0 - 1.0) / 8)

    def test_matches_weight_formula(self):
        luma = (0.0, 0.0, 100.0, 110.0, 120.0, 130.0)
        b1, b2, b3 = 90.0, 100.0, 130.0
        k12, k32, k13 = (w.item() for w in supersample_weights(*luma))

        bl, br, _, _ = adaptive_supersample(*luma, b1, b2, b3, 128.0, 128.0, 128.0)

        from1_l = (1 - k12) * b2 + k12 * b1
        from1_r = (1 - k12) * b2 + k12 * (2 * b2 - b1)
        from3_l = (1 - k32) * b2 + k32 * (2 * b2 - b3)
        from3_r = (1 - k32) * b2 + k32 * b3
        assert bl.item() == pytest.approx((1 - k13) * from1_l + k13 * from3_l)
        assert br.item() == pytest.approx((1 - k13) * from1_r + k13 * from3_r)

    def test_channels_independent(self):
        luma = (5.0, 40.0, 60.0, 90.0, 100.0, 180.0)
        bl, br, _, _ = adaptive_supersample(*luma, 1.0, 2.0, 3.0, 7.0, 8.0, 9.0)
        swapped_bl, swapped_br, _, _ = adaptive_supersample(*luma, 7.0, 8.0, 9.0, 1.0, 2.0, 3.0)
        _, _, rl, rr = adaptive_supersample(*luma, 1.0, 2.0, 3.0, 7.0, 8.0, 9.0)
        assert rl.item() == swapped_bl.item()
        assert rr.item() == swapped_br.item()
        assert bl.item() != rl.item()

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        luma=hypothesis.strategies.lists(luma_values(), min_size=6, max_size=6),
        b=chroma_values(),
    )
    def test_constant_chroma_is_preserved(self, luma, b):
        bl, br, _, _ = adaptive_supersample(*luma, b, b, b, b, b, b)
        assert bl.item() == pytest.approx(b, abs=1e-9)
        assert br.item() == pytest.approx(b, abs=1e-9)

    def test_batched(self):
        luma = [torch.rand(3, 4, dtype=torch.float64) * 255 for _ in range(6)]
        chroma = [torch.rand(3, 4, dtype=torch.float64) * 255 for _ in range(6)]
        outputs = adaptive_supersample(*luma, *chroma)
        assert all(output.shape == (3, 4) for output in outputs)
        assert all(output.dtype == torch.float64 for output in outputs)
