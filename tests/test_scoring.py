"""Tests for the final schedule score."""

from group_rotation.scoring import SCORE_SCALE, score


class TestScore:

    def test_combines_delta_and_imbalance(self):
        assert score(12, 3) == 12 * SCORE_SCALE + 3

    def test_placement_cost_outranks_imbalance(self):
        """One unit of delta weighs more than any realistic imbalance."""
        assert score(10, 999) < score(11, 0)

    def test_imbalance_breaks_ties(self):
        assert score(10, 1) < score(10, 2)

    def test_zero(self):
        assert score(0, 0) == 0
