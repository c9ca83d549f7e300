"""Tests for group size planning."""

import pytest

from group_rotation.planner import group_size_for, plan_group_sizes


class TestPlanGroupSizes:
    """Test target sizes per group."""

    def test_even_split(self):
        """Six people in groups of three make two full groups."""
        assert plan_group_sizes(6, 3) == [3, 3]

    def test_uneven_split_puts_larger_groups_first(self):
        """Ten people in groups of three make 3,3,2,2."""
        assert plan_group_sizes(10, 3) == [3, 3, 2, 2]

    def test_fewer_people_than_group_size(self):
        """Two people with group size three form a single group of two."""
        assert plan_group_sizes(2, 3) == [2]

    def test_no_people(self):
        """An empty roster plans no groups."""
        assert plan_group_sizes(0, 3) == []

    @pytest.mark.parametrize("n,size", [(7, 2), (23, 4), (100, 6), (5, 5), (13, 13)])
    def test_sizes_sum_to_n_and_differ_by_at_most_one(self, n, size):
        """Sizes always cover everyone and stay balanced."""
        sizes = plan_group_sizes(n, size)
        assert sum(sizes) == n
        assert max(sizes) - min(sizes) <= 1
        assert max(sizes) <= size

    def test_rejects_non_positive_group_size(self):
        """A group size below one is a caller error."""
        with pytest.raises(ValueError):
            plan_group_sizes(5, 0)


class TestGroupSizeFor:
    """Test group size derived from a requested number of groups."""

    def test_divides_roster_by_group_count(self):
        assert group_size_for(12, 4) == 3

    def test_never_below_two(self):
        """Too many groups still yields pairs."""
        assert group_size_for(5, 10) == 2

    def test_zero_groups_treated_as_one(self):
        assert group_size_for(8, 0) == 8
