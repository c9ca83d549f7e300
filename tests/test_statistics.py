"""Tests for pairing statistics and schedule checks."""

import pandas as pd

from group_rotation.models import Schedule
from group_rotation.statistics import check_schedule, pair_count_matrix, pairing_summary


PEOPLE = ["Ada", "Ben", "Cleo", "Dev"]

SCHEDULE = Schedule(rounds=[
    [["Ada", "Ben"], ["Cleo", "Dev"]],
    [["Ada", "Cleo"], ["Ben", "Dev"]],
    [["Ada", "Ben"], ["Cleo", "Dev"]],
])


class TestPairCountMatrix:
    """Test the square pair-count table."""

    def test_counts_rounds_shared(self):
        df = pair_count_matrix(SCHEDULE, PEOPLE)

        assert df.loc["Ada", "Ben"] == 2
        assert df.loc["Ada", "Cleo"] == 1
        assert df.loc["Ada", "Dev"] == 0

    def test_matrix_is_symmetric_with_empty_diagonal(self):
        df = pair_count_matrix(SCHEDULE, PEOPLE)

        assert list(df.index) == PEOPLE
        assert list(df.columns) == PEOPLE
        for person in PEOPLE:
            assert pd.isna(df.loc[person, person])
        for a in PEOPLE:
            for b in PEOPLE:
                if a != b:
                    assert df.loc[a, b] == df.loc[b, a]

    def test_empty_roster(self):
        df = pair_count_matrix(Schedule(), [])
        assert df.empty


class TestPairingSummary:
    """Test the spread of pair counts."""

    def test_summary_values(self):
        summary = pairing_summary(SCHEDULE, PEOPLE)

        assert summary == {
            "max_count": 2,
            "min_count": 0,
            "imbalance": 2,
            "repeated_pairs": 2,
            "unmet_pairs": 2,
        }

    def test_single_person_has_no_pairs(self):
        summary = pairing_summary(Schedule(rounds=[[["Ada"]]]), ["Ada"])
        assert summary["imbalance"] == 0


class TestCheckSchedule:
    """Test partition and size checks."""

    def test_valid_schedule(self):
        ok, violations = check_schedule(SCHEDULE, PEOPLE, [2, 2])

        assert ok
        assert violations == []

    def test_reports_missing_and_duplicate(self):
        broken = Schedule(rounds=[[["Ada", "Ben"], ["Ada", "Dev"]]])
        ok, violations = check_schedule(broken, PEOPLE, [2, 2])

        assert not ok
        assert any("more than once" in v for v in violations)
        assert any("missing" in v for v in violations)

    def test_reports_wrong_sizes(self):
        lopsided = Schedule(rounds=[[["Ada", "Ben", "Cleo"], ["Dev"]]])
        ok, violations = check_schedule(lopsided, PEOPLE, [2, 2])

        assert not ok
        assert violations == ["Round 1: group sizes [1, 3] != [2, 2]"]
