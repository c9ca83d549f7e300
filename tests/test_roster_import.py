"""Tests for reading rosters from files."""

import pandas as pd
import pytest

from group_rotation.roster_import import parse_roster_text, read_roster, read_roster_columns


@pytest.fixture
def roster_csv(tmp_path):
    path = tmp_path / "team.csv"
    path.write_text("Name,Team\nAda,Red\n Ben ,Blue\n,Red\nAda,Blue\nCleo,Red\n", encoding="utf-8")
    return path


class TestReadRoster:

    def test_reads_first_column_by_default(self, roster_csv):
        """Blank cells are skipped, names stripped, repeats dropped."""
        assert read_roster(roster_csv) == ["Ada", "Ben", "Cleo"]

    def test_reads_named_column(self, roster_csv):
        assert read_roster(roster_csv, "Team") == ["Red", "Blue"]

    def test_unknown_column(self, roster_csv):
        with pytest.raises(KeyError):
            read_roster(roster_csv, "Email")

    def test_columns(self, roster_csv):
        assert read_roster_columns(roster_csv) == ["Name", "Team"]

    def test_reads_excel(self, tmp_path):
        path = tmp_path / "team.xlsx"
        pd.DataFrame({"Person": ["Ada", "Ben", None, "Dev"]}).to_excel(path, index=False)

        assert read_roster(path) == ["Ada", "Ben", "Dev"]


class TestParseRosterText:

    def test_commas_and_newlines(self):
        assert parse_roster_text("Ada, Ben\nCleo,,Dev") == ["Ada", "Ben", "Cleo", "Dev"]

    def test_empty(self):
        assert parse_roster_text(None) == []
        assert parse_roster_text("") == []
