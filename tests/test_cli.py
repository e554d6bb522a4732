"""Tests for the command-line interface."""

import pandas as pd
import pytest
from click.testing import CliRunner

from cable_schedule.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schedule_file(tmp_path):
    path = tmp_path / "schedule.csv"
    rows = ["Cable Tag,From,To,Total Length,Total Cost"]
    rows += [f"C{i},MSB,Shop {i % 4 + 1},10,25" for i in range(1, 121)]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def flat_file(tmp_path):
    path = tmp_path / "flat.csv"
    path.write_text(
        "Cable Tag,From,To,Total Length\n"
        "C1,MSB,DB-1,50\n"
        "C2,MSB,DB-2,20\n",
        encoding="utf-8",
    )
    return str(path)


class TestCli:
    """Tests for the cable-schedule commands."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_validate(self, runner, flat_file):
        """Test validating a good schedule."""
        result = runner.invoke(cli, ["validate", "-f", flat_file])

        assert result.exit_code == 0
        assert "Valid cable schedule" in result.output

    def test_validate_invalid(self, runner, tmp_path):
        """Test validating a schedule without tags fails."""
        path = tmp_path / "bad.csv"
        path.write_text("From,To\nMSB,DB-1\n")

        result = runner.invoke(cli, ["validate", "-f", str(path)])

        assert result.exit_code == 1

    def test_summary(self, runner, schedule_file):
        """Test the summary lists each shop."""
        result = runner.invoke(cli, ["summary", "-f", schedule_file])

        assert result.exit_code == 0
        assert "Shop 1" in result.output
        assert "Total" in result.output

    def test_groups_flat(self, runner, flat_file):
        """Test schedules without shops print as one table."""
        result = runner.invoke(cli, ["groups", "-f", flat_file])

        assert result.exit_code == 0
        assert "C1" in result.output

    def test_page(self, runner, schedule_file):
        """Test showing one page."""
        result = runner.invoke(cli, ["page", "-f", schedule_file, "-p", "2", "-s", "50"])

        assert result.exit_code == 0
        assert "Page 2 of 3" in result.output

    def test_page_invalid_size(self, runner, schedule_file):
        """Test page sizes outside the options are rejected."""
        result = runner.invoke(cli, ["page", "-f", schedule_file, "-s", "75"])

        assert result.exit_code != 0

    def test_split(self, runner, flat_file, tmp_path):
        """Test splitting a cable writes the updated schedule."""
        output = tmp_path / "split.csv"

        result = runner.invoke(cli, ["split", "-f", flat_file, "--tag", "C1", "-n", "2", "-o", str(output)])

        assert result.exit_code == 0
        df = pd.read_csv(output)
        assert df["Cable Tag"].tolist() == ["C1 (1/2)", "C1 (2/2)", "C2", "3 cables"]
        assert df["Length (m)"].tolist() == [50, 50, 20, 120]

    def test_split_unknown_tag(self, runner, flat_file, tmp_path):
        """Test splitting a tag that is not in the schedule."""
        result = runner.invoke(
            cli, ["split", "-f", flat_file, "--tag", "C9", "-n", "2", "-o", str(tmp_path / "x.csv")]
        )

        assert result.exit_code != 0

    def test_split_invalid_count(self, runner, flat_file, tmp_path):
        """Test split counts below 2 are rejected."""
        result = runner.invoke(
            cli, ["split", "-f", flat_file, "--tag", "C1", "-n", "1", "-o", str(tmp_path / "x.csv")]
        )

        assert result.exit_code != 0

    def test_export_with_tenants(self, runner, schedule_file, tmp_path):
        """Test exporting grouped by shop with tenant names."""
        tenants = tmp_path / "tenants.csv"
        tenants.write_text("Shop Number,Shop Name\n1,Pick n Pay\n")
        output = tmp_path / "out.csv"

        result = runner.invoke(cli, ["export", "-f", schedule_file, "-t", str(tenants), "-o", str(output)])

        assert result.exit_code == 0
        df = pd.read_csv(output)
        assert df["Group"].iloc[0] == "Shop 1 - Pick n Pay"
        assert "Shop 1 - Pick n Pay subtotal" in df["Group"].tolist()
        assert df["Group"].iloc[-1] == "Total"

    def test_grouping_follows_settings(self, runner, tmp_path):
        """Test groups and export use the configured shop pattern and label."""
        schedule = tmp_path / "units.csv"
        schedule.write_text(
            "Cable Tag,From,To,Total Length\n"
            "C1,MSB,Unit 4,10\n"
            "C2,MSB,DB-1,20\n",
            encoding="utf-8",
        )
        settings = tmp_path / "settings.yaml"
        settings.write_text(
            "grouping:\n"
            "  shop_pattern: '\\bUnit\\s+([A-Za-z0-9]+)'\n"
            "  ungrouped_label: Common Areas\n",
            encoding="utf-8",
        )
        output = tmp_path / "out.csv"

        listed = runner.invoke(cli, ["groups", "-f", str(schedule), "--settings", str(settings)])
        exported = runner.invoke(
            cli, ["export", "-f", str(schedule), "--settings", str(settings), "-o", str(output)]
        )

        assert listed.exit_code == 0
        assert "Common Areas" in listed.output
        assert exported.exit_code == 0
        groups = pd.read_csv(output)["Group"].tolist()
        assert groups == ["Common Areas", "Common Areas subtotal", "Shop 4", "Shop 4 subtotal", "Total"]

    def test_export_keeps_parallel_sets_in_order(self, runner, tmp_path):
        """Test parallel members are exported in cable number order."""
        schedule = tmp_path / "parallel.csv"
        schedule.write_text(
            "Id,Cable Tag,Base Cable Tag,Cable Number,Parallel Group,From,To\n"
            "a,C1,C1,2,g1,MSB,Shop 1\n"
            "b,C1,C1,1,g1,MSB,Shop 1\n",
            encoding="utf-8",
        )
        output = tmp_path / "out.csv"

        result = runner.invoke(cli, ["export", "-f", str(schedule), "-o", str(output)])

        assert result.exit_code == 0
        tags = pd.read_csv(output)["Cable Tag"].tolist()
        assert tags[:2] == ["C1 (1/2)", "C1 (2/2)"]
