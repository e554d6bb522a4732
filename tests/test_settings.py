"""Tests for schedule settings."""

import pytest
from cable_schedule.exceptions import SettingsError
from cable_schedule.settings import ScheduleSettings, load_settings


class TestLoadSettings:
    """Tests for loading settings from YAML."""

    def test_packaged_defaults(self):
        """Test the packaged settings file."""
        settings = load_settings()

        assert settings.default_page_size == 100
        assert settings.page_size_options == [50, 100, 200, 500]
        assert settings.row_height == 48
        assert settings.totals_cache_ttl == 30
        assert settings.ungrouped_label == "Ungrouped"

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test a missing settings file falls back to built-in defaults."""
        settings = load_settings(str(tmp_path / "missing.yaml"))

        assert settings == ScheduleSettings()

    def test_partial_file(self, tmp_path):
        """Test values not in the file keep their defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "pagination:\n"
            "  default_page_size: 50\n"
            "  page_size_options: [25, 50]\n"
            "totals:\n"
            "  cache_ttl: 5\n"
        )

        settings = load_settings(str(path))

        assert settings.default_page_size == 50
        assert settings.page_size_options == [25, 50]
        assert settings.totals_cache_ttl == 5
        assert settings.overscan == 5

    def test_empty_file(self, tmp_path):
        """Test an empty file gives defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text("")

        assert load_settings(str(path)) == ScheduleSettings()

    def test_invalid_yaml(self, tmp_path):
        """Test unreadable YAML is reported."""
        path = tmp_path / "settings.yaml"
        path.write_text("pagination: [unclosed\n")

        with pytest.raises(SettingsError):
            load_settings(str(path))

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "settings.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(SettingsError):
            load_settings(str(path))

    def test_default_page_size_not_an_option(self, tmp_path):
        """Test the default page size must be selectable."""
        path = tmp_path / "settings.yaml"
        path.write_text("pagination:\n  default_page_size: 75\n")

        with pytest.raises(SettingsError):
            load_settings(str(path))

    def test_invalid_row_height(self, tmp_path):
        """Test non-positive row heights are rejected."""
        path = tmp_path / "settings.yaml"
        path.write_text("rendering:\n  row_height: 0\n")

        with pytest.raises(SettingsError):
            load_settings(str(path))


class TestScheduleSettings:
    """Tests for settings validation."""

    def test_options_are_sorted(self):
        """Test page size options are sorted without duplicates."""
        settings = ScheduleSettings(page_size_options=[200, 100, 100, 50])

        assert settings.page_size_options == [50, 100, 200]

    def test_shop_pattern_needs_group(self):
        """Test grouping patterns must capture the shop code."""
        with pytest.raises(ValueError):
            ScheduleSettings(shop_pattern=r"Shop\s+\d+")

    def test_shop_pattern_must_compile(self):
        """Test broken regular expressions are rejected."""
        with pytest.raises(ValueError):
            ScheduleSettings(shop_pattern=r"Shop\s+(")

    def test_empty_options(self):
        """Test at least one page size is required."""
        with pytest.raises(ValueError):
            ScheduleSettings(page_size_options=[])
