"""Settings for cable schedule views, loaded from YAML."""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import SettingsError


DEFAULT_SETTINGS_PATH = Path(__file__).parent / "config" / "default_settings.yaml"


class ScheduleSettings(BaseModel):
    """Pagination, rendering and grouping settings."""

    default_page_size: int = Field(100, gt=0)
    page_size_options: List[int] = Field(default_factory=lambda: [50, 100, 200, 500])
    row_height: float = Field(48.0, gt=0)
    overscan: int = Field(5, ge=0)
    totals_cache_ttl: float = Field(30.0, ge=0)
    shop_pattern: str = r"\bShop\s+([A-Za-z0-9]+)"
    ungrouped_label: str = "Ungrouped"

    @field_validator("page_size_options")
    @classmethod
    def _positive_options(cls, options: List[int]) -> List[int]:
        if not options:
            raise ValueError("page_size_options must not be empty")
        if any(option <= 0 for option in options):
            raise ValueError("page_size_options must be positive")
        return sorted(set(options))

    @field_validator("shop_pattern")
    @classmethod
    def _compilable_pattern(cls, pattern: str) -> str:
        try:
            compiled = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"Invalid shop pattern: {e}")
        if compiled.groups < 1:
            raise ValueError("shop_pattern needs a capture group for the shop code")
        return pattern

    @model_validator(mode="after")
    def _default_is_an_option(self) -> "ScheduleSettings":
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size {self.default_page_size} is not one of "
                f"{self.page_size_options}"
            )
        return self


def _flatten(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map the sectioned YAML layout onto ScheduleSettings fields."""
    pagination = raw.get("pagination") or {}
    rendering = raw.get("rendering") or {}
    totals = raw.get("totals") or {}
    grouping = raw.get("grouping") or {}

    values = {
        "default_page_size": pagination.get("default_page_size"),
        "page_size_options": pagination.get("page_size_options"),
        "row_height": rendering.get("row_height"),
        "overscan": rendering.get("overscan"),
        "totals_cache_ttl": totals.get("cache_ttl"),
        "shop_pattern": grouping.get("shop_pattern"),
        "ungrouped_label": grouping.get("ungrouped_label"),
    }
    return {key: value for key, value in values.items() if value is not None}


def load_settings(path: Optional[str] = None) -> ScheduleSettings:
    """
    Load schedule settings.

    Args:
        path: Path to a YAML settings file. Defaults to the packaged
              default_settings.yaml. A missing file gives built-in defaults.

    Returns:
        ScheduleSettings

    Raises:
        SettingsError: If the file cannot be parsed or holds invalid values
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH

    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return ScheduleSettings()
    except yaml.YAMLError as e:
        raise SettingsError(f"Could not read settings file {settings_path}: {e}")

    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file {settings_path} must contain a mapping")

    try:
        return ScheduleSettings(**_flatten(raw))
    except PydanticValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}")
