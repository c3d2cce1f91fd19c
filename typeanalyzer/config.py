"""ABOUTME: Configuration loaders for presentation data.
ABOUTME: Handles loading and parsing of the type_colors.yml display table."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

from typeanalyzer.settings import settings

DEFAULT_FALLBACK_COLOR = "#777777"


class TypeDisplay(BaseModel):
    """Display attributes for a single type badge."""

    model_config = ConfigDict(frozen=True)

    color: str


class DisplayConfig(BaseModel):
    """Read-only mapping from type name to display attributes."""

    model_config = ConfigDict(frozen=True)

    types: dict[str, TypeDisplay]
    fallback_color: str = DEFAULT_FALLBACK_COLOR

    def color_for(self, type_name: str) -> str:
        """Return the badge color for a type, or the fallback color if unknown.

        Args:
            type_name: Type name as reported by the API (e.g., "fire").

        Returns:
            Hex color string.
        """
        display = self.types.get(type_name.lower())
        if display is None:
            return self.fallback_color
        return display.color


def load_display_config(config_path: Path | None = None) -> DisplayConfig:
    """Load the type display configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.type_colors_path.

    Returns:
        Parsed DisplayConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    if config_path is None:
        config_path = settings.type_colors_path

    if not config_path.exists():
        raise FileNotFoundError(f"Type colors config not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    return DisplayConfig.model_validate(raw_config)
