"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides the PokeAPI endpoint, HTTP timeout, and config file paths."""

from importlib import resources
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typeanalyzer import __version__


def _get_packaged_configs_dir() -> Path:
    """Locate the configs directory shipped inside the package."""
    return Path(str(resources.files("typeanalyzer") / "configs"))


class Settings(BaseSettings):
    """Contains settings for this project."""

    model_config = SettingsConfigDict(env_prefix="TYPEANALYZER_")

    VERSION: str = __version__
    """Project version."""

    CONFIGS_DIR: Path = _get_packaged_configs_dir()
    """Directory containing configuration files."""

    API_BASE_URL: str = "https://pokeapi.co/api/v2"
    """Base URL of the PokeAPI REST endpoints."""

    HTTP_TIMEOUT: float = 30.0
    """Timeout in seconds for a single request to the API."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_colors_path(self) -> Path:
        """Path to the type_colors.yml display configuration."""
        return self.CONFIGS_DIR / "type_colors.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration."""
        return self.CONFIGS_DIR / "logging.yml"


settings = Settings()
