"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOWJUMPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Result sheets
    data_path: str = "data"
    competition: str = "SEDE"
    teams_sheet: str = "EQUIPOS"

    # Ranking rules
    format_name: str = "three_day"
    format_path: str = ""

    # Output
    output_path: str = "output"
    championship_name: str = "Campeonato"
    generate_html: bool = True

    # Feature flags
    debug: bool = False

    @property
    def competition_dir(self) -> Path:
        """Directory holding the competition's sheets."""
        return Path(self.data_path) / self.competition

    @property
    def format_file(self) -> Path | None:
        """Optional JSON file overriding the built-in format."""
        return Path(self.format_path) if self.format_path else None

    @property
    def output_dir(self) -> Path:
        """Get output directory as Path object."""
        return Path(self.output_path)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
