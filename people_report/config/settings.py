from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    data_dir: Path = Path("data")
    source_file_name: str = "data.csv"
    name_frequency_file_name: str = "name_frequencies.csv"
    ordered_address_file_name: str = "ordered_addresses.csv"

    @property
    def source_path(self) -> Path:
        return self.data_dir / self.source_file_name

    @property
    def name_frequency_path(self) -> Path:
        return self.data_dir / self.name_frequency_file_name

    @property
    def ordered_address_path(self) -> Path:
        return self.data_dir / self.ordered_address_file_name
