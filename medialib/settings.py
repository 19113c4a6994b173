"""
Application settings.
Loaded from environment variables or a .env file.
"""

from functools import lru_cache  # one settings instance per process
from pathlib import Path  # file locations

from pydantic import Field, field_validator  # field metadata and validation
from pydantic_settings import BaseSettings, SettingsConfigDict  # env-backed settings

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")  # loguru levels


class Settings(BaseSettings):
	"""Settings loaded from environment variables or a .env file."""

	movies_path: Path = Field(default=Path("data/film.txt"), alias="MOVIES_PATH")
	series_path: Path = Field(default=Path("data/serier.txt"), alias="SERIES_PATH")
	snapshot_path: Path = Field(default=Path("models/catalog.pkl"), alias="SNAPSHOT_PATH")
	source_encoding: str = Field(default="iso-8859-1", alias="SOURCE_ENCODING")
	skip_invalid_lines: bool = Field(default=True, alias="SKIP_INVALID_LINES")

	search_limit: int = Field(default=10, alias="SEARCH_LIMIT", ge=1, le=1000)
	use_cache: bool = Field(default=True, alias="USE_SEARCH_CACHE")
	parallel_search: bool = Field(default=False, alias="PARALLEL_SEARCH")
	search_workers: int = Field(default=4, alias="SEARCH_WORKERS", ge=1, le=64)

	log_level: str = Field(default="INFO", alias="LOG_LEVEL")

	@field_validator("log_level", mode="before")
	@classmethod
	def _normalize_log_level(cls, value: object) -> str:
		level = str(value or "INFO").strip().upper()
		if level not in LOG_LEVELS:
			raise ValueError(f"Unknown log level '{value}'; expected one of {', '.join(LOG_LEVELS)}")
		return level

	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True)


@lru_cache
def get_settings() -> Settings:
	"""Return a cached settings instance."""
	return Settings()  # type: ignore[call-arg]
