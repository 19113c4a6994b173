"""Configuration settings behaviour tests."""

from pathlib import Path

import pytest

from medialib.settings import Settings


def test_defaults():
	settings = Settings(_env_file=None)
	assert settings.movies_path == Path("data/film.txt")
	assert settings.source_encoding == "iso-8859-1"
	assert settings.search_limit == 10
	assert settings.parallel_search is False
	assert settings.log_level == "INFO"


def test_environment_aliases(monkeypatch):
	monkeypatch.setenv("SEARCH_LIMIT", "25")
	monkeypatch.setenv("PARALLEL_SEARCH", "true")
	monkeypatch.setenv("SNAPSHOT_PATH", "/tmp/catalog.pkl")
	settings = Settings(_env_file=None)
	assert settings.search_limit == 25
	assert settings.parallel_search is True
	assert settings.snapshot_path == Path("/tmp/catalog.pkl")


def test_log_level_is_normalized():
	settings = Settings(_env_file=None, LOG_LEVEL="debug")
	assert settings.log_level == "DEBUG"


def test_invalid_values_raise():
	with pytest.raises(ValueError, match="Unknown log level"):
		Settings(_env_file=None, LOG_LEVEL="chatty")
	with pytest.raises(ValueError):
		Settings(_env_file=None, SEARCH_LIMIT=0)
