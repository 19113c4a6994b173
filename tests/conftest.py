"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the project importable when running tests without an editable install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from medialib.catalog_store import CatalogStore  # noqa: E402
from medialib.media_parser import parse_line  # noqa: E402


MOVIE_LINES = [
	"The Matrix; 1999; Action, Sci-fi; 8.7;",
	"The Godfather; 1972; Crime, Drama; 9,2;",
	"Alien; 1979; Horror, Sci-fi; 8.5;",
	"Casablanca; 1942; Drama, Romance, War; 8.5;",
	"Matrix Reloaded; 2003; Action, Sci-fi; 7.2;",
]

SERIES_LINES = [
	"The Office; 2005-2013; Comedy; 8.9; 1-6, 2-22, 3-25;",
	"Breaking Bad; 2008-2013; Crime, Drama, Thriller; 9.5; 1-7, 2-13, 3-13, 4-13, 5-16;",
	"The Simpsons; 1989-; Animation, Comedy; 8.7; 1-13, 2-22;",
]


@pytest.fixture
def sample_media():
	return [parse_line(line) for line in MOVIE_LINES + SERIES_LINES]


@pytest.fixture
def store(sample_media):
	return CatalogStore(sample_media)
