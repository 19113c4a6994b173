"""
Category registry.
Fixed vocabulary of tags a movie or series can carry, with case-insensitive lookup
by display string.
"""

from enum import Enum  # closed set of tags
from typing import Dict, FrozenSet, Optional  # type hints


class Category(Enum):
	"""
	A descriptive tag from the fixed vocabulary.
	The member name is the identifier; the value is the canonical display string,
	which may differ from the name (SciFi -> "Sci-fi").
	"""
	Action = "Action"
	Adventure = "Adventure"
	Biography = "Biography"
	Comedy = "Comedy"
	Crime = "Crime"
	Drama = "Drama"
	Family = "Family"
	Fantasy = "Fantasy"
	History = "History"
	Horror = "Horror"
	Mystery = "Mystery"
	Romance = "Romance"
	SciFi = "Sci-fi"
	Sport = "Sport"
	Thriller = "Thriller"
	War = "War"
	Western = "Western"
	FilmNoir = "Film-Noir"  # only seen on movies
	Music = "Music"
	Musical = "Musical"
	Animation = "Animation"  # only seen on series
	Documentary = "Documentary"
	TalkShow = "Talk-show"

	@property
	def display(self) -> str:
		"""Canonical display string, as written in the source files."""
		return self.value

	def __str__(self) -> str:
		return self.value

	@classmethod
	def from_string(cls, text: str) -> Optional["Category"]:
		"""Return the category whose display string equals `text` (case-insensitive), else None."""
		if text is None:
			return None
		return _REGISTRY.get(text.lower())


# Built once from the enumeration; never mutated afterwards
_REGISTRY: Dict[str, Category] = {c.value.lower(): c for c in Category}
_DISPLAY_LOWER: FrozenSet[str] = frozenset(_REGISTRY)


def lookup(text: str) -> Optional[Category]:
	"""Module-level alias for Category.from_string."""
	return Category.from_string(text)


def display_strings_lowercase() -> FrozenSet[str]:
	"""All display strings in lowercase, e.g. {"action", "sci-fi", "talk-show", ...}."""
	return _DISPLAY_LOWER
