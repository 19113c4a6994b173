"""
Data models for the media library.
Movies and series are two variants of one closed union, distinguished by their `kind` tag.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __eq__, __hash__
# Import typing helpers for precise and self-documenting types
from typing import Iterable, Tuple, Union  # fixed-size tuples and the variant union

from .categories import Category  # fixed tag vocabulary


def _format_rating(rating: float) -> str:
	# 8.0 -> "8.0", 8.75 -> "8.75"; keeps the source's decimal-point form
	return repr(float(rating))


def _categories_string(categories: Iterable[Category]) -> str:
	return ", ".join(c.display for c in categories)


@dataclass(frozen=True)
class Movie:
	"""
	A single movie.
	Immutable and compared by value, so two parsed copies of the same line are equal.
	"""
	title: str  # trimmed title as written in the source
	release_year: int  # e.g. 1999
	categories: Tuple[Category, ...]  # input order, duplicates kept
	rating: float  # 0-10 scale, decimal comma already normalized
	kind: str = field(default="movie", init=False)  # variant tag

	def __post_init__(self):
		# Accept any iterable for categories but store a tuple to stay hashable
		object.__setattr__(self, "categories", tuple(self.categories))

	def categories_string(self) -> str:
		return _categories_string(self.categories)

	def to_line(self) -> str:
		"""Render the record back into the source line format."""
		return f"{self.title}; {self.release_year}; {self.categories_string()}; {_format_rating(self.rating)};"


@dataclass(frozen=True)
class Series:
	"""
	A single series.
	`end_year` is only meaningful when `is_ended` is True (it is 0 otherwise).
	`season_lengths[i]` is the number of episodes in season i + 1.
	"""
	title: str  # trimmed title as written in the source
	release_year: int  # year the series started
	categories: Tuple[Category, ...]  # input order, duplicates kept
	rating: float  # 0-10 scale
	is_ended: bool = False  # True when an end year was given
	end_year: int = 0  # year the series ended
	season_lengths: Tuple[int, ...] = ()  # episodes per season, in season order
	kind: str = field(default="series", init=False)  # variant tag

	def __post_init__(self):
		object.__setattr__(self, "categories", tuple(self.categories))
		object.__setattr__(self, "season_lengths", tuple(self.season_lengths))

	@property
	def season_count(self) -> int:
		return len(self.season_lengths)

	@property
	def episode_count(self) -> int:
		return sum(self.season_lengths)

	def categories_string(self) -> str:
		return _categories_string(self.categories)

	def seasons_string(self) -> str:
		return ", ".join(f"{i}-{length}" for i, length in enumerate(self.season_lengths, 1))

	def to_line(self) -> str:
		"""Render the record back into the source line format."""
		years = f"{self.release_year}-{self.end_year if self.is_ended else ''}"
		return f"{self.title}; {years}; {self.categories_string()}; {_format_rating(self.rating)}; {self.seasons_string()};"


# The closed union of media variants; switch on `.kind` for variant-specific logic
Media = Union[Movie, Series]
