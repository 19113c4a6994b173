"""
Line parsing module.
Turns one semicolon-delimited source line into a Movie or Series record, or raises a
specific ParseError describing which field was malformed.

Line formats:
	Movie:  <title>; <year>; <cat1>, <cat2>, ...; <rating>;
	Series: <title>; <start>[-[<end>]]; <cat1>, ...; <rating>; 1-<len1>, 2-<len2>, ...;

A series without a hyphen after its start year is only recognized once its season
list is reached, so classification is carried through the scan as unknown until then.
"""

import re  # strict number syntax checks
from enum import Enum  # explicit parser states
from typing import List, Optional, Type  # type annotations

from loguru import logger  # console logging

from .categories import Category  # tag registry
from .errors import (
	BadCategory,
	BadEndYear,
	BadRating,
	BadReleaseYear,
	BadSeasonNumber,
	BadSeasonToken,
	ParseError,
	PrematureEnd,
	SeasonOutOfOrder,
	TrailingContent,
)
from .models import Media, Movie, Series  # record types


class ParsingState(Enum):
	TITLE = "title"
	RELEASE_YEAR = "release_year"
	END_YEAR = "end_year"  # entered only after a hyphen in the year field
	CATEGORIES = "categories"
	RATING = "rating"
	SEASONS = "seasons"  # entered after every rating; movies simply have no season tokens
	DONE = "done"


class Classification(Enum):
	UNKNOWN = "unknown"
	MOVIE = "movie"
	SERIES = "series"


class MediaParser:
	"""
	Single-pass, character-by-character parser for media lines.
	Holds no state between calls: the same line always gives the same record or error.
	"""

	COMMENT_PREFIX = "//"  # marks known-malformed source rows to ignore

	# Pre-compiled number patterns; int()/float() alone would also accept "1_000", "nan", "inf"
	RE_INT = re.compile(r"[+-]?[0-9]+")  # years
	RE_COUNT = re.compile(r"[0-9]+")  # season numbers and lengths
	RE_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")  # ratings, after comma -> dot

	def parse(self, line: str) -> Optional[Media]:
		"""Parse one line. Returns None for comment lines, raises a ParseError subclass on bad input."""
		if line.startswith(self.COMMENT_PREFIX):
			logger.debug(f"[Parser] Ignoring comment line: '{line.rstrip()}'")
			return None

		state = ParsingState.TITLE
		classification = Classification.UNKNOWN

		# Accumulated fields
		title = ""
		release_year = 0
		is_ended = False
		end_year = 0
		categories: List[Category] = []
		rating = 0.0
		season_lengths: List[int] = []

		last = 0  # start index of the field currently being accumulated

		for i, c in enumerate(line):
			if state is ParsingState.TITLE:
				if c != ";":
					continue
				title = line[:i].strip()
				last = i + 1
				state = ParsingState.RELEASE_YEAR

			elif state is ParsingState.RELEASE_YEAR:
				if c != ";" and c != "-":
					continue
				release_year = self._parse_int(line[last:i], line, BadReleaseYear)
				last = i + 1
				if c == "-":
					# A hyphen after the start year settles it: this is a series
					classification = Classification.SERIES
					state = ParsingState.END_YEAR
				else:
					state = ParsingState.CATEGORIES

			elif state is ParsingState.END_YEAR:
				if c != ";":
					continue
				text = line[last:i].strip()
				if text:  # blank means the series is still running
					end_year = self._parse_int(text, line, BadEndYear)
					is_ended = True
				last = i + 1
				state = ParsingState.CATEGORIES

			elif state is ParsingState.CATEGORIES:
				if c != "," and c != ";":
					continue
				token = line[last:i].strip()
				category = Category.from_string(token)
				if category is None:
					raise BadCategory(line, token)
				categories.append(category)
				last = i + 1
				if c == ";":
					state = ParsingState.RATING

			elif state is ParsingState.RATING:
				if c != ";":
					continue
				rating = self._parse_rating(line[last:i], line)
				last = i + 1
				state = ParsingState.SEASONS

			elif state is ParsingState.SEASONS:
				if c != "," and c != ";":
					continue
				season_lengths.append(self._parse_season(line[last:i], len(season_lengths), line))
				last = i + 1
				if c == ";":
					state = ParsingState.DONE
					break

		classification = self._reconcile(state, classification, season_lengths, line)

		# Anything after the recognized grammar must be blank
		rest = line[last:]
		if rest.strip():
			raise TrailingContent(line, rest.strip())

		if classification is Classification.MOVIE:
			media: Media = Movie(title=title, release_year=release_year, categories=categories, rating=rating)
		else:
			media = Series(
				title=title,
				release_year=release_year,
				categories=categories,
				rating=rating,
				is_ended=is_ended,
				end_year=end_year,
				season_lengths=season_lengths,
			)
		logger.debug(f"[Parser] Parsed {media.kind}: '{media.title}' ({media.release_year})")
		return media

	def _reconcile(self, state: ParsingState, classification: Classification, season_lengths: List[int], line: str) -> Classification:
		"""Decide movie vs. series once the scan is over, or fail if the line stopped short."""
		if state is ParsingState.DONE:
			# DONE is only reached through a terminated season list
			return Classification.SERIES
		if classification is Classification.SERIES or state is not ParsingState.SEASONS:
			raise PrematureEnd(line, classification.value)
		return Classification.SERIES if season_lengths else Classification.MOVIE

	def _parse_int(self, text: str, line: str, error: Type[ParseError]) -> int:
		text = text.strip()
		if not self.RE_INT.fullmatch(text):
			raise error(line, text)
		return int(text)

	def _parse_rating(self, text: str, line: str) -> float:
		text = text.strip()
		normalized = text.replace(",", ".")  # decimal comma in some rows
		if not self.RE_FLOAT.fullmatch(normalized):
			raise BadRating(line, text)
		return float(normalized)

	def _parse_season(self, token: str, accepted: int, line: str) -> int:
		"""Parse one 'number-length' token; the number must be `accepted + 1`."""
		token = token.strip()
		sep = token.find("-")
		if sep == -1:
			raise BadSeasonToken(line, token)

		number_text = token[:sep].strip()
		if not self.RE_COUNT.fullmatch(number_text):
			raise BadSeasonNumber(line, token)
		if int(number_text) != accepted + 1:
			raise SeasonOutOfOrder(line, token)

		length_text = token[sep + 1:].strip()
		if not self.RE_COUNT.fullmatch(length_text):
			raise BadSeasonNumber(line, token)
		return int(length_text)


_DEFAULT_PARSER = MediaParser()


def parse_line(line: str) -> Optional[Media]:
	"""Parse one source line with the shared parser (see MediaParser.parse)."""
	return _DEFAULT_PARSER.parse(line)
