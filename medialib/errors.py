"""
Parse error taxonomy.
One exception type per failure site of the line parser. Each carries the offending
fragment and the full original line so batch loaders can report what went wrong.
"""

from typing import Optional


class ParseError(ValueError):
	"""Base class for every line-level parse failure."""

	reason = "could not parse line"

	def __init__(self, line: str, fragment: Optional[str] = None, reason: Optional[str] = None):
		self.line = line  # full original line
		self.fragment = fragment  # offending substring, trimmed
		if reason:
			self.reason = reason
		message = self.reason
		if fragment is not None:
			message += f" from '{fragment}'"
		super().__init__(f"{message}. Line: '{line}'")

	@property
	def kind(self) -> str:
		"""Short name of the failure kind, e.g. 'BadRating'."""
		return type(self).__name__


class BadReleaseYear(ParseError):
	reason = "could not parse release year (int)"


class BadEndYear(ParseError):
	reason = "could not parse end year (int)"


class BadCategory(ParseError):
	reason = "could not parse category"


class BadRating(ParseError):
	reason = "could not parse rating (float)"


class BadSeasonToken(ParseError):
	reason = "could not find season separator '-'"


class BadSeasonNumber(ParseError):
	reason = "could not parse season number or length (int)"


class SeasonOutOfOrder(ParseError):
	reason = "season numbers are not in order"


class PrematureEnd(ParseError):
	reason = "line ended prematurely"

	def __init__(self, line: str, classification: str, fragment: Optional[str] = None):
		self.classification = classification  # 'unknown', 'movie' or 'series' when the line ran out
		super().__init__(line, fragment, reason=f"{classification} line ended prematurely")


class TrailingContent(ParseError):
	reason = "line contained more characters than expected"
