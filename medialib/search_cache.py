"""
Query caches used by the search engine.
- TitleCache: token -> media whose title contains the token. One per catalog store,
  cleared on every store mutation.
- CategoryCache: token -> categories whose display string contains the token. The
  category vocabulary never changes, so one process-wide instance is never invalidated.
"""

from functools import lru_cache  # single shared category cache
from typing import Dict, FrozenSet, Optional

from .categories import Category, display_strings_lowercase
from .models import Media


class TitleCache:
	"""
	Per-store cache of title matches.
	Concurrent puts for the same token store the same value (a pure function of token
	and store contents), so last-writer-wins races are harmless.
	"""

	def __init__(self):
		self._entries: Dict[str, FrozenSet[Media]] = {}

	def get(self, token: str) -> Optional[FrozenSet[Media]]:
		return self._entries.get(token)

	def put(self, token: str, matches: FrozenSet[Media]) -> FrozenSet[Media]:
		"""Store and return `matches`, for chaining."""
		self._entries[token] = matches
		return matches

	def clear(self):
		self._entries.clear()

	def __contains__(self, token: str) -> bool:
		return token in self._entries

	def __len__(self) -> int:
		return len(self._entries)


class CategoryCache:
	"""Read-through cache of which categories a lowercase token matches by substring."""

	def __init__(self):
		self._entries: Dict[str, FrozenSet[Category]] = {}

	def lookup(self, token: str) -> FrozenSet[Category]:
		cached = self._entries.get(token)
		if cached is not None:
			return cached
		matches = frozenset(
			Category.from_string(name)
			for name in display_strings_lowercase()
			if token in name
		)
		self._entries[token] = matches
		return matches

	def __contains__(self, token: str) -> bool:
		return token in self._entries

	def __len__(self) -> int:
		return len(self._entries)


@lru_cache
def get_category_cache() -> CategoryCache:
	"""Return the process-wide category cache."""
	return CategoryCache()
