"""
Search engine module.
Scores catalog records against a multi-word query by title and category substring
matches and returns them ranked.
"""

from concurrent.futures import ThreadPoolExecutor  # optional per-token fan-out
from dataclasses import dataclass  # lightweight containers for results
from typing import FrozenSet, List, Optional, Sequence  # type annotations for clarity

# Import project modules for data structures and components
from .catalog_store import CatalogStore  # record set + its title cache
from .models import Media  # record union
from .ranking import Ranker, ScoreMap  # ordering and score accumulation
from .search_cache import CategoryCache, TitleCache, get_category_cache  # query caches

# Import loguru for console logging
from loguru import logger  # simple structured logger


@dataclass
class SearchResult:
	media: Media  # matched record
	score: int  # number of token hits (title and category counted separately)


def tokenize(query: str) -> List[str]:
	"""Split on whitespace and lowercase each token."""
	if not query:
		return []
	return [token.lower() for token in query.split()]


def title_matches(token: str, title: str) -> bool:
	"""Case-insensitive substring match; `token` must already be lowercase."""
	return token in title.lower()


class SearchEngine:
	"""
	Ranked title/category search over one CatalogStore.
	Uses the store's title cache unless another one is passed in, and the shared
	process-wide category cache.
	"""

	def __init__(
		self,
		store: CatalogStore,  # records to search
		title_cache: Optional[TitleCache] = None,  # defaults to store.title_cache
		category_cache: Optional[CategoryCache] = None,  # defaults to the process-wide cache
		max_workers: int = 4,  # thread count for parallel mode
	):
		self.store = store
		# A caller-supplied cache must still be cleared when the store changes
		self._title_cache = store.attach_cache(title_cache) if title_cache is not None else None
		self.category_cache = category_cache if category_cache is not None else get_category_cache()
		self.max_workers = max(1, max_workers)
		self.ranker = Ranker()

	@property
	def title_cache(self) -> TitleCache:
		# Resolved lazily so a store swapped in later still brings its own cache
		return self._title_cache if self._title_cache is not None else self.store.title_cache

	def find_by_title(self, token: str, media: Sequence[Media], use_cache: bool = True) -> FrozenSet[Media]:
		"""Records whose title contains `token`."""
		if use_cache:
			cached = self.title_cache.get(token)
			if cached is not None:
				return cached
		matches = frozenset(m for m in media if title_matches(token, m.title))
		if use_cache:
			self.title_cache.put(token, matches)
		return matches

	def find_by_category(self, token: str, media: Sequence[Media]) -> FrozenSet[Media]:
		"""Records carrying at least one category whose display string contains `token`."""
		categories = self.category_cache.lookup(token)
		if not categories:
			return frozenset()
		return frozenset(m for m in media if any(c in categories for c in m.categories))

	def _score_token(self, token: str, media: Sequence[Media], scores: ScoreMap, use_cache: bool):
		# One hit for a title match and one more for a category match
		scores.increment_all(self.find_by_title(token, media, use_cache))
		scores.increment_all(self.find_by_category(token, media))

	def score(self, query: str, use_cache: bool = True, parallel: bool = False) -> ScoreMap:
		"""Build the score map for `query`; media with no hits are absent from it."""
		tokens = tokenize(query)
		scores = ScoreMap()
		if not tokens:
			return scores

		media = self.store.as_iterable()  # one consistent view for every token
		if parallel and len(tokens) > 1:
			workers = min(self.max_workers, len(tokens))
			logger.debug(f"[Engine] Scoring {len(tokens)} tokens on {workers} threads")
			with ThreadPoolExecutor(max_workers=workers) as executor:
				# list() re-raises any worker exception here
				list(executor.map(lambda t: self._score_token(t, media, scores, use_cache), tokens))
		else:
			for token in tokens:
				self._score_token(token, media, scores, use_cache)

		logger.debug(f"[Engine] Query '{query}' -> tokens={tokens} | matched={len(scores)}")
		return scores

	def search(self, query: str, top_k: Optional[int] = None, use_cache: bool = True, parallel: bool = False) -> List[SearchResult]:
		"""Ranked results with their scores, best first, at most `top_k` (None = all)."""
		scores = self.score(query, use_cache=use_cache, parallel=parallel)
		ranked = self.ranker.order(scores, limit=top_k)
		logger.debug(f"[Engine] Returning {len(ranked)} of {len(scores)} matches for '{query}'")
		return [SearchResult(media=m, score=s) for m, s in ranked]

	def rank(self, query: str, limit: Optional[int] = None, use_cache: bool = True, parallel: bool = False) -> List[Media]:
		return [r.media for r in self.search(query, top_k=limit, use_cache=use_cache, parallel=parallel)]

	def top_match(self, query: str, use_cache: bool = True, parallel: bool = False) -> Optional[Media]:
		"""The single best match, or None if no token matched anything."""
		best = self.ranker.best(self.score(query, use_cache=use_cache, parallel=parallel))
		return best[0] if best else None


def rank(
	query: str,
	store: CatalogStore,
	title_cache: Optional[TitleCache] = None,
	limit: Optional[int] = None,
	use_cache: bool = True,
	parallel: bool = False,
) -> List[Media]:
	"""Rank `store` against `query`; see SearchEngine.search for the scoring rule."""
	return SearchEngine(store, title_cache=title_cache).rank(query, limit=limit, use_cache=use_cache, parallel=parallel)


def top_match(
	query: str,
	store: CatalogStore,
	title_cache: Optional[TitleCache] = None,
	use_cache: bool = True,
	parallel: bool = False,
) -> Optional[Media]:
	return SearchEngine(store, title_cache=title_cache).top_match(query, use_cache=use_cache, parallel=parallel)
