"""
Media library façade.
Wires file reading to parsing, owns the catalog store, and exposes add/remove/search/sort
to callers.
"""

from enum import Enum  # sort options
from pathlib import Path  # snapshot and source paths
from typing import Iterable, List, Optional, Union  # type hints

from loguru import logger  # console logging

from .catalog_store import CatalogStore  # unique record set
from .data_loader import DataLoader  # file -> records
from .models import Media  # record union
from .search_engine import SearchEngine, SearchResult  # ranked search


class SortBy(Enum):
	TITLE = "title"
	RELEASE_YEAR = "release_year"
	RATING = "rating"


class SortOrder(Enum):
	ASCENDING = "asc"
	DESCENDING = "desc"


class MediaLibrary:
	"""
	A library of movies and series.
	Use `read_files` (or `from_files`) to load the source files, `search`/`top` to query,
	and `add`/`remove`/`clear` to edit. Every edit invalidates the search cache.
	"""

	def __init__(self, store: Optional[CatalogStore] = None, loader: Optional[DataLoader] = None, max_workers: int = 4):
		self.store = store if store is not None else CatalogStore()
		self.loader = loader or DataLoader()
		self.engine = SearchEngine(self.store, max_workers=max_workers)

	@classmethod
	def from_files(cls, movies_path: Union[str, Path], series_path: Union[str, Path], loader: Optional[DataLoader] = None) -> "MediaLibrary":
		library = cls(loader=loader)
		library.read_files(movies_path, series_path)
		return library

	def read_files(self, movies_path: Union[str, Path], series_path: Union[str, Path]):
		"""(Re-)read both source files, replacing the current contents."""
		media = self.loader.load_media_from_files(movies_path, series_path)
		self.store.bulk_load(media)
		logger.info(f"[Library] Library holds {self.store.size()} unique records")

	# Mutation

	def add(self, media: Media):
		self.store.add(media)

	def add_all(self, media: Iterable[Media]):
		self.store.add_all(media)

	def remove(self, media: Media) -> bool:
		return self.store.remove(media)

	def clear(self):
		self.store.clear()

	# Queries

	def search(self, query: str, limit: Optional[int] = None, use_cache: bool = True, parallel: bool = False) -> List[Media]:
		"""Media matching `query` by title or category, best first."""
		return self.engine.rank(query, limit=limit, use_cache=use_cache, parallel=parallel)

	def search_with_scores(self, query: str, limit: Optional[int] = None, use_cache: bool = True, parallel: bool = False) -> List[SearchResult]:
		return self.engine.search(query, top_k=limit, use_cache=use_cache, parallel=parallel)

	def top(self, query: str, use_cache: bool = True, parallel: bool = False) -> Optional[Media]:
		return self.engine.top_match(query, use_cache=use_cache, parallel=parallel)

	def sort_by(self, sort_by: SortBy = SortBy.TITLE, order: SortOrder = SortOrder.ASCENDING) -> List[Media]:
		"""
		All records sorted by one property in the given order.
		Ties always fall back to title, then release year, ascending, whatever the order.
		"""
		if sort_by is SortBy.TITLE:
			primary = lambda m: m.title
		elif sort_by is SortBy.RELEASE_YEAR:
			primary = lambda m: m.release_year
		else:
			primary = lambda m: m.rating
		# Two stable passes: tie-break first, then the primary key (only this one is reversed)
		media = sorted(self.store.as_iterable(), key=lambda m: (m.title, m.release_year))
		media.sort(key=primary, reverse=order is SortOrder.DESCENDING)
		return media

	# Snapshots

	def save(self, filepath: Union[str, Path]):
		self.store.save_snapshot(filepath)

	@classmethod
	def load(cls, filepath: Union[str, Path], loader: Optional[DataLoader] = None, max_workers: int = 4) -> "MediaLibrary":
		return cls(store=CatalogStore.load_snapshot(filepath), loader=loader, max_workers=max_workers)

	def size(self) -> int:
		return self.store.size()

	def __len__(self) -> int:
		return self.store.size()

	def __iter__(self):
		return iter(self.store)
