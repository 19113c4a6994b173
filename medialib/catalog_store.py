"""
Catalog store module.
Holds the set of unique media records and the title-match cache that depends on them.
"""

# Pickle for the pass-through snapshot of the record set
import pickle  # simple serialization
# Pathlib for robust path handling when saving/loading
from pathlib import Path  # filesystem paths
from typing import Iterable, Iterator, List, Set, Union  # type hints

from loguru import logger  # console logger

from .models import Media  # record union
from .search_cache import TitleCache  # invalidated on every mutation


class CatalogStore:
	"""
	A set of Movie/Series values, deduplicated by value equality.
	Every mutating call clears this store's title cache and any cache attached to it.
	Single writer: do not mutate while a search over the store is running.
	"""

	def __init__(self, media: Iterable[Media] = ()):
		self._media: Set[Media] = set(media)
		self.title_cache = TitleCache()  # token -> matching media, valid for current contents
		self._attached_caches: List[TitleCache] = []  # caller-owned caches over this store

	def attach_cache(self, cache: TitleCache) -> TitleCache:
		"""Tie an extra title cache to this store so every mutation clears it too."""
		if cache is not self.title_cache and not any(c is cache for c in self._attached_caches):
			self._attached_caches.append(cache)
		return cache

	def _invalidate(self):
		self.title_cache.clear()
		for cache in self._attached_caches:
			cache.clear()

	def add(self, media: Media):
		"""Add a record; adding a value-equal record again is a no-op."""
		self._media.add(media)
		self._invalidate()

	def add_all(self, media: Iterable[Media]):
		self._media.update(media)
		self._invalidate()

	def remove(self, media: Media) -> bool:
		"""Remove a record if present. Returns whether anything was removed."""
		present = media in self._media
		self._media.discard(media)
		self._invalidate()
		return present

	def clear(self):
		self._media.clear()
		self._invalidate()

	def bulk_load(self, media: Iterable[Media]):
		"""Replace the whole contents with `media`."""
		self._media = set(media)
		self._invalidate()
		logger.info(f"[Catalog] Bulk-loaded {len(self._media)} records")

	def size(self) -> int:
		return len(self._media)

	def as_iterable(self) -> List[Media]:
		"""Snapshot of the current records (unordered)."""
		return list(self._media)

	def copy(self) -> "CatalogStore":
		return CatalogStore(self._media)

	def __len__(self) -> int:
		return len(self._media)

	def __iter__(self) -> Iterator[Media]:
		return iter(self.as_iterable())

	def __contains__(self, media: object) -> bool:
		return media in self._media

	def save_snapshot(self, filepath: Union[str, Path]):
		"""Persist the record set as an opaque pickle blob."""
		filepath = Path(filepath)  # coerce to Path
		filepath.parent.mkdir(parents=True, exist_ok=True)
		with open(filepath, 'wb') as f:
			pickle.dump(self._media, f)
		logger.info(f"[Catalog] Saved {len(self._media)} records to {filepath}")

	@classmethod
	def load_snapshot(cls, filepath: Union[str, Path]) -> "CatalogStore":
		"""Load a store previously written by save_snapshot."""
		filepath = Path(filepath)
		if not filepath.exists():
			raise FileNotFoundError(f"Snapshot file not found: {filepath}")
		with open(filepath, 'rb') as f:
			media = pickle.load(f)
		store = cls(media)
		logger.info(f"[Catalog] Loaded {store.size()} records from {filepath}")
		return store
