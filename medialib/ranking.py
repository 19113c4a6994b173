"""
Ranking module.
Accumulates per-token match counts into a score map and orders matched media by
score, then title, then release year.
"""

import threading  # guards concurrent score increments
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Media


class ScoreMap:
	"""
	Media -> number of token hits.
	A title hit and a category hit for the same token are two separate hits.
	Increments are lock-guarded so parallel token workers never lose updates.
	"""

	def __init__(self):
		self._scores: Dict[Media, int] = {}
		self._lock = threading.Lock()

	def increment_all(self, media: Iterable[Media], amount: int = 1):
		with self._lock:
			for m in media:
				self._scores[m] = self._scores.get(m, 0) + amount

	def get(self, media: Media) -> int:
		return self._scores.get(media, 0)

	def items(self) -> List[Tuple[Media, int]]:
		with self._lock:
			return list(self._scores.items())

	def __len__(self) -> int:
		return len(self._scores)


class Ranker:
	"""
	Orders scored media.
	The primary keys are score (descending), title (ascending, codepoint order) and
	release year (ascending). Records that still tie (same title and year) are ordered
	by kind and source line so the output never depends on set iteration order.
	"""

	@staticmethod
	def sort_key(media: Media, score: int) -> Tuple:
		return (-score, media.title, media.release_year, media.kind, media.to_line())

	def order(self, scores: ScoreMap, limit: Optional[int] = None) -> List[Tuple[Media, int]]:
		"""Return (media, score) pairs best first, truncated to `limit` (None = all)."""
		ranked = sorted(scores.items(), key=lambda pair: self.sort_key(pair[0], pair[1]))
		if limit is None:
			return ranked
		return ranked[:max(0, limit)]

	def best(self, scores: ScoreMap) -> Optional[Tuple[Media, int]]:
		"""Return the single best (media, score) pair, or None if nothing scored."""
		pairs = scores.items()
		if not pairs:
			return None
		return min(pairs, key=lambda pair: self.sort_key(pair[0], pair[1]))
