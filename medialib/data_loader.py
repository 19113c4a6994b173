"""
Data loading module.
Reads the movie and series source files and turns their lines into media records.
"""

# Standard libs for typing and paths
from typing import Iterable, List, Optional, Set, Tuple, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our record types and the line parser
from .categories import Category  # tag vocabulary
from .errors import ParseError  # base of the parse error taxonomy
from .media_parser import MediaParser  # single-line parser
from .models import Media  # record union

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles reading source files and parsing their lines into records.
	With `skip_invalid` a malformed line is logged and skipped; otherwise the first
	ParseError aborts the batch.
	"""

	DEFAULT_ENCODING = 'iso-8859-1'  # the source files are Latin-1

	def __init__(self, encoding: str = DEFAULT_ENCODING, skip_invalid: bool = True, parser: Optional[MediaParser] = None):
		self.encoding = encoding  # used for every file read
		self.skip_invalid = skip_invalid  # batch policy for malformed lines
		self.parser = parser or MediaParser()  # stateless, safe to share

	def read_lines(self, filepath: Union[str, Path]) -> List[str]:
		"""Read a source file and split it into lines on '\\n'."""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Media data file not found: {filepath}")

		logger.info(f"[DataLoader] Reading {filepath} ({self.encoding})...")
		text = filepath.read_text(encoding=self.encoding)
		lines = text.split('\n')
		if lines and not lines[-1].strip():
			lines.pop()  # final newline leaves an empty tail, not a record
		return lines

	def parse_lines(self, lines: Iterable[str], source: str = '<lines>') -> List[Media]:
		"""Parse each line; comment lines are dropped, malformed ones skipped or raised."""
		media: List[Media] = []  # accumulator for parsed records
		skipped = 0  # malformed lines skipped
		for line_num, line in enumerate(lines, 1):  # keep track of line number for diagnostics
			try:
				record = self.parser.parse(line)
			except ParseError as e:
				if not self.skip_invalid:
					logger.error(f"[DataLoader] {source}:{line_num}: {e.kind}: {e}")
					raise
				logger.warning(f"[DataLoader] Skipping {source}:{line_num}: {e.kind}: {e}")
				skipped += 1
				continue
			if record is not None:
				media.append(record)

		logger.info(f"[DataLoader] Parsed {len(media)} records from {source} ({skipped} skipped)")
		return media

	def load_media_from_file(self, filepath: Union[str, Path]) -> List[Media]:
		return self.parse_lines(self.read_lines(filepath), source=str(filepath))

	def load_media_from_files(self, *filepaths: Union[str, Path]) -> List[Media]:
		"""Load and concatenate records from several files (e.g. movies then series)."""
		media: List[Media] = []
		for filepath in filepaths:
			media.extend(self.load_media_from_file(filepath))
		return media

	def get_all_categories(self, media: Iterable[Media]) -> List[Category]:
		"""Return every category used in the dataset, sorted by display string."""
		categories: Set[Category] = set()  # unique categories
		for m in media:  # iterate
			categories.update(m.categories)
		return sorted(categories, key=lambda c: c.display)  # sorted output

	def get_year_range(self, media: Iterable[Media]) -> Optional[Tuple[int, int]]:
		"""Return (earliest, latest) release year, or None for an empty dataset."""
		years = [m.release_year for m in media]
		if not years:
			return None
		return (min(years), max(years))
