"""
Build and persist the catalog snapshot.

This script:
1) Reads the movie and series source files
2) Parses every line into a record (malformed lines are skipped or abort, per settings)
3) Saves the deduplicated record set to settings.snapshot_path

Usage:
    python -m scripts.build_snapshot

After running this once, the API loads the saved snapshot instead of reparsing.
"""

import time  # measure step timings

from loguru import logger  # console logging

from medialib.data_loader import DataLoader  # file reading + parsing
from medialib.library import MediaLibrary  # store façade
from medialib.settings import get_settings  # env-backed configuration
from medialib.utils.logger import setup_logger  # loguru sink setup


def main():
	settings = get_settings()
	setup_logger(settings.log_level)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Build Catalog Snapshot")
	logger.info("=" * 60)

	# 1) Load data
	logger.info("[1/2] Reading and parsing source files...")
	t0 = time.time()  # start timer
	loader = DataLoader(encoding=settings.source_encoding, skip_invalid=settings.skip_invalid_lines)
	library = MediaLibrary.from_files(settings.movies_path, settings.series_path, loader=loader)
	categories = loader.get_all_categories(library)
	year_range = loader.get_year_range(library)
	logger.info(f"[OK] {library.size()} unique records in {time.time() - t0:.2f}s")
	logger.info(f"[OK] {len(categories)} categories in use; years {year_range}")

	# 2) Save snapshot
	logger.info("[2/2] Saving snapshot...")
	library.save(settings.snapshot_path)
	logger.info(f"[OK] Saved to {settings.snapshot_path}")
	logger.info("=" * 60)


if __name__ == '__main__':
	main()  # invoke builder
