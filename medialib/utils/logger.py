"""Logging configuration for the media library."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(level: str = "INFO", log_file: Optional[str] = None) -> None:
	"""
	Replace loguru's default sink with a console sink at `level`.
	When `log_file` is given, also write to a rotating file there.
	"""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())

	if log_file:
		log_path = Path(log_file)
		log_path.parent.mkdir(parents=True, exist_ok=True)
		logger.add(str(log_path), level=level.upper(), rotation="10 MB", retention=3, encoding="utf-8")
