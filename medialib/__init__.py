"""
medialib: parse movie/series source lines into typed records and search them.
"""

from .categories import Category
from .catalog_store import CatalogStore
from .errors import ParseError
from .library import MediaLibrary, SortBy, SortOrder
from .media_parser import MediaParser, parse_line
from .models import Media, Movie, Series
from .search_engine import SearchEngine, SearchResult, rank, top_match

__all__ = [
	"Category",
	"CatalogStore",
	"ParseError",
	"MediaLibrary",
	"SortBy",
	"SortOrder",
	"MediaParser",
	"parse_line",
	"Media",
	"Movie",
	"Series",
	"SearchEngine",
	"SearchResult",
	"rank",
	"top_match",
]
