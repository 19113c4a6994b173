"""
FastAPI server exposing the media library.
Endpoints:
- GET /health: basic health check
- GET /search?q=...&top_k=10: ranked title/category matches with scores
- GET /top?q=...: the single best match
- POST /media {"line": "..."}: parse a source line and add the record
- DELETE /media {"line": "..."}: parse a source line and remove the record

Startup loads a saved catalog snapshot if available (settings.snapshot_path),
otherwise parses the movie and series source files.
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # startup/shutdown hook
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query, Request  # FastAPI primitives
from pydantic import BaseModel  # request/response schema definitions

# Import our internal modules for loading and search
from medialib.data_loader import DataLoader  # reads and parses source files
from medialib.errors import ParseError  # malformed line
from medialib.library import MediaLibrary  # store + search façade
from medialib.media_parser import parse_line  # single-line parser
from medialib.models import Media  # record union
from medialib.settings import get_settings  # env-backed configuration
from medialib.utils.logger import setup_logger  # loguru sink setup

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Pydantic model that describes the shape of a single record in responses
class MediaOut(BaseModel):
	kind: str  # "movie" or "series"
	title: str  # human-readable title
	release_year: int  # release / start year
	categories: List[str]  # display strings, input order
	rating: float  # average rating
	is_ended: Optional[bool] = None  # series only
	end_year: Optional[int] = None  # series only, when ended
	season_lengths: Optional[List[int]] = None  # series only
	line: str  # record rendered in source format


# Pydantic model for a single ranked search item
class SearchResponseItem(BaseModel):
	media: MediaOut  # record metadata
	score: int  # number of token hits


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	query: str  # original query string
	top_k: int  # number of results requested
	elapsed_ms: float  # server-side search time in ms
	results: List[SearchResponseItem]  # ranked items


class MediaLine(BaseModel):
	line: str  # one source-format line


def media_out(m: Media) -> MediaOut:
	"""Convert a record to its response schema, switching on the variant tag."""
	out = MediaOut(
		kind=m.kind,
		title=m.title,
		release_year=m.release_year,
		categories=[c.display for c in m.categories],
		rating=m.rating,
		line=m.to_line(),
	)
	if m.kind == "series":
		out.is_ended = m.is_ended
		out.end_year = m.end_year if m.is_ended else None
		out.season_lengths = list(m.season_lengths)
	return out


def build_library() -> MediaLibrary:
	"""Load the snapshot if present, otherwise parse the source files."""
	settings = get_settings()
	loader = DataLoader(encoding=settings.source_encoding, skip_invalid=settings.skip_invalid_lines)
	if settings.snapshot_path.exists():
		logger.info(f"[API] Loading catalog snapshot from '{settings.snapshot_path}'")
		return MediaLibrary.load(settings.snapshot_path, loader=loader, max_workers=settings.search_workers)
	logger.info("[API] No snapshot found; parsing source files")
	library = MediaLibrary(loader=loader, max_workers=settings.search_workers)
	library.read_files(settings.movies_path, settings.series_path)
	return library


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Initialize the library once, unless one was already attached (tests)."""
	settings = get_settings()
	setup_logger(settings.log_level)
	start = time.time()  # start timer for startup latency
	if getattr(app.state, "library", None) is None:
		app.state.library = build_library()
	app.state.startup_seconds = time.time() - start
	logger.info(f"[API] Startup complete in {app.state.startup_seconds:.2f}s with {app.state.library.size()} records")
	yield


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Media Library API", version="1.0.0", lifespan=lifespan)


def _library(request: Request) -> Optional[MediaLibrary]:
	return getattr(request.app.state, "library", None)


def _parse_body(body: MediaLine) -> Media:
	try:
		media = parse_line(body.line)
	except ParseError as e:
		logger.warning(f"[API] Rejected line: {e}")
		raise HTTPException(status_code=422, detail={"kind": e.kind, "fragment": e.fragment, "message": str(e)})
	if media is None:
		raise HTTPException(status_code=400, detail="Comment lines do not describe a record")
	return media


# Simple health endpoint for readiness checks
@app.get("/health")
async def health(request: Request):
	"""Return minimal health info for liveness/readiness probes."""
	library = _library(request)
	return {
		"status": "ok",  # constant indicator
		"library_ready": library is not None,  # True if library initialized
		"records": library.size() if library is not None else 0,
		"startup_seconds": round(getattr(request.app.state, "startup_seconds", 0.0), 2),
	}


# Main search endpoint that accepts a free-text query
@app.get("/search", response_model=SearchResponse)
async def search(request: Request, q: str = Query(..., description="Words to match against titles and categories"), top_k: Optional[int] = None):
	"""Execute a ranked title/category search."""
	settings = get_settings()
	top_k = top_k if top_k is not None else settings.search_limit
	library = _library(request)
	if library is None:  # library must be ready to serve
		logger.warning("[API] Search requested but library not initialized")
		return SearchResponse(query=q, top_k=top_k, elapsed_ms=0.0, results=[])

	start = time.time()  # start timer
	logger.debug(f"[API] /search q='{q}' top_k={top_k}")
	results = library.search_with_scores(q, limit=top_k, use_cache=settings.use_cache, parallel=settings.parallel_search)
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /search served {len(results)} results in {elapsed_ms:.2f} ms")

	items = [SearchResponseItem(media=media_out(r.media), score=r.score) for r in results]
	return SearchResponse(query=q, top_k=top_k, elapsed_ms=round(elapsed_ms, 2), results=items)


@app.get("/top", response_model=Optional[MediaOut])
async def top(request: Request, q: str = Query(..., description="Words to match against titles and categories")):
	"""Return the best match, or null when nothing matches."""
	settings = get_settings()
	library = _library(request)
	if library is None:
		return None
	best = library.top(q, use_cache=settings.use_cache, parallel=settings.parallel_search)
	return media_out(best) if best is not None else None


@app.post("/media", response_model=MediaOut, status_code=201)
async def add_media(request: Request, body: MediaLine):
	"""Parse a source line and add it to the library (no-op if already present)."""
	library = _library(request)
	if library is None:
		raise HTTPException(status_code=503, detail="Library not initialized")
	media = _parse_body(body)
	library.add(media)
	logger.info(f"[API] Added {media.kind} '{media.title}' ({media.release_year})")
	return media_out(media)


@app.delete("/media")
async def remove_media(request: Request, body: MediaLine):
	"""Parse a source line and remove the matching record."""
	library = _library(request)
	if library is None:
		raise HTTPException(status_code=503, detail="Library not initialized")
	media = _parse_body(body)
	removed = library.remove(media)
	logger.info(f"[API] Remove {media.kind} '{media.title}' -> removed={removed}")
	return {"removed": removed}
