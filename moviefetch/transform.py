"""Normalize read-endpoint payloads into MovieRecord lists.

Two payload shapes are accepted:
  - {"results": [{episode_id, title, opening_crawl, release_date}, ...]}
  - {"<generated key>": {title, openingText, releaseDate}, ...}
A null body is treated as an empty collection.
"""
from typing import Any, List

from pydantic import ValidationError

from moviefetch.movie_client import FetchError
from moviefetch.schemas.movies import FilmResult, MovieRecord, StoredMovie
from moviefetch.utils.logger import get_logger

logger = get_logger(__name__)


class PayloadError(FetchError):
    pass


def _from_results(results: List[Any]) -> List[MovieRecord]:
    movies = []
    for idx, item in enumerate(results):
        try:
            film = FilmResult.model_validate(item)
        except ValidationError as e:
            raise PayloadError(f"Malformed movie at results[{idx}]: {e.error_count()} invalid field(s)") from e
        movies.append(
            MovieRecord(
                id=str(film.episode_id),
                title=film.title,
                openingText=film.opening_crawl,
                releaseDate=film.release_date,
            )
        )
    return movies


def _from_keyed(collection: dict) -> List[MovieRecord]:
    movies = []
    for key, item in collection.items():
        try:
            stored = StoredMovie.model_validate(item)
        except ValidationError as e:
            raise PayloadError(f"Malformed movie under key {key!r}: {e.error_count()} invalid field(s)") from e
        movies.append(
            MovieRecord(
                id=str(key),
                title=stored.title,
                openingText=stored.opening_text,
                releaseDate=stored.release_date,
            )
        )
    return movies


def transform_movies(payload: Any) -> List[MovieRecord]:
    """Map an upstream payload to records. Raises PayloadError when the shape is not recognized."""
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise PayloadError(f"Expected a JSON object, got {type(payload).__name__}")

    # a keyed collection may legitimately hold a movie under the key "results"
    if isinstance(payload.get("results"), list):
        movies = _from_results(payload["results"])
    else:
        movies = _from_keyed(payload)

    logger.debug("Transformed %d movies", len(movies))
    return movies
