from typing import Optional

from moviefetch.movie_client import GENERIC_FAILURE_MESSAGE, FetchError, get_movies_payload, post_movie
from moviefetch.schemas.movies import NewMovie
from moviefetch.state import Error, FetchState, StateHolder, Success
from moviefetch.transform import transform_movies
from moviefetch.utils.logger import get_logger

logger = get_logger(__name__)


class FetchController:
    """Owns the fetch lifecycle: Idle -> Loading -> Success | Error."""

    def __init__(self, read_url: Optional[str] = None, holder: Optional[StateHolder] = None):
        self.read_url = read_url
        self.holder = holder or StateHolder()
        self._activated = False

    @property
    def state(self) -> FetchState:
        return self.holder.state

    def fetch_movies(self) -> FetchState:
        """Fetch and normalize the movie list, replacing the current state.

        Errors never propagate: they end up as Error(message). If another fetch started
        after this one, this one's outcome is discarded.
        """
        generation = self.holder.begin()
        logger.info("Fetching movies (generation %s)", generation)
        try:
            payload = get_movies_payload(self.read_url)
            outcome: FetchState = Success(transform_movies(payload))
            logger.info("Fetched %d movies", len(outcome.records))
        except FetchError as e:
            logger.warning("Failed to fetch movies: %s", e)
            outcome = Error(str(e))
        except Exception as e:
            logger.exception("Unexpected failure fetching movies")
            outcome = Error(str(e) or GENERIC_FAILURE_MESSAGE)
        self.holder.resolve(generation, outcome)
        return self.holder.state

    def activate(self) -> Optional[FetchState]:
        """Auto-fetch the first time the owning view becomes active; later calls do nothing."""
        if self._activated:
            return None
        self._activated = True
        return self.fetch_movies()


class SubmissionHandler:
    """Posts new movies to the write endpoint. Does not touch fetch state."""

    def __init__(self, write_url: Optional[str] = None):
        self.write_url = write_url

    def submit_movie(self, movie: NewMovie) -> bool:
        body = movie.model_dump(by_alias=True)
        try:
            data = post_movie(body, self.write_url)
        except FetchError as e:
            logger.warning("Failed to submit movie %r: %s", movie.title, e)
            return False
        logger.debug("Submit response: %s", data)
        logger.info("Submitted movie %r", movie.title)
        return True
