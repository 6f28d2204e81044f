"""Fetch lifecycle state, the lock-guarded holder for it, and the display policy."""
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from moviefetch.schemas.movies import MovieRecord
from moviefetch.utils.logger import get_logger

logger = get_logger(__name__)

LOADING_MESSAGE = "Loading..."
EMPTY_MESSAGE = "No movies found."


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    records: List[MovieRecord] = field(default_factory=list)


@dataclass(frozen=True)
class Error:
    message: str


FetchState = Union[Idle, Loading, Success, Error]
Listener = Callable[[FetchState], None]


class StateHolder:
    """Single holder of the current FetchState.

    Every fetch calls begin() to get a generation number; only the latest generation
    may resolve the state, so a slow earlier request cannot overwrite a newer one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state: FetchState = Idle()
        self._generation = 0
        self._listeners: List[Listener] = []

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state = Loading()
        self._notify(Loading())
        return generation

    def resolve(self, generation: int, state: FetchState) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale result for generation %s (latest %s)", generation, self._generation)
                return False
            self._state = state
        self._notify(state)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: FetchState) -> None:
        """Call listeners outside the lock; a failing listener is logged and does not block the others."""
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)


@dataclass(frozen=True)
class View:
    kind: str  # "loading" | "error" | "list" | "empty"
    message: Optional[str] = None
    records: List[MovieRecord] = field(default_factory=list)


def select_view(state: FetchState) -> View:
    """Loading beats Error, Error beats the list, and an empty list shows the empty message."""
    if isinstance(state, Loading):
        return View("loading", LOADING_MESSAGE)
    if isinstance(state, Error):
        return View("error", state.message)
    if isinstance(state, Success) and state.records:
        return View("list", records=list(state.records))
    return View("empty", EMPTY_MESSAGE)
