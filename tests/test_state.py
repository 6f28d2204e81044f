from moviefetch.schemas.movies import MovieRecord
from moviefetch.state import (
    EMPTY_MESSAGE,
    LOADING_MESSAGE,
    Error,
    Idle,
    Loading,
    StateHolder,
    Success,
    select_view,
)

HOPE = MovieRecord(id="4", title="A New Hope", openingText="...", releaseDate="1977-05-25")


class TestStateHolder:
    def test_starts_idle(self):
        holder = StateHolder()

        assert holder.state == Idle()
        assert holder.is_loading is False

    def test_begin_enters_loading_and_clears_error(self):
        holder = StateHolder()
        gen = holder.begin()
        holder.resolve(gen, Error("boom"))

        holder.begin()

        assert holder.state == Loading()
        assert holder.is_loading is True

    def test_resolve_latest_generation(self):
        holder = StateHolder()
        gen = holder.begin()

        assert holder.resolve(gen, Success([HOPE])) is True
        assert holder.state == Success([HOPE])
        assert holder.is_loading is False

    def test_stale_generation_is_dropped(self):
        holder = StateHolder()
        first = holder.begin()
        second = holder.begin()

        assert holder.resolve(second, Success([HOPE])) is True
        assert holder.resolve(first, Error("late failure")) is False
        assert holder.state == Success([HOPE])

    def test_listeners_see_each_transition(self):
        holder = StateHolder()
        seen = []
        unsubscribe = holder.subscribe(seen.append)

        gen = holder.begin()
        holder.resolve(gen, Success([]))
        unsubscribe()
        holder.begin()

        assert seen == [Loading(), Success([])]

    def test_failing_listener_does_not_block_others(self):
        holder = StateHolder()
        seen = []

        def broken_listener(state):
            raise RuntimeError("listener blew up")

        holder.subscribe(broken_listener)
        holder.subscribe(seen.append)

        gen = holder.begin()
        assert holder.resolve(gen, Success([HOPE])) is True

        assert seen == [Loading(), Success([HOPE])]
        assert holder.state == Success([HOPE])

    def test_unsubscribe_twice_is_harmless(self):
        holder = StateHolder()
        seen = []
        unsubscribe = holder.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        holder.begin()

        assert seen == []

    def test_listeners_not_called_for_stale_results(self):
        holder = StateHolder()
        first = holder.begin()
        holder.begin()
        seen = []
        holder.subscribe(seen.append)

        holder.resolve(first, Success([HOPE]))

        assert seen == []


class TestSelectView:
    def test_loading(self):
        view = select_view(Loading())
        assert view.kind == "loading"
        assert view.message == LOADING_MESSAGE

    def test_error(self):
        view = select_view(Error("Something went wrong"))
        assert view.kind == "error"
        assert view.message == "Something went wrong"

    def test_list(self):
        view = select_view(Success([HOPE]))
        assert view.kind == "list"
        assert view.records == [HOPE]

    def test_empty_success_shows_empty_message(self):
        view = select_view(Success([]))
        assert view.kind == "empty"
        assert view.message == EMPTY_MESSAGE

    def test_idle_shows_empty_message(self):
        assert select_view(Idle()).kind == "empty"
