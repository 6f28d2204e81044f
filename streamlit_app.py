"""
Streamlit Web App for moviefetch
Features:
- Fetch the movie list (automatically on first load and on demand)
- Loading / error / empty states
- Add a movie via a form that posts to the backend
"""
import streamlit as st

from moviefetch.controller import FetchController, SubmissionHandler
from moviefetch.schemas.movies import MovieRecord, NewMovie
from moviefetch.state import select_view
from moviefetch.utils.helpers import format_release_date

st.set_page_config(
    page_title="Movies",
    page_icon="🎬",
    layout="centered",
    menu_items={
        'About': "# moviefetch\nFetch and add movies"
    }
)

st.markdown("""
<style>
    /* hide footer only */
    footer {
        visibility: hidden;
    }

    /* full width buttons */
    .stButton>button {
        width: 100%;
    }
</style>
""", unsafe_allow_html=True)


def get_controller() -> FetchController:
    """Return the session's FetchController, creating it on first use."""
    if 'fetch_controller' not in st.session_state:
        st.session_state['fetch_controller'] = FetchController()
    return st.session_state['fetch_controller']


def get_submitter() -> SubmissionHandler:
    if 'submission_handler' not in st.session_state:
        st.session_state['submission_handler'] = SubmissionHandler()
    return st.session_state['submission_handler']


def render_movie(movie: MovieRecord):
    with st.container():
        st.subheader(movie.title)
        st.caption(f"Released: {format_release_date(movie.release_date)}")
        st.write(movie.opening_text)
        st.markdown("---")


def show_add_movie_form():
    """Form for adding a movie. The list is not refreshed after a successful add."""
    st.header("➕ Add Movie")
    with st.form("add_movie", clear_on_submit=True):
        title = st.text_input("Title")
        opening_text = st.text_area("Opening Text", height=150)
        release_date = st.text_input("Release Date", placeholder="YYYY-MM-DD")
        submitted = st.form_submit_button("Add Movie", type="primary")

    if submitted:
        movie = NewMovie(title=title, openingText=opening_text, releaseDate=release_date)
        if get_submitter().submit_movie(movie):
            st.success(f"✅ Added {movie.title or 'movie'}")
        else:
            st.warning("Could not add the movie. Check logs for details.")


def show_movies_section(controller: FetchController):
    st.header("🎬 Movies")

    if st.button("🔄 Fetch Movies", type="primary"):
        with st.spinner("Loading..."):
            controller.fetch_movies()

    view = select_view(controller.state)
    if view.kind == "loading":
        st.info(view.message)
    elif view.kind == "error":
        st.error(view.message)
    elif view.kind == "list":
        st.write(f"**Showing {len(view.records)} movies**")
        st.markdown("---")
        for movie in view.records:
            render_movie(movie)
    else:
        st.info(view.message)


def main():
    """Main application entry point."""
    controller = get_controller()
    with st.spinner("Loading..."):
        controller.activate()

    show_add_movie_form()
    st.markdown("---")
    show_movies_section(controller)


if __name__ == "__main__":
    main()
