import html
import logging

import streamlit as st
import streamlit.components.v1 as components

from breed_search import SearchPanel, breed_display_name
from carousel import ImageCarousel
from config import APP_TITLE, CAROUSEL_HEIGHT, LOG_LEVEL, SEARCH_PLACEHOLDER
from gallery import GalleryApp

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Dog Gallery", page_icon="🐶")

st.markdown(
        """
        <style>
            :root{ --beige: #f7f1e6; }
            html, body, [data-testid='stAppViewContainer'] { background-color: var(--beige) !important; }
            .breed-chip { font-weight: 600; padding-top: 0.4rem; }
        </style>
        """,
        unsafe_allow_html=True,
)

# One gallery, panel and carousel per browser session
if "gallery" not in st.session_state:
    st.session_state.gallery = GalleryApp()
gallery = st.session_state.gallery
if not st.session_state.get("gallery_started"):
    gallery.start()
    st.session_state.gallery_started = True

if "search_panel" not in st.session_state:
    st.session_state.search_panel = SearchPanel(gallery.catalog, gallery.selected_breeds, gallery.dispatch)
panel = st.session_state.search_panel
panel.refresh(gallery.catalog, gallery.selected_breeds)

if "carousel" not in st.session_state:
    st.session_state.carousel = ImageCarousel()
carousel = st.session_state.carousel


# Widget callbacks run before the script reruns, so they may reset the input
def _on_input_change():
    panel.update_input(st.session_state.dog_input)


def _on_select(breed):
    panel.select_suggestion(breed)
    st.session_state.dog_input = panel.input_text


def _on_remove(breed):
    panel.remove_breed(breed)


st.title(APP_TITLE)

with st.container(border=True):
    col_input, col_button = st.columns([4, 1], vertical_alignment="bottom")
    with col_input:
        st.text_input(
            "Search Dogs",
            key="dog_input",
            placeholder=SEARCH_PLACEHOLDER,
            on_change=_on_input_change,
            label_visibility="collapsed",
        )
    with col_button:
        st.button("Search", key="search_button", on_click=panel.manual_search)

    # Suggestions dropdown
    for suggestion in panel.suggestions:
        st.button(suggestion, key=f"suggest_{suggestion}", on_click=_on_select, args=(suggestion,))

with st.container(border=True):
    st.markdown("#### Selected Breeds:")
    for breed in gallery.selected_breeds:
        col_name, col_remove = st.columns([4, 1])
        col_name.markdown(
            f"<div class='breed-chip'>{html.escape(breed_display_name(breed, gallery.catalog))}</div>",
            unsafe_allow_html=True,
        )
        col_remove.button("Remove", key=f"remove_{breed}", on_click=_on_remove, args=(breed,))

carousel.sync(gallery.images)
if carousel.markup:
    components.html(carousel.markup, height=CAROUSEL_HEIGHT)
else:
    st.info("No dog pictures to show yet.")
