# therapy_directory/web/streamlit_app.py
# Run with: streamlit run therapy_directory/web/streamlit_app.py

import asyncio
from typing import List

import pandas as pd
import streamlit as st

from therapy_directory.loading.state import DirectoryState, load_directory
from therapy_directory.logging.setup import setup_logging
from therapy_directory.models.entry import DirectoryEntry
from therapy_directory.models.enums import LoadState
from therapy_directory.models.view import FilterState

st.set_page_config(page_title="Therapy Directory", page_icon="🩺", layout="wide")


# ==========================
# Data loading
# ==========================
def get_directory() -> DirectoryState:
    """Loads the directory once per browser session."""
    ss = st.session_state
    if "directory" not in ss:
        setup_logging()
        with st.spinner("Loading therapist directory..."):
            ss.directory = asyncio.run(load_directory())
    return ss.directory


def entries_frame(entries: List[DirectoryEntry]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name": entry.name,
                "Notes": entry.notes or "",
                "Specialties": ", ".join(entry.specialties),
                "Location": entry.location,
                "Address": entry.address,
            }
            for entry in entries
        ],
        columns=["Name", "Notes", "Specialties", "Location", "Address"],
    )


# ==========================
# UI pieces
# ==========================
def render_filters(specialty_options: List[str], location_options: List[str]) -> FilterState:
    col_search, col_specialty, col_location = st.columns(3)
    with col_search:
        search = st.text_input("Search", placeholder="Search therapists...", label_visibility="collapsed")
    with col_specialty:
        specialty = st.selectbox("Specialty", specialty_options, label_visibility="collapsed")
    with col_location:
        location = st.selectbox("Location", location_options, label_visibility="collapsed")
    return FilterState(search=search, specialty=specialty, location=location)


def main():
    st.title("Therapy Directory")

    directory = get_directory()
    if directory.state == LoadState.ERROR:
        st.error(directory.error)
        return

    # Options come from the full dataset; the filters never narrow them
    options = directory.view()
    filters = render_filters(options.specialty_options, options.location_options)
    view = directory.view(filters)

    st.dataframe(entries_frame(view.visible_entries), hide_index=True, width="stretch")
    st.caption(f"{len(view.visible_entries)} of {len(directory.entries)} therapists shown")


main()
