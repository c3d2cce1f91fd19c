"""ABOUTME: Streamlit application for the Pokemon type analyzer.
ABOUTME: Takes a Pokemon name and shows what it is weak against and resistant to."""

import streamlit as st

from typeanalyzer.app.components import render_multiplier_list, render_type_badges
from typeanalyzer.app.state import Failed, Loading, QueryMachine, Success, run_query
from typeanalyzer.config import DisplayConfig, load_display_config

st.set_page_config(
    page_title="Pokemon Type Analyzer",
    page_icon=":shield:",
    layout="centered",
)

st.title("Pokemon Type Analyzer")
st.caption("Discover what types your Pokemon is strong and weak against")


@st.cache_resource
def _get_display_config() -> DisplayConfig:
    return load_display_config()


try:
    display_config = _get_display_config()
except (FileNotFoundError, ValueError) as e:
    st.error(f"Could not load type colors: {e}")
    st.stop()

if "query_machine" not in st.session_state:
    st.session_state.query_machine = QueryMachine()

machine: QueryMachine = st.session_state.query_machine

with st.form("search"):
    cols = st.columns([0.8, 0.2])
    pokemon_name = cols[0].text_input(
        "Pokemon name",
        placeholder="Enter Pokemon name (e.g., pikachu, charizard)",
        label_visibility="collapsed",
    )
    submitted = cols[1].form_submit_button("Search", use_container_width=True, disabled=machine.is_loading)

if submitted:
    with st.spinner("Searching..."):
        run_query(machine, pokemon_name)

state = machine.state

if isinstance(state, Failed):
    st.error(state.message, icon=":material/error:")
    if st.button("Dismiss"):
        machine.dismiss()
        st.rerun()

elif isinstance(state, Loading):
    st.info("Searching...")

elif isinstance(state, Success):
    analysis = state.analysis
    header_cols = st.columns([0.3, 0.7])
    if analysis.sprite:
        header_cols[0].image(analysis.sprite, width=128)
    with header_cols[1]:
        st.header(analysis.name.capitalize())
        render_type_badges(analysis.types, display_config)

    st.divider()

    weak_col, resist_col = st.columns(2)
    with weak_col:
        render_multiplier_list(
            ":material/bolt: Weak Against",
            analysis.report.weaknesses,
            display_config,
            "No weaknesses found!",
        )
    with resist_col:
        render_multiplier_list(
            ":material/shield: Resistant To",
            analysis.report.resistances,
            display_config,
            "No resistances found!",
        )
