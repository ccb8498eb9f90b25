"""Supplementary Figures - Gallery Viewer UI"""
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from supplementary_figures.catalog import REPORT_TITLE
from supplementary_figures.config import load_settings
from supplementary_figures.logging_config import setup_logging
from supplementary_figures.models import FigureView
from supplementary_figures.navigation import NavigationController
from supplementary_figures.rng import make_rng

from style_utils import navigation_guide, section_header
from ui_components import render_figure_header, render_figure_panel, render_pager

st.set_page_config(
    page_title="Supplementary Figures",
    page_icon="📊",
    layout="wide"
)

NAV_KEY = "navigation"
VIEW_KEY = "figure_view"


def get_controller() -> NavigationController:
    """One controller per browser session, created on first run."""
    if NAV_KEY not in st.session_state:
        settings = load_settings()
        setup_logging(settings.log_level)
        st.session_state[NAV_KEY] = NavigationController(rng=make_rng(settings.seed))
    return st.session_state[NAV_KEY]


def store_view(view: FigureView) -> None:
    st.session_state[VIEW_KEY] = view


def current_view(nav: NavigationController) -> FigureView:
    """
    The view produced by this run's button transition, if any.

    Reruns without a transition (widget changes, first load) regenerate the
    current figure; views are consumed once and never reused.
    """
    view = st.session_state.pop(VIEW_KEY, None)
    if view is None:
        view = nav.refresh()
    return view


def main():
    section_header("Supplementary Figures", REPORT_TITLE)

    nav = get_controller()
    view = current_view(nav)

    render_figure_header(view)
    render_figure_panel(view)

    render_pager(nav, on_select=store_view)
    navigation_guide()


if __name__ == "__main__":
    main()
