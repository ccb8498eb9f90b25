"""Previous / numbered / Next navigation buttons."""
from typing import Callable

import streamlit as st

from supplementary_figures.models import FigureView
from supplementary_figures.navigation import NavigationController


def render_pager(nav: NavigationController, on_select: Callable[[FigureView], None]) -> None:
    """
    Render the pagination chrome.

    Each button runs a controller transition in its on_click callback and
    hands the resulting view to `on_select`, so the next script run draws it.
    """

    def _go(transition, *args):
        on_select(transition(*args))

    left, middle, right = st.columns([1, 6, 1])

    with left:
        st.button(
            "◀ Previous",
            on_click=_go,
            args=(nav.previous,),
            disabled=nav.at_first,
            key="nav_previous",
        )

    with middle:
        cols = st.columns(nav.total_figures)
        for i, col in enumerate(cols, start=1):
            with col:
                st.button(
                    str(i),
                    on_click=_go,
                    args=(nav.jump_to, i),
                    type="primary" if i == nav.current_figure else "secondary",
                    key=f"nav_jump_{i}",
                )

    with right:
        st.button(
            "Next ▶",
            on_click=_go,
            args=(nav.next,),
            disabled=nav.at_last,
            key="nav_next",
        )
