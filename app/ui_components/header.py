"""Shared figure header component."""
import streamlit as st

from supplementary_figures.models import FigureView


def render_figure_header(view: FigureView):
    """
    Render the figure title with its position in the gallery.

    Args:
        view: The figure currently selected by the navigation controller
    """
    st.markdown("---")

    col1, col2, col3 = st.columns([6, 1, 1])

    with col1:
        st.subheader(view.descriptor.title)

    with col2:
        st.metric("Figure", view.page_label)

    with col3:
        st.metric("Records", f"{len(view.dataset):,}")

    st.markdown("---")
