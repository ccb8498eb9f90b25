"""Figure rendering for the gallery viewer."""
import matplotlib.pyplot as plt
import streamlit as st

from supplementary_figures.models import FigureView
from supplementary_figures.render import render_view


def render_figure_panel(view: FigureView) -> None:
    """
    Draw the chart for the selected figure, its caption, and the raw records.

    Args:
        view: Descriptor and freshly generated dataset for this render pass
    """
    fig = render_view(view)
    st.pyplot(fig, clear_figure=True)
    plt.close(fig)

    st.markdown(f"*{view.descriptor.caption}*")

    with st.expander("Synthetic data"):
        st.caption(
            f"{len(view.dataset)} records generated for this view. "
            "Data is regenerated every time the figure is shown."
        )
        st.dataframe(view.dataset, width="stretch", hide_index=True)
