"""Style utilities for consistent UI presentation."""
import streamlit as st

from supplementary_figures.charts import COLORS

GUIDE_ITEMS = [
    "Use Previous/Next buttons or click figure numbers to navigate",
    "All figures generated with realistic simulated data matching paper statistics",
    "Expand \"Synthetic data\" under a figure to inspect the generated records",
]


def section_header(title: str, subtitle: str = ""):
    """Render a styled section header."""
    st.markdown(f"""
<div style="margin: 8px 0 16px 0;">
    <h1 style="margin: 0; color: {COLORS['ink']};">{title}</h1>
    {"<p style='margin: 4px 0 0 0; color: " + COLORS['slate'] + "; font-size: 0.9em;'>" + subtitle + "</p>" if subtitle else ""}
</div>
    """, unsafe_allow_html=True)


def navigation_guide():
    """Render the navigation guide box under the pager."""
    items = "".join(f"<li>{item}</li>" for item in GUIDE_ITEMS)
    st.markdown(f"""
<div style="margin-top: 32px; padding: 12px 16px; background: #eff6ff; border-left: 4px solid {COLORS['blue']};">
    <div style="font-weight: 600; margin-bottom: 6px;">Navigation Guide</div>
    <ul style="font-size: 0.9em; color: {COLORS['ink']}; margin: 0;">{items}</ul>
</div>
    """, unsafe_allow_html=True)
