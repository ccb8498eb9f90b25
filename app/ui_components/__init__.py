"""UI components for the supplementary figures viewer."""
from .header import render_figure_header
from .figure_panel import render_figure_panel
from .pager import render_pager

__all__ = [
    "render_figure_header",
    "render_figure_panel",
    "render_pager",
]
