from .adapter import UnsupportedChart, check_fields, render_figure, render_to_file, render_view
from ._util import save_matplotlib

__all__ = [
    "UnsupportedChart",
    "check_fields",
    "render_figure",
    "render_to_file",
    "render_view",
    "save_matplotlib",
]
