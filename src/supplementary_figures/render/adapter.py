from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.patches import Patch

from ..charts import COLORS, ChartKind, ChartSpec, CustomLayout
from ..models import FigureView
from ._util import save_matplotlib, tick_rotation
from .layouts import draw_correlation_matrix, draw_tornado

logger = logging.getLogger(__name__)


class UnsupportedChart(ValueError):
    """Raised when a chart spec cannot be drawn from the given dataset."""


def _draw_bar(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    labels = [str(v) for v in df[spec.x]]
    idx = np.arange(len(labels))
    n = max(1, len(spec.series))
    width = 0.8 / n
    for k, s in enumerate(spec.series):
        offset = (k - (n - 1) / 2) * width
        yerr = df[spec.error_field] if spec.error_field else None
        ax.bar(idx + offset, df[s.field], width, color=s.color, label=s.label, yerr=yerr, capsize=3 if yerr is not None else 0)
    rotation, ha = tick_rotation(labels)
    ax.set_xticks(idx)
    ax.set_xticklabels(labels, rotation=rotation, ha=ha)
    if n > 1:
        ax.legend()


def _draw_horizontal_bar(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    labels = [str(v) for v in df[spec.y]]
    idx = np.arange(len(labels))
    n = max(1, len(spec.series))
    height = 0.8 / n
    for k, s in enumerate(spec.series):
        offset = (k - (n - 1) / 2) * height
        if spec.intensity_field:
            color = [to_rgba(s.color, min(1.0, 0.4 + float(v))) for v in df[spec.intensity_field]]
        else:
            color = s.color
        xerr = df[spec.error_field] if spec.error_field else None
        ax.barh(idx + offset, df[s.field], height, color=color, label=s.label, xerr=xerr, capsize=3 if xerr is not None else 0)
    ax.set_yticks(idx)
    ax.set_yticklabels(labels)
    # First record on top, as listed.
    ax.invert_yaxis()
    if n > 1:
        ax.legend()


def _draw_scatter(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    y_field = spec.y or spec.series[0].field
    if spec.category:
        for c in spec.categories:
            sub = df[df[spec.category] == c.value]
            ax.scatter(sub[spec.x], sub[y_field], color=c.color, label=c.label, s=18)
        ax.legend()
    elif spec.color_field:
        colors = [spec.color_for(float(v)) for v in df[spec.color_field]]
        ax.scatter(df[spec.x], df[y_field], c=colors, s=18)
        ax.legend(handles=[Patch(color=b.color, label=b.label) for b in spec.color_bands])
    else:
        s = spec.series[0]
        ax.scatter(df[spec.x], df[y_field], color=s.color, alpha=0.5, label=s.label, s=14)
    if spec.reference_y is not None:
        ax.axhline(spec.reference_y, color=COLORS["red"], linestyle="--", linewidth=1)


def _draw_line(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    if spec.band:
        lower, upper = spec.band
        ax.fill_between(df[spec.x], df[lower], df[upper], color=COLORS["blue"], alpha=0.1, label="Prediction interval")
    for s in spec.series:
        ax.plot(df[spec.x], df[s.field], color=s.color, linestyle="--" if s.dashed else "-", label=s.label, linewidth=1.8)
    if len(spec.series) > 1 or spec.band:
        ax.legend()


def _draw_stacked_area(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    ax.stackplot(
        df[spec.x],
        *[df[s.field] for s in spec.series],
        labels=[s.label for s in spec.series],
        colors=[s.color for s in spec.series],
        alpha=0.6,
    )
    ax.legend(loc="upper left")


def _draw_custom(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    draw = _LAYOUTS.get(spec.layout) if spec.layout else None
    if draw is None:
        raise UnsupportedChart(f"Unknown custom layout {spec.layout!r}.")
    draw(ax, df, spec)
    if spec.layout == CustomLayout.TORNADO:
        ax.legend(loc="lower right")


_Drawer = Callable[[Axes, pd.DataFrame, ChartSpec], None]

_RENDERERS: dict[ChartKind, _Drawer] = {
    ChartKind.BAR: _draw_bar,
    ChartKind.HORIZONTAL_BAR: _draw_horizontal_bar,
    ChartKind.SCATTER: _draw_scatter,
    ChartKind.LINE: _draw_line,
    ChartKind.STACKED_AREA: _draw_stacked_area,
    ChartKind.CUSTOM: _draw_custom,
}

_LAYOUTS: dict[CustomLayout, _Drawer] = {
    CustomLayout.CORRELATION_MATRIX: draw_correlation_matrix,
    CustomLayout.TORNADO: draw_tornado,
}


def check_fields(df: pd.DataFrame, spec: ChartSpec) -> None:
    missing = [f for f in spec.fields() if f not in df.columns]
    if missing:
        raise UnsupportedChart(f"Dataset is missing fields required by the chart: {missing}")


def render_figure(
    df: pd.DataFrame,
    spec: ChartSpec,
    *,
    title: Optional[str] = None,
    figsize: tuple[float, float] = (10, 5),
) -> Figure:
    """Draw `df` according to `spec` and return the matplotlib Figure."""
    draw = _RENDERERS.get(spec.kind)
    if draw is None:
        raise UnsupportedChart(f"Unsupported chart kind {spec.kind!r}.")
    check_fields(df, spec)

    if spec.layout == CustomLayout.CORRELATION_MATRIX:
        figsize = (8, 7)
    fig, ax = plt.subplots(figsize=figsize)
    try:
        draw(ax, df, spec)
    except Exception:
        plt.close(fig)
        raise

    if spec.kind != ChartKind.CUSTOM or spec.layout == CustomLayout.TORNADO:
        ax.grid(True, linestyle="--", alpha=0.4)
    if spec.x_label:
        ax.set_xlabel(spec.x_label)
    if spec.y_label:
        ax.set_ylabel(spec.y_label)
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig


def render_view(view: FigureView) -> Figure:
    d = view.descriptor
    return render_figure(view.dataset, d.chart_spec, title=d.title)


def render_to_file(view: FigureView, path: Path, *, dpi: int = 120) -> Path:
    fig = render_view(view)
    out = save_matplotlib(fig, Path(path), dpi=dpi)
    logger.info("Wrote figure %d to %s", view.figure_id, out)
    return out
