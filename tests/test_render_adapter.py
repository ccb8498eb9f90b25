from __future__ import annotations

import random
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import pytest
from matplotlib.figure import Figure

from supplementary_figures.charts import ChartKind, ChartSpec, Series
from supplementary_figures.navigation import NavigationController
from supplementary_figures.render import UnsupportedChart, render_figure, render_to_file, render_view


@pytest.mark.parametrize("figure_id", range(1, 16))
def test_every_figure_renders(rng: random.Random, figure_id: int) -> None:
    view = NavigationController(rng=rng).jump_to(figure_id)
    fig = render_view(view)
    try:
        assert isinstance(fig, Figure)
        ax = fig.axes[0]
        assert ax.get_title() == view.descriptor.title
    finally:
        plt.close(fig)


def test_missing_field_is_rejected() -> None:
    spec = ChartSpec(kind=ChartKind.LINE, x="epoch", series=(Series("trainLoss", "Train"),))
    df = pd.DataFrame({"epoch": [0, 1], "other": [1.0, 2.0]})
    with pytest.raises(UnsupportedChart) as ei:
        render_figure(df, spec)
    assert "trainLoss" in str(ei.value)


def test_correlation_labels_are_a_required_field(rng: random.Random) -> None:
    view = NavigationController(rng=rng).jump_to(3)
    df = view.dataset.drop(columns=["xLabel"])
    with pytest.raises(UnsupportedChart) as ei:
        render_figure(df, view.descriptor.chart_spec)
    assert "xLabel" in str(ei.value)


def test_custom_without_layout_is_rejected() -> None:
    spec = ChartSpec(kind=ChartKind.CUSTOM, x="x")
    with pytest.raises(UnsupportedChart):
        render_figure(pd.DataFrame({"x": [1]}), spec)


def test_scatter_threshold_colours(rng: random.Random) -> None:
    view = NavigationController(rng=rng).jump_to(10)
    spec = view.descriptor.chart_spec
    assert [b.key for b in spec.color_bands] == ["low", "medium", "high"]
    assert spec.color_for(9.99) == spec.color_bands[0].color
    assert spec.color_for(10.0) == spec.color_bands[1].color
    assert spec.color_for(20.0) == spec.color_bands[2].color


def test_tornado_bars_sorted_by_impact(rng: random.Random) -> None:
    view = NavigationController(rng=rng).jump_to(12)
    fig = render_view(view)
    try:
        labels = [t.get_text() for t in fig.axes[0].get_yticklabels()]
        # barh draws bottom-up, so the widest impact is the last tick.
        assert labels[-1] == "Demand Growth"
        assert labels[0] == "Discount Rate"
    finally:
        plt.close(fig)


def test_render_to_file(tmp_path: Path, rng: random.Random) -> None:
    view = NavigationController(rng=rng).jump_to(4)
    out = render_to_file(view, tmp_path / "nested" / "fig4.png", dpi=50)
    assert out.exists()
    assert out.stat().st_size > 0
