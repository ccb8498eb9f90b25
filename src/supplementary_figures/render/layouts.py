"""Hand-assembled layouts that are not standard chart kinds."""

from __future__ import annotations

import numpy as np
import pandas as pd
from matplotlib.axes import Axes

from ..charts import COLORS, ChartSpec
from ..synth import correlation_matrix


def draw_correlation_matrix(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    matrix = correlation_matrix(df, spec.label_field)
    values = matrix.to_numpy(dtype=float)
    # Blue for positive, red for negative coefficients.
    im = ax.imshow(values, cmap="RdBu", vmin=-1.0, vmax=1.0, aspect="equal")
    labels = list(matrix.columns)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=90)
    ax.set_yticks(range(len(labels)))
    ax.set_yticklabels(labels)
    for (row, col), v in np.ndenumerate(values):
        ax.text(col, row, f"{v:.2f}", ha="center", va="center", fontsize=7,
                color="white" if abs(v) > 0.5 else "black")
    label = spec.series[0].label if spec.series else ""
    ax.figure.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label=label)


def draw_tornado(ax: Axes, df: pd.DataFrame, spec: ChartSpec) -> None:
    """Diverging bars around the base case, widest impact on top."""
    low_s, high_s = spec.series[0], spec.series[1]
    name_field = spec.y or "name"
    ordered = df.assign(_impact=(df[high_s.field] - df[low_s.field]).abs())
    ordered = ordered.sort_values("_impact", ascending=True).reset_index(drop=True)

    pos = np.arange(len(ordered))
    ax.barh(pos, ordered[low_s.field], color=low_s.color, label=low_s.label)
    ax.barh(pos, ordered[high_s.field], color=high_s.color, label=high_s.label)
    ax.axvline(0.0, color=COLORS["ink"], linewidth=1.5, label=spec.baseline_label or None)
    ax.set_yticks(pos)
    ax.set_yticklabels(ordered[name_field])

    span = float(max(ordered[high_s.field].abs().max(), ordered[low_s.field].abs().max()))
    ax.set_xlim(-span * 1.6, span * 1.6)
    for i, row in ordered.iterrows():
        ax.text(span * 1.55, i, f"{row[low_s.field]:.1f}B / {row[high_s.field]:.1f}B",
                ha="right", va="center", fontsize=8)
