from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .charts import ChartSpec
from .synth import Generator


@dataclass(frozen=True)
class FigureDescriptor:
    """
    One entry of the gallery.

    figure_id: 1-based position in the gallery
    title / caption: text shown above and below the chart
    generator: produces a fresh dataset on every call
    chart_spec: how dataset fields map onto the chart
    """
    figure_id: int
    title: str
    caption: str
    generator: Generator
    chart_spec: ChartSpec

    def generate(self, rng: Optional[random.Random] = None) -> pd.DataFrame:
        return self.generator(rng)


@dataclass(frozen=True)
class FigureView:
    """A descriptor paired with the dataset generated for this render pass."""
    descriptor: FigureDescriptor
    dataset: pd.DataFrame
    total_figures: int

    @property
    def figure_id(self) -> int:
        return self.descriptor.figure_id

    @property
    def page_label(self) -> str:
        return f"{self.figure_id} / {self.total_figures}"
