from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

COLORS = {
    "blue": "#3b82f6",
    "green": "#10b981",
    "amber": "#f59e0b",
    "red": "#ef4444",
    "violet": "#8b5cf6",
    "indigo": "#6366f1",
    "slate": "#94a3b8",
    "ink": "#1f2937",
}


class ChartKind(str, Enum):
    """
    Chart kinds the render adapter must support.

    CUSTOM covers hand-assembled grids (correlation matrix, tornado diagram);
    the concrete arrangement is named by ChartSpec.layout.
    """
    BAR = "bar"
    HORIZONTAL_BAR = "horizontal_bar"
    SCATTER = "scatter"
    LINE = "line"
    STACKED_AREA = "stacked_area"
    CUSTOM = "custom"


class CustomLayout(str, Enum):
    CORRELATION_MATRIX = "correlation_matrix"
    TORNADO = "tornado"


@dataclass(frozen=True)
class Series:
    field: str
    label: str
    color: str = COLORS["blue"]
    dashed: bool = False


@dataclass(frozen=True)
class Category:
    """One value of a categorical field and how it is drawn."""
    value: str
    label: str
    color: str


@dataclass(frozen=True)
class ColorBand:
    """Colour for the values that `ChartSpec.band_of` maps to `key`."""
    key: str
    label: str
    color: str


@dataclass(frozen=True)
class ChartSpec:
    """Declarative binding of dataset fields to visual channels."""

    kind: ChartKind
    x: Optional[str] = None
    y: Optional[str] = None
    series: Tuple[Series, ...] = ()
    x_label: str = ""
    y_label: str = ""
    category: Optional[str] = None
    categories: Tuple[Category, ...] = ()
    color_field: Optional[str] = None
    color_bands: Tuple[ColorBand, ...] = ()
    band_of: Optional[Callable[[float], str]] = None
    intensity_field: Optional[str] = None
    label_field: Optional[str] = None
    error_field: Optional[str] = None
    band: Optional[Tuple[str, str]] = None
    reference_y: Optional[float] = None
    layout: Optional[CustomLayout] = None
    baseline_label: str = ""

    def fields(self) -> list[str]:
        """Every dataset field this spec reads, in first-use order."""
        out: list[str] = []
        candidates = [self.x, self.y, *[s.field for s in self.series], self.category,
                      self.color_field, self.intensity_field, self.error_field, self.label_field]
        if self.band:
            candidates.extend(self.band)
        for f in candidates:
            if f and f not in out:
                out.append(f)
        return out

    def color_for(self, value: float) -> str:
        key = self.band_of(value) if self.band_of else None
        for band in self.color_bands:
            if band.key == key:
                return band.color
        return COLORS["blue"]

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "layout": self.layout.value if self.layout else None,
            "x": self.x,
            "y": self.y,
            "x_label": self.x_label,
            "y_label": self.y_label,
            "series": [s.field for s in self.series],
            "category": self.category,
            "fields": self.fields(),
        }
