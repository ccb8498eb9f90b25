from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .catalog import FIGURES
from .models import FigureDescriptor


class FigureNotFound(KeyError):
    """Raised when a figure id outside the gallery range is looked up."""


class FigureRegistry:
    """
    Read-only, ordered table of figure descriptors keyed by id.

    `lookup` expects an id in [1, total_figures]. The navigation controller
    clamps before calling, so FigureNotFound marks a programming error.
    """

    def __init__(self, figures: Optional[Iterable[FigureDescriptor]] = None) -> None:
        self._figures: dict[int, FigureDescriptor] = {}
        for fig in figures if figures is not None else FIGURES:
            if fig.figure_id in self._figures:
                raise ValueError(f"Duplicate figure id {fig.figure_id}.")
            self._figures[fig.figure_id] = fig
        expected = list(range(1, len(self._figures) + 1))
        if sorted(self._figures) != expected:
            raise ValueError("Figure ids must be contiguous starting at 1.")

    @property
    def total_figures(self) -> int:
        return len(self._figures)

    def lookup(self, figure_id: int) -> FigureDescriptor:
        try:
            return self._figures[figure_id]
        except KeyError as exc:
            raise FigureNotFound(self._unknown_figure_msg(figure_id)) from exc

    def list_figures(self) -> list[int]:
        return sorted(self._figures)

    def describe(self, figure_id: int) -> dict[str, object]:
        """JSON-safe metadata for one figure (no dataset is generated)."""
        fig = self.lookup(figure_id)
        return {
            "id": fig.figure_id,
            "title": fig.title,
            "caption": fig.caption,
            "generator": fig.generator.__name__,
            "chart": fig.chart_spec.to_dict(),
        }

    def __iter__(self) -> Iterator[FigureDescriptor]:
        for figure_id in self.list_figures():
            yield self._figures[figure_id]

    def __len__(self) -> int:
        return len(self._figures)

    def _unknown_figure_msg(self, figure_id: object) -> str:
        return f"Unknown figure {figure_id!r}. Valid figures: 1-{self.total_figures}."


_DEFAULT_REGISTRY: Optional[FigureRegistry] = None


def get_registry() -> FigureRegistry:
    """Shared registry over the built-in catalog, built on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = FigureRegistry()
    return _DEFAULT_REGISTRY


TOTAL_FIGURES = len(FIGURES)
