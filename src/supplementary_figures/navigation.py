from __future__ import annotations

import logging
import random
from typing import Optional

from .models import FigureView
from .registry import FigureRegistry, get_registry
from .rng import default_rng

logger = logging.getLogger(__name__)


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


class NavigationController:
    """
    Selects the active figure and produces a fresh dataset for it.

    State is a single integer kept in [1, total_figures]. Every transition,
    including a no-op at either boundary, looks the figure up again and runs
    its generator; the returned FigureView is never cached.
    """

    def __init__(
        self,
        registry: Optional[FigureRegistry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._registry = registry if registry is not None else get_registry()
        self._rng = rng if rng is not None else default_rng()
        self._current = 1

    @property
    def current_figure(self) -> int:
        return self._current

    @property
    def total_figures(self) -> int:
        return self._registry.total_figures

    @property
    def at_first(self) -> bool:
        return self._current == 1

    @property
    def at_last(self) -> bool:
        return self._current == self.total_figures

    def next(self) -> FigureView:
        return self._select(min(self.total_figures, self._current + 1))

    def previous(self) -> FigureView:
        return self._select(max(1, self._current - 1))

    def jump_to(self, figure: int) -> FigureView:
        target = clamp(int(figure), 1, self.total_figures)
        if target != figure:
            logger.warning("Figure %s is out of range; showing figure %s instead.", figure, target)
        return self._select(target)

    def refresh(self) -> FigureView:
        """Regenerate the current figure without moving."""
        return self._select(self._current)

    def _select(self, figure_id: int) -> FigureView:
        self._current = figure_id
        descriptor = self._registry.lookup(figure_id)
        dataset = descriptor.generate(self._rng)
        logger.debug("Generated %d records for figure %d", len(dataset), figure_id)
        return FigureView(descriptor=descriptor, dataset=dataset, total_figures=self.total_figures)
