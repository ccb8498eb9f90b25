"""Synthetic-data gallery of the supplementary figures for the demand prediction report."""

from .charts import ChartKind, ChartSpec
from .models import FigureDescriptor, FigureView
from .navigation import NavigationController
from .registry import TOTAL_FIGURES, FigureNotFound, FigureRegistry, get_registry
from .rng import default_rng, make_rng

__version__ = "1.0.0"

__all__ = [
    "ChartKind",
    "ChartSpec",
    "FigureDescriptor",
    "FigureNotFound",
    "FigureRegistry",
    "FigureView",
    "NavigationController",
    "TOTAL_FIGURES",
    "default_rng",
    "get_registry",
    "make_rng",
]
