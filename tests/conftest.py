from __future__ import annotations

import random

import matplotlib

matplotlib.use("Agg")

import pytest

from supplementary_figures.registry import FigureRegistry


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def registry() -> FigureRegistry:
    return FigureRegistry()
