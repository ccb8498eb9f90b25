"""Static result tables.

These figures report fixed values from the paper. The generators accept a
random source only to share the generator signature; they never draw from it.
"""

from __future__ import annotations

import random
from typing import Optional

import pandas as pd

FEATURE_IMPORTANCE = [
    ("Building Area", 0.23, 0.03),
    ("Population Density", 0.19, 0.04),
    ("Night Lights", 0.16, 0.03),
    ("Temperature", 0.14, 0.02),
    ("Settlement Type", 0.11, 0.03),
    ("Road Distance", 0.08, 0.02),
    ("Building Height", 0.05, 0.02),
    ("NDVI", 0.04, 0.01),
]

SOBOL_INDICES = [
    ("Peak Demand Growth", 34.2, 42.8, 2.1),
    ("Informal Electrification", 18.7, 24.3, 1.8),
    ("Temperature", 14.3, 18.9, 1.5),
    ("Tech Costs", 11.2, 14.7, 1.3),
    ("Fuel Prices", 8.5, 11.2, 1.1),
    ("Demand Spatial", 6.8, 9.5, 0.9),
]

# Impact on total capacity expansion cost ($B) of a -20% / +20% perturbation.
TORNADO_PARAMETERS = [
    ("Demand Growth", -2.8, 3.2),
    ("Informal Electrif.", -1.9, 2.1),
    ("Temperature", -1.4, 1.6),
    ("Tech Costs", -1.1, 1.2),
    ("Fuel Prices", -0.8, 0.9),
    ("Discount Rate", -0.6, 0.7),
]
TORNADO_BASE_CASE = 15.2
TORNADO_PERTURBATION = 0.20

INTERVAL_WIDTHS = [
    ("Formal Residential", 12.1, 3.2),
    ("Informal Settlement", 18.3, 5.1),
    ("Commercial", 24.7, 7.3),
    ("Industrial", 32.4, 9.8),
    ("Mixed Use", 15.9, 4.5),
]


def generate_feature_importance(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 7: ablation-based feature importance."""
    return pd.DataFrame(FEATURE_IMPORTANCE, columns=["feature", "importance", "std"])


def generate_sobol_indices(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 11: first- and total-order Sobol indices (% of variance)."""
    return pd.DataFrame(SOBOL_INDICES, columns=["param", "firstOrder", "totalOrder", "error"])


def generate_tornado(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 12: low/high cost impact per perturbed parameter."""
    return pd.DataFrame(TORNADO_PARAMETERS, columns=["name", "low", "high"])


def generate_interval_widths(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 14: mean prediction interval width by building type (kWh)."""
    return pd.DataFrame(INTERVAL_WIDTHS, columns=["type", "width", "std"])
