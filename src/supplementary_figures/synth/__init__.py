from __future__ import annotations

import random
from typing import Callable, Dict, Optional

import pandas as pd

from .generators import (
    correlation_matrix,
    error_band,
    generate_attention_weights,
    generate_building_areas,
    generate_calibration,
    generate_data_splits,
    generate_demand_time_series,
    generate_error_map,
    generate_feature_correlations,
    generate_learning_curves,
    generate_residuals,
    generate_temporal_attention,
    generate_transfer_learning,
)
from .tables import (
    generate_feature_importance,
    generate_interval_widths,
    generate_sobol_indices,
    generate_tornado,
)

Generator = Callable[[Optional[random.Random]], pd.DataFrame]

GENERATORS: Dict[int, Generator] = {
    1: generate_building_areas,
    2: generate_data_splits,
    3: generate_feature_correlations,
    4: generate_learning_curves,
    5: generate_attention_weights,
    6: generate_temporal_attention,
    7: generate_feature_importance,
    8: generate_residuals,
    9: generate_calibration,
    10: generate_error_map,
    11: generate_sobol_indices,
    12: generate_tornado,
    13: generate_demand_time_series,
    14: generate_interval_widths,
    15: generate_transfer_learning,
}

__all__ = [
    "GENERATORS",
    "Generator",
    "correlation_matrix",
    "error_band",
    "generate_attention_weights",
    "generate_building_areas",
    "generate_calibration",
    "generate_data_splits",
    "generate_demand_time_series",
    "generate_error_map",
    "generate_feature_correlations",
    "generate_feature_importance",
    "generate_interval_widths",
    "generate_learning_curves",
    "generate_residuals",
    "generate_sobol_indices",
    "generate_temporal_attention",
    "generate_tornado",
    "generate_transfer_learning",
]
