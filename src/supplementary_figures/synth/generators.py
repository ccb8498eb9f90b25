from __future__ import annotations

import math
import random
from typing import Optional

import pandas as pd

from ..rng import default_rng

CITY_SCALES = {"dhaka": 500, "kolkata": 450, "karachi": 380}

SPLIT_SETS = ["Train", "Validation", "Test"]

CORRELATION_FEATURES = [
    "Pop Density",
    "Bldg Area",
    "NDVI",
    "Night Light",
    "Temp",
    "Road Dist",
    "Settlement Type",
    "Height",
]

BUILDING_TYPES = ["Residential", "Commercial", "Industrial", "Mixed"]

# Peak windows for figure 6, inclusive hours -> boost over the 0.1 baseline.
MORNING_PEAK = (6, 9)
EVENING_PEAK = (17, 21)
NIGHT_START, NIGHT_END = 22, 5

# Figure 10 MAPE buckets used for colour coding.
ERROR_THRESHOLDS = (10.0, 20.0)

# (intercept, slope per step) for the figure 15 transfer curves.
TRANSFER_PAIRS = {
    "indiaToBangladesh": (28.0, 0.7),
    "pakistanToIndia": (26.0, 0.6),
    "bangladeshToPakistan": (30.0, 0.65),
}


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else default_rng()


def generate_building_areas(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 1: right-skewed building counts per area bin for three cities."""
    r = _rng(rng)
    rows = []
    for i in range(12):
        area = math.exp(r.random() * 6 + 2)
        lo = math.floor(area / 50) * 50
        row: dict[str, object] = {"bin": f"{lo}-{lo + 50}"}
        decay = math.exp(-i / 8)
        for city, scale in CITY_SCALES.items():
            row[city] = int(math.floor(r.random() * scale * decay))
        rows.append(row)
    return pd.DataFrame(rows, columns=["bin", "dhaka", "kolkata", "karachi"])


def generate_data_splits(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 2: normalised coordinates of the train/validation/test samples."""
    r = _rng(rng)
    rows = [
        {"x": r.random() * 100, "y": r.random() * 100, "set": r.choice(SPLIT_SETS)}
        for _ in range(100)
    ]
    return pd.DataFrame(rows, columns=["x", "y", "set"])


def generate_feature_correlations(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """
    Figure 3: long-form symmetric correlation matrix over the input features.

    Each upper-triangle coefficient is drawn once and reused for the mirrored
    cell; the diagonal is fixed to 1.
    """
    r = _rng(rng)
    n = len(CORRELATION_FEATURES)
    values: dict[tuple[int, int], float] = {}
    rows = []
    for i in range(n):
        for j in range(n):
            if i == j:
                value = 1.0
            elif i > j:
                value = values[(j, i)]
            else:
                value = r.random() * 0.8 - 0.2
                values[(i, j)] = value
            rows.append(
                {
                    "x": i,
                    "y": j,
                    "xLabel": CORRELATION_FEATURES[i],
                    "yLabel": CORRELATION_FEATURES[j],
                    "value": value,
                }
            )
    return pd.DataFrame(rows, columns=["x", "y", "xLabel", "yLabel", "value"])


def correlation_matrix(df: pd.DataFrame, label_field: Optional[str] = "xLabel") -> pd.DataFrame:
    """Pivot figure 3 records into a square matrix labelled by feature name.

    With no `label_field` the matrix keeps the integer feature indices.
    """
    matrix = df.pivot(index="y", columns="x", values="value").sort_index().sort_index(axis=1)
    if label_field is None:
        return matrix
    labels = df.drop_duplicates("x").sort_values("x")[label_field].tolist()
    matrix.index = labels
    matrix.columns = labels
    return matrix


def generate_learning_curves(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 4: exponentially decaying train/validation loss with noise floors."""
    r = _rng(rng)
    rows = []
    for epoch in range(200):
        rows.append(
            {
                "epoch": epoch,
                "trainLoss": 0.8 * math.exp(-epoch / 30) + 0.05 + r.random() * 0.02,
                "valLoss": 0.9 * math.exp(-epoch / 35) + 0.08 + r.random() * 0.03,
            }
        )
    return pd.DataFrame(rows, columns=["epoch", "trainLoss", "valLoss"])


def generate_attention_weights(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 5: GNN attention weight against distance for neighbouring buildings."""
    r = _rng(rng)
    rows = []
    for building in range(40):
        rows.append(
            {
                "building": building,
                "weight": r.random() * 0.8 + 0.1,
                "distance": r.random() * 200,
                "type": r.choice(BUILDING_TYPES),
            }
        )
    return pd.DataFrame(rows, columns=["building", "weight", "distance", "type"])


def _in_window(hour: int, window: tuple[int, int]) -> bool:
    return window[0] <= hour <= window[1]


def generate_temporal_attention(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 6: hour-of-day attention, boosted inside each series' peak window."""
    r = _rng(rng)
    rows = []
    for hour in range(24):
        night = hour >= NIGHT_START or hour <= NIGHT_END
        rows.append(
            {
                "hour": hour,
                "morning": r.random() * 0.3 + (0.5 if _in_window(hour, MORNING_PEAK) else 0.1),
                "evening": r.random() * 0.3 + (0.6 if _in_window(hour, EVENING_PEAK) else 0.1),
                "night": r.random() * 0.2 + (0.3 if night else 0.1),
            }
        )
    return pd.DataFrame(rows, columns=["hour", "morning", "evening", "night"])


def generate_residuals(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 8: residual vs predicted demand, no systematic bias."""
    r = _rng(rng)
    rows = []
    for _ in range(200):
        rows.append(
            {
                "predicted": r.random() * 100 + 20,
                "residual": (r.random() - 0.5) * 30,
                "buildingArea": r.random() * 500 + 50,
            }
        )
    return pd.DataFrame(rows, columns=["predicted", "residual", "buildingArea"])


def generate_calibration(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 9: calibration points on a fixed probability grid."""
    r = _rng(rng)
    rows = []
    for i in range(10):
        predicted = (i + 0.5) / 10
        rows.append(
            {
                "predicted": predicted,
                "observed": predicted + (r.random() - 0.5) * 0.1,
                "ideal": predicted,
            }
        )
    return pd.DataFrame(rows, columns=["predicted", "observed", "ideal"])


def error_band(error: float) -> str:
    """Bucket a figure 10 MAPE value into low / medium / high."""
    low, high = ERROR_THRESHOLDS
    if error < low:
        return "low"
    if error < high:
        return "medium"
    return "high"


def generate_error_map(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 10: spatial distribution of prediction error (MAPE %)."""
    r = _rng(rng)
    rows = [
        {"x": r.random() * 100, "y": r.random() * 100, "error": r.random() * 25 + 5}
        for _ in range(150)
    ]
    return pd.DataFrame(rows, columns=["x", "y", "error"])


def generate_demand_time_series(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 13: one week of hourly demand with daily and weekly cycles."""
    r = _rng(rng)
    rows = []
    for hour in range(168):
        base = 40 + 20 * math.sin(hour * math.pi / 12) + 10 * math.sin(hour * math.pi / 84)
        rows.append(
            {
                "hour": hour,
                "observed": base + (r.random() - 0.5) * 5,
                "predicted": base + (r.random() - 0.5) * 4,
                "lower": base - 8,
                "upper": base + 8,
            }
        )
    return pd.DataFrame(rows, columns=["hour", "observed", "predicted", "lower", "upper"])


def generate_transfer_learning(rng: Optional[random.Random] = None) -> pd.DataFrame:
    """Figure 15: MAPE falling with target-domain sample count, per country pair."""
    r = _rng(rng)
    rows = []
    for i in range(20):
        row: dict[str, object] = {"samples": i * 50}
        for pair, (intercept, slope) in TRANSFER_PAIRS.items():
            row[pair] = intercept - slope * i + r.random() * 2
        rows.append(row)
    return pd.DataFrame(rows, columns=["samples", *TRANSFER_PAIRS.keys()])
