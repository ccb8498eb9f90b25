from __future__ import annotations

import math
import random

import pandas as pd
import pytest

from supplementary_figures.synth import (
    GENERATORS,
    correlation_matrix,
    error_band,
    generate_attention_weights,
    generate_building_areas,
    generate_calibration,
    generate_data_splits,
    generate_demand_time_series,
    generate_error_map,
    generate_feature_correlations,
    generate_feature_importance,
    generate_interval_widths,
    generate_learning_curves,
    generate_residuals,
    generate_sobol_indices,
    generate_temporal_attention,
    generate_tornado,
    generate_transfer_learning,
)
from supplementary_figures.synth.generators import BUILDING_TYPES, CITY_SCALES, CORRELATION_FEATURES


def test_every_figure_has_a_generator() -> None:
    assert sorted(GENERATORS) == list(range(1, 16))


@pytest.mark.parametrize("figure_id", range(1, 16))
def test_seeded_generators_are_deterministic(figure_id: int) -> None:
    gen = GENERATORS[figure_id]
    assert gen(random.Random(99)).equals(gen(random.Random(99)))


@pytest.mark.parametrize("figure_id", range(1, 16))
def test_generators_work_without_injected_source(figure_id: int) -> None:
    df = GENERATORS[figure_id](None)
    assert isinstance(df, pd.DataFrame)
    assert len(df) > 0


def test_building_areas(rng: random.Random) -> None:
    df = generate_building_areas(rng)
    assert len(df) == 12
    assert list(df.columns) == ["bin", "dhaka", "kolkata", "karachi"]
    for i, row in df.iterrows():
        lo, hi = (int(p) for p in row["bin"].split("-"))
        assert hi - lo == 50 and lo % 50 == 0
        for city, scale in CITY_SCALES.items():
            count = row[city]
            assert float(count).is_integer()
            assert 0 <= count <= scale * math.exp(-i / 8)


def test_data_splits(rng: random.Random) -> None:
    df = generate_data_splits(rng)
    assert len(df) == 100
    assert df["x"].between(0, 100).all() and df["y"].between(0, 100).all()
    assert set(df["set"]) <= {"Train", "Validation", "Test"}


def test_feature_correlations_symmetric_with_unit_diagonal(rng: random.Random) -> None:
    df = generate_feature_correlations(rng)
    n = len(CORRELATION_FEATURES)
    assert len(df) == n * n
    value = {(r.x, r.y): r.value for r in df.itertuples()}
    for i in range(n):
        assert value[(i, i)] == 1
        for j in range(n):
            if i != j:
                assert value[(i, j)] == value[(j, i)]
                assert -0.2 <= value[(i, j)] < 0.6


def test_correlation_matrix_pivot(rng: random.Random) -> None:
    matrix = correlation_matrix(generate_feature_correlations(rng))
    assert list(matrix.columns) == CORRELATION_FEATURES
    assert list(matrix.index) == CORRELATION_FEATURES
    assert (matrix.to_numpy() == matrix.to_numpy().T).all()


def test_learning_curves_floors(rng: random.Random) -> None:
    df = generate_learning_curves(rng)
    assert len(df) == 200
    assert list(df["epoch"]) == list(range(200))
    assert (df["trainLoss"] >= 0.05).all()
    assert (df["valLoss"] >= 0.08).all()


def test_learning_curves_decrease_in_expectation(rng: random.Random) -> None:
    runs = [generate_learning_curves(rng) for _ in range(50)]
    mean = pd.concat(runs).groupby("epoch")[["trainLoss", "valLoss"]].mean()
    blocks = mean.groupby(mean.index // 25).mean()
    for col in ("trainLoss", "valLoss"):
        assert blocks[col].is_monotonic_decreasing


def test_attention_weights(rng: random.Random) -> None:
    df = generate_attention_weights(rng)
    assert len(df) == 40
    assert list(df["building"]) == list(range(40))
    assert df["weight"].between(0.1, 0.9).all()
    assert df["distance"].between(0, 200).all()
    assert set(df["type"]) <= set(BUILDING_TYPES)


def test_temporal_attention_peaks(rng: random.Random) -> None:
    df = generate_temporal_attention(rng).set_index("hour")
    assert list(df.index) == list(range(24))
    for hour, row in df.iterrows():
        if 6 <= hour <= 9:
            assert row["morning"] >= 0.5
        else:
            assert row["morning"] < 0.4
        if 17 <= hour <= 21:
            assert row["evening"] >= 0.6
        else:
            assert row["evening"] < 0.4
        if hour >= 22 or hour <= 5:
            assert row["night"] >= 0.3
        else:
            assert row["night"] < 0.3


def test_feature_importance_table() -> None:
    df = generate_feature_importance()
    assert len(df) == 8
    assert df["importance"].sum() == pytest.approx(1.0)
    assert df.iloc[0]["feature"] == "Building Area"


def test_static_tables_are_fresh_copies() -> None:
    a = generate_sobol_indices()
    a.loc[0, "firstOrder"] = -1
    b = generate_sobol_indices()
    assert b.loc[0, "firstOrder"] == 34.2
    assert list(b.columns) == ["param", "firstOrder", "totalOrder", "error"]


def test_tornado_table() -> None:
    df = generate_tornado()
    assert list(df.columns) == ["name", "low", "high"]
    assert list(df.itertuples(index=False, name=None)) == [
        ("Demand Growth", -2.8, 3.2),
        ("Informal Electrif.", -1.9, 2.1),
        ("Temperature", -1.4, 1.6),
        ("Tech Costs", -1.1, 1.2),
        ("Fuel Prices", -0.8, 0.9),
        ("Discount Rate", -0.6, 0.7),
    ]


def test_interval_widths_table() -> None:
    df = generate_interval_widths()
    assert list(df.columns) == ["type", "width", "std"]
    assert list(df.itertuples(index=False, name=None)) == [
        ("Formal Residential", 12.1, 3.2),
        ("Informal Settlement", 18.3, 5.1),
        ("Commercial", 24.7, 7.3),
        ("Industrial", 32.4, 9.8),
        ("Mixed Use", 15.9, 4.5),
    ]


def test_residuals_ranges(rng: random.Random) -> None:
    df = generate_residuals(rng)
    assert len(df) == 200
    assert df["predicted"].between(20, 120).all()
    assert df["residual"].between(-15, 15).all()
    assert df["buildingArea"].between(50, 550).all()


def test_calibration_grid(rng: random.Random) -> None:
    df = generate_calibration(rng)
    assert len(df) == 10
    for i, row in df.iterrows():
        assert row["predicted"] == (i + 0.5) / 10
        assert row["ideal"] == row["predicted"]
        assert abs(row["observed"] - row["predicted"]) <= 0.05


def test_error_map_and_bands(rng: random.Random) -> None:
    df = generate_error_map(rng)
    assert len(df) == 150
    assert df["error"].between(5, 30).all()
    assert error_band(5.0) == "low"
    assert error_band(9.99) == "low"
    assert error_band(10.0) == "medium"
    assert error_band(19.99) == "medium"
    assert error_band(20.0) == "high"


def test_demand_time_series(rng: random.Random) -> None:
    df = generate_demand_time_series(rng)
    assert len(df) == 168
    assert list(df["hour"]) == list(range(168))
    base = df["lower"] + 8
    assert (df["upper"] - df["lower"]).round(9).eq(16).all()
    assert ((df["observed"] - base).abs() <= 2.5).all()
    assert ((df["predicted"] - base).abs() <= 2.0).all()
    expected = 40 + 20 * math.sin(5 * math.pi / 12) + 10 * math.sin(5 * math.pi / 84)
    assert base.iloc[5] == pytest.approx(expected)


def test_transfer_learning(rng: random.Random) -> None:
    df = generate_transfer_learning(rng)
    assert list(df["samples"]) == list(range(0, 1000, 50))
    pairs = {"indiaToBangladesh": (28, 0.7), "pakistanToIndia": (26, 0.6), "bangladeshToPakistan": (30, 0.65)}
    for col, (c, k) in pairs.items():
        for i, v in enumerate(df[col]):
            trend = c - k * i
            assert trend <= v < trend + 2
        assert df[col].iloc[-1] < df[col].iloc[0]
