"""The fifteen supplementary figures, in gallery order."""

from __future__ import annotations

from .charts import COLORS, Category, ChartKind, ChartSpec, ColorBand, CustomLayout, Series
from .models import FigureDescriptor
from .synth import GENERATORS
from .synth.generators import BUILDING_TYPES, ERROR_THRESHOLDS, error_band
from .synth.tables import TORNADO_BASE_CASE, TORNADO_PERTURBATION

REPORT_TITLE = "Multimodal Machine Learning Framework for High-Resolution Electricity Demand Prediction"

_PALETTE = [COLORS["blue"], COLORS["green"], COLORS["amber"], COLORS["violet"]]

_SPECS: dict[int, tuple[str, str, ChartSpec]] = {
    1: (
        "Figure S1: Distribution of Building Footprint Areas",
        "Right-skewed distributions with long tails characteristic of urban building stock across "
        "Dhaka, Kolkata, and Karachi. Log-normal distribution fit shown with dashed lines.",
        ChartSpec(
            kind=ChartKind.BAR,
            x="bin",
            series=(
                Series("dhaka", "Dhaka", COLORS["blue"]),
                Series("kolkata", "Kolkata", COLORS["green"]),
                Series("karachi", "Karachi", COLORS["amber"]),
            ),
            x_label="Footprint area (m²)",
            y_label="Building Count",
        ),
    ),
    2: (
        "Figure S2: Spatial Distribution of Training/Validation/Test Sets",
        "Geographic stratification ensuring diverse representation across urban zones, settlement "
        "types, and infrastructure conditions.",
        ChartSpec(
            kind=ChartKind.SCATTER,
            x="x",
            y="y",
            category="set",
            categories=(
                Category("Train", "Training", COLORS["blue"]),
                Category("Validation", "Validation", COLORS["green"]),
                Category("Test", "Test", COLORS["amber"]),
            ),
            x_label="Longitude (normalized)",
            y_label="Latitude (normalized)",
        ),
    ),
    3: (
        "Figure S3: Correlation Matrix of Input Features",
        "Identifying multicollinearity patterns. Strong positive correlations between population "
        "density and nighttime lights (r=0.71), moderate negative correlation between NDVI and "
        "building area (r=-0.43).",
        ChartSpec(
            kind=ChartKind.CUSTOM,
            layout=CustomLayout.CORRELATION_MATRIX,
            x="x",
            y="y",
            series=(Series("value", "Pearson r"),),
            label_field="xLabel",
        ),
    ),
    4: (
        "Figure S4: Learning Curves",
        "Training and validation loss evolution demonstrating convergence without overfitting. "
        "Validation loss plateaus after ~150 epochs, suggesting optimal stopping point.",
        ChartSpec(
            kind=ChartKind.LINE,
            x="epoch",
            series=(
                Series("trainLoss", "Training Loss", COLORS["blue"]),
                Series("valLoss", "Validation Loss", COLORS["red"]),
            ),
            x_label="Epoch",
            y_label="Loss (MAE)",
        ),
    ),
    5: (
        "Figure S5: Spatial Context Attention Weights",
        "Attention weights from graph neural network showing which neighboring buildings most "
        "influence predictions. Larger weights on nearby commercial buildings during peak hours.",
        ChartSpec(
            kind=ChartKind.SCATTER,
            x="distance",
            y="weight",
            category="type",
            categories=tuple(
                Category(t, t, color) for t, color in zip(BUILDING_TYPES, _PALETTE)
            ),
            x_label="Distance (m)",
            y_label="Attention Weight",
        ),
    ),
    6: (
        "Figure S6: Temporal Attention Patterns",
        "Hour-of-day attention weights showing model focus during demand prediction. Peak attention "
        "during morning (6-9am) and evening (5-9pm) hours corresponding to high-variability periods.",
        ChartSpec(
            kind=ChartKind.STACKED_AREA,
            x="hour",
            series=(
                Series("morning", "Morning Peak", COLORS["amber"]),
                Series("evening", "Evening Peak", COLORS["blue"]),
                Series("night", "Night Base", COLORS["indigo"]),
            ),
            x_label="Hour of Day",
            y_label="Attention Weight",
        ),
    ),
    7: (
        "Figure S7: Feature Importance from Ablation Studies",
        "Contribution of each input modality measured by performance degradation when removed. "
        "Satellite imagery contributes 23%, building attributes 19%, spatial context 16%.",
        ChartSpec(
            kind=ChartKind.HORIZONTAL_BAR,
            y="feature",
            series=(Series("importance", "Importance", COLORS["blue"]),),
            intensity_field="importance",
            error_field="std",
            x_label="Importance Score",
        ),
    ),
    8: (
        "Figure S8: Residual Analysis",
        "Prediction errors versus predicted values showing no systematic bias. Slight "
        "heteroskedasticity observed with increased variance for high-demand buildings.",
        ChartSpec(
            kind=ChartKind.SCATTER,
            x="predicted",
            y="residual",
            series=(Series("residual", "Residuals", COLORS["blue"]),),
            reference_y=0.0,
            x_label="Predicted Demand (kWh)",
            y_label="Residual (kWh)",
        ),
    ),
    9: (
        "Figure S9: Calibration Curves for Probabilistic Predictions",
        "Well-calibrated uncertainty estimates with observed frequencies closely matching predicted "
        "probabilities. Mean calibration error: 3.2%.",
        ChartSpec(
            kind=ChartKind.LINE,
            x="predicted",
            series=(
                Series("ideal", "Perfect Calibration", COLORS["slate"], dashed=True),
                Series("observed", "Model Calibration", COLORS["blue"]),
            ),
            x_label="Predicted Probability",
            y_label="Observed Frequency",
        ),
    ),
    10: (
        "Figure S10: Geographic Distribution of Prediction Errors",
        "Spatial patterns in MAPE showing higher errors in peripheral informal settlements and newly "
        "developed areas with limited historical data.",
        ChartSpec(
            kind=ChartKind.SCATTER,
            x="x",
            y="y",
            color_field="error",
            color_bands=(
                ColorBand("low", f"MAPE < {ERROR_THRESHOLDS[0]:g}%", COLORS["green"]),
                ColorBand("medium", f"MAPE {ERROR_THRESHOLDS[0]:g}-{ERROR_THRESHOLDS[1]:g}%", COLORS["amber"]),
                ColorBand("high", f"MAPE >= {ERROR_THRESHOLDS[1]:g}%", COLORS["red"]),
            ),
            band_of=error_band,
            x_label="Longitude (normalized)",
            y_label="Latitude (normalized)",
        ),
    ),
    11: (
        "Figure S11: Sobol Sensitivity Indices",
        "First-order and total-order indices with 95% confidence intervals. Peak demand growth "
        "dominates with 34.2% first-order contribution and 42.8% total effect including interactions.",
        ChartSpec(
            kind=ChartKind.HORIZONTAL_BAR,
            y="param",
            series=(
                Series("firstOrder", "First-Order", COLORS["blue"]),
                Series("totalOrder", "Total-Order", COLORS["green"]),
            ),
            error_field="error",
            x_label="Variance Contribution (%)",
        ),
    ),
    12: (
        "Figure S12: Tornado Diagram - Parameter Sensitivity",
        "Impact of ±20% parameter perturbations on total capacity expansion cost. Demand growth rate "
        "shows highest sensitivity with ±$2.8B impact.",
        ChartSpec(
            kind=ChartKind.CUSTOM,
            layout=CustomLayout.TORNADO,
            y="name",
            series=(
                Series("low", f"-{TORNADO_PERTURBATION:.0%}", COLORS["red"]),
                Series("high", f"+{TORNADO_PERTURBATION:.0%}", COLORS["blue"]),
            ),
            x_label="Change in total cost ($B)",
            baseline_label=f"Base Case (${TORNADO_BASE_CASE}B)",
        ),
    ),
    13: (
        "Figure S13: Time Series - Observed vs Predicted",
        "Week-long demand profile comparison for representative residential building. Model captures "
        "daily patterns and weekend effects with 90% prediction intervals.",
        ChartSpec(
            kind=ChartKind.LINE,
            x="hour",
            series=(
                Series("observed", "Observed", COLORS["red"]),
                Series("predicted", "Predicted", COLORS["blue"]),
            ),
            band=("lower", "upper"),
            x_label="Hour",
            y_label="Demand (kWh)",
        ),
    ),
    14: (
        "Figure S14: Distribution of Prediction Interval Widths",
        "Heteroskedastic uncertainty varying with building characteristics. Wider intervals for "
        "informal settlements (mean: 18.3 kWh) vs formal areas (mean: 12.1 kWh).",
        ChartSpec(
            kind=ChartKind.BAR,
            x="type",
            series=(Series("width", "Mean Interval Width", COLORS["blue"]),),
            error_field="std",
            y_label="Prediction Interval Width (kWh)",
        ),
    ),
    15: (
        "Figure S15: Transfer Learning Performance Curves",
        "Cross-country generalization showing MAPE reduction with increasing target domain samples. "
        "Rapid improvement in first 500 samples, plateau after ~800 samples.",
        ChartSpec(
            kind=ChartKind.LINE,
            x="samples",
            series=(
                Series("indiaToBangladesh", "India → Bangladesh", COLORS["blue"]),
                Series("pakistanToIndia", "Pakistan → India", COLORS["green"]),
                Series("bangladeshToPakistan", "Bangladesh → Pakistan", COLORS["amber"]),
            ),
            x_label="Target Domain Training Samples",
            y_label="MAPE (%)",
        ),
    ),
}

FIGURES: tuple[FigureDescriptor, ...] = tuple(
    FigureDescriptor(
        figure_id=figure_id,
        title=title,
        caption=caption,
        generator=GENERATORS[figure_id],
        chart_spec=spec,
    )
    for figure_id, (title, caption, spec) in sorted(_SPECS.items())
)
