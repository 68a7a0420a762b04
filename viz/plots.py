from __future__ import annotations

"""
BMI history visualization.

Read-only plotting functions that consume `BmiRecord`s and draw BMI over
time with the category bands shaded in the same colours the UI uses.
The CLI saves the figure as PNG under `output/plots/`; the Streamlit
history tab renders the same figure inline.

Usage:
    from viz.plots import save_bmi_history_plot
    save_bmi_history_plot(records)
"""

from pathlib import Path
from typing import Iterable, Optional

import matplotlib.pyplot as plt
import pandas as pd

from bmi_tracker.bmi_engine import NORMAL_WEIGHT, OBESE, OVERWEIGHT, UNDERWEIGHT
from bmi_tracker.io_paths import OUTPUT_DIR
from bmi_tracker.records import BmiRecord, records_to_dataframe

DEFAULT_PLOT_NAME = "bmi_history.png"

# (lower, upper, colour) bands drawn behind the series
_BANDS = [
    (0.0, 18.5, UNDERWEIGHT.color),
    (18.5, 25.0, NORMAL_WEIGHT.color),
    (25.0, 30.0, OVERWEIGHT.color),
    (30.0, None, OBESE.color),
]


def _ensure_plots_dir() -> Path:
    """Ensure `output/plots/` exists and return the path."""
    plots_dir = OUTPUT_DIR / "plots"
    plots_dir.mkdir(parents=True, exist_ok=True)
    return plots_dir


def _plottable(df: pd.DataFrame) -> pd.DataFrame:
    """Rows that have both a timestamp and a BMI value."""
    if df.empty:
        return df
    return df.dropna(subset=["createdAt", "bmi"])


def build_bmi_history_figure(records: Iterable[BmiRecord]) -> plt.Figure:
    """Line chart of BMI by date with category bands.

    Raises ValueError when no record has a usable timestamp.
    """
    df = _plottable(records_to_dataframe(records))
    if df.empty:
        raise ValueError("No dated BMI records to plot")

    fig, ax = plt.subplots(figsize=(10, 5))
    y_max = max(35.0, float(df["bmi"].max()) + 2.0)
    y_min = min(15.0, float(df["bmi"].min()) - 2.0)
    for lower, upper, color in _BANDS:
        ax.axhspan(lower, upper if upper is not None else y_max, color=color, alpha=0.12)

    dates = df["createdAt"].dt.tz_convert(None)
    ax.plot(dates.to_numpy(), df["bmi"].to_numpy(), marker="o", color="#333333", label="BMI")
    ax.set_ylim(y_min, y_max)
    ax.set_title("BMI over time")
    ax.set_ylabel("BMI (kg/m²)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best", fontsize=8)
    fig.autofmt_xdate()
    return fig


def save_bmi_history_plot(records: Iterable[BmiRecord], out_path: Optional[Path] = None) -> Path:
    """Render the history chart to PNG and return the written path."""
    fig = build_bmi_history_figure(records)
    if out_path is None:
        out_path = _ensure_plots_dir() / DEFAULT_PLOT_NAME
    else:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return out_path


__all__ = ["build_bmi_history_figure", "save_bmi_history_plot", "DEFAULT_PLOT_NAME"]
