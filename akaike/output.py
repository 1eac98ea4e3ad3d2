"""Write comparison results and coefficient tables to reproducible CSV files.

This module is the output boundary between in-memory comparison tables and
report-ready tabular artifacts.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Tuple

import pandas as pd

from .comparison import ComparisonTable
from .schema import CoefficientColumns


def _stack_coefficients(coefficients: Mapping[str, pd.DataFrame]) -> pd.DataFrame:
    """Stack per-model tidy tables into one table with a leading model column.

    Args:
        coefficients (Mapping[str, pandas.DataFrame]): Tidy coefficient table
            for each model, keyed by model name.

    Returns:
        pandas.DataFrame: Concatenated table in mapping order.
    """
    model_col = CoefficientColumns().model
    frames = []
    for name, frame in coefficients.items():
        out = frame.copy()
        out.insert(0, model_col, name)
        frames.append(out)
    if not frames:
        return pd.DataFrame(columns=[model_col])
    return pd.concat(frames, ignore_index=True)


def save_comparison_to_csv(
    table: ComparisonTable,
    coefficients: Optional[Mapping[str, pd.DataFrame]] = None,
    output_dir: str = "output",
) -> Tuple[str, Optional[str]]:
    """Save an AIC comparison and optional coefficient tables to CSV files.

    Args:
        table (ComparisonTable): Output from ``compare``.
        coefficients (Mapping[str, pandas.DataFrame], optional): Output from
            ``tidy_coefficients`` per model, keyed by model name.
        output_dir (str): Directory where CSV outputs are written.

    Returns:
        tuple[str, str | None]: Paths to ``aic_comparison.csv`` and
        ``coefficients.csv`` (``None`` when no coefficients were given).

    Raises:
        KeyError: If a coefficient table is keyed by a model absent from
            ``table``.
    """
    os.makedirs(output_dir, exist_ok=True)

    comparison_path = os.path.join(output_dir, "aic_comparison.csv")
    table.to_frame().to_csv(comparison_path, index=False)
    logging.info("Saved AIC comparison to %s", comparison_path)

    if coefficients is None:
        return comparison_path, None

    unknown = [name for name in coefficients if name not in table.names]
    if unknown:
        raise KeyError(f"Coefficient tables for unknown models: {unknown}")

    coefficients_path = os.path.join(output_dir, "coefficients.csv")
    _stack_coefficients(coefficients).to_csv(coefficients_path, index=False)
    logging.info("Saved coefficient tables to %s", coefficients_path)

    return comparison_path, coefficients_path
