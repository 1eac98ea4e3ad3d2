"""Tests for CSV export of comparison and coefficient tables."""

import pandas as pd
import pytest
import statsmodels.formula.api as smf

from akaike.comparison import compare
from akaike.output import save_comparison_to_csv
from akaike.stats.inference import tidy_coefficients


def test_save_comparison_only(tmp_path, stub_model):
    table = compare({"a": stub_model(1.0), "b": stub_model(3.0)})
    comparison_path, coefficients_path = save_comparison_to_csv(
        table, output_dir=str(tmp_path)
    )

    assert coefficients_path is None
    saved = pd.read_csv(comparison_path)
    assert list(saved["Model"]) == ["a", "b"]
    assert saved["Akaike weight"].sum() == pytest.approx(1.0)


def test_save_comparison_with_coefficients(tmp_path, growth_data):
    fits = {
        "year": smf.ols("lifeExp ~ year", data=growth_data).fit(),
        "gdp": smf.ols("lifeExp ~ gdpPercap", data=growth_data).fit(),
    }
    table = compare(fits)
    coefficients = {name: tidy_coefficients(fit) for name, fit in fits.items()}

    _, coefficients_path = save_comparison_to_csv(
        table, coefficients, output_dir=str(tmp_path / "out")
    )

    saved = pd.read_csv(coefficients_path)
    assert list(saved.columns)[:2] == ["model", "term"]
    assert list(saved["model"]) == ["year", "year", "gdp", "gdp"]


def test_save_rejects_coefficients_for_unknown_model(tmp_path, stub_model):
    table = compare({"a": stub_model(1.0)})
    with pytest.raises(KeyError, match="unknown models"):
        save_comparison_to_csv(
            table, {"b": pd.DataFrame({"term": ["x"]})}, output_dir=str(tmp_path)
        )
