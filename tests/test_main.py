"""End-to-end runs of the comparison script on a temporary dataset."""

import pandas as pd
import pytest

import main
from akaike.errors import InvalidInputError


def test_parse_model_specs():
    pairs = main.parse_model_specs(["gdp = lifeExp ~ gdpPercap", "year=lifeExp ~ year"])
    assert pairs == [("gdp", "lifeExp ~ gdpPercap"), ("year", "lifeExp ~ year")]
    with pytest.raises(InvalidInputError, match="NAME=FORMULA"):
        main.parse_model_specs(["lifeExp ~ year"])


def test_main_default_models(tmp_path, growth_data):
    input_path = tmp_path / "gapminder.csv"
    growth_data.to_csv(input_path, index=False)
    outdir = tmp_path / "output"

    status = main.main(["--input", str(input_path), "--outdir", str(outdir)])

    assert status == 0
    comparison = pd.read_csv(outdir / "aic_comparison.csv")
    assert list(comparison["Model"]) == ["pop", "gdp", "year"]
    assert comparison["Akaike weight"].sum() == pytest.approx(1.0)
    assert (outdir / "coefficients.csv").exists()


def test_main_mixed_models(tmp_path, growth_data):
    input_path = tmp_path / "gapminder.csv"
    growth_data.to_csv(input_path, index=False)
    outdir = tmp_path / "output"

    status = main.main(
        [
            "--input",
            str(input_path),
            "--outdir",
            str(outdir),
            "--groups",
            "country",
            "--model",
            "no_year=lifeExp ~ gdpPercap",
            "--model",
            "year=lifeExp ~ gdpPercap + year",
        ]
    )

    assert status == 0
    comparison = pd.read_csv(outdir / "aic_comparison.csv")
    best = comparison.loc[comparison["Akaike weight"].idxmax(), "Model"]
    assert best == "year"


def test_main_missing_input_returns_error(tmp_path):
    status = main.main(
        ["--input", str(tmp_path / "missing.csv"), "--outdir", str(tmp_path)]
    )
    assert status == 1


def test_main_duplicate_names_return_error(tmp_path, growth_data):
    input_path = tmp_path / "gapminder.csv"
    growth_data.to_csv(input_path, index=False)
    status = main.main(
        [
            "--input",
            str(input_path),
            "--outdir",
            str(tmp_path),
            "--model",
            "m=lifeExp ~ year",
            "--model",
            "m=lifeExp ~ pop",
        ]
    )
    assert status == 1


def test_main_repeated_runs_log_to_each_outdir(tmp_path, growth_data):
    input_path = tmp_path / "gapminder.csv"
    growth_data.to_csv(input_path, index=False)

    for name in ("first", "second"):
        status = main.main(
            ["--input", str(input_path), "--outdir", str(tmp_path / name)]
        )
        assert status == 0

    log_text = (tmp_path / "second" / "aic_comparison.log").read_text()
    assert "Initializing AIC comparison pipeline" in log_text
