"""Pytest configuration for repository-relative imports and shared fixtures."""

import os
import sys

import numpy as np
import pandas as pd
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class StubModel:
    """Fitted-model stand-in exposing only an AIC."""

    def __init__(self, aic):
        self.aic = aic


@pytest.fixture
def stub_model():
    return StubModel


@pytest.fixture
def growth_data():
    """Seeded gapminder-like panel: life expectancy rising with year and log GDP."""
    rng = np.random.default_rng(42)
    countries = [f"c{i}" for i in range(12)]
    years = np.arange(1952, 2008, 5)
    rows = []
    for i, country in enumerate(countries):
        country_effect = rng.normal(0.0, 4.0)
        base_gdp = 800.0 * (1 + i)
        growth = 1.005 + 0.004 * (i % 5)
        for year in years:
            gdp = base_gdp * growth ** (year - 1952) * np.exp(rng.normal(0.0, 0.2))
            life_exp = (
                40.0
                + 0.3 * (year - 1952)
                + 3.0 * np.log(gdp)
                + country_effect
                + rng.normal(0.0, 1.5)
            )
            rows.append(
                {
                    "country": country,
                    "year": int(year),
                    "pop": float(rng.uniform(1e6, 5e7)),
                    "gdpPercap": gdp,
                    "lifeExp": life_exp,
                }
            )
    return pd.DataFrame(rows)
