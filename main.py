#!/usr/bin/env python3
"""
Main script for running the AIC model comparison.
"""

# Pipeline overview (README-style):
# 1) Load the dataset CSV (e.g. gapminder: country, year, pop, gdpPercap, lifeExp).
# 2) Fit each candidate formula with statsmodels: OLS by default, or a linear
#    mixed model fitted by maximum likelihood when --groups is given.
# 3) Rank the fits by delta AIC, relative likelihood and Akaike weight.
# 4) Export the comparison table and per-model coefficient tables to CSV.

import argparse
import logging
import os
import sys
import time

import numpy as np  # noqa: F401  formulas may call np.log
import pandas as pd
import statsmodels.formula.api as smf

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from akaike.comparison import compare
from akaike.errors import InvalidInputError
from akaike.output import save_comparison_to_csv
from akaike.stats.inference import DEFAULT_ALPHA, tidy_coefficients

DEFAULT_INPUT = "data/gapminder.csv"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_MODELS = (
    "pop=lifeExp ~ pop",
    "gdp=lifeExp ~ gdpPercap",
    "year=lifeExp ~ year",
)


def parse_model_specs(specs):
    """Split ``NAME=FORMULA`` strings into ordered ``(name, formula)`` pairs."""
    pairs = []
    for spec in specs:
        name, sep, formula = spec.partition("=")
        if not sep or not name.strip() or not formula.strip():
            raise InvalidInputError(
                f"Model must be given as NAME=FORMULA, got {spec!r}."
            )
        pairs.append((name.strip(), formula.strip()))
    return pairs


def fit_models(data, model_specs, groups=None):
    """Fit each formula on ``data``; fitting errors propagate to the caller."""
    fitted = []
    for name, formula in model_specs:
        if groups is None:
            result = smf.ols(formula, data=data).fit()
        else:
            result = smf.mixedlm(formula, data=data, groups=data[groups]).fit(
                reml=False
            )
        logging.info("Fitted %s: %s (AIC %.2f)", name, formula, result.aic)
        fitted.append((name, result))
    return fitted


def _build_arg_parser():
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Fit candidate models and compare them by AIC."
    )
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT,
        help=f"Path to input CSV file (default: {DEFAULT_INPUT}).",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--model",
        action="append",
        default=None,
        metavar="NAME=FORMULA",
        help="Candidate model; repeat for each model. Defaults to the "
        "pop/gdp/year life-expectancy models.",
    )
    parser.add_argument(
        "--groups",
        default=None,
        help="Grouping column; fits linear mixed models with random intercepts.",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=DEFAULT_ALPHA,
        help="Significance level for coefficient confidence intervals.",
    )
    return parser


def _configure_logging(output_dir):
    os.makedirs(output_dir, exist_ok=True)
    logging.basicConfig(
        force=True,
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                os.path.join(output_dir, "aic_comparison.log"), mode="w"
            ),
        ],
    )


def main(argv=None):
    """Main execution function."""
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.outdir)

    start_time = time.time()
    logging.info("Initializing AIC comparison pipeline")

    if not os.path.exists(args.input):
        logging.error("Input file not found: %s", args.input)
        return 1

    data = pd.read_csv(args.input)
    logging.info("Loaded %d rows from %s", len(data), args.input)

    try:
        model_specs = parse_model_specs(args.model or DEFAULT_MODELS)
        if args.groups is not None and args.groups not in data.columns:
            raise InvalidInputError(f"Grouping column '{args.groups}' not found.")
        fitted = fit_models(data, model_specs, groups=args.groups)
        table = compare(fitted)
    except InvalidInputError as exc:
        logging.error("Invalid model comparison input: %s", exc)
        return 1

    for row in table:
        logging.info(
            "  %-24s AIC=%.2f dAIC=%.2f weight=%.4f",
            row.name,
            row.aic,
            row.delta_aic,
            row.weight,
        )
    logging.info("Best supported model: %s", table.best.name)

    coefficients = {
        name: tidy_coefficients(result, alpha=args.alpha) for name, result in fitted
    }
    comparison_csv, coefficients_csv = save_comparison_to_csv(
        table, coefficients, output_dir=args.outdir
    )

    logging.info(f"Total execution time: {time.time() - start_time:.2f} seconds")
    logging.info("Generated output files:")
    logging.info("  - AIC comparison CSV: %s", comparison_csv)
    logging.info("  - Coefficients CSV: %s", coefficients_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
