"""Provide coefficient and nested-model inference for fitted statsmodels results.

This module supports:
- tidy per-term coefficient tables with confidence intervals,
- ANOVA tables for ordinary least-squares fits, and
- likelihood-ratio tests between nested models of any family with a
  log-likelihood (OLS, GLM, ML-fitted mixed models).
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd
from scipy.stats import chi2
from statsmodels.stats.anova import anova_lm

from ..errors import InvalidInputError
from ..schema import CoefficientColumns

DEFAULT_ALPHA = 0.05

COEF = CoefficientColumns()


def tidy_coefficients(result: Any, alpha: float = DEFAULT_ALPHA) -> pd.DataFrame:
    """Return one row per estimated parameter of a fitted model.

    Args:
        result: Fitted statsmodels results object.
        alpha (float, optional): Significance level of the confidence interval.
            Defaults to ``0.05`` (95% interval).

    Returns:
        pandas.DataFrame: Columns ``term``, ``estimate``, ``std_error``,
        ``statistic``, ``p_value``, ``conf_low`` and ``conf_high``.

    Raises:
        ValueError: If ``alpha`` is not strictly between 0 and 1.

    Note:
        ``statistic`` is a t value for OLS and a z value for GLM and mixed
        models, whichever the result object reports.
    """
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must be in (0, 1), got {alpha!r}")

    params = pd.Series(result.params)
    ci = pd.DataFrame(result.conf_int(alpha=alpha))
    return pd.DataFrame(
        {
            COEF.term: [str(term) for term in params.index],
            COEF.estimate: params.to_numpy(dtype=float),
            COEF.std_error: pd.Series(result.bse).to_numpy(dtype=float),
            COEF.statistic: pd.Series(result.tvalues).to_numpy(dtype=float),
            COEF.p_value: pd.Series(result.pvalues).to_numpy(dtype=float),
            COEF.conf_low: ci.iloc[:, 0].to_numpy(dtype=float),
            COEF.conf_high: ci.iloc[:, 1].to_numpy(dtype=float),
        }
    )


def anova_table(*results: Any) -> pd.DataFrame:
    """ANOVA for one OLS fit (type II) or sequential F-tests for nested fits.

    Raises:
        InvalidInputError: If no results are given.
    """
    if not results:
        raise InvalidInputError("At least one fitted model is required for ANOVA.")
    if len(results) == 1:
        return anova_lm(results[0], typ=2)
    return anova_lm(*results)


def likelihood_ratio_test(reduced: Any, full: Any) -> Dict[str, float]:
    """Compare nested models with a chi-square likelihood-ratio test.

    Args:
        reduced: Fitted model with fewer parameters.
        full: Fitted model containing ``reduced`` as a special case.

    Returns:
        dict[str, float]: ``statistic`` (``2 (logL_full - logL_reduced)``),
        ``df`` (difference in parameter counts) and ``p_value``.

    Raises:
        InvalidInputError: If ``full`` does not have more parameters than
            ``reduced``, or either log-likelihood is not finite.

    Note:
        Mixed models must be fitted with ``reml=False``; REML likelihoods are
        not comparable across different fixed effects.
    """
    llf_reduced = float(reduced.llf)
    llf_full = float(full.llf)
    if not (np.isfinite(llf_reduced) and np.isfinite(llf_full)):
        raise InvalidInputError("Log-likelihoods must be finite.")

    df = len(full.params) - len(reduced.params)
    if df <= 0:
        raise InvalidInputError(
            "The full model must have more parameters than the reduced model."
        )

    statistic = max(2.0 * (llf_full - llf_reduced), 0.0)
    return {
        "statistic": statistic,
        "df": float(df),
        "p_value": float(chi2.sf(statistic, df)),
    }
