"""
Statistical utilities for multi-model comparison.

This subpackage provides the numerical routines behind AIC comparison and the
inference helpers used alongside it. Functions accept fitted statsmodels
results (or any object exposing the same attributes) and primitive arrays.

Modules:
    information:
        AIC extraction from fitted models, AIC from a log-likelihood, and the
        delta / relative-likelihood / Akaike-weight transform.

    inference:
        Tidy coefficient tables with confidence intervals, ANOVA for OLS fits,
        and likelihood-ratio tests between nested models.

Design Principle:
    This subpackage never fits models. Fitting belongs to the caller.
"""

from .inference import (
    DEFAULT_ALPHA,
    anova_table,
    likelihood_ratio_test,
    tidy_coefficients,
)
from .information import (
    SupportsAIC,
    aic_from_log_likelihood,
    akaike_weights,
    extract_aic,
)

__all__ = [
    "DEFAULT_ALPHA",
    "SupportsAIC",
    "aic_from_log_likelihood",
    "akaike_weights",
    "anova_table",
    "extract_aic",
    "likelihood_ratio_test",
    "tidy_coefficients",
]
