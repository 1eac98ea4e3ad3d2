"""
A Python package for comparing fitted statistical models by AIC.

Ranks a named collection of already-fitted models by delta AIC, relative
likelihood and Akaike weight, and provides the coefficient and nested-model
inference used when reporting the comparison.

Modules:
    - comparison: Builds the AIC comparison table from named fitted models.
    - stats: AIC extraction, Akaike weights, coefficient tables and tests.
    - output: Writes comparison and coefficient tables to CSV files.
"""

__version__ = "1.0.0"

from .comparison import (
    ComparisonRow,
    ComparisonTable,
    compare,
    evidence_ratio,
    summarize_aic,
)
from .errors import InvalidInputError
from .output import save_comparison_to_csv
from .stats import (
    akaike_weights,
    anova_table,
    extract_aic,
    likelihood_ratio_test,
    tidy_coefficients,
)

__all__ = [
    # Comparison
    "ComparisonRow",
    "ComparisonTable",
    "InvalidInputError",
    "compare",
    "evidence_ratio",
    "summarize_aic",
    # Statistics
    "akaike_weights",
    "extract_aic",
    "tidy_coefficients",
    "anova_table",
    "likelihood_ratio_test",
    # Output
    "save_comparison_to_csv",
]
