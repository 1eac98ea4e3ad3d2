"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonColumns:
    """Container for standardized AIC comparison column labels.

    These names are shared by ``summarize_aic``, ``ComparisonTable.to_frame``
    and the CSV export so that every table produced by the package lines up.

    Attributes:
        name: Model label supplied by the caller.

        aic: Akaike Information Criterion of the fitted model. Lower values
            indicate better expected out-of-sample fit after penalizing the
            number of estimated parameters.

        delta_aic: Difference between the model's AIC and the minimum AIC of
            the compared set. Zero for the best-supported model.

        likelihood: Relative likelihood ``exp(-0.5 * delta_aic)``, in
            ``(0, 1]``. Values far from the best model underflow towards 0.

        weight: Akaike weight, the relative likelihood normalized over the
            compared set. Weights sum to one.
    """

    name: str = "Model"
    aic: str = "AIC"
    delta_aic: str = "Delta AIC"
    likelihood: str = "Relative likelihood"
    weight: str = "Akaike weight"


@dataclass(frozen=True)
class CoefficientColumns:
    """Container for tidy coefficient table labels."""

    model: str = "model"
    term: str = "term"
    estimate: str = "estimate"
    std_error: str = "std_error"
    statistic: str = "statistic"
    p_value: str = "p_value"
    conf_low: str = "conf_low"
    conf_high: str = "conf_high"
