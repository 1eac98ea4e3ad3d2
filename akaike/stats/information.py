"""Provide information-criterion utilities used in multi-model comparison.

This module supports:
- extracting a scalar AIC from any fitted model exposing one,
- computing AIC directly from a maximized log-likelihood, and
- the vectorized delta / relative-likelihood / Akaike-weight transform.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Dict, Protocol, Sequence

import numpy as np

from ..errors import InvalidInputError


class SupportsAIC(Protocol):
    """Minimal capability required from a fitted model.

    statsmodels result objects (``RegressionResults``, ``GLMResults``,
    ``MixedLMResults``) satisfy this through their ``aic`` property. Used as
    a type hint only: statsmodels hands out ``ResultsWrapper`` objects that
    forward attributes through ``__getattribute__``, invisible to runtime
    protocol checks from Python 3.12 on.
    """

    aic: Any


def extract_aic(model: SupportsAIC) -> float:
    """Return the AIC of a fitted model as a finite float.

    Args:
        model: Fitted model exposing ``aic`` either as an attribute or as a
            zero-argument method.

    Returns:
        float: Akaike Information Criterion of ``model``.

    Raises:
        InvalidInputError: If ``model`` has no ``aic`` capability, or its AIC is
            not a finite real number.

    Note:
        Mixed-effects models fitted by REML report a NaN AIC in statsmodels
        because the restricted likelihood is not comparable across fixed
        effects. Refit those with ``reml=False`` before comparing.
    """
    try:
        value = model.aic
    except AttributeError as exc:
        raise InvalidInputError(
            f"Object of type {type(model).__name__} does not expose an AIC."
        ) from exc
    if callable(value):
        value = value()

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(
            f"AIC of {type(model).__name__} is not a real number: {value!r}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(
            f"AIC of {type(model).__name__} is not finite ({value}); "
            "mixed models must be fitted with reml=False."
        )
    return value


def aic_from_log_likelihood(log_likelihood: float, k: int) -> float:
    """Compute ``AIC = 2k - 2 log L`` for a model with ``k`` parameters."""
    if k < 0:
        raise ValueError("k must be >= 0")
    return float(2 * k - 2 * log_likelihood)


def akaike_weights(aic_values: Sequence[float]) -> Dict[str, np.ndarray]:
    """Transform AIC values into deltas, relative likelihoods and weights.

    Args:
        aic_values (Sequence[float]): AIC of each compared model, in the order
            rows should be reported.

    Returns:
        dict[str, numpy.ndarray]: Arrays ``aic``, ``delta_aic``,
        ``likelihood`` and ``weight``, each aligned with ``aic_values``.

    Raises:
        InvalidInputError: If ``aic_values`` is empty or contains non-finite
            values.

    Note:
        ``delta_aic`` is exactly 0 and ``likelihood`` exactly 1 for every model
        sharing the minimum AIC, so ties split the weight evenly. For large
        deltas ``exp(-0.5 * delta)`` underflows towards 0; that is the standard
        formula's behavior and is kept as-is.

    References:
        Burnham, K. P. & Anderson, D. R. (2002), Model Selection and
        Multimodel Inference, section 2.9.
    """
    aic = np.asarray(aic_values, dtype=float)
    if aic.ndim != 1 or aic.size == 0:
        raise InvalidInputError("At least one AIC value is required.")
    if not np.all(np.isfinite(aic)):
        raise InvalidInputError("AIC values must be finite.")

    delta = aic - aic.min()
    likelihood = np.exp(-0.5 * delta)
    weight = likelihood / likelihood.sum()

    return {
        "aic": aic,
        "delta_aic": delta,
        "likelihood": likelihood,
        "weight": weight,
    }
