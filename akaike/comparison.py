"""
Multi-model comparison by Akaike Information Criterion.

Given a named collection of already-fitted models, rank them by relative
support:

    delta_i      = AIC_i - min(AIC)
    likelihood_i = exp(-0.5 * delta_i)
    weight_i     = likelihood_i / sum_j likelihood_j

Rows keep the caller's input order; the ordering carries no meaning beyond
display. Models are never fitted, copied or mutated here; fitting happens
upstream (typically with statsmodels) and its errors propagate unchanged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .errors import InvalidInputError
from .schema import ComparisonColumns
from .stats.information import akaike_weights, extract_aic

ModelCollection = Union[Mapping, Iterable[Tuple[str, Any]]]
AICFunction = Callable[[Any], float]

COLUMNS = ComparisonColumns()


@dataclass(frozen=True)
class ComparisonRow:
    """AIC summary of one model within a compared set."""

    name: str
    aic: float
    delta_aic: float
    likelihood: float
    weight: float


@dataclass(frozen=True)
class ComparisonTable:
    """Ordered, immutable sequence of comparison rows."""

    rows: Tuple[ComparisonRow, ...]

    def __iter__(self) -> Iterator[ComparisonRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, name: str) -> ComparisonRow:
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)

    @property
    def names(self) -> List[str]:
        return [row.name for row in self.rows]

    @property
    def best(self) -> ComparisonRow:
        """Row with the largest weight; the first in input order on ties."""
        return max(self.rows, key=lambda row: row.weight)

    def to_frame(self) -> pd.DataFrame:
        """Return the table as a DataFrame with standardized column labels."""
        return pd.DataFrame(
            {
                COLUMNS.name: [row.name for row in self.rows],
                COLUMNS.aic: [row.aic for row in self.rows],
                COLUMNS.delta_aic: [row.delta_aic for row in self.rows],
                COLUMNS.likelihood: [row.likelihood for row in self.rows],
                COLUMNS.weight: [row.weight for row in self.rows],
            }
        )


def _named_entries(models: ModelCollection) -> List[Tuple[str, Any]]:
    """Normalize a mapping or ``(name, model)`` pairs and validate the names."""
    if models is None:
        raise InvalidInputError("No models supplied for comparison.")

    if isinstance(models, Mapping):
        entries = list(models.items())
    else:
        try:
            items = list(models)
        except TypeError as exc:
            raise InvalidInputError(
                f"Expected a mapping or (name, model) pairs, got {type(models).__name__}."
            ) from exc
        entries = []
        for item in items:
            if not isinstance(item, tuple) or len(item) != 2:
                raise InvalidInputError(
                    f"Expected (name, model) pairs, got {item!r}."
                )
            entries.append(item)

    if not entries:
        raise InvalidInputError("At least one model is required for comparison.")

    seen = set()
    for name, _ in entries:
        if not isinstance(name, str) or not name:
            raise InvalidInputError(f"Model names must be non-empty strings, got {name!r}.")
        if name in seen:
            raise InvalidInputError(f"Duplicate model name '{name}'.")
        seen.add(name)
    return entries


def _aic_of(name: str, model: Any, aic_func: Optional[AICFunction]) -> float:
    if aic_func is None:
        try:
            return extract_aic(model)
        except InvalidInputError as exc:
            raise InvalidInputError(f"Model '{name}': {exc}") from exc

    try:
        value = aic_func(model)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Could not compute AIC for model '{name}': {exc}"
        ) from exc
    if isinstance(value, bool):
        raise InvalidInputError(
            f"AIC for model '{name}' is not a real number: {value!r}"
        )
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"AIC for model '{name}' is not a real number: {value!r}"
        ) from exc
    if not math.isfinite(value):
        raise InvalidInputError(f"AIC for model '{name}' is not finite ({value}).")
    return value


def compare(
    models: ModelCollection, aic_func: Optional[AICFunction] = None
) -> ComparisonTable:
    """Rank fitted models by Akaike weight.

    Args:
        models (Mapping[str, Any] | Iterable[tuple[str, Any]]): Named fitted
            models. Names must be unique non-empty strings.
        aic_func (Callable[[Any], float], optional): Function returning the AIC
            of one model. Defaults to ``extract_aic``, which reads the model's
            ``aic`` attribute.

    Returns:
        ComparisonTable: One row per model, in input order.

    Raises:
        InvalidInputError: If the collection is empty, a name is duplicated or
            malformed, or the AIC of any entry cannot be obtained.

    Note:
        Pure function of its input: no model is mutated and repeated calls
        return bit-identical tables.
    """
    entries = _named_entries(models)
    names = [name for name, _ in entries]
    aics = [_aic_of(name, model, aic_func) for name, model in entries]

    result = akaike_weights(aics)
    rows = tuple(
        ComparisonRow(
            name=name,
            aic=float(result["aic"][i]),
            delta_aic=float(result["delta_aic"][i]),
            likelihood=float(result["likelihood"][i]),
            weight=float(result["weight"][i]),
        )
        for i, name in enumerate(names)
    )
    table = ComparisonTable(rows=rows)
    logging.debug(
        "Compared %d models; best '%s' (weight %.4f)",
        len(table),
        table.best.name,
        table.best.weight,
    )
    return table


def summarize_aic(
    models: ModelCollection, aic_func: Optional[AICFunction] = None
) -> pd.DataFrame:
    """Return ``compare(models)`` as a DataFrame in input order."""
    return compare(models, aic_func=aic_func).to_frame()


def evidence_ratio(table: ComparisonTable, a: str, b: str) -> float:
    """Return how many times more support model ``a`` has than model ``b``.

    Args:
        table (ComparisonTable): Output of ``compare``.
        a (str): Name of the numerator model.
        b (str): Name of the denominator model.

    Returns:
        float: ``weight_a / weight_b``, evaluated as
        ``exp(0.5 * (delta_b - delta_a))`` so it stays defined when either
        weight underflowed to zero. Overflows to ``inf``.

    Raises:
        KeyError: If either name is not in ``table``.
    """
    delta_a = table[a].delta_aic
    delta_b = table[b].delta_aic
    with np.errstate(over="ignore"):
        return float(np.exp(0.5 * (delta_b - delta_a)))
