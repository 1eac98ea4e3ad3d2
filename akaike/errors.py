"""Exceptions raised when a model collection cannot be compared."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a named model collection violates comparison preconditions.

    Covers an empty collection, duplicate or malformed names, and entries
    whose AIC cannot be obtained. Subclasses ``ValueError`` so callers that
    already guard numerical inputs with ``except ValueError`` keep working.
    """
