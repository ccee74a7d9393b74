"""Fibonacci numbers through an interpolated polynomial."""

from __future__ import annotations

from .field import FieldElement
from .univariate import DenseUnivariatePolynomial

_X_VALUES = (1, 2, 3, 4, 5, 6, 7)
_Y_VALUES = (1, 2, 3, 5, 8, 13, 21)


def evaluation(value: FieldElement) -> FieldElement:
    """Evaluate the polynomial through the first Fibonacci points at value."""
    field = value.field
    polynomial = DenseUnivariatePolynomial.lagrange_interpolate(
        [field(x) for x in _X_VALUES], [field(y) for y in _Y_VALUES]
    )
    return polynomial.evaluate(value)