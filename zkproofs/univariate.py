"""Dense univariate polynomials over a prime field."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Sequence

from .field import FieldElement


@dataclass(frozen=True)
class DenseUnivariatePolynomial:
    """Polynomial stored by coefficients, lowest degree first."""

    coefficients: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficients", tuple(self.coefficients))

    def degree(self) -> int:
        if not self.coefficients:
            raise ValueError("empty polynomial has no degree")
        return len(self.coefficients) - 1

    def evaluate(self, value: FieldElement) -> FieldElement:
        result = value.field.zero()
        for coefficient in reversed(self.coefficients):
            result = result * value + coefficient
        return result

    def evaluate_advanced(self, value: FieldElement) -> FieldElement:
        return sum(
            (c * value.pow(exp) for exp, c in enumerate(self.coefficients)),
            value.field.zero(),
        )

    @classmethod
    def lagrange_interpolate(
        cls, x_values: Sequence[FieldElement], y_values: Sequence[FieldElement]
    ) -> "DenseUnivariatePolynomial":
        if not x_values:
            raise ValueError("at least one point is needed to interpolate")
        if len(y_values) < len(x_values):
            raise ValueError("fewer y values than x values")
        field = x_values[0].field
        result = [field.zero()]
        for x, y in zip(x_values, y_values):
            result = add_polynomials(result, _lagrange_basis(y, x, x_values))
        return cls(result)


def _lagrange_basis(y_point, focus_x, interpolating_set):
    field = focus_x.field
    numerator = [field.one()]
    for x in interpolating_set:
        if x != focus_x:
            numerator = multiply_polynomials(numerator, [-x, field.one()])
    denominator = DenseUnivariatePolynomial(numerator).evaluate(focus_x)
    scale = y_point / denominator
    return [scale * c for c in numerator]


def multiply_polynomials(left: Sequence, right: Sequence) -> list:
    """Product of two coefficient lists; index is the exponent."""
    product = [0] * (len(left) + len(right) - 1)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            product[i + j] = a * b + product[i + j]
    return product


def add_polynomials(left: Sequence, right: Sequence) -> list:
    """Coefficient-wise sum of two coefficient lists."""
    larger, smaller = (left, right) if len(left) > len(right) else (right, left)
    return [
        a if b is None else a + b
        for a, b in zip_longest(larger, smaller, fillvalue=None)
    ]