"""Multilinear polynomials in evaluation form over the boolean hypercube."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Sequence

from .field import FieldElement


@dataclass(frozen=True)
class MultilinearPolynomial:
    """Values of a multilinear polynomial at every point of {0,1}^n.

    The first variable is the most significant bit of the index.
    """

    evaluated_values: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "evaluated_values", tuple(self.evaluated_values))

    def evaluate(self, values: Sequence[FieldElement]) -> FieldElement:
        current = self
        for value in values:
            current = self.partial_evaluate(current.evaluated_values, 0, value)
        if not current.evaluated_values:
            raise ValueError("too many values for this polynomial")
        return current.evaluated_values[0]

    def to_bytes(self) -> bytes:
        return b"".join(v.to_bytes_be() for v in self.evaluated_values)

    def number_of_variables(self) -> int:
        if not self.evaluated_values:
            raise ValueError("empty polynomial has no variables")
        return len(self.evaluated_values).bit_length() - 1

    def scalar_mul(self, scalar: FieldElement) -> "MultilinearPolynomial":
        return MultilinearPolynomial(v * scalar for v in self.evaluated_values)

    @classmethod
    def partial_evaluate(
        cls, values: Sequence[FieldElement], evaluating_variable: int, value: FieldElement
    ) -> "MultilinearPolynomial":
        """Fix one variable to value, halving the number of evaluations."""
        values = tuple(values)
        size = len(values) // 2
        if size == 0:
            return cls(())
        number_of_variables = len(values).bit_length() - 1
        if not 0 <= evaluating_variable < number_of_variables:
            raise ValueError("evaluating variable out of range")
        stride = 1 << (number_of_variables - 1 - evaluating_variable)
        low_indices = (j for j in range(len(values)) if not j & stride)
        return cls(
            values[j] + value * (values[j | stride] - values[j])
            for j in islice(low_indices, size)
        )

    @classmethod
    def tensor_add(cls, w_b: "MultilinearPolynomial", w_c: "MultilinearPolynomial"):
        if len(w_b.evaluated_values) != len(w_c.evaluated_values):
            raise ValueError("different polynomial length")
        return cls(b + c for b in w_b.evaluated_values for c in w_c.evaluated_values)

    @classmethod
    def tensor_mul(cls, w_b: "MultilinearPolynomial", w_c: "MultilinearPolynomial"):
        if len(w_b.evaluated_values) != len(w_c.evaluated_values):
            raise ValueError("different polynomial length")
        return cls(b * c for b in w_b.evaluated_values for c in w_c.evaluated_values)

    @classmethod
    def add_polynomials(cls, poly1: "MultilinearPolynomial", poly2: "MultilinearPolynomial"):
        if len(poly1.evaluated_values) != len(poly2.evaluated_values):
            raise ValueError(
                "Polynomials must have same number of evaluations for addition"
            )
        return cls(a + b for a, b in zip(poly1.evaluated_values, poly2.evaluated_values))