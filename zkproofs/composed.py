"""Products and sums of multilinear polynomials."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from operator import add, mul
from typing import Sequence

from .field import FieldElement
from .multilinear import MultilinearPolynomial


@dataclass(frozen=True)
class ProductPolynomial:
    """Product of multilinear polynomials that share the same variables."""

    polynomials: tuple

    def __post_init__(self) -> None:
        polynomials = tuple(self.polynomials)
        if not polynomials:
            raise ValueError("at least one polynomial is required")
        num_of_variables = polynomials[0].number_of_variables()
        if any(p.number_of_variables() != num_of_variables for p in polynomials):
            raise ValueError("different number of variables")
        object.__setattr__(self, "polynomials", polynomials)

    def evaluate(self, values: Sequence[FieldElement]) -> FieldElement:
        return reduce(mul, (p.evaluate(values) for p in self.polynomials))

    def partial_evaluate(
        self, evaluating_variable: int, value: FieldElement
    ) -> list[MultilinearPolynomial]:
        return [
            MultilinearPolynomial.partial_evaluate(
                p.evaluated_values, evaluating_variable, value
            )
            for p in self.polynomials
        ]

    def multiply_element_wise(self) -> MultilinearPolynomial:
        """Collapse the factors into one polynomial by pointwise multiplication."""
        if len(self.polynomials) <= 1:
            raise ValueError("more than one polynomial required for mul operation")
        columns = zip(*(p.evaluated_values for p in self.polynomials))
        return MultilinearPolynomial(reduce(mul, column) for column in columns)

    def to_bytes(self) -> bytes:
        return b"".join(p.to_bytes() for p in self.polynomials)

    def degree(self) -> int:
        return len(self.polynomials)


@dataclass(frozen=True)
class SumPolynomial:
    """Sum of product polynomials that share the same variables."""

    product_polynomials: tuple

    def __post_init__(self) -> None:
        products = tuple(self.product_polynomials)
        if not products:
            raise ValueError("at least one product polynomial is required")
        num_of_variables = products[0].polynomials[0].number_of_variables()
        if any(
            p.number_of_variables() != num_of_variables
            for product in products
            for p in product.polynomials
        ):
            raise ValueError("different number of variables")
        object.__setattr__(self, "product_polynomials", products)

    def evaluate(self, values: Sequence[FieldElement]) -> FieldElement:
        return reduce(add, (p.evaluate(values) for p in self.product_polynomials))

    def partial_evaluate(self, evaluating_variable: int, value: FieldElement) -> "SumPolynomial":
        return SumPolynomial(
            ProductPolynomial(product.partial_evaluate(evaluating_variable, value))
            for product in self.product_polynomials
        )

    def add_element_wise(self) -> MultilinearPolynomial:
        """Collapse the terms into one polynomial by pointwise addition."""
        if len(self.product_polynomials) <= 1:
            raise ValueError(
                "more than one product polynomial required for add operation"
            )
        multiplied = (
            p.multiply_element_wise().evaluated_values for p in self.product_polynomials
        )
        return MultilinearPolynomial(reduce(add, column) for column in zip(*multiplied))

    def to_bytes(self) -> bytes:
        return b"".join(p.to_bytes() for p in self.product_polynomials)

    def degree(self) -> int:
        return self.product_polynomials[0].degree()

    def number_of_variables(self) -> int:
        return self.product_polynomials[0].polynomials[0].number_of_variables()