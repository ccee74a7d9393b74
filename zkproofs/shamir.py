"""Shamir secret sharing over a prime field."""

from __future__ import annotations

from typing import Sequence

from .field import FieldElement
from .univariate import DenseUnivariatePolynomial

Share = tuple[FieldElement, FieldElement]


def _check_threshold(threshold: int) -> None:
    if threshold < 1:
        raise ValueError("threshold must be at least 1")


def shares(
    secret: FieldElement, threshold: int, number_shares: int, rng=None
) -> list[Share]:
    """Split secret into shares at x = 1 .. number_shares - 1.

    The secret is the constant coefficient of a random polynomial of degree
    threshold - 1, so any threshold shares recover it.
    """
    _check_threshold(threshold)
    field = secret.field
    coefficients = [secret] + [field.random(rng) for _ in range(1, threshold)]
    polynomial = DenseUnivariatePolynomial(coefficients)
    return [(field(i), polynomial.evaluate(field(i))) for i in range(1, number_shares)]


def recover_secret(shares: Sequence[Share]) -> FieldElement:
    """Interpolate the shares and evaluate the polynomial at zero."""
    return _recover_at(shares, 0)


def password_shares(
    secret: FieldElement, password: int, threshold: int, number_shares: int, rng=None
) -> list[Share]:
    """Split secret so that it is recovered by evaluating at x = password.

    The polynomial goes through (password, secret) and through random values
    at x = 1 .. threshold - 1; shares are taken at x = 1 .. number_shares - 1.
    """
    _check_threshold(threshold)
    if 1 <= password < threshold:
        raise ValueError("password must not be one of the random x points")
    field = secret.field
    x_values = [field(password)] + [field(i) for i in range(1, threshold)]
    while True:
        y_values = [secret] + [field.random(rng) for _ in range(1, threshold)]
        polynomial = DenseUnivariatePolynomial.lagrange_interpolate(x_values, y_values)
        if polynomial.degree() == threshold - 1:
            break
    return [(field(i), polynomial.evaluate(field(i))) for i in range(1, number_shares)]


def password_recover_secret(shares: Sequence[Share], password: int) -> FieldElement:
    """Interpolate the shares and evaluate the polynomial at x = password."""
    return _recover_at(shares, password)


def _recover_at(shares: Sequence[Share], point: int) -> FieldElement:
    if not shares:
        raise ValueError("at least one share is needed")
    x_values = [x for x, _ in shares]
    y_values = [y for _, y in shares]
    polynomial = DenseUnivariatePolynomial.lagrange_interpolate(x_values, y_values)
    return polynomial.evaluate(x_values[0].field(point))