"""Interactive sumcheck, with the verifier drawing its own random challenges."""

from __future__ import annotations

from typing import Sequence

from .field import FieldElement
from .multilinear import MultilinearPolynomial
from .sumcheck import split_polynomial_and_sum_each


class InteractiveProver:
    """Answers the verifier round by round."""

    def __init__(self, values: Sequence[FieldElement]) -> None:
        values = list(values)
        if not values:
            raise ValueError("at least one evaluation is required")
        self.initial_polynomial = MultilinearPolynomial(values)
        self.initial_claimed_sum: FieldElement = sum(values, values[0].field.zero())
        self.current_polynomial: list[FieldElement] = values
        self.round = 0

    def prove(
        self, random_challenge: FieldElement
    ) -> tuple[FieldElement, list[FieldElement]]:
        """Return the current claimed sum and the round polynomial.

        The first call ignores the challenge and sends the initial claim.
        """
        if self.round == 0:
            self.round += 1
            return self.initial_claimed_sum, split_polynomial_and_sum_each(
                self.current_polynomial
            )

        self.current_polynomial = list(
            MultilinearPolynomial.partial_evaluate(
                self.current_polynomial, 0, random_challenge
            ).evaluated_values
        )
        if not self.current_polynomial:
            raise ValueError("all variables have already been fixed")
        field = self.initial_claimed_sum.field
        new_claimed_sum = sum(self.current_polynomial, field.zero())
        self.round += 1
        return new_claimed_sum, split_polynomial_and_sum_each(self.current_polynomial)


class InteractiveVerifier:
    """Checks each round and finishes with an oracle query."""

    def __init__(self, values: Sequence[FieldElement]) -> None:
        values = list(values)
        if not values:
            raise ValueError("at least one evaluation is required")
        self.initial_polynomial = MultilinearPolynomial(values)
        self._field = values[0].field
        self.current_claimed_sum: FieldElement = self._field.zero()
        self.challenges: list[FieldElement] = []
        self.round = 0

    def verify(
        self, claimed_sum: FieldElement, univariate_polynomial: Sequence[FieldElement]
    ) -> bool:
        univariate_polynomial = list(univariate_polynomial)
        if len(univariate_polynomial) != 2:
            return False
        univariate = MultilinearPolynomial(univariate_polynomial)
        at_zero = univariate.evaluate([self._field.zero()])
        at_one = univariate.evaluate([self._field.one()])
        if at_zero + at_one != claimed_sum:
            return False
        self.current_claimed_sum = claimed_sum
        return True

    def generate_challenge(self, rng=None) -> FieldElement:
        challenge = self._field.random(rng)
        self.challenges.append(challenge)
        return challenge

    def oracle_check(self) -> bool:
        return self.current_claimed_sum == self.initial_polynomial.evaluate(
            self.challenges
        )