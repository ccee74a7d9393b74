"""Non-interactive sumcheck for a multilinear polynomial in evaluation form."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Sequence

from .field import FieldElement
from .multilinear import MultilinearPolynomial
from .transcript import Transcript


@dataclass(frozen=True)
class SumcheckProof:
    """What the prover sends: the polynomial, its claimed sum and one message per round."""

    initial_polynomial: MultilinearPolynomial
    initial_claimed_sum: FieldElement
    round_univariate_polynomials: tuple

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "round_univariate_polynomials", tuple(self.round_univariate_polynomials)
        )


def split_polynomial_and_sum_each(values: Sequence[FieldElement]) -> list[FieldElement]:
    """Sum each half of the evaluations: the first variable fixed at 0 and at 1."""
    values = list(values)
    if not values:
        raise ValueError("cannot split an empty polynomial")
    zero = values[0].field.zero()
    mid = len(values) // 2
    return [sum(values[:mid], zero), sum(values[mid:], zero)]


def field_element_to_bytes(element: FieldElement) -> bytes:
    return element.to_bytes_be()


class Prover:
    """Proves the sum of a multilinear polynomial over the boolean hypercube."""

    def __init__(self, values: Sequence[FieldElement]) -> None:
        values = list(values)
        if not values:
            raise ValueError("at least one evaluation is required")
        self.initial_polynomial = MultilinearPolynomial(values)
        self.initial_claimed_sum: FieldElement = sum(values, values[0].field.zero())
        self.transcript = Transcript()
        self.round_univariate_polynomials: list[MultilinearPolynomial] = []

    def prove(self) -> SumcheckProof:
        field = self.initial_claimed_sum.field
        self.transcript = Transcript()
        self.round_univariate_polynomials = []

        self.transcript.append(self.initial_polynomial.to_bytes())
        self.transcript.append(field_element_to_bytes(self.initial_claimed_sum))

        current = self.initial_polynomial.evaluated_values
        for _ in range(self.initial_polynomial.number_of_variables()):
            univariate = MultilinearPolynomial(split_polynomial_and_sum_each(current))
            self.round_univariate_polynomials.append(univariate)
            self.transcript.append(univariate.to_bytes())

            challenge = self.transcript.random_challenge_as_field_element(field)
            current = MultilinearPolynomial.partial_evaluate(
                current, 0, challenge
            ).evaluated_values

        return SumcheckProof(
            initial_polynomial=self.initial_polynomial,
            initial_claimed_sum=self.initial_claimed_sum,
            round_univariate_polynomials=self.round_univariate_polynomials,
        )


@dataclass
class Verifier:
    """Checks a sumcheck proof, replaying the prover's transcript."""

    transcript: Transcript = dataclass_field(default_factory=Transcript)

    def verify(self, proof: SumcheckProof) -> bool:
        rounds = proof.round_univariate_polynomials
        if len(rounds) != proof.initial_polynomial.number_of_variables():
            return False

        field = proof.initial_claimed_sum.field
        zero, one = [field.zero()], [field.one()]
        current_claim = proof.initial_claimed_sum

        self.transcript.append(proof.initial_polynomial.to_bytes())
        self.transcript.append(field_element_to_bytes(proof.initial_claimed_sum))

        challenges = []
        for univariate in rounds:
            if univariate.evaluate(zero) + univariate.evaluate(one) != current_claim:
                return False
            self.transcript.append(univariate.to_bytes())
            challenge = self.transcript.random_challenge_as_field_element(field)
            challenges.append(challenge)
            current_claim = univariate.evaluate([challenge])

        return proof.initial_polynomial.evaluate(challenges) == current_claim