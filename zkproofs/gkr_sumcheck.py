"""Sumcheck over a sum of products of multilinear polynomials, as used by GKR."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .composed import SumPolynomial
from .field import FieldElement
from .transcript import Transcript
from .univariate import DenseUnivariatePolynomial


@dataclass(frozen=True)
class SumcheckProverProof:
    """The claimed sum, one univariate polynomial per round and the challenges used."""

    claimed_sum: FieldElement
    round_univariate_polynomials: tuple
    random_challenges: tuple

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "round_univariate_polynomials", tuple(self.round_univariate_polynomials)
        )
        object.__setattr__(self, "random_challenges", tuple(self.random_challenges))


@dataclass(frozen=True)
class SumcheckVerifierProof:
    """Outcome of verification: validity, challenges and the claim left to check."""

    is_proof_valid: bool
    random_challenges: tuple
    last_claimed_sum: FieldElement

    def __post_init__(self) -> None:
        object.__setattr__(self, "random_challenges", tuple(self.random_challenges))


def _field_of(polynomial: SumPolynomial):
    return polynomial.product_polynomials[0].polynomials[0].evaluated_values[0].field


def prove(
    sum_polynomial: SumPolynomial, claimed_sum: FieldElement, transcript: Transcript
) -> SumcheckProverProof:
    """Run the prover side, drawing challenges from the transcript."""
    field = claimed_sum.field
    x_values = [field(i) for i in range(sum_polynomial.degree() + 1)]
    round_polynomials = []
    challenges = []
    current = sum_polynomial

    transcript.append(claimed_sum.to_bytes_be())

    for _ in range(sum_polynomial.number_of_variables()):
        evaluations = generate_round_univariate(current)
        univariate = DenseUnivariatePolynomial.lagrange_interpolate(x_values, evaluations)
        transcript.append(univariate_to_bytes(univariate.coefficients))
        round_polynomials.append(univariate)

        challenge = transcript.random_challenge_as_field_element(field)
        current = current.partial_evaluate(0, challenge)
        challenges.append(challenge)

    return SumcheckProverProof(
        claimed_sum=claimed_sum,
        round_univariate_polynomials=round_polynomials,
        random_challenges=challenges,
    )


def verify(proof: SumcheckProverProof, transcript: Transcript) -> SumcheckVerifierProof:
    """Check every round; the final claim is left for the caller's oracle check."""
    field = proof.claimed_sum.field
    transcript.append(proof.claimed_sum.to_bytes_be())

    current_sum = proof.claimed_sum
    challenges = []

    for round_polynomial in proof.round_univariate_polynomials:
        at_zero = round_polynomial.evaluate(field.zero())
        at_one = round_polynomial.evaluate(field.one())
        if at_zero + at_one != current_sum:
            return SumcheckVerifierProof(
                is_proof_valid=False, random_challenges=(), last_claimed_sum=current_sum
            )

        transcript.append(univariate_to_bytes(round_polynomial.coefficients))
        challenge = transcript.random_challenge_as_field_element(field)
        current_sum = round_polynomial.evaluate(challenge)
        challenges.append(challenge)

    return SumcheckVerifierProof(
        is_proof_valid=True, random_challenges=challenges, last_claimed_sum=current_sum
    )


def generate_round_univariate(current_polynomial: SumPolynomial) -> list[FieldElement]:
    """Sums over the hypercube with the first variable fixed at 0 .. degree."""
    field = _field_of(current_polynomial)
    evaluations = []
    for i in range(current_polynomial.degree() + 1):
        collapsed = current_polynomial.partial_evaluate(0, field(i)).add_element_wise()
        evaluations.append(sum(collapsed.evaluated_values, field.zero()))
    return evaluations


def univariate_to_bytes(coefficients: Sequence[FieldElement]) -> bytes:
    return b"".join(c.to_bytes_le() for c in coefficients)