import dataclasses

from zkproofs.composed import ProductPolynomial, SumPolynomial
from zkproofs.field import BN254_FQ
from zkproofs.gkr_sumcheck import (
    generate_round_univariate,
    prove,
    univariate_to_bytes,
    verify,
)
from zkproofs.multilinear import MultilinearPolynomial
from zkproofs.transcript import Transcript

F = BN254_FQ


def _ml(*values):
    return MultilinearPolynomial([F(v) for v in values])


def _sum_polynomial():
    product1 = ProductPolynomial([_ml(0, 0, 0, 2), _ml(0, 0, 0, 3)])
    product2 = ProductPolynomial([_ml(0, 0, 0, 2), _ml(0, 0, 0, 3)])
    return SumPolynomial([product1, product2])


def test_generate_round_univariate():
    assert generate_round_univariate(_sum_polynomial()) == [F(0), F(12), F(48)]


def test_prover_and_verifier():
    proof = prove(_sum_polynomial(), F(12), Transcript())
    verified = verify(proof, Transcript())
    assert verified.is_proof_valid is True


def test_proof_has_one_round_per_variable():
    proof = prove(_sum_polynomial(), F(12), Transcript())
    assert len(proof.round_univariate_polynomials) == 2
    assert len(proof.random_challenges) == 2
    assert all(p.degree() == 2 for p in proof.round_univariate_polynomials)


def test_verifier_challenges_match_prover_and_final_claim_is_oracle_value():
    polynomial = _sum_polynomial()
    proof = prove(polynomial, F(12), Transcript())
    verified = verify(proof, Transcript())
    assert verified.random_challenges == proof.random_challenges
    assert verified.last_claimed_sum == polynomial.evaluate(list(verified.random_challenges))


def test_wrong_claimed_sum_is_rejected():
    proof = prove(_sum_polynomial(), F(13), Transcript())
    verified = verify(proof, Transcript())
    assert verified.is_proof_valid is False
    assert verified.random_challenges == ()
    assert verified.last_claimed_sum == F(13)


def test_tampered_claim_is_rejected():
    proof = prove(_sum_polynomial(), F(12), Transcript())
    tampered = dataclasses.replace(proof, claimed_sum=F(11))
    assert verify(tampered, Transcript()).is_proof_valid is False


def test_univariate_to_bytes_is_little_endian():
    expected = bytes([1]) + bytes(31) + bytes([2]) + bytes(31)
    assert univariate_to_bytes([F(1), F(2)]) == expected