import pytest

from zkproofs.field import BN254_FQ
from zkproofs.multilinear import MultilinearPolynomial as ML

Fq = BN254_FQ


def fq(*values):
    return [Fq(v) for v in values]


def test_partial_evaluate():
    polynomial = fq(0, 0, 3, 8)
    assert ML.partial_evaluate(polynomial, 0, Fq(6)) == ML(fq(18, 48))
    assert ML.partial_evaluate(polynomial, 1, Fq(2)) == ML(fq(0, 13))
    assert ML.partial_evaluate(fq(18, 48), 0, Fq(2)) == ML(fq(78))
    bigger = fq(0, 0, 0, 3, 0, 0, 2, 5)
    assert ML.partial_evaluate(bigger, 2, Fq(3)) == ML(fq(0, 9, 0, 11))


def test_evaluate():
    assert ML(fq(0, 0, 3, 8)).evaluate(fq(6, 2)) == Fq(78)


def test_evaluate_at_hypercube_point_returns_stored_value():
    poly = ML(fq(4, 9, 1, 7, 3, 2, 8, 5))
    assert poly.evaluate(fq(1, 0, 1)) == Fq(2)


def test_tensor_add():
    result = ML.tensor_add(ML(fq(1, 2)), ML(fq(3, 4)))
    assert result == ML(fq(4, 5, 5, 6))


def test_tensor_mul():
    result = ML.tensor_mul(ML(fq(2, 3)), ML(fq(4, 5)))
    assert result == ML(fq(8, 10, 12, 15))


def test_tensor_mul_different_lengths():
    with pytest.raises(ValueError, match="different polynomial length"):
        ML.tensor_mul(ML(fq(2, 3)), ML(fq(4)))


def test_add_polynomials_different_lengths():
    with pytest.raises(ValueError):
        ML.add_polynomials(ML(fq(1, 2)), ML(fq(1, 2, 3, 4)))


def test_add_polynomials_agrees_with_evaluation():
    p, q = ML(fq(1, 5, 2, 8)), ML(fq(3, 0, 7, 4))
    point = fq(11, 13)
    assert ML.add_polynomials(p, q).evaluate(point) == p.evaluate(point) + q.evaluate(point)


def test_scalar_mul_scales_evaluation():
    p = ML(fq(1, 5, 2, 8))
    point = fq(6, 2)
    assert p.scalar_mul(Fq(3)).evaluate(point) == Fq(3) * p.evaluate(point)


def test_number_of_variables():
    assert ML(fq(0, 0, 3, 8)).number_of_variables() == 2
    assert ML(fq(1, 2, 3, 4, 5, 6, 7, 8)).number_of_variables() == 3


def test_to_bytes_concatenates_big_endian():
    poly = ML(fq(1, 2))
    data = poly.to_bytes()
    assert data == Fq(1).to_bytes_be() + Fq(2).to_bytes_be()
    assert data[31] == 1 and data[63] == 2


def test_partial_evaluate_bad_variable_raises():
    with pytest.raises(ValueError):
        ML.partial_evaluate(fq(0, 0, 3, 8), 2, Fq(1))