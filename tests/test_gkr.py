import dataclasses

import pytest

from zkproofs.circuit import Circuit, Gate, Layer, Operator
from zkproofs.field import BN254_FQ
from zkproofs.gkr import (
    compute_fbc_polynomial,
    compute_new_add_i_mul_i,
    evaluate_wb_wc,
    prove,
    verify,
)
from zkproofs.multilinear import MultilinearPolynomial

F = BN254_FQ


def _ml(*values):
    return MultilinearPolynomial([F(v) for v in values])


def _circuit1():
    layer0 = Layer([Gate(0, 1, 0, Operator.MUL)])
    layer1 = Layer([Gate(0, 1, 0, Operator.ADD), Gate(2, 3, 1, Operator.MUL)])
    return Circuit([layer0, layer1])


def _circuit2():
    layer0 = Layer([Gate(0, 1, 0, Operator.ADD)])
    layer1 = Layer([Gate(0, 1, 0, Operator.MUL), Gate(2, 3, 1, Operator.ADD)])
    layer2 = Layer(
        [
            Gate(0, 1, 0, Operator.ADD),
            Gate(2, 3, 1, Operator.ADD),
            Gate(4, 5, 2, Operator.ADD),
            Gate(6, 7, 3, Operator.ADD),
        ]
    )
    return Circuit([layer0, layer1, layer2])


INPUTS1 = [F(2), F(3), F(4), F(5)]
INPUTS2 = [F(v) for v in range(1, 9)]


def test_gkr_protocol1():
    circuit = _circuit1()
    proof = prove(circuit, INPUTS1)
    assert list(proof.circuit_output) == [F(100)]
    assert verify(circuit, proof, INPUTS1) is True


def test_gkr_protocol2():
    circuit = _circuit2()
    proof = prove(circuit, INPUTS2)
    assert list(proof.circuit_output) == [F(47)]
    assert verify(circuit, proof, INPUTS2) is True


def test_proof_shape():
    proof = prove(_circuit2(), INPUTS2)
    assert len(proof.sumcheck_proofs) == 3
    assert len(proof.wb_evals) == 2
    assert len(proof.wc_evals) == 2


def test_wrong_output_is_rejected():
    circuit = _circuit1()
    proof = prove(circuit, INPUTS1)
    forged = dataclasses.replace(proof, circuit_output=(F(101),))
    assert verify(circuit, forged, INPUTS1) is False


def test_wrong_inputs_are_rejected():
    circuit = _circuit1()
    proof = prove(circuit, INPUTS1)
    assert verify(circuit, proof, [F(2), F(3), F(4), F(6)]) is False


def test_tampered_intermediate_evaluation_is_rejected():
    circuit = _circuit2()
    proof = prove(circuit, INPUTS2)
    forged = dataclasses.replace(proof, wb_evals=(proof.wb_evals[0] + 1, proof.wb_evals[1]))
    assert verify(circuit, forged, INPUTS2) is False


def test_evaluate_wb_wc_splits_challenges():
    wb = _ml(1, 2)
    wc = _ml(3, 4)
    assert evaluate_wb_wc(wb, wc, [F(5), F(7)]) == (F(6), F(10))


def test_compute_fbc_polynomial_collapses_to_wiring_sum():
    add_i_bc = _ml(0, 1, 0, 0)
    mul_i_bc = _ml(0, 0, 0, 0)
    w = _ml(3, 4)
    fbc = compute_fbc_polynomial(add_i_bc, mul_i_bc, w, w)
    assert fbc.number_of_variables() == 2
    assert fbc.add_element_wise() == _ml(0, 7, 0, 0)


def test_compute_new_add_i_mul_i_at_boolean_points():
    add_abc = _ml(1, 2, 3, 4, 5, 6, 7, 8)
    mul_abc = _ml(8, 7, 6, 5, 4, 3, 2, 1)
    new_add, new_mul = compute_new_add_i_mul_i(F(1), F(1), add_abc, mul_abc, [F(0)], [F(1)])
    assert new_add == _ml(6, 8, 10, 12)
    assert new_mul == _ml(12, 10, 8, 6)


def test_compute_new_add_i_mul_i_rejects_empty_challenges():
    poly = _ml(1, 2, 3, 4)
    with pytest.raises(ValueError):
        compute_new_add_i_mul_i(F(1), F(1), poly, poly, [], [F(1)])