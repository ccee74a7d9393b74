"""GKR protocol for layered arithmetic circuits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .circuit import Circuit
from .composed import ProductPolynomial, SumPolynomial
from .field import FieldElement
from .gkr_sumcheck import prove as sumcheck_prove
from .gkr_sumcheck import verify as sumcheck_verify
from .multilinear import MultilinearPolynomial
from .transcript import Transcript


@dataclass(frozen=True)
class Proof:
    """Circuit output, one sumcheck proof per layer and the W evaluations between layers."""

    circuit_output: tuple
    claimed_sum: FieldElement
    sumcheck_proofs: tuple
    wb_evals: tuple
    wc_evals: tuple

    def __post_init__(self) -> None:
        for name in ("circuit_output", "sumcheck_proofs", "wb_evals", "wc_evals"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


def _output_polynomial(output, field) -> MultilinearPolynomial:
    values = list(output)
    if len(values) == 1:
        values.append(field.zero())
    return MultilinearPolynomial(values)


def _fold(values, challenges) -> MultilinearPolynomial:
    polynomial = MultilinearPolynomial(values)
    for challenge in challenges:
        polynomial = MultilinearPolynomial.partial_evaluate(
            polynomial.evaluated_values, 0, challenge
        )
    return polynomial


def _split(challenges: Sequence[FieldElement]):
    challenges = list(challenges)
    middle = len(challenges) // 2
    return challenges[:middle], challenges[middle:]


def prove(circuit: Circuit, inputs: Sequence) -> Proof:
    """Evaluate the circuit and prove its output layer by layer."""
    field = circuit.field
    evaluation = circuit.evaluate(inputs)
    transcript = Transcript()

    layer_proofs = []
    wb_evals = []
    wc_evals = []
    alpha = beta = field.zero()
    rb_values: list = []
    rc_values: list = []

    w0 = _output_polynomial(evaluation.layer_polynomial(0).evaluated_values, field)
    transcript.append(w0.to_bytes())
    random_challenge_a = transcript.random_challenge_as_field_element(field)
    claimed_sum = w0.evaluate([random_challenge_a])

    last_layer = len(circuit.layers) - 1
    for layer_index in range(len(circuit.layers)):
        add_i_abc, mul_i_abc = circuit.add_i_and_mul_i_mle(layer_index)
        if layer_index == 0:
            add_i_bc = MultilinearPolynomial.partial_evaluate(
                add_i_abc.evaluated_values, 0, random_challenge_a
            )
            mul_i_bc = MultilinearPolynomial.partial_evaluate(
                mul_i_abc.evaluated_values, 0, random_challenge_a
            )
        else:
            add_i_bc, mul_i_bc = compute_new_add_i_mul_i(
                alpha, beta, add_i_abc, mul_i_abc, rb_values, rc_values
            )

        wb_poly = evaluation.layer_polynomial(layer_index + 1)
        wc_poly = wb_poly

        fbc_polynomial = compute_fbc_polynomial(add_i_bc, mul_i_bc, wb_poly, wc_poly)
        sumcheck_proof = sumcheck_prove(fbc_polynomial, claimed_sum, transcript)
        layer_proofs.append(sumcheck_proof)

        if layer_index < last_layer:
            challenges = sumcheck_proof.random_challenges
            wb_evaluation, wc_evaluation = evaluate_wb_wc(wb_poly, wc_poly, challenges)
            wb_evals.append(wb_evaluation)
            wc_evals.append(wc_evaluation)
            rb_values, rc_values = _split(challenges)

            transcript.append(wb_evaluation.to_bytes_be())
            alpha = transcript.random_challenge_as_field_element(field)
            transcript.append(wc_evaluation.to_bytes_be())
            beta = transcript.random_challenge_as_field_element(field)

            claimed_sum = alpha * wb_evaluation + beta * wc_evaluation

    return Proof(
        circuit_output=evaluation.output,
        claimed_sum=claimed_sum,
        sumcheck_proofs=layer_proofs,
        wb_evals=wb_evals,
        wc_evals=wc_evals,
    )


def verify(circuit: Circuit, proof: Proof, inputs: Sequence) -> bool:
    """Check a proof that the circuit maps inputs to proof.circuit_output."""
    field = circuit.field
    layer_count = len(circuit.layers)
    if len(proof.sumcheck_proofs) != layer_count:
        return False
    if min(len(proof.wb_evals), len(proof.wc_evals)) < layer_count - 1:
        return False
    if not proof.circuit_output:
        return False

    transcript = Transcript()
    alpha = beta = field.zero()
    previous_challenges: list = []

    w0 = _output_polynomial(proof.circuit_output, field)
    transcript.append(w0.to_bytes())
    random_challenge_a = transcript.random_challenge_as_field_element(field)
    claimed_sum = w0.evaluate([random_challenge_a])

    for layer_index in range(layer_count):
        layer_proof = proof.sumcheck_proofs[layer_index]
        if claimed_sum != layer_proof.claimed_sum:
            return False

        result = sumcheck_verify(layer_proof, transcript)
        if not result.is_proof_valid:
            return False
        challenges = list(result.random_challenges)

        if layer_index < layer_count - 1:
            wb_evaluation = proof.wb_evals[layer_index]
            wc_evaluation = proof.wc_evals[layer_index]
        else:
            input_poly = MultilinearPolynomial([field(v) for v in inputs])
            wb_evaluation, wc_evaluation = evaluate_wb_wc(input_poly, input_poly, challenges)

        if layer_index == 0:
            expected_claim = compute_verifier_initial_claim(
                circuit, layer_index, random_challenge_a, challenges,
                wb_evaluation, wc_evaluation,
            )
        else:
            expected_claim = compute_verifier_folded_claim(
                circuit, layer_index, challenges, previous_challenges,
                wb_evaluation, wc_evaluation, alpha, beta,
            )

        if expected_claim != result.last_claimed_sum:
            return False

        previous_challenges = challenges

        transcript.append(wb_evaluation.to_bytes_be())
        alpha = transcript.random_challenge_as_field_element(field)
        transcript.append(wc_evaluation.to_bytes_be())
        beta = transcript.random_challenge_as_field_element(field)

        claimed_sum = alpha * wb_evaluation + beta * wc_evaluation

    return True


def compute_fbc_polynomial(
    add_i_bc: MultilinearPolynomial,
    mul_i_bc: MultilinearPolynomial,
    w_b_polynomial: MultilinearPolynomial,
    w_c_polynomial: MultilinearPolynomial,
) -> SumPolynomial:
    """add_i(b,c)*(W(b)+W(c)) + mul_i(b,c)*(W(b)*W(c))."""
    add_wbc = MultilinearPolynomial.tensor_add(w_b_polynomial, w_c_polynomial)
    mul_wbc = MultilinearPolynomial.tensor_mul(w_b_polynomial, w_c_polynomial)
    return SumPolynomial(
        [ProductPolynomial([add_i_bc, add_wbc]), ProductPolynomial([mul_i_bc, mul_wbc])]
    )


def compute_new_add_i_mul_i(
    alpha: FieldElement,
    beta: FieldElement,
    add_i_abc: MultilinearPolynomial,
    mul_i_abc: MultilinearPolynomial,
    rb_values: Sequence[FieldElement],
    rc_values: Sequence[FieldElement],
) -> tuple[MultilinearPolynomial, MultilinearPolynomial]:
    """Fold the wiring predicates at rb and rc into alpha*f(rb,..) + beta*f(rc,..)."""
    if not rb_values or not rc_values:
        raise ValueError("random challenges for b and c must not be empty")

    add_rb = _fold(add_i_abc.evaluated_values, rb_values)
    add_rc = _fold(add_i_abc.evaluated_values, rc_values)
    mul_rb = _fold(mul_i_abc.evaluated_values, rb_values)
    mul_rc = _fold(mul_i_abc.evaluated_values, rc_values)

    new_add_i = MultilinearPolynomial.add_polynomials(
        add_rb.scalar_mul(alpha), add_rc.scalar_mul(beta)
    )
    new_mul_i = MultilinearPolynomial.add_polynomials(
        mul_rb.scalar_mul(alpha), mul_rc.scalar_mul(beta)
    )
    return new_add_i, new_mul_i


def evaluate_wb_wc(
    wb_poly: MultilinearPolynomial,
    wc_poly: MultilinearPolynomial,
    sumcheck_challenges: Sequence[FieldElement],
) -> tuple[FieldElement, FieldElement]:
    """Evaluate W(b) at the first half of the challenges and W(c) at the second."""
    rb_values, rc_values = _split(sumcheck_challenges)
    return wb_poly.evaluate(rb_values), wc_poly.evaluate(rc_values)


def _claim(add_r, mul_r, wb_evaluation, wc_evaluation) -> FieldElement:
    return add_r * (wb_evaluation + wc_evaluation) + mul_r * (wb_evaluation * wc_evaluation)


def compute_verifier_initial_claim(
    circuit: Circuit,
    layer_index: int,
    initial_random_challenge: FieldElement,
    sumcheck_challenges: Sequence[FieldElement],
    wb_evaluation: FieldElement,
    wc_evaluation: FieldElement,
) -> FieldElement:
    """The value the output layer's sumcheck must end at."""
    add_i_abc, mul_i_abc = circuit.add_i_and_mul_i_mle(layer_index)
    add_i_bc = MultilinearPolynomial.partial_evaluate(
        add_i_abc.evaluated_values, 0, initial_random_challenge
    )
    mul_i_bc = MultilinearPolynomial.partial_evaluate(
        mul_i_abc.evaluated_values, 0, initial_random_challenge
    )
    challenges = list(sumcheck_challenges)
    return _claim(
        add_i_bc.evaluate(challenges),
        mul_i_bc.evaluate(challenges),
        wb_evaluation,
        wc_evaluation,
    )


def compute_verifier_folded_claim(
    circuit: Circuit,
    layer_index: int,
    current_sumcheck_challenges: Sequence[FieldElement],
    previous_sumcheck_challenges: Sequence[FieldElement],
    wb_evaluation: FieldElement,
    wc_evaluation: FieldElement,
    alpha: FieldElement,
    beta: FieldElement,
) -> FieldElement:
    """The value an inner layer's sumcheck must end at."""
    prev_rb, prev_rc = _split(previous_sumcheck_challenges)
    add_i_abc, mul_i_abc = circuit.add_i_and_mul_i_mle(layer_index)
    new_add_i, new_mul_i = compute_new_add_i_mul_i(
        alpha, beta, add_i_abc, mul_i_abc, prev_rb, prev_rc
    )
    challenges = list(current_sumcheck_challenges)
    return _claim(
        new_add_i.evaluate(challenges),
        new_mul_i.evaluate(challenges),
        wb_evaluation,
        wc_evaluation,
    )