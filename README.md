# zkproofs

Building blocks for proof systems over prime fields: field arithmetic,
univariate and multilinear polynomials, a Keccak-256 Fiat-Shamir transcript,
the sumcheck protocol (interactive and non-interactive), layered arithmetic
circuits and the GKR protocol, plus Shamir secret sharing.

## Modules

- `zkproofs.field`: `PrimeField` and `FieldElement`. Two fields are ready to
  use: `BN254_FQ` (the base field of BN254) and `BLS12_381_FR` (the scalar
  field of BLS12-381). Calling a field on an integer gives a reduced element;
  elements support `+`, `-`, `*`, `/`, unary `-`, `**`, `pow`, `inverse`,
  `to_bytes_be` and `to_bytes_le`. `PrimeField.random(rng)` draws from a
  `random.Random`-like `rng`, or from `secrets` when `rng` is `None`.
- `zkproofs.transcript`: `Transcript`, with `append(data)`,
  `sample_random_challenge()` (the Keccak-256 hash of everything absorbed so
  far, which is then absorbed itself) and
  `random_challenge_as_field_element(field)` (the hash read as a little-endian
  integer modulo the field).
- `zkproofs.univariate`: `DenseUnivariatePolynomial` (coefficients lowest
  degree first) with `degree`, `evaluate`, `evaluate_advanced` and the class
  method `lagrange_interpolate(x_values, y_values)`; plus the coefficient-list
  helpers `multiply_polynomials` and `add_polynomials`.
- `zkproofs.multilinear`: `MultilinearPolynomial`, values over the boolean
  hypercube with the first variable as the most significant index bit.
  Methods: `evaluate`, `to_bytes`, `number_of_variables`, `scalar_mul`, and
  the class methods `partial_evaluate`, `tensor_add`, `tensor_mul` and
  `add_polynomials`.
- `zkproofs.composed`: `ProductPolynomial` and `SumPolynomial`, products and
  sums of multilinear polynomials with the same number of variables
  (a `ValueError` is raised otherwise).
- `zkproofs.fibonacci`: `evaluation(value)` evaluates the polynomial through
  the points (1, 1), (2, 2), (3, 3), (4, 5), (5, 8), (6, 13), (7, 21).
- `zkproofs.shamir`: `shares(secret, threshold, number_shares, rng=None)` and
  `recover_secret(shares)` keep the secret at x = 0;
  `password_shares(secret, password, threshold, number_shares, rng=None)` and
  `password_recover_secret(shares, password)` keep it at the integer point
  x = `password`, which must not lie in 1 .. threshold - 1. Shares are taken at
  x = 1 .. number_shares - 1.
- `zkproofs.circuit`: `Operator` (`ADD`, `MUL`), `Gate`, `Layer`, `Circuit`
  and `CircuitEvaluation`. Layer 0 is the output layer. `Circuit.evaluate`
  returns every layer's values, output first and inputs last;
  `Circuit.add_i_and_mul_i_mle(layer_index)` gives the wiring predicates of a
  layer as multilinear polynomials.
- `zkproofs.sumcheck`: non-interactive sumcheck for a multilinear polynomial:
  `Prover`, `Verifier`, `SumcheckProof`.
- `zkproofs.interactive_sumcheck`: `InteractiveProver` and
  `InteractiveVerifier`, where the verifier draws its own challenges and ends
  with `oracle_check()`.
- `zkproofs.gkr_sumcheck`: sumcheck over a `SumPolynomial`: `prove`,
  `verify`, `generate_round_univariate`, `univariate_to_bytes`.
- `zkproofs.gkr`: the GKR protocol for a `Circuit`: `prove(circuit, inputs)`
  returns a `Proof`, `verify(circuit, proof, inputs)` returns a `bool`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Example: proving a circuit with GKR

```python
from zkproofs import gkr
from zkproofs.circuit import Circuit, Gate, Layer, Operator
from zkproofs.field import BN254_FQ

circuit = Circuit([
    Layer([Gate(0, 1, 0, Operator.MUL)]),
    Layer([Gate(0, 1, 0, Operator.ADD), Gate(2, 3, 1, Operator.MUL)]),
])
inputs = [BN254_FQ(v) for v in (2, 3, 4, 5)]

proof = gkr.prove(circuit, inputs)
assert proof.circuit_output == (BN254_FQ(100),)
assert gkr.verify(circuit, proof, inputs)
```

`Circuit` works over `BN254_FQ` unless another field is passed as `field=`.

## Example: sumcheck

```python
from zkproofs.field import BLS12_381_FR
from zkproofs.sumcheck import Prover, Verifier

values = [BLS12_381_FR(v) for v in (0, 0, 2, 7, 3, 3, 6, 11)]
prover = Prover(values)
assert prover.initial_claimed_sum == BLS12_381_FR(32)
assert Verifier().verify(prover.prove())
```

A `Verifier` keeps its transcript between calls, so use a fresh one for each
proof.

## Example: secret sharing

```python
import random

from zkproofs.field import BN254_FQ
from zkproofs.shamir import recover_secret, shares

parts = shares(BN254_FQ(17), 4, 10, random.Random())
assert len(parts) == 9
assert recover_secret(parts) == BN254_FQ(17)
```

## What it does not do

This is a library only: it has no command-line tool and stores nothing.
The proofs are succinct checks of computation, not hiding: nothing is masked,
and there is no polynomial commitment scheme, so the GKR verifier takes the
circuit inputs in the clear.