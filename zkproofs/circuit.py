"""Layered arithmetic circuits and their wiring polynomials."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field as dataclass_field
from typing import Sequence

from .field import BN254_FQ, FieldElement, PrimeField
from .multilinear import MultilinearPolynomial


class Operator(enum.Enum):
    ADD = "add"
    MUL = "mul"


@dataclass(frozen=True)
class Gate:
    """A gate reading two inputs and adding its result at output_index."""

    left_index: int
    right_index: int
    output_index: int
    operator: Operator

    def __post_init__(self) -> None:
        if min(self.left_index, self.right_index, self.output_index) < 0:
            raise ValueError("gate indices must not be negative")


@dataclass(frozen=True)
class Layer:
    gates: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "gates", tuple(self.gates))


@dataclass(frozen=True)
class CircuitEvaluation:
    """Output and values of every layer, output layer first, inputs last."""

    output: list
    layer_evaluations: list

    def layer_polynomial(self, layer_index: int) -> MultilinearPolynomial:
        """The values of one layer as a multilinear polynomial."""
        if not 0 <= layer_index < len(self.layer_evaluations):
            raise IndexError("layer index out of bounds")
        return MultilinearPolynomial(self.layer_evaluations[layer_index])


@dataclass
class Circuit:
    """Layers ordered from the output layer (0) down to the one nearest the inputs."""

    layers: list
    field: PrimeField = dataclass_field(default=BN254_FQ)

    def __post_init__(self) -> None:
        self.layers = list(self.layers)

    def evaluate(self, values: Sequence) -> CircuitEvaluation:
        current = [self.field(v) for v in values]
        evaluations = [current]
        for layer in reversed(self.layers):
            size = max((g.output_index for g in layer.gates), default=0) + 1
            result = [self.field.zero()] * size
            for gate in layer.gates:
                left = current[gate.left_index]
                right = current[gate.right_index]
                value = left + right if gate.operator is Operator.ADD else left * right
                result[gate.output_index] += value
            current = result
            evaluations.append(current)
        evaluations.reverse()
        return CircuitEvaluation(output=list(evaluations[0]), layer_evaluations=evaluations)

    def add_i_and_mul_i_mle(
        self, layer_index: int
    ) -> tuple[MultilinearPolynomial, MultilinearPolynomial]:
        """Wiring predicates of a layer over (a, b, c) as multilinear polynomials."""
        size = 1 << num_of_layer_variables(layer_index)
        add_values = [self.field.zero()] * size
        mul_values = [self.field.zero()] * size
        for gate in self.layers[layer_index].gates:
            position = convert_to_binary_and_to_decimal(
                layer_index, gate.output_index, gate.left_index, gate.right_index
            )
            target = add_values if gate.operator is Operator.ADD else mul_values
            target[position] = self.field.one()
        return MultilinearPolynomial(add_values), MultilinearPolynomial(mul_values)


def num_of_layer_variables(layer_index: int) -> int:
    """Number of bits of (a, b, c) for the wiring predicates of a layer."""
    if layer_index == 0:
        return 3
    return layer_index + 2 * (layer_index + 1)


def convert_to_binary_and_to_decimal(
    layer_index: int, variable_a: int, variable_b: int, variable_c: int
) -> int:
    """Concatenate padded binaries of a, b and c and read them as one number."""
    combined = (
        convert_decimal_to_padded_binary(variable_a, layer_index)
        + convert_decimal_to_padded_binary(variable_b, layer_index + 1)
        + convert_decimal_to_padded_binary(variable_c, layer_index + 1)
    )
    return int(combined, 2)


def convert_decimal_to_padded_binary(decimal_number: int, bit_length: int) -> str:
    return format(decimal_number, "b").rjust(bit_length, "0")


def transform_decimal_to_padded_binary(decimal_number: int, bit_length: int) -> str:
    """Like convert_decimal_to_padded_binary, but pads to at least one bit."""
    return format(decimal_number, "b").rjust(max(bit_length, 1), "0")