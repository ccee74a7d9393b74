"""Prime field arithmetic."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Union

BN254_FQ_MODULUS = (
    21888242871839275222246405745257275088696311157297823662689037894645226208583
)
BLS12_381_FR_MODULUS = (
    0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
)


@dataclass(frozen=True)
class PrimeField:
    """A prime field; calling it turns an integer into an element."""

    modulus: int
    name: str = ""

    @property
    def byte_length(self) -> int:
        """Width of the canonical encoding, a whole number of 64-bit limbs."""
        return (self.modulus.bit_length() + 63) // 64 * 8

    def __call__(self, value: Union[int, "FieldElement"]) -> "FieldElement":
        if isinstance(value, FieldElement):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return value
        if not isinstance(value, int):
            raise TypeError(f"cannot convert {type(value).__name__} to a field element")
        return FieldElement(value % self.modulus, self)

    def zero(self) -> "FieldElement":
        return FieldElement(0, self)

    def one(self) -> "FieldElement":
        return FieldElement(1 % self.modulus, self)

    def random(self, rng=None) -> "FieldElement":
        """A uniformly random element; rng is a random.Random-like source."""
        if rng is None:
            return FieldElement(secrets.randbelow(self.modulus), self)
        return FieldElement(rng.randrange(self.modulus), self)

    def from_le_bytes_mod_order(self, data: bytes) -> "FieldElement":
        return self(int.from_bytes(bytes(data), "little"))


@dataclass(frozen=True, eq=False)
class FieldElement:
    """An element of a prime field, kept reduced."""

    value: int
    field: PrimeField

    def _coerce(self, other) -> "FieldElement":
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise ValueError("cannot combine elements of different fields")
            return other
        if isinstance(other, int):
            return self.field(other)
        return NotImplemented

    def _wrap(self, value: int) -> "FieldElement":
        return FieldElement(value % self.field.modulus, self.field)

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._wrap(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._wrap(self.value - other.value)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._wrap(other.value - self.value)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._wrap(self.value * other.value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other * self.inverse()

    def __neg__(self) -> "FieldElement":
        return self._wrap(-self.value)

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.pow(exponent)

    def __eq__(self, other) -> bool:
        if isinstance(other, FieldElement):
            return self.field == other.field and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.field.modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"FieldElement({self.value})"

    def pow(self, exponent: int) -> "FieldElement":
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return FieldElement(pow(self.value, exponent, self.field.modulus), self.field)

    def inverse(self) -> "FieldElement":
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse in a field")
        return FieldElement(pow(self.value, -1, self.field.modulus), self.field)

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(self.field.byte_length, "big")

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(self.field.byte_length, "little")


BN254_FQ = PrimeField(BN254_FQ_MODULUS, "bn254.Fq")
BLS12_381_FR = PrimeField(BLS12_381_FR_MODULUS, "bls12_381.Fr")