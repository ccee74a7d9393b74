"""Fiat-Shamir transcript built on Keccak-256."""

from __future__ import annotations

from Crypto.Hash import keccak

from .field import FieldElement, PrimeField


class Transcript:
    """Absorbs bytes and squeezes out deterministic challenges.

    Each challenge is the Keccak-256 hash of everything absorbed so far; the
    challenge is then absorbed itself so later challenges build on it.
    """

    def __init__(self) -> None:
        self._absorbed = bytearray()

    def append(self, data: bytes) -> None:
        self._absorbed += data

    def sample_random_challenge(self) -> bytes:
        digest = keccak.new(digest_bits=256, data=bytes(self._absorbed)).digest()
        self._absorbed += digest
        return digest

    def random_challenge_as_field_element(self, field: PrimeField) -> FieldElement:
        return field.from_le_bytes_mod_order(self.sample_random_challenge())