"""
Genome representation for the genetic algorithm.

A genome is a fixed-length, immutable string of bits read as an unsigned
big-endian integer. Genetic operators never modify a genome in place; they
return new genomes.
"""

from typing import Any, Iterable, Sequence, Tuple

import numpy as np

from bitevo.core.exceptions import ValidationError


def decode(bits: Sequence[int]) -> int:
    """
    Decode bits as an unsigned big-endian integer.

    The first bit is the most significant one, so ``(0, 1, 0, 0, 0)``
    decodes to 8. An empty sequence decodes to 0.
    """
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


class Genome:
    """Fixed-length binary string encoding a candidate solution."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int]):
        """
        Initialize genome from bits.

        Args:
            bits: Iterable of 0/1 values, most significant bit first

        Raises:
            ValidationError: If any value is not 0 or 1
        """
        bits = list(bits)
        # Membership uses ==, so 0.7 or "1" are rejected rather than truncated
        invalid = [bit for bit in bits if isinstance(bit, (str, bytes)) or bit not in (0, 1)]
        if invalid:
            raise ValidationError("Genome bits must be 0 or 1", details=invalid)
        self._bits = tuple(int(bit) for bit in bits)

    @classmethod
    def random(cls, length: int, rng: np.random.Generator) -> "Genome":
        """
        Create a random genome.

        Args:
            length: Number of bits
            rng: Random generator to draw the bits from

        Returns:
            Genome whose bits are independent fair coin flips
        """
        return cls(rng.integers(0, 2, size=length).tolist())

    @classmethod
    def from_string(cls, text: str) -> "Genome":
        """Create a genome from a string such as ``"01000"``."""
        invalid = sorted(set(text) - {"0", "1"})
        if invalid:
            raise ValidationError(f"Invalid genome string {text!r}", details=invalid)
        return cls(int(char) for char in text)

    @property
    def bits(self) -> Tuple[int, ...]:
        return self._bits

    def decode(self) -> int:
        """Return the unsigned big-endian value of this genome."""
        return decode(self._bits)

    def flip(self, index: int) -> "Genome":
        """
        Return a copy of this genome with one bit inverted.

        Args:
            index: Position of the bit to flip

        Raises:
            IndexError: If index is outside the genome
        """
        if not 0 <= index < len(self._bits):
            raise IndexError(f"Bit index {index} out of range for genome of length {len(self)}")
        bits = list(self._bits)
        bits[index] ^= 1
        return Genome(bits)

    def crossover(self, other: "Genome", cut: int) -> Tuple["Genome", "Genome"]:
        """
        Single-point crossover with another genome.

        The first child takes this genome's bits before ``cut`` and the other
        genome's bits from ``cut`` on; the second child is the complement.

        Args:
            other: Genome to recombine with
            cut: Cut point, 0 <= cut <= len(self)

        Returns:
            Tuple of the two children
        """
        if len(self) != len(other):
            raise ValidationError(
                "Genomes must have the same length for crossover",
                details={"left": len(self), "right": len(other)}
            )
        if not 0 <= cut <= len(self):
            raise IndexError(f"Cut point {cut} out of range for genome of length {len(self)}")

        first = Genome(self._bits[:cut] + other._bits[cut:])
        second = Genome(other._bits[:cut] + self._bits[cut:])
        return first, second

    def hamming(self, other: "Genome") -> int:
        """Number of positions at which the two genomes differ."""
        if len(self) != len(other):
            raise ValidationError("Genomes must have the same length for distance calculation")
        return sum(a != b for a, b in zip(self._bits, other._bits))

    def __len__(self) -> int:
        return len(self._bits)

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self._bits)

    def __repr__(self) -> str:
        return f"Genome('{self}')"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)
