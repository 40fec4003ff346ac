"""
Prime basis and extended monzos.

A monzo is a vector of exponents over the ascending primes 2, 3, 5, ...
The extended form adds a rational residual for prime factors beyond the
basis and a cents offset for intervals that are not rational at all.
Every interval notation can be expressed exactly in this form.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import lru_cache

from chuk_mcp_xen.constants import CENTS_PER_OCTAVE


@lru_cache(maxsize=None)
def primes(count: int) -> tuple[int, ...]:
    """The first `count` primes."""
    found: list[int] = []
    candidate = 2
    while len(found) < count:
        if all(candidate % p for p in found if p * p <= candidate):
            found.append(candidate)
        candidate += 1
    return tuple(found)


def factorize(n: int, count: int) -> tuple[tuple[int, ...], int]:
    """
    Factorize a positive integer over the first `count` primes.

    Returns:
        (exponents, remainder) where remainder holds the factors beyond the basis
    """
    if n < 1:
        raise ValueError(f"Can only factorize positive integers, got {n}")
    exponents = []
    for p in primes(count):
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        exponents.append(exponent)
    return tuple(exponents), n


@dataclass(frozen=True)
class ExtendedMonzo:
    """
    Exact representation of an interval: prime exponents, residual and cents.

    The vector length is fixed by the basis so vectors from different
    sources can be compared index by index.
    """

    vector: tuple[Fraction, ...]
    residual: Fraction = Fraction(1)
    cents: float = 0.0

    def __post_init__(self) -> None:
        if self.residual <= 0:
            raise ValueError(f"Residual must be positive, got {self.residual}")

    @property
    def number_of_components(self) -> int:
        return len(self.vector)

    @classmethod
    def zero(cls, number_of_components: int) -> ExtendedMonzo:
        """The unison."""
        return cls(tuple(Fraction(0) for _ in range(number_of_components)))

    @classmethod
    def from_fraction(cls, value: Fraction, number_of_components: int) -> ExtendedMonzo:
        """Factorize a positive fraction, leaving unknown primes in the residual."""
        num_exponents, num_rest = factorize(value.numerator, number_of_components)
        den_exponents, den_rest = factorize(value.denominator, number_of_components)
        vector = tuple(Fraction(n - d) for n, d in zip(num_exponents, den_exponents))
        return cls(vector, Fraction(num_rest, den_rest))

    @classmethod
    def from_cents(cls, cents: float, number_of_components: int) -> ExtendedMonzo:
        return cls(cls.zero(number_of_components).vector, cents=cents)

    def total_cents(self) -> float:
        """Size of the interval in cents."""
        total = math.fsum(
            float(exponent) * math.log2(p)
            for exponent, p in zip(self.vector, primes(len(self.vector)))
            if exponent
        )
        if self.residual != 1:
            total += math.log2(self.residual.numerator) - math.log2(self.residual.denominator)
        return CENTS_PER_OCTAVE * total + self.cents

    def is_fractional(self) -> bool:
        """True if the value is an exact ratio (integer exponents, no cents)."""
        return self.cents == 0 and all(e.denominator == 1 for e in self.vector)

    def to_fraction(self) -> Fraction:
        """
        Convert back to a ratio.

        Raises:
            ValueError: If the monzo has fractional exponents or a cents offset
        """
        if not self.is_fractional():
            raise ValueError("Monzo with fractional exponents or cents is not a ratio")
        result = self.residual
        for exponent, p in zip(self.vector, primes(len(self.vector))):
            result *= Fraction(p) ** int(exponent)
        return result

    def __add__(self, other: ExtendedMonzo) -> ExtendedMonzo:
        if not isinstance(other, ExtendedMonzo):
            return NotImplemented
        self._check_compatible(other)
        return ExtendedMonzo(
            tuple(a + b for a, b in zip(self.vector, other.vector)),
            self.residual * other.residual,
            self.cents + other.cents,
        )

    def __neg__(self) -> ExtendedMonzo:
        return ExtendedMonzo(tuple(-e for e in self.vector), 1 / self.residual, -self.cents)

    def __sub__(self, other: ExtendedMonzo) -> ExtendedMonzo:
        if not isinstance(other, ExtendedMonzo):
            return NotImplemented
        return self + (-other)

    def __mul__(self, factor: Fraction | int) -> ExtendedMonzo:
        """Scale the exponents (e.g. one step of an equal division)."""
        if not isinstance(factor, (int, Fraction)):
            return NotImplemented
        if self.residual != 1:
            raise ValueError("Cannot scale a monzo with a residual by a fraction")
        return ExtendedMonzo(tuple(e * factor for e in self.vector), cents=self.cents * factor)

    def __rmul__(self, factor: Fraction | int) -> ExtendedMonzo:
        return self.__mul__(factor)

    def _check_compatible(self, other: ExtendedMonzo) -> None:
        if len(self.vector) != len(other.vector):
            raise ValueError(
                f"Monzo lengths differ: {len(self.vector)} and {len(other.vector)}"
            )

    def __str__(self) -> str:
        # Trailing zeros are padding
        components = list(self.vector)
        while components and components[-1] == 0:
            components.pop()
        text = f"[{' '.join(str(c) for c in components)}>"
        if self.residual != 1:
            text += f" * {self.residual}"
        if self.cents:
            text += f" + {self.cents}c"
        return text
