"""
Interval primitives - one interval, four notations.

An Interval is a tagged value: `type` says which notation it was written
in and `value` holds that notation's fields. Consumers handle each of the
four value classes explicitly, so the set of notations stays closed.

    Interval.ratio(3, 2)              3/2
    Interval.from_cents(701.955)      701.955
    Interval.equal_temperament(7, 12) 7\\12
    Interval.from_monzo([-1, 1])      [-1 1>

Immutable and hashable.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from fractions import Fraction

from chuk_mcp_xen.constants import (
    CENTS_PER_OCTAVE,
    DEFAULT_NUMBER_OF_COMPONENTS,
    ErrorMessages,
    IntervalType,
)
from chuk_mcp_xen.core.monzo import ExtendedMonzo, primes
from chuk_mcp_xen.exceptions import InvalidNumericError, VectorOverflowError


@dataclass(frozen=True)
class RatioValue:
    """A frequency ratio, kept reduced with a positive denominator."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        token = f"{self.numerator}/{self.denominator}"
        if self.denominator == 0:
            raise InvalidNumericError(
                ErrorMessages.ZERO_DENOMINATOR.format(token=token), token=token, expected="ratio"
            )
        if (self.numerator > 0) != (self.denominator > 0) or self.numerator == 0:
            raise InvalidNumericError(
                ErrorMessages.NON_POSITIVE_RATIO.format(token=token), token=token, expected="ratio"
            )
        reduced = Fraction(self.numerator, self.denominator)
        object.__setattr__(self, "numerator", reduced.numerator)
        object.__setattr__(self, "denominator", reduced.denominator)

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class CentsValue:
    """A size given directly in cents."""

    cents: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.cents):
            raise InvalidNumericError(
                ErrorMessages.NON_FINITE.format(token=self.cents),
                token=str(self.cents),
                expected="cents",
            )

    def __str__(self) -> str:
        text = repr(float(self.cents))
        # Cents are written with a dot: 2400.0 -> "2400."
        return text[:-1] if text.endswith(".0") else text


@dataclass(frozen=True)
class EqualTemperamentValue:
    """`steps` of an equal division of `equave` into `divisions` parts."""

    steps: int
    divisions: int
    equave: Fraction = Fraction(2)

    def __post_init__(self) -> None:
        token = str(self)
        if self.divisions <= 0:
            raise InvalidNumericError(
                ErrorMessages.INVALID_DIVISIONS.format(token=token),
                token=token,
                expected="equal temperament",
            )
        if self.equave <= 0 or self.equave == 1:
            raise InvalidNumericError(
                ErrorMessages.INVALID_EQUAVE.format(token=token),
                token=token,
                expected="equal temperament",
            )
        object.__setattr__(self, "equave", Fraction(self.equave))

    def __str__(self) -> str:
        text = f"{self.steps}\\{self.divisions}"
        if self.equave != 2:
            text += f"<{self.equave}>"
        return text


@dataclass(frozen=True)
class MonzoValue:
    """Exponents over the prime basis, padded to a fixed length."""

    vector: tuple[Fraction, ...]

    def __str__(self) -> str:
        components = list(self.vector)
        while components and components[-1] == 0:
            components.pop()
        return f"[{' '.join(str(c) for c in components)}>"


IntervalValue = RatioValue | CentsValue | EqualTemperamentValue | MonzoValue

_VALUE_TYPES: dict[IntervalType, type] = {
    IntervalType.RATIO: RatioValue,
    IntervalType.CENTS: CentsValue,
    IntervalType.EQUAL_TEMPERAMENT: EqualTemperamentValue,
    IntervalType.MONZO: MonzoValue,
}


@dataclass(frozen=True)
class Interval:
    """
    A musical interval in exactly one notation.

    `number_of_components` fixes the prime basis used when the interval is
    viewed as a monzo. Intervals stack with `+`, unstack with `-`.
    """

    type: IntervalType
    value: IntervalValue
    number_of_components: int = field(default=DEFAULT_NUMBER_OF_COMPONENTS, compare=False)

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.type]
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.type.value} interval needs a {expected.__name__}, "
                f"got {type(self.value).__name__}"
            )
        if isinstance(self.value, MonzoValue) and len(self.value.vector) != self.number_of_components:
            raise ValueError(
                f"Monzo vector must have {self.number_of_components} components, "
                f"got {len(self.value.vector)}"
            )

    @classmethod
    def ratio(
        cls,
        numerator: int,
        denominator: int = 1,
        number_of_components: int = DEFAULT_NUMBER_OF_COMPONENTS,
    ) -> Interval:
        return cls(IntervalType.RATIO, RatioValue(numerator, denominator), number_of_components)

    @classmethod
    def from_cents(
        cls, cents: float, number_of_components: int = DEFAULT_NUMBER_OF_COMPONENTS
    ) -> Interval:
        return cls(IntervalType.CENTS, CentsValue(float(cents)), number_of_components)

    @classmethod
    def equal_temperament(
        cls,
        steps: int,
        divisions: int,
        equave: Fraction | int = 2,
        number_of_components: int = DEFAULT_NUMBER_OF_COMPONENTS,
    ) -> Interval:
        return cls(
            IntervalType.EQUAL_TEMPERAMENT,
            EqualTemperamentValue(steps, divisions, Fraction(equave)),
            number_of_components,
        )

    @classmethod
    def from_monzo(
        cls,
        components: Iterable[Fraction | int],
        number_of_components: int = DEFAULT_NUMBER_OF_COMPONENTS,
    ) -> Interval:
        """
        Create a monzo interval, right-padding with zero exponents.

        Raises:
            VectorOverflowError: If there are more components than the basis
        """
        vector = [Fraction(c) for c in components]
        if len(vector) > number_of_components:
            token = str(MonzoValue(tuple(vector)))
            raise VectorOverflowError(
                ErrorMessages.VECTOR_OVERFLOW.format(
                    token=token, count=len(vector), limit=number_of_components
                ),
                token=token,
                expected="monzo",
            )
        vector.extend(Fraction(0) for _ in range(number_of_components - len(vector)))
        return cls(IntervalType.MONZO, MonzoValue(tuple(vector)), number_of_components)

    def total_cents(self) -> float:
        """Size of the interval in cents."""
        value = self.value
        if isinstance(value, RatioValue):
            return CENTS_PER_OCTAVE * (math.log2(value.numerator) - math.log2(value.denominator))
        elif isinstance(value, CentsValue):
            return value.cents
        elif isinstance(value, EqualTemperamentValue):
            equave_octaves = math.log2(value.equave.numerator) - math.log2(value.equave.denominator)
            return CENTS_PER_OCTAVE * value.steps / value.divisions * equave_octaves
        elif isinstance(value, MonzoValue):
            return CENTS_PER_OCTAVE * math.fsum(
                float(e) * math.log2(p)
                for e, p in zip(value.vector, primes(len(value.vector)))
                if e
            )
        raise AssertionError(f"Unhandled interval type: {self.type}")

    @property
    def monzo(self) -> ExtendedMonzo:
        """This interval as an extended monzo over the configured basis."""
        value = self.value
        n = self.number_of_components
        if isinstance(value, RatioValue):
            return ExtendedMonzo.from_fraction(value.fraction, n)
        elif isinstance(value, CentsValue):
            return ExtendedMonzo.from_cents(value.cents, n)
        elif isinstance(value, EqualTemperamentValue):
            equave = ExtendedMonzo.from_fraction(value.equave, n)
            if equave.residual != 1:
                return ExtendedMonzo.from_cents(self.total_cents(), n)
            return equave * Fraction(value.steps, value.divisions)
        elif isinstance(value, MonzoValue):
            return ExtendedMonzo(value.vector)
        raise AssertionError(f"Unhandled interval type: {self.type}")

    def __add__(self, other: Interval) -> Interval:
        """Stack two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        n = self.number_of_components
        if other.number_of_components != n:
            raise ValueError(
                f"Cannot combine intervals over {n} and {other.number_of_components} primes"
            )

        if self.type == other.type:
            if isinstance(self.value, RatioValue) and isinstance(other.value, RatioValue):
                product = self.value.fraction * other.value.fraction
                return Interval.ratio(product.numerator, product.denominator, n)
            if isinstance(self.value, CentsValue) and isinstance(other.value, CentsValue):
                return Interval.from_cents(self.value.cents + other.value.cents, n)
            if isinstance(self.value, MonzoValue) and isinstance(other.value, MonzoValue):
                return Interval.from_monzo(
                    (a + b for a, b in zip(self.value.vector, other.value.vector)), n
                )
            if (
                isinstance(self.value, EqualTemperamentValue)
                and isinstance(other.value, EqualTemperamentValue)
                and self.value.equave == other.value.equave
            ):
                divisions = math.lcm(self.value.divisions, other.value.divisions)
                steps = self.value.steps * (divisions // self.value.divisions) + other.value.steps * (
                    divisions // other.value.divisions
                )
                return Interval.equal_temperament(steps, divisions, self.value.equave, n)

        if IntervalType.CENTS in (self.type, other.type):
            return Interval.from_cents(self.total_cents() + other.total_cents(), n)

        combined = self.monzo + other.monzo
        if combined.residual == 1 and combined.cents == 0:
            return Interval.from_monzo(combined.vector, n)
        return Interval.from_cents(combined.total_cents(), n)

    def __neg__(self) -> Interval:
        """The inverse interval (descending instead of ascending)."""
        value = self.value
        n = self.number_of_components
        if isinstance(value, RatioValue):
            return Interval.ratio(value.denominator, value.numerator, n)
        elif isinstance(value, CentsValue):
            return Interval.from_cents(-value.cents, n)
        elif isinstance(value, EqualTemperamentValue):
            return Interval.equal_temperament(-value.steps, value.divisions, value.equave, n)
        elif isinstance(value, MonzoValue):
            return Interval.from_monzo((-e for e in value.vector), n)
        raise AssertionError(f"Unhandled interval type: {self.type}")

    def __sub__(self, other: Interval) -> Interval:
        """Unstack an interval."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self + (-other)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Interval({self.type.value}, {self.value})"
