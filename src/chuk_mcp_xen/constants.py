"""
Constants and enums for the notation system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# Length of the prime basis used for monzo vectors (primes up to 97)
DEFAULT_NUMBER_OF_COMPONENTS = 25

CENTS_PER_OCTAVE = 1200

# Largest number of decimals the formatter will render
MAX_FRACTION_DIGITS = 100


class IntervalType(str, Enum):
    """The notation an interval was written in."""

    RATIO = "ratio"
    CENTS = "cents"
    EQUAL_TEMPERAMENT = "equal temperament"
    MONZO = "monzo"


class KeyColor(str, Enum):
    """Color of a key on a generalized keyboard."""

    WHITE = "white"
    BLACK = "black"


# SI prefixes from quecto (10^-30) to quetta (10^30), one per power of 1000
SI_PREFIXES: tuple[str, ...] = (
    "q",
    "r",
    "y",
    "z",
    "a",
    "f",
    "p",
    "n",
    "µ",  # micro sign
    "m",
    "",
    "k",
    "M",
    "G",
    "T",
    "P",
    "E",
    "Z",
    "Y",
    "R",
    "Q",
)

# Index of the unprefixed bucket in SI_PREFIXES
SI_BASE_INDEX = SI_PREFIXES.index("")


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_NOTATION = (
        "Unrecognized interval '{token}'. Expected a ratio (3/2), cents (701.955), "
        "equal temperament (7\\12) or monzo ([-1 1>)."
    )
    UNTERMINATED_VECTOR = "Unterminated monzo '{token}'. Expected closing '{close}'."
    INVALID_NOTATION = "Invalid {expected} '{token}'. Expected something like {example}."
    SINGLE_INTERVAL = "Expected a single interval, got {count} in '{token}'."
    ZERO_DENOMINATOR = "Invalid ratio '{token}': denominator must be non-zero."
    NON_POSITIVE_RATIO = "Invalid ratio '{token}': ratio must be positive."
    INVALID_DIVISIONS = "Invalid equal temperament '{token}': divisions must be positive."
    INVALID_EQUAVE = "Invalid equal temperament '{token}': equave must be positive and not 1."
    INVALID_EXPONENT = "Invalid monzo component '{component}' in '{token}'."
    VECTOR_OVERFLOW = "Monzo '{token}' has {count} components. Expected at most {limit}."
    NON_FINITE = "Invalid number '{token}': value must be finite."
    INVALID_DIVISION_COUNT = "Invalid division count: {divisions}. Must be a positive integer."
    INVALID_WHITE_COUNT = "Invalid white key count: {count}. Must be a positive integer."
    INVALID_OFFSET = "Invalid offset: {offset}. Must be between 0 and {limit}."
    INVALID_FRACTION_DIGITS = "Invalid fraction digits: {digits}. Must be between 0 and {limit}."
    REPEATED_CHAIN = (
        "Generator {generator} repeats within {count} notes. Use fewer white keys."
    )
    INVALID_CONFIG = "Invalid configuration in {path}: {reason}"
