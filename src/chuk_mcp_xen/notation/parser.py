"""
Interval notation parser.

Each token is an expression of one or more terms joined by `+` (stack)
or `-` (unstack), with an optional leading sign. A term is one of:

    [-1 1>  or  [-1, 1/2>   monzo (exponents of 2, 3, 5, ...)
    7\\12   or  1\\13<3>     equal temperament (steps\\divisions<equave>)
    701.955 or  2400.       cents (any number with a dot)
    3/2     or  3           ratio (a bare integer n is n/1)

A term is classified by its marker first and then validated against its
notation, so "3/x" is reported as a bad ratio rather than an unknown token.
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction

from chuk_mcp_xen.config import DEFAULT_NOTATION_CONFIG, NotationConfig
from chuk_mcp_xen.constants import ErrorMessages, IntervalType
from chuk_mcp_xen.core.chord import Chord
from chuk_mcp_xen.core.interval import Interval
from chuk_mcp_xen.exceptions import (
    InvalidNumericError,
    MalformedTokenError,
    VectorOverflowError,
)

from .scanner import split_tokens

logger = logging.getLogger(__name__)

_RATIO = re.compile(r"(\d+)(?:/(\d+))?")
_CENTS = re.compile(r"\d+\.\d*|\.\d+")
_EQUAL_TEMPERAMENT = re.compile(r"(\d+)\\(\d+)(?:<(\d+)(?:/(\d+))?>)?")
_EXPONENT = re.compile(r"[+-]?(?:\d+/\d+|\d+\.\d*|\.\d+|\d+)")
_COMPONENT_SEPARATOR = re.compile(r"[\s,]+")

_ANY_NOTATION = "ratio, cents, equal temperament or monzo"

_EXAMPLES = {
    IntervalType.RATIO.value: "3/2",
    IntervalType.CENTS.value: "701.955",
    IntervalType.EQUAL_TEMPERAMENT.value: "7\\12 or 1\\13<3>",
    IntervalType.MONZO.value: "[-1 1>",
}


def _malformed(token: str, expected: str) -> MalformedTokenError:
    if expected == _ANY_NOTATION:
        message = ErrorMessages.UNKNOWN_NOTATION.format(token=token)
    else:
        message = ErrorMessages.INVALID_NOTATION.format(
            expected=expected, token=token, example=_EXAMPLES[expected]
        )
    return MalformedTokenError(message, token=token, expected=expected)


def _split_terms(token: str, config: NotationConfig) -> list[tuple[str, str]]:
    """Split a token into (sign, term) pairs at top-level + and -."""
    terms: list[tuple[str, str]] = []
    sign: str | None = None
    current = ""
    closing: str | None = None

    for char in token:
        if closing is not None:
            current += char
            if char == closing:
                closing = None
        elif char == config.vector_open:
            closing = config.vector_close
            current += char
        elif char == "<":
            closing = ">"
            current += char
        elif char in "+-":
            if current:
                terms.append((sign or "+", current))
                current = ""
                sign = char
            elif sign is None and not terms:
                sign = char
            else:
                raise _malformed(token, _ANY_NOTATION)
        else:
            current += char

    if not current:
        raise _malformed(token, _ANY_NOTATION)
    terms.append((sign or "+", current))
    return terms


def _parse_monzo(term: str, config: NotationConfig) -> Interval:
    inner = term[1:-1].strip()
    components = [c for c in _COMPONENT_SEPARATOR.split(inner) if c] if inner else []
    exponents = []
    for component in components:
        if not _EXPONENT.fullmatch(component):
            raise MalformedTokenError(
                ErrorMessages.INVALID_EXPONENT.format(component=component, token=term),
                token=term,
                expected=IntervalType.MONZO.value,
            )
        try:
            exponents.append(Fraction(component))
        except ZeroDivisionError as e:
            raise MalformedTokenError(
                ErrorMessages.INVALID_EXPONENT.format(component=component, token=term),
                token=term,
                expected=IntervalType.MONZO.value,
            ) from e

    if len(exponents) > config.number_of_components:
        raise VectorOverflowError(
            ErrorMessages.VECTOR_OVERFLOW.format(
                token=term, count=len(exponents), limit=config.number_of_components
            ),
            token=term,
            expected=IntervalType.MONZO.value,
        )
    return Interval.from_monzo(exponents, config.number_of_components)


def _parse_term(term: str, config: NotationConfig) -> Interval:
    """Classify a single term by its marker and convert it."""
    n = config.number_of_components

    if term.startswith(config.vector_open):
        if not term.endswith(config.vector_close):
            raise _malformed(term, IntervalType.MONZO.value)
        return _parse_monzo(term, config)

    if "\\" in term:
        match = _EQUAL_TEMPERAMENT.fullmatch(term)
        if not match:
            raise _malformed(term, IntervalType.EQUAL_TEMPERAMENT.value)
        steps, divisions, equave_num, equave_den = match.groups()
        if equave_den is not None and int(equave_den) == 0:
            raise InvalidNumericError(
                ErrorMessages.INVALID_EQUAVE.format(token=term),
                token=term,
                expected=IntervalType.EQUAL_TEMPERAMENT.value,
            )
        equave = Fraction(int(equave_num), int(equave_den or 1)) if equave_num else Fraction(2)
        return Interval.equal_temperament(int(steps), int(divisions), equave, n)

    if "/" in term:
        match = _RATIO.fullmatch(term)
        if not match:
            raise _malformed(term, IntervalType.RATIO.value)
        return Interval.ratio(int(match.group(1)), int(match.group(2)), n)

    if "." in term:
        if not _CENTS.fullmatch(term):
            raise _malformed(term, IntervalType.CENTS.value)
        return Interval.from_cents(float(term), n)

    match = _RATIO.fullmatch(term)
    if match:
        return Interval.ratio(int(match.group(1)), 1, n)

    raise _malformed(term, _ANY_NOTATION)


def parse_interval(text: str, config: NotationConfig | None = None) -> Interval:
    """
    Parse a single interval token such as "3/2", "7\\12" or "[0 0 1>-4/1".

    Args:
        text: One interval expression
        config: Notation configuration

    Returns:
        The parsed interval

    Raises:
        NotationError: If the text is not exactly one valid interval
    """
    config = config or DEFAULT_NOTATION_CONFIG
    tokens = split_tokens(text, config)
    if len(tokens) != 1:
        raise MalformedTokenError(
            ErrorMessages.SINGLE_INTERVAL.format(token=text.strip(), count=len(tokens)),
            token=text.strip(),
            expected="a single interval",
        )

    (sign, term), *rest = _split_terms(tokens[0], config)
    result = _parse_term(term, config)
    if sign == "-":
        result = -result
    for sign, term in rest:
        interval = _parse_term(term, config)
        result = result - interval if sign == "-" else result + interval
    return result


def parse_chord_input(text: str, config: NotationConfig | None = None) -> Chord:
    """
    Parse free text into a chord of intervals.

    Notations and separators may be mixed freely; token order becomes
    interval order. Each token is converted on its own.

    Args:
        text: e.g. "3:2400.&11/3|1\\5;[-1,1> [0 0 1>-4/1"
        config: Notation configuration

    Returns:
        Chord with one interval per token

    Raises:
        MalformedTokenError: Unrecognized or incomplete notation
        InvalidNumericError: Zero denominator, non-positive ratio or division
        VectorOverflowError: Monzo longer than the prime basis
    """
    config = config or DEFAULT_NOTATION_CONFIG
    tokens = split_tokens(text, config)
    intervals = tuple(parse_interval(token, config) for token in tokens)
    logger.debug("Parsed %d intervals from %r", len(intervals), text)
    return Chord(intervals)
