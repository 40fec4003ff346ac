"""
Keyboard coloring - white and black keys for arbitrary equal divisions.

Two algorithms:
- gap_key_colors: a generated scale is white, and every large step of
  that scale gets a black key in its gap.
- auto_key_colors: picks a generated scale for a division size and hands
  it to gap_key_colors, so 12 keys come out as the familiar piano layout.
"""

from __future__ import annotations

import logging
import math

from chuk_mcp_xen.constants import ErrorMessages, KeyColor
from chuk_mcp_xen.exceptions import InvalidNumericError

logger = logging.getLogger(__name__)

# Step sizes closer than this (in octaves) count as equal
STEP_TOLERANCE = 1e-9

# Degree zero is A, three notes before the sharp end of the white chain (A E B)
_REFERENCE_FROM_CHAIN_END = 3


def gap_key_colors(
    generator_step_in_octaves: float,
    white_count: int,
    offset: int,
) -> list[KeyColor]:
    """
    Color a keyboard from a chain of generators.

    The white keys are `white_count` consecutive notes of the chain
    i*generator (mod octave), starting `offset` generators below the
    reference. Each step of the resulting scale that is larger than the
    smallest step gets one black key.

    Args:
        generator_step_in_octaves: Generator as a fraction of the octave (7/12 for a fifth)
        white_count: Number of white keys
        offset: Position of the reference pitch in the chain (0 <= offset < white_count)

    Returns:
        Key colors starting at the reference pitch

    Raises:
        InvalidNumericError: On a non-finite generator, a bad count or offset,
            or a chain that revisits a pitch (7/12 with more than 12 white keys)

    Example:
        gap_key_colors(7 / 12, 7, 1) -> C major on a piano (white, black, white, ...)
    """
    if not math.isfinite(generator_step_in_octaves):
        raise InvalidNumericError(
            ErrorMessages.NON_FINITE.format(token=generator_step_in_octaves),
            token=str(generator_step_in_octaves),
            expected="generator",
        )
    if white_count < 1:
        raise InvalidNumericError(
            ErrorMessages.INVALID_WHITE_COUNT.format(count=white_count),
            token=str(white_count),
            expected="white key count",
        )
    if not 0 <= offset < white_count:
        raise InvalidNumericError(
            ErrorMessages.INVALID_OFFSET.format(offset=offset, limit=white_count - 1),
            token=str(offset),
            expected="offset",
        )

    positions = []
    for i in range(white_count):
        position = ((i - offset) * generator_step_in_octaves) % 1.0
        if position > 1.0 - STEP_TOLERANCE:
            position = 0.0
        positions.append(position)
    positions.sort()

    steps = [b - a for a, b in zip(positions, positions[1:])]
    steps.append(1.0 - positions[-1])
    smallest = min(steps)
    if smallest <= STEP_TOLERANCE:
        # A rational generator closes its cycle; white keys would coincide
        raise InvalidNumericError(
            ErrorMessages.REPEATED_CHAIN.format(
                generator=generator_step_in_octaves, count=white_count
            ),
            token=str(white_count),
            expected="white key count",
        )

    colors: list[KeyColor] = []
    for step in steps:
        colors.append(KeyColor.WHITE)
        if step > smallest + STEP_TOLERANCE:
            colors.append(KeyColor.BLACK)
    return colors


def _step_sizes(chain_length: int, generator: int, divisions: int) -> set[int]:
    """Distinct step sizes of the scale made by the first `chain_length` generators."""
    degrees = sorted({(i * generator) % divisions for i in range(chain_length)})
    steps = {b - a for a, b in zip(degrees, degrees[1:])}
    steps.add(divisions - degrees[-1])
    return steps


def _even_key_colors(divisions: int) -> list[KeyColor]:
    """Spread black keys as evenly as possible, 7 white per 12 keys."""
    black_count = divisions - max(1, round(divisions * 7 / 12))
    return [
        KeyColor.BLACK
        if (i + 1) * black_count // divisions > i * black_count // divisions
        else KeyColor.WHITE
        for i in range(divisions)
    ]


def auto_key_colors(divisions: int) -> list[KeyColor]:
    """
    Pick a key coloring for an equal division of the octave.

    The white keys are the shortest chain of fifths whose steps span one or
    two keys, so every gap holds at most one black key. Divisions
    whose fifth does not reach every key fall back to an even spread.
    The first key is the pitch class A.

    Args:
        divisions: Number of keys per octave

    Returns:
        One color per key

    Example:
        auto_key_colors(12) -> A A# B C C# D D# E F F# G G# on a piano
    """
    if isinstance(divisions, bool) or not isinstance(divisions, int) or divisions < 1:
        raise InvalidNumericError(
            ErrorMessages.INVALID_DIVISION_COUNT.format(divisions=divisions),
            token=str(divisions),
            expected="division count",
        )

    fifth = round(divisions * math.log2(3 / 2))
    if math.gcd(fifth, divisions) == 1:
        white_count = 0
        # Shortest chain whose scale steps are one and two keys
        for chain_length in range(2, divisions):
            if _step_sizes(chain_length, fifth, divisions) == {1, 2}:
                white_count = chain_length
                break

        if white_count >= _REFERENCE_FROM_CHAIN_END:
            colors = gap_key_colors(
                fifth / divisions, white_count, white_count - _REFERENCE_FROM_CHAIN_END
            )
            if len(colors) == divisions:
                logger.debug(
                    "%d keys: %d white from fifth %d\\%d", divisions, white_count, fifth, divisions
                )
                return colors

    logger.debug(
        "%d keys: fifth %d\\%d does not generate, spreading evenly", divisions, fifth, divisions
    )
    return _even_key_colors(divisions)
