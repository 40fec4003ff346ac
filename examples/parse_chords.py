#!/usr/bin/env python3
"""
Example: Parsing Chords in Mixed Notation.

This demonstrates how ratios, cents, equal temperament steps and monzos
can be mixed in one chord, and how they stack and unstack.

Usage:
    python examples/parse_chords.py
"""

from chuk_mcp_xen import (
    NotationConfig,
    NotationError,
    format_exponential,
    format_hertz,
    parse_chord_input,
    parse_interval,
)


def main() -> None:
    """Demonstrate the notation parser."""
    print("CHUK Xen Notation Demo")
    print("=" * 40)
    print()

    # Any separator, any notation
    text = "3:2400.&11/3|1\\5;[-1,1> [0 0 1>-4/1"
    print(f"Chord: {text}")
    for interval in parse_chord_input(text):
        cents = format_exponential(interval.total_cents())
        print(f"  {str(interval):>14}  {interval.type.value:<18} {cents} cents")
    print()

    # Stacking keeps the notation where it can
    print("Stacking:")
    for expression in ["3/2+4/3", "7\\12+5\\12", "1\\5+1\\3", "7\\12+3/2", "700.+5/4"]:
        interval = parse_interval(expression)
        print(f"  {expression:<12} = {interval} ({interval.type.value})")
    print()

    # A 5-limit basis only has room for three exponents
    small = NotationConfig(number_of_components=3)
    print("5-limit basis:")
    print(f"  [-4 4 -1> -> {parse_interval('[-4 4 -1>', small).total_cents():.3f} cents")
    try:
        parse_interval("[0 0 0 1>", small)
    except NotationError as e:
        print(f"  {e}")
    print()

    # Errors name the token and the notation it looked like
    for bad in ["3/0", "1\\x", "abc"]:
        try:
            parse_chord_input(f"5/4 {bad}")
        except NotationError as e:
            print(f"  {bad!r}: expected {e.expected or 'interval'} - {e}")
    print()

    # Frequencies of a harmonic series on 55 Hz
    print("Harmonics of 55 Hz:")
    for harmonic in parse_chord_input("1:2:3:4:5:6:7"):
        print(f"  {harmonic}  {format_hertz(55 * float(harmonic.value.fraction))}")


if __name__ == "__main__":
    main()
