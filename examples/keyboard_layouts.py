#!/usr/bin/env python3
"""
Example: Generalized Keyboard Layouts.

This demonstrates how keys of an equal division are colored white and
black, either automatically or from a chosen generator.

Usage:
    python examples/keyboard_layouts.py
"""

from chuk_mcp_xen import KeyColor, auto_key_colors, gap_key_colors


def render(colors: list[KeyColor]) -> str:
    """Draw white keys as '_' and black keys as '#'."""
    return "".join("_" if c == KeyColor.WHITE else "#" for c in colors)


def main() -> None:
    """Demonstrate keyboard coloring."""
    print("CHUK Xen Keyboard Demo")
    print("=" * 40)
    print()

    print("Automatic layouts (first key is A):")
    for divisions in [5, 7, 12, 17, 19, 22, 24, 31, 41, 53]:
        colors = auto_key_colors(divisions)
        white = colors.count(KeyColor.WHITE)
        print(f"  {divisions:>2}-EDO {white:>2} white  {render(colors)}")
    print()

    print("Generated scales:")
    examples = [
        ("12-EDO fifth, C major", 7 / 12, 7, 1),
        ("1/4-comma meantone", 696.578 / 1200, 7, 1),
        ("Pentatonic", 7 / 12, 5, 1),
        ("Porcupine", 163.950 / 1200, 7, 0),
    ]
    for name, generator, white_count, offset in examples:
        print(f"  {name:<24} {render(gap_key_colors(generator, white_count, offset))}")


if __name__ == "__main__":
    main()
