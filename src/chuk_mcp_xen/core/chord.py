"""
Chord - an ordered stack of intervals.

Order is the order the tones were written in and is musically
significant, so a Chord is a sequence rather than a set.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .interval import Interval


@dataclass(frozen=True)
class Chord:
    """
    Intervals in source order.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...] = ()

    def cents(self) -> list[float]:
        """Size of every interval in cents."""
        return [interval.total_cents() for interval in self.intervals]

    def stacked(self) -> Chord:
        """
        Running totals, treating each interval as a step from the previous tone.

        "5/4 6/5" stacked is 5/4, 3/2.
        """
        result: list[Interval] = []
        for interval in self.intervals:
            result.append(result[-1] + interval if result else interval)
        return Chord(tuple(result))

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __getitem__(self, index: int) -> Interval:
        return self.intervals[index]

    def __str__(self) -> str:
        return " ".join(str(interval) for interval in self.intervals)
