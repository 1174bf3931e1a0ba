"""
formula/span.py — fragment tekstu źródłowego (offset + długość).

Offsety liczone są w znakach (indeksy str), więc `source[span.range]`
zwraca dokładnie opisywany fragment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """
    Fragment źródła: start + length.

    Suma dwóch spanów to najmniejszy span obejmujący oba:

        >>> Span(2, 3) + Span(8, 1)
        Span(start=2, length=7)
    """
    start:  int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def range(self) -> slice:
        return slice(self.start, self.end)

    def __add__(self, other: Span) -> Span:
        start = min(self.start, other.start)
        end   = max(self.end, other.end)
        return Span(start, end - start)
