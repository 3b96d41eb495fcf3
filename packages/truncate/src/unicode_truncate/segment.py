"""
Segmentation of text into atomic units.

A Segmenter yields (offset, length) pairs in str indices. Units are
non-overlapping and cover the text exactly once, so every offset is a
safe cut point.
"""
from __future__ import annotations

from typing import Iterator, Literal, Protocol, runtime_checkable

from wcwidth import iter_graphemes, iter_graphemes_reverse

Granularity = Literal["grapheme", "codepoint"]


@runtime_checkable
class Segmenter(Protocol):
    def forward(self, text: str) -> Iterator[tuple[int, int]]: ...

    def backward(self, text: str) -> Iterator[tuple[int, int]]: ...


class GraphemeSegmenter:
    """
    Extended grapheme clusters (UAX #29) via wcwidth.

    A base character keeps its combining marks and a ZWJ emoji sequence
    stays a single unit, so no cut can tear a glyph apart.
    """

    def forward(self, text: str) -> Iterator[tuple[int, int]]:
        offset = 0
        for grapheme in iter_graphemes(text):
            yield offset, len(grapheme)
            offset += len(grapheme)

    def backward(self, text: str) -> Iterator[tuple[int, int]]:
        end = len(text)
        for grapheme in iter_graphemes_reverse(text):
            end -= len(grapheme)
            yield end, len(grapheme)

    def __repr__(self) -> str:
        return "GraphemeSegmenter()"


class CodepointSegmenter:
    """One unit per codepoint. May separate a base from its combining marks."""

    def forward(self, text: str) -> Iterator[tuple[int, int]]:
        for i in range(len(text)):
            yield i, 1

    def backward(self, text: str) -> Iterator[tuple[int, int]]:
        for i in range(len(text) - 1, -1, -1):
            yield i, 1

    def __repr__(self) -> str:
        return "CodepointSegmenter()"


_SEGMENTERS: dict[str, Segmenter] = {
    "grapheme": GraphemeSegmenter(),
    "codepoint": CodepointSegmenter(),
}


def get_segmenter(granularity: Granularity = "grapheme") -> Segmenter:
    """Return the shared (stateless) segmenter for a granularity."""
    try:
        return _SEGMENTERS[granularity]
    except KeyError:
        raise ValueError(
            f"Unknown granularity {granularity!r}, expected one of {sorted(_SEGMENTERS)}"
        ) from None
