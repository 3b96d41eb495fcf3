"""
Column width of a single atomic unit.

The engine never classifies characters itself: it asks a WidthOracle,
which answers 0, 1, 2 or None ("no assigned width", e.g. control
characters). The default oracle is backed by wcwidth.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Callable, Protocol, runtime_checkable

from wcwidth import wcswidth

# Mirrors the wcwidth cache size: enough for heavy CJK sessions
_WIDTH_CACHE_SIZE = 1024


@runtime_checkable
class WidthOracle(Protocol):
    def __call__(self, unit: str) -> int | None: ...


@lru_cache(maxsize=_WIDTH_CACHE_SIZE)
def wcwidth_oracle(unit: str, ambiguous_width: int = 1) -> int | None:
    """
    Width of one unit (a codepoint or a whole grapheme cluster).

    wcswidth measures the cluster as a whole, so ZWJ sequences and VS16
    presentation selectors resolve to the width of the rendered glyph.
    Returns None where wcwidth reports -1 (control / non-printable).
    """
    if not unit:
        return 0
    w = wcswidth(unit, ambiguous_width=ambiguous_width)
    if w < 0:
        return None
    return w


def make_wcwidth_oracle(ambiguous_width: int = 1) -> WidthOracle:
    """Bind an East Asian Ambiguous width (1 or 2) into a wcwidth oracle."""
    if ambiguous_width not in (1, 2):
        raise ValueError(f"ambiguous_width must be 1 or 2, got {ambiguous_width!r}")
    if ambiguous_width == 1:
        return wcwidth_oracle

    def oracle(unit: str) -> int | None:
        return wcwidth_oracle(unit, ambiguous_width)

    return oracle


def resolve_width(oracle: Callable[[str], int | None], unit: str, undefined_width: int) -> int:
    """Apply the undefined-width fallback to an oracle answer."""
    w = oracle(unit)
    if w is None:
        return undefined_width
    return w
