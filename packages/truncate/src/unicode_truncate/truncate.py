"""
Width-aware truncation.

Three strategies share one contract: return the longest slice of the
input, cut only at unit boundaries, whose display width fits max_width,
together with that width.

- truncate_end(): keep the start, drop units from the end
- truncate_start(): keep the end, drop units from the start
- truncate_centered(): drop from both ends, keeping the middle
- truncate_aligned(): pick one of the above from an alignment

Zero-width units stay attached to the visible unit before them: they
survive a cut at the end and are dropped when a cut at the start exposes
them.
"""
from __future__ import annotations

import logging
from itertools import chain
from typing import Iterator, Literal, NamedTuple

from .policy import TruncatePolicy, get_default_policy
from .width import resolve_width

logger = logging.getLogger(__name__)

Alignment = Literal["left", "center", "right"]

# Upper bound on the width of one unit; keeps the centered fast-forward
# away from the final cut points.
_FAST_FORWARD_MARGIN = 10


class TruncateResult(NamedTuple):
    text: str
    width: int


def _check_width(max_width: int) -> None:
    if max_width < 0:
        raise ValueError(f"max_width must be non-negative, got {max_width}")


def _units(text: str, policy: TruncatePolicy) -> Iterator[tuple[int, int]]:
    """(offset, width) of each unit, left to right."""
    oracle = policy.get_oracle()
    for offset, length in policy.get_segmenter().forward(text):
        yield offset, resolve_width(oracle, text[offset:offset + length], policy.undefined_width)


def _units_reversed(text: str, policy: TruncatePolicy) -> Iterator[tuple[int, int]]:
    """(offset, width) of each unit, right to left."""
    oracle = policy.get_oracle()
    for offset, length in policy.get_segmenter().backward(text):
        yield offset, resolve_width(oracle, text[offset:offset + length], policy.undefined_width)


def text_width(text: str, policy: TruncatePolicy | None = None) -> int:
    """Display width of text, measured unit by unit under the policy."""
    policy = policy or get_default_policy()
    return sum(w for _, w in _units(text, policy))


# ─────────────────────────────────────────────────────────────────────────────
# Trim from end / start
# ─────────────────────────────────────────────────────────────────────────────

def truncate_end(
    text: str,
    max_width: int,
    policy: TruncatePolicy | None = None,
) -> TruncateResult:
    """
    Truncate text to at most max_width columns by removing units from the end.

    A wide unit that does not fit entirely is dropped, so the result can be
    narrower than max_width; its exact width is returned. Zero-width units
    right at the cut are kept with the unit they follow.
    """
    _check_width(max_width)
    if max_width == 0:
        return TruncateResult("", 0)
    policy = policy or get_default_policy()

    cut = 0
    cut_width = 0
    running = 0
    for offset, w in _units(text, policy):
        if running > max_width:
            break
        # running is the width of everything strictly before this unit
        cut, cut_width = offset, running
        running += w
    else:
        if running <= max_width:
            return TruncateResult(text, running)

    logger.debug("truncate_end: cut at %d of %d (width %d <= %d)", cut, len(text), cut_width, max_width)
    return TruncateResult(text[:cut], cut_width)


def truncate_start(
    text: str,
    max_width: int,
    policy: TruncatePolicy | None = None,
) -> TruncateResult:
    """
    Truncate text to at most max_width columns by removing units from the start.

    The cut always lands on a visible unit: zero-width units left at the
    front by the cut belong to the unit that was removed and go with it.
    """
    _check_width(max_width)
    if max_width == 0:
        return TruncateResult("", 0)
    policy = policy or get_default_policy()

    cut = len(text)
    width = 0
    for offset, w in _units_reversed(text, policy):
        if width + w > max_width:
            break
        width += w
        if w:
            cut = offset
    else:
        # everything fits, leading zero-width units included
        return TruncateResult(text, width)

    logger.debug("truncate_start: cut at %d of %d (width %d <= %d)", cut, len(text), width, max_width)
    return TruncateResult(text[cut:], width)


# ─────────────────────────────────────────────────────────────────────────────
# Centered trim
# ─────────────────────────────────────────────────────────────────────────────

def _removals_from_start(text: str, policy: TruncatePolicy) -> Iterator[tuple[int, int]]:
    """
    (start_index, removed) after removing each visible unit from the start.

    start_index is the offset of the next visible unit, so zero-width units
    in between are removed along with the unit they modify.
    """
    removed = 0
    for offset, w in _units(text, policy):
        if not w:
            continue
        if removed:
            yield offset, removed
        removed += w
    yield len(text), removed


def _removals_from_end(text: str, policy: TruncatePolicy) -> Iterator[tuple[int, int]]:
    """(end_index, removed) after removing each visible unit from the end."""
    removed = 0
    for offset, w in _units_reversed(text, policy):
        if not w:
            continue
        removed += w
        yield offset, removed


def _fast_forward(
    states: Iterator[tuple[int, int]],
    initial: tuple[int, int],
    threshold: int,
) -> tuple[tuple[int, int], Iterator[tuple[int, int]]]:
    """Skip to the last state removing less than threshold; return it and the rest."""
    current = initial
    for state in states:
        if state[1] >= threshold:
            return current, chain((state,), states)
        current = state
    return current, iter(())


def truncate_centered(
    text: str,
    max_width: int,
    policy: TruncatePolicy | None = None,
) -> TruncateResult:
    """
    Truncate text to at most max_width columns by removing units from both ends.

    Removal alternates between the two ends, always taking from the side
    that has lost less width so far; on a tie the end loses a unit first.
    Stops as soon as enough width is gone.
    """
    _check_width(max_width)
    if max_width == 0:
        return TruncateResult("", 0)
    policy = policy or get_default_policy()

    total_width = text_width(text, policy)
    if total_width <= max_width:
        return TruncateResult(text, total_width)

    min_removal = total_width - max_width
    # Both sides remove about half; no side can stop short of this
    skip_below = max(min_removal - _FAST_FORWARD_MARGIN, 0) // 2
    (start_index, start_removed), from_start = _fast_forward(
        _removals_from_start(text, policy), (0, 0), skip_below,
    )
    (end_index, end_removed), from_end = _fast_forward(
        _removals_from_end(text, policy), (len(text), 0), skip_below,
    )

    while start_removed + end_removed < min_removal:
        take_start = start_removed < end_removed
        step = next(from_start if take_start else from_end, None)
        if step is None:
            take_start = not take_start
            step = next(from_start if take_start else from_end, None)
        if step is None:
            logger.warning(
                "truncate_centered: ran out of units removing %d of %d columns",
                start_removed + end_removed, min_removal,
            )
            return TruncateResult("", 0)
        if take_start:
            start_index, start_removed = step
        else:
            end_index, end_removed = step

    logger.debug(
        "truncate_centered: kept [%d:%d] of %d (removed %d from start, %d from end)",
        start_index, end_index, len(text), start_removed, end_removed,
    )
    return TruncateResult(text[start_index:end_index], total_width - start_removed - end_removed)


def truncate_aligned(
    text: str,
    max_width: int,
    alignment: Alignment,
    policy: TruncatePolicy | None = None,
) -> TruncateResult:
    """Left keeps the start, right keeps the end, center keeps the middle."""
    if alignment == "left":
        return truncate_end(text, max_width, policy)
    elif alignment == "right":
        return truncate_start(text, max_width, policy)
    elif alignment == "center":
        return truncate_centered(text, max_width, policy)
    raise ValueError(f"Unknown alignment {alignment!r}, expected 'left', 'center' or 'right'")
