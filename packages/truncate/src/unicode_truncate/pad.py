"""Pad (and optionally truncate) text to an exact display width."""
from __future__ import annotations

from .policy import TruncatePolicy, get_default_policy
from .truncate import Alignment, text_width, truncate_aligned


def _split_padding(diff: int, alignment: Alignment) -> tuple[int, int]:
    if alignment == "left":
        return 0, diff
    elif alignment == "right":
        return diff, 0
    elif alignment == "center":
        # odd diff: the extra space goes to the right
        return diff // 2, diff - diff // 2
    raise ValueError(f"Unknown alignment {alignment!r}, expected 'left', 'center' or 'right'")


def pad(
    text: str,
    target_width: int,
    alignment: Alignment = "left",
    truncate: bool = False,
    policy: TruncatePolicy | None = None,
) -> str:
    """
    Pad text with spaces to target_width columns.

    With truncate=True the result is always exactly target_width wide: text
    is first truncated on the side given by alignment (left keeps the
    start, right keeps the end, center keeps the middle), and a wide unit
    that no longer fits is replaced by padding. Without it, text already at
    or beyond target_width is returned unchanged.
    """
    if target_width < 0:
        raise ValueError(f"target_width must be non-negative, got {target_width}")
    policy = policy or get_default_policy()

    if truncate:
        sliced, width = truncate_aligned(text, target_width, alignment, policy)
    else:
        sliced, width = text, text_width(text, policy)
        if width >= target_width:
            return text

    if width == target_width:
        return sliced

    left, right = _split_padding(target_width - width, alignment)
    return " " * left + sliced + " " * right
