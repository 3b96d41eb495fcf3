"""
unicode_truncate — pad or truncate text by displayed column width.

Cuts only at grapheme cluster (or codepoint) boundaries, so wide glyphs,
combining marks and joined emoji sequences are kept whole or dropped whole.
"""
from .pad import pad
from .policy import (
    ENV_AMBIGUOUS_WIDTH,
    ENV_GRANULARITY,
    ENV_UNDEFINED_WIDTH,
    TruncatePolicy,
    get_default_policy,
)
from .segment import CodepointSegmenter, Granularity, GraphemeSegmenter, Segmenter, get_segmenter
from .truncate import (
    Alignment,
    TruncateResult,
    text_width,
    truncate_aligned,
    truncate_centered,
    truncate_end,
    truncate_start,
)
from .width import WidthOracle, make_wcwidth_oracle, wcwidth_oracle

__version__ = "2.0.0"

__all__ = [
    # Engine
    "Alignment",
    "TruncateResult",
    "text_width",
    "truncate_aligned",
    "truncate_centered",
    "truncate_end",
    "truncate_start",
    # Padding
    "pad",
    # Policy
    "ENV_AMBIGUOUS_WIDTH",
    "ENV_GRANULARITY",
    "ENV_UNDEFINED_WIDTH",
    "TruncatePolicy",
    "get_default_policy",
    # Capabilities
    "CodepointSegmenter",
    "Granularity",
    "GraphemeSegmenter",
    "Segmenter",
    "WidthOracle",
    "get_segmenter",
    "make_wcwidth_oracle",
    "wcwidth_oracle",
]
