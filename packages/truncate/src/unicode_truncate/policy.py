"""
Truncation policy: which units the engine treats as atomic and how wide
they are.

Environment overrides (read by TruncatePolicy.from_env):
  UNICODE_TRUNCATE_GRANULARITY      grapheme | codepoint   (default grapheme)
  UNICODE_TRUNCATE_UNDEFINED_WIDTH  0 | 1                  (default 1)
  UNICODE_TRUNCATE_AMBIGUOUS_WIDTH  1 | 2                  (default 1)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .segment import Granularity, Segmenter, get_segmenter
from .width import WidthOracle, make_wcwidth_oracle, resolve_width

logger = logging.getLogger(__name__)

ENV_GRANULARITY: str = "UNICODE_TRUNCATE_GRANULARITY"
ENV_UNDEFINED_WIDTH: str = "UNICODE_TRUNCATE_UNDEFINED_WIDTH"
ENV_AMBIGUOUS_WIDTH: str = "UNICODE_TRUNCATE_AMBIGUOUS_WIDTH"


@dataclass(frozen=True)
class TruncatePolicy:
    """
    granularity: unit the engine never splits ("grapheme" or "codepoint").
    undefined_width: width charged for units the oracle has no width for.
        1 keeps the computed width in line with what a terminal shows for
        control characters; 0 lets them be dropped for free.
    ambiguous_width: width of East Asian Ambiguous characters.
    segmenter / oracle: explicit replacements for the wcwidth-backed
        defaults.
    """

    granularity: Granularity = "grapheme"
    undefined_width: int = 1
    ambiguous_width: int = 1
    segmenter: Segmenter | None = None
    oracle: WidthOracle | None = None

    def __post_init__(self) -> None:
        if self.undefined_width not in (0, 1):
            raise ValueError(f"undefined_width must be 0 or 1, got {self.undefined_width!r}")
        if self.ambiguous_width not in (1, 2):
            raise ValueError(f"ambiguous_width must be 1 or 2, got {self.ambiguous_width!r}")
        if self.segmenter is None:
            # validates granularity as a side effect
            get_segmenter(self.granularity)

    def get_segmenter(self) -> Segmenter:
        if self.segmenter is not None:
            return self.segmenter
        return get_segmenter(self.granularity)

    def get_oracle(self) -> WidthOracle:
        if self.oracle is not None:
            return self.oracle
        return make_wcwidth_oracle(self.ambiguous_width)

    def unit_width(self, unit: str) -> int:
        return resolve_width(self.get_oracle(), unit, self.undefined_width)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TruncatePolicy:
        """Build a policy from UNICODE_TRUNCATE_* variables; bad values fall back to defaults."""
        env = os.environ if environ is None else environ
        granularity: Granularity = "grapheme"
        undefined_width = 1
        ambiguous_width = 1

        raw = env.get(ENV_GRANULARITY, "").strip().lower()
        if raw in ("grapheme", "codepoint"):
            granularity = raw  # type: ignore[assignment]
        elif raw:
            logger.warning("Ignoring %s=%r (expected grapheme or codepoint)", ENV_GRANULARITY, raw)

        raw = env.get(ENV_UNDEFINED_WIDTH, "").strip()
        if raw in ("0", "1"):
            undefined_width = int(raw)
        elif raw:
            logger.warning("Ignoring %s=%r (expected 0 or 1)", ENV_UNDEFINED_WIDTH, raw)

        raw = env.get(ENV_AMBIGUOUS_WIDTH, "").strip()
        if raw in ("1", "2"):
            ambiguous_width = int(raw)
        elif raw:
            logger.warning("Ignoring %s=%r (expected 1 or 2)", ENV_AMBIGUOUS_WIDTH, raw)

        return cls(
            granularity=granularity,
            undefined_width=undefined_width,
            ambiguous_width=ambiguous_width,
        )


def get_default_policy() -> TruncatePolicy:
    """Policy used when a call does not pass one explicitly."""
    return TruncatePolicy.from_env()
