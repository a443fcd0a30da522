"""Keyword matching of a normalized résumé against relevant keywords.

Matching is plain substring containment on normalized text: no word
boundaries and no stemming, so "java" is also a hit inside "javascript".
"""

import logging
import math
from collections.abc import Iterable
from typing import NamedTuple

from cvmatch.pipeline.normalizer import normalize

logger = logging.getLogger(__name__)


class KeywordMatch(NamedTuple):
    """Hits and misses of one matching pass, both in keyword order."""

    hits: list[str]
    misses: list[str]

    @property
    def total(self) -> int:
        return len(self.hits) + len(self.misses)

    @property
    def ratio(self) -> float:
        """Unrounded match percentage (0-100), 0.0 when there are no keywords."""
        if self.total <= 0:
            return 0.0
        return 100 * len(self.hits) / self.total

    @property
    def percentage(self) -> int:
        return match_percentage(len(self.hits), self.total)


def match_keywords(normalized_text: str, keywords: Iterable[str]) -> KeywordMatch:
    """Split ``keywords`` into those found in ``normalized_text`` and those not.

    Keywords are normalized the same way as the text before the containment
    test; the reported keywords keep their original spelling.
    """
    hits: list[str] = []
    misses: list[str] = []
    for keyword in keywords:
        if normalize(keyword) in normalized_text:
            hits.append(keyword)
        else:
            misses.append(keyword)
    logger.debug("Keyword match: %d hits, %d misses", len(hits), len(misses))
    return KeywordMatch(hits=hits, misses=misses)


def match_percentage(hits: int, total: int) -> int:
    """Percentage of ``hits`` over ``total`` rounded half-up, 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(100 * hits / total)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return math.floor(value + 0.5)
