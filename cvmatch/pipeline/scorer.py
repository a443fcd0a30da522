"""Weighted résumé score.

Score range: 0-100 (clamped). Three components, weights from AnalysisConfig:
  - keyword match percentage
  - core section completeness (education, experience, skills, contact)
  - auxiliary signals: length in range (33), dates (33), quantified
    achievements (34)
"""

import logging

from cvmatch.core.config import AnalysisConfig
from cvmatch.core.schemas import SectionFlags
from cvmatch.pipeline.matcher import round_half_up

logger = logging.getLogger(__name__)

CORE_SECTION_COUNT = 4

LENGTH_POINTS = 33
DATES_POINTS = 33
ACHIEVEMENTS_POINTS = 34


def compute_score(
    match_pct: float,
    sections: SectionFlags,
    word_count: int,
    config: AnalysisConfig | None = None,
) -> int:
    """Combine match percentage, section completeness and auxiliary signals.

    Args:
        match_pct: Unrounded keyword match percentage (0-100).
        sections: Detected section flags.
        word_count: Whitespace-delimited token count of the raw résumé.
        config: Weights and word range. None uses defaults.

    Returns:
        Integer score in [0, 100].
    """
    config = config or AnalysisConfig()

    keyword_component = match_pct * config.keyword_weight
    section_component = (
        sections.core_sections_found / CORE_SECTION_COUNT * 100 * config.section_weight
    )
    auxiliary_component = _auxiliary_score(sections, word_count, config) * config.auxiliary_weight

    raw = keyword_component + section_component + auxiliary_component
    logger.debug(
        "Score components: keywords=%.1f sections=%.1f auxiliary=%.1f",
        keyword_component, section_component, auxiliary_component,
    )
    return max(0, min(100, round_half_up(raw)))


def length_in_range(word_count: int, config: AnalysisConfig) -> bool:
    return config.min_words <= word_count <= config.max_words


def _auxiliary_score(sections: SectionFlags, word_count: int, config: AnalysisConfig) -> int:
    """Auxiliary subtotal on a 0-100 scale before weighting."""
    points = 0
    if length_in_range(word_count, config):
        points += LENGTH_POINTS
    if sections.has_years:
        points += DATES_POINTS
    if sections.has_quantified_achievements:
        points += ACHIEVEMENTS_POINTS
    return points
