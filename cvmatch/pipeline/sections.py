"""Heuristic detection of standard résumé sections.

Patterns run on the raw résumé text (not the accent-stripped copy), so the
rule tables carry their own accent classes such as ``educaci[oó]n``.
"""

import re

from cvmatch.core.schemas import SectionFlags
from cvmatch.pipeline.rules import SPANISH_RULES, LocaleRules


def detect_sections(raw_text: str, rules: LocaleRules = SPANISH_RULES) -> SectionFlags:
    """Evaluate the six independent section predicates of ``rules``."""
    patterns = rules.patterns
    return SectionFlags(
        education=_found(patterns.education, raw_text),
        experience=_found(patterns.experience, raw_text),
        skills=_found(patterns.skills, raw_text),
        contact=_found(patterns.contact, raw_text),
        has_years=_found(patterns.years, raw_text),
        has_quantified_achievements=_found(patterns.achievements, raw_text),
    )


def _found(pattern: str, text: str) -> bool:
    return re.search(pattern, text, re.IGNORECASE) is not None
