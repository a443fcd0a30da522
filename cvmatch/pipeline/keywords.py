"""Relevant-keyword extraction for a job descriptor."""

import logging
from collections.abc import Mapping
from typing import Any

from cvmatch.core.schemas import JobDescriptor
from cvmatch.pipeline.taxonomy import GENERAL_CATEGORY, KEYWORD_TAXONOMY, category_keywords

logger = logging.getLogger(__name__)

# Requirement tokens this short are noise ("de", "con", "y/o").
MIN_TOKEN_LENGTH = 4


def relevant_keywords(job: JobDescriptor) -> list[str]:
    """Return the deduplicated keyword list relevant to ``job``.

    Order: "general" taxonomy keywords, then the job category's keywords,
    then tokens taken from the job requirements. Order is kept so missing
    keywords are reported the same way on every call.
    """
    keywords: list[str] = list(KEYWORD_TAXONOMY[GENERAL_CATEGORY])

    category = (job.category or GENERAL_CATEGORY).lower()
    if category != GENERAL_CATEGORY:
        keywords.extend(category_keywords(category))

    keywords.extend(requirement_tokens(job.requirements))

    return list(dict.fromkeys(keywords))


def requirement_tokens(requirements: Any) -> list[str]:
    """Split requirement phrases into lower-case tokens longer than three chars.

    Unsupported shapes yield no tokens instead of raising.
    """
    tokens: list[str] = []
    for requirement in _requirement_items(requirements):
        if not isinstance(requirement, str):
            logger.debug("Skipping non-text requirement: %r", requirement)
            continue
        tokens.extend(
            word for word in requirement.lower().split() if len(word) >= MIN_TOKEN_LENGTH
        )
    return tokens


def _requirement_items(requirements: Any) -> list[Any]:
    """Coerce the supported ``requirements`` shapes into a plain list."""
    if not requirements:
        return []
    if isinstance(requirements, (list, tuple)):
        return list(requirements)
    if isinstance(requirements, Mapping):
        items = requirements.get("items")
    else:
        items = getattr(requirements, "items", None)
    if isinstance(items, (list, tuple)):
        return list(items)
    logger.debug("Unsupported requirements shape: %s", type(requirements).__name__)
    return []
