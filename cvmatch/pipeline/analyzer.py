"""Résumé analysis entry point.

Data flow:
  1. Normalize résumé text
  2. Relevant keywords for the job
  3. Keyword match
  4. Section detection (raw text)
  5. Score
  6. Suggestions and strengths
  7. Assemble AnalysisResult

Fail-soft: any exception is logged and turned into a degenerate but valid
result, so callers can always render the outcome.
"""

import logging
from collections.abc import Mapping
from typing import Any

from cvmatch.core.config import AnalysisConfig
from cvmatch.core.schemas import AnalysisResult, JobDescriptor, Suggestion
from cvmatch.pipeline.keywords import relevant_keywords
from cvmatch.pipeline.matcher import match_keywords
from cvmatch.pipeline.normalizer import count_words, normalize
from cvmatch.pipeline.rules import LocaleRules, get_rules
from cvmatch.pipeline.scorer import compute_score
from cvmatch.pipeline.sections import detect_sections
from cvmatch.pipeline.suggestions import build_suggestions

logger = logging.getLogger(__name__)


def analyze_resume(
    resume_text: str,
    job: JobDescriptor | Mapping[str, Any],
    *,
    config: AnalysisConfig | None = None,
    rules: LocaleRules | None = None,
) -> AnalysisResult:
    """Analyse ``resume_text`` against ``job`` and never raise.

    Args:
        resume_text: Plain résumé text (extracted from a file or pasted).
        job: JobDescriptor, or a mapping with ``category``/``requirements``.
        config: Weights and thresholds. None uses defaults.
        rules: Locale rule table. None resolves ``config.locale`` /
            ``config.rules_path``.

    Returns:
        AnalysisResult; the fallback result when anything goes wrong.
    """
    try:
        config = config or AnalysisConfig()
        rules = rules or get_rules(config.locale, config.rules_path)
        return _analyze(resume_text, _as_descriptor(job), config, rules)
    except Exception:
        logger.warning("Résumé analysis failed, returning fallback result", exc_info=True)
        return fallback_result(rules)


def fallback_result(rules: LocaleRules | None = None) -> AnalysisResult:
    """Degenerate result: zero scores and a single 'could not analyze' issue."""
    message = (rules or get_rules()).messages.analysis_failed
    return AnalysisResult(
        score=0,
        match_percentage=0,
        suggestions=[Suggestion(kind="format_issue", message=message, severity="high")],
    )


def _analyze(
    resume_text: str,
    job: JobDescriptor,
    config: AnalysisConfig,
    rules: LocaleRules,
) -> AnalysisResult:
    normalized_text = normalize(resume_text)
    keywords = relevant_keywords(job)
    matched = match_keywords(normalized_text, keywords)

    sections = detect_sections(resume_text, rules)
    word_count = count_words(resume_text)
    score = compute_score(matched.ratio, sections, word_count, config)

    suggestions, strengths = build_suggestions(
        matched.misses, word_count, sections, rules, config,
    )

    logger.info(
        "Analysed résumé (%d words) for category '%s': score=%d, match=%d%%",
        word_count, job.category or "general", score, matched.percentage,
    )

    return AnalysisResult(
        score=score,
        match_percentage=matched.percentage,
        keyword_matches=matched.hits,
        missing_keywords=matched.misses[: config.missing_keywords_limit],
        suggestions=suggestions,
        strengths=strengths,
    )


def _as_descriptor(job: JobDescriptor | Mapping[str, Any]) -> JobDescriptor:
    if isinstance(job, JobDescriptor):
        return job
    return JobDescriptor.model_validate(dict(job))
