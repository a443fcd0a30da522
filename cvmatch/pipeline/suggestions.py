"""Rule table turning analysis facts into suggestions and strengths.

Every rule is evaluated, in this order:
  1. missing keywords            -> missing_keyword (high)
  2. word count below range      -> content_improvement (high)
     word count above range      -> content_improvement (medium)
     otherwise                   -> strength
  3. education / experience / skills sections -> format_issue or strength
  4. dates                       -> format_issue (medium) or strength
  5. quantified achievements     -> content_improvement (medium) or strength
"""

from cvmatch.core.config import AnalysisConfig
from cvmatch.core.schemas import SectionFlags, Severity, Suggestion
from cvmatch.pipeline.rules import SPANISH_RULES, LocaleRules


def build_suggestions(
    missing_keywords: list[str],
    word_count: int,
    sections: SectionFlags,
    rules: LocaleRules = SPANISH_RULES,
    config: AnalysisConfig | None = None,
) -> tuple[list[Suggestion], list[str]]:
    """Return (suggestions, strengths) for one analysed résumé."""
    config = config or AnalysisConfig()
    messages = rules.messages
    suggestions: list[Suggestion] = []
    strengths: list[str] = []

    if missing_keywords:
        top_missing = missing_keywords[: config.suggested_keywords_limit]
        suggestions.append(Suggestion(
            kind="missing_keyword",
            message=messages.missing_keywords.format(keywords=", ".join(top_missing)),
            severity="high",
        ))

    if word_count < config.min_words:
        suggestions.append(Suggestion(
            kind="content_improvement", message=messages.too_short, severity="high",
        ))
    elif word_count > config.max_words:
        suggestions.append(Suggestion(
            kind="content_improvement", message=messages.too_long, severity="medium",
        ))
    else:
        strengths.append(messages.adequate_length)

    section_checks: list[tuple[str, bool, str, str, Severity]] = [
        ("education", sections.education,
         messages.missing_education, messages.has_education, "medium"),
        ("experience", sections.experience,
         messages.missing_experience, messages.has_experience, "high"),
        ("skills", sections.skills,
         messages.missing_skills, messages.has_skills, "medium"),
    ]
    for section, present, missing_message, strength, severity in section_checks:
        if present:
            strengths.append(strength)
        else:
            suggestions.append(Suggestion(
                kind="format_issue", message=missing_message, severity=severity,
                section=section,
            ))

    if sections.has_years:
        strengths.append(messages.has_dates)
    else:
        suggestions.append(Suggestion(
            kind="format_issue", message=messages.missing_dates, severity="medium",
        ))

    if sections.has_quantified_achievements:
        strengths.append(messages.has_achievements)
    else:
        suggestions.append(Suggestion(
            kind="content_improvement", message=messages.missing_achievements,
            severity="medium",
        ))

    return suggestions, strengths
