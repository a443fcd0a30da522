"""Locale rule tables: section patterns and suggestion messages.

Detection patterns and user-facing texts are data, keyed by locale. The
built-in table is Spanish; other locales can be loaded from YAML with
``LocaleRules.from_yaml`` and passed to the analyzer.
"""

import re
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class SectionPatterns(BaseModel):
    """Case-insensitive regexes, one per section flag."""

    model_config = ConfigDict(frozen=True)

    education: str
    experience: str
    skills: str
    contact: str
    years: str
    achievements: str

    @field_validator("*")
    @classmethod
    def pattern_compiles(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            msg = f"invalid pattern {v!r}: {e}"
            raise ValueError(msg) from e
        return v


class SuggestionMessages(BaseModel):
    """Texts for every suggestion and strength the generator can emit.

    ``missing_keywords`` is a template with a ``{keywords}`` placeholder.
    """

    model_config = ConfigDict(frozen=True)

    missing_keywords: str
    too_short: str
    too_long: str
    adequate_length: str
    missing_education: str
    has_education: str
    missing_experience: str
    has_experience: str
    missing_skills: str
    has_skills: str
    missing_dates: str
    has_dates: str
    missing_achievements: str
    has_achievements: str
    analysis_failed: str

    @field_validator("missing_keywords")
    @classmethod
    def has_keywords_placeholder(cls, v: str) -> str:
        if "{keywords}" not in v:
            msg = "missing_keywords message must contain a '{keywords}' placeholder"
            raise ValueError(msg)
        return v


class LocaleRules(BaseModel):
    """Everything locale-specific the pipeline needs."""

    model_config = ConfigDict(frozen=True)

    locale: str
    patterns: SectionPatterns
    messages: SuggestionMessages

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LocaleRules":
        """Load a rule table from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Rules file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)


SPANISH_RULES = LocaleRules(
    locale="es",
    patterns=SectionPatterns(
        education=r"educaci[oó]n|formaci[oó]n acad[eé]mica|estudios",
        experience=r"experiencia|laboral|profesional",
        skills=r"habilidades|competencias|skills|aptitudes",
        contact=r"contacto|tel[eé]fono|email|correo",
        years=r"\b(?:19|20)\d{2}\b",
        achievements=(
            r"\d+%|\baument[eéoó]\b|\breduj[eéoó]\b|\bmejor[eéoó]\b|\blogr[eéoó]\b"
        ),
    ),
    messages=SuggestionMessages(
        missing_keywords="Considera incluir estas palabras clave importantes: {keywords}",
        too_short=(
            "Tu CV parece demasiado corto. Considera expandir tus experiencias y logros."
        ),
        too_long=(
            "Tu CV es bastante extenso. Considera hacerlo más conciso enfocándote en "
            "las experiencias más relevantes."
        ),
        adequate_length="La longitud de tu CV es adecuada.",
        missing_education="No se detectó una sección de educación. Considera añadirla.",
        has_education="Incluyes información sobre tu formación académica.",
        missing_experience=(
            "No se detectó una sección de experiencia laboral. Considera añadirla."
        ),
        has_experience="Incluyes información sobre tu experiencia laboral.",
        missing_skills=(
            "No se detectó una sección de habilidades o competencias. Considera añadirla."
        ),
        has_skills="Incluyes una sección de habilidades o competencias.",
        missing_dates=(
            "No se detectaron fechas o años en tu CV. Considera añadir fechas a tus "
            "experiencias y educación."
        ),
        has_dates="Incluyes fechas en tu CV, lo que ayuda a contextualizar tu trayectoria.",
        missing_achievements=(
            'Considera incluir logros cuantificables (ej: "aumenté ventas en 20%") '
            "para destacar tus contribuciones."
        ),
        has_achievements="Incluyes logros cuantificables que demuestran tu impacto.",
        analysis_failed=(
            "No se pudo analizar el CV correctamente. Por favor, verifica el formato."
        ),
    ),
)

BUILTIN_RULES: MappingProxyType[str, LocaleRules] = MappingProxyType({
    SPANISH_RULES.locale: SPANISH_RULES,
})


def get_rules(locale: str = "es", rules_path: str | Path | None = None) -> LocaleRules:
    """Resolve the rule table: a YAML file when given, else a built-in locale.

    Raises:
        ValueError: If the locale has no built-in table.
        FileNotFoundError: If ``rules_path`` does not exist.
    """
    if rules_path is not None:
        return LocaleRules.from_yaml(rules_path)
    try:
        return BUILTIN_RULES[locale]
    except KeyError:
        valid = ", ".join(sorted(BUILTIN_RULES))
        msg = f"No built-in rules for locale '{locale}'. Available: {valid}"
        raise ValueError(msg) from None
