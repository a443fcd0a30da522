"""Tests for the analyze_resume entry point."""

import logging

import pytest

from cvmatch.core.config import AnalysisConfig
from cvmatch.core.schemas import AnalysisResult, JobDescriptor
from cvmatch.pipeline import analyzer
from cvmatch.pipeline.analyzer import analyze_resume, fallback_result
from cvmatch.pipeline.rules import SPANISH_RULES
from cvmatch.pipeline.taxonomy import KEYWORD_TAXONOMY

HEADER = "Experiencia Educación Habilidades Contacto 2020 aumenté 20%"


def _resume(words: int = 500, header: str = HEADER, filler: str = "lorem") -> str:
    header_words = header.split()
    return " ".join(header_words + [filler] * (words - len(header_words)))


def _assert_fallback(result: AnalysisResult) -> None:
    assert result.score == 0
    assert result.match_percentage == 0
    assert result.keyword_matches == []
    assert result.missing_keywords == []
    assert result.strengths == []
    assert len(result.suggestions) == 1
    assert result.suggestions[0].kind == "format_issue"
    assert result.suggestions[0].severity == "high"
    assert result.suggestions[0].message == SPANISH_RULES.messages.analysis_failed


class TestAnalyzeResume:
    def test_empty_resume(self) -> None:
        result = analyze_resume("", JobDescriptor(category="tecnologia"))
        assert result.score == 0
        assert result.match_percentage == 0
        assert result.keyword_matches == []
        assert result.strengths == []
        kinds = [(s.kind, s.message) for s in result.suggestions]
        assert ("content_improvement", SPANISH_RULES.messages.too_short) in kinds
        assert len(result.suggestions) == 7

    def test_all_flags_maximal(self) -> None:
        result = analyze_resume(_resume(), JobDescriptor(category="tecnologia"))
        # Only the keyword component is missing: 0 + 30 + 30
        assert result.match_percentage == 0
        assert result.score == 60
        assert result.suggestions[0].kind == "missing_keyword"
        assert len(result.suggestions) == 1
        assert len(result.strengths) == 6

    def test_fractional_match_scores_unrounded(self) -> None:
        text = _resume(words=300, header="contacto 2020 react")
        result = analyze_resume(text, JobDescriptor(category="tecnologia"))
        assert result.keyword_matches == ["react"]
        # 1 of 36 keywords: reported as 3%, scored as 2.78%
        assert result.match_percentage == 3
        assert result.score == 28

    def test_full_keyword_match(self) -> None:
        keywords = KEYWORD_TAXONOMY["general"] + KEYWORD_TAXONOMY["tecnologia"]
        text = _resume(header=HEADER + " " + " ".join(keywords))
        result = analyze_resume(text, JobDescriptor(category="tecnologia"))
        assert result.match_percentage == 100
        assert result.missing_keywords == []
        assert result.score == 100
        assert all(s.kind != "missing_keyword" for s in result.suggestions)

    def test_react_typescript_without_javascript(self) -> None:
        result = analyze_resume(
            "Desarrollador con React y TypeScript",
            JobDescriptor(category="tecnologia"),
        )
        assert "react" in result.keyword_matches
        assert "typescript" in result.keyword_matches
        assert "javascript" not in result.keyword_matches

    def test_javascript_reported_missing(self) -> None:
        job = JobDescriptor(category="tecnologia")
        text = "React TypeScript " + " ".join(KEYWORD_TAXONOMY["general"])
        result = analyze_resume(text, job)
        assert result.missing_keywords[0] == "javascript"
        assert "react" in result.keyword_matches
        assert "typescript" in result.keyword_matches

    def test_missing_keywords_capped(self) -> None:
        result = analyze_resume("nada relevante", JobDescriptor(category="tecnologia"))
        assert len(result.missing_keywords) == 10
        assert result.missing_keywords == list(KEYWORD_TAXONOMY["general"][:10])

    def test_matches_and_missing_disjoint(self) -> None:
        result = analyze_resume(
            "Liderazgo, Excel y Python en AWS", JobDescriptor(category="tecnologia"),
        )
        assert set(result.keyword_matches).isdisjoint(result.missing_keywords)
        assert {"liderazgo", "excel", "python", "aws"} <= set(result.keyword_matches)

    def test_accepts_mapping_job(self) -> None:
        result = analyze_resume("python", {"category": "tecnologia", "title": "Backend"})
        assert "python" in result.keyword_matches

    def test_requirements_add_keywords(self) -> None:
        job = JobDescriptor(category="general", requirements=["Dominio de Terraform"])
        result = analyze_resume("Terraform y Ansible", job)
        assert "terraform" in result.keyword_matches
        assert "dominio" not in result.keyword_matches

    def test_malformed_requirements_do_not_fail(self) -> None:
        result = analyze_resume(_resume(), JobDescriptor(category="tecnologia", requirements=42))
        assert result.score == 60
        assert len(result.strengths) == 6

    def test_custom_config_applied(self) -> None:
        config = AnalysisConfig(min_words=1, max_words=10)
        result = analyze_resume("Experiencia 2020", JobDescriptor(), config=config)
        assert SPANISH_RULES.messages.adequate_length in result.strengths

    def test_deterministic(self) -> None:
        job = JobDescriptor(category="marketing", requirements=["SEO avanzado"])
        assert analyze_resume(_resume(), job) == analyze_resume(_resume(), job)

    @pytest.mark.parametrize("category", [None, "tecnologia", "diseño", "desconocida"])
    @pytest.mark.parametrize("words", [0, 50, 500, 1500])
    def test_invariants(self, category: str | None, words: int) -> None:
        text = _resume(words=words) if words else ""
        result = analyze_resume(text, JobDescriptor(category=category))
        assert 0 <= result.score <= 100
        assert 0 <= result.match_percentage <= 100
        assert len(result.missing_keywords) <= 10
        assert all(s.message for s in result.suggestions)


class TestFailSoft:
    def test_internal_error_returns_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(*args: object, **kwargs: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(analyzer, "detect_sections", boom)
        _assert_fallback(analyze_resume(_resume(), JobDescriptor(category="tecnologia")))

    def test_error_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture,
    ) -> None:
        def boom(*args: object, **kwargs: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(analyzer, "relevant_keywords", boom)
        with caplog.at_level(logging.WARNING, logger="cvmatch.pipeline.analyzer"):
            analyze_resume("texto", JobDescriptor())
        assert "analysis failed" in caplog.text
        assert "boom" in caplog.text

    def test_invalid_job_mapping_returns_fallback(self) -> None:
        _assert_fallback(analyze_resume("texto", {"category": 5}))

    def test_unknown_locale_returns_fallback(self) -> None:
        _assert_fallback(analyze_resume("texto", JobDescriptor(), config=AnalysisConfig(locale="fr")))

    def test_fallback_result_default_message(self) -> None:
        _assert_fallback(fallback_result())
