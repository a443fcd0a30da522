"""Tests for résumé section detection."""

import pytest

from cvmatch.core.schemas import SectionFlags
from cvmatch.pipeline.rules import SPANISH_RULES, LocaleRules, SectionPatterns
from cvmatch.pipeline.sections import detect_sections


class TestDetectSections:
    def test_empty_text_all_false(self) -> None:
        assert detect_sections("") == SectionFlags()

    def test_all_sections(self) -> None:
        text = "Experiencia\nEducación\nHabilidades\nContacto\n2020: aumenté ventas 20%"
        flags = detect_sections(text)
        assert flags == SectionFlags(
            education=True,
            experience=True,
            skills=True,
            contact=True,
            has_years=True,
            has_quantified_achievements=True,
        )

    @pytest.mark.parametrize(
        "text", ["EDUCACIÓN", "educacion", "Formación Académica", "formacion academica", "Estudios"],
    )
    def test_education(self, text: str) -> None:
        assert detect_sections(text).education is True

    @pytest.mark.parametrize("text", ["Experiencia", "Historial laboral", "Perfil Profesional"])
    def test_experience(self, text: str) -> None:
        assert detect_sections(text).experience is True

    @pytest.mark.parametrize("text", ["Habilidades", "Competencias", "SKILLS", "Aptitudes"])
    def test_skills(self, text: str) -> None:
        assert detect_sections(text).skills is True

    @pytest.mark.parametrize("text", ["Contacto", "Teléfono: 099", "telefono", "Email", "Correo"])
    def test_contact(self, text: str) -> None:
        assert detect_sections(text).contact is True

    @pytest.mark.parametrize("text", ["1999", "desde 2015 hasta 2021", "(2008)"])
    def test_years_detected(self, text: str) -> None:
        assert detect_sections(text).has_years is True

    @pytest.mark.parametrize("text", ["2150", "12345", "año 87", "2020s"])
    def test_years_not_detected(self, text: str) -> None:
        assert detect_sections(text).has_years is False

    @pytest.mark.parametrize(
        "text",
        [
            "crecimiento del 35%",
            "Aumenté la facturación",
            "aumentó el tráfico",
            "Reduje costos",
            "redujo tiempos",
            "mejoró la retención",
            "Logré certificar al equipo",
            "logró la meta",
        ],
    )
    def test_quantified_achievements(self, text: str) -> None:
        assert detect_sections(text).has_quantified_achievements is True

    @pytest.mark.parametrize("text", ["", "Responsable de ventas", "porcentaje", "mejorar procesos"])
    def test_no_quantified_achievements(self, text: str) -> None:
        assert detect_sections(text).has_quantified_achievements is False

    def test_checks_are_independent(self) -> None:
        flags = detect_sections("Habilidades: liderazgo")
        assert flags.skills is True
        assert flags.education is False
        assert flags.experience is False
        assert flags.contact is False
        assert flags.has_years is False
        assert flags.has_quantified_achievements is False

    def test_custom_rules(self) -> None:
        english = LocaleRules(
            locale="en",
            patterns=SectionPatterns(
                education=r"education",
                experience=r"experience",
                skills=r"skills",
                contact=r"contact|phone",
                years=r"\b(?:19|20)\d{2}\b",
                achievements=r"\d+%|\bincreased\b",
            ),
            messages=SPANISH_RULES.messages,
        )
        flags = detect_sections("Work Experience\nEducation\nIncreased revenue", english)
        assert flags.experience is True
        assert flags.education is True
        assert flags.has_quantified_achievements is True
        assert flags.skills is False
        # Spanish headers are not recognised by the English table
        assert detect_sections("Educación", english).education is False


class TestSectionFlags:
    def test_core_sections_found(self) -> None:
        flags = SectionFlags(education=True, skills=True, has_years=True)
        assert flags.core_sections_found == 2

    def test_core_sections_ignore_auxiliary(self) -> None:
        flags = SectionFlags(has_years=True, has_quantified_achievements=True)
        assert flags.core_sections_found == 0
