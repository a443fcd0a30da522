"""Rule-based job recommendations.

Ranking order:
  1. Category filter (substring, case-insensitive); all jobs if nothing matches
  2. Location priority: matching location or "Remote" first (stable)
  3. Skill overlap: one point per skill found in any requirement (stable, desc)
  4. Cut to limit
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from cvmatch.core.schemas import JobListing

logger = logging.getLogger(__name__)

REMOTE_LOCATION = "Remote"

DEFAULT_CATEGORIES = (
    "Desarrollo de Software",
    "Marketing Digital",
    "Diseño UX/UI",
    "Ciencia de Datos",
    "IT Infrastructure",
    "Recursos Humanos",
    "Finanzas y Administración",
    "Educación",
    "Ventas",
    "Atención al Cliente",
)


def rank_jobs(
    jobs: Iterable[JobListing],
    *,
    location: str | None = None,
    skills: list[str] | None = None,
    categories: list[str] | None = None,
    limit: int = 6,
) -> list[JobListing]:
    """Filter and order ``jobs`` for a user. Input listings are not modified."""
    all_jobs = list(jobs)
    ranked = _filter_categories(all_jobs, categories) or all_jobs

    if location:
        ranked = sorted(ranked, key=lambda job: not _matches_location(job, location))

    if skills:
        ranked = [
            job.model_copy(update={"score": skill_overlap(job, skills)}) for job in ranked
        ]
        ranked.sort(key=lambda job: job.score, reverse=True)

    logger.debug("Ranked %d of %d jobs (limit %d)", len(ranked), len(all_jobs), limit)
    return ranked[:limit]


def skill_overlap(job: JobListing, skills: list[str]) -> int:
    """Number of ``skills`` contained in at least one of the job requirements."""
    requirements = [req.lower() for req in job.requirements]
    return sum(
        1 for skill in skills
        if any(skill.lower() in req for req in requirements)
    )


def format_job_record(raw: Mapping[str, Any]) -> JobListing:
    """Build a JobListing from a raw job row.

    ``requirements`` may be a JSON-encoded string, a list, or a mapping
    (its values are used). Missing optional fields get listing defaults.
    """
    company = raw.get("company") or ""
    data: dict[str, Any] = {
        "id": raw["id"],
        "title": raw.get("title") or "",
        "company": company,
        "logo": raw.get("logo") or f"https://api.dicebear.com/7.x/avataaars/svg?seed={company}",
        "location": raw.get("location") or "",
        "requirements": _parse_requirements(raw.get("requirements")),
        "category": raw.get("category") or "",
        "score": raw.get("score") or 0,
        "is_featured": bool(raw.get("is_featured")),
        "is_remote": bool(raw.get("is_remote")),
    }
    for field, source in (("salary", "salary"), ("type", "type"), ("posted", "posted_date")):
        if raw.get(source):
            data[field] = raw[source]
    return JobListing.model_validate(data)


def load_jobs(path: str | Path) -> list[JobListing]:
    """Load raw job records from a YAML list."""
    path = Path(path)
    if not path.exists():
        msg = f"Jobs file not found: {path}"
        raise FileNotFoundError(msg)
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    if not isinstance(raw, list):
        msg = f"Jobs file must contain a list of jobs: {path}"
        raise ValueError(msg)
    return [format_job_record(record) for record in raw]


def popular_categories(jobs: Iterable[JobListing]) -> list[str]:
    """Unique job categories in first-seen order, or the default list."""
    categories = list(dict.fromkeys(job.category for job in jobs if job.category))
    return categories or list(DEFAULT_CATEGORIES)


def _filter_categories(
    jobs: list[JobListing], categories: list[str] | None,
) -> list[JobListing]:
    if not categories:
        return jobs
    wanted = [c.lower() for c in categories]
    return [job for job in jobs if any(c in job.category.lower() for c in wanted)]


def _matches_location(job: JobListing, location: str) -> bool:
    return location.lower() in job.location.lower() or job.location == REMOTE_LOCATION


def _parse_requirements(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            return [value]
        return [str(item) for item in parsed] if isinstance(parsed, list) else [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    if isinstance(value, Mapping):
        return [str(item) for item in value.values()]
    return []
