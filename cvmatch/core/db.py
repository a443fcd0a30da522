"""SQLite database layer for résumé analyses, job interactions and user events."""

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any, get_args

from cvmatch.core.schemas import AnalysisResult, InteractionType, StoredAnalysis

logger = logging.getLogger(__name__)

INTERACTION_TYPES: frozenset[str] = frozenset(get_args(InteractionType))

_ANALYSES_TABLE = """
CREATE TABLE IF NOT EXISTS resume_analyses (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id           TEXT    NOT NULL,
    job_id            INTEGER NOT NULL,
    score             INTEGER NOT NULL,
    match_percentage  INTEGER NOT NULL,
    keyword_matches   TEXT    NOT NULL DEFAULT '[]',
    missing_keywords  TEXT    NOT NULL DEFAULT '[]',
    suggestions       TEXT    NOT NULL DEFAULT '[]',
    strengths         TEXT    NOT NULL DEFAULT '[]',
    created_at        TEXT    NOT NULL
);
"""

_ANALYSES_INDEX = """
CREATE INDEX IF NOT EXISTS idx_resume_analyses_user
    ON resume_analyses (user_id, created_at);
"""

_INTERACTIONS_TABLE = """
CREATE TABLE IF NOT EXISTS job_interactions (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id           TEXT NOT NULL,
    job_id            TEXT NOT NULL,
    interaction_type  TEXT NOT NULL,
    timestamp         TEXT NOT NULL
);
"""

_EVENTS_TABLE = """
CREATE TABLE IF NOT EXISTS user_events (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id     TEXT NOT NULL,
    event_type  TEXT NOT NULL,
    details     TEXT NOT NULL DEFAULT '{}',
    created_at  TEXT NOT NULL
);
"""


def init_db(path: str | Path) -> sqlite3.Connection:
    """Create the database and tables, returning a connection."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(_ANALYSES_TABLE)
    conn.execute(_ANALYSES_INDEX)
    conn.execute(_INTERACTIONS_TABLE)
    conn.execute(_EVENTS_TABLE)
    conn.commit()
    return conn


def parse_job_id(job_id: int | str) -> int:
    """Coerce a job id to int. Raises ValueError for non-numeric ids."""
    if isinstance(job_id, bool):
        msg = f"invalid job id: {job_id!r}"
        raise ValueError(msg)
    if isinstance(job_id, int):
        return job_id
    try:
        return int(str(job_id).strip())
    except ValueError:
        msg = f"invalid job id: {job_id!r}"
        raise ValueError(msg) from None


def save_analysis(
    conn: sqlite3.Connection,
    user_id: str,
    job_id: int | str,
    result: AnalysisResult,
    created_at: datetime | None = None,
) -> int:
    """Store an analysis for (user_id, job_id). Returns the row ID.

    Raises:
        ValueError: If ``job_id`` is not numeric.
    """
    numeric_job_id = parse_job_id(job_id)
    data = result.model_dump(mode="json")
    cursor = conn.execute(
        """
        INSERT INTO resume_analyses
            (user_id, job_id, score, match_percentage, keyword_matches,
             missing_keywords, suggestions, strengths, created_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            user_id,
            numeric_job_id,
            result.score,
            result.match_percentage,
            json.dumps(data["keyword_matches"], ensure_ascii=False),
            json.dumps(data["missing_keywords"], ensure_ascii=False),
            json.dumps(data["suggestions"], ensure_ascii=False),
            json.dumps(data["strengths"], ensure_ascii=False),
            (created_at or datetime.now()).isoformat(),
        ),
    )
    conn.commit()
    logger.debug("Saved analysis for user '%s', job %d", user_id, numeric_job_id)
    return cursor.lastrowid or 0


def get_previous_analyses(conn: sqlite3.Connection, user_id: str) -> list[StoredAnalysis]:
    """Return every stored analysis of ``user_id``, newest first."""
    rows = conn.execute(
        """
        SELECT * FROM resume_analyses
        WHERE user_id = ?
        ORDER BY created_at DESC, id DESC
        """,
        (user_id,),
    ).fetchall()
    return [_row_to_stored(row) for row in rows]


def record_interaction(
    conn: sqlite3.Connection,
    user_id: str,
    job_id: int | str,
    interaction_type: str,
) -> int:
    """Record a view/click/apply/save of a job by a user. Returns the row ID."""
    if interaction_type not in INTERACTION_TYPES:
        valid = ", ".join(sorted(INTERACTION_TYPES))
        msg = f"Unknown interaction type '{interaction_type}'. Expected one of: {valid}"
        raise ValueError(msg)
    cursor = conn.execute(
        """
        INSERT INTO job_interactions (user_id, job_id, interaction_type, timestamp)
        VALUES (?, ?, ?, ?)
        """,
        (user_id, str(job_id), interaction_type, datetime.now().isoformat()),
    )
    conn.commit()
    return cursor.lastrowid or 0


def count_interactions(
    conn: sqlite3.Connection,
    user_id: str,
    interaction_type: str | None = None,
) -> int:
    """Count interactions of a user, optionally of a single type."""
    if interaction_type is None:
        row = conn.execute(
            "SELECT COUNT(*) FROM job_interactions WHERE user_id = ?",
            (user_id,),
        ).fetchone()
    else:
        row = conn.execute(
            "SELECT COUNT(*) FROM job_interactions WHERE user_id = ? AND interaction_type = ?",
            (user_id, interaction_type),
        ).fetchone()
    return int(row[0])


def log_event(
    conn: sqlite3.Connection,
    user_id: str,
    event_type: str,
    details: dict[str, Any] | None = None,
) -> int:
    """Append an activity event (e.g. "resume_analyzed") for a user. Returns the row ID."""
    cursor = conn.execute(
        """
        INSERT INTO user_events (user_id, event_type, details, created_at)
        VALUES (?, ?, ?, ?)
        """,
        (
            user_id,
            event_type,
            json.dumps(details or {}, ensure_ascii=False),
            datetime.now().isoformat(),
        ),
    )
    conn.commit()
    return cursor.lastrowid or 0


def get_events(
    conn: sqlite3.Connection,
    user_id: str,
    event_type: str | None = None,
) -> list[dict[str, Any]]:
    """Events of a user in insertion order, optionally of a single type."""
    query = "SELECT * FROM user_events WHERE user_id = ?"
    params: tuple[str, ...] = (user_id,)
    if event_type is not None:
        query += " AND event_type = ?"
        params += (event_type,)
    rows = conn.execute(query + " ORDER BY id", params).fetchall()
    return [
        {
            "event_type": row["event_type"],
            "details": json.loads(row["details"]),
            "created_at": datetime.fromisoformat(row["created_at"]),
        }
        for row in rows
    ]


def _row_to_stored(row: sqlite3.Row) -> StoredAnalysis:
    result = AnalysisResult(
        score=row["score"],
        match_percentage=row["match_percentage"],
        keyword_matches=json.loads(row["keyword_matches"]),
        missing_keywords=json.loads(row["missing_keywords"]),
        suggestions=json.loads(row["suggestions"]),
        strengths=json.loads(row["strengths"]),
    )
    return StoredAnalysis(
        id=row["id"],
        user_id=row["user_id"],
        job_id=row["job_id"],
        result=result,
        created_at=datetime.fromisoformat(row["created_at"]),
    )
