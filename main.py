"""CLI entry point for the résumé matching engine."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from cvmatch.core.config import Settings
from cvmatch.core.schemas import AnalysisResult, JobDescriptor


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Résumé matching engine - score a résumé against a job offer",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- analyze subcommand ---
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a résumé for a job")
    analyze_parser.add_argument(
        "--resume",
        required=True,
        help="Path to résumé file (.txt, .md, .pdf, .docx)",
    )
    job_group = analyze_parser.add_mutually_exclusive_group()
    job_group.add_argument(
        "--job",
        help="Path to a job YAML with 'category' and 'requirements'",
    )
    job_group.add_argument(
        "--category",
        help="Job category (e.g. tecnologia, marketing)",
    )
    analyze_parser.add_argument(
        "--requirement",
        action="append",
        default=[],
        help="Job requirement phrase (repeatable, used with --category)",
    )
    analyze_parser.add_argument(
        "--save",
        action="store_true",
        help="Store the analysis in the database (needs --user-id and --job-id)",
    )
    analyze_parser.add_argument("--user-id", help="User the analysis belongs to")
    analyze_parser.add_argument("--job-id", help="Numeric job identifier")
    analyze_parser.add_argument(
        "--export",
        choices=["json"],
        help="Print the result in the given format (json)",
    )

    # --- history subcommand ---
    history_parser = subparsers.add_parser("history", help="List stored analyses of a user")
    history_parser.add_argument("--user-id", required=True, help="User identifier")

    # --- recommend subcommand ---
    recommend_parser = subparsers.add_parser("recommend", help="Recommend jobs from a list")
    recommend_parser.add_argument(
        "--jobs",
        required=True,
        help="Path to a YAML list of job records",
    )
    recommend_parser.add_argument("--location", help="Preferred location")
    recommend_parser.add_argument(
        "--skill", action="append", default=[], help="User skill (repeatable)",
    )
    recommend_parser.add_argument(
        "--category", action="append", default=[], help="Job category (repeatable)",
    )
    recommend_parser.add_argument(
        "--limit", type=int, help="Maximum number of jobs (default from settings)",
    )

    for sub in (analyze_parser, history_parser, recommend_parser):
        sub.add_argument(
            "--config",
            default="config/settings.yaml",
            help="Path to settings YAML file (default: config/settings.yaml)",
        )
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose (DEBUG) logging",
        )

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str) -> Settings:
    """Load settings, falling back to defaults when the file is absent."""
    try:
        return Settings.from_yaml(path)
    except FileNotFoundError:
        logging.getLogger(__name__).info("No config at %s - using defaults", path)
        return Settings()


def load_job(args: argparse.Namespace) -> JobDescriptor:
    """Build the JobDescriptor from --job YAML or --category/--requirement."""
    if args.job:
        path = Path(args.job)
        if not path.exists():
            msg = f"Job file not found: {path}"
            raise FileNotFoundError(msg)
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            msg = f"Job file must contain a mapping: {path}"
            raise ValueError(msg)
        return JobDescriptor.model_validate(raw)
    return JobDescriptor(category=args.category, requirements=args.requirement or None)


def print_result(result: AnalysisResult) -> None:
    print(f"Score: {result.score}/100")
    print(f"Keyword match: {result.match_percentage}%")
    print(f"  Matched: {', '.join(result.keyword_matches) or '-'}")
    print(f"  Missing: {', '.join(result.missing_keywords) or '-'}")
    if result.suggestions:
        print("Suggestions:")
        for s in result.suggestions:
            section = f" ({s.section})" if s.section else ""
            print(f"  [{s.severity}] {s.kind}{section}: {s.message}")
    if result.strengths:
        print("Strengths:")
        for strength in result.strengths:
            print(f"  + {strength}")


def cmd_analyze(args: argparse.Namespace, settings: Settings) -> None:
    """Handle analyze subcommand."""
    from cvmatch.pipeline.analyzer import analyze_resume
    from cvmatch.pipeline.rules import get_rules
    from cvmatch.profile.extractor import extract_text

    if args.save and not (args.user_id and args.job_id):
        msg = "--save requires --user-id and --job-id"
        raise ValueError(msg)

    rules = get_rules(settings.analysis.locale, settings.analysis.rules_path)
    text = extract_text(args.resume)
    job = load_job(args)
    result = analyze_resume(text, job, config=settings.analysis, rules=rules)

    if args.export == "json":
        print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    else:
        print_result(result)

    if args.save:
        from cvmatch.core.db import init_db, log_event, parse_job_id, save_analysis

        conn = init_db(settings.database.path)
        try:
            row_id = save_analysis(conn, args.user_id, args.job_id, result)
            log_event(
                conn, args.user_id, "resume_analyzed",
                {"job_id": parse_job_id(args.job_id), "score": result.score},
            )
        finally:
            conn.close()
        print(f"Analysis saved (id {row_id}) to {settings.database.path}")


def cmd_history(args: argparse.Namespace, settings: Settings) -> None:
    """Handle history subcommand."""
    from cvmatch.core.db import get_previous_analyses, init_db

    conn = init_db(settings.database.path)
    try:
        analyses = get_previous_analyses(conn, args.user_id)
    finally:
        conn.close()

    print(f"{len(analyses)} analyses for user '{args.user_id}'")
    for a in analyses:
        print(
            f"  #{a.id} job {a.job_id} at {a.created_at:%Y-%m-%d %H:%M}: "
            f"score {a.result.score}, match {a.result.match_percentage}%"
        )


def cmd_recommend(args: argparse.Namespace, settings: Settings) -> None:
    """Handle recommend subcommand."""
    from cvmatch.pipeline.recommender import load_jobs, rank_jobs

    jobs = load_jobs(args.jobs)
    limit = args.limit or settings.recommendations.limit
    ranked = rank_jobs(
        jobs,
        location=args.location,
        skills=args.skill or None,
        categories=args.category or None,
        limit=limit,
    )

    print(f"{len(ranked)} recommended jobs (of {len(jobs)}):")
    for job in ranked:
        print(f"  [{job.score}] {job.title} - {job.company} ({job.location}) [{job.category}]")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    commands = {
        "analyze": cmd_analyze,
        "history": cmd_history,
        "recommend": cmd_recommend,
    }
    try:
        settings = load_settings(args.config)
        commands[args.command](args, settings)
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
