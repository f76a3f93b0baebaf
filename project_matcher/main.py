"""Command-line entry point: suggest projects for an email.

Reads one email record and a list of project records from JSON files and
prints the matching projects, best first, as JSON on stdout.
"""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from project_matcher.config.environment import EnvironmentConfig
from project_matcher.config.exceptions import ConfigurationError
from project_matcher.config.loader import load_config
from project_matcher.config.models import AppConfig
from project_matcher.domain.exceptions import RecordFormatError
from project_matcher.domain.models import Candidate, SourceText
from project_matcher.logging import get_logger
from project_matcher.logging.config import configure_logging
from project_matcher.logging.context import log_context
from project_matcher.matching.engine import ProjectMatcher

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Log level priority: CLI > LOG_LEVEL environment variable > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level or "INFO"

    return app_config, env_config


def read_json_file(path: Path, label: str) -> Any:
    """Read a JSON document, raising RecordFormatError on any failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise RecordFormatError(f"Cannot read {label} file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordFormatError(f"Invalid JSON in {label} file {path}: {e}") from e


def load_candidates(records: Any) -> List[Candidate]:
    """Adapt a JSON list of project records into candidates."""
    if not isinstance(records, list):
        raise RecordFormatError(
            f"Projects file must contain a list, got {type(records).__name__}"
        )
    return [Candidate.from_project_record(record) for record in records]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Project Matcher - suggest which projects an email belongs to"
    )
    parser.add_argument(
        "--email",
        type=Path,
        required=True,
        help="JSON file with one email record (subject, from_email, from_name, snippet)",
    )
    parser.add_argument(
        "--projects",
        type=Path,
        required=True,
        help="JSON file with a list of project records",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Include each suggestion's score and matched signals",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Return at most this many suggestions",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the project matcher CLI.

    Returns:
        Exit code (0 for success, 1 for configuration or input errors).
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
    except ConfigurationError as e:
        print(f"Configuration error:\n{e}", file=sys.stderr)
        return 1

    configure_logging(
        level=env_config.log_level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    scoring = app_config.scoring
    if args.limit is not None:
        if args.limit < 1:
            print("--limit must be at least 1", file=sys.stderr)
            return 1
        scoring = scoring.model_copy(update={"max_suggestions": args.limit})

    try:
        source_text = SourceText.from_record(read_json_file(args.email, "email"))
        candidates = load_candidates(read_json_file(args.projects, "projects"))
    except RecordFormatError as e:
        logger.error(str(e), extra={"event": "cli.input.invalid"})
        return 1

    matcher = ProjectMatcher(scoring)
    subject = source_text.subject if source_text else None
    with log_context(email_subject=subject):
        suggestions = matcher.evaluate(source_text, candidates)

    if args.explain:
        output = [item.to_dict() for item in suggestions]
    else:
        output = [item.to_dict()["project"] for item in suggestions]

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")

    logger.info(
        "Suggested projects for email",
        extra={
            "event": "cli.suggest.completed",
            "candidates": len(candidates),
            "suggestions": len(suggestions),
        },
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
