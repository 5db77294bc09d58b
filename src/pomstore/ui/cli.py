# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pomstore.app import list_problems, list_project_models, process_artifacts
from pomstore.config import configure_logging
from pomstore.domain.model import POM_TYPE, Artifact

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pomstore",
        description="Store effective project models from managed repositories",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Process POM artifacts into the database")
    process.add_argument("repository_id", help="Managed repository holding the artifacts")
    process.add_argument(
        "coordinates",
        nargs="+",
        metavar="COORDINATE",
        help="Artifact coordinate as group:artifact:version[:type] (type defaults to pom)",
    )

    problems = subparsers.add_parser("problems", help="List recorded repository problems")
    problems.add_argument(
        "--repository",
        type=str,
        help="Only show problems for this repository id",
    )

    models = subparsers.add_parser("models", help="List stored project models")
    models.add_argument(
        "--group",
        type=str,
        help="Only show models with this group id",
    )

    return parser.parse_args(list(argv))


def parse_coordinate(value: str, repository_id: str) -> Artifact:
    """Parse ``group:artifact:version[:type]`` into an artifact."""

    parts = value.strip().split(":")
    if len(parts) not in (3, 4) or not all(parts):
        raise ValueError(f"Invalid coordinate (expected group:artifact:version[:type]): {value}")
    group_id, artifact_id, version = parts[:3]
    artifact_type = parts[3] if len(parts) == 4 else POM_TYPE  # noqa: PLR2004
    return Artifact(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        type=artifact_type,
        repository_id=repository_id,
    )


def _run_process(args: argparse.Namespace, artifacts: list[Artifact]) -> int:
    result = process_artifacts(artifacts)
    log.info(
        "Processed %s artifact(s) from %s: processed=%s, skipped=%s, failed=%s",
        result.total,
        args.repository_id,
        result.processed,
        result.skipped,
        result.failed,
    )
    return 1 if result.failed else 0


def _run_problems(args: argparse.Namespace) -> int:
    for problem in list_problems(args.repository):
        print(f"{problem.repository_id}\t{problem.path}\t{problem.type}\t{problem.message}")
    return 0


def _run_models(args: argparse.Namespace) -> int:
    for model in list_project_models(args.group):
        print(f"{model.key}\t{model.packaging}\t{model.name or ''}")
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    artifacts: list[Artifact] = []
    try:
        if parsed_args.command == "process":
            artifacts = [
                parse_coordinate(value, parsed_args.repository_id)
                for value in parsed_args.coordinates
            ]
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "process":
            exit_code = _run_process(parsed_args, artifacts)
        elif parsed_args.command == "problems":
            exit_code = _run_problems(parsed_args)
        elif parsed_args.command == "models":
            exit_code = _run_models(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while running %s", parsed_args.command)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
