from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from projecthub.app import list_projects, reconcile_projects
from projecthub.config import ConfigurationError, configure_logging, get_api_config
from projecthub.domain.ports.fetching import ContributionFetchError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the projecthub catalog")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API and the reconciliation scheduler")
    serve.add_argument(
        "--host",
        type=str,
        help="Interface to bind (defaults to PROJECTHUB_HOST or 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        help="Port to bind (defaults to PROJECTHUB_PORT or 8000)",
    )
    serve.add_argument(
        "--no-scheduler",
        action="store_true",
        help="Serve the API without background reconciliation",
    )

    subparsers.add_parser("reconcile", help="Run a single reconciliation pass")

    projects = subparsers.add_parser("projects", help="Project catalog commands")
    projects_sub = projects.add_subparsers(dest="projects_command", required=True)
    projects_list = projects_sub.add_parser("list", help="List projects in display order")
    projects_list.add_argument(
        "--visible-only",
        action="store_true",
        help="Skip hidden projects",
    )

    return parser.parse_args(list(argv))


def _serve(args: argparse.Namespace) -> None:
    from projecthub.api import create_app  # noqa: PLC0415

    api_config = get_api_config()
    host = args.host or api_config.host
    port = args.port if args.port is not None else api_config.port
    if port <= 0:
        raise ValueError(f"Invalid port: {port}")
    app = create_app(start_scheduler=not args.no_scheduler)
    log.info("Serving projecthub on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


def _reconcile() -> None:
    result = reconcile_projects()
    log.info(
        "Reconciliation finished: updated=%s, assigned=%s, unassigned=%s, missing=%s, failed=%s",
        len(result.updated_projects),
        result.assigned,
        result.unassigned,
        len(result.missing_projects),
        len(result.failed_projects),
    )


def _list_projects(args: argparse.Namespace) -> None:
    for project in list_projects(include_hidden=not args.visible_only):
        marker = " " if project.visible else "h"
        index = "-" if project.order_index is None else str(project.order_index)
        patterns = ", ".join(project.repository_patterns)
        print(  # noqa: T201
            f"{marker} {index:>3} {project.id} {project.name} "
            f"[{patterns}] contributions={len(project.contributions)}"
        )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "serve":
            _serve(parsed_args)
        elif parsed_args.command == "reconcile":
            _reconcile()
        elif parsed_args.command == "projects" and parsed_args.projects_command == "list":
            _list_projects(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except ContributionFetchError as exc:
        log.error("Contribution feed unavailable: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
