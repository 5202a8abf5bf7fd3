"""Command-line entry point: run the API or load season stats."""

from __future__ import annotations

import argparse
from typing import Sequence

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from .config import settings
from .db import get_engine, get_session
from .exceptions import MalformedRowError
from .logging import logger
from .persistence import create_table, load_season_stats


def serve(host: str, port: int) -> None:
    logger.info("server_starting", host=host, port=port)
    uvicorn.run("bref_boxscores.main:app", host=host, port=port)


def load_stats(path: str, has_header: bool = False, strict: bool = False) -> int:
    try:
        create_table(get_engine())
        with get_session() as session:
            report = load_season_stats(session, path, has_header=has_header, strict=strict)
    except FileNotFoundError:
        logger.error("season_stats_file_missing", path=path)
        return 1
    except (MalformedRowError, SQLAlchemyError) as exc:
        logger.error("season_stats_load_failed", path=path, strict=strict, error=str(exc))
        return 1

    print(f"{report.path}: inserted {report.inserted} rows, skipped {report.skipped}")
    for error in report.errors:
        print(f"  skipped {error}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bref-boxscores",
        description="Basketball Reference box-score API and season-stats loader",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)

    load_parser = subparsers.add_parser("load-stats", help="Load a season-stats CSV")
    load_parser.add_argument(
        "csv",
        nargs="?",
        default=settings.season_stats_csv,
        help=f"CSV file to load (default: {settings.season_stats_csv})",
    )
    load_parser.add_argument(
        "--header",
        action="store_true",
        help="Skip the first line of the file",
    )
    load_parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort and roll back the whole load on the first bad row",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port)
        return 0
    return load_stats(args.csv, has_header=args.header, strict=args.strict)


if __name__ == "__main__":
    raise SystemExit(main())
