"""Season-stats CSV loading.

Each CSV line maps by position onto the ``playerstats`` columns. The file
has no header unless the caller says so.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from ..db import Base, PlayerSeasonStats
from ..exceptions import MalformedRowError
from ..logging import logger
from ..utils.parsing import parse_stat

SEASON_STATS_TEXT_COLUMNS = ("name", "height", "weight", "team", "age")
SEASON_STATS_NUMERIC_COLUMNS = (
    "salary",
    "points",
    "blocks",
    "steals",
    "assists",
    "rebounds",
    "ft",
    "fta",
    "fg3",
    "fg3a",
    "fg",
    "fga",
    "mp",
    "g",
    "per",
    "ows",
    "dws",
    "ws",
    "ws48",
    "usg",
    "bpm",
    "vorp",
)
SEASON_STATS_COLUMNS = SEASON_STATS_TEXT_COLUMNS + SEASON_STATS_NUMERIC_COLUMNS


@dataclass
class LoadReport:
    path: str
    inserted: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    def record_skip(self, error: Exception) -> None:
        self.skipped += 1
        self.errors.append(str(error))


def parse_season_stats_row(row: Sequence[str], line_number: int) -> dict[str, str | float | None]:
    """Map one CSV row onto column names, parsing the numeric columns."""
    if len(row) != len(SEASON_STATS_COLUMNS):
        raise MalformedRowError(
            f"expected {len(SEASON_STATS_COLUMNS)} columns, got {len(row)}",
            line_number=line_number,
        )

    values: dict[str, str | float | None] = {}
    for column, raw in zip(SEASON_STATS_TEXT_COLUMNS, row):
        values[column] = raw.strip() or None
    for column, raw in zip(SEASON_STATS_NUMERIC_COLUMNS, row[len(SEASON_STATS_TEXT_COLUMNS):]):
        try:
            values[column] = parse_stat(raw)
        except ValueError as exc:
            raise MalformedRowError(
                f"column {column}: not a number: {raw!r}", line_number=line_number
            ) from exc
    return values


def read_season_stats(
    path: str | Path, has_header: bool = False
) -> Iterator[tuple[int, dict[str, str | float | None] | MalformedRowError]]:
    """Yield ``(line_number, values)`` per data line, or the row's error.

    Blank lines are skipped. Errors are yielded rather than raised so the
    caller decides whether one bad line aborts the load.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        if has_header:
            next(reader, None)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as exc:
                yield reader.line_num, MalformedRowError(str(exc), line_number=reader.line_num)
                continue

            if not any(cell.strip() for cell in row):
                continue
            try:
                yield reader.line_num, parse_season_stats_row(row, reader.line_num)
            except MalformedRowError as exc:
                yield reader.line_num, exc


def create_table(engine: Engine) -> None:
    """Create the playerstats table if it does not exist."""
    Base.metadata.create_all(engine, tables=[PlayerSeasonStats.__table__])


def load_season_stats(
    session: Session,
    path: str | Path,
    *,
    has_header: bool = False,
    strict: bool = False,
) -> LoadReport:
    """
    Insert every row of a season-stats CSV.

    By default a bad row is logged and skipped: each insert runs inside its
    own SAVEPOINT so a database rejection only discards that row. With
    ``strict=True`` the first bad row raises and the caller's transaction
    rolls back, so nothing from the file is kept.

    Rows are appended; loading the same file twice duplicates them.
    """
    report = LoadReport(path=str(path))

    for line_number, parsed in read_season_stats(path, has_header=has_header):
        if isinstance(parsed, MalformedRowError):
            if strict:
                raise parsed
            logger.warning("season_stats_row_skipped", line=line_number, error=str(parsed))
            report.record_skip(parsed)
            continue

        if strict:
            session.add(PlayerSeasonStats(**parsed))
            session.flush()
        else:
            try:
                with session.begin_nested():
                    session.add(PlayerSeasonStats(**parsed))
            except (DataError, IntegrityError) as exc:
                error = MalformedRowError(str(exc.orig or exc), line_number=line_number)
                logger.warning("season_stats_row_skipped", line=line_number, error=str(error))
                report.record_skip(error)
                continue
        report.inserted += 1

    logger.info(
        "season_stats_loaded",
        path=report.path,
        inserted=report.inserted,
        skipped=report.skipped,
        strict=strict,
    )
    return report
