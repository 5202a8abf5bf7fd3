"""Season player statistics, one row per CSV line."""

from __future__ import annotations

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PlayerSeasonStats(Base):
    """A player's season line as loaded from the season-stats CSV.

    No uniqueness constraint: loading the same file twice appends duplicates.
    """

    __tablename__ = "playerstats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text)
    height: Mapped[str | None] = mapped_column(Text)
    weight: Mapped[str | None] = mapped_column(Text)
    team: Mapped[str | None] = mapped_column(Text)
    age: Mapped[str | None] = mapped_column(Text)
    salary: Mapped[float | None] = mapped_column(Float)
    points: Mapped[float | None] = mapped_column(Float)
    blocks: Mapped[float | None] = mapped_column(Float)
    steals: Mapped[float | None] = mapped_column(Float)
    assists: Mapped[float | None] = mapped_column(Float)
    rebounds: Mapped[float | None] = mapped_column(Float)
    ft: Mapped[float | None] = mapped_column(Float)
    fta: Mapped[float | None] = mapped_column(Float)
    fg3: Mapped[float | None] = mapped_column(Float)
    fg3a: Mapped[float | None] = mapped_column(Float)
    fg: Mapped[float | None] = mapped_column(Float)
    fga: Mapped[float | None] = mapped_column(Float)
    mp: Mapped[float | None] = mapped_column(Float)
    g: Mapped[float | None] = mapped_column(Float)
    per: Mapped[float | None] = mapped_column(Float)
    ows: Mapped[float | None] = mapped_column(Float)
    dws: Mapped[float | None] = mapped_column(Float)
    ws: Mapped[float | None] = mapped_column(Float)
    ws48: Mapped[float | None] = mapped_column(Float)
    usg: Mapped[float | None] = mapped_column(Float)
    bpm: Mapped[float | None] = mapped_column(Float)
    vorp: Mapped[float | None] = mapped_column(Float)
