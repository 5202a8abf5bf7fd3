"""Pydantic models for scraped box-score records.

Every statistic is carried as the text rendered on the page. A value the
page does not provide (missing node or empty cell) is ``None`` and
serializes as ``null``; fields are never omitted.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Column order of the basic box-score table, left to right after the
# player/team header cell.
BOX_SCORE_COLUMNS: tuple[str, ...] = (
    "minutes_played",
    "field_goals",
    "field_goals_attempted",
    "field_goal_percentage",
    "three_point",
    "three_point_attempted",
    "three_point_percentage",
    "free_throws",
    "free_throws_attempted",
    "free_throw_percentage",
    "offensive_rebounds",
    "defensive_rebounds",
    "total_rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "personal_fouls",
    "points",
)


class GameSummary(BaseModel):
    losing_team: str | None = None
    winning_team: str | None = None
    losing_team_score: str | None = None
    winning_team_score: str | None = None
    status: str | None = None
    away_team: str | None = None
    home_team: str | None = None
    away_quarter_score: list[str | None] = Field(default_factory=list)
    home_quarter_score: list[str | None] = Field(default_factory=list)
    score_breakdown: str | None = None
    player_breakdown: str | None = None

    @model_validator(mode="after")
    def ensure_period_alignment(self) -> "GameSummary":
        if len(self.away_quarter_score) != len(self.home_quarter_score):
            msg = (
                "away_quarter_score and home_quarter_score must have the same length "
                f"({len(self.away_quarter_score)} != {len(self.home_quarter_score)})"
            )
            raise ValueError(msg)
        return self


class DayBoxScores(BaseModel):
    game_date: date
    box_scores: list[GameSummary] = Field(default_factory=list)


class BoxScoreLine(BaseModel):
    """The 19 basic box-score columns shared by team and player rows."""

    minutes_played: str | None = None
    field_goals: str | None = None
    field_goals_attempted: str | None = None
    field_goal_percentage: str | None = None
    three_point: str | None = None
    three_point_attempted: str | None = None
    three_point_percentage: str | None = None
    free_throws: str | None = None
    free_throws_attempted: str | None = None
    free_throw_percentage: str | None = None
    offensive_rebounds: str | None = None
    defensive_rebounds: str | None = None
    total_rebounds: str | None = None
    assists: str | None = None
    steals: str | None = None
    blocks: str | None = None
    turnovers: str | None = None
    personal_fouls: str | None = None
    points: str | None = None


class TeamTotals(BoxScoreLine):
    team: str


class PlayerTotals(BoxScoreLine):
    team: str
    name: str | None = None
    plus_minus: str | None = None
    # "Did Not Play", "Not With Team", ... ; stats are null when set
    reason: str | None = None


class PlayerTotalsTeam(BaseModel):
    starters: list[PlayerTotals] = Field(default_factory=list)
    reserves: list[PlayerTotals] = Field(default_factory=list)


class PlayerSeasonStatsOut(BaseModel):
    """Read model for one loaded season-stats row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    height: str | None = None
    weight: str | None = None
    team: str | None = None
    age: str | None = None
    salary: float | None = None
    points: float | None = None
    blocks: float | None = None
    steals: float | None = None
    assists: float | None = None
    rebounds: float | None = None
    ft: float | None = None
    fta: float | None = None
    fg3: float | None = None
    fg3a: float | None = None
    fg: float | None = None
    fga: float | None = None
    mp: float | None = None
    g: float | None = None
    per: float | None = None
    ows: float | None = None
    dws: float | None = None
    ws: float | None = None
    ws48: float | None = None
    usg: float | None = None
    bpm: float | None = None
    vorp: float | None = None


class ErrorDetail(BaseModel):
    error: str
    message: str


class ErrorResponse(BaseModel):
    detail: ErrorDetail
