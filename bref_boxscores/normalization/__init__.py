"""Team name to team code resolution.

Basketball Reference renders teams on the daily scoreboard by their short
location name ("LA Lakers", "Oklahoma City") and addresses box-score pages
and table ids by a 3-letter code ("LAL", "OKC").
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Scoreboard display name -> Basketball Reference code
NBA_TEAM_CODES: Mapping[str, str] = MappingProxyType(
    {
        "Atlanta": "ATL",
        "Boston": "BOS",
        "Brooklyn": "BRK",
        "Charlotte": "CHO",
        "Chicago": "CHI",
        "Cleveland": "CLE",
        "Dallas": "DAL",
        "Denver": "DEN",
        "Detroit": "DET",
        "Golden State": "GSW",
        "Houston": "HOU",
        "Indiana": "IND",
        "LA Clippers": "LAC",
        "LA Lakers": "LAL",
        "Memphis": "MEM",
        "Miami": "MIA",
        "Milwaukee": "MIL",
        "Minnesota": "MIN",
        "New Orleans": "NOP",
        "New York": "NYK",
        "Oklahoma City": "OKC",
        "Orlando": "ORL",
        "Philadelphia": "PHI",
        "Phoenix": "PHO",
        "Portland": "POR",
        "Sacramento": "SAC",
        "San Antonio": "SAS",
        "Toronto": "TOR",
        "Utah": "UTA",
        "Washington": "WAS",
    }
)

_TEAM_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


class UnknownTeamError(LookupError):
    """Raised when a team name or code cannot be resolved."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown team: {value!r}")
        self.value = value


@dataclass(frozen=True)
class TeamCodeLookup:
    """Immutable name <-> code table.

    ``team_code`` resolves scoreboard display names only; path codes go
    through ``normalize_team_code``.
    """

    codes_by_name: Mapping[str, str] = field(default_factory=lambda: NBA_TEAM_CODES)
    _names_by_code: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes_by_name", MappingProxyType(dict(self.codes_by_name)))
        object.__setattr__(
            self,
            "_names_by_code",
            MappingProxyType({code: name for name, code in self.codes_by_name.items()}),
        )

    def __len__(self) -> int:
        return len(self.codes_by_name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self.codes_by_name

    def team_code(self, name: str) -> str:
        code = self.codes_by_name.get(name.strip())
        if code is None:
            raise UnknownTeamError(name)
        return code

    def team_name(self, code: str) -> str:
        name = self._names_by_code.get(code.strip().upper())
        if name is None:
            raise UnknownTeamError(code)
        return name

    def codes(self) -> frozenset[str]:
        return frozenset(self._names_by_code)


DEFAULT_TEAM_LOOKUP = TeamCodeLookup()


def normalize_team_code(code: str) -> str:
    """Upper-case a team code and check its 3-letter shape.

    Historical franchise codes (SEA, NJN, ...) are accepted; only the shape
    is validated here.
    """
    normalized = code.strip().upper()
    if not _TEAM_CODE_PATTERN.match(normalized):
        raise UnknownTeamError(code)
    return normalized


__all__ = [
    "DEFAULT_TEAM_LOOKUP",
    "NBA_TEAM_CODES",
    "TeamCodeLookup",
    "UnknownTeamError",
    "normalize_team_code",
]
