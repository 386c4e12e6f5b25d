"""Round-robin match and table data classes."""

# Swiss Doubles
# Copyright (C) 2025  Swiss Doubles developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from swissdoubles.constants import TEAM_SIZE


@dataclass
class Table:
    """A physical table matches can be assigned to.

    Attributes:
        id: Table identifier stored on matches
        name: Display name (e.g. "Table 1")
        order: Position used when handing out tables, lowest first
    """

    id: str
    name: str
    order: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize table to dictionary."""
        return {"id": self.id, "name": self.name, "order": self.order}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Table":
        """Deserialize table from dictionary."""
        return cls(
            id=str(data["id"]), name=data.get("name", ""), order=data.get("order", 0)
        )


@dataclass
class Match:
    """A single round-robin match, or a bye.

    Attributes:
        id: Match identifier
        round_number: Round the match belongs to (1-indexed)
        team1: Two player ids, or a single id when this is a bye
        team2: Two player ids, or None for a bye
        score1: Points scored by team1, None until completed
        score2: Points scored by team2, None until completed (and for byes)
        twenties1: Secondary counter for team1
        twenties2: Secondary counter for team2
        table_id: Assigned table, if table assignment is enabled
        completed: Whether the result has been entered
        is_bye: Whether this records a sit-out
    """

    id: str
    round_number: int
    team1: Tuple[str, ...]
    team2: Optional[Tuple[str, ...]] = None
    score1: Optional[int] = None
    score2: Optional[int] = None
    twenties1: int = 0
    twenties2: int = 0
    table_id: Optional[str] = None
    completed: bool = False
    is_bye: bool = False

    @property
    def player_ids(self) -> Tuple[str, ...]:
        """Every player id taking part in the match."""
        return tuple(self.team1) + tuple(self.team2 or ())

    @property
    def is_doubles(self) -> bool:
        """True for a regular two-versus-two match."""
        return (
            not self.is_bye
            and len(self.team1) == TEAM_SIZE
            and self.team2 is not None
            and len(self.team2) == TEAM_SIZE
        )

    def involves(self, player_id: str) -> bool:
        """Check if a player is in either team."""
        return player_id in self.team1 or player_id in (self.team2 or ())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "team1": list(self.team1),
            "team2": list(self.team2) if self.team2 is not None else None,
            "score1": self.score1,
            "score2": self.score2,
            "twenties1": self.twenties1,
            "twenties2": self.twenties2,
            "table_id": self.table_id,
            "completed": self.completed,
            "is_bye": self.is_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        team2 = data.get("team2")
        return cls(
            id=str(data["id"]),
            round_number=data["round_number"],
            team1=tuple(data["team1"]),
            team2=tuple(team2) if team2 is not None else None,
            score1=data.get("score1"),
            score2=data.get("score2"),
            twenties1=data.get("twenties1", 0),
            twenties2=data.get("twenties2", 0),
            table_id=data.get("table_id"),
            completed=data.get("completed", False),
            is_bye=data.get("is_bye", False),
        )
