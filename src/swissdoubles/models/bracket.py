"""Data models for post-Swiss elimination brackets."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swissdoubles.constants import BRACKET_NONE, BRACKET_TYPES, ROUND_TAGS
from swissdoubles.exceptions import (
    InvalidBracketTypeException,
    InvalidRoundTagException,
)
from swissdoubles.type_hints import Team


def _team_or_none(value: Optional[List[str]]) -> Optional[Team]:
    return tuple(value) if value is not None else None


@dataclass
class PoolBracketConfig:
    """How one pool of the final standings is turned into a bracket.

    Attributes
    ----------
    pool_id : str
        Pool identifier, e.g. ``pool-0``.
    pool_name : str
        Display name, e.g. ``Pool A``.
    bracket_type : str
        One of ``none``, ``final``, ``semifinals``, ``quarterfinals``.
    player_ids : list of str
        Pool players ordered by Swiss standing, best first.
    include_third_place : bool
        Add a third-place match fed by the semifinal losers.
    manual_teams : list of tuple of str or None
        Explicit bracket teams in seed order. Replaces snake seeding.
    """

    pool_id: str
    pool_name: str
    bracket_type: str = BRACKET_NONE
    player_ids: List[str] = field(default_factory=list)
    include_third_place: bool = False
    manual_teams: Optional[List[Team]] = None

    def __post_init__(self) -> None:
        if self.bracket_type not in BRACKET_TYPES:
            raise InvalidBracketTypeException(
                f"Unknown bracket type '{self.bracket_type}' for {self.pool_name}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pool configuration to dictionary."""
        return {
            "pool_id": self.pool_id,
            "pool_name": self.pool_name,
            "bracket_type": self.bracket_type,
            "player_ids": list(self.player_ids),
            "include_third_place": self.include_third_place,
            "manual_teams": (
                [list(team) for team in self.manual_teams]
                if self.manual_teams
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PoolBracketConfig":
        """Deserialize pool configuration from dictionary."""
        manual = data.get("manual_teams")
        return cls(
            pool_id=data["pool_id"],
            pool_name=data.get("pool_name", data["pool_id"]),
            bracket_type=data.get("bracket_type", BRACKET_NONE),
            player_ids=list(data.get("player_ids", [])),
            include_third_place=data.get("include_third_place", False),
            manual_teams=[tuple(team) for team in manual] if manual else None,
        )


@dataclass
class BracketMatch:
    """A node in a single-elimination bracket.

    Forward (``next_match_id``) and backward (``source_match1_id`` /
    ``source_match2_id``) links make the bracket a binary tree, plus one
    optional third-place node whose sources are the two semifinals.

    Attributes:
        id: Match identifier
        pool_id: Pool the bracket belongs to
        round_tag: quarterfinal, semifinal, final or third_place
        match_number: Slot number within the pool's bracket
        team1: Team in slot 1, or None while still to be decided
        team2: Team in slot 2, or None while still to be decided
        score1: Points for team1
        score2: Points for team2
        twenties1: Secondary counter for team1
        twenties2: Secondary counter for team2
        completed: Whether a result has been submitted
        winner_id: Canonical team key of the winner
        next_match_id: Match the winner advances into
        source_match1_id: Match feeding team1
        source_match2_id: Match feeding team2
    """

    id: str
    pool_id: str
    round_tag: str
    match_number: int
    team1: Optional[Team] = None
    team2: Optional[Team] = None
    score1: Optional[int] = None
    score2: Optional[int] = None
    twenties1: int = 0
    twenties2: int = 0
    completed: bool = False
    winner_id: Optional[str] = None
    next_match_id: Optional[str] = None
    source_match1_id: Optional[str] = None
    source_match2_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.round_tag not in ROUND_TAGS:
            raise InvalidRoundTagException(f"Unknown round tag '{self.round_tag}'")

    def is_fed_by(self, match_id: str) -> bool:
        """Check if either slot is sourced from the given match."""
        return match_id in (self.source_match1_id, self.source_match2_id)

    def involves(self, player_id: str) -> bool:
        return player_id in (self.team1 or ()) or player_id in (self.team2 or ())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket match to dictionary."""
        return {
            "id": self.id,
            "pool_id": self.pool_id,
            "round_tag": self.round_tag,
            "match_number": self.match_number,
            "team1": list(self.team1) if self.team1 else None,
            "team2": list(self.team2) if self.team2 else None,
            "score1": self.score1,
            "score2": self.score2,
            "twenties1": self.twenties1,
            "twenties2": self.twenties2,
            "completed": self.completed,
            "winner_id": self.winner_id,
            "next_match_id": self.next_match_id,
            "source_match1_id": self.source_match1_id,
            "source_match2_id": self.source_match2_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketMatch":
        """Deserialize bracket match from dictionary."""
        return cls(
            id=data["id"],
            pool_id=data["pool_id"],
            round_tag=data["round_tag"],
            match_number=data["match_number"],
            team1=_team_or_none(data.get("team1")),
            team2=_team_or_none(data.get("team2")),
            score1=data.get("score1"),
            score2=data.get("score2"),
            twenties1=data.get("twenties1", 0),
            twenties2=data.get("twenties2", 0),
            completed=data.get("completed", False),
            winner_id=data.get("winner_id"),
            next_match_id=data.get("next_match_id"),
            source_match1_id=data.get("source_match1_id"),
            source_match2_id=data.get("source_match2_id"),
        )


@dataclass
class FinalStanding:
    """A player's overall finishing position after the bracket phase."""

    player_id: str
    player_name: str
    final_position: int
    pool_name: str
    bracket_result: str
    swiss_rank: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize final standing to dictionary."""
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "final_position": self.final_position,
            "pool_name": self.pool_name,
            "bracket_result": self.bracket_result,
            "swiss_rank": self.swiss_rank,
        }
