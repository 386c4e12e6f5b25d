"""A doubles player in a Swiss tournament."""

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
from typing import Any, Dict

from swissdoubles.constants import TIE_POINTS, WIN_POINTS


@dataclass
class Player:
    """
    A registered player and their cumulative round-robin record.

    Players rotate partners every round, so all results are tracked per
    player rather than per team. The counters are owned by the result
    recording collaborator; the pairing engine only reads them and always
    re-derives standings from the match log.

    Attributes
    ----------
    id : str
        Unique identifier for the player.
    name : str
        Display name.
    wins, losses, ties : int
        Match outcomes so far. A bye counts as a tie.
    points_for, points_against : int
        Points scored by and against the player's teams.
    twenties : int
        Secondary tiebreak counter, used only as the last standings key.
    bye_count : int
        Number of rounds the player has sat out.
    active : bool
        Inactive players keep their record but are not paired.
    """

    id: str
    name: str
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: int = 0
    points_against: int = 0
    twenties: int = 0
    bye_count: int = 0
    active: bool = True

    @property
    def score(self) -> int:
        """Standings score: two per win, one per tie."""
        return self.wins * WIN_POINTS + self.ties * TIE_POINTS

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    @property
    def record(self) -> str:
        """Short W-L-T string for logs."""
        return f"{self.wins}W-{self.losses}L-{self.ties}T"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "twenties": self.twenties,
            "bye_count": self.bye_count,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            ties=data.get("ties", 0),
            points_for=data.get("points_for", 0),
            points_against=data.get("points_against", 0),
            twenties=data.get("twenties", 0),
            bye_count=data.get("bye_count", 0),
            active=data.get("active", True),
        )
