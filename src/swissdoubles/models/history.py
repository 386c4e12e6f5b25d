"""Partner and matchup history replayed from the match log."""

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
from typing import Any, Dict, FrozenSet, Iterable, Set

from swissdoubles.constants import TEAM_SIZE
from swissdoubles.models.match import Match
from swissdoubles.utils import team_key


@dataclass
class PartnerHistory:
    """
    Tracks which players have already been teammates.

    Attributes
    ----------
    partners : dict of str to set of str
        Mapping of player id to the ids of everyone they have partnered.
        Entries are symmetric and only ever grow.
    """

    partners: Dict[str, Set[str]] = field(default_factory=dict)

    def add_partnership(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been on the same team."""
        self.partners.setdefault(player1_id, set()).add(player2_id)
        self.partners.setdefault(player2_id, set()).add(player1_id)

    def have_partnered(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously been teammates."""
        return player2_id in self.partners.get(player1_id, ())

    def partners_of(self, player_id: str) -> FrozenSet[str]:
        return frozenset(self.partners.get(player_id, ()))

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "PartnerHistory":
        """Replay every non-bye match in the log."""
        history = cls()
        for match in matches:
            if match.is_bye:
                continue
            for team in (match.team1, match.team2):
                if team is not None and len(team) == TEAM_SIZE:
                    history.add_partnership(team[0], team[1])
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize partner history to dictionary."""
        return {pid: sorted(ids) for pid, ids in self.partners.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartnerHistory":
        """Deserialize partner history from dictionary."""
        return cls(partners={str(pid): set(ids) for pid, ids in data.items()})


@dataclass
class MatchHistory:
    """
    Tracks which teams have already faced each other.

    Attributes
    ----------
    opponents : dict of str to set of str
        Mapping of canonical team key to the keys of every team it has
        played. Entries are symmetric and only ever grow.
    """

    opponents: Dict[str, Set[str]] = field(default_factory=dict)

    def add_matchup(self, team1_key: str, team2_key: str) -> None:
        """Record that two teams have played each other."""
        self.opponents.setdefault(team1_key, set()).add(team2_key)
        self.opponents.setdefault(team2_key, set()).add(team1_key)

    def have_met(self, team1_key: str, team2_key: str) -> bool:
        """Check if two teams have previously played each other."""
        return team2_key in self.opponents.get(team1_key, ())

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "MatchHistory":
        """Replay every doubles match in the log."""
        history = cls()
        for match in matches:
            if match.is_doubles:
                history.add_matchup(team_key(match.team1), team_key(match.team2))
        return history

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match history to dictionary."""
        return {key: sorted(keys) for key, keys in self.opponents.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchHistory":
        """Deserialize match history from dictionary."""
        return cls(opponents={str(key): set(keys) for key, keys in data.items()})
