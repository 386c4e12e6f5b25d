"""PairingResult data class."""

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
from typing import List, Optional

from swissdoubles.models.match import Match
from swissdoubles.models.pairing_log import RoundLog


@dataclass
class PairingResult:
    """Result of pairing a single round.

    Attributes:
        matches: New matches for the round, regular matches first then byes
        bye_player: Id of the first player sitting out, or None
        log: Decision trace for the round
        forced_repeats: How many partnerships or matchups had to repeat
        bye_players: Ids of every player sitting out, in selection order
    """

    matches: List[Match]
    bye_player: Optional[str]
    log: RoundLog
    forced_repeats: int = 0
    bye_players: List[str] = field(default_factory=list)

    @property
    def regular_matches(self) -> List[Match]:
        return [match for match in self.matches if not match.is_bye]

    @property
    def bye_matches(self) -> List[Match]:
        return [match for match in self.matches if match.is_bye]


#  LocalWords:  PairingResult
