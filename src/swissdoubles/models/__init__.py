"""Data models for Swiss Doubles."""

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

from swissdoubles.models.bracket import BracketMatch, FinalStanding, PoolBracketConfig
from swissdoubles.models.history import MatchHistory, PartnerHistory
from swissdoubles.models.match import Match, Table
from swissdoubles.models.pairing_log import (
    MatchPairingLog,
    PairingLogEntry,
    PlayerSnapshot,
    RoundLog,
)
from swissdoubles.models.pairing_result import PairingResult
from swissdoubles.models.player import Player
from swissdoubles.models.tournament_settings import TournamentSettings

__all__ = [
    "BracketMatch",
    "FinalStanding",
    "PoolBracketConfig",
    "MatchHistory",
    "PartnerHistory",
    "Match",
    "Table",
    "MatchPairingLog",
    "PairingLogEntry",
    "PlayerSnapshot",
    "RoundLog",
    "PairingResult",
    "Player",
    "TournamentSettings",
]
