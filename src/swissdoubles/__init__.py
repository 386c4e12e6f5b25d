"""Swiss Doubles: Swiss-system pairing and elimination brackets for doubles play.

Each round players are split into two-player teams and teams are paired into
matches, rotating partners and opponents and sitting players out fairly when
the field is not a multiple of four. After the Swiss rounds the standings are
split into pools that play single-elimination brackets.
"""

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

from swissdoubles.bracket import (
    build_bracket,
    build_pool_configs,
    compute_final_standings,
    create_pools,
    submit_bracket_score,
)
from swissdoubles.models import (
    BracketMatch,
    FinalStanding,
    Match,
    PairingResult,
    Player,
    PoolBracketConfig,
    RoundLog,
    Table,
    TournamentSettings,
)
from swissdoubles.pairing import format_round_logs, generate_round_pairings
from swissdoubles.tournament import (
    PlayerStanding,
    compute_standings,
    refresh_player_stats,
)
from swissdoubles.utils.validation import (
    ValidationResult,
    validate_bracket_score,
    validate_match_score,
)

__version__ = "0.1.0"

__all__ = [
    "build_bracket",
    "build_pool_configs",
    "compute_final_standings",
    "create_pools",
    "submit_bracket_score",
    "BracketMatch",
    "FinalStanding",
    "Match",
    "PairingResult",
    "Player",
    "PoolBracketConfig",
    "RoundLog",
    "Table",
    "TournamentSettings",
    "format_round_logs",
    "generate_round_pairings",
    "PlayerStanding",
    "compute_standings",
    "refresh_player_stats",
    "ValidationResult",
    "validate_bracket_score",
    "validate_match_score",
]
