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

# --- Constants ---
LOG_LEVEL_ENV_VAR = "SWISSDOUBLES_LOG_LEVEL"

# Standings points (Challonge style)
WIN_POINTS = 2
TIE_POINTS = 1
LOSS_POINTS = 0

# A bye is scored as a 4-4 tie
BYE_POINTS_FOR = 4
BYE_POINTS_AGAINST = 4

# Table sizes
TEAM_SIZE = 2
MATCH_SIZE = 4  # two teams of two

# Tournament setting defaults
DEFAULT_POINTS_PER_MATCH = 8
DEFAULT_POOL_SIZE = 8

# Bye handling modes
BYE_MODE_BYES_ONLY = "byes_only"
BYE_MODES = (BYE_MODE_BYES_ONLY,)
DEFAULT_BYE_MODE = BYE_MODE_BYES_ONLY

# Canonical team key: sorted player ids joined with this separator
TEAM_KEY_SEPARATOR = "-"

# Bracket round tags
ROUND_QUARTERFINAL = "quarterfinal"
ROUND_SEMIFINAL = "semifinal"
ROUND_FINAL = "final"
ROUND_THIRD_PLACE = "third_place"
ROUND_TAGS = (ROUND_QUARTERFINAL, ROUND_SEMIFINAL, ROUND_FINAL, ROUND_THIRD_PLACE)

# Bracket shapes
BRACKET_NONE = "none"
BRACKET_FINAL = "final"
BRACKET_SEMIFINALS = "semifinals"
BRACKET_QUARTERFINALS = "quarterfinals"
BRACKET_TYPES = (
    BRACKET_NONE,
    BRACKET_FINAL,
    BRACKET_SEMIFINALS,
    BRACKET_QUARTERFINALS,
)

# Players a pool must supply for each bracket shape
BRACKET_REQUIRED_PLAYERS = {
    BRACKET_NONE: 0,
    BRACKET_FINAL: 4,
    BRACKET_SEMIFINALS: 8,
    BRACKET_QUARTERFINALS: 16,
}

# Pool naming
POOL_ID_PREFIX = "pool-"
POOL_NAME_PREFIX = "Pool "

# Final standings descriptions
RESULT_CHAMPION = "Champion"
RESULT_RUNNER_UP = "Runner-up"
RESULT_THIRD_PLACE = "3rd Place"
RESULT_FOURTH_PLACE = "4th Place"
RESULT_SEMIFINALIST = "Semifinalist"
RESULT_QUARTERFINALIST = "Quarterfinalist"
RESULT_IN_PROGRESS = "In Progress"
RESULT_SWISS_RANK = "Swiss Rank"

# Pairing log phases
PHASE_BYE_SELECTION = "bye_selection"
PHASE_TEAM_FORMATION = "team_formation"
PHASE_MATCH_PAIRING = "match_pairing"
LOG_PHASES = (PHASE_BYE_SELECTION, PHASE_TEAM_FORMATION, PHASE_MATCH_PAIRING)
