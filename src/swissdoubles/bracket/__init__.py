"""Elimination brackets for the finals phase."""

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

from swissdoubles.bracket.builder import BracketBuilder, build_bracket, snake_seed
from swissdoubles.bracket.final_standings import compute_final_standings
from swissdoubles.bracket.pools import (
    Pool,
    PoolSelection,
    build_pool_configs,
    create_pools,
    default_bracket_type,
    required_player_count,
)
from swissdoubles.bracket.propagation import submit_bracket_score

__all__ = [
    "BracketBuilder",
    "build_bracket",
    "snake_seed",
    "compute_final_standings",
    "Pool",
    "PoolSelection",
    "build_pool_configs",
    "create_pools",
    "default_bracket_type",
    "required_player_count",
    "submit_bracket_score",
]
