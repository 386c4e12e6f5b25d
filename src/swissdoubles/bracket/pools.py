"""Splitting final Swiss standings into pools and configuring their brackets."""

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
from typing import Dict, List, Optional, Sequence

from swissdoubles.constants import (
    BRACKET_FINAL,
    BRACKET_NONE,
    BRACKET_QUARTERFINALS,
    BRACKET_REQUIRED_PLAYERS,
    BRACKET_SEMIFINALS,
    DEFAULT_POOL_SIZE,
    POOL_ID_PREFIX,
    POOL_NAME_PREFIX,
)
from swissdoubles.exceptions import (
    InvalidBracketTypeException,
    InvalidConfigurationException,
)
from swissdoubles.models.bracket import PoolBracketConfig
from swissdoubles.tournament.standings import PlayerStanding
from swissdoubles.type_hints import Team
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Pool:
    """A contiguous slice of the final Swiss standings."""

    pool_id: str
    pool_name: str
    standings: List[PlayerStanding] = field(default_factory=list)

    @property
    def player_ids(self) -> List[str]:
        return [s.player.id for s in self.standings]

    @property
    def start_rank(self) -> int:
        return self.standings[0].rank if self.standings else 0


@dataclass
class PoolSelection:
    """Organiser choices for one pool. Unset fields fall back to defaults.

    Attributes:
        bracket_type: Requested shape, or None for the pool's default
        include_third_place: Add a third-place match
        selected_player_ids: Hand-picked players; used only when the count
            matches what the shape needs
        manual_teams: Explicit bracket teams in seed order
    """

    bracket_type: Optional[str] = None
    include_third_place: bool = False
    selected_player_ids: Optional[List[str]] = None
    manual_teams: Optional[List[Team]] = None


def pool_id_for(index: int) -> str:
    return f"{POOL_ID_PREFIX}{index}"


def pool_name_for(index: int) -> str:
    """Pool A, Pool B, ..."""
    return f"{POOL_NAME_PREFIX}{chr(ord('A') + index)}"


def create_pools(
    standings: Sequence[PlayerStanding], pool_size: int = DEFAULT_POOL_SIZE
) -> List[Pool]:
    """Chunk ranked standings into pools of pool_size.

    The last pool holds whatever is left over and may be smaller.
    """
    if pool_size <= 0:
        raise InvalidConfigurationException(
            f"pool_size must be positive, got {pool_size}"
        )
    return [
        Pool(
            pool_id=pool_id_for(index),
            pool_name=pool_name_for(index),
            standings=list(standings[start : start + pool_size]),
        )
        for index, start in enumerate(range(0, len(standings), pool_size))
    ]


def required_player_count(bracket_type: str) -> int:
    """Players a pool must supply for the given bracket shape."""
    try:
        return BRACKET_REQUIRED_PLAYERS[bracket_type]
    except KeyError:
        raise InvalidBracketTypeException(
            f"Unknown bracket type '{bracket_type}'"
        ) from None


def default_bracket_type(player_count: int) -> str:
    """Largest bracket shape a pool of this size can fill."""
    for bracket_type in (BRACKET_QUARTERFINALS, BRACKET_SEMIFINALS, BRACKET_FINAL):
        if player_count >= BRACKET_REQUIRED_PLAYERS[bracket_type]:
            return bracket_type
    return BRACKET_NONE


def build_pool_configs(
    pools: Sequence[Pool],
    selections: Optional[Dict[str, PoolSelection]] = None,
) -> List[PoolBracketConfig]:
    """Turn pools into bracket configurations.

    Each pool uses its selection (keyed by pool id) when given, else the
    default shape. Players are the hand-picked ids when their count fits
    the shape, otherwise the top of the pool.
    """
    selections = selections or {}
    configs = []
    for pool in pools:
        selection = selections.get(pool.pool_id, PoolSelection())
        bracket_type = selection.bracket_type or default_bracket_type(
            len(pool.standings)
        )
        required = required_player_count(bracket_type)

        picked = selection.selected_player_ids
        if picked is not None and len(picked) == required:
            player_ids = list(picked)
        else:
            if picked is not None:
                logger.warning(
                    f"{pool.pool_name}: {len(picked)} players selected but "
                    f"{bracket_type} needs {required}, using top of pool"
                )
            player_ids = pool.player_ids[:required]

        if len(player_ids) < required:
            logger.warning(
                f"{pool.pool_name}: only {len(player_ids)} of {required} "
                f"players for {bracket_type}"
            )

        configs.append(
            PoolBracketConfig(
                pool_id=pool.pool_id,
                pool_name=pool.pool_name,
                bracket_type=bracket_type,
                player_ids=player_ids,
                include_third_place=selection.include_third_place,
                manual_teams=selection.manual_teams,
            )
        )
    return configs
