"""Single-elimination bracket construction for post-Swiss pools.

Each supported shape is a fixed template over the pool's seeded teams:

    final          T0 v T1                                  (match 1)
    semifinals     SF1 = T0 v T3, SF2 = T1 v T2             (1, 2)
                   final = W(SF1) v W(SF2)                  (3)
    quarterfinals  QF1 = T0 v T7, QF2 = T3 v T4 -> SF1     (1, 2)
                   QF3 = T1 v T6, QF4 = T2 v T5 -> SF2     (3, 4)
                   SF1, SF2                                 (5, 6)
                   final                                    (7)

An optional third-place match (numbered after the final) is fed by the
two semifinal losers.
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

from typing import Dict, List, Optional, Sequence

from swissdoubles.constants import (
    BRACKET_FINAL,
    BRACKET_NONE,
    BRACKET_QUARTERFINALS,
    BRACKET_SEMIFINALS,
    ROUND_FINAL,
    ROUND_QUARTERFINAL,
    ROUND_SEMIFINAL,
    ROUND_THIRD_PLACE,
)
from swissdoubles.exceptions import InvalidBracketTypeException
from swissdoubles.models.bracket import BracketMatch, PoolBracketConfig
from swissdoubles.models.player import Player
from swissdoubles.tournament.standings import StandingsCalculator
from swissdoubles.type_hints import MaybeTeam, Team
from swissdoubles.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def snake_seed(player_ids: Sequence[str]) -> List[Team]:
    """Pair the best remaining player with the worst remaining player.

    For ranked players P1..Pn this yields (P1, Pn), (P2, Pn-1), ...
    """
    count = len(player_ids)
    return [(player_ids[i], player_ids[count - 1 - i]) for i in range(count // 2)]


class BracketBuilder:
    """Builds linked bracket matches for each configured pool."""

    def __init__(self, calculator: Optional[StandingsCalculator] = None):
        self.calculator = calculator or StandingsCalculator()

    def seed_pool(
        self, config: PoolBracketConfig, players: Sequence[Player]
    ) -> List[str]:
        """Pool player ids ordered best first.

        Starts from the configured order and stably re-sorts it by the
        standings comparator over each player's counters. Unknown ids are
        dropped with a warning.
        """
        by_id: Dict[str, Player] = {p.id: p for p in players}
        pool_players = []
        for pid in config.player_ids:
            if pid in by_id:
                pool_players.append(by_id[pid])
            else:
                logger.warning(f"{config.pool_name}: unknown player id {pid} skipped")
        return [p.id for p in self.calculator.rank_players(pool_players)]

    def teams_for(
        self, config: PoolBracketConfig, players: Sequence[Player]
    ) -> List[Team]:
        if config.manual_teams:
            return [tuple(team) for team in config.manual_teams]
        return snake_seed(self.seed_pool(config, players))

    def build_pool(
        self, config: PoolBracketConfig, players: Sequence[Player]
    ) -> List[BracketMatch]:
        """Bracket matches for one pool, earliest round first."""
        if config.bracket_type == BRACKET_NONE:
            return []

        teams = self.teams_for(config, players)

        def team(idx: int) -> MaybeTeam:
            if idx < len(teams):
                return teams[idx]
            logger.warning(
                f"{config.pool_name}: no team for seed {idx + 1}, slot left open"
            )
            return None

        def new_match(
            round_tag: str,
            number: int,
            team1: MaybeTeam = None,
            team2: MaybeTeam = None,
        ) -> BracketMatch:
            return BracketMatch(
                id=generate_id(),
                pool_id=config.pool_id,
                round_tag=round_tag,
                match_number=number,
                team1=team1,
                team2=team2,
            )

        if config.bracket_type == BRACKET_FINAL:
            return [new_match(ROUND_FINAL, 1, team(0), team(1))]

        if config.bracket_type == BRACKET_SEMIFINALS:
            semi1 = new_match(ROUND_SEMIFINAL, 1, team(0), team(3))
            semi2 = new_match(ROUND_SEMIFINAL, 2, team(1), team(2))
            final = new_match(ROUND_FINAL, 3)
            matches = [semi1, semi2, final]
        elif config.bracket_type == BRACKET_QUARTERFINALS:
            quarters = [
                new_match(ROUND_QUARTERFINAL, 1, team(0), team(7)),
                new_match(ROUND_QUARTERFINAL, 2, team(3), team(4)),
                new_match(ROUND_QUARTERFINAL, 3, team(1), team(6)),
                new_match(ROUND_QUARTERFINAL, 4, team(2), team(5)),
            ]
            semi1 = new_match(ROUND_SEMIFINAL, 5)
            semi2 = new_match(ROUND_SEMIFINAL, 6)
            final = new_match(ROUND_FINAL, 7)
            _link(quarters[0], quarters[1], semi1)
            _link(quarters[2], quarters[3], semi2)
            matches = quarters + [semi1, semi2, final]
        else:
            raise InvalidBracketTypeException(
                f"Unknown bracket type '{config.bracket_type}' for {config.pool_name}"
            )

        _link(semi1, semi2, final)

        if config.include_third_place:
            third_place = new_match(ROUND_THIRD_PLACE, final.match_number + 1)
            third_place.source_match1_id = semi1.id
            third_place.source_match2_id = semi2.id
            matches.append(third_place)

        return matches

    def build(
        self, pool_configs: Sequence[PoolBracketConfig], players: Sequence[Player]
    ) -> List[BracketMatch]:
        bracket: List[BracketMatch] = []
        for config in pool_configs:
            pool_matches = self.build_pool(config, players)
            if pool_matches:
                logger.info(
                    f"{config.pool_name}: {config.bracket_type} bracket "
                    f"with {len(pool_matches)} matches"
                )
            bracket.extend(pool_matches)
        return bracket


def _link(source1: BracketMatch, source2: BracketMatch, target: BracketMatch) -> None:
    source1.next_match_id = target.id
    source2.next_match_id = target.id
    target.source_match1_id = source1.id
    target.source_match2_id = source2.id


def build_bracket(
    pool_configs: Sequence[PoolBracketConfig], players: Sequence[Player]
) -> List[BracketMatch]:
    """Build the bracket matches for every pool.

    Args:
        pool_configs: One configuration per pool; none pools add nothing
        players: Roster with counters used to order each pool's players

    Returns:
        All pools' matches, per pool ordered quarterfinals, semifinals,
        final, third place.
    """
    return BracketBuilder().build(pool_configs, players)
