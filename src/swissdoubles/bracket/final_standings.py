"""Overall finishing positions once the bracket phase is played."""

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

from typing import Dict, List, Optional, Sequence, Set, Tuple

from swissdoubles.bracket.pools import create_pools
from swissdoubles.constants import (
    BRACKET_NONE,
    DEFAULT_POOL_SIZE,
    RESULT_CHAMPION,
    RESULT_FOURTH_PLACE,
    RESULT_IN_PROGRESS,
    RESULT_QUARTERFINALIST,
    RESULT_RUNNER_UP,
    RESULT_SEMIFINALIST,
    RESULT_SWISS_RANK,
    RESULT_THIRD_PLACE,
    ROUND_FINAL,
    ROUND_QUARTERFINAL,
    ROUND_SEMIFINAL,
    ROUND_THIRD_PLACE,
)
from swissdoubles.models.bracket import BracketMatch, FinalStanding, PoolBracketConfig
from swissdoubles.tournament.standings import PlayerStanding
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)

# Rank given to pool players the bracket says nothing about
UNPLACED_RANK = 100
# Swiss rank for bracket players missing from the standings
UNKNOWN_SWISS_RANK = 999


def _is_scored(match: Optional[BracketMatch]) -> bool:
    return (
        match is not None
        and match.completed
        and match.score1 is not None
        and match.score2 is not None
    )


class _PoolPlacement:
    """Bracket placement of each player in one pool."""

    def __init__(self) -> None:
        self.placed: Dict[str, Tuple[int, str]] = {}
        self.handled: Set[str] = set()

    def place_decider(
        self, match: BracketMatch, top_rank: int, labels: Tuple[str, str]
    ) -> None:
        """Winner gets top_rank, loser top_rank + 1. Overrides earlier places."""
        team1, team2 = match.team1 or (), match.team2 or ()
        if match.score1 > match.score2:
            winner, loser = team1, team2
        else:
            winner, loser = team2, team1
        for pid in winner:
            self.placed[pid] = (top_rank, labels[0])
        for pid in loser:
            self.placed[pid] = (top_rank + 1, labels[1])
        self.handled.update(team1)
        self.handled.update(team2)

    def place_losers(self, matches: List[BracketMatch], rank: int, label: str) -> None:
        """Losers not already placed get the given rank."""
        for match in matches:
            if not _is_scored(match):
                continue
            loser = match.team1 if match.score1 < match.score2 else match.team2
            for pid in loser or ():
                if pid not in self.handled:
                    self.placed[pid] = (rank, label)
                    self.handled.add(pid)


def _pool_results(
    chunk: Sequence[PlayerStanding],
    pool_matches: List[BracketMatch],
    swiss_rank: Dict[str, int],
) -> List[Tuple[str, int, str, int]]:
    """(player id, bracket rank, description, swiss rank) sorted for output."""
    by_round: Dict[str, List[BracketMatch]] = {}
    for match in pool_matches:
        by_round.setdefault(match.round_tag, []).append(match)

    placement = _PoolPlacement()

    final = next(iter(by_round.get(ROUND_FINAL, [])), None)
    if _is_scored(final):
        placement.place_decider(final, 1, (RESULT_CHAMPION, RESULT_RUNNER_UP))

    third_place = next(iter(by_round.get(ROUND_THIRD_PLACE, [])), None)
    if _is_scored(third_place):
        placement.place_decider(
            third_place, 3, (RESULT_THIRD_PLACE, RESULT_FOURTH_PLACE)
        )

    placement.place_losers(by_round.get(ROUND_SEMIFINAL, []), 3, RESULT_SEMIFINALIST)
    placement.place_losers(
        by_round.get(ROUND_QUARTERFINAL, []), 5, RESULT_QUARTERFINALIST
    )

    results = [
        (pid, rank, label, swiss_rank.get(pid, UNKNOWN_SWISS_RANK))
        for pid, (rank, label) in placement.placed.items()
    ]

    for standing in chunk:
        pid = standing.player.id
        if pid in placement.handled:
            continue
        rank, label = UNPLACED_RANK, RESULT_SWISS_RANK
        pending = next(
            (m for m in pool_matches if not m.completed and m.involves(pid)), None
        )
        if pending is not None:
            rank = 3 if pending.round_tag == ROUND_THIRD_PLACE else 1
            label = RESULT_IN_PROGRESS
        results.append((pid, rank, label, standing.rank))

    results.sort(key=lambda r: (r[1], r[3]))
    return results


def compute_final_standings(
    standings: Sequence[PlayerStanding],
    pool_configs: Sequence[PoolBracketConfig],
    bracket_matches: Sequence[BracketMatch],
    pool_size: int = DEFAULT_POOL_SIZE,
) -> List[FinalStanding]:
    """Final tournament positions.

    Standings are chunked into pools the same way brackets were configured.
    A pool without a bracket (no config, shape none or no matches)
    keeps its Swiss order. Otherwise players are ordered by bracket result:

    - final winner 1, loser 2
    - third-place winner 3, loser 4
    - other semifinal losers 3, quarterfinal losers 5
    - players still in an unfinished match 1 (3 in the third-place match)
    - everyone else in the pool after them

    Ties are broken by Swiss rank, and positions continue from the pool's
    first Swiss rank.
    """
    configs = {c.pool_id: c for c in pool_configs}
    names = {s.player.id: s.player.name for s in standings}
    swiss_rank = {s.player.id: s.rank for s in standings}

    final_standings: List[FinalStanding] = []
    for pool in create_pools(standings, pool_size):
        config = configs.get(pool.pool_id)
        pool_matches = [m for m in bracket_matches if m.pool_id == pool.pool_id]
        start = pool.start_rank

        if config is None or config.bracket_type == BRACKET_NONE or not pool_matches:
            for idx, s in enumerate(pool.standings):
                final_standings.append(
                    FinalStanding(
                        player_id=s.player.id,
                        player_name=s.player.name,
                        final_position=start + idx,
                        pool_name=pool.pool_name,
                        bracket_result=f"{RESULT_SWISS_RANK} {s.rank}",
                        swiss_rank=s.rank,
                    )
                )
            continue

        for idx, (pid, _rank, label, rank_in_swiss) in enumerate(
            _pool_results(pool.standings, pool_matches, swiss_rank)
        ):
            final_standings.append(
                FinalStanding(
                    player_id=pid,
                    player_name=names.get(pid, "Unknown"),
                    final_position=start + idx,
                    pool_name=pool.pool_name,
                    bracket_result=label,
                    swiss_rank=rank_in_swiss,
                )
            )

    logger.debug(f"Final standings computed for {len(final_standings)} players")
    return final_standings
