"""Sit-out selection when the active player count is not divisible by four."""

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

import random
from typing import Dict, List, Optional, Sequence, Tuple

from swissdoubles.constants import MATCH_SIZE, PHASE_BYE_SELECTION
from swissdoubles.models.pairing_log import RoundLog
from swissdoubles.models.player import Player
from swissdoubles.tournament.standings import StandingsCalculator
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)


def byes_needed(player_count: int) -> int:
    """Number of sit-outs for a round with this many active players."""
    if player_count < MATCH_SIZE:
        return player_count
    return player_count % MATCH_SIZE


class ByeSelector:
    """Chooses which players sit out a round.

    Round one picks uniformly at random. Later rounds give the bye to the
    lowest ranked player among those with the fewest byes, so nobody sits
    out twice before everyone has sat out once.

    Players passed in must already carry counters derived from the match
    log (see StandingsCalculator.derive_stats).
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        calculator: Optional[StandingsCalculator] = None,
    ):
        self.rng = rng or random.Random()
        self.calculator = calculator or StandingsCalculator()
        # Final pairings reasoning for each selected player
        self.reasons: Dict[str, str] = {}

    def select(
        self,
        players: Sequence[Player],
        round_number: int,
        log: Optional[RoundLog] = None,
    ) -> Player:
        """Pick one player to sit out from the given pool."""
        if round_number == 1:
            selected = players[self.rng.randrange(len(players))]
            self.reasons[selected.id] = "Random selection (Round 1)"
            if log is not None:
                log.add_entry(
                    PHASE_BYE_SELECTION,
                    f"Selected {selected.name} for bye (Random - Round 1)",
                    [f"Randomly selected from {len(players)} players"],
                )
            return selected

        ranked = self.calculator.rank_players(players)
        min_byes = min(p.bye_count for p in ranked)
        eligible = sum(1 for p in ranked if p.bye_count == min_byes)

        if log is not None:
            log.add_entry(
                PHASE_BYE_SELECTION,
                "Evaluating bye candidates",
                [
                    f"Minimum bye count: {min_byes}",
                    f"Players eligible (have {min_byes} byes): {eligible}",
                    "Searching from bottom of standings upward",
                ],
            )

        # Lowest ranked player with the minimum bye count
        idx = max(i for i, p in enumerate(ranked) if p.bye_count == min_byes)
        candidate = ranked[idx]
        self.reasons[candidate.id] = (
            f"Rank {idx + 1}/{len(ranked)}, {candidate.bye_count} previous byes "
            "- lowest ranked eligible"
        )
        if log is not None:
            log.add_entry(
                PHASE_BYE_SELECTION,
                f"Selected {candidate.name} for bye",
                [
                    f"Rank: {idx + 1} of {len(ranked)}",
                    f"Record: {candidate.record}",
                    f"Point diff: {candidate.point_differential:+d}",
                    f"Previous byes: {candidate.bye_count}",
                    f"Lowest ranked player with minimum bye count ({min_byes})",
                ],
            )
        return candidate

    def assign_byes(
        self,
        players: Sequence[Player],
        round_number: int,
        log: Optional[RoundLog] = None,
    ) -> Tuple[List[Player], List[Player]]:
        """Remove sit-outs until the remaining count is divisible by four.

        If fewer than four players would remain, they all sit out too.

        Returns:
            (bye_players, remaining_players), both in a stable order
        """
        self.reasons = {}
        remaining = list(players)
        byes: List[Player] = []

        while len(remaining) % MATCH_SIZE != 0 and remaining:
            chosen = self.select(remaining, round_number, log)
            byes.append(chosen)
            remaining = [p for p in remaining if p.id != chosen.id]

        if remaining and len(remaining) < MATCH_SIZE:
            logger.warning(
                f"Round {round_number}: only {len(remaining)} players left, "
                "giving everyone a bye"
            )
            byes.extend(remaining)
            remaining = []

        logger.debug(
            f"Round {round_number}: byes for {[p.id for p in byes]}, "
            f"{len(remaining)} players to pair"
        )
        return byes, remaining
