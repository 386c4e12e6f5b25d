"""Forming two-player teams for a round."""

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
from typing import List, Optional, Sequence, Tuple

from swissdoubles.constants import PHASE_TEAM_FORMATION
from swissdoubles.models.history import PartnerHistory
from swissdoubles.models.pairing_log import RoundLog
from swissdoubles.models.player import Player
from swissdoubles.pairing.greedy import greedy_pair, pair_consecutive
from swissdoubles.tournament.standings import StandingsCalculator
from swissdoubles.type_hints import TeamPair
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)


def assign_partners(
    players: Sequence[Player],
    round_number: int,
    partner_history: PartnerHistory,
    rng: Optional[random.Random] = None,
    log: Optional[RoundLog] = None,
) -> Tuple[List[TeamPair], int]:
    """
    Split the round's players into teams of two.

    Round one shuffles and pairs neighbours. From round two players are
    ranked best first and each takes the nearest lower-ranked player they
    have not partnered yet, falling back to a repeat partner only when no
    one else is left.

    Returns: (teams, forced_repeats)
    """
    if round_number == 1:
        shuffled = list(players)
        (rng or random.Random()).shuffle(shuffled)
        teams = pair_consecutive(shuffled)
        if log is not None:
            log.add_entry(
                PHASE_TEAM_FORMATION,
                "Forming teams randomly (Round 1)",
                [f"{len(teams)} teams from {len(players)} players"],
            )
        return teams, 0

    ranked = StandingsCalculator().rank_players(players)
    rank_of = {p.id: idx + 1 for idx, p in enumerate(ranked)}

    if log is not None:
        log.add_entry(
            PHASE_TEAM_FORMATION,
            "Forming teams based on standings (Swiss)",
            [
                "Pairing adjacent players in standings",
                "Avoiding repeat partners when possible",
            ],
        )

    teams: List[TeamPair] = []
    forced_repeats = 0
    for first, second, forced in greedy_pair(
        ranked,
        key=lambda p: p.id,
        have_history=lambda a, b: partner_history.have_partnered(a.id, b.id),
    ):
        teams.append((first, second))
        if forced:
            forced_repeats += 1
            logger.warning(
                f"Round {round_number}: repeat partners {first.name} + {second.name}"
            )
        if log is not None:
            log.add_entry(
                PHASE_TEAM_FORMATION,
                f"Team formed: {first.name} + {second.name}",
                [
                    f"{first.name}: Rank {rank_of[first.id]}, {first.wins}W",
                    f"{second.name}: Rank {rank_of[second.id]}, {second.wins}W",
                    (
                        "Repeat partner (all others already partnered before)"
                        if forced
                        else "First time as partners"
                    ),
                ],
                forced=forced,
            )

    return teams, forced_repeats
