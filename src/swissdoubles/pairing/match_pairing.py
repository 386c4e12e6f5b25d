"""Pairing teams into matches and handing out tables."""

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

from swissdoubles.constants import PHASE_MATCH_PAIRING
from swissdoubles.models.history import MatchHistory
from swissdoubles.models.match import Table
from swissdoubles.models.pairing_log import RoundLog
from swissdoubles.pairing.greedy import greedy_pair, pair_consecutive
from swissdoubles.type_hints import Matchup, TeamPair
from swissdoubles.utils import setup_logger, team_key

logger = setup_logger(__name__)


def _team_key(team: TeamPair) -> str:
    return team_key((team[0].id, team[1].id))


def _team_name(team: TeamPair) -> str:
    return f"{team[0].name} + {team[1].name}"


def combined_standing(team: TeamPair) -> Tuple[int, int]:
    """(sum of member wins, sum of member point differentials)."""
    return (
        team[0].wins + team[1].wins,
        team[0].point_differential + team[1].point_differential,
    )


def pair_teams(
    teams: Sequence[TeamPair],
    round_number: int,
    match_history: MatchHistory,
    rng: Optional[random.Random] = None,
    log: Optional[RoundLog] = None,
) -> Tuple[List[Matchup], int]:
    """
    Pair teams into matches.

    Round one shuffles the teams and pairs neighbours. From round two teams
    are sorted by combined standing, best first, and each takes the nearest
    lower team it has not played, repeating a matchup only when forced.

    Returns: (matchups, forced_repeats)
    """
    if round_number == 1:
        shuffled = list(teams)
        (rng or random.Random()).shuffle(shuffled)
        matchups = pair_consecutive(shuffled)
        if log is not None:
            log.add_entry(
                PHASE_MATCH_PAIRING,
                "Pairing teams randomly (Round 1)",
                [f"{len(matchups)} matches from {len(teams)} teams"],
            )
        return matchups, 0

    ranked = sorted(
        teams, key=lambda t: tuple(-v for v in combined_standing(t))
    )

    if log is not None:
        log.add_entry(
            PHASE_MATCH_PAIRING,
            "Pairing teams by combined standings (Swiss)",
            [
                "Teams sorted by combined wins, then combined point differential",
                "Avoiding repeat matchups when possible",
            ],
        )

    matchups: List[Matchup] = []
    forced_repeats = 0
    for team1, team2, forced in greedy_pair(
        ranked,
        key=_team_key,
        have_history=lambda a, b: match_history.have_met(_team_key(a), _team_key(b)),
    ):
        matchups.append((team1, team2))
        if forced:
            forced_repeats += 1
            logger.warning(
                f"Round {round_number}: repeat matchup "
                f"{_team_name(team1)} vs {_team_name(team2)}"
            )
        if log is not None:
            wins1, diff1 = combined_standing(team1)
            wins2, diff2 = combined_standing(team2)
            log.add_entry(
                PHASE_MATCH_PAIRING,
                f"Match: {_team_name(team1)} vs {_team_name(team2)}",
                [
                    f"Team 1: {wins1} combined wins, {diff1:+d} diff",
                    f"Team 2: {wins2} combined wins, {diff2:+d} diff",
                    (
                        "Repeat matchup (no other valid opponents)"
                        if forced
                        else "First time playing each other"
                    ),
                ],
                forced=forced,
            )

    return matchups, forced_repeats


def assign_tables(match_count: int, tables: Sequence[Table]) -> List[Optional[Table]]:
    """Zip tables, lowest order first, with match positions.

    Matches beyond the number of tables get None.
    """
    ordered = sorted(tables, key=lambda t: t.order)
    return [ordered[i] if i < len(ordered) else None for i in range(match_count)]
