"""Standings derived from the match log.

Player counters are never trusted for ranking. Every call replays the
completed matches so ranking cannot drift from the recorded results.
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

import dataclasses
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from swissdoubles.constants import BYE_POINTS_AGAINST, BYE_POINTS_FOR
from swissdoubles.models.match import Match
from swissdoubles.models.player import Player
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PlayerStanding:
    """A ranked entry in the standings table.

    Attributes:
        player: Copy of the player with counters derived from the match log
        rank: 1-based position
        score: Two per win, one per tie
    """

    player: Player
    rank: int
    score: int


class _Tally:
    __slots__ = (
        "wins",
        "losses",
        "ties",
        "points_for",
        "points_against",
        "twenties",
        "bye_count",
    )

    def __init__(self) -> None:
        self.wins = 0
        self.losses = 0
        self.ties = 0
        self.points_for = 0
        self.points_against = 0
        self.twenties = 0
        self.bye_count = 0

    def add_result(self, scored: int, conceded: int, twenties: int) -> None:
        self.points_for += scored
        self.points_against += conceded
        self.twenties += twenties
        if scored > conceded:
            self.wins += 1
        elif scored < conceded:
            self.losses += 1
        else:
            self.ties += 1

    def add_bye(self, match: Match) -> None:
        self.ties += 1
        self.points_for += (
            match.score1 if match.score1 is not None else BYE_POINTS_FOR
        )
        self.points_against += (
            match.score2 if match.score2 is not None else BYE_POINTS_AGAINST
        )
        self.twenties += match.twenties1 or 0
        self.bye_count += 1


class StandingsCalculator:
    """Ranks players by replaying the match log.

    Comparator, in order:
    - score, descending
    - points for, descending
    - points against, ascending
    - twenties, descending

    Players equal on all four keys keep their roster order.
    """

    def derive_stats(
        self, players: Sequence[Player], matches: Iterable[Match]
    ) -> List[Player]:
        """Return copies of every player with counters rebuilt from matches.

        Only completed matches count. A bye is a tie worth its stored score
        (4-4 when none is stored). Inactive players are included.

        Args:
            players: Tournament roster
            matches: Full round-robin match log

        Returns:
            New Player objects in roster order
        """
        tallies: Dict[str, _Tally] = {p.id: _Tally() for p in players}

        for match in matches:
            if not match.completed:
                continue

            if match.is_bye:
                for pid in match.team1:
                    if pid in tallies:
                        tallies[pid].add_bye(match)
                continue

            if match.score1 is None or match.score2 is None:
                continue

            for pid in match.team1:
                if pid in tallies:
                    tallies[pid].add_result(
                        match.score1, match.score2, match.twenties1 or 0
                    )
            for pid in match.team2 or ():
                if pid in tallies:
                    tallies[pid].add_result(
                        match.score2, match.score1, match.twenties2 or 0
                    )

        return [
            dataclasses.replace(
                player,
                wins=tally.wins,
                losses=tally.losses,
                ties=tally.ties,
                points_for=tally.points_for,
                points_against=tally.points_against,
                twenties=tally.twenties,
                bye_count=tally.bye_count,
            )
            for player, tally in ((p, tallies[p.id]) for p in players)
        ]

    @staticmethod
    def sort_key(player: Player) -> Tuple[int, int, int, int]:
        return (
            -player.score,
            -player.points_for,
            player.points_against,
            -player.twenties,
        )

    def rank_players(self, players: Iterable[Player]) -> List[Player]:
        """Sort players best first using their current counters."""
        return sorted(players, key=self.sort_key)

    def calculate_standings(
        self, players: Sequence[Player], matches: Iterable[Match]
    ) -> List[PlayerStanding]:
        """Rank active players from the match log."""
        derived = self.derive_stats(players, matches)
        ranked = self.rank_players(p for p in derived if p.active)
        logger.debug(f"Standings computed for {len(ranked)} active players")
        return [
            PlayerStanding(player=player, rank=idx + 1, score=player.score)
            for idx, player in enumerate(ranked)
        ]


def compute_standings(
    players: Sequence[Player], matches: Iterable[Match]
) -> List[PlayerStanding]:
    """Ranked standings for all active players.

    Example:
        >>> standings = compute_standings(players, matches)
        >>> standings[0].rank
        1
    """
    return StandingsCalculator().calculate_standings(players, matches)
