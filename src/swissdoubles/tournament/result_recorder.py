"""Refreshing stored player counters from the match log."""

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

from typing import Iterable, List, Sequence

from swissdoubles.models.match import Match
from swissdoubles.models.player import Player
from swissdoubles.tournament.standings import StandingsCalculator
from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)


def refresh_player_stats(
    players: Sequence[Player], matches: Iterable[Match]
) -> List[Player]:
    """Return copies of all players with counters matching the match log.

    Used by the persistence layer after a score is entered or edited, so
    the stored counters agree with what the standings show. Inactive
    players are refreshed too, since they keep their record.

    Args:
        players: Tournament roster
        matches: Full round-robin match log

    Returns:
        Refreshed players in roster order. The inputs are not modified.
    """
    refreshed = StandingsCalculator().derive_stats(players, matches)

    for old, new in zip(players, refreshed):
        if (old.wins, old.losses, old.ties) != (new.wins, new.losses, new.ties):
            logger.info(
                f"Player {old.name} record corrected from {old.record} to {new.record}"
            )

    return refreshed
