"""Applying bracket results and advancing teams through the tree."""

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
from typing import List, Optional, Sequence

from swissdoubles.constants import ROUND_THIRD_PLACE
from swissdoubles.models.bracket import BracketMatch
from swissdoubles.type_hints import MaybeTeam
from swissdoubles.utils import setup_logger, team_key

logger = setup_logger(__name__)


def _find_index(matches: Sequence[BracketMatch], match_id: str) -> Optional[int]:
    return next((i for i, m in enumerate(matches) if m.id == match_id), None)


def _place_team(target: BracketMatch, source_id: str, team: MaybeTeam) -> BracketMatch:
    """Copy of target with team written into the slot fed by source_id."""
    if target.source_match1_id == source_id:
        return dataclasses.replace(target, team1=team)
    if target.source_match2_id == source_id:
        return dataclasses.replace(target, team2=team)
    logger.warning(
        f"Bracket match {target.id} is not fed by {source_id}, slot left unchanged"
    )
    return target


def submit_bracket_score(
    bracket_matches: Sequence[BracketMatch],
    match_id: str,
    score1: int,
    score2: int,
    twenties1: int = 0,
    twenties2: int = 0,
) -> List[BracketMatch]:
    """Record a bracket result and propagate it.

    The match is marked completed with both scores. The higher-scoring team
    is the winner; its canonical team key is stored and the team is written
    into the slot of the next match that is sourced from this match. When a
    third-place match is sourced from this match, the losing team is written
    into its corresponding slot.

    Submitting again for the same match overwrites the downstream slots.
    Results already entered further down the tree are left as they are.

    Tied scores mark the match completed without a winner and propagate
    nothing; callers are expected to reject ties before submitting.

    Args:
        bracket_matches: Current bracket, not modified
        match_id: Match being scored
        score1: Points for team1
        score2: Points for team2
        twenties1: Secondary counter for team1
        twenties2: Secondary counter for team2

    Returns:
        A new list with updated copies of the changed matches. If the match
        id is unknown the returned list holds the same matches unchanged.
    """
    updated = list(bracket_matches)
    index = _find_index(updated, match_id)
    if index is None:
        logger.warning(f"Bracket match {match_id} not found, score ignored")
        return updated

    match = updated[index]
    winner: MaybeTeam = None
    loser: MaybeTeam = None
    if score1 > score2:
        winner, loser = match.team1, match.team2
    elif score2 > score1:
        winner, loser = match.team2, match.team1
    else:
        logger.warning(
            f"Bracket match {match_id} tied {score1}-{score2}, no winner advanced"
        )

    updated[index] = dataclasses.replace(
        match,
        score1=score1,
        score2=score2,
        twenties1=twenties1,
        twenties2=twenties2,
        completed=True,
        winner_id=team_key(winner) if winner else None,
    )

    if winner and match.next_match_id:
        next_index = _find_index(updated, match.next_match_id)
        if next_index is not None:
            updated[next_index] = _place_team(updated[next_index], match.id, winner)
        else:
            logger.warning(
                f"Next match {match.next_match_id} of {match.id} is missing"
            )

    if loser:
        third_index = next(
            (
                i
                for i, m in enumerate(updated)
                if m.round_tag == ROUND_THIRD_PLACE and m.is_fed_by(match.id)
            ),
            None,
        )
        if third_index is not None:
            updated[third_index] = _place_team(updated[third_index], match.id, loser)

    logger.debug(
        f"Bracket match {match_id} ({match.round_tag}) scored {score1}-{score2}"
    )
    return updated
