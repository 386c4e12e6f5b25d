"""Swiss doubles round generation.

Round 1: random byes, random partners, random matchups.
Round 2+: byes to the lowest ranked player with the fewest byes, partners
from adjacent standings, matchups from adjacent combined team standings,
avoiding repeat partners and repeat matchups whenever possible.
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

import random
from typing import Iterable, List, Optional, Sequence

from swissdoubles.constants import (
    BYE_MODES,
    BYE_POINTS_FOR,
    DEFAULT_BYE_MODE,
    MATCH_SIZE,
    PHASE_TEAM_FORMATION,
)
from swissdoubles.exceptions import InvalidConfigurationException
from swissdoubles.models.history import MatchHistory, PartnerHistory
from swissdoubles.models.match import Match, Table
from swissdoubles.models.pairing_log import MatchPairingLog, PlayerSnapshot, RoundLog
from swissdoubles.models.pairing_result import PairingResult
from swissdoubles.models.player import Player
from swissdoubles.pairing.bye_selector import ByeSelector, byes_needed
from swissdoubles.pairing.match_pairing import assign_tables as zip_tables
from swissdoubles.pairing.match_pairing import pair_teams
from swissdoubles.pairing.partner_assignment import assign_partners
from swissdoubles.tournament.standings import StandingsCalculator
from swissdoubles.utils import generate_id, setup_logger

logger = setup_logger(__name__)

SHORT_HANDED_REASON = "Not enough players for a match"


def generate_round_pairings(
    players: Sequence[Player],
    matches: Iterable[Match],
    round_number: int,
    tables: Sequence[Table] = (),
    assign_tables: bool = False,
    bye_mode: str = DEFAULT_BYE_MODE,
    rng: Optional[random.Random] = None,
) -> PairingResult:
    """
    Generate the matches for one round.

    - players: tournament roster; inactive players are skipped
    - matches: full round-robin match log so far (used for standings and
      partner/matchup history)
    - round_number: 1-based round being generated; anything other than 1
      is paired with the Swiss rules
    - tables: table definitions, used only when assign_tables is set
    - bye_mode: how surplus players are handled; only "byes_only" exists
    - rng: random source for round one, for reproducible draws
    Returns: PairingResult with regular matches first, then one completed
    bye match per sitting-out player, and the round's decision log.

    The inputs are never modified.
    """
    if bye_mode not in BYE_MODES:
        raise InvalidConfigurationException(f"Unsupported bye mode '{bye_mode}'")
    if round_number < 1:
        logger.warning(
            f"Round number {round_number} is below 1, pairing it as a Swiss round"
        )

    rng = rng or random.Random()
    history = list(matches)
    calculator = StandingsCalculator()

    active = [p for p in calculator.derive_stats(players, history) if p.active]
    log = RoundLog(round_number=round_number, player_count=len(active))
    log.standings_snapshot = _snapshot(calculator.rank_players(active))

    log.add_entry(
        PHASE_TEAM_FORMATION,
        f"Starting Round {round_number} pairing generation",
        [
            f"Active players: {len(active)}",
            f"Byes needed: {byes_needed(len(active))}",
            (
                "Using RANDOM pairing (Round 1)"
                if round_number == 1
                else "Using SWISS pairing (Round 2+)"
            ),
        ],
    )

    partner_history = PartnerHistory.from_matches(history)
    match_history = MatchHistory.from_matches(history)

    bye_selector = ByeSelector(rng, calculator)
    bye_players, remaining = bye_selector.assign_byes(active, round_number, log)

    new_matches: List[Match] = []
    forced_repeats = 0

    if remaining:
        teams, forced_partners = assign_partners(
            remaining, round_number, partner_history, rng, log
        )
        matchups, forced_matchups = pair_teams(
            teams, round_number, match_history, rng, log
        )
        forced_repeats = forced_partners + forced_matchups

        slots = zip_tables(len(matchups), tables) if assign_tables else []
        reasoning = (
            "Random pairing (Round 1)"
            if round_number == 1
            else "Swiss pairing based on combined team standings"
        )
        for idx, (team1, team2) in enumerate(matchups):
            table = slots[idx] if idx < len(slots) else None
            new_matches.append(
                Match(
                    id=generate_id(),
                    round_number=round_number,
                    team1=(team1[0].id, team1[1].id),
                    team2=(team2[0].id, team2[1].id),
                    table_id=table.id if table else None,
                )
            )
            log.final_pairings.append(
                MatchPairingLog(
                    table=table.name if table else None,
                    team1=[team1[0].name, team1[1].name],
                    team2=[team2[0].name, team2[1].name],
                    is_bye=False,
                    reasoning=reasoning,
                )
            )

    short_handed = not remaining
    for player in bye_players:
        new_matches.append(create_bye_match(player.id, round_number, history))
        log.final_pairings.append(
            MatchPairingLog(
                table=None,
                team1=[player.name],
                team2=None,
                is_bye=True,
                reasoning=(
                    SHORT_HANDED_REASON
                    if short_handed
                    else bye_selector.reasons.get(player.id, SHORT_HANDED_REASON)
                ),
            )
        )

    log.byes_needed = len(bye_players)
    logger.info(
        f"Round {round_number}: {len(new_matches) - len(bye_players)} matches, "
        f"{len(bye_players)} byes, {forced_repeats} forced repeats"
    )

    bye_ids = [p.id for p in bye_players]
    return PairingResult(
        matches=new_matches,
        bye_player=bye_ids[0] if bye_ids else None,
        log=log,
        forced_repeats=forced_repeats,
        bye_players=bye_ids,
    )


def average_twenties(matches: Iterable[Match]) -> int:
    """Average twenties per player per completed regular match, rounded.

    Halves round up. Returns 0 when no regular match has been completed.
    """
    played = [m for m in matches if m.completed and not m.is_bye]
    if not played:
        return 0
    total = sum((m.twenties1 or 0) + (m.twenties2 or 0) for m in played)
    # floor(x + 0.5) keeps halves rounding up, unlike round()
    return (2 * total + len(played) * MATCH_SIZE) // (2 * len(played) * MATCH_SIZE)


def create_bye_match(
    player_id: str, round_number: int, matches: Iterable[Match]
) -> Match:
    """A completed bye: 4 points and the tournament's average twenties."""
    return Match(
        id=generate_id(),
        round_number=round_number,
        team1=(player_id,),
        team2=None,
        score1=BYE_POINTS_FOR,
        score2=None,
        twenties1=average_twenties(matches),
        twenties2=0,
        completed=True,
        is_bye=True,
    )

def _snapshot(ranked: Sequence[Player]) -> List[PlayerSnapshot]:
    return [
        PlayerSnapshot(
            rank=idx + 1,
            player_id=p.id,
            name=p.name,
            wins=p.wins,
            losses=p.losses,
            ties=p.ties,
            points_for=p.points_for,
            points_against=p.points_against,
            point_differential=p.point_differential,
            bye_count=p.bye_count,
        )
        for idx, p in enumerate(ranked)
    ]
