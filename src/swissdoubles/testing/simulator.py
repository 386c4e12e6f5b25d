"""Random tournament simulator for exercising the pairing and bracket engine.

Plays a complete event with seeded random scores: Swiss rounds through
``generate_round_pairings``, then pools and brackets through to final
standings. Every round is checked against the engine's invariants so the
simulator doubles as a soak test.
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

import json
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from swissdoubles.bracket import (
    PoolSelection,
    build_bracket,
    build_pool_configs,
    compute_final_standings,
    create_pools,
    submit_bracket_score,
)
from swissdoubles.constants import (
    DEFAULT_POINTS_PER_MATCH,
    DEFAULT_POOL_SIZE,
    TEAM_SIZE,
)
from swissdoubles.exceptions import InvalidConfigurationException
from swissdoubles.models import (
    BracketMatch,
    FinalStanding,
    Match,
    MatchHistory,
    PartnerHistory,
    Player,
    RoundLog,
    Table,
    TournamentSettings,
)
from swissdoubles.pairing import generate_round_pairings
from swissdoubles.tournament import compute_standings, refresh_player_stats
from swissdoubles.utils import setup_logger
from swissdoubles.utils.validation import (
    validate_bracket_score_strict,
    validate_match_score_strict,
)

logger = setup_logger(__name__)


class ScorePattern(Enum):
    """How simulated match scores are distributed."""

    RANDOM = "random"
    CLOSE = "close"
    LOPSIDED = "lopsided"


@dataclass
class SimulatorConfig:
    """Configuration for the tournament simulator.

    Points per match, pool size, table assignment and the finals flag are
    checked and carried as a TournamentSettings in ``settings``.

    Raises:
        InvalidConfigurationException: On negative counts or settings
            TournamentSettings rejects
    """

    num_players: int = 12
    num_rounds: int = 5
    seed: Optional[int] = None
    num_tables: int = 0
    points_per_match: int = DEFAULT_POINTS_PER_MATCH
    score_pattern: ScorePattern = ScorePattern.RANDOM
    max_twenties: int = 3
    pool_size: int = DEFAULT_POOL_SIZE
    finals: bool = True
    include_third_place: bool = True
    settings: TournamentSettings = field(
        init=False, repr=False, default_factory=TournamentSettings
    )

    def __post_init__(self) -> None:
        for name in ("num_players", "num_rounds", "num_tables", "max_twenties"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationException(
                    f"{name} cannot be negative, got {getattr(self, name)}"
                )
        self.settings = TournamentSettings(
            table_assignment=self.num_tables > 0,
            points_per_match=self.points_per_match,
            pool_size=self.pool_size,
            finals_enabled=self.finals,
        )

    @classmethod
    def from_settings(
        cls, settings: TournamentSettings, **kwargs
    ) -> "SimulatorConfig":
        """Simulator config using a tournament's settings."""
        return cls(
            points_per_match=settings.points_per_match,
            pool_size=settings.pool_size,
            finals=settings.finals_enabled,
            **kwargs,
        )


@dataclass
class SimulationReport:
    """Everything a simulated tournament produced."""

    players: List[Player]
    matches: List[Match] = field(default_factory=list)
    round_logs: List[RoundLog] = field(default_factory=list)
    bracket: List[BracketMatch] = field(default_factory=list)
    final_standings: List[FinalStanding] = field(default_factory=list)
    forced_repeats: int = 0
    violations: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def to_json(self) -> str:
        export = {
            "players": [p.to_dict() for p in self.players],
            "matches": [m.to_dict() for m in self.matches],
            "round_logs": [log.to_dict() for log in self.round_logs],
            "bracket": [m.to_dict() for m in self.bracket],
            "final_standings": [s.to_dict() for s in self.final_standings],
            "forced_repeats": self.forced_repeats,
            "violations": list(self.violations),
        }
        return json.dumps(export, indent=2)


# ========== Invariant checks ==========


def check_round_accounting(
    players: Iterable[Player], round_matches: Sequence[Match]
) -> List[str]:
    """Every active player appears exactly once: in a team of two or a bye."""
    problems = []
    seen: Dict[str, int] = {}
    for match in round_matches:
        if match.is_bye:
            if len(match.team1) != 1 or match.team2 is not None:
                problems.append(f"Bye match {match.id} is malformed")
        else:
            for team in (match.team1, match.team2 or ()):
                if len(team) != TEAM_SIZE or len(set(team)) != TEAM_SIZE:
                    problems.append(f"Match {match.id} has invalid team {team}")
        for pid in match.player_ids:
            seen[pid] = seen.get(pid, 0) + 1

    active = {p.id for p in players if p.active}
    for pid in sorted(active):
        if seen.get(pid, 0) != 1:
            problems.append(f"Player {pid} appears {seen.get(pid, 0)} times")
    for pid in sorted(set(seen) - active):
        problems.append(f"Inactive or unknown player {pid} was paired")
    return problems


def check_history_growth(
    before: Sequence[Match], after: Sequence[Match]
) -> List[str]:
    """Partner and matchup history only ever gain entries."""
    problems = []
    old_partners = PartnerHistory.from_matches(before).partners
    new_partners = PartnerHistory.from_matches(after).partners
    for pid, partners in old_partners.items():
        if not partners <= new_partners.get(pid, set()):
            problems.append(f"Partner history of {pid} shrank")
    old_opponents = MatchHistory.from_matches(before).opponents
    new_opponents = MatchHistory.from_matches(after).opponents
    for key, opponents in old_opponents.items():
        if not opponents <= new_opponents.get(key, set()):
            problems.append(f"Matchup history of {key} shrank")
    return problems


def check_bye_fairness(players: Iterable[Player]) -> List[str]:
    """Bye counts of active players differ by at most one."""
    counts = [p.bye_count for p in players if p.active]
    if counts and max(counts) - min(counts) > 1:
        return [f"Bye counts range from {min(counts)} to {max(counts)}"]
    return []


def check_bracket_links(bracket: Sequence[BracketMatch]) -> List[str]:
    """Forward and backward links agree."""
    problems = []
    by_id = {m.id: m for m in bracket}
    for match in bracket:
        if match.next_match_id is None:
            continue
        target = by_id.get(match.next_match_id)
        if target is None:
            problems.append(f"{match.id} points at missing {match.next_match_id}")
        elif not target.is_fed_by(match.id):
            problems.append(f"{target.id} does not list {match.id} as a source")
    for match in bracket:
        for source_id in (match.source_match1_id, match.source_match2_id):
            if source_id is not None and source_id not in by_id:
                problems.append(f"{match.id} sourced from missing {source_id}")
    return problems


# ========== Simulator ==========


class TournamentSimulator:
    """Plays a full tournament with random scores."""

    def __init__(self, config: SimulatorConfig):
        self.config = config
        self.settings = config.settings
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def create_players(self) -> List[Player]:
        width = len(str(self.config.num_players))
        return [
            Player(id=f"p{i:0{width}d}", name=f"Player {i}")
            for i in range(1, self.config.num_players + 1)
        ]

    def create_tables(self) -> List[Table]:
        # Deliberately out of order so table sorting is exercised
        tables = [
            Table(id=f"t{i}", name=f"Table {i}", order=i)
            for i in range(1, self.config.num_tables + 1)
        ]
        self.random.shuffle(tables)
        return tables

    def simulate_score(self) -> Tuple[int, int]:
        """Scores for team1 and team2 adding up to the points per match."""
        total = self.settings.points_per_match
        if self.config.score_pattern == ScorePattern.CLOSE:
            low = max(0, total // 2 - 1)
            score1 = self.random.randint(low, total - low)
        elif self.config.score_pattern == ScorePattern.LOPSIDED:
            score1 = self.random.choice([0, 1, total - 1, total])
        else:
            score1 = self.random.randint(0, total)
        return score1, total - score1

    def simulate_twenties(self) -> int:
        return self.random.randint(0, self.config.max_twenties)

    def play_round(self, round_matches: List[Match]) -> List[Match]:
        played = []
        for match in round_matches:
            if match.is_bye:
                played.append(match)
                continue
            score1, score2 = self.simulate_score()
            validate_match_score_strict(score1, score2, self.settings.points_per_match)
            match.score1, match.score2 = score1, score2
            match.twenties1 = self.simulate_twenties()
            match.twenties2 = self.simulate_twenties()
            match.completed = True
            played.append(match)
        return played

    def play_bracket(self, bracket: List[BracketMatch]) -> List[BracketMatch]:
        """Score every bracket match in order. Builder order is playable order."""
        for match_id in [m.id for m in bracket]:
            current = next(m for m in bracket if m.id == match_id)
            if current.team1 is None or current.team2 is None:
                logger.warning(f"Bracket match {match_id} has an open slot, skipped")
                continue
            score1, score2 = self.simulate_score()
            while score1 == score2:
                score1, score2 = self.simulate_score()
            validate_bracket_score_strict(score1, score2)
            bracket = submit_bracket_score(
                bracket,
                match_id,
                score1,
                score2,
                self.simulate_twenties(),
                self.simulate_twenties(),
            )
        return bracket

    def run(self) -> SimulationReport:
        players = self.create_players()
        tables = self.create_tables()
        report = SimulationReport(players=players)

        for round_number in range(1, self.config.num_rounds + 1):
            before = list(report.matches)
            result = generate_round_pairings(
                players,
                before,
                round_number,
                tables=tables,
                assign_tables=self.settings.table_assignment,
                bye_mode=self.settings.bye_mode,
                rng=self.random,
            )
            report.round_logs.append(result.log)
            report.forced_repeats += result.forced_repeats

            problems = check_round_accounting(players, result.matches)
            report.matches = before + self.play_round(result.matches)
            problems += check_history_growth(before, report.matches)
            players = refresh_player_stats(players, report.matches)
            problems += check_bye_fairness(players)

            for problem in problems:
                report.violations.append(f"Round {round_number}: {problem}")

        report.players = players

        if self.settings.finals_enabled:
            standings = compute_standings(players, report.matches)
            pools = create_pools(standings, self.settings.pool_size)
            selections = {
                pool.pool_id: PoolSelection(
                    include_third_place=self.config.include_third_place
                )
                for pool in pools
            }
            configs = build_pool_configs(pools, selections)
            bracket = build_bracket(configs, players)
            report.violations += check_bracket_links(bracket)
            report.bracket = self.play_bracket(bracket)
            report.final_standings = compute_final_standings(
                standings, configs, report.bracket, self.settings.pool_size
            )

        logger.info(
            f"Simulated {self.config.num_rounds} rounds for "
            f"{self.config.num_players} players: {len(report.violations)} violations, "
            f"{report.forced_repeats} forced repeats"
        )
        return report


def simulate_tournament(
    num_players: int = 12, num_rounds: int = 5, seed: Optional[int] = None, **kwargs
) -> SimulationReport:
    """Convenience wrapper: build a config and run it."""
    config = SimulatorConfig(
        num_players=num_players, num_rounds=num_rounds, seed=seed, **kwargs
    )
    return TournamentSimulator(config).run()
