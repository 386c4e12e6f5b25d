"""Plain-text rendering of round pairing logs."""

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

from typing import Iterable, List

from swissdoubles.models.pairing_log import RoundLog

HEAVY_RULE = "=" * 65
LIGHT_RULE = "-" * 65

ALGORITHM_SUMMARY = """ROUND 1:
  * Partners: Randomly assigned
  * Matchups: Randomly assigned
  * Byes: Randomly selected (if player count not divisible by 4)

ROUND 2+:
  * Standings calculated: Score > PF > PA > 20s
    - Score = Wins x 2 + Ties x 1
    - PF = Points For (higher is better)
    - PA = Points Against (lower is better)
    - 20s = Twenty count (higher is better)
  * Partners: Adjacent players in standings paired together
    - Avoids repeat partners when possible
  * Matchups: Teams with similar combined standings play each other
    - Avoids repeat team matchups when possible
  * Byes:
    - Given to lowest ranked player without a bye
    - No one gets 2 byes until everyone has had 1
    - Worth: 1 point (tie) + 4 PF + 4 PA (4-4 tie) + average 20s

SCORING:
  * Win = 2 points
  * Tie = 1 point
  * Loss = 0 points
  * Bye = Tie (1 point, 4-4 score, average 20s)
"""

NO_LOGS_MESSAGE = (
    "No pairing logs available yet. "
    "Start a tournament and generate rounds to see logs."
)


def _format_round(log: RoundLog) -> List[str]:
    lines = [
        HEAVY_RULE,
        f"ROUND {log.round_number}",
        f"Generated: {log.generated_at.isoformat()}",
        f"Players: {log.player_count} | Byes needed: {log.byes_needed}",
        HEAVY_RULE,
        "",
        "STANDINGS BEFORE PAIRING:",
        LIGHT_RULE,
        "Rank  Player                W   L   T   +/-  Byes",
        LIGHT_RULE,
    ]
    for p in log.standings_snapshot:
        diff = f"{p.point_differential:+d}"
        lines.append(
            f"{p.rank:>4}  {p.name[:20]:<20}  {p.wins:>2}  {p.losses:>2}  "
            f"{p.ties:>2}  {diff:>4}  {p.bye_count}"
        )
    lines += ["", "PAIRING DECISIONS:", LIGHT_RULE]
    for entry in log.entries:
        lines.append(f"[{entry.phase.upper()}] {entry.decision}")
        lines.extend(f"    > {detail}" for detail in entry.details)
    lines += ["", "FINAL PAIRINGS:", LIGHT_RULE]
    for pairing in log.final_pairings:
        if pairing.is_bye:
            lines.append(f"  BYE: {' + '.join(pairing.team1)}")
        else:
            table = f"[{pairing.table}] " if pairing.table else ""
            lines.append(
                f"  {table}{' + '.join(pairing.team1)}  vs  "
                f"{' + '.join(pairing.team2 or [])}"
            )
        lines.append(f"        Reason: {pairing.reasoning}")
    lines += ["", ""]
    return lines


def format_round_logs(logs: Iterable[RoundLog]) -> str:
    """Render round logs as a human-readable report, ordered by round.

    When several logs exist for the same round, the last one wins, matching
    a round that was regenerated.
    """
    by_round = {log.round_number: log for log in logs}
    if not by_round:
        return NO_LOGS_MESSAGE

    lines = [
        HEAVY_RULE,
        "                    SWISS PAIRING LOG",
        HEAVY_RULE,
        "",
        "ALGORITHM SUMMARY:",
        LIGHT_RULE,
        ALGORITHM_SUMMARY,
    ]
    for round_number in sorted(by_round):
        lines.extend(_format_round(by_round[round_number]))
    return "\n".join(lines)
