"""Per-round trace of the pairing decisions."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from swissdoubles.constants import LOG_PHASES
from swissdoubles.exceptions import PairingException


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PairingLogEntry:
    """A single decision taken while pairing a round."""

    round_number: int
    phase: str
    decision: str
    details: List[str] = field(default_factory=list)
    forced: bool = False
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        if self.phase not in LOG_PHASES:
            raise PairingException(f"Unknown pairing log phase: {self.phase}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "round_number": self.round_number,
            "phase": self.phase,
            "decision": self.decision,
            "details": list(self.details),
            "forced": self.forced,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingLogEntry":
        return cls(
            round_number=data["round_number"],
            phase=data["phase"],
            decision=data["decision"],
            details=list(data.get("details", [])),
            forced=data.get("forced", False),
            timestamp=isoparse(data["timestamp"]),
        )


@dataclass
class PlayerSnapshot:
    """A player's derived record at the moment the round was paired."""

    rank: int
    player_id: str
    name: str
    wins: int
    losses: int
    ties: int
    points_for: int
    points_against: int
    point_differential: int
    bye_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "player_id": self.player_id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "point_differential": self.point_differential,
            "bye_count": self.bye_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerSnapshot":
        return cls(**{key: data[key] for key in cls.__dataclass_fields__})


@dataclass
class MatchPairingLog:
    """One line of the final pairings table."""

    table: Optional[str]
    team1: List[str]
    team2: Optional[List[str]]
    is_bye: bool
    reasoning: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table": self.table,
            "team1": list(self.team1),
            "team2": list(self.team2) if self.team2 is not None else None,
            "is_bye": self.is_bye,
            "reasoning": self.reasoning,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchPairingLog":
        team2 = data.get("team2")
        return cls(
            table=data.get("table"),
            team1=list(data["team1"]),
            team2=list(team2) if team2 is not None else None,
            is_bye=data.get("is_bye", False),
            reasoning=data.get("reasoning", ""),
        )


@dataclass
class RoundLog:
    """
    Everything the engine decided while pairing one round.

    A fresh ``RoundLog`` is built by every call to the round generator and
    handed back with the pairings, so concurrent tournaments never share
    log state.

    Attributes
    ----------
    round_number : int
        Round being paired.
    player_count : int
        Active players at the start of pairing.
    byes_needed : int
        Sit-outs required to make the remainder divisible by four.
    entries : list of PairingLogEntry
        Decisions in the order they were taken.
    standings_snapshot : list of PlayerSnapshot
        Active players ranked before pairing.
    final_pairings : list of MatchPairingLog
        The resulting matches and byes.
    generated_at : datetime
        When the round was paired (UTC).
    """

    round_number: int
    player_count: int = 0
    byes_needed: int = 0
    entries: List[PairingLogEntry] = field(default_factory=list)
    standings_snapshot: List[PlayerSnapshot] = field(default_factory=list)
    final_pairings: List[MatchPairingLog] = field(default_factory=list)
    generated_at: datetime = field(default_factory=_now)

    def add_entry(
        self,
        phase: str,
        decision: str,
        details: Optional[List[str]] = None,
        forced: bool = False,
    ) -> PairingLogEntry:
        """Append a decision for this round and return it."""
        entry = PairingLogEntry(
            round_number=self.round_number,
            phase=phase,
            decision=decision,
            details=list(details or []),
            forced=forced,
        )
        self.entries.append(entry)
        return entry

    def entries_for(self, phase: str) -> List[PairingLogEntry]:
        return [entry for entry in self.entries if entry.phase == phase]

    @property
    def forced_repeats(self) -> int:
        """Number of decisions that fell back to a repeat."""
        return sum(1 for entry in self.entries if entry.forced)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round log to dictionary."""
        return {
            "round_number": self.round_number,
            "generated_at": self.generated_at.isoformat(),
            "player_count": self.player_count,
            "byes_needed": self.byes_needed,
            "entries": [entry.to_dict() for entry in self.entries],
            "standings_snapshot": [s.to_dict() for s in self.standings_snapshot],
            "final_pairings": [p.to_dict() for p in self.final_pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundLog":
        """Deserialize round log from dictionary."""
        return cls(
            round_number=data["round_number"],
            player_count=data.get("player_count", 0),
            byes_needed=data.get("byes_needed", 0),
            entries=[PairingLogEntry.from_dict(e) for e in data.get("entries", [])],
            standings_snapshot=[
                PlayerSnapshot.from_dict(s) for s in data.get("standings_snapshot", [])
            ],
            final_pairings=[
                MatchPairingLog.from_dict(p) for p in data.get("final_pairings", [])
            ],
            generated_at=isoparse(data["generated_at"]),
        )
