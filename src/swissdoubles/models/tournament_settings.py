"""Tournament-wide settings read by the pairing and bracket engine."""

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

from dataclasses import dataclass
from typing import Any, Dict

from swissdoubles.constants import (
    BYE_MODES,
    DEFAULT_BYE_MODE,
    DEFAULT_POINTS_PER_MATCH,
    DEFAULT_POOL_SIZE,
)
from swissdoubles.exceptions import InvalidConfigurationException


@dataclass
class TournamentSettings:
    """Tournament configuration settings.

    Attributes
    ----------
    table_assignment : bool
        Hand out tables to new matches in table order.
    points_per_match : int
        Total both teams' scores must add up to.
    pool_size : int
        Players per pool when the final standings are split for brackets.
    bye_mode : str
        How surplus players are handled. Only "byes_only" is supported.
    finals_enabled : bool
        Whether an elimination phase follows the Swiss rounds.
    """

    table_assignment: bool = False
    points_per_match: int = DEFAULT_POINTS_PER_MATCH
    pool_size: int = DEFAULT_POOL_SIZE
    bye_mode: str = DEFAULT_BYE_MODE
    finals_enabled: bool = False

    def __post_init__(self) -> None:
        if self.bye_mode not in BYE_MODES:
            raise InvalidConfigurationException(
                f"Unsupported bye mode '{self.bye_mode}'"
            )
        if self.points_per_match <= 0:
            raise InvalidConfigurationException(
                f"points_per_match must be positive, got {self.points_per_match}"
            )
        if self.pool_size <= 0:
            raise InvalidConfigurationException(
                f"pool_size must be positive, got {self.pool_size}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "table_assignment": self.table_assignment,
            "points_per_match": self.points_per_match,
            "pool_size": self.pool_size,
            "bye_mode": self.bye_mode,
            "finals_enabled": self.finals_enabled,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary."""
        return cls(
            table_assignment=data.get("table_assignment", False),
            points_per_match=data.get("points_per_match", DEFAULT_POINTS_PER_MATCH),
            pool_size=data.get("pool_size", DEFAULT_POOL_SIZE),
            bye_mode=data.get("bye_mode", DEFAULT_BYE_MODE),
            finals_enabled=data.get("finals_enabled", False),
        )
