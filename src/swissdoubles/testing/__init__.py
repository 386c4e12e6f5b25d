"""Testing tools for Swiss Doubles.

This module provides:
- A seeded random tournament simulator
- Invariant checks shared with the unit tests

Use the CLI: swissdoubles-sim
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

from swissdoubles.testing.simulator import (
    ScorePattern,
    SimulationReport,
    SimulatorConfig,
    TournamentSimulator,
    check_bracket_links,
    check_bye_fairness,
    check_history_growth,
    check_round_accounting,
    simulate_tournament,
)

__all__ = [
    "ScorePattern",
    "SimulationReport",
    "SimulatorConfig",
    "TournamentSimulator",
    "check_bracket_links",
    "check_bye_fairness",
    "check_history_growth",
    "check_round_accounting",
    "simulate_tournament",
]
