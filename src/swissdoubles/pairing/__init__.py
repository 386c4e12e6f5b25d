"""Round pairing for Swiss doubles."""

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

from swissdoubles.pairing.bye_selector import ByeSelector, byes_needed
from swissdoubles.pairing.log_report import format_round_logs
from swissdoubles.pairing.match_pairing import assign_tables, pair_teams
from swissdoubles.pairing.partner_assignment import assign_partners
from swissdoubles.pairing.swiss_doubles import (
    average_twenties,
    create_bye_match,
    generate_round_pairings,
)

__all__ = [
    "ByeSelector",
    "byes_needed",
    "format_round_logs",
    "assign_tables",
    "pair_teams",
    "assign_partners",
    "average_twenties",
    "create_bye_match",
    "generate_round_pairings",
]
