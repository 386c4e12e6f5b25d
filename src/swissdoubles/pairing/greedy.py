"""Adjacent-scan pairing shared by partner and opponent selection."""

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

from typing import Callable, List, Sequence, Set, Tuple, TypeVar

from swissdoubles.utils import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


def pair_consecutive(items: Sequence[T]) -> List[Tuple[T, T]]:
    """Pair neighbours: (0, 1), (2, 3), ... An odd last item is dropped."""
    return [(items[i], items[i + 1]) for i in range(0, len(items) - 1, 2)]


def greedy_pair(
    ranked: Sequence[T],
    key: Callable[[T], str],
    have_history: Callable[[T, T], bool],
) -> List[Tuple[T, T, bool]]:
    """Pair items in rank order, avoiding repeats when possible.

    Each unpaired item takes the nearest unpaired item below it that it has
    no history with. When every remaining candidate is a repeat, it takes the
    nearest unpaired item anyway and the pair is flagged as forced.

    Args:
        ranked: Items ordered best first
        key: Identity of an item within this round
        have_history: Whether two items have already been paired before

    Returns:
        List of (first, second, forced) tuples in pairing order. An item left
        without any candidate is dropped and logged.
    """
    used: Set[str] = set()
    pairs: List[Tuple[T, T, bool]] = []

    for i, first in enumerate(ranked):
        if key(first) in used:
            continue

        candidates = [c for c in ranked[i + 1 :] if key(c) not in used]
        if not candidates:
            logger.warning(f"No candidate left to pair with {key(first)}")
            continue

        second = next((c for c in candidates if not have_history(first, c)), None)
        forced = second is None
        if forced:
            second = candidates[0]

        used.add(key(first))
        used.add(key(second))
        pairs.append((first, second, forced))

    return pairs
