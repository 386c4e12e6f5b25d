"""Score validation helpers for the score-entry boundary.

The pairing and bracket engine does not check scores itself. Callers run
these helpers before handing scores over, the way the score-entry forms do.
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

from typing import Optional

from swissdoubles.constants import DEFAULT_POINTS_PER_MATCH
from swissdoubles.exceptions import InvalidResultException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _check_non_negative(
    score1: int, score2: int, twenties1: int, twenties2: int
) -> Optional[str]:
    if score1 < 0 or score2 < 0:
        return f"Scores cannot be negative ({score1}-{score2})"
    if twenties1 < 0 or twenties2 < 0:
        return f"Twenties cannot be negative ({twenties1}-{twenties2})"
    return None


# ========== Round-robin scores ==========


def validate_match_score(
    score1: int,
    score2: int,
    points_per_match: int = DEFAULT_POINTS_PER_MATCH,
    twenties1: int = 0,
    twenties2: int = 0,
) -> ValidationResult:
    """Validate a round-robin score before it is stored.

    Both scores must be non-negative and add up to the configured points
    per match. Ties are allowed.

    Example:
        >>> bool(validate_match_score(5, 3))
        True
        >>> validate_match_score(5, 4).error_message
        'Scores must add up to 8 (currently 9)'
    """
    error = _check_non_negative(score1, score2, twenties1, twenties2)
    if error:
        return ValidationResult(is_valid=False, error_message=error)

    total = score1 + score2
    if total != points_per_match:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Scores must add up to {points_per_match} (currently {total})"
            ),
        )
    return ValidationResult(is_valid=True)


def validate_match_score_strict(
    score1: int,
    score2: int,
    points_per_match: int = DEFAULT_POINTS_PER_MATCH,
    twenties1: int = 0,
    twenties2: int = 0,
) -> None:
    """Validate a round-robin score and raise if invalid.

    Raises:
        InvalidResultException: If the score is invalid
    """
    result = validate_match_score(
        score1, score2, points_per_match, twenties1, twenties2
    )
    if not result.is_valid:
        raise InvalidResultException(result.error_message)


# ========== Bracket scores ==========


def validate_bracket_score(
    score1: int, score2: int, twenties1: int = 0, twenties2: int = 0
) -> ValidationResult:
    """Validate an elimination match score.

    Bracket matches need a winner, so tied scores are rejected.
    """
    error = _check_non_negative(score1, score2, twenties1, twenties2)
    if error:
        return ValidationResult(is_valid=False, error_message=error)

    if score1 == score2:
        return ValidationResult(
            is_valid=False,
            error_message="Ties are not allowed in bracket matches. Play a tiebreaker!",
        )
    return ValidationResult(is_valid=True)


def validate_bracket_score_strict(
    score1: int, score2: int, twenties1: int = 0, twenties2: int = 0
) -> None:
    """Validate an elimination match score and raise if invalid.

    Raises:
        InvalidResultException: If the score is tied or negative
    """
    result = validate_bracket_score(score1, score2, twenties1, twenties2)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
