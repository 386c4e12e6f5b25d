"""Shared helpers: logging setup, id generation and team keys."""

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

import logging
import os
import uuid
from typing import Iterable

from swissdoubles.constants import LOG_LEVEL_ENV_VAR, TEAM_KEY_SEPARATOR

_PACKAGE_LOGGER = "swissdoubles"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger.

    The package logger gets a single stream handler the first time this is
    called. Its level comes from the ``SWISSDOUBLES_LOG_LEVEL`` environment
    variable and defaults to WARNING.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        package_logger.setLevel(getattr(logging, level_name, logging.WARNING))
    return logging.getLogger(name)


def generate_id(length: int = 8) -> str:
    """Generate a short random identifier for matches."""
    return uuid.uuid4().hex[:length]


def team_key(player_ids: Iterable[str]) -> str:
    """Canonical key for a team: sorted player ids joined with '-'."""
    return TEAM_KEY_SEPARATOR.join(sorted(player_ids))
