"""Exceptions for use in Swiss Doubles"""

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


# ========== Base Application Exception ==========


class SwissDoublesException(Exception):
    """Base exception for all Swiss Doubles errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every engine-specific error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissDoublesException):
    """Base exception for pairing-related errors."""

    pass


# ========== Bracket Exceptions ==========


class BracketException(SwissDoublesException):
    """Base exception for elimination bracket errors."""

    pass


class InvalidBracketTypeException(BracketException):
    """Raised when a pool asks for a bracket shape that is not supported."""

    pass


class InvalidRoundTagException(BracketException):
    """Raised when a bracket match carries an unknown round tag."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissDoublesException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., wrong total or a bracket tie)."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissDoublesException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
