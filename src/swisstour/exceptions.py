"""Exceptions for use in SwissTour"""

# SwissTour
# Copyright (C) 2025  SwissTour developers
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


class SwissTourException(Exception):
    """Base exception for all SwissTour errors.

    All custom exceptions in the application inherit from this class, so every
    application-specific error can be caught with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissTourException):
    """Base exception for pairing-related errors."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(SwissTourException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when the tournament is in the wrong state for an operation.

    Examples are starting a tournament with fewer than two players, or
    advancing a round before every game has a result.
    """

    pass


class TournamentNotFoundException(TournamentException):
    """Raised when a requested tournament does not exist."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissTourException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissTourException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid or cannot be set on a pairing."""

    pass


# ========== Storage Exceptions ==========


class StorageException(SwissTourException):
    """Base exception for persistence errors."""

    pass


class FileLoadException(StorageException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(StorageException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissTourException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
