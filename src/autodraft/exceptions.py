"""Exceptions for use in Auto Draft"""

# Auto Draft
# Copyright (C) 2025  Auto Draft developers
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


class AutoDraftException(Exception):
    """Base exception for all Auto Draft errors.

    All custom exceptions in the application should inherit from this class.
    The GUI catches this single type to report failures to the user.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(AutoDraftException):
    """Base exception for user input validation errors."""

    pass


class PlayerNameValidationException(ValidationException):
    """Raised when a new player's name is empty or invalid."""

    pass


class DraftSelectionException(ValidationException):
    """Raised when the players selected for a draft are invalid."""

    pass


class DuplicatePlayerException(DraftSelectionException):
    """Raised when the same player is selected more than once."""

    pass


class PlayerCountException(DraftSelectionException):
    """Raised when the number of selected players does not match the request."""

    pass


class PairingModeException(ValidationException):
    """Raised when a pairing mode is unknown or not allowed for the player count."""

    pass


# ========== Player Exceptions ==========


class PlayerException(AutoDraftException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when stored player data is invalid or incomplete."""

    pass


# ========== Session Exceptions ==========


class SessionException(AutoDraftException):
    """Base exception for session-related errors."""

    pass


class SessionStateException(SessionException):
    """Raised when the session is in an invalid state for the requested operation."""

    pass


# ========== Result Exceptions ==========


class ResultException(AutoDraftException):
    """Base exception for result reporting errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result names neither participant nor a draw."""

    pass


class ByeResultException(ResultException):
    """Raised when attempting to change the result of a BYE pairing."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(AutoDraftException):
    """Base exception for resource-related errors."""

    pass


class RosterLoadException(ResourceException):
    """Raised when the roster cannot be loaded."""

    pass


class RosterSaveException(ResourceException):
    """Raised when the roster cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AutoDraftException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
