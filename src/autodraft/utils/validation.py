"""Validation utilities for Auto Draft.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import Iterable, List, Optional, Sequence

from autodraft.constants import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    PAIRING_MODES,
    PAIRING_STRUCTURED,
    STRUCTURED_PLAYER_COUNT,
)
from autodraft.exceptions import (
    DuplicatePlayerException,
    PairingModeException,
    PlayerCountException,
    PlayerNameValidationException,
    PlayerNotFoundException,
)

MAX_NAME_LENGTH = 40


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate the display name of a new roster player.

    Any printable name is accepted; surrounding whitespace is removed and
    runs of inner whitespace collapse to one space.

    Args:
        name: Name as typed by the user

    Returns:
        ValidationResult with validation status and the cleaned name

    Example:
        >>> validate_player_name("  Ana   Maria ").sanitized_value
        'Ana Maria'
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Please enter a player name.",
        )

    name = re.sub(r"\s+", " ", name.strip())

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error_message=f"Name must be at most {MAX_NAME_LENGTH} characters",
        )

    if not name.isprintable():
        return ValidationResult(
            is_valid=False,
            error_message="Name contains invalid characters",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_player_name_strict(name: Optional[str]) -> str:
    """Validate a player name and return it cleaned, or raise.

    Raises:
        PlayerNameValidationException: If the name is empty or invalid
    """
    result = validate_player_name(name)
    if not result.is_valid:
        raise PlayerNameValidationException(result.error_message)
    return result.sanitized_value or ""


# ========== Draft Validation ==========


def validate_player_count(num_players: int, roster_size: int) -> ValidationResult:
    """Validate the requested number of players for a draft.

    Args:
        num_players: Number of seats requested
        roster_size: Number of players saved on the roster

    Returns:
        ValidationResult with validation status
    """
    upper = min(MAX_PLAYERS, roster_size)
    if roster_size < MIN_PLAYERS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"You need at least {MIN_PLAYERS} saved players to start a draft."
            ),
        )
    if not MIN_PLAYERS <= num_players <= upper:
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of players must be between {MIN_PLAYERS} and {upper}",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(num_players))


def validate_pairing_mode(mode: str, num_players: int) -> ValidationResult:
    """Validate a pairing mode against the number of players.

    Structured pairing is only offered for exactly four players.
    """
    if mode not in PAIRING_MODES:
        return ValidationResult(
            is_valid=False,
            error_message=f"Unknown pairing mode: {mode}",
        )
    if mode == PAIRING_STRUCTURED and num_players != STRUCTURED_PLAYER_COUNT:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Structured pairing requires exactly {STRUCTURED_PLAYER_COUNT} players"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=mode)


def validate_draft_selection(
    selected_ids: Sequence[Optional[str]],
    num_players: int,
    roster_ids: Iterable[str],
) -> List[str]:
    """Validate the players chosen for each draft seat.

    Empty seats (``None`` or ``""``) are dropped before counting, so an
    unfilled seat surfaces as a count mismatch.

    Args:
        selected_ids: One entry per seat, in seat order
        num_players: Number of seats requested
        roster_ids: Ids of every player on the roster

    Returns:
        The selected ids as strings, in seat order

    Raises:
        PlayerCountException: If the filled seats do not match ``num_players``
        DuplicatePlayerException: If a player fills more than one seat
        PlayerNotFoundException: If an id is not on the roster
    """
    chosen = [str(pid) for pid in selected_ids if pid not in (None, "")]

    if len(chosen) != num_players:
        raise PlayerCountException("Please select a player for each slot.")

    if len(set(chosen)) != len(chosen):
        raise DuplicatePlayerException("Each player can only be selected once.")

    known = {str(pid) for pid in roster_ids}
    missing = [pid for pid in chosen if pid not in known]
    if missing:
        raise PlayerNotFoundException(f"Unknown player id(s): {', '.join(missing)}")

    return chosen
