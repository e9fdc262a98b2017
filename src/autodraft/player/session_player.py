"""A player taking part in the active session."""

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

from __future__ import annotations

from typing import Optional

from autodraft.constants import (
    GHOST_POISON,
    MAX_TREASURES,
    STARTING_POISON,
    STARTING_TREASURES,
    SUDDEN_DEATH_POISON,
)
from autodraft.player.base_player import Player
from autodraft.utils import setup_logger

logger = setup_logger(__name__)


class SessionPlayer:
    """Per-session state for one drafted player.

    Created from a roster Player when the draft begins and folded back into
    the roster statistics when the game ends.

    Attributes:
        id: Id of the roster player this seat belongs to
        name: Display name copied from the roster
        poison: Accumulated poison, eliminated at 10
        treasures: Treasure count, capped at 5
        is_ghost: Whether the player is standing in as this battle's ghost
        is_eliminated: Whether the player has been knocked out
        elimination_round: Round the player was knocked out in
        placement: Final placement (1 = champion) once assigned
    """

    is_bye = False

    def __init__(self, player_id: str, name: str) -> None:
        self.id: str = player_id
        self.name: str = name
        self.poison: int = STARTING_POISON
        self.treasures: int = STARTING_TREASURES
        self.is_ghost: bool = False
        self.is_eliminated: bool = False
        self.elimination_round: Optional[int] = None
        self.placement: Optional[int] = None

    @classmethod
    def from_player(cls, player: Player) -> "SessionPlayer":
        """Derive a fresh session seat from a roster player."""
        return cls(player_id=player.id, name=player.name)

    @property
    def is_alive(self) -> bool:
        return not self.is_eliminated

    def take_poison(self, amount: int) -> None:
        """Add poison from a lost or drawn battle."""
        self.poison += amount
        logger.debug("%s takes %d poison (now %d)", self.name, amount, self.poison)

    def eliminate(self, round_number: int) -> None:
        self.is_eliminated = True
        self.elimination_round = round_number

    def revive_for_sudden_death(self) -> None:
        """Undo an elimination, leaving the player one hit from going out."""
        self.is_eliminated = False
        self.elimination_round = None
        self.placement = None
        self.poison = SUDDEN_DEATH_POISON

    def become_ghost(self) -> None:
        """Stand in for the missing opponent; ghosts shed all poison."""
        self.is_ghost = True
        self.poison = GHOST_POISON

    def gain_treasure(self) -> None:
        self.treasures = min(MAX_TREASURES, self.treasures + 1)

    def __repr__(self) -> str:
        return (
            f"SessionPlayer(name='{self.name}', poison={self.poison}, "
            f"eliminated={self.is_eliminated}, placement={self.placement})"
        )

    def __str__(self) -> str:
        return self.name
