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

"""
Session state management.

This module provides data structures describing where a session is in its
lifecycle and which actions the user may take next.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from autodraft.tournament.controller import SessionController


class SessionPhase(Enum):
    """
    Represents the current phase of a session.

    Drafting has no phase of its own: ``begin_draft`` runs to completion and
    leaves the session battling.
    """

    IDLE = auto()  # No session running
    BATTLING = auto()  # Pairings out, results being reported
    GAME_OVER = auto()  # Champion decided, roster updated


@dataclass
class SessionState:
    """
    Snapshot of the session for the presentation layer.

    Attributes
    ----------
    phase : SessionPhase
        Current phase of the session
    round : int
        Current round (0 when idle)
    battle_in_round : int
        Battle within the round, 1..3 (0 when idle)
    hand_size : int
        Current hand size (0 when idle)
    is_new_round : bool
        Whether players draft new cards before this battle
    reported : int
        Pairings with a result
    total_pairings : int
        Pairings in the current battle
    can_end_battle : bool
        Whether the End Battle action is available
    """

    phase: SessionPhase
    round: int
    battle_in_round: int
    hand_size: int
    is_new_round: bool
    reported: int
    total_pairings: int
    can_end_battle: bool

    @classmethod
    def compute(cls, controller: "SessionController") -> "SessionState":
        """
        Compute the state of the controller's session.

        Parameters
        ----------
        controller : SessionController
            The controller to inspect

        Returns
        -------
        SessionState
            The computed state object
        """
        session = controller.session
        if session is None:
            return cls(
                phase=SessionPhase.IDLE,
                round=0,
                battle_in_round=0,
                hand_size=0,
                is_new_round=False,
                reported=0,
                total_pairings=0,
                can_end_battle=False,
            )

        return cls(
            phase=controller.phase,
            round=session.round,
            battle_in_round=session.battle_in_round,
            hand_size=session.hand_size,
            is_new_round=session.is_new_round,
            reported=sum(1 for p in session.pairings if p.is_reported),
            total_pairings=len(session.pairings),
            can_end_battle=controller.can_end_battle,
        )

    @property
    def instructions(self) -> str:
        """Guidance line shown above the pairings."""
        if self.phase is SessionPhase.IDLE:
            return "Start a draft to begin."
        if self.phase is SessionPhase.GAME_OVER:
            return "The game is over."
        text = f"Report results for Battle {self.battle_in_round} of 3."
        if self.is_new_round:
            text = f"This is a new round! First, draft new cards. Then, {text[0].lower()}{text[1:]}"
        return text
