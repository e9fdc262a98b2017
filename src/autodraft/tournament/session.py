"""The in-progress draft session."""

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

from typing import Dict, Iterable, List, Optional

from autodraft.constants import (
    BATTLES_PER_ROUND,
    DEFAULT_PAIRING_MODE,
    EVENT_ELIMINATION,
    STARTING_BATTLE,
    STARTING_HAND_SIZE,
    STARTING_ROUND,
)
from autodraft.player import SessionPlayer
from autodraft.tournament.models import Pairing, SessionEvent


class Session:
    """Aggregate state of one draft, from the first pairing to game over.

    Attributes:
        round: Current round, starting at 1
        battle: Battle counter over the whole session, never reset
        hand_size: Cards in hand this round, starting at 3
        pairing_mode: ``"random"`` or ``"structured"``
        players: Session players in draft order
        pairings: Pairings for the current battle
        history: Ordered elimination and sudden-death events
    """

    def __init__(
        self,
        players: Iterable[SessionPlayer],
        pairing_mode: str = DEFAULT_PAIRING_MODE,
    ) -> None:
        self.round: int = STARTING_ROUND
        self.battle: int = STARTING_BATTLE
        self.hand_size: int = STARTING_HAND_SIZE
        self.pairing_mode: str = pairing_mode
        self.players: List[SessionPlayer] = list(players)
        self.pairings: List[Pairing] = []
        self.history: List[SessionEvent] = []
        self._index: Dict[str, SessionPlayer] = {p.id: p for p in self.players}

    # ========== Lookups ==========

    def get_player(self, player_id: str) -> Optional[SessionPlayer]:
        return self._index.get(player_id)

    @property
    def alive_players(self) -> List[SessionPlayer]:
        return [p for p in self.players if not p.is_eliminated]

    @property
    def ghost(self) -> Optional[SessionPlayer]:
        return next((p for p in self.players if p.is_ghost), None)

    # ========== Progression ==========

    @property
    def battle_in_round(self) -> int:
        """Battle number within the current round (1..3)."""
        return (self.battle - 1) % BATTLES_PER_ROUND + 1

    @property
    def is_new_round(self) -> bool:
        """True on the first battle of every round after the first."""
        return self.battle_in_round == 1 and self.battle > STARTING_BATTLE

    @property
    def all_results_reported(self) -> bool:
        return bool(self.pairings) and all(p.is_reported for p in self.pairings)

    # ========== History ==========

    def record_event(self, event_type: str, player: SessionPlayer) -> SessionEvent:
        event = SessionEvent(
            type=event_type, player_id=player.id, round=self.round, battle=self.battle
        )
        self.history.append(event)
        return event

    def last_eliminated(self) -> Optional[SessionPlayer]:
        """Most recently eliminated player who is still out.

        Simultaneous eliminations are recorded in draft order, so the later
        seat wins the tie. Players revived by sudden death are skipped.
        """
        for event in reversed(self.history):
            if event.type != EVENT_ELIMINATION:
                continue
            player = self._index.get(event.player_id)
            if player is not None and player.is_eliminated:
                return player
        return None

    # ========== Results ==========

    def standings(self) -> List[SessionPlayer]:
        """Players ordered by placement, unplaced players last."""
        return sorted(
            self.players,
            key=lambda p: (p.placement is None, p.placement or 0),
        )
