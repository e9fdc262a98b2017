"""Data models for a draft session: pairings, history events and battle outcomes."""

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

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from autodraft.constants import (
    BYE_ID,
    BYE_NAME,
    RESULT_DRAW,
)
from autodraft.player import SessionPlayer
from autodraft.type_hints import MaybeOutcome, Participant


@dataclass(frozen=True)
class ByeParticipant:
    """Synthetic opponent for a player left without a partner.

    Never a roster player: takes no poison and never appears in statistics.
    """

    id: str = BYE_ID
    name: str = BYE_NAME
    is_bye: bool = True


BYE = ByeParticipant()


@dataclass
class Pairing:
    """One battle between two participants.

    Attributes
    ----------
    player1 : SessionPlayer
        First participant, always a real player.
    player2 : SessionPlayer or ByeParticipant
        Second participant, or the BYE placeholder.
    result : str or None
        None until reported, then the winner's id or ``"draw"``.
    """

    player1: Participant
    player2: Participant
    result: MaybeOutcome = None

    @property
    def is_bye(self) -> bool:
        return self.player1.is_bye or self.player2.is_bye

    @property
    def is_reported(self) -> bool:
        return self.result is not None

    @property
    def is_draw(self) -> bool:
        return self.result == RESULT_DRAW

    @property
    def participant_ids(self) -> Tuple[str, str]:
        return self.player1.id, self.player2.id

    def allowed_results(self) -> Tuple[str, ...]:
        """Results a user may report for this pairing."""
        return self.player1.id, RESULT_DRAW, self.player2.id

    def losers(self) -> List[Participant]:
        """Participants that take poison under the reported result.

        Both sides lose a draw. An unreported pairing has no losers.
        """
        if self.result is None:
            return []
        if self.is_draw:
            return [self.player1, self.player2]
        return [p for p in (self.player1, self.player2) if p.id != self.result]


@dataclass
class SessionEvent:
    """An entry in the session's ordered history.

    Attributes
    ----------
    type : str
        ``"elimination"`` or ``"sudden_death"``.
    player_id : str
        Player the event concerns.
    round : int
        Round the event happened in.
    battle : int
        Battle the event happened in.
    """

    type: str
    player_id: str
    round: int
    battle: int


@dataclass
class BattleOutcome:
    """What resolving one battle did to the session.

    Attributes
    ----------
    poison_dealt : int
        Poison applied per loss this battle.
    eliminated : list of SessionPlayer
        Players knocked out this battle (empty after a sudden death).
    revived : list of SessionPlayer
        Players brought back by sudden death.
    placement : int or None
        Placement shared by this battle's eliminations.
    champion : SessionPlayer or None
        Set when a single survivor remains.
    """

    poison_dealt: int
    eliminated: List[SessionPlayer] = field(default_factory=list)
    revived: List[SessionPlayer] = field(default_factory=list)
    placement: Optional[int] = None
    champion: Optional[SessionPlayer] = None

    @property
    def is_terminal(self) -> bool:
        return self.champion is not None

    @property
    def is_sudden_death(self) -> bool:
        return bool(self.revived)
