"""Session management for Auto Draft.

This package runs a single draft session: pairing each battle, resolving
reported results and folding the outcome back into the roster.
"""

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

from autodraft.tournament.controller import SessionController
from autodraft.tournament.models import (
    BYE,
    BattleOutcome,
    ByeParticipant,
    Pairing,
    SessionEvent,
)
from autodraft.tournament.pairing import PairingGenerator, generate_pairings
from autodraft.tournament.resolution import ResolutionEngine, poison_for_hand_size
from autodraft.tournament.session import Session
from autodraft.tournament.state import SessionPhase, SessionState

__all__ = [
    "SessionController",
    "Session",
    "SessionEvent",
    "SessionPhase",
    "SessionState",
    "Pairing",
    "ByeParticipant",
    "BYE",
    "BattleOutcome",
    "PairingGenerator",
    "generate_pairings",
    "ResolutionEngine",
    "poison_for_hand_size",
]
