"""Battle pairing generation.

This module builds the pairings for each battle, topping up odd player
counts with a ghost (the last player knocked out) or, before anyone has
been eliminated, with the BYE placeholder.
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

import random
from typing import List, Optional

from autodraft.constants import PAIRING_STRUCTURED
from autodraft.tournament.models import BYE, Pairing
from autodraft.tournament.session import Session
from autodraft.type_hints import Participant
from autodraft.utils import setup_logger

logger = setup_logger(__name__)


class PairingGenerator:
    """Generates the pairings for each battle of a session.

    This class is responsible for:
    - Releasing last battle's ghost
    - Evening out odd player counts with a ghost or a BYE
    - Shuffling and pairing the pool
    - Auto-resolving pairings against the BYE
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the pairing generator.

        Args:
            rng: Random source; pass a seeded ``random.Random`` for
                reproducible pairings
        """
        self.rng = rng if rng is not None else random.Random()

    def generate_pairings(self, session: Session) -> List[Pairing]:
        """Generate and store the pairings for the session's current battle.

        Args:
            session: The session to pair; its ghost flags, poison and
                pairings are updated

        Returns:
            The new pairings, also stored on ``session.pairings``
        """
        self._release_ghost(session)

        pool: List[Participant] = [
            p for p in session.players if not p.is_eliminated and not p.is_ghost
        ]

        if len(pool) % 2 != 0:
            pool.append(self._fill_odd_seat(session))

        if session.pairing_mode == PAIRING_STRUCTURED:
            logger.debug("Structured pairing uses the random pairing order")

        self.rng.shuffle(pool)

        pairings = []
        for i in range(0, len(pool), 2):
            player1 = pool[i]
            player2 = pool[i + 1] if i + 1 < len(pool) else BYE
            pairings.append(self._make_pairing(player1, player2))

        session.pairings = pairings
        logger.info(
            "Battle %d pairings: %s",
            session.battle,
            ", ".join(f"{p.player1.name} vs {p.player2.name}" for p in pairings),
        )
        return pairings

    def _release_ghost(self, session: Session) -> None:
        """Clear last battle's ghost before forming the pool."""
        ghost = session.ghost
        if ghost is not None:
            ghost.is_ghost = False
            logger.debug("%s is no longer the ghost", ghost.name)

    def _fill_odd_seat(self, session: Session) -> Participant:
        """Pick the extra participant for an odd pool.

        Returns:
            The last eliminated player turned ghost, or the BYE if nobody
            has been eliminated yet
        """
        ghost = session.last_eliminated()
        if ghost is None:
            logger.info("Odd player count and no eliminations yet: adding a BYE")
            return BYE

        ghost.become_ghost()
        logger.info("%s returns as the ghost", ghost.name)
        return ghost

    @staticmethod
    def _make_pairing(player1: Participant, player2: Participant) -> Pairing:
        """Build a pairing, settling it at once when the BYE is involved."""
        if player1.is_bye:
            player1, player2 = player2, player1
        if player2.is_bye:
            return Pairing(player1=player1, player2=player2, result=player1.id)
        return Pairing(player1=player1, player2=player2)


def generate_pairings(
    session: Session, rng: Optional[random.Random] = None
) -> List[Pairing]:
    """Convenience wrapper around ``PairingGenerator.generate_pairings``."""
    return PairingGenerator(rng).generate_pairings(session)
