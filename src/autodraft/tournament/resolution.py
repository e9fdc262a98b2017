"""Battle resolution: poison, eliminations, placements and treasures.

This module applies the reported results of a battle to the session.
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

from typing import List, Optional

from autodraft.constants import (
    DEFAULT_POISON,
    ELIMINATION_POISON,
    EVENT_ELIMINATION,
    EVENT_SUDDEN_DEATH,
    NOTICE_ELIMINATION,
    NOTICE_SUDDEN_DEATH,
    NOTICE_WARNING,
    POISON_TABLE,
    SUDDEN_DEATH_POISON,
    UNHEALTHY_POISON,
)
from autodraft.notifications import Notifier
from autodraft.player import SessionPlayer
from autodraft.tournament.models import BattleOutcome, Pairing
from autodraft.tournament.session import Session
from autodraft.utils import setup_logger

logger = setup_logger(__name__)


def poison_for_hand_size(hand_size: int) -> int:
    """Poison dealt per loss at the given hand size.

    >>> [poison_for_hand_size(h) for h in (3, 4, 5, 6, 7, 8, 12)]
    [1, 1, 2, 3, 5, 5, 5]
    """
    return POISON_TABLE.get(hand_size, DEFAULT_POISON)


class ResolutionEngine:
    """Applies a battle's results to the session.

    This class is responsible for:
    - Dealing poison to the losers (both sides of a draw)
    - Detecting eliminations and low-health players
    - Assigning shared placements to simultaneous eliminations
    - Reversing an elimination that would leave nobody standing
    - Handing out treasures to the survivors
    """

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier if notifier is not None else Notifier()

    def resolve_battle(self, session: Session) -> BattleOutcome:
        """Resolve the current battle of ``session``.

        Every pairing is expected to carry a result; unreported pairings and
        unknown players are skipped with a warning.

        Args:
            session: Session whose current pairings are resolved

        Returns:
            BattleOutcome describing eliminations, sudden death and champion
        """
        outcome = BattleOutcome(poison_dealt=poison_for_hand_size(session.hand_size))

        for pairing in session.pairings:
            self._apply_pairing(session, pairing, outcome.poison_dealt)

        outcome.eliminated = self._check_eliminations(session)
        remaining = session.alive_players

        if not remaining:
            outcome.revived = self._sudden_death(session, outcome.eliminated)
            outcome.eliminated = []
            remaining = session.alive_players
        elif outcome.eliminated:
            outcome.placement = len(remaining) + 1
            for player in outcome.eliminated:
                player.placement = outcome.placement
            logger.info(
                "Placement %d to %s",
                outcome.placement,
                ", ".join(p.name for p in outcome.eliminated),
            )

        if len(remaining) == 1:
            outcome.champion = remaining[0]
            logger.info("%s is the last player standing", outcome.champion.name)
            return outcome

        for player in remaining:
            player.gain_treasure()

        return outcome

    def _apply_pairing(self, session: Session, pairing: Pairing, poison: int) -> None:
        """Deal poison for a single pairing."""
        if not pairing.is_reported:
            logger.warning(
                "Skipping unreported pairing %s vs %s",
                pairing.player1.name,
                pairing.player2.name,
            )
            return

        for loser in pairing.losers():
            if loser.is_bye:
                continue
            player = session.get_player(loser.id)
            if player is None:
                logger.warning("Skipping unknown player %s in pairing", loser.id)
                continue
            player.take_poison(poison)

    def _check_eliminations(self, session: Session) -> List[SessionPlayer]:
        """Knock out every player at or above the poison limit."""
        newly_eliminated = []
        for player in session.players:
            if player.is_eliminated:
                continue
            if player.poison >= ELIMINATION_POISON:
                player.eliminate(session.round)
                session.record_event(EVENT_ELIMINATION, player)
                newly_eliminated.append(player)
                self.notifier.notify(
                    NOTICE_ELIMINATION, f"{player.name} has been eliminated!"
                )
            elif player.poison > UNHEALTHY_POISON:
                self.notifier.notify(
                    NOTICE_WARNING,
                    f"{player.name} is looking unhealthy with {player.poison} poison...",
                )
        return newly_eliminated

    def _sudden_death(
        self, session: Session, eliminated: List[SessionPlayer]
    ) -> List[SessionPlayer]:
        """Bring back everyone knocked out this battle for a replay."""
        for player in eliminated:
            player.revive_for_sudden_death()
            session.record_event(EVENT_SUDDEN_DEATH, player)

        names = " and ".join(p.name for p in eliminated)
        self.notifier.notify(
            NOTICE_SUDDEN_DEATH,
            f"SUDDEN DEATH! {names} were all eliminated! Their poison is reset "
            f"to {SUDDEN_DEATH_POISON}. Battle again!",
        )
        return eliminated
