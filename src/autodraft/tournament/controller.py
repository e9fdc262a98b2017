"""Session controller - orchestrates a draft from first pairing to game over.

This is the primary interface for running a session, coordinating the
pairing generator, the resolution engine and the roster store.
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
from typing import List, Optional, Sequence

from autodraft.constants import (
    BATTLES_PER_ROUND,
    CHAMPION_PLACEMENT,
    DEFAULT_PAIRING_MODE,
    MAX_HAND_SIZE,
    NOTICE_CHAMPION,
    NOTICE_DRAFT_START,
    NOTICE_PLAYER_ADDED,
    NOTICE_ROUND_ADVANCE,
)
from autodraft.exceptions import (
    ByeResultException,
    InvalidResultException,
    PairingModeException,
    PlayerCountException,
    SessionStateException,
)
from autodraft.notifications import Notifier
from autodraft.player import Player, SessionPlayer
from autodraft.roster import RosterStore
from autodraft.tournament.models import BattleOutcome, Pairing
from autodraft.tournament.pairing import PairingGenerator
from autodraft.tournament.resolution import ResolutionEngine
from autodraft.tournament.session import Session
from autodraft.tournament.state import SessionPhase
from autodraft.type_hints import Standings
from autodraft.utils import setup_logger
from autodraft.utils.validation import (
    validate_draft_selection,
    validate_pairing_mode,
    validate_player_count,
)

logger = setup_logger(__name__)


class SessionController:
    """Runs the single active session.

    This class coordinates session operations through specialized helpers:
    - PairingGenerator: builds each battle's pairings
    - ResolutionEngine: applies reported results
    - RosterStore: supplies players and receives the final statistics

    Every command runs to completion before returning; failed commands leave
    the previous state untouched. The one exception is a failed save at game
    over: the game stays finished and ``save_results`` can be retried.
    """

    def __init__(
        self,
        roster: RosterStore,
        rng: Optional[random.Random] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        """Initialize the controller.

        Args
        ----
        roster: Loaded roster store
        rng: Random source for pairings
        notifier: Channel for advisory notices
        """
        self.roster = roster
        self.notifier = notifier if notifier is not None else Notifier()
        self.pairing_generator = PairingGenerator(rng)
        self.resolution_engine = ResolutionEngine(self.notifier)

        self.session: Optional[Session] = None
        self.session_pairing_generator: Optional[PairingGenerator] = None
        self._final_standings: Standings = []
        self._finished: bool = False
        self._results_saved: bool = False

    # ========== Properties ==========

    @property
    def phase(self) -> SessionPhase:
        if self.session is None:
            return SessionPhase.IDLE
        if self._finished:
            return SessionPhase.GAME_OVER
        return SessionPhase.BATTLING

    @property
    def can_end_battle(self) -> bool:
        """Readiness gate: every pairing of the current battle is reported."""
        return (
            self.phase is SessionPhase.BATTLING and self.session.all_results_reported
        )

    @property
    def final_standings(self) -> Standings:
        """Standings ordered by placement, available once the game is over."""
        return list(self._final_standings)

    @property
    def results_saved(self) -> bool:
        """Whether the finished game's results reached the roster storage."""
        return self._results_saved

    @property
    def champion(self) -> Optional[SessionPlayer]:
        return self._final_standings[0] if self._final_standings else None

    # ========== Roster ==========

    def register_player(self, name: Optional[str]) -> Player:
        """Add a new player to the roster.

        Raises:
            PlayerNameValidationException: If the name is empty
        """
        player = self.roster.register_player(name)
        self.notifier.notify(NOTICE_PLAYER_ADDED, f"{player.name} has been added!")
        return player

    # ========== Draft ==========

    def begin_draft(
        self,
        selected_ids: Sequence[Optional[str]],
        num_players: Optional[int] = None,
        pairing_mode: str = DEFAULT_PAIRING_MODE,
        seed: Optional[int] = None,
    ) -> Session:
        """Start a new session with the selected roster players.

        Args
        ----
        selected_ids: Player id per seat; empty seats are ignored
        num_players: Seats requested; defaults to the number of seats given
        pairing_mode: ``"random"`` or ``"structured"`` (four players only)
        seed: Optional seed for reproducible pairings

        Returns
        -------
        The new session, already paired for battle 1

        Raises
        ------
        ValidationException: If the selection or settings are invalid; any
            existing session is left untouched
        """
        if num_players is None:
            num_players = len(selected_ids)

        count_check = validate_player_count(num_players, len(self.roster))
        if not count_check:
            raise PlayerCountException(count_check.error_message)

        mode_check = validate_pairing_mode(pairing_mode, num_players)
        if not mode_check:
            raise PairingModeException(mode_check.error_message)

        chosen = validate_draft_selection(
            selected_ids, num_players, self.roster.by_id().keys()
        )

        roster_players = self.roster.by_id()
        session = Session(
            players=[SessionPlayer.from_player(roster_players[pid]) for pid in chosen],
            pairing_mode=pairing_mode,
        )

        if seed is not None:
            generator = PairingGenerator(random.Random(seed))
        else:
            generator = self.pairing_generator

        self.session = session
        self.session_pairing_generator = generator
        self._final_standings = []
        self._finished = False
        self._results_saved = False

        self.notifier.clear()
        self.notifier.notify(
            NOTICE_DRAFT_START,
            f"A new draft has begun with {len(session.players)} players!",
        )
        self.session_pairing_generator.generate_pairings(session)
        logger.info(
            "Draft started: %s (%s pairing)",
            ", ".join(p.name for p in session.players),
            pairing_mode,
        )
        return session

    # ========== Results ==========

    def set_result(self, pairing_index: int, result: str) -> bool:
        """Report the result of one pairing in the current battle.

        Args
        ----
        pairing_index: Position of the pairing in the current battle
        result: Winner's id or ``"draw"``; may overwrite an earlier report

        Returns
        -------
        The recomputed readiness gate

        Raises
        ------
        SessionStateException: If no battle is in progress
        InvalidResultException: If the index or result is invalid
        ByeResultException: If the pairing is against the BYE
        """
        pairing = self._get_pairing(pairing_index)
        if pairing.is_bye:
            raise ByeResultException("A BYE pairing is decided automatically.")

        result = str(result)
        if result not in pairing.allowed_results():
            raise InvalidResultException(
                f"Result must be {pairing.player1.id!r}, {pairing.player2.id!r} or 'draw'"
            )

        pairing.result = result
        logger.debug(
            "Result for %s vs %s: %s",
            pairing.player1.name,
            pairing.player2.name,
            result,
        )
        return self.can_end_battle

    def _get_pairing(self, pairing_index: int) -> Pairing:
        if self.phase is not SessionPhase.BATTLING:
            raise SessionStateException("No battle is in progress.")
        pairings = self.session.pairings
        if not 0 <= pairing_index < len(pairings):
            raise InvalidResultException(f"No pairing at position {pairing_index}")
        return pairings[pairing_index]

    # ========== Progression ==========

    def end_battle(self) -> BattleOutcome:
        """Resolve the current battle and move to the next one.

        Returns
        -------
        The outcome of the resolved battle

        Raises
        ------
        SessionStateException: If results are still missing or no battle
            is in progress
        """
        if not self.can_end_battle:
            raise SessionStateException(
                "Every pairing needs a result before the battle can end."
            )

        session = self.session
        outcome = self.resolution_engine.resolve_battle(session)
        if outcome.is_terminal:
            self.game_over(outcome.champion)
            return outcome

        self._advance(session)
        self.session_pairing_generator.generate_pairings(session)
        return outcome

    def _advance(self, session: Session) -> None:
        """Move to the next battle, and to the next round every third battle."""
        session.battle += 1
        if (session.battle - 1) % BATTLES_PER_ROUND != 0:
            return

        session.round += 1
        if session.hand_size < MAX_HAND_SIZE:
            session.hand_size += 1
            self.notifier.notify(
                NOTICE_ROUND_ADVANCE,
                f"A new round begins! Hand size has increased to {session.hand_size}!",
            )
        logger.info(
            "Round %d begins (hand size %d)", session.round, session.hand_size
        )

    def game_over(self, winner: SessionPlayer) -> Standings:
        """Crown ``winner``, fold results into the roster and save it.

        The statistics are folded in exactly once. If saving fails the game
        still ends; ``save_results`` writes the roster again.

        Returns
        -------
        Final standings ordered by placement

        Raises
        ------
        RosterSaveException: If the roster could not be written
        """
        if self.session is None:
            raise SessionStateException("No session to finish.")
        if self._finished:
            raise SessionStateException("The game is already over.")

        session = self.session
        winner.placement = CHAMPION_PLACEMENT

        roster_players = self.roster.by_id()
        for player in session.players:
            roster_player = roster_players.get(player.id)
            if roster_player is None:
                logger.warning("Player %s is no longer on the roster", player.id)
                continue
            roster_player.stats.record_game(
                player.placement,
                player.elimination_round if player.is_eliminated else None,
            )

        self._final_standings = session.standings()
        self._finished = True
        self.notifier.notify(NOTICE_CHAMPION, f"{winner.name} is the Champion!")
        logger.info(
            "Game over after %d battles: %s",
            session.battle,
            ", ".join(f"#{p.placement} {p.name}" for p in self._final_standings),
        )
        self.save_results()
        return self.final_standings

    def save_results(self) -> None:
        """Write the roster holding this game's results.

        Raises
        ------
        SessionStateException: If the game is not over yet
        RosterSaveException: If the roster could not be written
        """
        if not self._finished:
            raise SessionStateException("The game is not over yet.")
        self._results_saved = False
        self.roster.save()
        self._results_saved = True

    def abandon(self) -> None:
        """Drop the current session without saving anything."""
        if self.session is not None:
            logger.info("Session abandoned at battle %d", self.session.battle)
        self.session = None
        self.session_pairing_generator = None
        self._final_standings = []
        self._finished = False
        self._results_saved = False

    def standings(self) -> List[SessionPlayer]:
        """Current standings, or final standings once the game is over."""
        if self._finished:
            return self.final_standings
        return self.session.standings() if self.session else []
