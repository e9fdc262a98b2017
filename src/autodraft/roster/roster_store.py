"""The roster of known players and their statistics."""

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

import json
from typing import Dict, Iterable, List, Optional

from autodraft.constants import ROSTER_STORAGE_KEY
from autodraft.exceptions import InvalidPlayerDataException, RosterLoadException
from autodraft.player import Player
from autodraft.utils import setup_logger
from autodraft.utils.validation import validate_player_name_strict
from autodraft.roster.storage import KeyValueStore

logger = setup_logger(__name__)


class RosterStore:
    """Owns the roster: loads it once, saves it after changes.

    The roster is kept as a JSON array under a single key of the backing
    key-value store.
    """

    def __init__(self, storage: KeyValueStore, key: str = ROSTER_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self.players: List[Player] = []

    def load(self) -> List[Player]:
        """Read the roster from storage, replacing what is held in memory.

        Returns:
            The loaded players (empty when nothing was stored yet)

        Raises:
            RosterLoadException: If the stored document cannot be parsed
        """
        raw = self.storage.get(self.key)
        if not raw:
            self.players = []
            logger.info("No saved roster found under %s", self.key)
            return self.players

        try:
            entries = json.loads(raw)
        except json.JSONDecodeError as e:
            raise RosterLoadException(f"Roster is not valid JSON: {e}") from e
        if not isinstance(entries, list):
            raise RosterLoadException("Roster document must be a list of players")

        try:
            self.players = [Player.from_dict(entry) for entry in entries]
        except InvalidPlayerDataException as e:
            raise RosterLoadException(str(e)) from e

        logger.info("Loaded %d players from roster", len(self.players))
        return self.players

    def save(self, players: Optional[Iterable[Player]] = None) -> None:
        """Write the roster to storage.

        Args:
            players: Players to store; defaults to the roster held in memory
        """
        players = list(self.players if players is None else players)
        document = json.dumps([p.to_dict() for p in players])
        self.storage.set(self.key, document)
        self.players = players
        logger.info("Saved %d players to roster", len(self.players))

    def register_player(self, name: Optional[str]) -> Player:
        """Add a new player with empty statistics and persist the roster.

        The player only joins the roster once the save succeeded.

        Raises:
            PlayerNameValidationException: If the name is empty or invalid
            RosterSaveException: If the roster could not be written
        """
        player = Player(name=validate_player_name_strict(name))
        self.save(self.players + [player])
        logger.info("Added player: %s (%s)", player.name, player.id)
        return player

    def get(self, player_id: str) -> Optional[Player]:
        return self.by_id().get(str(player_id))

    def by_id(self) -> Dict[str, Player]:
        return {p.id: p for p in self.players}

    def sorted_by_name(self) -> List[Player]:
        """Players in case-insensitive name order, as shown on the stats screen."""
        return sorted(self.players, key=lambda p: p.name.casefold())

    def __len__(self) -> int:
        return len(self.players)
