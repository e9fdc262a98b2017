"""A roster player and their cumulative statistics."""

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
from typing import Any, Dict, Optional

from autodraft.constants import BYE_ID, CHAMPION_PLACEMENT, MAX_PLAYERS
from autodraft.exceptions import InvalidPlayerDataException
from autodraft.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def _empty_placements() -> Dict[int, int]:
    return {rank: 0 for rank in range(1, MAX_PLAYERS + 1)}


def _int_keyed(data: Dict[Any, Any], field_name: str) -> Dict[int, int]:
    """Convert a stored ``{"3": 2}`` mapping into ``{3: 2}``."""
    try:
        return {int(k): int(v) for k, v in data.items()}
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidPlayerDataException(f"Invalid {field_name}: {data!r}") from e


@dataclass
class PlayerStats:
    """Cumulative statistics for a roster player.

    Attributes
    ----------
    games_played : int
        Number of completed games the player took part in.
    placements : dict of int to int
        Final rank (1..8) to the number of times it was achieved.
    elimination_rounds : dict of int to int
        Round number to the number of times the player was knocked out in it.
    """

    games_played: int = 0
    placements: Dict[int, int] = field(default_factory=_empty_placements)
    elimination_rounds: Dict[int, int] = field(default_factory=dict)

    @property
    def wins(self) -> int:
        """Games finished as champion."""
        return self.placements.get(CHAMPION_PLACEMENT, 0)

    @property
    def win_rate(self) -> Optional[float]:
        """Fraction of games won, or None before the first game."""
        if self.games_played <= 0:
            return None
        return self.wins / self.games_played

    @property
    def average_placement(self) -> Optional[float]:
        """Mean final placement over all tallied placements."""
        count = sum(self.placements.values())
        if count == 0:
            return None
        total = sum(rank * times for rank, times in self.placements.items())
        return total / count

    def record_game(
        self, placement: Optional[int], elimination_round: Optional[int]
    ) -> None:
        """Fold one finished game into the statistics.

        Args:
            placement: Final placement, or None if none was assigned
            elimination_round: Round the player was knocked out in, or None
        """
        self.games_played += 1
        if placement:
            self.placements[placement] = self.placements.get(placement, 0) + 1
        if elimination_round is not None:
            self.elimination_rounds[elimination_round] = (
                self.elimination_rounds.get(elimination_round, 0) + 1
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored document layout (camelCase, string keys)."""
        return {
            "gamesPlayed": self.games_played,
            "placements": {str(k): v for k, v in sorted(self.placements.items())},
            "eliminationRounds": {
                str(k): v for k, v in sorted(self.elimination_rounds.items())
            },
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlayerStats":
        """Deserialize statistics, filling any missing placement ranks with 0."""
        data = data or {}
        placements = _empty_placements()
        placements.update(_int_keyed(data.get("placements") or {}, "placements"))
        try:
            games_played = int(data.get("gamesPlayed", 0))
        except (TypeError, ValueError) as e:
            raise InvalidPlayerDataException(
                f"Invalid gamesPlayed: {data.get('gamesPlayed')!r}"
            ) from e
        return cls(
            games_played=games_played,
            placements=placements,
            elimination_rounds=_int_keyed(
                data.get("eliminationRounds") or {}, "eliminationRounds"
            ),
        )


class Player:
    """Represents a player saved on the roster.

    Roster players outlive any single session. Their statistics are only
    changed when a game finishes.

    Attributes:
        id: Unique identifier for the player
        name: Display name
        stats: Cumulative statistics
    """

    def __init__(
        self,
        name: str,
        player_id: Optional[str] = None,
        stats: Optional[PlayerStats] = None,
    ) -> None:
        self.id: str = player_id if player_id is not None else generate_id("Player")
        self.name: str = name
        self.stats: PlayerStats = stats if stats is not None else PlayerStats()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to the roster document layout."""
        return {"id": self.id, "name": self.name, "stats": self.stats.to_dict()}

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player from a roster document entry.

        Older documents stored numeric ids; these are normalised to strings.

        Raises:
            InvalidPlayerDataException: If id or name is missing, or the id is
                reserved for the BYE
        """
        if "id" not in player_data or "name" not in player_data:
            raise InvalidPlayerDataException(
                f"Player entry needs 'id' and 'name': {player_data!r}"
            )
        player_id = str(player_data["id"])
        if player_id == BYE_ID:
            raise InvalidPlayerDataException(
                f"Player id {BYE_ID!r} is reserved for the BYE"
            )
        return cls(
            name=str(player_data["name"]),
            player_id=player_id,
            stats=PlayerStats.from_dict(player_data.get("stats")),
        )

    def __repr__(self) -> str:
        return f"Player(name='{self.name}', id='{self.id}')"

    def __str__(self) -> str:
        return self.name
