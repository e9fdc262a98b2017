from autodraft.player.base_player import Player, PlayerStats
from autodraft.player.session_player import SessionPlayer

__all__ = [
    "Player",
    "PlayerStats",
    "SessionPlayer",
]
