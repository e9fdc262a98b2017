from autodraft.exceptions import RosterSaveException
from autodraft.player import SessionPlayer
from autodraft.roster import MemoryKeyValueStore
from autodraft.tournament import Pairing, Session

NAMES = ["Ana", "Ben", "Cleo", "Dev", "Eli", "Fay", "Gus", "Hana"]


class FlakyKeyValueStore(MemoryKeyValueStore):
    """Memory store whose writes fail while ``failing`` is set."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.failing = False

    def set(self, key, value):
        if self.failing:
            raise RosterSaveException("disk full")
        super().set(key, value)


def make_session(count, hand_size=3):
    """Session with players p1..pN and no pairings yet."""
    players = [SessionPlayer(f"p{i + 1}", NAMES[i]) for i in range(count)]
    session = Session(players)
    session.hand_size = hand_size
    return session


def pair(session, id1, id2, result=None):
    return Pairing(session.get_player(id1), session.get_player(id2), result)
