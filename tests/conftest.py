import random

import pytest

from autodraft.notifications import Notifier
from autodraft.roster import RosterStore
from autodraft.tournament import SessionController

from helpers import NAMES, FlakyKeyValueStore


@pytest.fixture
def storage():
    return FlakyKeyValueStore()


@pytest.fixture
def roster(storage):
    store = RosterStore(storage)
    for name in NAMES:
        store.register_player(name)
    return store


@pytest.fixture
def roster_ids(roster):
    return [p.id for p in roster.players]


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def controller(roster, notifier):
    return SessionController(roster, rng=random.Random(7), notifier=notifier)
