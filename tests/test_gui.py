import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from autodraft.gui import mainwindow  # noqa: E402
from autodraft.gui.views import DraftSetupView, StatsView  # noqa: E402
from autodraft.player import Player  # noqa: E402
from autodraft.tournament import SessionPhase  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def dialogs(monkeypatch):
    """Record message boxes instead of opening them."""
    shown = []

    def record(kind):
        def show(parent, title, text, *args, **kwargs):
            shown.append((kind, title, text))
            return QtWidgets.QMessageBox.StandardButton.Yes

        return show

    for kind in ("warning", "information", "question"):
        monkeypatch.setattr(mainwindow.QMessageBox, kind, record(kind))
    return shown


@pytest.fixture
def window(qapp, controller, dialogs):
    win = mainwindow.AutoDraftMainWindow(controller)
    yield win
    win.close()


def _players(count):
    return [Player(f"P{i}", player_id=f"id{i}") for i in range(count)]


def test_draft_setup_offers_structured_only_for_four(qapp):
    view = DraftSetupView()
    view.setup(_players(5))

    counts = [view.num_players_select.itemData(i) for i in range(view.num_players_select.count())]
    assert counts == [2, 3, 4, 5]

    view.num_players_select.setCurrentIndex(counts.index(4))
    modes = [view.pairing_mode_select.itemData(i) for i in range(view.pairing_mode_select.count())]
    assert modes == ["random", "structured"]
    assert len(view._seat_selectors) == 4

    view.num_players_select.setCurrentIndex(counts.index(5))
    assert view.pairing_mode_select.count() == 1


def test_draft_setup_sends_empty_seats(qapp):
    view = DraftSetupView()
    view.setup(_players(3))
    emitted = []
    view.begin_requested.connect(lambda ids, count, mode: emitted.append((ids, count, mode)))

    view._seat_selectors[0].setCurrentIndex(1)
    view.btn_begin.click()

    assert emitted == [(["id0", ""], 2, "random")]


def test_draft_setup_needs_two_players(qapp):
    view = DraftSetupView()
    view.setup(_players(1))
    assert view.btn_begin.isHidden()


def test_stats_view_shows_na_before_first_game(qapp):
    view = StatsView()
    player = Player("Ana", player_id="a")
    view.display_players([player])
    assert view.table.item(0, 2).text() == "N/A"

    player.stats.record_game(1, None)
    view.display_players([player])
    assert view.table.item(0, 2).text() == "100.0%"
    assert view.table.item(0, 3).text() == "1.00"


def test_window_runs_a_battle(window, controller, roster_ids):
    window.begin_draft(roster_ids[:4], 4, "random")

    assert window.stacked_widget.currentWidget() is window.game_view
    assert window.game_view.event_log.item(0).text() == "A new draft has begun with 4 players!"
    assert not window.game_view.btn_end_battle.isEnabled()

    for index, pairing in enumerate(controller.session.pairings):
        window.set_result(index, pairing.player1.id)
    assert window.game_view.btn_end_battle.isEnabled()

    window.end_battle()
    assert controller.session.battle == 2
    assert window.game_view.lbl_round.text() == "Round 1 (Battle 2/3)"


def test_window_reports_rejected_draft(window, controller, roster_ids, dialogs):
    window.begin_draft([roster_ids[0], roster_ids[0]], 2, "random")

    assert controller.phase is SessionPhase.IDLE
    assert dialogs == [
        ("warning", "Start Draft", "Each player can only be selected once.")
    ]


def test_window_add_player(window, controller, dialogs):
    window.save_player("Zed")

    assert controller.roster.players[-1].name == "Zed"
    assert ("information", "Add Player", "Zed has been added!") in dialogs
    assert window.stacked_widget.currentWidget() is window.main_menu


def test_window_abandon_asks_first(window, controller, roster_ids, dialogs):
    window.begin_draft(roster_ids[:2], 2, "random")
    window.abandon_game()

    assert dialogs[-1][0] == "question"
    assert controller.phase is SessionPhase.IDLE
    assert window.stacked_widget.currentWidget() is window.main_menu


def test_window_shows_champion(window, controller, roster_ids):
    window.begin_draft(roster_ids[:2], 2, "random")
    while controller.phase is SessionPhase.BATTLING:
        pairing = controller.session.pairings[0]
        window.set_result(0, pairing.player1.id)
        window.end_battle()

    assert window.stacked_widget.currentWidget() is window.game_over_view
    assert window.game_over_view.lbl_winner.text() == f"{controller.champion.name} is the Champion!"
    assert window.game_over_view.table.item(0, 0).text() == "#1"


def test_window_shows_game_over_when_save_fails(window, controller, roster_ids, storage, dialogs):
    window.begin_draft(roster_ids[:2], 2, "random")
    storage.failing = True
    while controller.phase is SessionPhase.BATTLING:
        window.set_result(0, controller.session.pairings[0].player1.id)
        window.end_battle()

    assert window.stacked_widget.currentWidget() is window.game_over_view
    assert dialogs[-1][:2] == ("warning", "End Battle")
    assert not window.game_over_view.btn_save.isHidden()

    window.save_results()
    assert not window.game_over_view.btn_save.isHidden()

    storage.failing = False
    window.save_results()
    assert controller.results_saved
    assert window.game_over_view.btn_save.isHidden()
