"""Main GUI window for Auto Draft."""

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

from PyQt6 import QtWidgets
from PyQt6.QtWidgets import QMessageBox

from autodraft import APP_NAME, APP_VERSION
from autodraft.constants import NOTICE_PLAYER_ADDED, NOTICE_SUDDEN_DEATH
from autodraft.exceptions import AutoDraftException
from autodraft.gui.views import (
    AddPlayerView,
    DraftSetupView,
    GameOverView,
    GameView,
    MainMenuView,
    StatsView,
)
from autodraft.notifications import Notice
from autodraft.tournament import SessionController, SessionPhase, SessionState
from autodraft.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class AutoDraftMainWindow(QtWidgets.QMainWindow):
    """Main application window for Auto Draft.

    Renders the controller's state and forwards user actions to it; no game
    rule lives here.
    """

    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.controller = controller
        self.controller.notifier.subscribe(self._on_notice)
        self._setup_ui()
        self.show_main_menu()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 900, 760)

        # Use QStackedWidget so each screen replaces the previous one
        self.stacked_widget = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stacked_widget)

        self.main_menu = MainMenuView(self)
        self.add_player_view = AddPlayerView(self)
        self.stats_view = StatsView(self)
        self.draft_view = DraftSetupView(self)
        self.game_view = GameView(self)
        self.game_over_view = GameOverView(self)

        for view in (
            self.main_menu,
            self.add_player_view,
            self.stats_view,
            self.draft_view,
            self.game_view,
            self.game_over_view,
        ):
            self.stacked_widget.addWidget(view)

        self.main_menu.add_player_requested.connect(self.show_add_player)
        self.main_menu.stats_requested.connect(self.show_stats)
        self.main_menu.draft_requested.connect(self.show_draft_setup)

        self.add_player_view.save_requested.connect(self.save_player)
        self.add_player_view.back_requested.connect(self.show_main_menu)
        self.stats_view.back_requested.connect(self.show_main_menu)
        self.draft_view.back_requested.connect(self.show_main_menu)
        self.draft_view.begin_requested.connect(self.begin_draft)

        self.game_view.result_selected.connect(self.set_result)
        self.game_view.end_battle_requested.connect(self.end_battle)
        self.game_view.abandon_requested.connect(self.abandon_game)
        self.game_over_view.back_requested.connect(self.show_main_menu)
        self.game_over_view.save_requested.connect(self.save_results)

        self.statusBar().showMessage("Ready")
        logger.info(f"{APP_NAME} v{APP_VERSION} started.")

    # ========== Navigation ==========

    def show_main_menu(self):
        self.stacked_widget.setCurrentWidget(self.main_menu)

    def show_add_player(self):
        self.add_player_view.clear()
        self.stacked_widget.setCurrentWidget(self.add_player_view)

    def show_stats(self):
        self.stats_view.display_players(self.controller.roster.sorted_by_name())
        self.stacked_widget.setCurrentWidget(self.stats_view)

    def show_draft_setup(self):
        self.draft_view.setup(self.controller.roster.players)
        self.stacked_widget.setCurrentWidget(self.draft_view)

    def show_game_over(self):
        self.game_over_view.display(
            self.controller.champion,
            self.controller.final_standings,
            self.controller.results_saved,
        )
        self.stacked_widget.setCurrentWidget(self.game_over_view)

    # ========== Actions ==========

    def save_player(self, name: str):
        try:
            self.controller.register_player(name)
        except AutoDraftException as e:
            self._show_error("Add Player", e)
            return
        self.add_player_view.clear()
        self.show_main_menu()

    def begin_draft(self, selected_ids: list, num_players: int, pairing_mode: str):
        self.game_view.clear_log()
        try:
            self.controller.begin_draft(selected_ids, num_players, pairing_mode)
        except AutoDraftException as e:
            self._show_error("Start Draft", e)
            return
        self.refresh_game()
        self.stacked_widget.setCurrentWidget(self.game_view)

    def set_result(self, pairing_index: int, result: str):
        try:
            ready = self.controller.set_result(pairing_index, result)
        except AutoDraftException as e:
            self._show_error("Report Result", e)
            return
        self.game_view.set_ready(ready)

    def end_battle(self):
        try:
            self.controller.end_battle()
        except AutoDraftException as e:
            self._show_error("End Battle", e)

        # a failed save still ends the game
        if self.controller.phase is SessionPhase.GAME_OVER:
            self.show_game_over()
            return
        self.refresh_game()

    def save_results(self):
        try:
            self.controller.save_results()
        except AutoDraftException as e:
            self._show_error("Save Results", e)
        self.game_over_view.set_saved(self.controller.results_saved)

    def abandon_game(self):
        if self.controller.phase is SessionPhase.BATTLING:
            reply = QMessageBox.question(
                self,
                "Leave Game",
                "Leave the game? Results of this game will not be saved.",
            )
            if reply != QMessageBox.StandardButton.Yes:
                return
        self.controller.abandon()
        self.show_main_menu()

    def refresh_game(self):
        session = self.controller.session
        if session is None:
            return
        self.game_view.display(
            SessionState.compute(self.controller), session.players, session.pairings
        )

    # ========== Notices ==========

    def _on_notice(self, notice: Notice):
        self.game_view.append_notice(notice)
        self.statusBar().showMessage(notice.message)
        if notice.kind == NOTICE_SUDDEN_DEATH:
            QMessageBox.warning(self, "Sudden Death", notice.message)
        elif notice.kind == NOTICE_PLAYER_ADDED:
            QMessageBox.information(self, "Add Player", notice.message)

    def _show_error(self, title: str, error: Exception):
        logger.warning("%s failed: %s", title, error)
        QMessageBox.warning(self, title, str(error))
