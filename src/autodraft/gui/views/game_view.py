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

"""
Game screen widgets.

This module contains the widgets shown while a session is battling:
- ResultSelector: Winner / Draw / Winner buttons for one pairing
- PlayerStatusGrid: Poison and treasures of every player
- GameView: The screen composing the above with the event log
"""

from typing import List, Optional

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt

from autodraft.constants import RESULT_DRAW
from autodraft.notifications import Notice
from autodraft.player import SessionPlayer
from autodraft.tournament import Pairing, SessionState

GRID_COLUMNS = 4


class ResultSelector(QtWidgets.QWidget):
    """
    Three exclusive buttons reporting a pairing's result.
    """

    result_selected = QtCore.pyqtSignal(int, str)

    def __init__(self, index: int, pairing: Pairing, parent=None):
        super().__init__(parent)
        self.index = index

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.group = QtWidgets.QButtonGroup(self)
        self.group.setExclusive(True)
        self.buttons = {}
        for result, text in (
            (pairing.player1.id, "Winner!"),
            (RESULT_DRAW, "Draw"),
            (pairing.player2.id, "Winner!"),
        ):
            button = QtWidgets.QPushButton(text)
            button.setCheckable(True)
            button.setChecked(pairing.result == result)
            button.clicked.connect(
                lambda _checked, r=result: self.result_selected.emit(self.index, r)
            )
            self.group.addButton(button)
            self.buttons[result] = button
            layout.addWidget(button)


class PlayerStatusGrid(QtWidgets.QWidget):
    """
    Cards showing each player's poison and treasures.

    Living players come first, then by name. Ghosts and eliminated players
    are marked.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.grid = QtWidgets.QGridLayout(self)
        self.grid.setSpacing(8)

    def display_players(self, players: List[SessionPlayer]):
        while self.grid.count():
            item = self.grid.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        ordered = sorted(players, key=lambda p: (p.is_eliminated, p.name.casefold()))
        for i, player in enumerate(ordered):
            card = QtWidgets.QGroupBox(player.name + (" 👻" if player.is_ghost else ""))
            card.setProperty("class", "PlayerStatusCard")
            if player.is_eliminated and not player.is_ghost:
                card.setEnabled(False)
            card_layout = QtWidgets.QVBoxLayout(card)
            card_layout.addWidget(QtWidgets.QLabel(f"Poison: {player.poison}"))
            card_layout.addWidget(QtWidgets.QLabel(f"Treasures: {player.treasures}"))
            self.grid.addWidget(card, i // GRID_COLUMNS, i % GRID_COLUMNS)


class GameView(QtWidgets.QWidget):
    """
    The battling screen: round info, player status, pairings and event log.
    """

    result_selected = QtCore.pyqtSignal(int, str)
    end_battle_requested = QtCore.pyqtSignal()
    abandon_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        # ===== GAME INFO =====
        self.lbl_round = QtWidgets.QLabel()
        self.lbl_round.setStyleSheet("font-size: 16pt; font-weight: 700;")
        self.lbl_hand_size = QtWidgets.QLabel()
        self.lbl_instructions = QtWidgets.QLabel()
        self.lbl_instructions.setStyleSheet("font-style: italic;")
        for label in (self.lbl_round, self.lbl_hand_size, self.lbl_instructions):
            layout.addWidget(label)

        # ===== PLAYER STATUS =====
        status_box = QtWidgets.QGroupBox("Player Status")
        status_layout = QtWidgets.QVBoxLayout(status_box)
        self.status_grid = PlayerStatusGrid()
        status_layout.addWidget(self.status_grid)
        layout.addWidget(status_box)

        # ===== PAIRINGS =====
        pairings_box = QtWidgets.QGroupBox("Battle Pairings")
        self.pairings_layout = QtWidgets.QVBoxLayout(pairings_box)
        layout.addWidget(pairings_box)

        # ===== EVENT LOG =====
        self.event_log = QtWidgets.QListWidget()
        self.event_log.setMaximumHeight(140)
        layout.addWidget(self.event_log)

        footer = QtWidgets.QHBoxLayout()
        btn_abandon = QtWidgets.QPushButton("Main Menu")
        btn_abandon.setToolTip("Leave the game without saving")
        btn_abandon.clicked.connect(self.abandon_requested.emit)
        self.btn_end_battle = QtWidgets.QPushButton("End Battle")
        self.btn_end_battle.setEnabled(False)
        self.btn_end_battle.clicked.connect(self.end_battle_requested.emit)
        footer.addWidget(btn_abandon)
        footer.addStretch()
        footer.addWidget(self.btn_end_battle)
        layout.addLayout(footer)

    def display(
        self,
        state: SessionState,
        players: List[SessionPlayer],
        pairings: List[Pairing],
    ):
        """Render the whole screen from the session."""
        self.lbl_round.setText(
            f"Round {state.round} (Battle {state.battle_in_round}/3)"
        )
        self.lbl_hand_size.setText(f"Current Hand Size: {state.hand_size}")
        self.lbl_instructions.setText(state.instructions)
        self.status_grid.display_players(players)
        self._display_pairings(pairings)
        self.set_ready(state.can_end_battle)

    def _display_pairings(self, pairings: List[Pairing]):
        while self.pairings_layout.count():
            item = self.pairings_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        for index, pairing in enumerate(pairings):
            row = QtWidgets.QWidget()
            row.setProperty("class", "PairingBox")
            row_layout = QtWidgets.QHBoxLayout(row)
            row_layout.setContentsMargins(4, 4, 4, 4)

            if pairing.is_bye:
                row_layout.addWidget(
                    QtWidgets.QLabel(f"{pairing.player1.name} has a BYE")
                )
            else:
                row_layout.addWidget(
                    QtWidgets.QLabel(
                        f"{pairing.player1.name}  vs.  {pairing.player2.name}"
                    )
                )
                row_layout.addStretch()
                selector = ResultSelector(index, pairing)
                selector.result_selected.connect(self.result_selected.emit)
                row_layout.addWidget(selector)

            self.pairings_layout.addWidget(row)

    def set_ready(self, ready: bool):
        self.btn_end_battle.setEnabled(ready)

    def append_notice(self, notice: Notice):
        item = QtWidgets.QListWidgetItem(notice.message)
        item.setData(Qt.ItemDataRole.UserRole, notice.kind)
        self.event_log.addItem(item)
        self.event_log.scrollToBottom()

    def clear_log(self):
        self.event_log.clear()


class GameOverView(QtWidgets.QWidget):
    """
    Champion announcement and final standings.

    A Save Results button appears while the results are not stored yet.
    """

    back_requested = QtCore.pyqtSignal()
    save_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(48, 24, 48, 24)

        self.lbl_winner = QtWidgets.QLabel()
        self.lbl_winner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_winner.setStyleSheet("font-size: 20pt; font-weight: 700;")
        layout.addWidget(self.lbl_winner)

        self.table = QtWidgets.QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Place", "Player"])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(
            QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers
        )
        self.table.horizontalHeader().setSectionResizeMode(
            1, QtWidgets.QHeaderView.ResizeMode.Stretch
        )
        layout.addWidget(self.table, 1)

        footer = QtWidgets.QHBoxLayout()
        btn_back = QtWidgets.QPushButton("Back to Main Menu")
        btn_back.clicked.connect(self.back_requested.emit)
        self.btn_save = QtWidgets.QPushButton("Save Results")
        self.btn_save.setToolTip("Results could not be saved; try again")
        self.btn_save.clicked.connect(self.save_requested.emit)
        self.btn_save.setVisible(False)
        footer.addStretch()
        footer.addWidget(btn_back)
        footer.addWidget(self.btn_save)
        footer.addStretch()
        layout.addLayout(footer)

    def display(
        self,
        winner: Optional[SessionPlayer],
        standings: List[SessionPlayer],
        saved: bool = True,
    ):
        self.set_saved(saved)
        self.lbl_winner.setText(f"{winner.name} is the Champion!" if winner else "")
        self.table.setRowCount(len(standings))
        for row, player in enumerate(standings):
            place = f"#{player.placement}" if player.placement else "-"
            self.table.setItem(row, 0, QtWidgets.QTableWidgetItem(place))
            self.table.setItem(row, 1, QtWidgets.QTableWidgetItem(player.name))

    def set_saved(self, saved: bool):
        self.btn_save.setVisible(not saved)
