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
Roster screens: main menu, player registration and statistics.
"""

from typing import List

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt

from autodraft.player import Player

TITLE_STYLE = """
    QLabel {
        font-size: 20pt;
        font-weight: 700;
        color: #2d5a27;
        margin-bottom: 10px;
    }
"""


def _title(text: str) -> QtWidgets.QLabel:
    label = QtWidgets.QLabel(text)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    label.setStyleSheet(TITLE_STYLE)
    return label


class MainMenuView(QtWidgets.QWidget):
    """
    Landing screen with the three entry points of the application.
    """

    add_player_requested = QtCore.pyqtSignal()
    stats_requested = QtCore.pyqtSignal()
    draft_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setProperty("class", "MainMenu")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setContentsMargins(48, 48, 48, 48)
        layout.addStretch()
        layout.addWidget(_title("Auto Draft"))

        for text, signal in (
            ("Add Player", self.add_player_requested),
            ("View Stats", self.stats_requested),
            ("Start Draft", self.draft_requested),
        ):
            button = QtWidgets.QPushButton(text)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setMinimumWidth(200)
            button.clicked.connect(signal.emit)
            layout.addWidget(button, alignment=Qt.AlignmentFlag.AlignCenter)

        layout.addStretch()


class AddPlayerView(QtWidgets.QWidget):
    """
    Form for registering a new roster player.
    """

    save_requested = QtCore.pyqtSignal(str)
    back_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(48, 48, 48, 48)
        layout.addWidget(_title("Add Player"))

        self.name_input = QtWidgets.QLineEdit()
        self.name_input.setPlaceholderText("Player name")
        self.name_input.returnPressed.connect(self._on_save)
        layout.addWidget(self.name_input)

        buttons = QtWidgets.QHBoxLayout()
        self.btn_back = QtWidgets.QPushButton("Back")
        self.btn_back.clicked.connect(self.back_requested.emit)
        self.btn_save = QtWidgets.QPushButton("Save Player")
        self.btn_save.clicked.connect(self._on_save)
        buttons.addWidget(self.btn_back)
        buttons.addStretch()
        buttons.addWidget(self.btn_save)
        layout.addLayout(buttons)
        layout.addStretch()

    def _on_save(self):
        self.save_requested.emit(self.name_input.text())

    def clear(self):
        self.name_input.clear()


class StatsView(QtWidgets.QWidget):
    """
    Table of every roster player's games, win rate and average placement.
    """

    back_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.addWidget(_title("Player Stats"))

        self.empty_label = QtWidgets.QLabel("No players found. Add some players first!")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        self.table = QtWidgets.QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(
            ["Player Name", "Games Played", "Win Rate", "Avg. Placement"]
        )
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(
            QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers
        )
        self.table.horizontalHeader().setSectionResizeMode(
            0, QtWidgets.QHeaderView.ResizeMode.Stretch
        )
        layout.addWidget(self.table, 1)

        btn_back = QtWidgets.QPushButton("Back")
        btn_back.clicked.connect(self.back_requested.emit)
        layout.addWidget(btn_back, alignment=Qt.AlignmentFlag.AlignLeft)

    def display_players(self, players: List[Player]):
        """Fill the table; players are expected in display order."""
        self.empty_label.setVisible(not players)
        self.table.setVisible(bool(players))
        self.table.setRowCount(len(players))

        for row, player in enumerate(players):
            stats = player.stats
            win_rate = (
                f"{stats.win_rate * 100:.1f}%" if stats.win_rate is not None else "N/A"
            )
            avg = (
                f"{stats.average_placement:.2f}"
                if stats.average_placement is not None
                else "N/A"
            )
            for col, text in enumerate(
                (player.name, str(stats.games_played), win_rate, avg)
            ):
                item = QtWidgets.QTableWidgetItem(text)
                if col:
                    item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self.table.setItem(row, col, item)
