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
Draft setup screen: number of players, pairing mode and seat selection.
"""

from typing import List

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt

from autodraft.constants import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    PAIRING_RANDOM,
    PAIRING_STRUCTURED,
    STRUCTURED_PLAYER_COUNT,
)
from autodraft.player import Player


class DraftSetupView(QtWidgets.QWidget):
    """
    Lets the user pick how many players take part and who fills each seat.

    Emits ``begin_requested(selected_ids, num_players, pairing_mode)``; empty
    seats are sent as empty strings so the controller can reject them.
    """

    begin_requested = QtCore.pyqtSignal(list, int, str)
    back_requested = QtCore.pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._players: List[Player] = []
        self._seat_selectors: List[QtWidgets.QComboBox] = []

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(48, 24, 48, 24)

        self.message_label = QtWidgets.QLabel(
            f"You need at least {MIN_PLAYERS} saved players to start a draft."
        )
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.message_label)

        form = QtWidgets.QFormLayout()
        self.num_players_select = QtWidgets.QComboBox()
        self.num_players_select.currentIndexChanged.connect(self._on_count_changed)
        form.addRow("Number of Players:", self.num_players_select)

        self.pairing_mode_select = QtWidgets.QComboBox()
        form.addRow("Pairing Mode:", self.pairing_mode_select)
        self.form_container = QtWidgets.QWidget()
        self.form_container.setLayout(form)
        layout.addWidget(self.form_container)

        self.seats_layout = QtWidgets.QFormLayout()
        self.seats_container = QtWidgets.QWidget()
        self.seats_container.setLayout(self.seats_layout)
        layout.addWidget(self.seats_container)
        layout.addStretch()

        buttons = QtWidgets.QHBoxLayout()
        btn_back = QtWidgets.QPushButton("Back")
        btn_back.clicked.connect(self.back_requested.emit)
        self.btn_begin = QtWidgets.QPushButton("Begin Draft")
        self.btn_begin.clicked.connect(self._on_begin)
        buttons.addWidget(btn_back)
        buttons.addStretch()
        buttons.addWidget(self.btn_begin)
        layout.addLayout(buttons)

    def setup(self, players: List[Player]):
        """Rebuild the form for the current roster."""
        self._players = list(players)
        enough = len(self._players) >= MIN_PLAYERS

        self.message_label.setVisible(not enough)
        self.form_container.setVisible(enough)
        self.seats_container.setVisible(enough)
        self.btn_begin.setVisible(enough)
        if not enough:
            return

        self.num_players_select.blockSignals(True)
        self.num_players_select.clear()
        for count in range(MIN_PLAYERS, min(MAX_PLAYERS, len(self._players)) + 1):
            self.num_players_select.addItem(str(count), count)
        self.num_players_select.blockSignals(False)
        self._on_count_changed()

    def selected_count(self) -> int:
        return self.num_players_select.currentData() or 0

    def _on_count_changed(self):
        count = self.selected_count()

        self.pairing_mode_select.clear()
        self.pairing_mode_select.addItem("Random", PAIRING_RANDOM)
        if count == STRUCTURED_PLAYER_COUNT:
            self.pairing_mode_select.addItem("Structured", PAIRING_STRUCTURED)

        while self.seats_layout.rowCount():
            self.seats_layout.removeRow(0)
        self._seat_selectors = []
        for seat in range(1, count + 1):
            select = QtWidgets.QComboBox()
            select.addItem("-- Select a Player --", "")
            for player in self._players:
                select.addItem(player.name, player.id)
            self.seats_layout.addRow(f"Player {seat}:", select)
            self._seat_selectors.append(select)

    def _on_begin(self):
        selected = [select.currentData() or "" for select in self._seat_selectors]
        self.begin_requested.emit(
            selected,
            self.selected_count(),
            self.pairing_mode_select.currentData() or PAIRING_RANDOM,
        )
