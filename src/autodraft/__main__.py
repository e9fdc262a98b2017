"""Launch the Auto Draft desktop application."""

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

import random
import sys

from autodraft import APP_NAME
from autodraft.config import AppConfig
from autodraft.exceptions import AutoDraftException
from autodraft.roster import JsonFileKeyValueStore, RosterStore
from autodraft.tournament import SessionController
from autodraft.utils import configure_logging, setup_logger

logger = setup_logger(__name__)


def build_controller(config: AppConfig) -> SessionController:
    """Load the roster and wire up a controller for ``config``."""
    roster = RosterStore(JsonFileKeyValueStore(config.roster_file))
    roster.load()
    rng = random.Random(config.seed) if config.seed is not None else None
    return SessionController(roster, rng=rng)


def main() -> int:
    try:
        config = AppConfig.from_env()
    except AutoDraftException as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level, config.log_file)

    try:
        controller = build_controller(config)
    except AutoDraftException:
        logger.exception("Could not load the roster from %s", config.roster_file)
        return 1

    from PyQt6 import QtWidgets

    from autodraft.gui import AutoDraftMainWindow

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = AutoDraftMainWindow(controller)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
