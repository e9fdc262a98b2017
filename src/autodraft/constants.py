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

# --- Persistence ---
ROSTER_STORAGE_KEY = "autoBattlerPlayers"
ROSTER_FILE_NAME = "roster.json"
DEFAULT_DATA_DIR_NAME = ".autodraft"

# --- Draft setup ---
MIN_PLAYERS = 2
MAX_PLAYERS = 8
STRUCTURED_PLAYER_COUNT = 4  # Structured mode is only offered for 4 players

# Pairing modes
PAIRING_RANDOM = "random"
PAIRING_STRUCTURED = "structured"
PAIRING_MODES = (PAIRING_RANDOM, PAIRING_STRUCTURED)
DEFAULT_PAIRING_MODE = PAIRING_RANDOM

# --- Session progression ---
STARTING_ROUND = 1
STARTING_BATTLE = 1
BATTLES_PER_ROUND = 3
STARTING_HAND_SIZE = 3
MAX_HAND_SIZE = 8

# --- Player resources ---
STARTING_POISON = 0
STARTING_TREASURES = 1
MAX_TREASURES = 5

# --- Poison ---
ELIMINATION_POISON = 10  # Eliminated at or above this
UNHEALTHY_POISON = 6  # Warned above this
SUDDEN_DEATH_POISON = 9  # One hit from elimination
GHOST_POISON = 0

# Hand size -> poison taken per loss or draw
POISON_TABLE = {3: 1, 4: 1, 5: 2, 6: 3, 7: 5, 8: 5}
DEFAULT_POISON = 5  # Hand sizes beyond the table

# --- Results ---
RESULT_DRAW = "draw"

# --- BYE placeholder ---
BYE_ID = "bye"
BYE_NAME = "BYE"

# --- Placements ---
CHAMPION_PLACEMENT = 1

# --- Notification kinds ---
NOTICE_DRAFT_START = "draft_start"
NOTICE_ELIMINATION = "elimination"
NOTICE_WARNING = "warning"
NOTICE_ROUND_ADVANCE = "round_advance"
NOTICE_SUDDEN_DEATH = "sudden_death"
NOTICE_CHAMPION = "champion"
NOTICE_PLAYER_ADDED = "player_added"

# --- Session history event types ---
EVENT_ELIMINATION = "elimination"
EVENT_SUDDEN_DEATH = "sudden_death"
