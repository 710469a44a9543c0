# SwissTour
# Copyright (C) 2025  SwissTour developers
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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
APP_NAME = "SwissTour"

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# A bye is always a full point, but never counted as a win
BYE_SCORE = WIN_SCORE

# Result strings (persisted form)
RESULT_WHITE_WIN = "1-0"
RESULT_BLACK_WIN = "0-1"
RESULT_DRAW = "0.5-0.5"

# Colour history entries (persisted form)
COLOR_WHITE = "white"
COLOR_BLACK = "black"
COLOR_BYE = "bye"

# Number of most recent non-bye colours inspected for colour compatibility
COLOR_LOOKBACK = 2

# Tournament length limits
MIN_ROUNDS = 3
MAX_ROUNDS = 7
DEFAULT_ROUNDS = 5

# Fewest players needed to start a tournament
MIN_PLAYERS = 2

# Environment variable overriding the log folder
LOG_DIR_ENV = "SWISSTOUR_LOG_DIR"
