"""Tournament controllers: result entry, tiebreaks, standings and rounds."""

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

from swisstour.controllers.tournament.result_recorder import ResultRecorder
from swisstour.controllers.tournament.round_manager import RoundManager
from swisstour.controllers.tournament.standings import (
    StandingRow,
    compute_standings,
    live_points_for_player,
    tournament_winner,
)
from swisstour.controllers.tournament.tiebreak_calculator import TiebreakCalculator

__all__ = [
    "ResultRecorder",
    "RoundManager",
    "StandingRow",
    "TiebreakCalculator",
    "compute_standings",
    "live_points_for_player",
    "tournament_winner",
]
