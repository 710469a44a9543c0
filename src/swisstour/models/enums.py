"""Enumerations shared by the tournament records."""

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

from enum import Enum

from swisstour.constants import COLOR_BLACK, COLOR_BYE, COLOR_WHITE


class Colour(str, Enum):
    """An entry of a player's colour history."""

    WHITE = COLOR_WHITE
    BLACK = COLOR_BLACK
    BYE = COLOR_BYE


class RoundStatus(str, Enum):
    """Lifecycle of a round."""

    ACTIVE = "active"
    COMPLETED = "completed"


class TournamentStatus(str, Enum):
    """Lifecycle of a tournament, FINISHED is terminal."""

    ACTIVE = "active"
    FINISHED = "finished"
