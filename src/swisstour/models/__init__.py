"""Tournament records: players, pairings, rounds and tournaments."""

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

from swisstour.models.enums import Colour, RoundStatus, TournamentStatus
from swisstour.models.player import Player
from swisstour.models.tournament import GameResult, Pairing, Round, Tournament

__all__ = [
    "Colour",
    "GameResult",
    "Pairing",
    "Player",
    "Round",
    "RoundStatus",
    "Tournament",
    "TournamentStatus",
]
