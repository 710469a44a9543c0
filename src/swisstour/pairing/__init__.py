"""Pairing generators for round 1 and the Swiss rounds that follow."""

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

from swisstour.pairing.bye import (
    clear_bye_mark,
    mark_bye,
    rank_players,
    select_bye_player,
)
from swisstour.pairing.round_one import generate_round_one
from swisstour.pairing.swiss import (
    assign_colours,
    colors_compatible,
    generate_swiss_round,
)

__all__ = [
    "assign_colours",
    "clear_bye_mark",
    "colors_compatible",
    "generate_round_one",
    "generate_swiss_round",
    "mark_bye",
    "rank_players",
    "select_bye_player",
]
