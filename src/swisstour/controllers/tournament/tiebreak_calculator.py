"""Tiebreak calculation for tournaments."""

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

from typing import Dict, List

from swisstour.models import Player
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates the Buchholz tiebreak used for standings and pairing order."""

    def recalculate_buchholz(self, players: List[Player]) -> List[Player]:
        """Recompute every player's Buchholz from scratch.

        Buchholz is the sum of the current points of every opponent in
        ``opponents_played``. It reads a snapshot of the whole population, so
        call it after all points of the round are final. Opponent ids that are
        not in ``players`` contribute nothing.

        Args:
            players: All players of the tournament

        Returns:
            Updated copies of all players, in input order
        """
        points: Dict[str, float] = {p.id: p.points for p in players}
        updated = []
        for player in players:
            copy = player.copy()
            copy.buchholz = self.calculate_buchholz(player, points)
            updated.append(copy)
        return updated

    def calculate_buchholz(self, player: Player, points: Dict[str, float]) -> float:
        """Sum of the opponents' points for a single player.

        Args:
            player: The player to calculate for
            points: Current points by player id
        """
        total = 0.0
        for opponent_id in player.opponents_played:
            if opponent_id not in points:
                logger.warning(
                    "Unknown opponent %s in history of %s", opponent_id, player.name
                )
                continue
            total += points[opponent_id]
        return total
