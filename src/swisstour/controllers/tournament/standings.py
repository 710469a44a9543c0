"""Standings, including live points for a round in progress."""

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

from dataclasses import dataclass
from typing import List, Optional

from swisstour.models import Player, Round
from swisstour.pairing.bye import rank_players


@dataclass
class StandingRow:
    """One line of the standings table."""

    rank: int
    player: Player
    live_points: float


def live_points_for_player(player_id: str, round_data: Round, base_points: float) -> float:
    """Stored points plus whatever the player has scored so far this round.

    Pure and read-only. Returns ``base_points`` unchanged when the player has
    no board in the round or their result is still pending. A bye counts as
    its awarded 1-0.
    """
    pairing = round_data.pairing_for_player(player_id)
    if pairing is None:
        return base_points
    is_white = pairing.white_player_id == player_id
    return base_points + pairing.result.points_for(is_white)


def compute_standings(
    players: List[Player], round_data: Optional[Round] = None
) -> List[StandingRow]:
    """Rank players by (live points desc, buchholz desc).

    Args:
        players: Player records as of the last finalized round
        round_data: Round in progress, if any, whose entered results are
            counted on top of the stored points

    Returns:
        Standing rows with 1-based ranks
    """
    rows = [
        StandingRow(
            rank=0,
            player=p,
            live_points=(
                live_points_for_player(p.id, round_data, p.points)
                if round_data is not None
                else p.points
            ),
        )
        for p in players
    ]
    rows.sort(key=lambda r: (-r.live_points, -r.player.buchholz))
    for index, row in enumerate(rows, start=1):
        row.rank = index
    return rows


def tournament_winner(players: List[Player]) -> Optional[Player]:
    """Top of the final standings, None for an empty field."""
    ranked = rank_players(players)
    return ranked[0] if ranked else None
