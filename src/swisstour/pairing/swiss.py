"""Swiss pairing for rounds 2 and later.

A greedy single pass over the standings. The highest-ranked unpaired player
is paired first with the best remaining candidate:

1. never a previous opponent, unless nobody else is left,
2. preferably someone they can meet without either side getting a third
   consecutive game with the same colour,
3. then the closest score.

This is not a FIDE Dutch implementation. It aims at small club events where a
strict no-repeat guarantee matters more than optimal score-group pairing.
"""

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

from typing import List, Optional, Tuple

from swisstour.constants import COLOR_LOOKBACK
from swisstour.models import Pairing, Player, Round
from swisstour.pairing.bye import mark_bye, rank_players, select_bye_player
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


def colors_compatible(
    player1: Player, player2: Player, lookback: int = COLOR_LOOKBACK
) -> bool:
    """Can the two players meet without a forced colour streak?

    They are incompatible only when each has played the same colour in all of
    their last ``lookback`` non-bye games, and that colour is the same for
    both: one of them would then have to take it again.
    """
    recent1 = player1.recent_colors(lookback)
    recent2 = player2.recent_colors(lookback)
    if len(recent1) < lookback or len(recent2) < lookback:
        return True
    if len(set(recent1)) != 1 or len(set(recent2)) != 1:
        return True
    return recent1[0] != recent2[0]


def assign_colours(player: Player, opponent: Player) -> Tuple[Player, Player]:
    """Return ``(white, black)`` for a board.

    Whoever has played fewer white games gets white. On an exact tie
    ``player``, the higher-ranked side that was picked first, gets white.
    """
    if player.white_games <= opponent.white_games:
        return player, opponent
    return opponent, player


def _pick_opponent(player: Player, rest: List[Player]) -> Player:
    candidates = [p for p in rest if not player.has_played(p.id)]
    if not candidates:
        logger.warning(
            "No new opponent left for %s, a repeat pairing is unavoidable",
            player.name,
        )
        candidates = rest

    # min() keeps the first of equal keys, so standings order breaks ties
    return min(
        candidates,
        key=lambda c: (
            not colors_compatible(player, c),
            abs(c.points - player.points),
        ),
    )


def generate_swiss_round(
    tournament_id: str,
    players: List[Player],
    round_number: int,
) -> Tuple[Round, List[Player]]:
    """Create a Swiss round from up-to-date standings.

    Args:
        tournament_id: Owning tournament
        players: Every player, with points, Buchholz and histories current
            through the previous round
        round_number: Number of the round being created (2 or later)

    Returns:
        Tuple of (new active round, updated players in input order). Only the
        bye player's record changes. The input records are not modified.
    """
    updated = [p.copy() for p in players]

    bye_player: Optional[Player] = None
    pool = updated
    if len(updated) % 2 == 1:
        bye_player = select_bye_player(updated)
        mark_bye(bye_player, round_number)
        pool = [p for p in updated if p.id != bye_player.id]

    unpaired = rank_players(pool)
    pairings: List[Pairing] = []

    while len(unpaired) >= 2:
        player = unpaired[0]
        rest = unpaired[1:]
        opponent = _pick_opponent(player, rest)

        white, black = assign_colours(player, opponent)
        pairings.append(Pairing.game(len(pairings) + 1, white.id, black.id))
        logger.debug(
            "Board %s: %s (%s) - %s (%s)",
            len(pairings),
            white.name,
            white.points,
            black.name,
            black.points,
        )

        unpaired = [p for p in rest if p.id != opponent.id]

    if bye_player is not None:
        pairings.append(Pairing.bye(len(pairings) + 1, bye_player.id))

    round_data = Round.create(tournament_id, round_number, pairings)
    logger.info(
        "Created round %s for tournament %s: %s games, bye: %s",
        round_number,
        tournament_id,
        len(pairings) - (1 if bye_player else 0),
        bye_player.name if bye_player else "None",
    )
    return round_data, updated


#  LocalWords:  Buchholz
