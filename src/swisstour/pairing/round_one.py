"""First-round pairing: random draw with random colours."""

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

import random
from typing import List, Optional, Tuple

from swisstour.models import Pairing, Player, Round
from swisstour.pairing.bye import mark_bye
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


def generate_round_one(
    tournament_id: str,
    players: List[Player],
    rng: Optional[random.Random] = None,
) -> Tuple[Round, List[Player]]:
    """Create round 1 of a tournament.

    The players are shuffled with a uniform Fisher-Yates permutation. With an
    odd count the last shuffled player gets the bye. The rest are paired in
    shuffled order (0-1, 2-3, ...), and each board's colours are decided by an
    independent coin flip.

    Parameters
    ----------
    tournament_id : str
        Owning tournament.
    players : list of Player
        Every registered player. The caller guarantees at least two.
    rng : random.Random, optional
        Source of randomness, a fresh ``random.Random()`` when omitted.

    Returns
    -------
    tuple of (Round, list of Player)
        The new active round (bye on the last board) and the updated players
        in input order. The input records are not modified.
    """
    rng = rng or random.Random()

    updated = [p.copy() for p in players]
    shuffled = list(updated)
    rng.shuffle(shuffled)

    bye_player: Optional[Player] = None
    pool = shuffled
    if len(shuffled) % 2 == 1:
        bye_player = shuffled[-1]
        mark_bye(bye_player, 1)
        pool = shuffled[:-1]

    pairings: List[Pairing] = []
    for i in range(0, len(pool) - 1, 2):
        first, second = pool[i], pool[i + 1]
        if rng.random() < 0.5:
            white, black = first, second
        else:
            white, black = second, first
        pairings.append(Pairing.game(len(pairings) + 1, white.id, black.id))

    if bye_player is not None:
        pairings.append(Pairing.bye(len(pairings) + 1, bye_player.id))

    round_data = Round.create(tournament_id, 1, pairings)
    logger.info(
        "Created round 1 for tournament %s: %s games, bye: %s",
        tournament_id,
        len(pairings) - (1 if bye_player else 0),
        bye_player.name if bye_player else "None",
    )
    return round_data, updated
