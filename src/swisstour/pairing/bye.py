"""Bye selection and bookkeeping shared by the pairing generators."""

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

from typing import List, Tuple

from swisstour.exceptions import PairingException
from swisstour.models import Colour, Player
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


def ranking_key(player: Player) -> Tuple[float, float]:
    """Sort key ranking players by points, then Buchholz, best first."""
    return (-player.points, -player.buchholz)


def rank_players(players: List[Player]) -> List[Player]:
    """Players ordered by (points desc, buchholz desc).

    The sort is stable: players tied on both keys keep their input order.
    """
    return sorted(players, key=ranking_key)


def mark_bye(player: Player, round_number: int) -> None:
    """Record that ``player`` sits out round ``round_number`` with a bye.

    The bye point itself is awarded when the round's results are applied.
    """
    player.had_bye = True
    player.color_history.append(Colour.BYE)
    player.last_bye_round = round_number


def clear_bye_mark(player: Player, round_number: int) -> bool:
    """Undo :func:`mark_bye` for a round that was never stored.

    Returns:
        True if a mark for ``round_number`` was removed
    """
    if player.last_bye_round != round_number:
        return False
    if player.color_history and player.color_history[-1] == Colour.BYE:
        player.color_history.pop()
    player.had_bye = Colour.BYE in player.color_history
    player.last_bye_round = None
    return True


def select_bye_player(players: List[Player]) -> Player:
    """Determine the bye player for a Swiss round.

    Priority:
    1. The lowest-ranked player who has not had a bye yet
    2. If everyone has had a bye, the lowest-ranked player

    Args:
        players: Non-empty list of players to choose from

    Returns:
        The player who should receive the bye

    Raises:
        PairingException: If ``players`` is empty
    """
    if not players:
        raise PairingException("Cannot choose a bye from an empty field")

    ranked = rank_players(players)
    for player in reversed(ranked):
        if not player.had_bye:
            logger.info(
                "Assigning bye to: %s (points: %s, buchholz: %s)",
                player.name,
                player.points,
                player.buchholz,
            )
            return player

    selected = ranked[-1]
    logger.warning(
        "All players have already received a bye. "
        "Assigning second bye to lowest-ranked player: %s",
        selected.name,
    )
    return selected
