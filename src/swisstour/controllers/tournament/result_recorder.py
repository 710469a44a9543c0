"""Result recording for tournaments.

This module handles entering results on a live round and applying a finished
round's results to the player records.
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

from typing import Dict, List, Optional, Union

from swisstour.constants import BYE_SCORE
from swisstour.exceptions import InvalidResultException
from swisstour.models import Colour, GameResult, Pairing, Player, Round
from swisstour.pairing import mark_bye
from swisstour.type_hints import ResultString
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles entering and applying match results.

    This class is responsible for:
    - Setting or clearing the result of a board on a live round
    - Applying a round's results to points, W/D/L counters and histories
    - Awarding bye points
    """

    def set_pairing_result(
        self,
        round_data: Round,
        pairing_id: str,
        result: Union[GameResult, ResultString],
    ) -> Pairing:
        """Set the result of one board, in place.

        Passing ``GameResult.PENDING`` (or None) clears an entered result.

        Args:
            round_data: The live round
            pairing_id: Board to update
            result: New result

        Returns:
            The updated pairing

        Raises:
            InvalidResultException: If the board does not exist, is a bye, or
                the result is not a valid result string
        """
        pairing = round_data.get_pairing(pairing_id)
        if pairing is None:
            raise InvalidResultException(
                f"Pairing {pairing_id} not found in round {round_data.round_number}"
            )
        if pairing.is_bye:
            raise InvalidResultException(
                f"Board {pairing.board_number} is a bye, its result cannot be changed"
            )

        pairing.result = GameResult.parse(result)
        logger.debug(
            "Round %s board %s result set to %s",
            round_data.round_number,
            pairing.board_number,
            pairing.result.value,
        )
        return pairing

    def apply_round_results(
        self, players: List[Player], round_data: Round
    ) -> List[Player]:
        """Apply every entered result of a round to the player records.

        Each played board appends the colours and the opponents, then scores
        1-0 / 0-1 / draw. A bye scores one point without counting as a win.
        Boards still pending are skipped.

        This must be called exactly once per round: calling it twice counts
        the round twice. The bye colour entry is the exception, it is only
        appended if the generator has not already recorded it.

        Args:
            players: Player records as of the end of the previous round
            round_data: The round to apply

        Returns:
            Updated copies of all players, in input order
        """
        by_id: Dict[str, Player] = {p.id: p.copy() for p in players}
        round_number = round_data.round_number

        for pairing in round_data.pairings:
            white = by_id.get(pairing.white_player_id)
            if pairing.is_bye:
                self._record_bye(white, pairing, round_number)
                continue

            if pairing.result.is_pending:
                logger.debug(
                    "Round %s board %s has no result, skipping",
                    round_number,
                    pairing.board_number,
                )
                continue

            black = by_id.get(pairing.black_player_id)
            if white is None or black is None:
                logger.error(
                    "Cannot find players: %s and/or %s",
                    pairing.white_player_id,
                    pairing.black_player_id,
                )
                continue

            self._record_game_result(white, black, pairing.result)

        logger.info("Applied results for round %s", round_number)
        return list(by_id.values())

    def _record_game_result(
        self, white: Player, black: Player, result: GameResult
    ) -> None:
        """Record the result of a single game on both players."""
        white.color_history.append(Colour.WHITE)
        white.opponents_played.append(black.id)
        black.color_history.append(Colour.BLACK)
        black.opponents_played.append(white.id)

        white.points += result.points_for(is_white=True)
        black.points += result.points_for(is_white=False)

        if result is GameResult.WHITE_WIN:
            white.wins += 1
            black.losses += 1
        elif result is GameResult.BLACK_WIN:
            black.wins += 1
            white.losses += 1
        else:
            white.draws += 1
            black.draws += 1

        logger.debug("Recorded: %s vs %s (%s)", white.name, black.name, result.value)

    def _record_bye(
        self, player: Optional[Player], pairing: Pairing, round_number: int
    ) -> None:
        """Award the bye point; never counted as a win."""
        if player is None:
            logger.error("Cannot find bye player: %s", pairing.white_player_id)
            return

        # generators already append the bye entry when they assign it
        if player.last_bye_round != round_number:
            mark_bye(player, round_number)
        player.points += BYE_SCORE
        logger.debug("Recorded bye for %s (score: %s)", player.name, BYE_SCORE)
