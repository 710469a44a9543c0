"""Round management for tournaments.

This module drives a tournament through its lifecycle: registration, the
first-round draw, result entry, and advancing to the next Swiss round until
the last round is finalized. It checks every precondition the pairing and
scoring functions assume, and persists in an order that keeps an interrupted
operation resumable: players first, then rounds, tournament counters last.
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

import random
import threading
from typing import Dict, Iterable, List, Optional, Union

from swisstour.constants import MIN_PLAYERS
from swisstour.controllers.tournament.result_recorder import ResultRecorder
from swisstour.controllers.tournament.standings import (
    StandingRow,
    compute_standings,
    tournament_winner,
)
from swisstour.controllers.tournament.tiebreak_calculator import TiebreakCalculator
from swisstour.exceptions import (
    PlayerNotFoundException,
    RoundNotFoundException,
    TournamentNotFoundException,
    TournamentStateException,
)
from swisstour.models import (
    GameResult,
    Pairing,
    Player,
    Round,
    RoundStatus,
    Tournament,
    TournamentStatus,
)
from swisstour.pairing import (
    clear_bye_mark,
    generate_round_one,
    generate_swiss_round,
)
from swisstour.storage import TournamentRepository
from swisstour.type_hints import PlayerEntry, ResultString
from swisstour.utils import setup_logger
from swisstour.validation import validate_no_repeat_opponents

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Creating tournaments and registering players
    - Generating the first round and every Swiss round after it
    - Recording results and finalizing rounds
    - Reporting standings

    Mutations of one tournament are serialized with a per-tournament lock.
    """

    def __init__(
        self,
        repository: TournamentRepository,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the round manager.

        Args:
            repository: Record store for tournaments, players and rounds
            rng: Randomness for the first-round draw
        """
        self.repository = repository
        self.rng = rng or random.Random()
        self.result_recorder = ResultRecorder()
        self.tiebreak_calculator = TiebreakCalculator()
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock(self, tournament_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(tournament_id, threading.Lock())

    def _require_tournament(self, tournament_id: str) -> Tournament:
        tournament = self.repository.get_tournament(tournament_id)
        if tournament is None:
            raise TournamentNotFoundException(f"Tournament {tournament_id} not found")
        return tournament

    def _require_active(self, tournament_id: str) -> Tournament:
        tournament = self._require_tournament(tournament_id)
        if tournament.is_finished:
            raise TournamentStateException(
                f"Tournament '{tournament.name}' is already finished"
            )
        return tournament

    # ========== Tournament & Player Management ==========

    def create_tournament(
        self,
        name: str,
        rounds_total: int,
        date: Optional[str] = None,
        time_control: Optional[str] = "",
    ) -> Tournament:
        """Create and store a new tournament."""
        tournament = Tournament.create(name, rounds_total, date, time_control)
        self.repository.save_tournament(tournament)
        logger.info(
            "Created tournament '%s' (%s rounds)", tournament.name, rounds_total
        )
        return tournament

    def add_players(
        self, tournament_id: str, entries: Iterable[PlayerEntry]
    ) -> List[Player]:
        """Register players before the first round.

        Args:
            tournament_id: Target tournament
            entries: Names, or (name, rating) tuples

        Returns:
            The newly created players
        """
        with self._lock(tournament_id):
            self._require_registration_open(tournament_id)
            players = []
            for entry in entries:
                if isinstance(entry, str):
                    players.append(Player.create(tournament_id, entry))
                else:
                    name, rating = entry
                    players.append(Player.create(tournament_id, name, rating))
            self.repository.add_players(tournament_id, players)
            logger.info("Added %s players to %s", len(players), tournament_id)
            return players

    def remove_player(self, tournament_id: str, player_id: str) -> None:
        """Remove a registered player before the first round."""
        with self._lock(tournament_id):
            self._require_registration_open(tournament_id)
            players = self.repository.list_players(tournament_id)
            remaining = [p for p in players if p.id != player_id]
            if len(remaining) == len(players):
                raise PlayerNotFoundException(f"Player {player_id} not found")
            self.repository.replace_players(tournament_id, remaining)
            logger.info("Removed player %s from %s", player_id, tournament_id)

    def _require_registration_open(self, tournament_id: str) -> None:
        self._require_active(tournament_id)
        if self.repository.list_rounds(tournament_id):
            raise TournamentStateException(
                "Players cannot be changed once the tournament has started"
            )

    def delete_tournament(self, tournament_id: str) -> bool:
        """Delete a tournament with all its players and rounds."""
        with self._lock(tournament_id):
            return self.repository.delete_tournament(tournament_id)

    # ========== Round Management ==========

    def start_tournament(self, tournament_id: str) -> Round:
        """Draw and store round 1.

        Raises:
            TournamentStateException: With fewer than two players, or if the
                tournament has already started
        """
        with self._lock(tournament_id):
            self._require_active(tournament_id)
            if self.repository.list_rounds(tournament_id):
                raise TournamentStateException("Tournament has already started")

            players = self.repository.list_players(tournament_id)
            if len(players) < MIN_PLAYERS:
                raise TournamentStateException(
                    f"At least {MIN_PLAYERS} players are needed to start, "
                    f"got {len(players)}"
                )

            players = self._clear_stale_byes(players, 1)
            round_data, updated = generate_round_one(tournament_id, players, self.rng)
            # players first; a bye mark left by a failed save is cleared on retry
            self.repository.replace_players(tournament_id, updated)
            self.repository.save_round(round_data)
            return round_data

    def current_round(self, tournament_id: str) -> Optional[Round]:
        """The round being played, or the last round once finished."""
        tournament = self._require_tournament(tournament_id)
        return self.repository.get_round(
            tournament_id, tournament.current_round_number
        )

    def record_result(
        self,
        tournament_id: str,
        round_number: int,
        pairing_id: str,
        result: Union[GameResult, ResultString],
    ) -> Pairing:
        """Set or clear (None) the result of one board of the active round."""
        with self._lock(tournament_id):
            self._require_active(tournament_id)
            round_data = self.repository.get_round(tournament_id, round_number)
            if round_data is None:
                raise RoundNotFoundException(
                    f"Round {round_number} not found in tournament {tournament_id}"
                )
            if round_data.is_completed:
                raise TournamentStateException(
                    f"Round {round_number} is completed, results are locked"
                )

            pairing = self.result_recorder.set_pairing_result(
                round_data, pairing_id, result
            )
            self.repository.update_round(round_data)
            return pairing

    def advance_round(self, tournament_id: str) -> Optional[Round]:
        """Finalize the current round and create the next one.

        Applies the round's results, recomputes Buchholz, stores the players
        and marks the round completed. On the last round the tournament is
        finished. Otherwise the next Swiss round is generated, checked for
        repeat pairings and stored.

        A round left completed by an interrupted earlier call is resumed
        without applying its results a second time.

        Returns:
            The new round, or None when the tournament has finished

        Raises:
            TournamentStateException: If a game of the round has no result
        """
        with self._lock(tournament_id):
            tournament = self._require_active(tournament_id)
            round_number = tournament.rounds_completed + 1
            round_data = self.repository.get_round(tournament_id, round_number)
            if round_data is None:
                raise RoundNotFoundException(
                    f"Round {round_number} not found in tournament {tournament_id}"
                )

            if round_data.is_completed:
                logger.warning(
                    "Round %s already completed, resuming advance", round_number
                )
                players = self.repository.list_players(tournament_id)
            else:
                players = self._finalize_round(tournament_id, round_data)

            if round_number >= tournament.rounds_total:
                return self._finish(tournament, players)

            next_round = self.repository.get_round(tournament_id, round_number + 1)
            if next_round is None:
                next_round = self._create_swiss_round(
                    tournament_id, players, round_number + 1
                )

            tournament.rounds_completed = round_number
            self.repository.update_tournament(tournament)
            logger.info(
                "Round %s completed, round %s started", round_number, round_number + 1
            )
            return next_round

    def _finalize_round(self, tournament_id: str, round_data: Round) -> List[Player]:
        if not round_data.all_results_entered:
            missing = len(round_data.games) - round_data.results_entered
            raise TournamentStateException(
                f"Round {round_data.round_number} still has {missing} game(s) "
                "without a result"
            )

        players = self.repository.list_players(tournament_id)
        players = self.result_recorder.apply_round_results(players, round_data)
        players = self.tiebreak_calculator.recalculate_buchholz(players)

        self.repository.replace_players(tournament_id, players)
        round_data.status = RoundStatus.COMPLETED
        self.repository.update_round(round_data)
        return players

    def _create_swiss_round(
        self, tournament_id: str, players: List[Player], round_number: int
    ) -> Round:
        players = self._clear_stale_byes(players, round_number)
        round_data, updated = generate_swiss_round(
            tournament_id, players, round_number
        )
        report = validate_no_repeat_opponents(players, round_data)
        if not report.valid:
            logger.warning(
                "Saving round %s despite repeat pairings: %s",
                round_number,
                report.violations,
            )
        self.repository.replace_players(tournament_id, updated)
        self.repository.save_round(round_data)
        return round_data

    def _clear_stale_byes(
        self, players: List[Player], round_number: int
    ) -> List[Player]:
        """Drop bye marks left by a round that was generated but never saved."""
        cleared = []
        for player in players:
            player = player.copy()
            if clear_bye_mark(player, round_number):
                logger.warning(
                    "Clearing unsaved round %s bye mark of %s",
                    round_number,
                    player.name,
                )
            cleared.append(player)
        return cleared

    def _finish(self, tournament: Tournament, players: List[Player]) -> None:
        tournament.rounds_completed = tournament.rounds_total
        tournament.status = TournamentStatus.FINISHED
        self.repository.update_tournament(tournament)

        winner = tournament_winner(players)
        logger.info(
            "Tournament '%s' finished, winner: %s",
            tournament.name,
            winner.name if winner else "None",
        )
        return None

    # ========== Standings ==========

    def standings(self, tournament_id: str) -> List[StandingRow]:
        """Current standings, counting results already entered this round."""
        tournament = self._require_tournament(tournament_id)
        players = self.repository.list_players(tournament_id)
        live_round = None
        if not tournament.is_finished:
            candidate = self.repository.get_round(
                tournament_id, tournament.rounds_completed + 1
            )
            if candidate is not None and candidate.status == RoundStatus.ACTIVE:
                live_round = candidate
        return compute_standings(players, live_round)
