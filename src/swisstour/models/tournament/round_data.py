"""Data models for a tournament round and its pairings."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swisstour.models.enums import RoundStatus
from swisstour.models.tournament.game_result import GameResult
from swisstour.utils import generate_id


@dataclass
class Pairing:
    """A single board of a round.

    Attributes
    ----------
    id : str
        Unique identifier.
    board_number : int
        1-based, dense. Presentational ordering only.
    white_player_id : str
        Player with white, or the player receiving the bye.
    black_player_id : str or None
        Player with black. None marks a bye for white.
    result : GameResult
        Entered result. A bye always carries ``GameResult.WHITE_WIN``.
    """

    id: str
    board_number: int
    white_player_id: str
    black_player_id: Optional[str]
    result: GameResult = GameResult.PENDING

    @classmethod
    def game(cls, board_number: int, white_id: str, black_id: str) -> "Pairing":
        """New game between two players, result pending."""
        return cls(
            id=generate_id(),
            board_number=board_number,
            white_player_id=white_id,
            black_player_id=black_id,
        )

    @classmethod
    def bye(cls, board_number: int, player_id: str) -> "Pairing":
        """New bye pairing, awarded immediately."""
        return cls(
            id=generate_id(),
            board_number=board_number,
            white_player_id=player_id,
            black_player_id=None,
            result=GameResult.WHITE_WIN,
        )

    @property
    def is_bye(self) -> bool:
        return self.black_player_id is None

    def involves(self, player_id: str) -> bool:
        return player_id in (self.white_player_id, self.black_player_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "board_number": self.board_number,
            "white_player_id": self.white_player_id,
            "black_player_id": self.black_player_id,
            "result": self.result.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary.

        A bye always loads as 1-0, whatever result was stored.
        """
        black_player_id = data.get("black_player_id")
        if black_player_id is None:
            result = GameResult.WHITE_WIN
        else:
            result = GameResult.parse(data.get("result"))
        return cls(
            id=data["id"],
            board_number=data["board_number"],
            white_player_id=data["white_player_id"],
            black_player_id=black_player_id,
            result=result,
        )


@dataclass
class Round:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    id : str
        Unique identifier.
    tournament_id : str
        Owning tournament.
    round_number : int
        Round number (1-indexed, sequential).
    status : RoundStatus
        ``ACTIVE`` while results are entered, ``COMPLETED`` once finalized.
    pairings : list of Pairing
        Boards in board order, the bye (if any) last.
    """

    id: str
    tournament_id: str
    round_number: int
    status: RoundStatus = RoundStatus.ACTIVE
    pairings: List[Pairing] = field(default_factory=list)

    @classmethod
    def create(
        cls, tournament_id: str, round_number: int, pairings: List[Pairing]
    ) -> "Round":
        """New active round."""
        return cls(
            id=generate_id(),
            tournament_id=tournament_id,
            round_number=round_number,
            status=RoundStatus.ACTIVE,
            pairings=pairings,
        )

    @property
    def is_completed(self) -> bool:
        return self.status == RoundStatus.COMPLETED

    @property
    def bye_pairing(self) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.is_bye:
                return pairing
        return None

    @property
    def games(self) -> List[Pairing]:
        """Non-bye pairings."""
        return [p for p in self.pairings if not p.is_bye]

    @property
    def results_entered(self) -> int:
        return sum(1 for p in self.games if not p.result.is_pending)

    @property
    def all_results_entered(self) -> bool:
        """True when there is at least one game and every game has a result."""
        games = self.games
        return bool(games) and all(not p.result.is_pending for p in games)

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.pairings:
            if pairing.id == pairing_id:
                return pairing
        return None

    def pairing_for_player(self, player_id: str) -> Optional[Pairing]:
        """The pairing the player takes part in this round, if any."""
        for pairing in self.pairings:
            if pairing.involves(player_id):
                return pairing
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "round_number": self.round_number,
            "status": self.status.value,
            "pairings": [p.to_dict() for p in self.pairings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        return cls(
            id=data["id"],
            tournament_id=data["tournament_id"],
            round_number=data["round_number"],
            status=RoundStatus(data.get("status", RoundStatus.ACTIVE.value)),
            pairings=[Pairing.from_dict(p) for p in data.get("pairings", [])],
        )
