"""A chess player taking part in one tournament."""

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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from swisstour.constants import COLOR_LOOKBACK
from swisstour.exceptions import InvalidPlayerDataException
from swisstour.models.enums import Colour
from swisstour.utils import generate_id


@dataclass(slots=True)
class Player:
    """
    Player record and its cumulative tournament state.

    The record is owned by exactly one tournament. Pairing and scoring code
    treats it as plain data: generators and the result recorder work on copies
    and hand back updated records, they never keep references between rounds.

    Attributes
    ----------
    id : str
        Unique identifier.
    tournament_id : str
        Identifier of the owning tournament.
    name : str
        Display name.
    rating : int or None
        Optional rating, shown in standings only. Never used for pairing.
    points : float
        1 per win, 0.5 per draw, 1 per bye.
    buchholz : float
        Sum of the current points of every opponent played. Recomputed
        wholesale after each round.
    color_history : list of Colour
        One entry per round the player took part in, ``Colour.BYE`` for byes.
    opponents_played : list of str
        Ids of the opponents faced, in round order. Byes are not listed.
    had_bye : bool
        True once the player has been given a bye.
    last_bye_round : int or None
        Round the most recent bye colour entry was recorded for.
    wins, draws, losses : int
        Game counters. A bye is not a win.

    Notes
    -----
    ``points == wins + 0.5 * draws + bye_count`` holds after every finalized
    round.
    """

    id: str
    tournament_id: str
    name: str
    rating: Optional[int] = None

    points: float = 0.0
    buchholz: float = 0.0
    color_history: List[Colour] = field(default_factory=list)
    opponents_played: List[str] = field(default_factory=list)
    had_bye: bool = False
    last_bye_round: Optional[int] = None
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @classmethod
    def create(
        cls, tournament_id: str, name: str, rating: Optional[int] = None
    ) -> "Player":
        """Register a new player with a fresh id and empty history.

        Raises
        ------
        InvalidPlayerDataException
            If the name is blank or the rating is negative.
        """
        name = (name or "").strip()
        if not name:
            raise InvalidPlayerDataException("Player name is required")
        if rating is not None and rating < 0:
            raise InvalidPlayerDataException(
                f"Invalid rating for {name}: {rating} (must be >= 0)"
            )
        return cls(id=generate_id(), tournament_id=tournament_id, name=name, rating=rating)

    # ========== Derived state ==========

    @property
    def white_games(self) -> int:
        """Number of games played with white."""
        return sum(1 for c in self.color_history if c == Colour.WHITE)

    @property
    def black_games(self) -> int:
        return sum(1 for c in self.color_history if c == Colour.BLACK)

    @property
    def bye_count(self) -> int:
        return sum(1 for c in self.color_history if c == Colour.BYE)

    @property
    def games_played(self) -> int:
        return self.wins + self.draws + self.losses

    def recent_colors(self, lookback: int = COLOR_LOOKBACK) -> List[Colour]:
        """Return the last ``lookback`` colours actually played, byes skipped."""
        played = [c for c in self.color_history if c != Colour.BYE]
        return played[-lookback:] if lookback > 0 else []

    def has_played(self, opponent_id: str) -> bool:
        """Has this player already faced ``opponent_id``?"""
        return opponent_id in self.opponents_played

    def copy(self) -> "Player":
        """Return an independent copy, history lists included."""
        return Player(
            id=self.id,
            tournament_id=self.tournament_id,
            name=self.name,
            rating=self.rating,
            points=self.points,
            buchholz=self.buchholz,
            color_history=list(self.color_history),
            opponents_played=list(self.opponents_played),
            had_bye=self.had_bye,
            last_bye_round=self.last_bye_round,
            wins=self.wins,
            draws=self.draws,
            losses=self.losses,
        )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "name": self.name,
            "rating": self.rating,
            "points": self.points,
            "buchholz": self.buchholz,
            "color_history": [c.value for c in self.color_history],
            "opponents_played": list(self.opponents_played),
            "had_bye": self.had_bye,
            "last_bye_round": self.last_bye_round,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Missing tournament state defaults to a fresh player, as records
        written at registration time only carry identity fields.
        """
        try:
            return cls(
                id=data["id"],
                tournament_id=data["tournament_id"],
                name=data["name"],
                rating=data.get("rating"),
                points=float(data.get("points", 0.0)),
                buchholz=float(data.get("buchholz", 0.0)),
                color_history=[Colour(c) for c in data.get("color_history", [])],
                opponents_played=list(data.get("opponents_played", [])),
                had_bye=bool(data.get("had_bye", False)),
                last_bye_round=data.get("last_bye_round"),
                wins=int(data.get("wins", 0)),
                draws=int(data.get("draws", 0)),
                losses=int(data.get("losses", 0)),
            )
        except (KeyError, ValueError) as e:
            raise InvalidPlayerDataException(f"Invalid player record: {e}") from e

    def __str__(self) -> str:
        """Player name, with rating when known."""
        if self.rating is None:
            return self.name
        return f"{self.name} ({self.rating})"


#  LocalWords:  buchholz
