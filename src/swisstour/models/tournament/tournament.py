"""Tournament record."""

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
from typing import Any, Dict, Optional

from swisstour.constants import MAX_ROUNDS, MIN_ROUNDS
from swisstour.exceptions import InvalidConfigurationException
from swisstour.models.enums import TournamentStatus
from swisstour.utils import generate_id, parse_iso, utc_now_iso


def validate_rounds_total(rounds_total: int) -> int:
    """Check a tournament length against the supported range.

    Raises
    ------
    InvalidConfigurationException
        If ``rounds_total`` is outside MIN_ROUNDS..MAX_ROUNDS.
    """
    if not isinstance(rounds_total, int) or not (
        MIN_ROUNDS <= rounds_total <= MAX_ROUNDS
    ):
        raise InvalidConfigurationException(
            f"Invalid number of rounds: {rounds_total!r} "
            f"(must be between {MIN_ROUNDS} and {MAX_ROUNDS})"
        )
    return rounds_total


@dataclass
class Tournament:
    """Tournament settings and progress.

    Attributes
    ----------
    id : str
        Unique identifier.
    name : str
        Tournament name.
    date : str
        ISO date the tournament is played on.
    rounds_total : int
        Number of rounds, fixed at creation.
    rounds_completed : int
        Finalized rounds, incremented by exactly one per finalized round.
    time_control : str
        Free text, e.g. "15+10".
    status : TournamentStatus
        ``ACTIVE`` until ``rounds_completed == rounds_total``, then ``FINISHED``.
    created_at : str
        ISO timestamp of creation.
    """

    id: str
    name: str
    date: str
    rounds_total: int
    rounds_completed: int = 0
    time_control: str = ""
    status: TournamentStatus = TournamentStatus.ACTIVE
    created_at: str = ""

    @classmethod
    def create(
        cls,
        name: str,
        rounds_total: int,
        date: Optional[str] = None,
        time_control: Optional[str] = "",
    ) -> "Tournament":
        """Create a new active tournament.

        Raises
        ------
        InvalidConfigurationException
            If the name is blank, the round count is out of range or the date
            is not ISO 8601.
        """
        name = (name or "").strip()
        if not name:
            raise InvalidConfigurationException("Tournament name is required")
        validate_rounds_total(rounds_total)

        now = utc_now_iso()
        if date is not None:
            try:
                parse_iso(date)
            except ValueError as e:
                raise InvalidConfigurationException(
                    f"Invalid tournament date: {date!r}"
                ) from e

        return cls(
            id=generate_id(),
            name=name,
            date=date or now,
            rounds_total=rounds_total,
            time_control=(time_control or "").strip(),
            created_at=now,
        )

    @property
    def is_finished(self) -> bool:
        return self.status == TournamentStatus.FINISHED

    @property
    def current_round_number(self) -> int:
        """Number of the round being played (the next one to finalize)."""
        return min(self.rounds_completed + 1, self.rounds_total)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date,
            "rounds_total": self.rounds_total,
            "rounds_completed": self.rounds_completed,
            "time_control": self.time_control,
            "status": self.status.value,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", "Untitled Tournament"),
            date=data.get("date", ""),
            rounds_total=data["rounds_total"],
            rounds_completed=data.get("rounds_completed", 0),
            time_control=data.get("time_control", ""),
            status=TournamentStatus(data.get("status", TournamentStatus.ACTIVE.value)),
            created_at=data.get("created_at", ""),
        )
