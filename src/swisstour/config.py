"""TournamentSettings data class."""

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
from typing import Any, Dict

from swisstour.constants import DEFAULT_ROUNDS
from swisstour.exceptions import InvalidConfigurationException
from swisstour.models.tournament import validate_rounds_total
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentSettings:
    """User preferences applied when creating tournaments.

    Attributes
    ----------
    default_rounds : int
        Round count proposed for new tournaments (3 to 7).
    show_ratings : bool
        Whether ratings are shown next to player names.
    """

    default_rounds: int = DEFAULT_ROUNDS
    show_ratings: bool = True

    def __post_init__(self):
        validate_rounds_total(self.default_rounds)
        if not isinstance(self.show_ratings, bool):
            raise InvalidConfigurationException(
                f"show_ratings must be a boolean, got {self.show_ratings!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "default_rounds": self.default_rounds,
            "show_ratings": self.show_ratings,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings, falling back to defaults for bad values.

        Stored preferences are never fatal: an out-of-range round count or a
        malformed flag is logged and replaced by its default.
        """
        default_rounds = data.get("default_rounds", DEFAULT_ROUNDS)
        try:
            validate_rounds_total(default_rounds)
        except InvalidConfigurationException:
            logger.warning(
                "Ignoring stored default_rounds=%r, using %s",
                default_rounds,
                DEFAULT_ROUNDS,
            )
            default_rounds = DEFAULT_ROUNDS

        show_ratings = data.get("show_ratings", True)
        if not isinstance(show_ratings, bool):
            logger.warning("Ignoring stored show_ratings=%r", show_ratings)
            show_ratings = True

        return cls(default_rounds=default_rounds, show_ratings=show_ratings)
