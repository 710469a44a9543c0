"""Game result sum type."""

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

from enum import Enum
from typing import Union

from swisstour.constants import (
    DRAW_SCORE,
    LOSS_SCORE,
    RESULT_BLACK_WIN,
    RESULT_DRAW,
    RESULT_WHITE_WIN,
    WIN_SCORE,
)
from swisstour.exceptions import InvalidResultException
from swisstour.type_hints import ResultString


class GameResult(Enum):
    """Outcome of a pairing.

    ``WHITE_WIN`` and ``BLACK_WIN`` are decisive, ``DRAW`` splits the point and
    ``PENDING`` means no result has been entered yet. The value is the persisted
    form; ``PENDING`` persists as null.
    """

    WHITE_WIN = RESULT_WHITE_WIN
    BLACK_WIN = RESULT_BLACK_WIN
    DRAW = RESULT_DRAW
    PENDING = None

    @property
    def is_pending(self) -> bool:
        return self is GameResult.PENDING

    @property
    def is_decisive(self) -> bool:
        return self in (GameResult.WHITE_WIN, GameResult.BLACK_WIN)

    def points_for(self, is_white: bool) -> float:
        """Points this result gives to the white or black side."""
        if self is GameResult.PENDING:
            return LOSS_SCORE
        if self is GameResult.DRAW:
            return DRAW_SCORE
        if self is GameResult.WHITE_WIN:
            return WIN_SCORE if is_white else LOSS_SCORE
        return LOSS_SCORE if is_white else WIN_SCORE

    @classmethod
    def parse(cls, value: Union["GameResult", ResultString]) -> "GameResult":
        """Convert a persisted result string (or None) into a GameResult.

        Raises
        ------
        InvalidResultException
            If ``value`` is not one of "1-0", "0-1", "0.5-0.5" or None.
        """
        if isinstance(value, GameResult):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidResultException(
                f"Invalid result: {value!r} (expected 1-0, 0-1, 0.5-0.5 or None)"
            ) from e
