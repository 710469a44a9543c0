"""Repeat-opponent check for freshly generated rounds.

The Swiss generator only repeats an opponent when a player has nobody new
left to play. This check surfaces those pairings for logging; it never blocks
a round.
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

from dataclasses import dataclass, field
from typing import Dict, List

from swisstour.models import Player, Round
from swisstour.type_hints import RepeatPair
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class RepeatValidationReport:
    """Result of checking a round for repeat pairings."""

    round_number: int
    violations: List[RepeatPair] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations

    @property
    def summary(self) -> str:
        if self.valid:
            return f"Round {self.round_number}: no repeat pairings"
        pairs = ", ".join(f"{w} vs {b}" for w, b in self.violations)
        return (
            f"Round {self.round_number}: {len(self.violations)} repeat pairing(s): "
            f"{pairs}"
        )


def validate_no_repeat_opponents(
    players: List[Player], round_data: Round
) -> RepeatValidationReport:
    """Find boards pairing two players who have already met.

    Args:
        players: Players with ``opponents_played`` current through the round
            before ``round_data``
        round_data: The newly generated round

    Returns:
        Report listing every repeated ``(white_id, black_id)``. Byes and boards
        naming unknown players are skipped.
    """
    by_id: Dict[str, Player] = {p.id: p for p in players}
    report = RepeatValidationReport(round_number=round_data.round_number)

    for pairing in round_data.games:
        white = by_id.get(pairing.white_player_id)
        black = by_id.get(pairing.black_player_id)
        if white is None or black is None:
            continue
        if white.has_played(black.id) or black.has_played(white.id):
            report.violations.append((white.id, black.id))

    if not report.valid:
        logger.warning(report.summary)
    return report
