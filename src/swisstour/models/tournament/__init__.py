from swisstour.models.tournament.game_result import GameResult
from swisstour.models.tournament.round_data import Pairing, Round
from swisstour.models.tournament.tournament import Tournament, validate_rounds_total

__all__ = [
    "GameResult",
    "Pairing",
    "Round",
    "Tournament",
    "validate_rounds_total",
]
