from conftest import TOURNAMENT_ID, make_player

from swisstour.controllers.tournament import (
    compute_standings,
    live_points_for_player,
    tournament_winner,
)
from swisstour.models import GameResult, Pairing, Round


def _live_round():
    pairings = [
        Pairing.game(1, "A", "B"),
        Pairing.game(2, "C", "D"),
        Pairing.bye(3, "E"),
    ]
    pairings[0].result = GameResult.BLACK_WIN
    return Round.create(TOURNAMENT_ID, 2, pairings)


def test_live_points():
    round_data = _live_round()

    assert live_points_for_player("A", round_data, 1.0) == 1.0
    assert live_points_for_player("B", round_data, 1.0) == 2.0
    # pending result
    assert live_points_for_player("C", round_data, 0.5) == 0.5
    assert live_points_for_player("E", round_data, 0.0) == 1.0
    # not in the round
    assert live_points_for_player("Z", round_data, 3.0) == 3.0


def test_standings_order_by_live_points_then_buchholz():
    players = [
        make_player("A", points=1, buchholz=1),
        make_player("B", points=1, buchholz=0.5),
        make_player("C", points=1, buchholz=2),
        make_player("D", points=0),
        make_player("E", points=0),
    ]
    rows = compute_standings(players, _live_round())

    assert [r.player.id for r in rows] == ["B", "C", "A", "E", "D"]
    assert [r.rank for r in rows] == [1, 2, 3, 4, 5]
    assert rows[0].live_points == 2.0


def test_standings_without_round_use_stored_points():
    players = [make_player("A", points=0.5), make_player("B", points=1.5)]
    rows = compute_standings(players)
    assert [(r.player.id, r.live_points) for r in rows] == [("B", 1.5), ("A", 0.5)]


def test_tournament_winner():
    players = [
        make_player("A", points=3, buchholz=4),
        make_player("B", points=3, buchholz=5),
    ]
    assert tournament_winner(players).id == "B"
    assert tournament_winner([]) is None
