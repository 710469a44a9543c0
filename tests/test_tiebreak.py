from conftest import make_player

from swisstour.controllers.tournament import TiebreakCalculator


def _field():
    return [
        make_player("A", points=2, opponents=["B", "C"]),
        make_player("B", points=1, opponents=["A", "D"]),
        make_player("C", points=1.5, opponents=["D", "A"]),
        make_player("D", points=0.5, opponents=["C", "B"]),
    ]


def test_buchholz_is_sum_of_opponent_points():
    updated = {p.id: p for p in TiebreakCalculator().recalculate_buchholz(_field())}

    assert updated["A"].buchholz == 2.5
    assert updated["B"].buchholz == 2.5
    assert updated["C"].buchholz == 2.5
    assert updated["D"].buchholz == 2.5


def test_buchholz_recalculation_is_idempotent():
    calculator = TiebreakCalculator()
    once = calculator.recalculate_buchholz(_field())
    twice = calculator.recalculate_buchholz(once)
    assert [p.buchholz for p in once] == [p.buchholz for p in twice]


def test_buchholz_uses_current_points_and_ignores_unknown_ids():
    players = [
        make_player("A", points=1, opponents=["B", "ghost"], buchholz=99),
        make_player("B", points=3, opponents=["A"]),
    ]
    updated = TiebreakCalculator().recalculate_buchholz(players)
    assert updated[0].buchholz == 3
    assert updated[1].buchholz == 1
    assert players[0].buchholz == 99


def test_no_opponents_means_zero():
    player = make_player("A", points=1, colors=["bye"], had_bye=True)
    assert TiebreakCalculator().calculate_buchholz(player, {"A": 1}) == 0
