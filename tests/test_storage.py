import json

import pytest
from conftest import make_player

from swisstour.exceptions import (
    FileLoadException,
    RoundNotFoundException,
    TournamentNotFoundException,
    TournamentStateException,
)
from swisstour.models import Colour, GameResult, Pairing, Round, Tournament
from swisstour.storage import InMemoryRepository, JsonFileRepository


@pytest.fixture(params=["memory", "json"])
def repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryRepository()
    return JsonFileRepository(tmp_path / "store")


def _tournament(name="Club Open"):
    return Tournament.create(name, 5, date="2025-03-07", time_control="15+10")


def _players(tournament):
    a = make_player("A", points=1.5, colors=["white", "bye"], opponents=["B"])
    a.tournament_id = tournament.id
    b = make_player("B", rating=1500)
    b.tournament_id = tournament.id
    return [a, b]


def test_tournament_round_trip(repo):
    tournament = _tournament()
    repo.save_tournament(tournament)

    loaded = repo.get_tournament(tournament.id)
    assert loaded == tournament
    assert repo.list_tournaments() == [tournament]

    tournament.rounds_completed = 2
    repo.update_tournament(tournament)
    assert repo.get_tournament(tournament.id).rounds_completed == 2


def test_players_round_trip(repo):
    tournament = _tournament()
    repo.save_tournament(tournament)
    players = _players(tournament)
    repo.add_players(tournament.id, players)

    loaded = repo.list_players(tournament.id)
    assert loaded == players
    assert loaded[0].color_history == [Colour.WHITE, Colour.BYE]

    players[1].points = 1.0
    repo.replace_players(tournament.id, players[1:])
    loaded = repo.list_players(tournament.id)
    assert [p.id for p in loaded] == ["B"]
    assert loaded[0].points == 1.0


def test_rounds_round_trip(repo):
    tournament = _tournament()
    repo.save_tournament(tournament)
    second = Round.create(tournament.id, 2, [Pairing.game(1, "B", "A")])
    first = Round.create(
        tournament.id, 1, [Pairing.game(1, "A", "B"), Pairing.bye(2, "C")]
    )
    repo.save_round(second)
    repo.save_round(first)

    assert [r.round_number for r in repo.list_rounds(tournament.id)] == [1, 2]
    loaded = repo.get_round(tournament.id, 1)
    assert loaded == first
    assert loaded.pairings[1].result is GameResult.WHITE_WIN
    assert repo.get_round(tournament.id, 3) is None

    first.pairings[0].result = GameResult.DRAW
    repo.update_round(first)
    assert repo.get_round(tournament.id, 1).pairings[0].result is GameResult.DRAW


def test_round_number_is_never_saved_twice(repo):
    tournament = _tournament()
    repo.save_tournament(tournament)
    repo.save_round(Round.create(tournament.id, 1, []))

    with pytest.raises(TournamentStateException):
        repo.save_round(Round.create(tournament.id, 1, []))


def test_missing_records(repo):
    assert repo.get_tournament("nope") is None
    assert repo.list_players("nope") == []
    assert repo.list_rounds("nope") == []
    assert repo.delete_tournament("nope") is False

    with pytest.raises(TournamentNotFoundException):
        repo.add_players("nope", [])
    with pytest.raises(TournamentNotFoundException):
        repo.update_tournament(_tournament())

    tournament = _tournament()
    repo.save_tournament(tournament)
    with pytest.raises(RoundNotFoundException):
        repo.update_round(Round.create(tournament.id, 1, []))


def test_delete_cascades(repo):
    keep, drop = _tournament("Keep"), _tournament("Drop")
    for tournament in (keep, drop):
        repo.save_tournament(tournament)
        repo.add_players(tournament.id, _players(tournament))
        repo.save_round(Round.create(tournament.id, 1, []))

    assert repo.delete_tournament(drop.id)
    assert repo.get_tournament(drop.id) is None
    assert repo.list_players(drop.id) == []
    assert repo.list_rounds(drop.id) == []
    assert len(repo.list_players(keep.id)) == 2
    assert [t.id for t in repo.list_tournaments()] == [keep.id]


def test_memory_repository_returns_copies():
    repo = InMemoryRepository()
    tournament = _tournament()
    repo.save_tournament(tournament)
    repo.add_players(tournament.id, _players(tournament))

    repo.list_players(tournament.id)[0].points = 42
    assert repo.list_players(tournament.id)[0].points == 1.5


def test_json_file_layout(tmp_path):
    repo = JsonFileRepository(tmp_path)
    tournament = _tournament()
    repo.save_tournament(tournament)
    repo.save_round(
        Round.create(tournament.id, 1, [Pairing.game(1, "A", "B")])
    )

    path = tmp_path / f"{tournament.id}.json"
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["tournament"]["name"] == "Club Open"
    assert document["tournament"]["status"] == "active"
    assert document["rounds"][0]["pairings"][0]["result"] is None
    assert not list(tmp_path.glob("*.tmp"))


def test_json_corrupt_file(tmp_path):
    repo = JsonFileRepository(tmp_path)
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        repo.get_tournament("broken")
