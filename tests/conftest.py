import random

import pytest

from swisstour.controllers.tournament import RoundManager
from swisstour.models import Colour, Player
from swisstour.storage import InMemoryRepository

TOURNAMENT_ID = "t-1"


def make_player(
    player_id,
    points=0.0,
    buchholz=0.0,
    colors=(),
    opponents=(),
    had_bye=False,
    rating=None,
    bye_round=None,
):
    """Build a player with the given state, colours as 'white'/'black'/'bye'."""
    return Player(
        id=player_id,
        tournament_id=TOURNAMENT_ID,
        name=player_id,
        rating=rating,
        points=points,
        buchholz=buchholz,
        color_history=[Colour(c) for c in colors],
        opponents_played=list(opponents),
        had_bye=had_bye,
        last_bye_round=bye_round,
    )


def make_players(count, prefix="P"):
    return [make_player(f"{prefix}{i}") for i in range(1, count + 1)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def manager(repository, rng):
    return RoundManager(repository, rng=rng)
