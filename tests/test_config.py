import pytest

from swisstour.config import TournamentSettings
from swisstour.constants import DEFAULT_ROUNDS
from swisstour.exceptions import InvalidConfigurationException


def test_defaults():
    settings = TournamentSettings()
    assert settings.default_rounds == DEFAULT_ROUNDS == 5
    assert settings.show_ratings is True


def test_round_trip():
    settings = TournamentSettings(default_rounds=7, show_ratings=False)
    assert TournamentSettings.from_dict(settings.to_dict()) == settings


@pytest.mark.parametrize("rounds", [2, 8, None])
def test_invalid_rounds_rejected(rounds):
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(default_rounds=rounds)


def test_invalid_show_ratings_rejected():
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(show_ratings="yes")


def test_bad_stored_values_fall_back_to_defaults():
    settings = TournamentSettings.from_dict({"default_rounds": 12, "show_ratings": 1})
    assert settings == TournamentSettings()


def test_missing_values_use_defaults():
    assert TournamentSettings.from_dict({}) == TournamentSettings()
