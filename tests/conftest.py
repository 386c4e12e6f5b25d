import random

import pytest

from swissdoubles.models import Match, Player


def _make_players(count, prefix="P", **counters):
    return [
        Player(id=f"{prefix}{i}", name=f"Player {i}", **counters)
        for i in range(1, count + 1)
    ]


def _ranked_players(count, prefix="P"):
    """Players whose counters rank them P1..Pn, best first."""
    return [
        Player(id=f"{prefix}{i}", name=f"Player {i}", wins=count - i)
        for i in range(1, count + 1)
    ]


def _played(round_number, team1, team2, score1, score2, twenties1=0, twenties2=0):
    return Match(
        id=f"r{round_number}-{'-'.join(team1)}-v-{'-'.join(team2)}",
        round_number=round_number,
        team1=tuple(team1),
        team2=tuple(team2),
        score1=score1,
        score2=score2,
        twenties1=twenties1,
        twenties2=twenties2,
        completed=True,
    )


def _bye(round_number, player_id, score1=4, twenties1=0):
    return Match(
        id=f"r{round_number}-bye-{player_id}",
        round_number=round_number,
        team1=(player_id,),
        score1=score1,
        twenties1=twenties1,
        completed=True,
        is_bye=True,
    )


@pytest.fixture
def make_players():
    return _make_players


@pytest.fixture
def ranked_players():
    return _ranked_players


@pytest.fixture
def played():
    return _played


@pytest.fixture
def bye():
    return _bye


@pytest.fixture
def rng():
    return random.Random(1234)
