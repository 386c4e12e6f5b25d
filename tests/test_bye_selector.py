import random

import pytest

from swissdoubles.models import Player, RoundLog
from swissdoubles.pairing import ByeSelector, byes_needed


@pytest.mark.parametrize(
    "count,expected",
    [(0, 0), (3, 3), (4, 0), (7, 3), (8, 0), (9, 1), (10, 2), (13, 1)],
)
def test_byes_needed(count, expected):
    assert byes_needed(count) == expected


def test_lowest_ranked_with_fewest_byes_sits_out(ranked_players):
    players = ranked_players(9)
    players[8].bye_count = 1

    chosen = ByeSelector(random.Random(0)).select(players, 2)

    assert chosen.id == "P8"


def test_nobody_sits_out_twice_before_everyone_once(ranked_players):
    players = ranked_players(5)
    for player in players[1:]:
        player.bye_count = 1

    chosen = ByeSelector(random.Random(0)).select(players, 4)

    assert chosen.id == "P1"


def test_assign_byes_leaves_multiple_of_four(ranked_players):
    players = ranked_players(7)

    byes, remaining = ByeSelector(random.Random(0)).assign_byes(players, 2)

    assert [p.id for p in byes] == ["P7", "P6", "P5"]
    assert [p.id for p in remaining] == ["P1", "P2", "P3", "P4"]


def test_assign_byes_without_surplus(ranked_players):
    players = ranked_players(8)

    byes, remaining = ByeSelector(random.Random(0)).assign_byes(players, 3)

    assert byes == []
    assert len(remaining) == 8


def test_fewer_than_four_players_all_sit_out(ranked_players):
    players = ranked_players(3)

    byes, remaining = ByeSelector(random.Random(0)).assign_byes(players, 2)

    assert sorted(p.id for p in byes) == ["P1", "P2", "P3"]
    assert remaining == []


def test_round_one_draw_is_reproducible():
    players = [Player(id=f"P{i}", name=f"Player {i}") for i in range(1, 10)]

    first = ByeSelector(random.Random(42)).select(players, 1)
    second = ByeSelector(random.Random(42)).select(players, 1)

    assert first.id == second.id
    assert first in players


def test_selection_is_logged(ranked_players):
    players = ranked_players(9)
    log = RoundLog(round_number=2)

    ByeSelector(random.Random(0)).select(players, 2, log)

    entries = log.entries_for("bye_selection")
    assert len(entries) == 2
    assert entries[-1].decision == "Selected Player 9 for bye"
    assert "Previous byes: 0" in entries[-1].details


def test_selection_reason_names_rank(ranked_players):
    players = ranked_players(9)
    players[8].bye_count = 1
    selector = ByeSelector(random.Random(0))

    selector.select(players, 2)

    assert selector.reasons["P8"] == (
        "Rank 8/9, 0 previous byes - lowest ranked eligible"
    )


def test_round_one_reason_is_random_draw():
    players = [Player(id=f"P{i}", name=f"Player {i}") for i in range(1, 10)]
    selector = ByeSelector(random.Random(5))

    chosen = selector.select(players, 1)

    assert selector.reasons == {chosen.id: "Random selection (Round 1)"}
