from swissdoubles.bracket import build_bracket, submit_bracket_score
from swissdoubles.models import PoolBracketConfig


def _semifinal_bracket(players, include_third_place=True):
    config = PoolBracketConfig(
        pool_id="pool-0",
        pool_name="Pool A",
        bracket_type="semifinals",
        player_ids=[p.id for p in players],
        include_third_place=include_third_place,
        manual_teams=[("P1", "P4"), ("P5", "P8"), ("P6", "P7"), ("P2", "P3")],
    )
    return build_bracket([config], players)


def _by_tag(bracket, round_tag):
    return [m for m in bracket if m.round_tag == round_tag]


def test_winner_and_loser_advance(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))
    semi1 = bracket[0]

    updated = submit_bracket_score(bracket, semi1.id, 5, 3, 1, 0)

    scored = updated[0]
    assert scored.completed is True
    assert (scored.score1, scored.score2) == (5, 3)
    assert (scored.twenties1, scored.twenties2) == (1, 0)
    assert scored.winner_id == "P1-P4"
    final = _by_tag(updated, "final")[0]
    third = _by_tag(updated, "third_place")[0]
    assert final.team1 == ("P1", "P4")
    assert final.team2 is None
    assert third.team1 == ("P2", "P3")


def test_second_semifinal_fills_second_slots(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))

    updated = submit_bracket_score(bracket, bracket[1].id, 2, 6)

    final = _by_tag(updated, "final")[0]
    third = _by_tag(updated, "third_place")[0]
    assert final.team1 is None
    assert final.team2 == ("P6", "P7")
    assert third.team2 == ("P5", "P8")
    assert updated[1].winner_id == "P6-P7"


def test_input_bracket_is_not_modified(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))
    before = [m.to_dict() for m in bracket]

    submit_bracket_score(bracket, bracket[0].id, 5, 3)

    assert [m.to_dict() for m in bracket] == before


def test_resubmission_overwrites_downstream_slots(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))
    semi_id = bracket[0].id

    updated = submit_bracket_score(bracket, semi_id, 5, 3)
    updated = submit_bracket_score(updated, semi_id, 2, 6)

    assert updated[0].winner_id == "P2-P3"
    assert _by_tag(updated, "final")[0].team1 == ("P2", "P3")
    assert _by_tag(updated, "third_place")[0].team1 == ("P1", "P4")


def test_unknown_match_returns_bracket_unchanged(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))

    updated = submit_bracket_score(bracket, "missing", 5, 3)

    assert updated == bracket
    assert updated is not bracket


def test_tie_completes_without_winner(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))

    updated = submit_bracket_score(bracket, bracket[0].id, 4, 4)

    assert updated[0].completed is True
    assert updated[0].winner_id is None
    assert _by_tag(updated, "final")[0].team1 is None
    assert _by_tag(updated, "third_place")[0].team1 is None


def test_no_third_place_match_means_loser_goes_nowhere(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8), include_third_place=False)

    updated = submit_bracket_score(bracket, bracket[0].id, 5, 3)

    assert len(updated) == 3
    assert updated[2].team1 == ("P1", "P4")
    assert not any(m.involves("P2") for m in updated[1:])


def test_final_records_champion(ranked_players):
    bracket = _semifinal_bracket(ranked_players(8))
    bracket = submit_bracket_score(bracket, bracket[0].id, 5, 3)
    bracket = submit_bracket_score(bracket, bracket[1].id, 6, 2)
    final = _by_tag(bracket, "final")[0]

    bracket = submit_bracket_score(bracket, final.id, 1, 7)

    final = _by_tag(bracket, "final")[0]
    assert (final.team1, final.team2) == (("P1", "P4"), ("P5", "P8"))
    assert final.winner_id == "P5-P8"
    assert final.completed is True


def test_quarterfinal_winner_moves_into_semifinal(ranked_players):
    config = PoolBracketConfig(
        pool_id="pool-0",
        pool_name="Pool A",
        bracket_type="quarterfinals",
        player_ids=[f"P{i}" for i in range(1, 17)],
        include_third_place=True,
    )
    bracket = build_bracket([config], ranked_players(16))

    updated = submit_bracket_score(bracket, bracket[1].id, 3, 5)

    semi1 = _by_tag(updated, "semifinal")[0]
    assert semi1.team1 is None
    assert semi1.team2 == ("P5", "P12")
    assert _by_tag(updated, "third_place")[0].team1 is None
