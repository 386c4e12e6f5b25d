import json

import pytest

from swissdoubles.exceptions import (
    InvalidConfigurationException,
    InvalidRoundTagException,
    PairingException,
)
from swissdoubles.models import (
    BracketMatch,
    Match,
    MatchHistory,
    PartnerHistory,
    Player,
    PoolBracketConfig,
    RoundLog,
    TournamentSettings,
)
from swissdoubles.pairing import generate_round_pairings


def test_player_score_and_record():
    player = Player(id="a", name="Ann", wins=3, losses=1, ties=2, points_for=30)

    assert player.score == 8
    assert player.record == "3W-1L-2T"
    assert player.point_differential == 30
    assert Player.from_dict(player.to_dict()) == player


def test_bye_match_survives_serialization(bye):
    match = bye(2, "P7", twenties1=1)

    restored = Match.from_dict(json.loads(json.dumps(match.to_dict())))

    assert restored == match
    assert restored.team2 is None
    assert restored.player_ids == ("P7",)
    assert not restored.is_doubles


def test_match_helpers(played):
    match = played(1, ("a", "b"), ("c", "d"), 5, 3)

    assert match.is_doubles
    assert match.involves("c")
    assert not match.involves("e")
    assert match.player_ids == ("a", "b", "c", "d")


def test_histories_replay_the_match_log(played, bye):
    matches = [
        played(1, ("a", "b"), ("c", "d"), 5, 3),
        bye(1, "e"),
        played(2, ("b", "a"), ("d", "e"), 4, 4),
    ]

    partners = PartnerHistory.from_matches(matches)
    opponents = MatchHistory.from_matches(matches)

    assert partners.have_partnered("b", "a")
    assert partners.partners_of("a") == frozenset({"b"})
    assert partners.partners_of("e") == frozenset({"d"})
    assert opponents.have_met("c-d", "a-b")
    assert opponents.have_met("a-b", "d-e")
    assert not opponents.have_met("c-d", "d-e")
    assert PartnerHistory.from_dict(partners.to_dict()) == partners
    assert MatchHistory.from_dict(opponents.to_dict()) == opponents


def test_round_log_round_trip(make_players):
    log = generate_round_pairings(make_players(9), [], 1).log

    restored = RoundLog.from_dict(json.loads(json.dumps(log.to_dict())))

    assert restored.generated_at == log.generated_at
    assert restored.entries[0].timestamp == log.entries[0].timestamp
    assert restored.to_dict() == log.to_dict()


def test_round_log_rejects_unknown_phase():
    log = RoundLog(round_number=1)

    with pytest.raises(PairingException):
        log.add_entry("seating", "Nope")


def test_bracket_match_serialization():
    match = BracketMatch(
        id="m1",
        pool_id="pool-0",
        round_tag="semifinal",
        match_number=1,
        team1=("P1", "P8"),
        next_match_id="m3",
    )

    restored = BracketMatch.from_dict(match.to_dict())

    assert restored == match
    assert restored.team2 is None


def test_bracket_match_rejects_unknown_round_tag():
    with pytest.raises(InvalidRoundTagException):
        BracketMatch(id="m1", pool_id="pool-0", round_tag="playoff", match_number=1)


def test_pool_config_restores_manual_teams():
    config = PoolBracketConfig(
        pool_id="pool-0",
        pool_name="Pool A",
        bracket_type="final",
        player_ids=["P1", "P2", "P3", "P4"],
        manual_teams=[("P1", "P2"), ("P3", "P4")],
    )

    restored = PoolBracketConfig.from_dict(json.loads(json.dumps(config.to_dict())))

    assert restored == config


def test_settings_defaults_and_validation():
    settings = TournamentSettings()

    assert settings.points_per_match == 8
    assert settings.pool_size == 8
    assert settings.bye_mode == "byes_only"
    assert TournamentSettings.from_dict(settings.to_dict()) == settings

    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(bye_mode="sit_and_rotate")
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(pool_size=0)
