"""Tests for turning an admin draft into a tournament document."""

from __future__ import annotations

from unittest.mock import patch

from torneo.admin.services import AdminService, match_field_name
from torneo.tournament.services import TournamentService


def _is_group_match(groups, team1, team2):
    return any(
        m["team1"] == team1 and m["team2"] == team2
        for g in groups
        for m in g["matches"]
    )


def test_match_field_name():
    assert match_field_name("groups", 1, 0, "score2") == "groups-1-0-score2"  # nosec B101


def test_apply_draft_does_not_touch_current():
    current = TournamentService.default_tournament()

    document = AdminService.apply_draft(
        current, {"groups-0-0-score1": "4"}, "", "", "", ""
    )

    assert document["groups"][0]["matches"][0]["score1"] == 4  # nosec B101
    assert current["groups"][0]["matches"][0]["score1"] == 0  # nosec B101


def test_apply_draft_coerces_scores():
    current = TournamentService.default_tournament()
    form_data = {
        "groups-0-0-score1": "dos",
        "groups-0-0-score2": "-3",
        "groups-0-1-score1": " 7 ",
    }

    document = AdminService.apply_draft(current, form_data, None, None, None, None)

    matches = document["groups"][0]["matches"]
    assert (matches[0]["score1"], matches[0]["score2"]) == (0, 0)  # nosec B101
    assert matches[1]["score1"] == 7  # nosec B101


def test_apply_draft_keeps_team_on_blank_name():
    current = TournamentService.default_tournament()

    document = AdminService.apply_draft(
        current,
        {"groups-1-0-team1": "   ", "groups-1-0-team2": "Tigres"},
        None,
        None,
        None,
        None,
    )

    match = document["groups"][1]["matches"][0]
    assert (match["team1"], match["team2"]) == ("Equipo B1", "Tigres")  # nosec B101


def test_apply_draft_decodes_stats_and_text():
    current = TournamentService.default_tournament()

    document = AdminService.apply_draft(
        current, {}, "Ana, 5;Luis,x", "Pedro,2", "", " https://example.com/live "
    )

    assert document["topScorers"] == [  # nosec B101
        {"name": "Ana", "goals": 5},
        {"name": "Luis", "goals": 0},
    ]
    assert document["leastBeatenKeepers"] == [{"name": "Pedro", "goalsConceded": 2}]  # nosec B101
    assert document["latestNews"] == ""  # nosec B101
    assert document["liveStreamUrl"] == "https://example.com/live"  # nosec B101


def test_generate_sample_bets_uses_group_matches():
    groups = TournamentService.default_tournament()["groups"]

    with patch("torneo.admin.services.BetService.place_bet") as place_bet:
        place_bet.side_effect = lambda *args: {"userId": args[0], "betOn": args[4]}
        bets = AdminService.generate_sample_bets(groups, count=5)

    assert len(bets) == 5  # nosec B101
    assert len({bet["userId"] for bet in bets}) == 5  # nosec B101
    for call in place_bet.call_args_list:
        user_id, match, team1, team2, bet_on, _ = call.args
        assert match == f"{team1} vs {team2}"  # nosec B101
        assert bet_on in (team1, team2)  # nosec B101
        assert _is_group_match(groups, team1, team2)  # nosec B101


def test_generate_sample_bets_without_matches():
    with patch("torneo.admin.services.BetService.place_bet") as place_bet:
        assert AdminService.generate_sample_bets([], count=3) == []  # nosec B101
    place_bet.assert_not_called()

