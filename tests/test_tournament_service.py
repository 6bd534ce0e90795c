"""Tests for the tournament document service."""

from __future__ import annotations

import copy
from unittest.mock import MagicMock, patch

import pytest

from torneo.constants import WELCOME_NEWS
from torneo.errors import TournamentSaveError
from torneo.tournament.services import TournamentService

from .mock_utils import patch_mockfirestore


@pytest.fixture
def db():
    return patch_mockfirestore()


def _doc(db):
    return db.collection("torneos").document("torneo-fixture")


def test_load_initializes_empty_store(db):
    document = TournamentService.load(db)

    assert len(document["groups"]) == 4  # nosec B101
    for group in document["groups"]:
        assert len(group["matches"]) == 2  # nosec B101
        for match in group["matches"]:
            assert match["score1"] == 0  # nosec B101
            assert match["score2"] == 0  # nosec B101
    assert document["latestNews"] == WELCOME_NEWS  # nosec B101
    assert document["liveStreamUrl"] == ""  # nosec B101
    assert document["topScorers"] == []  # nosec B101
    assert document["leastBeatenKeepers"] == []  # nosec B101
    # The default was persisted.
    assert _doc(db).get().exists  # nosec B101
    assert _doc(db).get().to_dict()["latestNews"] == WELCOME_NEWS  # nosec B101


def test_default_knockout_bracket():
    knockout = TournamentService.default_tournament()["knockoutStage"]
    assert [stage["name"] for stage in knockout] == [  # nosec B101
        "Cuartos de Final",
        "Semifinal",
        "Final",
        "Tercer Puesto",
    ]
    assert [len(stage["matches"]) for stage in knockout] == [4, 2, 1, 1]  # nosec B101
    assert knockout[2]["matches"][0]["team1"] == "TBD"  # nosec B101


def test_initialize_if_absent_keeps_existing_document(db):
    existing = TournamentService.default_tournament()
    existing["latestNews"] = "Final el domingo"
    _doc(db).set(existing)

    document = TournamentService.initialize_if_absent(db)
    TournamentService.initialize_if_absent(db)

    assert document["latestNews"] == "Final el domingo"  # nosec B101
    assert _doc(db).get().to_dict()["latestNews"] == "Final el domingo"  # nosec B101


def test_sequential_saves_last_write_wins(db):
    first = TournamentService.default_tournament()
    first["latestNews"] = "Primera"
    first["topScorers"] = [{"name": "Ana", "goals": 2}]
    second = TournamentService.default_tournament()
    second["latestNews"] = "Segunda"
    second["liveStreamUrl"] = "https://example.com/live"

    TournamentService.save(first, db)
    TournamentService.save(second, db)

    stored = _doc(db).get().to_dict()
    assert stored == second  # nosec B101
    assert stored["topScorers"] == []  # nosec B101


def test_save_does_not_alias_caller_document(db):
    document = TournamentService.default_tournament()
    TournamentService.save(document, db)
    document["groups"][0]["matches"][0]["score1"] = 9

    stored = _doc(db).get().to_dict()
    assert stored["groups"][0]["matches"][0]["score1"] == 0  # nosec B101


def test_normalize_coerces_scores():
    data = copy.deepcopy(TournamentService.default_tournament())
    data["groups"][0]["matches"][0]["score1"] = "abc"
    data["groups"][0]["matches"][0]["score2"] = "3"
    data["groups"][0]["matches"][1]["score1"] = -4
    data["topScorers"] = [{"name": "Ana", "goals": "x"}]

    document = TournamentService.normalize(data)

    match = document["groups"][0]["matches"][0]
    assert match["score1"] == 0  # nosec B101
    assert match["score2"] == 3  # nosec B101
    assert document["groups"][0]["matches"][1]["score1"] == 0  # nosec B101
    assert document["topScorers"] == [{"name": "Ana", "goals": 0}]  # nosec B101


def test_normalize_fills_missing_keys():
    document = TournamentService.normalize({"latestNews": "Hola"})
    assert len(document["groups"]) == 4  # nosec B101
    assert len(document["knockoutStage"]) == 4  # nosec B101
    assert document["latestNews"] == "Hola"  # nosec B101
    assert document["liveStreamUrl"] == ""  # nosec B101


def test_load_returns_none_on_failure():
    failing_db = MagicMock()
    failing_db.collection.return_value.document.return_value.get.side_effect = (
        RuntimeError("unavailable")
    )
    assert TournamentService.load(failing_db) is None  # nosec B101


def test_save_failure_raises():
    failing_db = MagicMock()
    failing_db.collection.return_value.document.return_value.set.side_effect = (
        RuntimeError("unavailable")
    )
    with pytest.raises(TournamentSaveError):
        TournamentService.save(TournamentService.default_tournament(), failing_db)


def test_subscribe_delivers_full_document_and_unsubscribes():
    watch_db = MagicMock()
    doc_ref = watch_db.collection.return_value.document.return_value
    watch = MagicMock()
    doc_ref.on_snapshot.return_value = watch
    received = []

    subscription = TournamentService.subscribe(received.append, watch_db)

    on_snapshot = doc_ref.on_snapshot.call_args[0][0]
    snapshot = MagicMock()
    snapshot.exists = True
    snapshot.to_dict.return_value = {"latestNews": "Gol!"}
    on_snapshot([snapshot], [], None)

    missing = MagicMock()
    missing.exists = False
    on_snapshot([missing], [], None)

    assert received[0]["latestNews"] == "Gol!"  # nosec B101
    assert len(received[0]["groups"]) == 4  # nosec B101
    assert received[1] is None  # nosec B101

    subscription.unsubscribe()
    subscription.unsubscribe()
    watch.unsubscribe.assert_called_once()
    assert not subscription.active  # nosec B101


def test_subscribe_callback_errors_are_contained():
    watch_db = MagicMock()
    doc_ref = watch_db.collection.return_value.document.return_value
    callback = MagicMock(side_effect=RuntimeError("boom"))

    TournamentService.subscribe(callback, watch_db)
    on_snapshot = doc_ref.on_snapshot.call_args[0][0]
    snapshot = MagicMock()
    snapshot.exists = True
    snapshot.to_dict.return_value = {}

    on_snapshot([snapshot], [], None)
    callback.assert_called_once()


def test_save_without_firebase_app_raises_save_error():
    with patch("torneo.tournament.services.firestore") as firestore_module:
        firestore_module.client.side_effect = ValueError("no default app")
        with pytest.raises(TournamentSaveError):
            TournamentService.save(TournamentService.default_tournament())
