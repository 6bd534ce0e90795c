"""Service layer for the tournament document."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, Callable

from firebase_admin import firestore

from torneo.constants import (
    GROUPS,
    KNOCKOUT_STAGE,
    LATEST_NEWS,
    LEAST_BEATEN_KEEPERS,
    LIVE_STREAM_URL,
    PLACEHOLDER_TEAM,
    TOP_SCORERS,
    TOURNAMENT_COLLECTION,
    TOURNAMENT_DOCUMENT,
    WELCOME_NEWS,
)
from torneo.core.codec import KEEPER_FIELDS, SCORER_FIELDS, parse_int
from torneo.core.subscription import Subscription
from torneo.errors import TournamentSaveError

from .models import Match, Stage, TournamentDocument

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client
    from google.cloud.firestore_v1.document import DocumentReference

logger = logging.getLogger(__name__)

GROUP_NAMES = ["A", "B", "C", "D"]
KNOCKOUT_ROUNDS = [
    ("Cuartos de Final", 4),
    ("Semifinal", 2),
    ("Final", 1),
    ("Tercer Puesto", 1),
]


def _match(team1: str, team2: str) -> Match:
    return {"team1": team1, "team2": team2, "score1": 0, "score2": 0}


def _score(value: Any) -> int:
    return max(parse_int(value), 0)


class TournamentService:
    """Reads, writes and watches the single tournament document.

    The whole document is replaced on every save. Two admins saving at the
    same time race, and whichever write Firestore commits last wins.
    """

    @staticmethod
    def _document_ref(db: Client) -> DocumentReference:
        return db.collection(TOURNAMENT_COLLECTION).document(TOURNAMENT_DOCUMENT)

    @staticmethod
    def default_tournament() -> TournamentDocument:
        """Build the tournament shape used when no document exists yet."""
        groups: list[Stage] = [
            {
                "name": f"Grupo {letter}",
                "matches": [
                    _match(f"Equipo {letter}1", f"Equipo {letter}2"),
                    _match(f"Equipo {letter}3", f"Equipo {letter}4"),
                ],
            }
            for letter in GROUP_NAMES
        ]
        knockout: list[Stage] = [
            {
                "name": name,
                "matches": [
                    _match(PLACEHOLDER_TEAM, PLACEHOLDER_TEAM) for _ in range(count)
                ],
            }
            for name, count in KNOCKOUT_ROUNDS
        ]
        return {
            GROUPS: groups,
            KNOCKOUT_STAGE: knockout,
            TOP_SCORERS: [],
            LEAST_BEATEN_KEEPERS: [],
            LATEST_NEWS: WELCOME_NEWS,
            LIVE_STREAM_URL: "",
        }

    @staticmethod
    def _normalize_stages(stages: Any) -> list[Stage]:
        normalized: list[Stage] = []
        for stage in stages or []:
            if not isinstance(stage, dict):
                continue
            matches: list[Match] = []
            for match in stage.get("matches") or []:
                if not isinstance(match, dict):
                    continue
                matches.append(
                    {
                        "team1": str(match.get("team1") or ""),
                        "team2": str(match.get("team2") or ""),
                        "score1": _score(match.get("score1")),
                        "score2": _score(match.get("score2")),
                    }
                )
            normalized.append({"name": str(stage.get("name") or ""), "matches": matches})
        return normalized

    @staticmethod
    def _normalize_records(records: Any, field_names: tuple[str, str]) -> list[Any]:
        label_field, value_field = field_names
        return [
            {
                label_field: str(record.get(label_field) or ""),
                value_field: parse_int(record.get(value_field)),
            }
            for record in records or []
            if isinstance(record, dict)
        ]

    @staticmethod
    def normalize(data: dict[str, Any] | None) -> TournamentDocument:
        """Coerce a raw Firestore payload into a complete tournament document.

        Missing keys fall back to the default tournament and scores that are
        not integers become 0.
        """
        data = data or {}
        default = TournamentService.default_tournament()
        groups = data.get(GROUPS)
        knockout = data.get(KNOCKOUT_STAGE)
        return {
            GROUPS: TournamentService._normalize_stages(
                default[GROUPS] if groups is None else groups
            ),
            KNOCKOUT_STAGE: TournamentService._normalize_stages(
                default[KNOCKOUT_STAGE] if knockout is None else knockout
            ),
            TOP_SCORERS: TournamentService._normalize_records(
                data.get(TOP_SCORERS), SCORER_FIELDS
            ),
            LEAST_BEATEN_KEEPERS: TournamentService._normalize_records(
                data.get(LEAST_BEATEN_KEEPERS), KEEPER_FIELDS
            ),
            LATEST_NEWS: str(data.get(LATEST_NEWS, default[LATEST_NEWS]) or ""),
            LIVE_STREAM_URL: str(data.get(LIVE_STREAM_URL) or ""),
        }

    @staticmethod
    def initialize_if_absent(db: Client | None = None) -> TournamentDocument:
        """Write the default tournament unless a document already exists.

        Safe to call any number of times; an existing document is returned
        untouched (apart from normalization).
        """
        if db is None:
            db = firestore.client()
        doc_ref = TournamentService._document_ref(db)
        snapshot = doc_ref.get()
        if snapshot.exists:
            return TournamentService.normalize(snapshot.to_dict())

        document = TournamentService.default_tournament()
        doc_ref.set(copy.deepcopy(document))
        logger.info("Tournament document initialized with defaults.")
        return document

    @staticmethod
    def load(db: Client | None = None) -> TournamentDocument | None:
        """Fetch the tournament, bootstrapping it first if needed.

        Returns None when Firestore cannot be reached.
        """
        try:
            return TournamentService.initialize_if_absent(db)
        except Exception as e:
            logger.error(f"Error fetching tournament data: {e}")
            return None

    @staticmethod
    def save(document: TournamentDocument, db: Client | None = None) -> None:
        """Replace the whole tournament document."""
        payload = TournamentService.normalize(copy.deepcopy(dict(document)))
        try:
            if db is None:
                db = firestore.client()
            TournamentService._document_ref(db).set(payload)
        except Exception as e:
            logger.error(f"Error updating tournament document: {e}")
            raise TournamentSaveError() from e

    @staticmethod
    def subscribe(
        callback: Callable[[TournamentDocument | None], None],
        db: Client | None = None,
    ) -> Subscription:
        """Watch the tournament document.

        ``callback`` receives the full normalized document on every change,
        or None if the document is deleted. The returned subscription must be
        released with ``unsubscribe()``.
        """
        if db is None:
            db = firestore.client()

        def on_snapshot(doc_snapshots: list[Any], changes: Any, read_time: Any) -> None:
            try:
                snapshot = doc_snapshots[-1] if doc_snapshots else None
                if snapshot is None or not snapshot.exists:
                    logger.warning("Tournament document is missing.")
                    callback(None)
                    return
                callback(TournamentService.normalize(snapshot.to_dict()))
            except Exception as e:
                logger.error(f"Error handling tournament snapshot: {e}")

        watch = TournamentService._document_ref(db).on_snapshot(on_snapshot)
        return Subscription(watch, "tournament")
