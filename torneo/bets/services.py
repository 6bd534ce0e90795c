"""Service layer for the bet ledger."""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Any, Callable

from firebase_admin import firestore
from flask import current_app, has_app_context

from torneo.constants import (
    ARTIFACTS_COLLECTION,
    BET_MATCH,
    BET_ON,
    BET_TEAM1,
    BET_TEAM2,
    BET_TIMESTAMP,
    BET_USER_ID,
    BETS_COLLECTION,
    DEFAULT_APP_ID,
    MATCH_SEPARATOR,
)
from torneo.core.subscription import Subscription
from torneo.errors import BetPlacementError, ValidationError

from .models import Bet
from .utils import EPOCH, format_timestamp, ticket_id, to_datetime

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_query import BaseQuery
    from google.cloud.firestore_v1.client import Client
    from google.cloud.firestore_v1.collection import CollectionReference

    from torneo.tournament.models import Match, Stage

logger = logging.getLogger(__name__)


def match_label(team1: str, team2: str) -> str:
    """The ``"TeamA vs TeamB"`` label a bet is filed under."""
    return f"{team1}{MATCH_SEPARATOR}{team2}"


def _sort_key(bet: Bet) -> datetime.datetime:
    try:
        return to_datetime(bet.get(BET_TIMESTAMP)) or EPOCH
    except (TypeError, ValueError):
        return EPOCH


class BetService:
    """One authoritative bet collection with a per-user and a global view.

    Every bet is written once, to ``artifacts/{app_id}/public/data/bets``.
    The per-user list is a query on ``userId`` over that same collection.
    """

    @staticmethod
    def _app_id() -> str:
        if has_app_context():
            return current_app.config.get("APP_ID") or DEFAULT_APP_ID
        return DEFAULT_APP_ID

    @staticmethod
    def _collection(db: Client) -> CollectionReference:
        return (
            db.collection(ARTIFACTS_COLLECTION)
            .document(BetService._app_id())
            .collection("public")
            .document("data")
            .collection(BETS_COLLECTION)
        )

    @staticmethod
    def _user_query(db: Client, user_id: str) -> BaseQuery:
        return BetService._collection(db).where(
            filter=firestore.FieldFilter(BET_USER_ID, "==", user_id)
        )

    @staticmethod
    def _to_bet(doc: Any) -> Bet:
        data = doc.to_dict() or {}
        bet: Bet = {**data, "id": doc.id}
        try:
            bet["ticket"] = ticket_id(data.get(BET_TIMESTAMP))
            bet["date_display"] = format_timestamp(data.get(BET_TIMESTAMP))
        except (TypeError, ValueError) as e:
            logger.warning(f"Bet {doc.id} has an unreadable timestamp: {e}")
        return bet

    @staticmethod
    def _sorted(docs: Any) -> list[Bet]:
        bets = [BetService._to_bet(doc) for doc in docs if doc.exists]
        bets.sort(key=_sort_key, reverse=True)
        return bets

    @staticmethod
    def find_match(groups: list[Stage], label: str) -> Match | None:
        """Resolve a ``"TeamA vs TeamB"`` label to a group match."""
        parts = (label or "").split(MATCH_SEPARATOR)
        if len(parts) != 2:  # noqa: PLR2004
            return None
        team1, team2 = parts
        for group in groups:
            for match in group.get("matches", []):
                if match.get("team1") == team1 and match.get("team2") == team2:
                    return match
        return None

    @staticmethod
    def match_choices(groups: list[Stage]) -> list[tuple[str, str]]:
        """Options for the betting form, one per group match."""
        choices = []
        for group in groups:
            for match in group.get("matches", []):
                label = match_label(match.get("team1", ""), match.get("team2", ""))
                choices.append((label, label))
        return choices

    @staticmethod
    def place_bet(  # noqa: PLR0913
        user_id: str,
        match: str,
        team1: str,
        team2: str,
        bet_on: str,
        db: Client | None = None,
    ) -> Bet:
        """Record a prediction. Bets are never edited or deleted."""
        if not user_id:
            raise ValidationError("Se requiere un usuario para apostar.")
        if bet_on not in (team1, team2):
            raise ValidationError("El ganador debe ser uno de los dos equipos.")

        bet_data = {
            BET_MATCH: match,
            BET_TEAM1: team1,
            BET_TEAM2: team2,
            BET_ON: bet_on,
            BET_TIMESTAMP: datetime.datetime.now(datetime.timezone.utc),
            BET_USER_ID: user_id,
        }
        try:
            if db is None:
                db = firestore.client()
            _, bet_ref = BetService._collection(db).add(bet_data)
        except Exception as e:
            logger.error(f"Error adding bet for user {user_id}: {e}")
            raise BetPlacementError() from e

        bet: Bet = {
            **bet_data,
            "id": bet_ref.id,
            "ticket": ticket_id(bet_data[BET_TIMESTAMP]),
            "date_display": format_timestamp(bet_data[BET_TIMESTAMP]),
        }
        return bet

    @staticmethod
    def list_for_user(user_id: str, db: Client | None = None) -> list[Bet]:
        """A user's bets, newest first."""
        if db is None:
            db = firestore.client()
        return BetService._sorted(BetService._user_query(db, user_id).stream())

    @staticmethod
    def list_all(db: Client | None = None) -> list[Bet]:
        """Every bet placed by anyone, newest first."""
        if db is None:
            db = firestore.client()
        return BetService._sorted(BetService._collection(db).stream())

    @staticmethod
    def subscribe_all(
        callback: Callable[[list[Bet]], None], db: Client | None = None
    ) -> Subscription:
        """Watch every bet; ``callback`` gets the sorted list on each change.

        The per-user view is served by filtering this snapshot on ``userId``.
        """
        if db is None:
            db = firestore.client()

        def on_snapshot(docs: list[Any], changes: Any, read_time: Any) -> None:
            try:
                callback(BetService._sorted(docs))
            except Exception as e:
                logger.error(f"Error handling bets snapshot: {e}")

        watch = BetService._collection(db).on_snapshot(on_snapshot)
        return Subscription(watch, "bets:all")
