"""Live snapshots of the tournament and the bet ledger.

Firestore pushes every change of the tournament document and of the bet
collection to ``LiveState``; views read the latest snapshot from here and
the page shell polls ``/live/version`` to re-render when it moves.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import TYPE_CHECKING, Any

from flask import Blueprint, current_app, jsonify

from torneo.bets.services import BetService
from torneo.constants import BET_USER_ID
from torneo.tournament.services import TournamentService

if TYPE_CHECKING:
    from flask import Flask
    from google.cloud.firestore_v1.client import Client

    from torneo.bets.models import Bet
    from torneo.core.subscription import Subscription
    from torneo.tournament.models import TournamentDocument

logger = logging.getLogger(__name__)

bp = Blueprint("live", __name__, url_prefix="/live")


class LiveState:
    """Holds the most recent snapshots delivered by the Firestore watches.

    No ordering is guaranteed between the tournament watch and the bets
    watch; each keeps its own version counter.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscriptions: list[Subscription] = []
        self._tournament: TournamentDocument | None = None
        self._bets: list[Bet] | None = None
        self.tournament_version = 0
        self.bets_version = 0

    def init_app(self, app: Flask) -> None:
        app.extensions["live_state"] = self
        if not app.config.get("LIVE_SYNC"):
            return
        with app.app_context():
            self.start()
        atexit.register(self.stop)

    @property
    def running(self) -> bool:
        return bool(self._subscriptions)

    def start(self, db: Client | None = None) -> None:
        """Bootstrap the tournament document, then open both watches."""
        if self.running:
            return
        try:
            TournamentService.initialize_if_absent(db)
            self._subscriptions.append(
                TournamentService.subscribe(self._on_tournament, db)
            )
            self._subscriptions.append(BetService.subscribe_all(self._on_bets, db))
        except Exception as e:
            logger.error(f"Error starting live subscriptions: {e}")
            self.stop()

    def stop(self) -> None:
        """Release every open watch."""
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.unsubscribe()

    def _on_tournament(self, document: TournamentDocument | None) -> None:
        with self._lock:
            self._tournament = document
            self.tournament_version += 1

    def _on_bets(self, bets: list[Bet]) -> None:
        with self._lock:
            self._bets = bets
            self.bets_version += 1

    @property
    def tournament(self) -> TournamentDocument | None:
        with self._lock:
            return self._tournament

    @property
    def bets(self) -> list[Bet] | None:
        with self._lock:
            return self._bets

    def versions(self) -> dict[str, int]:
        with self._lock:
            return {
                "tournament": self.tournament_version,
                "bets": self.bets_version,
            }


def _live_state() -> LiveState | None:
    return current_app.extensions.get("live_state")


def current_tournament() -> TournamentDocument:
    """The latest tournament document, or an empty one if it cannot be read."""
    state = _live_state()
    document = state.tournament if state else None
    if document is None:
        document = TournamentService.load()
    if document is None:
        document = TournamentService.normalize(
            {"groups": [], "knockoutStage": [], "latestNews": ""}
        )
    return document


def current_bets() -> list[Bet]:
    """Every bet, newest first, or an empty list if the ledger cannot be read."""
    state = _live_state()
    bets = state.bets if state else None
    if bets is not None:
        return bets
    try:
        return BetService.list_all()
    except Exception as e:
        current_app.logger.error(f"Error fetching all bets: {e}")
        return []


def current_user_bets(user_id: str) -> list[Bet]:
    """A visitor's bets, newest first, taken from the all-bets snapshot if live."""
    state = _live_state()
    bets = state.bets if state else None
    if bets is not None:
        return [bet for bet in bets if bet.get(BET_USER_ID) == user_id]
    try:
        return BetService.list_for_user(user_id)
    except Exception as e:
        current_app.logger.error(f"Error fetching bets of user {user_id}: {e}")
        return []


@bp.route("/version")
def version() -> Any:
    """Current snapshot versions, polled by the page shell."""
    state = _live_state()
    if state is None:
        return jsonify({"tournament": 0, "bets": 0})
    return jsonify(state.versions())
