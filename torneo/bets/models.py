"""Data models for the bets blueprint."""

from __future__ import annotations

from typing import Any

from torneo.core.types import FirestoreDocument


class Bet(FirestoreDocument, total=False):
    """A prediction document in the bets collection."""

    match: str
    team1: str
    team2: str
    betOn: str
    timestamp: Any
    userId: str

    # UI and calculated fields
    ticket: str
    date_display: str
