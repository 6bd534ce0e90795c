"""Service layer for the admin panel."""

from __future__ import annotations

import copy
import random
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from faker import Faker

from torneo.bets.services import BetService, match_label
from torneo.constants import (
    GROUPS,
    KNOCKOUT_STAGE,
    LATEST_NEWS,
    LEAST_BEATEN_KEEPERS,
    LIVE_STREAM_URL,
    TOP_SCORERS,
)
from torneo.core.codec import decode_keepers, decode_scorers, parse_int

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

    from torneo.bets.models import Bet
    from torneo.tournament.models import Stage, TournamentDocument

# Form field prefix for each editable list of stages.
STAGE_PREFIXES = {GROUPS: "groups", KNOCKOUT_STAGE: "knockout"}
TEAM_FIELDS = ("team1", "team2")
SCORE_FIELDS = ("score1", "score2")


def match_field_name(prefix: str, stage_index: int, match_index: int, field: str) -> str:
    """Name of the form input editing one field of one match."""
    return f"{prefix}-{stage_index}-{match_index}-{field}"


class AdminService:
    """Turns the admin's draft into a tournament document."""

    @staticmethod
    def _apply_stage_edits(
        stages: list[Stage], prefix: str, form_data: Mapping[str, Any]
    ) -> None:
        for stage_index, stage in enumerate(stages):
            for match_index, match in enumerate(stage["matches"]):
                for field in TEAM_FIELDS:
                    name = match_field_name(prefix, stage_index, match_index, field)
                    value = (form_data.get(name) or "").strip()
                    # A blank team name keeps the current one.
                    if value:
                        match[field] = value
                for field in SCORE_FIELDS:
                    name = match_field_name(prefix, stage_index, match_index, field)
                    if name in form_data:
                        match[field] = max(parse_int(form_data.get(name)), 0)

    @staticmethod
    def apply_draft(  # noqa: PLR0913
        current: TournamentDocument,
        form_data: Mapping[str, Any],
        scorers_text: str | None,
        keepers_text: str | None,
        latest_news: str | None,
        live_stream_url: str | None,
    ) -> TournamentDocument:
        """Build the full document to save from the current one and the draft.

        Match inputs that are absent from ``form_data`` leave the match
        untouched; scores that are not integers become 0.
        """
        document = copy.deepcopy(current)
        for key, prefix in STAGE_PREFIXES.items():
            AdminService._apply_stage_edits(document[key], prefix, form_data)
        document[TOP_SCORERS] = decode_scorers(scorers_text)
        document[LEAST_BEATEN_KEEPERS] = decode_keepers(keepers_text)
        document[LATEST_NEWS] = latest_news or ""
        document[LIVE_STREAM_URL] = (live_stream_url or "").strip()
        return document

    @staticmethod
    def generate_sample_bets(
        groups: list[Stage], count: int = 10, db: Client | None = None
    ) -> list[Bet]:
        """Place ``count`` random bets from fake users on the group matches."""
        fake = Faker()
        matches = [match for group in groups for match in group["matches"]]
        if not matches:
            return []

        bets = []
        for _ in range(count):
            match = random.choice(matches)  # nosec
            team1, team2 = match["team1"], match["team2"]
            bets.append(
                BetService.place_bet(
                    fake.uuid4(),
                    match_label(team1, team2),
                    team1,
                    team2,
                    random.choice([team1, team2]),  # nosec
                    db,
                )
            )
        return bets
