"""Data models for the tournament blueprint."""

from __future__ import annotations

from typing import TypedDict


class Match(TypedDict):
    """A single fixture with its current score."""

    team1: str
    team2: str
    score1: int
    score2: int


class Stage(TypedDict):
    """A named list of matches, used for both groups and knockout rounds."""

    name: str
    matches: list[Match]


# Groups and knockout rounds share the same document shape.
Group = Stage
KnockoutStage = Stage


class PlayerStat(TypedDict):
    """A top scorer entry."""

    name: str
    goals: int


class KeeperStat(TypedDict):
    """A least-beaten goalkeeper entry."""

    name: str
    goalsConceded: int


class TournamentDocument(TypedDict):
    """The single tournament document stored in Firestore."""

    groups: list[Group]
    knockoutStage: list[KnockoutStage]
    topScorers: list[PlayerStat]
    leastBeatenKeepers: list[KeeperStat]
    latestNews: str
    liveStreamUrl: str
