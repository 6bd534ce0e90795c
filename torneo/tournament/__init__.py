"""Tournament blueprint: home, fixture, stats and media pages."""

from flask import Blueprint

bp = Blueprint("tournament", __name__)

from . import routes  # noqa: E402, F401
from .models import Match, Stage, TournamentDocument  # noqa: E402
from .services import TournamentService  # noqa: E402

__all__ = ["Match", "Stage", "TournamentDocument", "TournamentService", "routes"]
