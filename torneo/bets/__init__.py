"""Bets blueprint."""

from flask import Blueprint

bp = Blueprint("bets", __name__, url_prefix="/bets")

from . import routes  # noqa: E402, F401
from .models import Bet  # noqa: E402
from .services import BetService  # noqa: E402

__all__ = ["Bet", "BetService", "routes"]
