"""Routes for the bets blueprint."""

from __future__ import annotations

from typing import Any

from flask import flash, g, redirect, render_template, request, url_for

from torneo import live
from torneo.auth.decorators import identity_required
from torneo.errors import BetPlacementError, ValidationError

from . import bp
from .forms import BetForm
from .services import BetService


@bp.route("/", methods=["GET", "POST"])
@identity_required
def betting() -> Any:
    """Place a prediction and list the visitor's tickets."""
    groups = live.current_tournament()["groups"]
    form = BetForm()
    if request.method == "GET" and request.args.get("match"):
        form.match.data = request.args["match"]
    form.set_match_choices(BetService.match_choices(groups))

    if form.validate_on_submit():
        match = BetService.find_match(groups, form.match.data)
        if match is None:
            flash("Por favor, selecciona un partido y un ganador.", "warning")
            return redirect(url_for(".betting"))
        try:
            BetService.place_bet(
                g.user_id,
                form.match.data,
                match["team1"],
                match["team2"],
                form.winner.data,
            )
            flash("¡Apuesta realizada con éxito! Tu boleto ha sido guardado.", "success")
        except (BetPlacementError, ValidationError) as e:
            flash(e.message, "danger")
        return redirect(url_for(".betting"))

    if request.method == "POST":
        for errors in form.errors.values():
            for error in errors:
                flash(error, "warning")

    return render_template(
        "bets/betting.html",
        form=form,
        user_bets=live.current_user_bets(g.user_id),
        live_reload=True,
    )
