"""Admin routes for the application."""

from typing import Any

from flask import (
    flash,
    redirect,
    render_template,
    request,
    url_for,
)

from torneo import live
from torneo.auth.decorators import admin_required
from torneo.auth.forms import AdminLoginForm
from torneo.auth.services import AdminGate
from torneo.core.codec import encode_keepers, encode_scorers
from torneo.errors import TournamentSaveError
from torneo.tournament.services import TournamentService

from . import bp
from .forms import ContentForm
from .services import STAGE_PREFIXES, AdminService, match_field_name

ADMIN_VIEWS = ("main", "bets")
SAMPLE_BETS_COUNT = 10


@bp.route("/")
def panel() -> Any:
    """Render the login form, or the admin panel once logged in."""
    if not AdminGate.is_logged_in():
        return render_template("admin/login.html", form=AdminLoginForm())

    viewing = request.args.get("view", "main")
    if viewing not in ADMIN_VIEWS:
        viewing = "main"

    if viewing == "bets":
        return render_template(
            "admin/bets.html",
            viewing=viewing,
            all_bets=live.current_bets(),
            live_reload=True,
        )

    tournament = live.current_tournament()
    form = ContentForm(
        data={
            "top_scorers": encode_scorers(tournament["topScorers"]),
            "least_beaten_keepers": encode_keepers(tournament["leastBeatenKeepers"]),
            "latest_news": tournament["latestNews"],
            "live_stream_url": tournament["liveStreamUrl"],
        }
    )
    return render_template(
        "admin/panel.html",
        viewing=viewing,
        form=form,
        tournament=tournament,
        stage_prefixes=STAGE_PREFIXES,
        field_name=match_field_name,
    )


@bp.route("/login", methods=["POST"])
def login() -> Any:
    """Check the admin password on the server."""
    form = AdminLoginForm()
    if form.validate_on_submit() and AdminGate.login(form.password.data):
        return redirect(url_for(".panel"))
    flash("Contraseña incorrecta.", "danger")
    return render_template("admin/login.html", form=form), 401


@bp.route("/logout", methods=["POST"])
def logout() -> Any:
    """Drop the admin flag and go back home."""
    AdminGate.logout()
    return redirect(url_for("tournament.home"))


@bp.route("/save", methods=["POST"])
@admin_required
def save() -> Any:
    """Replace the tournament document with the submitted draft."""
    form = ContentForm()
    if not form.validate_on_submit():
        flash("No se pudieron guardar los cambios.", "danger")
        return redirect(url_for(".panel"))

    current = TournamentService.load() or live.current_tournament()
    document = AdminService.apply_draft(
        current,
        request.form,
        form.top_scorers.data,
        form.least_beaten_keepers.data,
        form.latest_news.data,
        form.live_stream_url.data,
    )
    try:
        TournamentService.save(document)
        flash("Información actualizada con éxito.", "success")
    except TournamentSaveError as e:
        flash(e.message, "danger")
    return redirect(url_for(".panel"))


@bp.route("/generate_bets", methods=["POST"])
@admin_required
def generate_bets() -> Any:
    """Place a batch of random bets from fake users."""
    groups = live.current_tournament()["groups"]
    # A failed write is flashed by the app-wide BetPlacementError handler.
    bets = AdminService.generate_sample_bets(groups, SAMPLE_BETS_COUNT)
    flash(f"{len(bets)} apuestas de prueba generadas.", "success")
    return redirect(url_for(".panel", view="bets"))
