"""Routes for the tournament blueprint."""

from __future__ import annotations

from typing import Any

from flask import current_app, render_template

from torneo import live
from torneo.core.share import facebook_link, instagram_link, whatsapp_link

from . import bp

HOME_SHARE_TEXT = (
    "¡Mira la transmisión en vivo del torneo de fútbol! No te pierdas la acción."
)
PHOTO_SHARE_TEXT = "Mira esta foto del torneo: {description}"

PHOTOS = [
    {
        "url": "https://images.unsplash.com/photo-1517466801968-3e421043325e?q=80&w=2940&auto=format&fit=crop",
        "description": "Celebración del equipo ganador",
    },
    {
        "url": "https://images.unsplash.com/photo-1510425330882-628d4e9d727b?q=80&w=2940&auto=format&fit=crop",
        "description": "Jugadores en el campo",
    },
    {
        "url": "https://images.unsplash.com/photo-1549480111-e25f82216a9a?q=80&w=2940&auto=format&fit=crop",
        "description": "Foto del equipo finalista",
    },
    {
        "url": "https://images.unsplash.com/photo-1506180327318-62d08a562470?q=80&w=2940&auto=format&fit=crop",
        "description": "Entrada de los equipos",
    },
]


@bp.route("/")
def home() -> Any:
    """Live stream, latest news and share buttons."""
    tournament = live.current_tournament()
    site_url = current_app.config["SITE_URL"]
    return render_template(
        "tournament/home.html",
        latest_news=tournament["latestNews"],
        live_stream_url=tournament["liveStreamUrl"],
        whatsapp_url=whatsapp_link(HOME_SHARE_TEXT, site_url),
        facebook_url=facebook_link(site_url),
        live_reload=True,
    )


@bp.route("/fixture")
def fixture() -> Any:
    """Group stage and knockout bracket with current scores."""
    tournament = live.current_tournament()
    return render_template(
        "tournament/fixture.html",
        groups=tournament["groups"],
        knockout_stage=tournament["knockoutStage"],
        live_reload=True,
    )


@bp.route("/stats")
def stats() -> Any:
    """Top scorers and least beaten goalkeepers."""
    tournament = live.current_tournament()
    return render_template(
        "tournament/stats.html",
        top_scorers=tournament["topScorers"],
        least_beaten_keepers=tournament["leastBeatenKeepers"],
        live_reload=True,
    )


@bp.route("/media")
def media() -> Any:
    """Photo gallery with per-photo share links."""
    photos = [
        {
            **photo,
            "whatsapp_url": whatsapp_link(
                PHOTO_SHARE_TEXT.format(description=photo["description"]),
                photo["url"],
            ),
            "facebook_url": facebook_link(photo["url"]),
            "instagram_url": instagram_link(photo["url"]),
        }
        for photo in PHOTOS
    ]
    return render_template("tournament/media.html", photos=photos)
