"""Context processors for the Flask application."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any

from flask import current_app, g, has_request_context, request

from .auth.services import AdminGate
from .constants import NAV_PAGES, VERSION_SHORT_LENGTH, VERSION_THRESHOLD


def inject_global_context() -> dict[str, Any]:
    """Injects global context variables into templates."""
    # Detect version from environment variables with the following priority:
    # 1. APP_VERSION (explicitly set)
    # 2. GITHUB_SHA (GitHub Actions build)
    # 3. RENDER_GIT_COMMIT or HEROKU_SLUG_COMMIT (Git Hash from Render/Heroku)
    # 4. VERSION file next to the package
    version = (
        os.environ.get("APP_VERSION")
        or os.environ.get("GITHUB_SHA")
        or os.environ.get("RENDER_GIT_COMMIT")
        or os.environ.get("HEROKU_SLUG_COMMIT")
    )

    if not version:
        version_file = Path(current_app.root_path).parent / "VERSION"
        if version_file.exists():
            version = version_file.read_text().strip()

    if not version:
        version = "dev"

    # If it's a long git hash, shorten it
    if len(version) > VERSION_THRESHOLD and version != "dev":
        version = version[:VERSION_SHORT_LENGTH]

    return {
        "current_year": datetime.now().year,
        "app_version": version,
        "is_testing": current_app.config.get("TESTING", False),
    }


def inject_navigation() -> dict[str, Any]:
    """Injects the navigation shell entries and the visitor's identity."""
    if not has_request_context():
        return {"nav_pages": [], "user_id": None, "is_admin": False}
    current_endpoint = request.endpoint
    nav_pages = [
        {
            "endpoint": endpoint,
            "label": label,
            "active": endpoint == current_endpoint,
        }
        for endpoint, label in NAV_PAGES
    ]
    return {
        "nav_pages": nav_pages,
        "user_id": g.get("user_id"),
        "is_admin": AdminGate.is_logged_in(),
    }
