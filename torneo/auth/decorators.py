"""Decorators for identity and admin access."""

from functools import wraps

from flask import flash, g, redirect, render_template, session, url_for

from torneo.constants import SESSION_IS_ADMIN

from .services import IdentityService


def identity_required(f):
    """Resolve the visitor's anonymous identity, creating one on first use.

    Shows the loading page while no identity can be obtained.

    Usage:
    @identity_required
    def betting():
        ...
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not g.get("user_id"):
            g.user_id = IdentityService.get_or_create_anonymous_identity()
        if not g.user_id:
            return render_template("loading.html"), 503
        return f(*args, **kwargs)

    return decorated_function


def admin_required(f):
    """Redirect to the admin login form unless the session is flagged admin."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get(SESSION_IS_ADMIN):
            flash("Inicia sesión como administrador para continuar.", "warning")
            return redirect(url_for("admin.panel"))
        return f(*args, **kwargs)

    return decorated_function
