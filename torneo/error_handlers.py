"""App-wide error handlers.

Write failures and rejected input on form posts come back to the page the
visitor was on as a flash message; everything else renders an error page.
"""

from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_wtf.csrf import CSRFError
from google.api_core import exceptions as google_exceptions

from .errors import (
    AppError,
    BetPlacementError,
    NotFoundError,
    TournamentSaveError,
    ValidationError,
)

error_handlers_bp = Blueprint("error_handlers", __name__)

DB_ERROR_MESSAGE = "Ocurrió un error con la base de datos. Inténtalo más tarde."


def _back_to_form(message, category):
    flash(message, category)
    return redirect(request.referrer or url_for("tournament.home"))


@error_handlers_bp.app_errorhandler(ValidationError)
def handle_validation_error(error):
    """Rejected input: flash it on form posts, otherwise show the error page."""
    current_app.logger.warning(f"Validation Error: {error.message}")
    if request.method == "POST":
        return _back_to_form(error.message, "warning")
    return render_template("errors/error.html", error=error.message), error.status_code


@error_handlers_bp.app_errorhandler(TournamentSaveError)
@error_handlers_bp.app_errorhandler(BetPlacementError)
def handle_write_error(error):
    """A Firestore write failed; keep the visitor on the page they submitted."""
    current_app.logger.error(f"Write Error: {error.message}")
    return _back_to_form(error.message, "danger")


@error_handlers_bp.app_errorhandler(NotFoundError)
def handle_not_found_error(error):
    current_app.logger.warning(f"Not Found Error: {error.message}")
    return render_template("errors/404.html", error=error.message), error.status_code


@error_handlers_bp.app_errorhandler(AppError)
def handle_app_error(error):
    current_app.logger.error(f"Application Error: {error.message}")
    return render_template("errors/error.html", error=error.message), error.status_code


@error_handlers_bp.app_errorhandler(404)
def handle_404(e):
    return render_template("errors/404.html"), 404


@error_handlers_bp.app_errorhandler(500)
def handle_500(e):
    current_app.logger.error(f"Internal Server Error: {e}")
    return render_template("errors/500.html"), 500


@error_handlers_bp.app_errorhandler(google_exceptions.GoogleAPIError)
def handle_db_error(e):
    """Firestore errors that escaped the services."""
    current_app.logger.error(f"Database Error: {e}")
    # Raw Firestore errors can leak paths and project ids.
    return render_template("errors/error.html", error=DB_ERROR_MESSAGE), 500


@error_handlers_bp.app_errorhandler(CSRFError)
def handle_csrf_error(e):
    """An expired or missing CSRF token, usually a stale form."""
    current_app.logger.warning(f"CSRF Error: {e.description}")
    return _back_to_form("Tu sesión pudo haber expirado. Inténtalo de nuevo.", "warning")
