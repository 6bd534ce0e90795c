"""Identity acquisition and admin credential checks."""

from __future__ import annotations

from firebase_admin import auth
from flask import current_app, session
from werkzeug.security import check_password_hash

from torneo.constants import SESSION_IS_ADMIN, SESSION_USER_ID


class IdentityService:
    """Resolves the anonymous identity that scopes a visitor's bets."""

    @staticmethod
    def get_or_create_anonymous_identity() -> str | None:
        """Return the session's uid, creating an anonymous Firebase user if needed.

        Returns None when the identity provider cannot be reached; callers
        keep the visitor on the loading page in that case.
        """
        user_id = session.get(SESSION_USER_ID)
        if user_id:
            return user_id

        try:
            # A user record without email, phone or password is anonymous.
            user_record = auth.create_user()
        except Exception as e:
            current_app.logger.error(f"Error creating anonymous identity: {e}")
            return None

        session.permanent = True
        session[SESSION_USER_ID] = user_record.uid
        current_app.logger.info(f"Anonymous identity {user_record.uid} created.")
        return user_record.uid


class AdminGate:
    """Server-side check of the shared admin password."""

    @staticmethod
    def is_logged_in() -> bool:
        return bool(session.get(SESSION_IS_ADMIN))

    @staticmethod
    def login(password: str | None) -> bool:
        """Flag the session as admin if the password matches the configured one."""
        password_hash = current_app.config.get("ADMIN_PASSWORD_HASH")
        if not password or not password_hash:
            session.pop(SESSION_IS_ADMIN, None)
            return False
        if not check_password_hash(password_hash, password):
            current_app.logger.warning("Failed admin login attempt.")
            session.pop(SESSION_IS_ADMIN, None)
            return False
        session[SESSION_IS_ADMIN] = True
        current_app.logger.info("Admin logged in.")
        return True

    @staticmethod
    def logout() -> None:
        session.pop(SESSION_IS_ADMIN, None)
