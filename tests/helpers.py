"""Common utilities for tests."""

from __future__ import annotations

import unittest
from unittest.mock import patch

from torneo import create_app

from .mock_utils import MockFirestoreBuilder, patch_mockfirestore

MOCK_USER_ID = "anon_uid"
TEST_ADMIN_PASSWORD = "S3cret-admin"  # nosec


class FirebaseTestCase(unittest.TestCase):
    """Runs the app against mockfirestore with a mocked identity provider."""

    def setUp(self) -> None:
        """Set up a test client and a comprehensive mock environment."""
        self.mock_db = patch_mockfirestore()
        self.mock_firestore_module = MockFirestoreBuilder.firestore_module(self.mock_db)
        self.mock_auth = MockFirestoreBuilder.patch_db_auth(MOCK_USER_ID)

        patchers = {
            "init_app": patch("firebase_admin.initialize_app"),
            "firestore_tournament": patch(
                "torneo.tournament.services.firestore",
                new=self.mock_firestore_module,
            ),
            "firestore_bets": patch(
                "torneo.bets.services.firestore", new=self.mock_firestore_module
            ),
            "auth": patch("torneo.auth.services.auth", new=self.mock_auth),
        }

        self.mocks = {name: p.start() for name, p in patchers.items()}
        for p in patchers.values():
            self.addCleanup(p.stop)

        self.app = create_app(
            {
                "TESTING": True,
                "WTF_CSRF_ENABLED": False,
                "SERVER_NAME": "localhost",
                "ADMIN_PASSWORD": TEST_ADMIN_PASSWORD,
            }
        )
        self.client = self.app.test_client()
        self.app_context = self.app.app_context()
        self.app_context.push()

    def tearDown(self) -> None:
        """Tear down the test client."""
        self.app_context.pop()

    def set_session_user(self, user_id: str = MOCK_USER_ID) -> None:
        """Reuse an existing anonymous identity."""
        with self.client.session_transaction() as sess:
            sess["user_id"] = user_id

    def login_admin(self) -> None:
        """Flag the session as admin without going through the form."""
        with self.client.session_transaction() as sess:
            sess["is_admin"] = True

    def bets_collection(self):
        return (
            self.mock_db.collection("artifacts")
            .document("default-app-id")
            .collection("public")
            .document("data")
            .collection("bets")
        )

    def tournament_ref(self):
        return self.mock_db.collection("torneos").document("torneo-fixture")
