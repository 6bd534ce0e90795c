"""Core module for the torneo application."""

from .subscription import Subscription
from .types import FirestoreDocument, Record

__all__ = ["FirestoreDocument", "Record", "Subscription"]
