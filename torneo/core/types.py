"""Core data types for the torneo application."""

from typing import Any, Dict, Tuple, TypedDict  # noqa: UP035


class FirestoreDocument(TypedDict, total=False):
    """Generic Firestore document structure as read back by the services."""

    id: str
    path: str


# A stat record such as {"name": "Lionel", "goals": 3}.
Record = Dict[str, Any]  # noqa: UP006

# Field names of a stat record, e.g. ("name", "goals").
FieldNames = Tuple[str, str]  # noqa: UP006
