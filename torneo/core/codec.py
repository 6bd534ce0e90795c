"""Delimited-text codec for the admin's scorer and keeper textareas.

Records are written as ``name,value`` pairs joined by ``;``, for example
``"Ana,3;Luis,1"``. There is no escaping: a name containing ``,`` or ``;``
will not survive a round trip.
"""

from __future__ import annotations

import re
from typing import Any

from torneo.constants import FIELD_SEPARATOR, RECORD_SEPARATOR

from .types import FieldNames, Record

SCORER_FIELDS: FieldNames = ("name", "goals")
KEEPER_FIELDS: FieldNames = ("name", "goalsConceded")

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any, default: int = 0) -> int:
    """Read the leading integer of a value, so ``" 3 goles"`` and ``"3.7"`` give 3.

    Returns ``default`` when the value does not start with a number.
    """
    if value is None:
        return default
    match = LEADING_INT_RE.match(str(value))
    if match is None:
        return default
    return int(match.group(1))


def encode(records: list[Record], field_names: FieldNames) -> str:
    """Serialize records into the ``name,value;name,value`` text format."""
    label_field, value_field = field_names
    return RECORD_SEPARATOR.join(
        f"{record.get(label_field, '')}{FIELD_SEPARATOR}{record.get(value_field, 0)}"
        for record in records
    )


def decode(text: str | None, field_names: FieldNames) -> list[Record]:
    """Parse the ``name,value;name,value`` text format into records.

    The label is stripped and the value defaults to 0 when it is missing or
    not an integer. Blank entries (such as a trailing ``;``) are skipped.
    """
    label_field, value_field = field_names
    records: list[Record] = []
    for entry in (text or "").split(RECORD_SEPARATOR):
        if not entry.strip():
            continue
        parts = entry.split(FIELD_SEPARATOR)
        value = parts[1] if len(parts) > 1 else None
        records.append(
            {label_field: parts[0].strip(), value_field: parse_int(value)}
        )
    return records


def encode_scorers(records: list[Record]) -> str:
    return encode(records, SCORER_FIELDS)


def decode_scorers(text: str | None) -> list[Record]:
    return decode(text, SCORER_FIELDS)


def encode_keepers(records: list[Record]) -> str:
    return encode(records, KEEPER_FIELDS)


def decode_keepers(text: str | None) -> list[Record]:
    return decode(text, KEEPER_FIELDS)
