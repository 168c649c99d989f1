"""
Line codec for the cargo data file.

One record per line, pipe-delimited, each field followed by the delimiter:

    id|tracking|sender|address|destination|status|total|count|name|qty|unit|...

Field values are written as-is. A value containing the delimiter or a newline
will not survive a reload.
"""

from __future__ import annotations

import math
from typing import List

from cargoregistry_app.config.limits import (
    FIELD_DELIMITER,
    ITEM_FIELDS,
    MAX_ITEMS,
    RECORD_PREFIX_FIELDS,
    WEIGHT_DECIMALS,
)
from cargoregistry_app.errors import InvalidNumericFieldError, MalformedRecordError
from cargoregistry_app.models import Cargo, CargoItem


def _fmt_weight(value: float) -> str:
    return f"{value:.{WEIGHT_DECIMALS}f}"


def encode(cargo: Cargo) -> str:
    fields: List[str] = [
        str(cargo.id),
        cargo.tracking_number,
        cargo.sender,
        cargo.sender_address,
        cargo.destination,
        cargo.status,
        _fmt_weight(cargo.total_weight_kg),
        str(cargo.item_count),
    ]
    for item in cargo.items:
        fields.extend([item.name, str(item.quantity), _fmt_weight(item.unit_weight_kg)])
    return "".join(f"{value}{FIELD_DELIMITER}" for value in fields) + "\n"


def _parse_int(field_name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidNumericFieldError(field_name, raw) from None


def _parse_float(field_name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidNumericFieldError(field_name, raw) from None
    if not math.isfinite(value):
        raise InvalidNumericFieldError(field_name, raw)
    return value


def decode(line: str) -> Cargo:
    """
    Parse one data file line into a Cargo record.

    Raises MalformedRecordError when the fixed prefix is incomplete or the item
    count is out of range or the tracking number is empty, and
    InvalidNumericFieldError when a numeric field does not parse. Items
    missing from the end of the line are left as empty CargoItem() entries so
    the record keeps its declared item count. The stored total is checked but
    the record total is recomputed from its items.
    """
    text = line.rstrip("\n").rstrip("\r")
    if not text.strip():
        raise MalformedRecordError("Empty record line.")

    fields = text.split(FIELD_DELIMITER)
    # Drop the empty token after the closing delimiter
    if text.endswith(FIELD_DELIMITER):
        fields.pop()

    if len(fields) < RECORD_PREFIX_FIELDS:
        raise MalformedRecordError(
            f"Expected at least {RECORD_PREFIX_FIELDS} fields, found {len(fields)}."
        )

    cargo_id = _parse_int("id", fields[0])
    if not fields[1]:
        raise MalformedRecordError(f"Cargo {cargo_id} has an empty tracking number.")
    _parse_float("total_weight", fields[6])
    item_count = _parse_int("item_count", fields[7])
    if item_count < 0 or item_count > MAX_ITEMS:
        raise MalformedRecordError(
            f"Item count {item_count} outside 0..{MAX_ITEMS}."
        )

    items: List[CargoItem] = []
    pos = RECORD_PREFIX_FIELDS
    for _ in range(item_count):
        chunk = fields[pos:pos + ITEM_FIELDS]
        if len(chunk) < ITEM_FIELDS:
            break
        name, raw_qty, raw_unit = chunk
        items.append(
            CargoItem(
                name=name,
                quantity=_parse_int("quantity", raw_qty),
                unit_weight_kg=_parse_float("unit_weight", raw_unit),
            )
        )
        pos += ITEM_FIELDS
    while len(items) < item_count:
        items.append(CargoItem())

    return Cargo(
        id=cargo_id,
        tracking_number=fields[1],
        sender=fields[2],
        sender_address=fields[3],
        destination=fields[4],
        status=fields[5],
        items=items,
    )
