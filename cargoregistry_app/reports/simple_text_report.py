"""
Simple text-based views of the cargo registry (table, detail, total).
"""

from __future__ import annotations

from typing import Iterable

from cargoregistry_app.models import Cargo

_TABLE_RULE = "=" * 111
_DETAIL_RULE = "=" * 50


def _table_header() -> list[str]:
    return [
        _TABLE_RULE,
        f"{'ID':<5} {'Tracking No':<12} {'Sender':<15} {'Destination':<20} "
        f"{'Items':<15} {'Weight(kg)':<10} {'Status':<15}",
        _TABLE_RULE,
    ]


def _table_row(cargo: Cargo) -> str:
    return (
        f"{cargo.id:<5d} {cargo.tracking_number:<12} {cargo.sender:<15} "
        f"{cargo.destination:<20} {cargo.item_count:<15d} "
        f"{cargo.total_weight_kg:<10.2f} {cargo.status:<15}"
    )


def build_cargo_table_text(records: Iterable[Cargo], title: str = "") -> str:
    rows = [_table_row(c) for c in records]
    if not rows:
        return "No cargo records available."
    lines: list[str] = []
    if title:
        lines.append(f"--- {title} ---")
    lines.extend(_table_header())
    lines.extend(rows)
    lines.append(_TABLE_RULE)
    lines.append(f"Total records: {len(rows)}")
    return "\n".join(lines)


def build_cargo_detail_text(cargo: Cargo) -> str:
    lines: list[str] = [_DETAIL_RULE]
    lines.append(f"ID: {cargo.id}")
    lines.append(f"Tracking Number: {cargo.tracking_number}")
    lines.append(f"Sender: {cargo.sender}")
    lines.append(f"Sender Address: {cargo.sender_address}")
    lines.append(f"Destination: {cargo.destination}")
    lines.append(f"Status: {cargo.status}")
    lines.append(f"Total Weight: {cargo.total_weight_kg:.2f} kg")
    lines.append("Items:")
    for item in cargo.items:
        lines.append(f"  {item.quantity} x {item.name} ({item.unit_weight_kg:.2f} kg each)")
    lines.append(_DETAIL_RULE)
    return "\n".join(lines)


def build_total_weight_text(total_kg: float) -> str:
    return f"Total weight of all cargo: {total_kg:.2f} kg"
