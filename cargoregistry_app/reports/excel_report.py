"""
Excel export of the cargo register.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from cargoregistry_app.models import Cargo

CARGO_COLUMNS = [
    "ID",
    "Tracking No",
    "Sender",
    "Sender Address",
    "Destination",
    "Status",
    "Items",
    "Total Weight (kg)",
]

ITEM_COLUMNS = [
    "Cargo ID",
    "Tracking No",
    "Item",
    "Quantity",
    "Unit Weight (kg)",
    "Item Weight (kg)",
]


def _style_header(ws) -> None:
    """Apply the register header style."""
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _stripe_body(ws, start_row: int = 2) -> None:
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        for cell in row:
            if cell.row % 2 == 0:
                cell.fill = stripe_fill


def build_register_frames(records: Iterable[Cargo]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """One row per cargo record, and one row per item."""
    cargo_rows: list[list] = []
    item_rows: list[list] = []
    for c in records:
        cargo_rows.append([
            c.id,
            c.tracking_number,
            c.sender,
            c.sender_address,
            c.destination,
            c.status,
            c.item_count,
            round(c.total_weight_kg, 2),
        ])
        for item in c.items:
            item_rows.append([
                c.id,
                c.tracking_number,
                item.name,
                item.quantity,
                round(item.unit_weight_kg, 2),
                round(item.item_weight_kg, 2),
            ])
    return (
        pd.DataFrame(cargo_rows, columns=CARGO_COLUMNS),
        pd.DataFrame(item_rows, columns=ITEM_COLUMNS),
    )


def export_register_to_excel(filepath: Path, records: Iterable[Cargo]) -> None:
    """Write the register to a two-sheet workbook (Cargo, Items)."""
    df_cargo, df_items = build_register_frames(records)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_cargo.to_excel(writer, sheet_name="Cargo", index=False)
        ws_cargo = writer.sheets["Cargo"]
        ws_cargo.column_dimensions["A"].width = 8
        ws_cargo.column_dimensions["B"].width = 14
        ws_cargo.column_dimensions["C"].width = 22
        ws_cargo.column_dimensions["D"].width = 30
        ws_cargo.column_dimensions["E"].width = 22
        ws_cargo.column_dimensions["F"].width = 16
        ws_cargo.column_dimensions["G"].width = 8
        ws_cargo.column_dimensions["H"].width = 18
        _style_header(ws_cargo)
        _stripe_body(ws_cargo)
        ws_cargo.freeze_panes = "A2"

        df_items.to_excel(writer, sheet_name="Items", index=False)
        ws_items = writer.sheets["Items"]
        ws_items.column_dimensions["A"].width = 10
        ws_items.column_dimensions["B"].width = 14
        ws_items.column_dimensions["C"].width = 26
        ws_items.column_dimensions["D"].width = 10
        ws_items.column_dimensions["E"].width = 18
        ws_items.column_dimensions["F"].width = 18
        _style_header(ws_items)
        _stripe_body(ws_items)
        ws_items.freeze_panes = "A2"
