"""
Add New Cargo dialog.

Form: ID, Sender, Sender Address, Destination, Status.
Items table: Item Name, Quantity, Unit Weight (kg), up to MAX_ITEMS rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from PyQt6.QtWidgets import (
    QAbstractItemView,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..config.limits import MAX_ITEMS, MAX_TEXT_LENGTH
from ..services.validation import ItemInput


@dataclass(slots=True)
class CargoFormData:
    cargo_id: int
    sender: str
    sender_address: str
    destination: str
    status: str
    items: List[ItemInput] = field(default_factory=list)


class AddCargoDialog(QDialog):
    """Collects the fields for a new cargo record."""

    def __init__(self, parent: QWidget | None = None, suggested_id: int = 1) -> None:
        super().__init__(parent)
        self.setWindowTitle("Add New Cargo")
        self.setMinimumSize(560, 480)
        self._result: Optional[CargoFormData] = None

        form = QFormLayout()
        self._id_spin = QSpinBox(self)
        self._id_spin.setRange(-2_147_483_648, 2_147_483_647)
        self._id_spin.setValue(suggested_id)
        form.addRow("Cargo ID:", self._id_spin)

        self._sender_edit = self._line_edit("e.g. Acme Co")
        form.addRow("Sender:", self._sender_edit)
        self._address_edit = self._line_edit("e.g. 123 Main St")
        form.addRow("Sender Address:", self._address_edit)
        self._destination_edit = self._line_edit("e.g. Springfield")
        form.addRow("Destination:", self._destination_edit)
        self._status_edit = self._line_edit("e.g. In Transit, Delivered, Warehouse")
        form.addRow("Status:", self._status_edit)

        self._items_table = QTableWidget(0, 3, self)
        self._items_table.setHorizontalHeaderLabels(["Item Name", "Quantity", "Unit Weight (kg)"])
        self._items_table.horizontalHeader().setSectionResizeMode(
            0, QHeaderView.ResizeMode.Stretch
        )
        self._items_table.setSelectionBehavior(
            QAbstractItemView.SelectionBehavior.SelectRows
        )

        self._add_item_btn = QPushButton("Add Item", self)
        remove_item_btn = QPushButton("Remove Item", self)
        self._add_item_btn.clicked.connect(self._on_add_item)
        remove_item_btn.clicked.connect(self._on_remove_item)
        item_btns = QHBoxLayout()
        item_btns.addWidget(self._add_item_btn)
        item_btns.addWidget(remove_item_btn)
        item_btns.addStretch()

        bbox = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel,
            self,
        )
        bbox.accepted.connect(self._on_ok)
        bbox.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(QLabel(f"Cargo items (max {MAX_ITEMS}):", self))
        root.addWidget(self._items_table, 1)
        root.addLayout(item_btns)
        root.addWidget(bbox)

        self._on_add_item()

    def _line_edit(self, placeholder: str) -> QLineEdit:
        edit = QLineEdit(self)
        edit.setMaxLength(MAX_TEXT_LENGTH - 1)
        edit.setPlaceholderText(placeholder)
        return edit

    def form_data(self) -> Optional[CargoFormData]:
        return self._result

    def _on_add_item(self) -> None:
        row = self._items_table.rowCount()
        if row >= MAX_ITEMS:
            QMessageBox.information(self, "Items", "Maximum items reached.")
            return
        self._items_table.insertRow(row)
        self._items_table.setItem(row, 0, QTableWidgetItem(""))
        self._items_table.setItem(row, 1, QTableWidgetItem("1"))
        self._items_table.setItem(row, 2, QTableWidgetItem("1.00"))
        self._add_item_btn.setEnabled(self._items_table.rowCount() < MAX_ITEMS)

    def _on_remove_item(self) -> None:
        row = self._items_table.currentRow()
        if row < 0:
            row = self._items_table.rowCount() - 1
        if row >= 0:
            self._items_table.removeRow(row)
        self._add_item_btn.setEnabled(self._items_table.rowCount() < MAX_ITEMS)

    def _cell_text(self, row: int, col: int) -> str:
        cell = self._items_table.item(row, col)
        return cell.text().strip() if cell else ""

    def _collect_items(self) -> List[ItemInput] | None:
        items: List[ItemInput] = []
        for row in range(self._items_table.rowCount()):
            name = self._cell_text(row, 0)
            raw_qty = self._cell_text(row, 1)
            raw_unit = self._cell_text(row, 2)
            if not name and not raw_qty and not raw_unit:
                continue
            try:
                quantity = int(raw_qty)
                unit_weight = float(raw_unit)
            except ValueError:
                QMessageBox.warning(
                    self,
                    "Invalid item",
                    f"Item {row + 1}: quantity must be a whole number and unit weight a number.",
                )
                return None
            items.append((name, quantity, unit_weight))
        return items

    def _on_ok(self) -> None:
        items = self._collect_items()
        if items is None:
            return
        self._result = CargoFormData(
            cargo_id=self._id_spin.value(),
            sender=self._sender_edit.text(),
            sender_address=self._address_edit.text(),
            destination=self._destination_edit.text(),
            status=self._status_edit.text(),
            items=items,
        )
        self.accept()
