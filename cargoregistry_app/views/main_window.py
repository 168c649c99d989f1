"""
Qt main window for the cargo registry app.
"""

from __future__ import annotations

import logging
from typing import Iterable

from PyQt6.QtGui import QAction, QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QFileDialog,
    QHeaderView,
    QInputDialog,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QTableWidget,
    QTableWidgetItem,
    QToolBar,
    QWidget,
)

from ..config.settings import Settings
from ..errors import CargoRegistryError, RegistryIOError
from ..models import Cargo
from ..reports.excel_report import export_register_to_excel
from ..reports.simple_text_report import build_cargo_detail_text, build_total_weight_text
from ..services.cargo_service import CargoService
from .add_cargo_dialog import AddCargoDialog

_LOG = logging.getLogger(__name__)

_COLUMNS = ["ID", "Tracking No", "Sender", "Destination", "Items", "Weight (kg)", "Status"]


class MainWindow(QMainWindow):
    """Cargo table with add, search, track, total and save actions."""

    def __init__(self, settings: Settings, service: CargoService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self._service = service
        self.setWindowTitle("Cargo Management System")
        self.resize(1100, 650)

        self._table = QTableWidget(0, len(_COLUMNS), self)
        self._table.setHorizontalHeaderLabels(_COLUMNS)
        self._table.horizontalHeader().setSectionResizeMode(
            3, QHeaderView.ResizeMode.Stretch
        )
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setAlternatingRowColors(True)
        self._table.cellDoubleClicked.connect(self._on_row_double_clicked)
        self.setCentralWidget(self._table)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        self._create_actions()
        self._show_records(self._service.list_cargo())
        self._status_bar.showMessage(
            f"System ready. {len(self._service.store)} cargo records loaded."
        )

    def _create_actions(self) -> None:
        """Create the menu bar, toolbar and their actions."""
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        cargo_menu = menu_bar.addMenu("&Cargo")
        toolbar = QToolBar("Main", self)
        self.addToolBar(toolbar)

        def _action(text: str, slot, shortcut: str = "") -> QAction:
            act = QAction(text, self)
            act.triggered.connect(slot)
            if shortcut:
                act.setShortcut(shortcut)
            return act

        add_act = _action("&Add New Cargo...", self._on_add, "Ctrl+N")
        view_act = _action("&View All Cargo", self._on_view_all, "Ctrl+L")
        total_act = _action("Calculate &Total Weight", self._on_total_weight)
        dest_act = _action("Search by &Destination...", self._on_search_destination)
        status_act = _action("Search by &Status...", self._on_search_status)
        track_act = _action("T&rack Cargo...", self._on_track, "Ctrl+F")
        save_act = _action("&Save Data to File", self._on_save, "Ctrl+S")
        export_act = _action("&Export to Excel...", self._on_export)
        exit_act = _action("E&xit", self.close, "Ctrl+Q")

        for act in (add_act, view_act, total_act, dest_act, status_act, track_act):
            cargo_menu.addAction(act)
            toolbar.addAction(act)
        file_menu.addAction(save_act)
        file_menu.addAction(export_act)
        file_menu.addSeparator()
        file_menu.addAction(exit_act)
        toolbar.addSeparator()
        toolbar.addAction(save_act)

    def _show_records(self, records: Iterable[Cargo]) -> None:
        rows = list(records)
        self._table.setRowCount(len(rows))
        for row, c in enumerate(rows):
            values = [
                str(c.id),
                c.tracking_number,
                c.sender,
                c.destination,
                str(c.item_count),
                f"{c.total_weight_kg:.2f}",
                c.status,
            ]
            for col, value in enumerate(values):
                self._table.setItem(row, col, QTableWidgetItem(value))

    def _show_detail(self, cargo: Cargo) -> None:
        box = QMessageBox(self)
        box.setWindowTitle(f"Cargo {cargo.tracking_number}")
        box.setText("Cargo found!")
        box.setInformativeText(build_cargo_detail_text(cargo))
        box.setFont(QFont("Monospace"))
        box.exec()

    def _on_row_double_clicked(self, row: int, _col: int) -> None:
        cell = self._table.item(row, 1)
        if cell is None:
            return
        cargo = self._service.track_by_tracking_number(cell.text())
        if cargo is not None:
            self._show_detail(cargo)

    def _on_add(self) -> None:
        existing = [c.id for c in self._service.list_cargo()]
        dialog = AddCargoDialog(self, suggested_id=max(existing, default=0) + 1)
        if dialog.exec() != AddCargoDialog.DialogCode.Accepted:
            return
        data = dialog.form_data()
        if data is None:
            return
        try:
            cargo = self._service.register_cargo(
                data.cargo_id,
                data.sender,
                data.sender_address,
                data.destination,
                data.status,
                data.items,
            )
        except CargoRegistryError as e:
            QMessageBox.warning(self, "Cargo not added", e.message)
            return
        self._show_records(self._service.list_cargo())
        QMessageBox.information(
            self,
            "Cargo added",
            f"Cargo added successfully!\n"
            f"Tracking Number: {cargo.tracking_number}\n"
            f"Total Weight: {cargo.total_weight_kg:.2f} kg",
        )
        self._status_bar.showMessage(f"Added {cargo.tracking_number}")

    def _on_view_all(self) -> None:
        records = self._service.list_cargo()
        self._show_records(records)
        if not records:
            self._status_bar.showMessage("No cargo records available.")
        else:
            self._status_bar.showMessage(f"Total records: {len(records)}")

    def _on_total_weight(self) -> None:
        QMessageBox.information(
            self, "Total Weight", build_total_weight_text(self._service.total_weight())
        )

    def _ask_text(self, title: str, label: str) -> str | None:
        text, ok = QInputDialog.getText(self, title, label)
        if not ok:
            return None
        return text

    def _on_search_destination(self) -> None:
        term = self._ask_text("Search by Destination", "Enter destination to search for:")
        if term is None:
            return
        results = self._service.search_by_destination(term)
        self._show_records(results)
        if results:
            self._status_bar.showMessage(f"{len(results)} result(s) for destination: {term}")
        else:
            self._status_bar.showMessage(f"No cargo found for destination: {term}")

    def _on_search_status(self) -> None:
        term = self._ask_text("Search by Status", "Enter status to search for:")
        if term is None:
            return
        results = self._service.search_by_status(term)
        self._show_records(results)
        if results:
            self._status_bar.showMessage(f"{len(results)} result(s) with status: {term}")
        else:
            self._status_bar.showMessage(f"No cargo found with status: {term}")

    def _on_track(self) -> None:
        mode, ok = QInputDialog.getItem(
            self, "Track Cargo", "Search by:", ["ID", "Tracking Number"], 0, False
        )
        if not ok:
            return
        if mode == "ID":
            cargo_id, ok = QInputDialog.getInt(
                self, "Track Cargo", "Enter cargo ID to track:", 0, -2_147_483_648, 2_147_483_647
            )
            if not ok:
                return
            cargo = self._service.track_by_id(cargo_id)
            missing = f"No cargo found with ID: {cargo_id}"
        else:
            code = self._ask_text("Track Cargo", "Enter tracking number to track:")
            if code is None:
                return
            cargo = self._service.track_by_tracking_number(code)
            missing = f"No cargo found with tracking number: {code}"
        if cargo is None:
            QMessageBox.information(self, "Track Cargo", missing)
            return
        self._show_detail(cargo)

    def _save(self) -> bool:
        try:
            written = self._service.save()
        except RegistryIOError as e:
            QMessageBox.critical(self, "Save Error", e.message)
            return False
        self._status_bar.showMessage(
            f"Data saved successfully to {self._service.data_file}. {written} records written."
        )
        return True

    def _on_save(self) -> None:
        self._save()

    def _on_export(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Cargo Register",
            str(self._settings.data_dir / "cargo_register.xlsx"), "Excel (*.xlsx);;All (*)",
        )
        if not path:
            return
        if not path.endswith(".xlsx"):
            path += ".xlsx"
        try:
            export_register_to_excel(path, self._service.list_cargo())
        except OSError as e:
            _LOG.error("Excel export to %s failed: %s", path, e)
            QMessageBox.critical(self, "Export Error", str(e))
            return
        self._status_bar.showMessage(f"Register exported to {path}")

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        answer = QMessageBox.question(
            self,
            "Exit",
            "Do you want to save before exiting?",
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Yes,
        )
        if answer == QMessageBox.StandardButton.Cancel:
            event.ignore()
            return
        if answer == QMessageBox.StandardButton.Yes and not self._save():
            event.ignore()
            return
        event.accept()
