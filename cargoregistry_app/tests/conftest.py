"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cargoregistry_app.models import Cargo, CargoItem
from cargoregistry_app.repositories import CargoStore


@pytest.fixture
def temp_data_file():
    """Path to a not-yet-existing data file inside a temporary directory."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp) / "cargo_data.txt"


@pytest.fixture
def sample_cargo():
    """A single-item cargo record as entered by the shell."""
    return Cargo(
        id=1,
        sender="Acme Co",
        sender_address="123 Main St",
        destination="Springfield",
        status="In Transit",
        items=[CargoItem(name="Widget", quantity=10, unit_weight_kg=1.55)],
    )


@pytest.fixture
def make_cargo():
    """Factory for cargo records with distinct ids."""

    def _make(cargo_id: int, destination: str = "Springfield", status: str = "In Transit", items=None) -> Cargo:
        return Cargo(
            id=cargo_id,
            sender=f"Sender {cargo_id}",
            sender_address=f"{cargo_id} Dock Road",
            destination=destination,
            status=status,
            items=list(items) if items is not None else [CargoItem("Crate", 2, 5.0)],
        )

    return _make


@pytest.fixture
def store():
    return CargoStore()
