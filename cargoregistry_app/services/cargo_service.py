"""
Business logic for registering, searching and persisting cargo.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from cargoregistry_app.models import Cargo
from cargoregistry_app.repositories import CargoStore
from cargoregistry_app.services import file_service
from cargoregistry_app.services.validation import ItemInput, build_items, clip_text

_LOG = logging.getLogger(__name__)


class CargoService:
    """Entry point used by the shell; wraps the registry and its data file."""

    def __init__(self, data_file: Path, store: CargoStore | None = None) -> None:
        self._data_file = Path(data_file)
        self._store = store if store is not None else CargoStore()

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def store(self) -> CargoStore:
        return self._store

    def load_registry(self) -> int:
        self._store = file_service.load(self._data_file, allocator=self._store.allocator)
        return len(self._store)

    def register_cargo(
        self,
        cargo_id: int,
        sender: str,
        sender_address: str,
        destination: str,
        status: str,
        items: Iterable[ItemInput] = (),
    ) -> Cargo:
        candidate = Cargo(
            id=int(cargo_id),
            sender=clip_text(sender),
            sender_address=clip_text(sender_address),
            destination=clip_text(destination),
            status=clip_text(status),
            items=build_items(items),
        )
        return self._store.add(candidate)

    def list_cargo(self) -> List[Cargo]:
        return list(self._store.all())

    def total_weight(self) -> float:
        return self._store.total_weight()

    def search_by_destination(self, term: str) -> List[Cargo]:
        return list(self._store.find_by_destination(clip_text(term)))

    def search_by_status(self, term: str) -> List[Cargo]:
        return list(self._store.find_by_status(clip_text(term)))

    def track_by_id(self, cargo_id: int) -> Optional[Cargo]:
        return self._store.find_by_id(cargo_id)

    def track_by_tracking_number(self, code: str) -> Optional[Cargo]:
        return self._store.find_by_tracking_number(code.strip("\r\n"))

    def save(self) -> int:
        written = file_service.save(self._store, self._data_file)
        _LOG.info("Registry saved (%d records)", written)
        return written
