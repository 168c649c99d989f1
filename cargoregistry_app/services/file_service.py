"""
File service for saving and loading the cargo data file.

The whole registry is rewritten on every save; there is no append mode and no
atomic rename.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cargoregistry_app.errors import (
    CargoRegistryError,
    MalformedRecordError,
    RegistryIOError,
)
from cargoregistry_app.repositories import CargoStore
from cargoregistry_app.services import cargo_codec
from cargoregistry_app.services.tracking import TrackingNumberAllocator

_LOG = logging.getLogger(__name__)


def load(filepath: Path, allocator: TrackingNumberAllocator | None = None) -> CargoStore:
    """
    Load a registry from the data file.

    A missing or unreadable file gives an empty registry. Lines that fail to
    decode, or that repeat an id or tracking number, are skipped. Loading
    stops once the registry is full.
    """
    store = CargoStore(allocator=allocator)
    filepath = Path(filepath)
    if not filepath.exists():
        _LOG.info("No existing data file at %s. Starting with empty records.", filepath)
        return store

    skipped = 0
    try:
        with open(filepath, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                if store.is_full():
                    _LOG.warning(
                        "Registry full (%d records); ignoring rest of %s from line %d",
                        store.capacity,
                        filepath,
                        line_no,
                    )
                    break
                if not raw.strip():
                    continue
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    skipped += 1
                    _LOG.warning("Skipping undecodable line %d in %s: %s", line_no, filepath, e)
                    continue
                try:
                    store.restore(cargo_codec.decode(line))
                except MalformedRecordError as e:
                    skipped += 1
                    _LOG.warning("Skipping malformed line %d in %s: %s", line_no, filepath, e.message)
                except CargoRegistryError as e:
                    skipped += 1
                    _LOG.warning("Skipping line %d in %s: %s", line_no, filepath, e.message)
    except OSError as e:
        _LOG.warning("Could not read %s (%s). Starting with empty records.", filepath, e)
        return CargoStore(allocator=allocator)

    _LOG.info("Loaded %d cargo records from %s (%d skipped)", len(store), filepath, skipped)
    return store


def save(store: CargoStore, filepath: Path) -> int:
    """
    Write every record to the data file, replacing its contents.

    Returns the number of records written. Raises RegistryIOError when the
    file cannot be opened or written.
    """
    filepath = Path(filepath)
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8", newline="\n") as f:
            for cargo in store.all():
                f.write(cargo_codec.encode(cargo))
    except OSError as e:
        _LOG.error("Could not write %s: %s", filepath, e)
        raise RegistryIOError(f"Could not open {filepath} for writing.", filepath) from e

    _LOG.info("Saved %d cargo records to %s", len(store), filepath)
    return len(store)
