"""
In-memory cargo registry.

Bounded, insertion-ordered collection of cargo records. All lookups are linear
scans; the registry never holds more than MAX_CARGO records.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator, Optional, Tuple

from cargoregistry_app.config.limits import MAX_CARGO, MAX_ITEMS
from cargoregistry_app.errors import (
    CapacityExceededError,
    DuplicateIdError,
    DuplicateTrackingNumberError,
)
from cargoregistry_app.models import Cargo
from cargoregistry_app.services.tracking import TrackingNumberAllocator
from cargoregistry_app.services.validation import round_weight

_LOG = logging.getLogger(__name__)

# Single-byte case fold: only A-Z are folded, like tolower() in the C locale.
_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_fold_equals(a: str, b: str) -> bool:
    """Case-insensitive exact comparison. Prefixes and substrings never match."""
    if len(a) != len(b):
        return False
    return a.translate(_ASCII_FOLD) == b.translate(_ASCII_FOLD)


def _owned_copy(cargo: Cargo, tracking_number: str) -> Cargo:
    """Copy taken on the way in; unit weights are kept at file precision."""
    return replace(
        cargo,
        tracking_number=tracking_number,
        items=[replace(item, unit_weight_kg=round_weight(item.unit_weight_kg)) for item in cargo.items],
    )


def _detached(cargo: Cargo) -> Cargo:
    """Copy handed out to callers, so stored records cannot be changed in place."""
    return replace(cargo, items=[replace(item) for item in cargo.items])


class CargoStore:
    def __init__(
        self,
        allocator: TrackingNumberAllocator | None = None,
        capacity: int = MAX_CARGO,
        max_items: int = MAX_ITEMS,
    ) -> None:
        self._allocator = allocator if allocator is not None else TrackingNumberAllocator()
        self._capacity = capacity
        self._max_items = max_items
        self._records: list[Cargo] = []

    @property
    def allocator(self) -> TrackingNumberAllocator:
        return self._allocator

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Cargo]:
        return iter(self.all())

    def add(self, candidate: Cargo) -> Cargo:
        """
        Register a new cargo record and assign it a fresh tracking number.

        Raises CapacityExceededError when the registry (or the candidate's item
        list) is full and DuplicateIdError when the id is taken. The registry is
        unchanged on failure.
        """
        self._check_insertable(candidate)
        record = _owned_copy(candidate, self._allocator.next())
        self._records.append(record)
        _LOG.info(
            "Added cargo %s as %s (%.2f kg)",
            record.id,
            record.tracking_number,
            record.total_weight_kg,
        )
        return _detached(record)

    def restore(self, record: Cargo) -> Cargo:
        """Append a record that already carries its tracking number (file load)."""
        self._check_insertable(record)
        if self.find_by_tracking_number(record.tracking_number) is not None:
            raise DuplicateTrackingNumberError(record.tracking_number)
        restored = _owned_copy(record, record.tracking_number)
        self._records.append(restored)
        self._allocator.advance_past(restored.tracking_number)
        return _detached(restored)

    def _check_insertable(self, cargo: Cargo) -> None:
        if self.is_full():
            raise CapacityExceededError(
                f"Maximum cargo capacity reached ({self._capacity} records).",
                self._capacity,
            )
        if self.find_by_id(cargo.id) is not None:
            raise DuplicateIdError(cargo.id)
        if cargo.item_count > self._max_items:
            raise CapacityExceededError(
                f"Cargo {cargo.id} has {cargo.item_count} items; maximum is {self._max_items}.",
                self._max_items,
            )

    def total_weight(self) -> float:
        return sum((c.total_weight_kg for c in self._records), 0.0)

    def find_by_destination(self, term: str) -> Iterator[Cargo]:
        return (_detached(c) for c in tuple(self._records) if ascii_fold_equals(c.destination, term))

    def find_by_status(self, term: str) -> Iterator[Cargo]:
        return (_detached(c) for c in tuple(self._records) if ascii_fold_equals(c.status, term))

    def find_by_id(self, cargo_id: int) -> Optional[Cargo]:
        found = next((c for c in self._records if c.id == cargo_id), None)
        return _detached(found) if found is not None else None

    def find_by_tracking_number(self, code: str) -> Optional[Cargo]:
        found = next((c for c in self._records if c.tracking_number == code), None)
        return _detached(found) if found is not None else None

    def all(self) -> Tuple[Cargo, ...]:
        return tuple(_detached(c) for c in self._records)
