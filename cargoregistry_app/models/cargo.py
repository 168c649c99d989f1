"""
Cargo record model.

A cargo record owns its items; the total weight is always derived from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class CargoItem:
    name: str = ""
    quantity: int = 0
    unit_weight_kg: float = 0.0

    @property
    def item_weight_kg(self) -> float:
        return self.quantity * self.unit_weight_kg


@dataclass(slots=True)
class Cargo:
    """One shipment entry in the registry."""

    id: int = 0
    sender: str = ""
    sender_address: str = ""
    destination: str = ""
    status: str = ""
    tracking_number: str = ""  # assigned by the registry on add

    items: List[CargoItem] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_weight_kg(self) -> float:
        return sum(item.item_weight_kg for item in self.items)
