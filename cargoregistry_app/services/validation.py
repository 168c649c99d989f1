"""
Input checks for new cargo records.

Only unit weight positivity, quantity sign and the item count are enforced;
text fields are clipped to the legacy buffer size.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from cargoregistry_app.config.limits import MAX_ITEMS, MAX_TEXT_LENGTH, WEIGHT_DECIMALS
from cargoregistry_app.errors import CapacityExceededError, CargoValidationError
from cargoregistry_app.models import CargoItem

ItemInput = Tuple[str, int, float]


def validate_weight(weight: float) -> bool:
    return math.isfinite(weight) and weight > 0


def round_weight(weight: float) -> float:
    """Round to the precision the data file keeps."""
    return round(weight, WEIGHT_DECIMALS)


def clip_text(value: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Trim surrounding newlines and keep at most max_length - 1 characters."""
    text = (value or "").strip("\r\n")
    return text[: max_length - 1]


def build_items(raw_items: Iterable[ItemInput], max_items: int = MAX_ITEMS) -> List[CargoItem]:
    """Turn (name, quantity, unit weight) tuples into CargoItems."""
    items: List[CargoItem] = []
    for name, quantity, unit_weight in raw_items:
        if len(items) >= max_items:
            raise CapacityExceededError(f"Maximum items reached ({max_items}).", max_items)
        quantity = int(quantity)
        unit_weight = round_weight(float(unit_weight))
        if quantity < 0:
            raise CargoValidationError(f"Invalid quantity {quantity}. Must not be negative.")
        if not validate_weight(unit_weight):
            raise CargoValidationError("Invalid weight. Must be a positive number.")
        items.append(CargoItem(name=clip_text(name), quantity=quantity, unit_weight_kg=unit_weight))
    return items
