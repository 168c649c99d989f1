"""
Tracking number allocation.

Numbers are TRK<counter>, counter seeded at 1000. The counter only moves
forward and is never written to the data file.
"""

from __future__ import annotations

from cargoregistry_app.config.limits import TRACKING_PREFIX, TRACKING_SEED


def parse_tracking_suffix(tracking_number: str, prefix: str = TRACKING_PREFIX) -> int | None:
    """Return the numeric suffix of a TRK<n> code, or None for any other text."""
    if not tracking_number or not tracking_number.startswith(prefix):
        return None
    digits = tracking_number[len(prefix):]
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(digits)


class TrackingNumberAllocator:
    def __init__(self, seed: int = TRACKING_SEED, prefix: str = TRACKING_PREFIX) -> None:
        self._counter = seed
        self._prefix = prefix

    def next(self) -> str:
        code = f"{self._prefix}{self._counter}"
        self._counter += 1
        return code

    def peek(self) -> int:
        return self._counter

    def advance_past(self, tracking_number: str) -> None:
        """Make sure a later next() never hands out tracking_number again."""
        suffix = parse_tracking_suffix(tracking_number, self._prefix)
        if suffix is not None and suffix >= self._counter:
            self._counter = suffix + 1
