"""
Exception types raised by the cargo registry core.

None of these are fatal: the shell reports them and carries on, and the file
loader skips the offending line.
"""

from __future__ import annotations


class CargoRegistryError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CapacityExceededError(CargoRegistryError):
    """Registry or item list already holds its maximum number of entries."""

    def __init__(self, message: str, limit: int) -> None:
        self.limit = limit
        super().__init__(message)


class DuplicateIdError(CargoRegistryError):
    def __init__(self, cargo_id: int) -> None:
        self.cargo_id = cargo_id
        super().__init__(f"ID {cargo_id} already exists.")


class DuplicateTrackingNumberError(CargoRegistryError):
    def __init__(self, tracking_number: str) -> None:
        self.tracking_number = tracking_number
        super().__init__(f"Tracking number {tracking_number} already exists.")


class MalformedRecordError(CargoRegistryError):
    """A data file line is missing required fields."""


class InvalidNumericFieldError(MalformedRecordError):
    def __init__(self, field_name: str, raw_value: str) -> None:
        self.field_name = field_name
        self.raw_value = raw_value
        super().__init__(f"Field '{field_name}' is not a valid number: {raw_value!r}")


class RegistryIOError(CargoRegistryError):
    def __init__(self, message: str, path: object = None) -> None:
        self.path = path
        super().__init__(message)


class CargoValidationError(CargoRegistryError):
    """Shell input rejected before it reaches the registry."""
