"""
Domain models for the cargo registry.

These are pure Python/domain classes, separate from the file format.
"""

from cargoregistry_app.models.cargo import Cargo, CargoItem

__all__ = [
    "Cargo",
    "CargoItem",
]
