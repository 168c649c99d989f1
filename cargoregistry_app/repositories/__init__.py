"""
Repository layer: the in-memory cargo registry.
"""

from cargoregistry_app.repositories.cargo_store import CargoStore, ascii_fold_equals

__all__ = [
    "CargoStore",
    "ascii_fold_equals",
]
