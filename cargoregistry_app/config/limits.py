"""
Capacity bounds and format constants for the cargo registry.

Values match the legacy console registry so files written by either tool
stay interchangeable.
"""

from __future__ import annotations

# Maximum number of cargo records held in the registry
MAX_CARGO = 100

# Maximum number of items per cargo record
MAX_ITEMS = 10

# Text buffer size; effective maximum is one less (99 characters)
MAX_TEXT_LENGTH = 100

# Tracking numbers: TRK1000, TRK1001, ...
TRACKING_PREFIX = "TRK"
TRACKING_SEED = 1000

# Data file line format
FIELD_DELIMITER = "|"
WEIGHT_DECIMALS = 2

# Number of fixed fields before the item triples:
# id, tracking, sender, address, destination, status, total, item count
RECORD_PREFIX_FIELDS = 8
ITEM_FIELDS = 3

# Floating-point tolerance
EPS = 1e-9
