"""
Reporting utilities (text/Excel) for the cargo registry.
"""

from cargoregistry_app.reports.simple_text_report import (
    build_cargo_detail_text,
    build_cargo_table_text,
    build_total_weight_text,
)
from cargoregistry_app.reports.excel_report import export_register_to_excel

__all__ = [
    "build_cargo_detail_text",
    "build_cargo_table_text",
    "build_total_weight_text",
    "export_register_to_excel",
]
