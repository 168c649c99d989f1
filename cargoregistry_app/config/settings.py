"""
Basic settings and logging configuration for the cargo registry app.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

DATA_DIR_ENV = "CARGOREGISTRY_DATA_DIR"
DATA_FILE_NAME = "cargo_data.txt"
LOG_FILE_NAME = "cargoregistry.log"


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(resource_root: Path) -> Path:

    override = os.environ.get(DATA_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    if getattr(sys, "frozen", False):
        exe_path = Path(getattr(sys, "executable", resource_root))
        return exe_path.parent / "cargoregistry_app_data"
    return resource_root / "cargoregistry_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    data_file: Path
    log_file: Path

    @classmethod
    def default(cls) -> "Settings":
        resource_root = _get_resource_root()
        data_dir = _get_user_data_dir(resource_root)
        data_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            project_root=resource_root,
            data_dir=data_dir,
            data_file=data_dir / DATA_FILE_NAME,
            log_file=data_dir / LOG_FILE_NAME,
        )


def init_logging(settings: Settings) -> None:
    """Configure basic logging to the registry log file."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info(
        "Logging initialized. Data file at %s", settings.data_file
    )
