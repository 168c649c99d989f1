"""
Application entry point for the cargo registry desktop app.

This sets up settings, logging, the registry and the Qt main window.
"""

import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from cargoregistry_app.config.settings import Settings, init_logging
from cargoregistry_app.services.cargo_service import CargoService
from cargoregistry_app.views.main_window import MainWindow


def main() -> None:
    """Bootstraps the cargo registry desktop application."""
    settings = Settings.default()
    init_logging(settings)

    service = CargoService(settings.data_file)
    service.load_registry()

    app = QApplication(sys.argv)
    app.setApplicationName("Cargo Management System")

    main_window = MainWindow(settings=settings, service=service)
    main_window.show()

    exit_code = app.exec()
    sys.exit(exit_code)


if __name__ == "__main__":
    # Allow running as a script: `python -m cargoregistry_app.main`
    # or `python cargoregistry_app/main.py` (when cwd is project root)
    project_root = Path(__file__).resolve().parents[1]
    if project_root.exists():
        sys.path.insert(0, str(project_root))
    main()
