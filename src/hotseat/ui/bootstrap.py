"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "HOTSEAT_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(name: str) -> int | None:
    """Map a level name (e.g. ``"debug"``) to a logging level, or ``None``."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def configure_logging() -> None:
    """Configure root logging from the ``HOTSEAT_LOG_LEVEL`` environment variable."""
    raw = os.environ.get(_LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL)
    level = resolve_log_level(raw)
    logging.basicConfig(
        level=logging.WARNING if level is None else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        _LOGGER.warning("Unknown %s=%r, using WARNING", _LOG_LEVEL_ENV, raw)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from hotseat.ui.styles.theme import APP_STYLE

    app.setApplicationName("Hotseat")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from hotseat.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
