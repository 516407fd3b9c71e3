"""MainWindow settings dialog and application helpers."""

from __future__ import annotations

import logging
from typing import Any

from hotseat.ui.i18n import set_language
from hotseat.ui.styles.theme import BOARD_THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


def on_settings(host: Any, *, settings_dialog_cls: type[Any]) -> None:
    dlg = settings_dialog_cls(host._settings, host)
    if dlg.exec():
        host._apply_settings()


def apply_settings(host: Any) -> None:
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    scene = host._board_view.board_scene

    theme = BOARD_THEMES.get(s.board_theme)
    if theme is None:
        _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
        theme = BoardTheme.default()
    scene.set_theme(theme)
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)
