"""Internationalisation strings for the Hotseat UI.

Usage::

    from hotseat.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)                       # "Заново"
    print(t().wins.format(color=t().color_white))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_moved: str  # e.g. "White played e2e4"

    # Game over
    game_over_title: str
    wins: str  # "{color} wins!"
    color_white: str
    color_black: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    turn_indicator: str  # "{color}'s Turn"
    turn_game_over: str
    btn_reset: str

    # ── SettingsDialog ───────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_board: str
    settings_board_theme: str
    settings_show_coords: str
    settings_show_legal: str

    def color_name(self, white: bool) -> str:
        return self.color_white if white else self.color_black


_EN = Strings(
    window_title="Hotseat Chess",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_settings_action="&Settings...",
    status_ready="Ready",
    status_moved="{color} played {move}",
    game_over_title="Game Over",
    wins="{color} wins!",
    color_white="White",
    color_black="Black",
    turn_indicator="{color}'s Turn",
    turn_game_over="Game Over",
    btn_reset="Reset Game",
    settings_title="Settings",
    settings_language="Language",
    settings_board="Board",
    settings_board_theme="Board theme",
    settings_show_coords="Show coordinates",
    settings_show_legal="Show possible moves",
)

_RU = Strings(
    window_title="Шахматы вдвоём",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    menu_settings="&Настройки",
    menu_settings_action="&Настройки...",
    status_ready="Готово",
    status_moved="{color}: {move}",
    game_over_title="Игра окончена",
    wins="{color} побеждают!",
    color_white="Белые",
    color_black="Чёрные",
    turn_indicator="Ход: {color}",
    turn_game_over="Игра окончена",
    btn_reset="Заново",
    settings_title="Настройки",
    settings_language="Язык",
    settings_board="Доска",
    settings_board_theme="Тема доски",
    settings_show_coords="Показывать координаты",
    settings_show_legal="Показывать возможные ходы",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    if language not in _LOCALES:
        _LOGGER.warning("Unknown language %r, falling back to English", language)
    _current = _LOCALES.get(language, _EN)
