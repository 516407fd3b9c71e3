"""Tests for settings dialog widgets and apply pipeline."""

from __future__ import annotations

from hotseat.ui.dialogs.settings_dialog import (
    AppSettings,
    SettingsDialog,
    _BoardPage,
    _GeneralPage,
)
from hotseat.ui.i18n import set_language


def test_dialog_accept_applies_changes_to_settings() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)

    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Blue")
    board_page._coords_check.setChecked(False)
    board_page._legal_check.setChecked(False)

    general_page = next(
        page for page in dialog._pages if isinstance(page, _GeneralPage)
    )
    general_page._lang_combo.setCurrentText("Russian")

    dialog._on_accept()

    assert settings.board_theme == "Blue"
    assert settings.show_coordinates is False
    assert settings.show_legal_moves is False
    assert settings.language == "Russian"


def test_dialog_reflects_existing_settings() -> None:
    settings = AppSettings(
        language="Russian",
        board_theme="Green",
        show_coordinates=False,
        show_legal_moves=True,
    )
    dialog = SettingsDialog(settings)

    general_page = next(
        page for page in dialog._pages if isinstance(page, _GeneralPage)
    )
    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    assert general_page._lang_combo.currentText() == "Russian"
    assert board_page._theme_combo.currentText() == "Green"
    assert board_page._coords_check.isChecked() is False
    assert board_page._legal_check.isChecked() is True


def test_reject_leaves_settings_untouched() -> None:
    settings = AppSettings()
    dialog = SettingsDialog(settings)
    board_page = next(page for page in dialog._pages if isinstance(page, _BoardPage))
    board_page._theme_combo.setCurrentText("Blue")

    dialog.reject()

    assert settings.board_theme == "Classic"


def test_dialog_retranslate_keeps_sidebar_items_populated() -> None:
    dialog = SettingsDialog(AppSettings())
    set_language("Russian")
    dialog.retranslate_ui()

    assert dialog.windowTitle() == "Настройки"
    labels = [dialog._sidebar.item(i).text() for i in range(dialog._sidebar.count())]
    assert labels == ["Язык", "Доска"]
