# === theme.py — light/dark mode persisted in client storage ===
import logging
import flet as ft

logger = logging.getLogger(__name__)

_STORAGE_KEY = "mask_demo.theme_mode"  # "light" | "dark"

def _current_pref(page: ft.Page) -> str:
    try:
        v = page.client_storage.get(_STORAGE_KEY)
        if v in ("light", "dark"):
            return v
    except Exception as ex:  # storage is unavailable on some runtimes
        logger.debug("theme preference not readable: %s", ex)
    return "light"

def _apply(page: ft.Page, mode: str) -> None:
    page.theme = ft.Theme(use_material3=True)
    page.theme_mode = ft.ThemeMode.DARK if mode == "dark" else ft.ThemeMode.LIGHT

def _icon_for(mode: str):
    return ft.Icons.LIGHT_MODE if mode == "dark" else ft.Icons.DARK_MODE

def build_theme_toggle(page: ft.Page) -> ft.IconButton:
    mode = _current_pref(page)
    _apply(page, mode)
    btn = ft.IconButton(icon=_icon_for(mode), tooltip="Toggle theme")

    def _toggle(e=None):
        new_mode = "light" if page.theme_mode == ft.ThemeMode.DARK else "dark"
        _apply(page, new_mode)
        btn.icon = _icon_for(new_mode)
        try:
            page.client_storage.set(_STORAGE_KEY, new_mode)
        except Exception as ex:
            logger.debug("theme preference not saved: %s", ex)
        page.update()

    btn.on_click = _toggle
    return btn
