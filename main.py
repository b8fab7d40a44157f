from __future__ import annotations
import logging
import traceback
import flet as ft

from pages import mask_playground
from services import settings
from services.logs import setup_logging
from theme import build_theme_toggle

logger = logging.getLogger(__name__)


def main(page: ft.Page):
    page.title = "Input Masks"
    page.padding = 0
    page.spacing = 0
    page.scroll = None  # the playground scrolls on its own

    theme_btn = build_theme_toggle(page)
    header = ft.Container(
        height=56,
        padding=ft.padding.symmetric(horizontal=12, vertical=8),
        content=ft.Row(
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
            controls=[ft.Text("INPUT MASKS", weight=ft.FontWeight.W_700, size=15), theme_btn],
        ),
    )
    host = ft.Container(expand=True, padding=16)
    page.add(ft.Column(expand=True, spacing=0, controls=[header, ft.Divider(height=1), host]))

    try:
        host.content = mask_playground.build(page)
    except Exception:
        # keep the shell up and show what broke
        err = traceback.format_exc()
        logger.error("playground failed to build:\n%s", err)
        host.content = ft.Text(err, color="#B00020", selectable=True)
    page.update()


if __name__ == "__main__":
    setup_logging()
    ft.app(target=main, view=settings.app_view(), assets_dir=settings.BASE_DIR, port=settings.PORT)
