# run_native.py — launcher (APP_VIEW=web opens the browser instead)
from __future__ import annotations
import logging
import flet as ft

from main import main as app_main
from services import settings
from services.logs import setup_logging

if __name__ == "__main__":
    setup_logging()
    logging.getLogger(__name__).info(
        "Starting Flet app | view=%s port=%s assets=%s", settings.APP_VIEW, settings.PORT, settings.BASE_DIR
    )
    ft.app(
        target=app_main,
        view=settings.app_view(),
        assets_dir=settings.BASE_DIR,
        port=settings.PORT,
    )
