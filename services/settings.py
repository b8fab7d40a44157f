# === services/settings.py ===
import os
import flet as ft

# Project root (where main.py lives), also used as assets_dir
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Logging verbosity: DEBUG shows every mask transition
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# "native" opens a desktop window, "web" opens the browser
APP_VIEW = os.environ.get("APP_VIEW", "native").lower()

# 0 = let the OS pick a free port
PORT = int(os.environ.get("PORT", "0") or 0)


def app_view() -> ft.AppView:
    return ft.AppView.WEB_BROWSER if APP_VIEW == "web" else ft.AppView.FLET_APP
