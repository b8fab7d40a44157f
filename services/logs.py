# === services/logs.py ===
from __future__ import annotations
import logging
import sys

from services.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(filename)s:%(lineno)d] %(levelname)s: %(message)s"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Console logging for the app. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    if not any(getattr(h, "_mask_app", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mask_app = True
        root.addHandler(handler)
    return root
