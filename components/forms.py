# components/forms.py
from __future__ import annotations
import logging
import flet as ft

logger = logging.getLogger(__name__)

# ----------------- util -----------------
def safe_update(ctrl: ft.Control) -> None:
    # update() asserts when the control is not on a page yet (first paint, tests)
    try:
        ctrl.update()
    except AssertionError:
        pass
    except RuntimeError as ex:
        logger.debug("update skipped for %s: %s", type(ctrl).__name__, ex)

# ----------------- layout -----------------
def FieldRow(label: str, control: ft.Control, hint: ft.Control | None = None, width: int | None = None) -> ft.Container:
    controls = [ft.Text(label, size=12, color=ft.Colors.ON_SURFACE_VARIANT), control]
    if hint is not None:
        controls.append(hint)
    return ft.Container(width=width, content=ft.Column(spacing=4, controls=controls))

def snack_ok(page: ft.Page, msg: str) -> None:
    page.open(ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.GREEN_600))

def snack_err(page: ft.Page, msg: str) -> None:
    page.open(ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.ERROR))
