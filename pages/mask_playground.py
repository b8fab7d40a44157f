# === pages/mask_playground.py ===
from __future__ import annotations
import flet as ft

from components.forms import FieldRow, safe_update, snack_ok
from components.inputs import (
    card_input, date_input, masked_input, money_input,
    month_day_input, phone_input, set_masked_value, zip_input,
)
from components.masks import MaskType

SAMPLES = {
    "phone":    "9876543210",
    "money":    "1234.5",
    "card":     "4111111111111111",
    "zip":      "123456789",
    "date":     "12312024",
    "monthDay": "1231",
    "custom":   "hello",
    "plain":    "anything goes",
}


def _upper_tag(v: str) -> str:
    return f"#{v.upper()}" if v else ""


def build(page: ft.Page) -> ft.Control:
    raw_labels: dict[str, ft.Text] = {}

    def _raw_text(key: str) -> ft.Text:
        raw_labels[key] = ft.Text("raw: ", size=11, color=ft.Colors.ON_SURFACE_VARIANT, selectable=True)
        return raw_labels[key]

    def _show_raw(key: str):
        def _cb(raw: str):
            lbl = raw_labels[key]
            lbl.value = f"raw: {raw!r}"
            safe_update(lbl)
        return _cb

    fields = {
        "phone":    phone_input(on_change=_show_raw("phone")),
        "money":    money_input(on_change=_show_raw("money")),
        "card":     card_input(on_change=_show_raw("card")),
        "zip":      zip_input(on_change=_show_raw("zip")),
        "date":     date_input(on_change=_show_raw("date")),
        "monthDay": month_day_input(on_change=_show_raw("monthDay")),
        "custom":   masked_input(MaskType.CUSTOM, label="Tag (custom)", custom_mask=_upper_tag,
                                 on_change=_show_raw("custom")),
        "plain":    masked_input(None, label="Free text (no mask)", on_change=_show_raw("plain")),
    }

    rows = []
    for key, tf in fields.items():
        hint = _raw_text(key)
        hint.value = f"raw: {tf.data.raw_value!r}"
        rows.append(FieldRow(key, tf, hint=hint, width=320))

    def fill(e=None):
        for key, tf in fields.items():
            set_masked_value(tf, SAMPLES[key])
        snack_ok(page, "Sample values loaded")

    def clear(e=None):
        for tf in fields.values():
            set_masked_value(tf, "")

    actions = ft.Row(spacing=8, controls=[
        ft.ElevatedButton("Fill sample", icon=ft.Icons.AUTO_FIX_HIGH, on_click=fill),
        ft.OutlinedButton("Clear", icon=ft.Icons.CLEAR, on_click=clear),
    ])

    return ft.Column(
        expand=True, spacing=14, scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Text("Input masks", size=18, weight=ft.FontWeight.W_700),
            actions,
            ft.ResponsiveRow(controls=[ft.Container(col={"sm": 12, "md": 6}, content=r) for r in rows]),
        ],
    )
