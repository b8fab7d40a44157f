# components/inputs.py
from __future__ import annotations
from typing import Callable, Optional, Union

import flet as ft

from components.forms import safe_update
from components.mask_engine import InputMask
from components.masks import MaskFn, MaskType


_KEYBOARDS = {
    MaskType.PHONE:     ft.KeyboardType.PHONE,
    MaskType.MONEY:     ft.KeyboardType.NUMBER,
    MaskType.CARD:      ft.KeyboardType.NUMBER,
    MaskType.ZIP:       ft.KeyboardType.NUMBER,
    MaskType.DATE:      ft.KeyboardType.DATETIME,
    MaskType.MONTH_DAY: ft.KeyboardType.DATETIME,
}

def masked_input(
    mask_type: Union[MaskType, str, None] = None,
    label: str = "",
    value: str = "",
    width: int | None = None,
    custom_mask: Optional[MaskFn] = None,
    on_change: Optional[Callable[[str], None]] = None,
    **kw,
) -> ft.TextField:
    """
    TextField bound to an InputMask. The field shows the masked value,
    the engine is kept in `tf.data` and `on_change` receives the raw value.
    """
    engine = InputMask(mask_type, initial_value=value or "", custom_mask=custom_mask, on_change=on_change)
    keyboard = _KEYBOARDS.get(engine.config.mask_type, ft.KeyboardType.TEXT)
    tf = ft.TextField(
        label=label, value=engine.masked_value, width=width,
        keyboard_type=keyboard, dense=True, data=engine, **kw,
    )
    def _mask(e=None):
        engine.edit(e if e is not None else tf.value)
        tf.value = engine.masked_value
        safe_update(tf)
    tf.on_change = _mask
    return tf

def set_masked_value(tf: ft.TextField, value: str) -> None:
    """Programmatic set for a field built by masked_input."""
    engine: InputMask = tf.data
    engine.set_value(value)
    tf.value = engine.masked_value
    safe_update(tf)

# ----------------- per-type shortcuts -----------------
def phone_input(label: str = "Phone", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return masked_input(MaskType.PHONE, label=label, value=value, width=width, hint_text="(555) 555-5555", **kw)

def money_input(label: str = "Amount", value: str = "", width: int | None = 200, **kw) -> ft.TextField:
    return masked_input(MaskType.MONEY, label=label, value=value, width=width, prefix_text="$ ", **kw)

def card_input(label: str = "Card number", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return masked_input(MaskType.CARD, label=label, value=value, width=width, hint_text="0000 0000 0000 0000", **kw)

def zip_input(label: str = "ZIP", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return masked_input(MaskType.ZIP, label=label, value=value, width=width, hint_text="12345-6789", **kw)

def date_input(label: str = "Date (mm/dd/yyyy)", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return masked_input(MaskType.DATE, label=label, value=value, width=width, **kw)

def month_day_input(label: str = "Month/day (mm/dd)", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return masked_input(MaskType.MONTH_DAY, label=label, value=value, width=width, **kw)
