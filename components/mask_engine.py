# === components/mask_engine.py ===
"""
Keeps a field's raw value and its masked (displayed) value in sync.

The state transition is the pure function `compute_state(config, text)`;
`InputMask` only holds the latest result and notifies `on_change` with the
new raw value after each edit / set_value.

    m = InputMask("phone")
    m.edit("9876543210")
    m.raw_value     -> "9876543210"
    m.masked_value  -> "(987) 654-3210"
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from components.mask_helpers import parse_currency_to_number, to_fixed
from components.masks import MaskFn, MaskType, clamp_raw_value, get_mask_function

logger = logging.getLogger(__name__)

OnChange = Callable[[str], None]


@dataclass(frozen=True)
class MaskConfig:
    mask_type: Optional[MaskType] = None
    custom_mask: Optional[MaskFn] = None

    @classmethod
    def build(cls, mask_type: Union[MaskType, str, None] = None, custom_mask: Optional[MaskFn] = None) -> "MaskConfig":
        mt = MaskType.coerce(mask_type)
        if custom_mask is not None and mt is not MaskType.CUSTOM:
            logger.debug("custom_mask ignored for mask type %s", mt)
            custom_mask = None
        return cls(mask_type=mt, custom_mask=custom_mask)


@dataclass(frozen=True)
class MaskState:
    raw_value: str = ""
    masked_value: str = ""


def extract_text(source: Any) -> str:
    """Plain string, Flet ControlEvent (e.control.value), DOM-like event
    (e.target.value) or {"target": {"value": ...}}."""
    if source is None:
        return ""
    if isinstance(source, str):
        return source
    if isinstance(source, Mapping):
        target = source.get("target")
        if isinstance(target, Mapping) and "value" in target:
            return target["value"] or ""
    for attr in ("control", "target"):
        holder = getattr(source, attr, None)
        if holder is not None and hasattr(holder, "value"):
            return holder.value or ""
    raise TypeError(f"Cannot read input text from {type(source).__name__}")


def compute_state(config: MaskConfig, text: str) -> MaskState:
    if config.mask_type is None:
        return MaskState(raw_value=text, masked_value=text)

    clamped = clamp_raw_value(config.mask_type, text)
    masked = get_mask_function(config.mask_type, config.custom_mask)(clamped)

    if config.mask_type is MaskType.MONEY:
        # raw is re-derived from what the user sees, not from the input
        raw = to_fixed(parse_currency_to_number(masked), 2)
    else:
        raw = clamped
    return MaskState(raw_value=raw, masked_value=masked)


def initial_state(config: MaskConfig, initial_value: str = "") -> MaskState:
    return compute_state(config, initial_value or "")


class InputMask:
    def __init__(
        self,
        mask_type: Union[MaskType, str, None] = None,
        initial_value: str = "",
        custom_mask: Optional[MaskFn] = None,
        on_change: Optional[OnChange] = None,
    ):
        self._config = MaskConfig.build(mask_type, custom_mask)
        self._on_change = on_change
        self._state = initial_state(self._config, initial_value)

    # ---------- reads ----------
    @property
    def config(self) -> MaskConfig:
        return self._config

    @property
    def state(self) -> MaskState:
        return self._state

    @property
    def raw_value(self) -> str:
        return self._state.raw_value

    @property
    def masked_value(self) -> str:
        return self._state.masked_value

    # ---------- updates ----------
    def edit(self, text_or_event: Any) -> MaskState:
        return self._apply(extract_text(text_or_event))

    def on_change_text(self, text: str) -> MaskState:
        return self._apply(text or "")

    def set_value(self, text: str) -> MaskState:
        return self._apply(text or "")

    def _apply(self, text: str) -> MaskState:
        # a failing custom mask raises here and leaves the state untouched
        new_state = compute_state(self._config, text)
        logger.debug("mask %s: %r -> raw=%r masked=%r",
                     self._config.mask_type, text, new_state.raw_value, new_state.masked_value)
        self._state = new_state
        if self._on_change:
            self._on_change(new_state.raw_value)
        return new_state

    def __repr__(self) -> str:
        mt = self._config.mask_type.value if self._config.mask_type else None
        return f"InputMask(mask_type={mt!r}, raw_value={self.raw_value!r}, masked_value={self.masked_value!r})"
