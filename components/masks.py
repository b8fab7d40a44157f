# === components/masks.py ===
from __future__ import annotations
import logging
import re
from enum import Enum
from typing import Callable, Dict, Optional, Union

from components.mask_helpers import (
    apply_regex_replace,
    insert_chunks,
    limit_length,
    parse_float_prefix,
    strip_non_digits,
    to_fixed,
)

logger = logging.getLogger(__name__)

MaskFn = Callable[[str], str]

_re_phone = re.compile(r"^([0-9]{0,3})([0-9]{0,3})([0-9]{0,4})$")
_re_card_group = re.compile(r"([0-9]{4})(?=[0-9])")
_re_not_money = re.compile(r"[^0-9.]+")


class MaskType(str, Enum):
    PHONE = "phone"
    MONEY = "money"
    CARD = "card"
    ZIP = "zip"
    DATE = "date"
    MONTH_DAY = "monthDay"
    CUSTOM = "custom"

    @classmethod
    def coerce(cls, value: Union["MaskType", str, None]) -> Optional["MaskType"]:
        """Accepts a member, its value ("monthDay") or its name ("MONTH_DAY").
        Anything else means no mask."""
        if value is None or isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        logger.warning("Unknown mask type %r, falling back to pass-through", value)
        return None


# ----------------- mask functions -----------------
def mask_phone(s: str) -> str:
    d = strip_non_digits(s)
    m = _re_phone.match(d)
    if not m:
        return d
    area, prefix, line = m.groups()
    out = ""
    if area:   out = f"({area}"
    if prefix: out += f") {prefix}"
    if line:   out += f"-{line}"
    return out


def mask_money(s: str) -> str:
    v = parse_float_prefix(_re_not_money.sub("", s or "")) or 0.0
    return to_fixed(v, 2, grouping=True)


def mask_card(s: str) -> str:
    return apply_regex_replace(strip_non_digits(s), _re_card_group, "$1 ")


def mask_zip(s: str) -> str:
    d = strip_non_digits(s)
    if len(d) > 5:
        return f"{d[:5]}-{d[5:9]}"
    return d


def mask_date(s: str) -> str:
    d = limit_length(strip_non_digits(s), 8)
    return insert_chunks(d, [2, 2, 4], "/")


def mask_month_day(s: str) -> str:
    d = limit_length(strip_non_digits(s), 4)
    return insert_chunks(d, [2, 2], "/")


def mask_identity(s: str) -> str:
    return s


# custom is resolved per call in get_mask_function
MASK_FUNCTIONS: Dict[MaskType, Optional[MaskFn]] = {
    MaskType.PHONE:     mask_phone,
    MaskType.MONEY:     mask_money,
    MaskType.CARD:      mask_card,
    MaskType.ZIP:       mask_zip,
    MaskType.DATE:      mask_date,
    MaskType.MONTH_DAY: mask_month_day,
    MaskType.CUSTOM:    None,
}

# raw digit cap per type; None = no truncation
MASK_DIGIT_CAPS: Dict[MaskType, Optional[int]] = {
    MaskType.PHONE:     10,
    MaskType.MONEY:     None,
    MaskType.CARD:      16,
    MaskType.ZIP:       9,
    MaskType.DATE:      8,
    MaskType.MONTH_DAY: 4,
    MaskType.CUSTOM:    None,
}


def _check_exhaustive(table: dict, name: str) -> None:
    missing = [m.value for m in MaskType if m not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


_check_exhaustive(MASK_FUNCTIONS, "MASK_FUNCTIONS")
_check_exhaustive(MASK_DIGIT_CAPS, "MASK_DIGIT_CAPS")


def get_mask_function(mask_type: Union[MaskType, str, None], custom_mask: Optional[MaskFn] = None) -> MaskFn:
    mt = MaskType.coerce(mask_type)
    if mt is None:
        return mask_identity
    if mt is MaskType.CUSTOM:
        return custom_mask or mask_identity
    return MASK_FUNCTIONS[mt]


def clamp_raw_value(mask_type: Union[MaskType, str, None], raw: str) -> str:
    """
    Bounds the raw value before formatting. Capped types keep digits only,
    truncated to the cap:

        clamp_raw_value("phone", "1234567890333") -> "1234567890"

    money, custom and no mask return `raw` untouched.
    """
    mt = MaskType.coerce(mask_type)
    cap = MASK_DIGIT_CAPS[mt] if mt is not None else None
    if cap is None:
        return raw
    return limit_length(strip_non_digits(raw), cap)
