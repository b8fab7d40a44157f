# === components/mask_helpers.py ===
from __future__ import annotations
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Union

# ASCII only: \d would also keep other unicode digits
_re_non_digits = re.compile(r"[^0-9]+")
_re_not_currency = re.compile(r"[^0-9.\-]+")
_re_int_prefix = re.compile(r"^\s*([+-]?[0-9]+)")
_re_float_prefix = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_re_js_group = re.compile(r"\$(\$|&|[0-9]{1,2})")

# wide enough to quantize any finite float
_WIDE = Context(prec=400)


def strip_non_digits(s: str) -> str:
    return _re_non_digits.sub("", s or "")


def limit_length(s: str, n: int) -> str:
    return (s or "")[:max(n, 0)]


def insert_chunks(s: str, sizes: List[int], sep: str) -> str:
    """
    Splits `s` into chunks of the given sizes joined by `sep`.
    Empty chunks are skipped and whatever is left after the last size is
    appended as-is:

        insert_chunks("12345", [2, 2, 1], "/")   -> "12/34/5"
        insert_chunks("1234567", [2, 2, 1], "-") -> "12-34-567"
    """
    s = s or ""
    out = ""
    start = 0
    for size in sizes:
        chunk = s[start:start + size]
        if chunk:
            if out:
                out += sep
            out += chunk
        start += size
    if start < len(s):
        out += s[start:]
    return out


def _to_python_template(replacement: str, groups: int) -> str:
    def _swap(m: re.Match) -> str:
        tok = m.group(1)
        if tok == "$":
            return "$"
        if tok == "&":
            return r"\g<0>"
        if 0 < int(tok) <= groups:
            return rf"\g<{int(tok)}>"
        # "$12" with a single group reads as "$1" followed by "2"
        if len(tok) == 2 and 0 < int(tok[0]) <= groups:
            return rf"\g<{tok[0]}>{tok[1]}"
        return m.group(0)
    # escape backslashes first so they stay literal in re.sub
    return _re_js_group.sub(_swap, (replacement or "").replace("\\", "\\\\"))


def apply_regex_replace(s: str, pattern: Union[str, re.Pattern], replacement: str, count: int = 0) -> str:
    """
    Regex replace using `$1`-style group references (`$&` = whole match,
    `$$` = literal dollar). `count=0` replaces every match.

        apply_regex_replace("123456789", r"(\\d{3})(\\d{2})(\\d{4})", "$1-$2-$3")
        -> "123-45-6789"
    """
    rx = re.compile(pattern) if isinstance(pattern, str) else pattern
    return rx.sub(_to_python_template(replacement, rx.groups), s or "", count=count)


def clamp_digits(numeric: str, lo: int, hi: int) -> str:
    if not numeric:
        return numeric
    m = _re_int_prefix.match(numeric)
    if not m:
        return numeric
    value = int(m.group(1))
    if value < lo:
        # floor keeps the typed width, ceiling does not
        return str(lo).rjust(len(numeric), "0")
    if value > hi:
        return str(hi)
    return numeric


def parse_float_prefix(s: str) -> float | None:
    m = _re_float_prefix.match(s or "")
    if not m:
        return None
    return float(m.group(0))


def to_fixed(value: float, digits: int = 2, grouping: bool = False) -> str:
    if math.isinf(value):
        # toLocaleString shows the infinity sign, toFixed spells it out
        if grouping:
            return "∞" if value > 0 else "-∞"
        return "Infinity" if value > 0 else "-Infinity"
    # ties round away from zero on the exact binary value (0.125 -> "0.13")
    q = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=_WIDE)
    return f"{q:,.{digits}f}" if grouping else f"{q:.{digits}f}"


def parse_currency_to_number(s: str) -> float:
    if not s:
        return 0.0
    cleaned = _re_not_currency.sub("", s).strip()
    value = parse_float_prefix(cleaned)
    return value or 0.0
