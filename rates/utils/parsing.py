import math
import re
from typing import Optional

from rates.core.errors import ParseError

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


class ParsingUtils:

    @staticmethod
    def parse_decimal(text: Optional[str]) -> float:
        """Parse a decimal that uses ',' as the fractional separator ("75,4148" -> 75.4148)."""
        raw = "" if text is None else text
        s = raw.replace(",", ".")

        if not _DECIMAL_RE.fullmatch(s):
            raise ParseError(raw)

        v = float(s)
        if not math.isfinite(v):
            raise ParseError(raw, f"decimal value {raw!r} is out of range")
        return v

    @staticmethod
    def parse_int(text: Optional[str]) -> int:
        s = (text or "").strip()
        if s == "":
            return 0
        if not _INT_RE.fullmatch(s):
            raise ValueError(f"invalid integer {text!r}")
        return int(s)
