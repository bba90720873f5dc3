"""
Charset resolution for XML documents.

Resolution order:
- byte order mark
- encoding declared in the XML prolog
- best guess via charset-normalizer
- utf-8
"""

from __future__ import annotations

import codecs
import re
from typing import Optional, Tuple

from charset_normalizer import from_bytes

from rates.core.errors import DecodeError

DEFAULT_ENCODING = "utf-8"

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

# prolog is ascii-compatible for every encoding we honor via declaration
_DECL_RE = re.compile(rb"""^\s*<\?xml[^>]*?\sencoding\s*=\s*["']([A-Za-z][\w.:-]*)["']""")


class CharsetUtils:

    @staticmethod
    def declared_encoding(raw: bytes) -> Optional[str]:
        m = _DECL_RE.match(raw[:1024])
        if m is None:
            return None
        return m.group(1).decode("ascii")

    @staticmethod
    def resolve_encoding(raw: bytes) -> Tuple[str, str]:
        """Return (python codec name, source) where source is bom/declared/detected/default."""
        for bom, name in _BOMS:
            if raw.startswith(bom):
                return name, "bom"

        declared = CharsetUtils.declared_encoding(raw)
        if declared is not None:
            try:
                return codecs.lookup(declared).name, "declared"
            except LookupError as e:
                raise DecodeError(f"unsupported charset {declared!r}") from e

        match = from_bytes(raw).best()
        if match is not None:
            return match.encoding, "detected"

        return DEFAULT_ENCODING, "default"

    @staticmethod
    def decode(raw: bytes, encoding: str) -> str:
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(f"decode document as {encoding}: {e}") from e
