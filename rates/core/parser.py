from __future__ import annotations

from pathlib import Path
from typing import Dict, List
from xml.etree import ElementTree

import pandas as pd

from rates.core.errors import DecodeError, InputReadError, ParseError
from rates.utils.charset import CharsetUtils
from rates.utils.parsing import ParsingUtils

COLUMNS = ["num_code", "char_code", "value"]


class RatesParser:

    def __init__(self, record_tag: str = "Valute", debug: bool = False):
        self.record_tag = record_tag
        self.debug = debug

    def _read_record(self, node: ElementTree.Element, position: int) -> Dict:
        record = {"num_code": 0, "char_code": "", "value": 0.0}

        # repeated children: every occurrence is decoded, the last one wins
        for child in node:
            text = child.text or ""
            if child.tag == "NumCode":
                try:
                    record["num_code"] = ParsingUtils.parse_int(text)
                except ValueError as e:
                    raise DecodeError(f"decode {self.record_tag} #{position} NumCode: {e}") from e
            elif child.tag == "CharCode":
                record["char_code"] = text
            elif child.tag == "Value":
                try:
                    record["value"] = ParsingUtils.parse_decimal(text)
                except ParseError as e:
                    raise ParseError(e.text, f"decode {self.record_tag} #{position} Value: {e}") from e

        return record

    def parse_text(self, text: str) -> pd.DataFrame:
        try:
            root = ElementTree.fromstring(text)
        except ElementTree.ParseError as e:
            raise DecodeError(f"decode xml: {e}") from e

        records: List[Dict] = [
            self._read_record(node, i)
            for i, node in enumerate(root.findall(self.record_tag), start=1)
        ]

        if self.debug:
            print(f"DEBUG: parsed {len(records)} <{self.record_tag}> records")

        df = pd.DataFrame(records, columns=COLUMNS)
        if df.empty:
            return df.astype({"num_code": "int64", "char_code": "object", "value": "float64"})
        return df

    def parse_bytes(self, raw: bytes) -> pd.DataFrame:
        encoding, source = CharsetUtils.resolve_encoding(raw)
        if self.debug:
            print(f"DEBUG: charset={encoding} ({source})")

        text = CharsetUtils.decode(raw, encoding)
        return self.parse_text(text)

    def parse_file(self, file_path: Path | str) -> pd.DataFrame:
        path = Path(file_path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise InputReadError(f"read xml file {path}: {e}") from e
        try:
            return self.parse_bytes(raw)
        except ParseError as e:
            raise ParseError(e.text, f"{path}: {e}") from e
        except DecodeError as e:
            raise DecodeError(f"{path}: {e}") from e
