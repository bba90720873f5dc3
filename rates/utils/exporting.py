from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, List

import pandas as pd

from rates.core.errors import OutputError

FILE_MODE = 0o644


class ExportUtils:

    @staticmethod
    def sort_by_value(df: pd.DataFrame) -> pd.DataFrame:
        # stable: equal values keep document order
        return df.sort_values("value", ascending=False, kind="stable").reset_index(drop=True)

    @staticmethod
    def to_records(df: pd.DataFrame) -> List[Dict]:
        return [
            {
                "num_code": int(r["num_code"]),
                "char_code": str(r["char_code"]),
                "value": float(r["value"]),
            }
            for r in df.to_dict(orient="records")
        ]

    @staticmethod
    def dumps(records: List[Dict]) -> str:
        return json.dumps(records, ensure_ascii=False, indent=2, allow_nan=False)

    @staticmethod
    def write_json(records: List[Dict], output_path: Path | str) -> None:
        """
        Write records as an indented JSON array.

        The payload goes to a temp file next to the destination and is moved
        into place with os.replace, so a failed run never leaves a truncated
        file behind.
        """
        path = Path(output_path)
        directory = path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"create dir {directory}: {e}") from e

        try:
            payload = ExportUtils.dumps(records)
        except (TypeError, ValueError) as e:
            raise OutputError(f"marshal json: {e}") from e

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise OutputError(f"write file {path}: {e}") from e
