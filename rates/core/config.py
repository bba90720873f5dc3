from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from rates.core.errors import ConfigError


@dataclass(frozen=True)
class Config:
    input_file: str = ""
    output_file: str = ""
    debug: bool = False


def _path_value(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return str(value)


def _flag_value(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def load_config(path: Path | str) -> Config:
    """
    Load the YAML config into an immutable Config.

    Missing 'input-file' / 'output-file' keys become empty paths; they are
    not validated here and fail later when the file is opened.
    """
    cfg_path = Path(path)
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"read yaml {cfg_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"decode yaml {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"decode yaml {cfg_path}: top level must be a mapping")

    return Config(
        input_file=_path_value(data, "input-file"),
        output_file=_path_value(data, "output-file"),
        debug=_flag_value(data, "debug"),
    )
