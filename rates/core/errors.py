from __future__ import annotations


class RatesError(Exception):
    """Base class for every failure in the conversion pipeline."""


class ConfigError(RatesError):
    """Config file is missing, unreadable or not a YAML mapping."""


class InputReadError(RatesError):
    """Source XML file cannot be read."""


class DecodeError(RatesError):
    """Document charset cannot be resolved or XML structure is invalid."""


class ParseError(RatesError, ValueError):
    """A record value is not a number after comma normalization."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"invalid decimal value {text!r}")


class OutputError(RatesError):
    """Destination directory or JSON file cannot be written."""
