from __future__ import annotations
import argparse
import sys

from rates.core.config import load_config
from rates.core.errors import ConfigError, DecodeError, InputReadError, OutputError, ParseError
from rates.core.pipeline import convert

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Serialize currency rates XML → JSON sorted by value")
    ap.add_argument("--config", default="config.yaml", help="Path to the configuration file")
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERR: Failed to load config: {e}", file=sys.stderr)
        return 2

    try:
        convert(config)
    except (InputReadError, DecodeError, ParseError) as e:
        print(f"ERR: Failed to parse XML: {e}", file=sys.stderr)
        return 3
    except OutputError as e:
        print(f"ERR: Failed to write output: {e}", file=sys.stderr)
        return 6

    print(f"Output saved to: {config.output_file}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
