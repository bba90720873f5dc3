from __future__ import annotations

from rates.core.config import Config
from rates.core.parser import RatesParser
from rates.utils.exporting import ExportUtils


def convert(config: Config) -> int:
    """Parse config.input_file, sort by value descending and write JSON to config.output_file."""
    parser = RatesParser(debug=config.debug)

    df = parser.parse_file(config.input_file)
    df = ExportUtils.sort_by_value(df)

    records = ExportUtils.to_records(df)
    ExportUtils.write_json(records, config.output_file)

    print(f"Wrote {len(records)} records")
    return len(records)
