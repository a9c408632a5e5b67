"""Manual check of a saved availability response.

Run from the repository root with:
  PYTHONPATH=src python scripts/snapshot_check.py response.json

Optional flags:
  --named-dates  prints "Yesterday" style phrases instead of "1 day ago".
  --timezone     timezone for the absolute update time (default: UTC).
  --pattern      strftime pattern for the absolute update time.
  --debug        enables library debug logging.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pyparkingspots import decode_json, format_datetime
from pyparkingspots.const import DEFAULT_DISPLAY_PATTERN, DEFAULT_TIMEZONE
from pyparkingspots.exceptions import PyParkingSpotsError
from pyparkingspots.models import Level, Structure


def _format_count(level: Level | Structure) -> str:
    available = "-" if level.available_count is None else str(level.available_count)
    total = "-" if level.total_capacity is None else str(level.total_capacity)
    return f"{available}/{total}"


def _format_structure(
    structure: Structure,
    *,
    numeric_dates: bool,
    timezone: str,
    pattern: str,
) -> list[str]:
    updated = format_datetime(structure.last_updated_at, pattern, timezone)
    lines = [
        f"{structure.name or '-'} | {_format_count(structure)} | "
        f"{updated} ({structure.time_ago(numeric_dates)})"
    ]
    for level in structure.levels:
        lines.append(f"  {level.name or '-'} | {_format_count(level)}")
    return lines


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode a saved availability response.")
    parser.add_argument("input", help="Path to the JSON file.")
    parser.add_argument(
        "--named-dates",
        dest="named_dates",
        action="store_true",
        help='Use phrases such as "Yesterday" instead of "1 day ago".',
    )
    parser.add_argument(
        "--timezone",
        dest="timezone",
        default=DEFAULT_TIMEZONE,
        help=f"Timezone for update times (default: {DEFAULT_TIMEZONE}).",
    )
    parser.add_argument(
        "--pattern",
        dest="pattern",
        default=DEFAULT_DISPLAY_PATTERN,
        help="strftime pattern for update times.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> int:
    """CLI entrypoint for checking a saved response."""
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"File not found: {input_path}", file=sys.stderr)
        return 2
    try:
        response = decode_json(input_path.read_bytes())
        lines: list[str] = []
        for structure in response.structures:
            lines.extend(
                _format_structure(
                    structure,
                    numeric_dates=not args.named_dates,
                    timezone=args.timezone,
                    pattern=args.pattern,
                )
            )
    except PyParkingSpotsError as exc:
        print(f"{type(exc).__name__}: {exc.detail or exc}", file=sys.stderr)
        return 2
    print(f"Captured at {response.captured_at.isoformat()}")
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
