"""pyParkingSpots package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .decoder import decode, decode_json
from .exceptions import DecodeError, ParseError, PyParkingSpotsError, ValidationError
from .models import Level, Response, Structure
from .timeago import time_ago, time_ago_since
from .util import extract_timestamp, format_datetime, parse_datetime

try:
    __version__ = version("pyparkingspots")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "DecodeError",
    "Level",
    "ParseError",
    "PyParkingSpotsError",
    "Response",
    "Structure",
    "ValidationError",
    "__version__",
    "decode",
    "decode_json",
    "extract_timestamp",
    "format_datetime",
    "parse_datetime",
    "time_ago",
    "time_ago_since",
]
