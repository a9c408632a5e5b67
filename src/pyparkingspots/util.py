"""Shared utilities for timestamps and date formatting."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .const import MONTH_NAMES, TIMEZONE_ABBREVIATIONS, WEEKDAY_NAMES
from .exceptions import ParseError, ValidationError

_LOGGER = logging.getLogger(__name__)
_DIGITS_RE = re.compile(r"[0-9]+")
# C-locale expansions of the composite directives.
_COMPOSITE_DIRECTIVES = {
    "c": "%a %b %d %H:%M:%S %Y",
    "x": "%m/%d/%y",
    "X": "%H:%M:%S",
}
_NAME_DIRECTIVES = frozenset("aAbBhp")
_NUMERIC_DIRECTIVES = frozenset("CdfGgHIjmMSUuVwWyY")
_MONTH_NUMBERS = {
    **{name.lower(): number for number, name in enumerate(MONTH_NAMES, 1)},
    **{name[:3].lower(): number for number, name in enumerate(MONTH_NAMES, 1)},
}
_WEEKDAY_NUMBERS = {
    **{name.lower(): number for number, name in enumerate(WEEKDAY_NAMES, 1)},
    **{name[:3].lower(): number for number, name in enumerate(WEEKDAY_NAMES, 1)},
}


def extract_timestamp(raw: str | None, *, now: datetime | None = None) -> datetime:
    """Return the instant encoded by the first digit run of ``raw``.

    The digits are read as Unix epoch seconds. When ``raw`` carries no usable
    digit run the current time (or ``now``) is returned instead; no error is
    raised.
    """
    fallback = now if now is not None else datetime.now(UTC)
    if not isinstance(raw, str):
        _LOGGER.debug("Timestamp missing, falling back to now")
        return fallback
    match = _DIGITS_RE.search(raw)
    if match is None:
        _LOGGER.debug("Timestamp %r has no digits, falling back to now", raw)
        return fallback
    try:
        seconds = int(match.group())
        return datetime.fromtimestamp(seconds, UTC)
    except (ValueError, OverflowError, OSError):
        _LOGGER.debug("Timestamp %r is out of range, falling back to now", raw)
        return fallback


def resolve_timezone(name: str) -> tzinfo:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Timezone must be a non-empty string.")
    key = name.strip()
    key = TIMEZONE_ABBREVIATIONS.get(key.upper(), key)
    if key == "UTC":
        return UTC
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {name}.") from exc


def _tokenize(pattern: str) -> list[tuple[bool, str]]:
    """Split ``pattern`` into ``(is_directive, text)`` tokens.

    Composite directives are expanded to their C-locale form and the ``E``/``O``
    alternative-representation modifiers are dropped.
    """
    if not isinstance(pattern, str) or not pattern:
        raise ValidationError("Date pattern must be a non-empty string.")
    tokens: list[tuple[bool, str]] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char != "%" or index + 1 >= len(pattern):
            tokens.append((False, char))
            index += 1
            continue
        directive = pattern[index + 1]
        index += 2
        if directive in "EO" and index < len(pattern):
            directive = pattern[index]
            index += 1
        if directive in _COMPOSITE_DIRECTIVES:
            tokens.extend(_tokenize(_COMPOSITE_DIRECTIVES[directive]))
        else:
            tokens.append((True, directive))
    return tokens


def _english_name(directive: str, value: datetime) -> str:
    if directive == "A":
        return WEEKDAY_NAMES[value.weekday()]
    if directive == "a":
        return WEEKDAY_NAMES[value.weekday()][:3]
    if directive == "B":
        return MONTH_NAMES[value.month - 1]
    if directive == "p":
        return "AM" if value.hour < 12 else "PM"
    # %b and %h
    return MONTH_NAMES[value.month - 1][:3]


def _format_pattern(pattern: str, value: datetime) -> str:
    parts: list[str] = []
    for is_directive, text in _tokenize(pattern):
        if not is_directive:
            parts.append(text.replace("%", "%%"))
        elif text in _NAME_DIRECTIVES:
            parts.append(_english_name(text, value))
        else:
            parts.append(f"%{text}")
    return "".join(parts)


def _alternation(names: Iterable[str]) -> str:
    return "|".join(re.escape(name) for name in names)


def _directive_regex(directive: str) -> str:
    if directive in ("b", "h"):
        return _alternation(name[:3] for name in MONTH_NAMES)
    if directive == "B":
        return _alternation(MONTH_NAMES)
    if directive == "a":
        return _alternation(name[:3] for name in WEEKDAY_NAMES)
    if directive == "A":
        return _alternation(WEEKDAY_NAMES)
    if directive == "p":
        return "AM|PM"
    if directive == "Z":
        return r"[A-Za-z][A-Za-z0-9+\-]*|[+\-][0-9]{2,4}"
    if directive == "z":
        return r"Z|[+\-][0-9:.]+"
    if directive == "%":
        return "%"
    if directive in _NUMERIC_DIRECTIVES:
        return r" ?[0-9]+"
    raise ValidationError(f"Unsupported parse directive: %{directive}.")


def _mismatch(text: str, pattern: str) -> ParseError:
    return ParseError(
        "Date text does not match pattern.",
        detail=f"{text!r} does not match {pattern!r}.",
    )


def _numeric_form(text: str, pattern: str) -> tuple[str, str, str | None, str | None]:
    """Rewrite English names in ``text`` as numbers for a locale-free ``strptime``.

    Returns the rewritten text and pattern, the AM/PM marker and the zone
    abbreviation found in ``text``, if any.
    """
    tokens = _tokenize(pattern)
    regex = "".join(
        f"({_directive_regex(token)})"
        if is_directive
        else (r"(\s+)" if token.isspace() else f"({re.escape(token)})")
        for is_directive, token in tokens
    )
    match = re.fullmatch(regex, text, re.IGNORECASE)
    if match is None:
        raise _mismatch(text, pattern)
    text_parts: list[str] = []
    pattern_parts: list[str] = []
    meridiem: str | None = None
    zone_name: str | None = None
    for (is_directive, token), found in zip(tokens, match.groups()):
        if not is_directive:
            text_parts.append(found)
            pattern_parts.append(token.replace("%", "%%"))
        elif token in ("b", "h", "B"):
            text_parts.append(str(_MONTH_NUMBERS[found.lower()]))
            pattern_parts.append("%m")
        elif token in ("a", "A"):
            text_parts.append(str(_WEEKDAY_NUMBERS[found.lower()]))
            pattern_parts.append("%u")
        elif token == "p":
            meridiem = found.upper()
        elif token == "Z":
            zone_name = found.upper()
        else:
            text_parts.append(found)
            pattern_parts.append(f"%{token}")
    if meridiem is not None and (True, "I") not in tokens:
        meridiem = None
    return "".join(text_parts), "".join(pattern_parts), meridiem, zone_name


def format_datetime(value: datetime, pattern: str, timezone: str) -> str:
    """Format ``value`` with a strftime ``pattern`` in the named ``timezone``.

    Month names, weekday names and AM/PM markers are always English so the
    output does not depend on the process locale.
    """
    if not isinstance(value, datetime):
        raise ValidationError("Value must be a datetime.")
    if value.tzinfo is None:
        raise ValidationError("Datetime must include timezone information.")
    local = value.astimezone(resolve_timezone(timezone))
    return local.strftime(_format_pattern(pattern, local))


def parse_datetime(text: str, pattern: str, timezone: str) -> datetime:
    """Parse ``text`` written with ``pattern`` in ``timezone`` into a UTC datetime.

    Names are read in English whatever the process locale. A ``%Z`` abbreviation
    in ``text`` is not used to pick the zone; ``timezone`` decides, and the
    abbreviation only resolves repeated wall-clock times at DST transitions.
    """
    if not isinstance(text, str):
        raise ValidationError("Date text must be a string.")
    zone = resolve_timezone(timezone)
    numeric_text, numeric_pattern, meridiem, zone_name = _numeric_form(text, pattern)
    try:
        parsed = datetime.strptime(numeric_text, numeric_pattern)
    except ValueError as exc:
        raise _mismatch(text, pattern) from exc
    if meridiem is not None:
        # Without %p, strptime reads 12 o'clock as midnight.
        parsed = parsed.replace(hour=parsed.hour % 12 + (12 if meridiem == "PM" else 0))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
        if zone_name is not None and parsed.tzname() != zone_name:
            later = parsed.replace(fold=1)
            if later.tzname() == zone_name:
                parsed = later
    return parsed.astimezone(UTC)
