"""Decode availability API responses into models."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .const import (
    KEY_STRUCTURES,
    LEVEL_KEY_CAPACITY,
    LEVEL_KEY_CURRENT_COUNT,
    LEVEL_KEY_NAME,
    SCHEMA_FILENAME,
    STRUCTURE_KEY_CAPACITY,
    STRUCTURE_KEY_CURRENT_COUNT,
    STRUCTURE_KEY_LEVELS,
    STRUCTURE_KEY_NAME,
    STRUCTURE_KEY_TIMESTAMP,
)
from .exceptions import DecodeError, ValidationError
from .models import Level, Response, Structure

_LOGGER = logging.getLogger(__name__)
_SCHEMA_CACHE: dict[str, Any] | None = None


def _schema_path() -> Traversable:
    return resources.files("pyparkingspots") / SCHEMA_FILENAME


def load_response_schema() -> dict[str, Any]:
    global _SCHEMA_CACHE
    if _SCHEMA_CACHE is None:
        _SCHEMA_CACHE = json.loads(_schema_path().read_text(encoding="utf-8"))
    return _SCHEMA_CACHE


def clear_schema_cache() -> None:
    """Clear the cached response schema (used in tests)."""
    global _SCHEMA_CACHE
    _SCHEMA_CACHE = None


def _validate_document(document: Any) -> None:
    validator = Draft202012Validator(load_response_schema())
    error = best_match(validator.iter_errors(document))
    if error is not None:
        raise DecodeError(
            "Response document is invalid.",
            detail=f"{error.json_path}: {error.message}",
        )


def _count(value: Any) -> int | None:
    # The schema admits integral floats such as 12.0.
    if value is None:
        return None
    return int(value)


def _map_level(item: dict[str, Any]) -> Level:
    return Level(
        name=item.get(LEVEL_KEY_NAME),
        available_count=_count(item.get(LEVEL_KEY_CURRENT_COUNT)),
        total_capacity=_count(item.get(LEVEL_KEY_CAPACITY)),
    )


def _map_structure(item: dict[str, Any]) -> Structure:
    raw_levels = item.get(STRUCTURE_KEY_LEVELS) or []
    return Structure(
        name=item.get(STRUCTURE_KEY_NAME),
        available_count=_count(item.get(STRUCTURE_KEY_CURRENT_COUNT)),
        total_capacity=_count(item.get(STRUCTURE_KEY_CAPACITY)),
        last_updated_raw=item.get(STRUCTURE_KEY_TIMESTAMP),
        raw_levels=tuple(_map_level(level) for level in raw_levels),
    )


def decode(document: Any) -> Response:
    """Decode a parsed JSON document into a :class:`Response`.

    The whole document is validated before any model is built, so decoding
    either returns a complete response or raises :class:`DecodeError`.
    """
    _LOGGER.debug("Response decode started")
    _validate_document(document)
    structures = tuple(_map_structure(item) for item in document[KEY_STRUCTURES])
    response = Response(structures=structures, captured_at=datetime.now(UTC))
    _LOGGER.debug("Response decode completed count=%s", len(structures))
    return response


def decode_json(text: str | bytes) -> Response:
    """Parse raw JSON text and decode it."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise ValidationError("Response body must be str or bytes.")
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise DecodeError("Response did not contain valid JSON.") from exc
    return decode(document)
