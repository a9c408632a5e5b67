import dataclasses
from datetime import UTC, datetime, timedelta

import pytest

from pyparkingspots.models import Level, Response, Structure

LEVELS = (
    Level(name="Total", available_count=30, total_capacity=100),
    Level(name="Roof", available_count=10, total_capacity=40),
    Level(name="Ground", available_count=20, total_capacity=60),
)


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_levels_drop_summary_row(count: int) -> None:
    structure = Structure(name="Garage", raw_levels=LEVELS[:count])

    assert len(structure.levels) == max(count - 1, 0)
    for index, level in enumerate(structure.levels):
        assert level == structure.raw_levels[index + 1]


def test_summary_level() -> None:
    assert Structure(raw_levels=LEVELS).summary_level == LEVELS[0]
    assert Structure().summary_level is None


def test_last_updated_at_uses_epoch_seconds() -> None:
    structure = Structure(last_updated_raw="Last update: 1700000000 UTC")
    assert structure.last_updated_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_last_updated_at_falls_back_to_now() -> None:
    structure = Structure(last_updated_raw="no digits here")
    assert abs(structure.last_updated_at - datetime.now(UTC)) < timedelta(seconds=5)


def test_time_ago_uses_last_updated_at() -> None:
    structure = Structure(last_updated_raw="1700000000")
    now = datetime.fromtimestamp(1700000000, UTC) + timedelta(hours=1, minutes=5)

    assert structure.time_ago(now=now) == "1 hour ago"
    assert structure.time_ago(False, now=now) == "An hour ago"


def test_models_are_frozen() -> None:
    structure = Structure(name="Garage")
    with pytest.raises(dataclasses.FrozenInstanceError):
        structure.name = "Deck"  # type: ignore[misc]


def test_find_structure() -> None:
    garage = Structure(name="Garage")
    deck = Structure(name="Deck")
    response = Response(structures=(garage, deck))

    assert response.find_structure("Deck") is deck
    assert response.find_structure("Lot") is None
