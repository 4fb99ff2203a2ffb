from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipe_catalog.cooking_time import PRESETS, format_cooking_time, preset_cooking_time


@pytest.mark.parametrize(
    "hours,minutes,expected",
    (
        (0, 15, "15 mins"),
        (0, 0, "0 mins"),
        (1, 0, "1 hour"),
        (2, 0, "2 hours"),
        (1, 30, "1h 30m"),
        (12, 59, "12h 59m"),
    ),
)
def test_format_cooking_time(hours: int, minutes: int, expected: str) -> None:
    assert format_cooking_time(hours, minutes) == expected


@pytest.mark.parametrize("hours,minutes", ((-1, 0), (13, 0), (0, 60), (0, -5)))
def test_format_cooking_time_rejects_out_of_range(hours: int, minutes: int) -> None:
    with pytest.raises(ValueError):
        format_cooking_time(hours, minutes)


def test_presets_in_display_order() -> None:
    assert list(PRESETS) == ["15m", "30m", "45m", "1h", "1h 30m", "2h"]
    assert [preset_cooking_time(label) for label in PRESETS] == [
        "15 mins",
        "30 mins",
        "45 mins",
        "1 hour",
        "1h 30m",
        "2 hours",
    ]


def test_unknown_preset_raises_key_error() -> None:
    with pytest.raises(KeyError):
        preset_cooking_time("3h")
