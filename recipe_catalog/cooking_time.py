from typing import Dict, Tuple

MAX_HOURS = 12
MAX_MINUTES = 59

PRESETS: Dict[str, Tuple[int, int]] = {
    "15m": (0, 15),
    "30m": (0, 30),
    "45m": (0, 45),
    "1h": (1, 0),
    "1h 30m": (1, 30),
    "2h": (2, 0),
}


def format_cooking_time(hours: int, minutes: int) -> str:
    """Render an hour/minute pair as the display string stored on a recipe.

    ``(0, 15)`` -> ``"15 mins"``, ``(2, 0)`` -> ``"2 hours"``,
    ``(1, 30)`` -> ``"1h 30m"``.
    """

    if not 0 <= hours <= MAX_HOURS:
        raise ValueError(f"Hours must be between 0 and {MAX_HOURS}, got {hours}.")
    if not 0 <= minutes <= MAX_MINUTES:
        raise ValueError(f"Minutes must be between 0 and {MAX_MINUTES}, got {minutes}.")

    if hours == 0:
        return f"{minutes} mins"
    if minutes == 0:
        suffix = "s" if hours > 1 else ""
        return f"{hours} hour{suffix}"
    return f"{hours}h {minutes}m"


def preset_cooking_time(label: str) -> str:
    """Format one of the quick presets. Raises :class:`KeyError` if unknown."""

    hours, minutes = PRESETS[label]
    return format_cooking_time(hours, minutes)


__all__ = ["MAX_HOURS", "MAX_MINUTES", "PRESETS", "format_cooking_time", "preset_cooking_time"]
