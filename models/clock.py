"""Uhrzeit-Hilfsfunktionen: "HH:MM[:SS]" ⇄ Minuten seit Mitternacht.

Alle Intervall-Berechnungen laufen auf ganzzahligen Minuten. Strings werden
nur an der Grenze geparst und erst beim Rendern wieder formatiert.
"""

import re

# 1 Tick = 100 ns (.NET TimeSpan)
TICKS_PER_SECOND = 10_000_000

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")


class TimeFormatError(ValueError):
    """Uhrzeit ist nicht im Format "HH:MM" oder "HH:MM:SS"."""


def _split(value: str) -> tuple[int, int, int]:
    if not isinstance(value, str):
        raise TimeFormatError(f"Uhrzeit muss ein String sein, nicht {type(value).__name__}: {value!r}")
    m = _TIME_RE.match(value)
    if m is None:
        raise TimeFormatError(f"Ungültige Uhrzeit: {value!r} (erwartet HH:MM oder HH:MM:SS)")
    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3)) if m.group(3) is not None else 0
    if minutes > 59 or seconds > 59:
        raise TimeFormatError(f"Ungültige Uhrzeit: {value!r} (Minuten/Sekunden > 59)")
    # 24:00 ist als Tagesende erlaubt, alles darüber nicht
    if hours > 24 or (hours == 24 and (minutes or seconds)):
        raise TimeFormatError(f"Ungültige Uhrzeit: {value!r} (Stunde > 24)")
    return hours, minutes, seconds


def parse_time(value: str) -> int:
    """Wandelt "HH:MM" / "HH:MM:SS" in Minuten seit Mitternacht um.

    Sekunden werden ignoriert ("09:30:59" → 570).
    """
    hours, minutes, _ = _split(value)
    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    """Minuten seit Mitternacht → "HH:MM"."""
    hours, minutes = divmod(total, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_time(value: str) -> str:
    """Kürzt "09:00:00" auf "09:00"."""
    return format_minutes(parse_time(value))


def format_time_range(start: str, end: str) -> str:
    """Gibt "09:00 - 10:30" zurück."""
    return f"{format_time(start)} - {format_time(end)}"


def time_string_to_ticks(value: str) -> int:
    """Uhrzeit → .NET-TimeSpan-Ticks, wie sie die Schul-API erwartet."""
    hours, minutes, seconds = _split(value)
    return (hours * 3600 + minutes * 60 + seconds) * TICKS_PER_SECOND
