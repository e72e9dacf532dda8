"""Hilfsfunktionen für Kalender-Raster: Stundenzeilen, Wochen, Monate.

Liefert die Tage, für die jeweils gruppiert und positioniert wird.
"""

from datetime import date, timedelta
from typing import Iterable

from config.schema import GridConfig
from models.clock import parse_time
from models.event import Event


def hour_labels(config: GridConfig) -> list[str]:
    """Beschriftungen der Stundenzeilen, z.B. ["08:00", ..., "23:00"]."""
    return [f"{h:02d}:00" for h in range(config.first_hour, config.last_hour + 1)]


def is_event_in_hour(event: Event, hour_label: str) -> bool:
    """True wenn der Termin die Stunde [HH:00, HH+1:00) berührt."""
    hour_start = parse_time(hour_label)
    hour_end = hour_start + 60
    return event.start_minutes < hour_end and event.end_minutes > hour_start


def events_for_day(events: Iterable[Event], day: date) -> list[Event]:
    """Filtert die Termine eines Tages (Reihenfolge bleibt erhalten)."""
    return [e for e in events if e.date == day]


# ─── Wochen / Monate ──────────────────────────────────────────────────────────

def week_start(day: date) -> date:
    """Montag der Woche, in der der Tag liegt."""
    return day - timedelta(days=day.weekday())


def week_end(day: date) -> date:
    """Sonntag der Woche, in der der Tag liegt."""
    return week_start(day) + timedelta(days=6)


def week_days(day: date) -> list[date]:
    """Alle sieben Tage (Mo–So) der Woche."""
    start = week_start(day)
    return [start + timedelta(days=i) for i in range(7)]


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    if day.month == 12:
        return date(day.year, 12, 31)
    return date(day.year, day.month + 1, 1) - timedelta(days=1)


def range_days(date_from: date, date_to: date) -> list[date]:
    """Alle Tage von date_from bis einschließlich date_to (leer wenn from > to)."""
    n = (date_to - date_from).days
    return [date_from + timedelta(days=i) for i in range(n + 1)]


def month_grid(day: date) -> list[date]:
    """Monatsraster: volle Wochen (Mo–So), die den Monat abdecken.

    Ergebnis hat immer ein Vielfaches von 7 Tagen (28, 35 oder 42).
    """
    return range_days(week_start(month_start(day)), week_end(month_end(day)))


def grid_height(config: GridConfig) -> float:
    """Gesamthöhe des Rasters in Pixel (bis Ende der letzten Stundenzeile)."""
    last_row_end = (config.last_hour + 1) * 60
    return (last_row_end - config.grid_origin_minutes) / 60 * config.pixels_per_hour

