"""Overlap-Gruppierung: Termine eines Tages → Zeitslots.

Zwei Termine landen genau dann im selben Slot, wenn sie über eine Kette
paarweiser Überschneidungen verbunden sind (Zusammenhangskomponenten des
Intervallgraphen). Für 1-D-Intervalle reicht dafür ein Sweep über die nach
Beginn sortierten Termine mit laufender Spanne [min Beginn, max Ende]:
ein Termin, der die Spanne schneidet, schneidet auch mindestens ein Mitglied.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable

from models.event import Event
from models.timeslot import TimeSlot

logger = logging.getLogger(__name__)


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Halboffene Überschneidung: [a) ∩ [b) ≠ ∅.

    Termine, die sich nur an der Grenze berühren (10:00 Ende, 10:00 Beginn),
    überschneiden sich NICHT.
    """
    return start_a < end_b and start_b < end_a


def _effective_span(event: Event) -> tuple[int, int]:
    # Invertierte Termine zählen als Zeitpunkt (Länge 0) bei ihrem Beginn
    start = event.start_minutes
    return start, max(start, event.end_minutes)


def events_overlap(a: Event, b: Event) -> bool:
    return intervals_overlap(*_effective_span(a), *_effective_span(b))


def _unique_by_id(events: Iterable[Event]) -> list[Event]:
    """Entfernt doppelte ids (erstes Vorkommen gewinnt)."""
    seen: set[str] = set()
    unique: list[Event] = []
    for e in events:
        if e.id in seen:
            continue
        seen.add(e.id)
        unique.append(e)
    return unique


def group_overlapping(events: Iterable[Event]) -> list[TimeSlot]:
    """Partitioniert die Termine eines Tages in Zeitslots.

    - Jeder Termin (pro id einmal) liegt in genau einem Slot.
    - Slots sind nach (Beginn, Ende) aufsteigend sortiert.
    - Deterministisch: gleiche Eingabe → gleiche Slots in gleicher Reihenfolge.

    Invertierte Termine (Beginn ≥ Ende) werden nicht abgelehnt, sondern als
    Zeitpunkt bei ihrem Beginn behandelt: sie gehören zu einem Slot, wenn
    dieser Zeitpunkt echt innerhalb der Spanne liegt, sonst bilden sie einen
    eigenen Slot.
    """
    unique = _unique_by_id(events)
    if not unique:
        return []

    ordered = sorted(unique, key=lambda e: (*_effective_span(e), e.id))

    clusters: list[list[Event]] = []
    current: list[Event] = []
    span_start = span_end = 0

    for event in ordered:
        start, end = _effective_span(event)
        if current and intervals_overlap(span_start, span_end, start, end):
            current.append(event)
            span_end = max(span_end, end)
            continue
        if current:
            clusters.append(current)
        current = [event]
        span_start, span_end = start, end
    clusters.append(current)

    slots = [TimeSlot.from_events(c) for c in clusters]
    slots.sort(key=lambda s: (s.start_minutes, s.end_minutes))

    logger.debug(
        f"group_overlapping: {len(unique)} Termine → {len(slots)} Slots "
        f"({sum(1 for s in slots if s.is_overlapping)} mit Überschneidung)"
    )
    return slots


def group_events_by_day(events: Iterable[Event]) -> dict[date, list[TimeSlot]]:
    """Gruppiert Termine mehrerer Tage, jeder Tag unabhängig.

    Für Wochen-, Zeitraum- und Monatsansicht. Termine ohne Datum → ValueError.
    Schlüssel sind aufsteigend sortiert.
    """
    by_day: dict[date, list[Event]] = defaultdict(list)
    for e in events:
        if e.date is None:
            raise ValueError(f"Termin '{e.id}' hat kein Datum")
        by_day[e.date].append(e)
    return {day: group_overlapping(by_day[day]) for day in sorted(by_day)}
