"""Layout-Positionierung: Zeitspanne → Pixel-Box im Stundenraster."""

from typing import Iterable, Union

from config.schema import GridConfig
from models.clock import parse_time
from models.event import Event
from models.layout_box import LayoutBox
from models.timeslot import TimeSlot

Span = Union[tuple[str, str], Event, TimeSlot]


def _span_minutes(span: Span) -> tuple[int, int]:
    """Normalisiert die Eingabe auf (Beginn, Ende) in Minuten."""
    if isinstance(span, (Event, TimeSlot)):
        return span.start_minutes, span.end_minutes
    start, end = span
    return parse_time(start), parse_time(end)


def layout(span: Span, config: GridConfig) -> LayoutBox:
    """Berechnet top/height für einen Termin oder Slot.

    top    = max(0, (Beginn − Ursprung) / 60 · px_pro_Stunde)
    height = max(Mindesthöhe, (Ende − Beginn) / 60 · px_pro_Stunde)

    Termine vor dem Ursprung kleben an der Oberkante; Termine mit Dauer ≤ 0
    bekommen die Mindesthöhe. Ungültige Uhrzeiten → TimeFormatError.
    """
    start, end = _span_minutes(span)
    top = (start - config.grid_origin_minutes) / 60 * config.pixels_per_hour
    height = (end - start) / 60 * config.pixels_per_hour
    return LayoutBox(
        top=max(0.0, top),
        height=max(float(config.minimum_height_pixels), height),
    )


def layout_slots(
    slots: Iterable[TimeSlot], config: GridConfig
) -> list[tuple[TimeSlot, LayoutBox]]:
    """Positioniert alle Slots einer Tagesspalte."""
    return [(slot, layout(slot, config)) for slot in slots]
