"""Gemeinsamer Renderer für die Terminal-Anzeige gruppierter Termine.

Wird von `layout` und `slot` (main.py) verwendet. Entscheidet pro Slot
zwischen Detailanzeige (ein Termin) und Sammel-Badge (mehrere Termine).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.schema import GridConfig
    from models.event import Event
    from models.timeslot import TimeSlot


STATUS_LABELS: dict[str, str] = {
    "Planned": "geplant",
    "Completed": "durchgeführt",
    "Cancelled": "abgesagt",
    "Moved": "verschoben",
}


def describe_event(event: "Event") -> str:
    """Mehrzeilige Kurzbeschreibung eines Termins."""
    lines = [event.title or event.id]
    details = [v for v in (event.group, event.teacher, event.room) if v]
    if details:
        lines.append(" · ".join(details))
    if event.status != "Planned":
        lines.append(f"({STATUS_LABELS.get(event.status, event.status)})")
    if event.note:
        lines.append("✎ Kommentar")
    return "\n".join(lines)


def render_day_rows(
    slots: list["TimeSlot"],
    config: "GridConfig",
) -> list[list[str]]:
    """Gibt Tabellenzeilen für die Slots eines Tages zurück.

    Jede Zeile: [Nr., Zeit, top, height, Inhalt]
    Slots mit Überschneidung zeigen nur die Anzahl ("3 Termine").
    """
    from layout.positioner import layout_slots

    rows: list[list[str]] = []
    for idx, (slot, box) in enumerate(layout_slots(slots, config), start=1):
        if slot.is_overlapping:
            content = f"⧉ {slot.count_label}"
        else:
            content = describe_event(slot.events[0])
        rows.append([
            str(idx),
            slot.label,
            f"{box.top:.0f}",
            f"{box.height:.0f}",
            content,
        ])
    return rows


def render_slot_detail_rows(slot: "TimeSlot") -> list[list[str]]:
    """Zeilen für die Detailansicht eines Slots (Auswahl eines Termins).

    Jede Zeile: [id, Zeit, Fach, Gruppe, Lehrkraft, Raum, Status]
    """
    return [
        [
            e.id,
            e.time_label,
            e.title or "—",
            e.group or "—",
            e.teacher or "—",
            e.room or "—",
            STATUS_LABELS.get(e.status, e.status),
        ]
        for e in slot.events
    ]
