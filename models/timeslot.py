"""Datenmodell für einen Zeitslot: ein Cluster sich überschneidender Termine."""

from dataclasses import dataclass

from models.clock import format_minutes
from models.event import Event


@dataclass(frozen=True)
class TimeSlot:
    """Maximaler Cluster von Terminen, die über eine Kette von
    Überschneidungen zusammenhängen.

    Wird bei jeder Gruppierung neu erzeugt und danach nicht mehr verändert.
    Ein Slot mit genau einem Termin bedeutet "keine Überschneidung".
    """

    # Mitglieder, sortiert nach (Beginn, Ende)
    events: tuple[Event, ...]
    # Frühester Beginn aller Mitglieder (Minuten seit Mitternacht)
    start_minutes: int
    # Spätestes Ende aller Mitglieder (Minuten seit Mitternacht)
    end_minutes: int

    @classmethod
    def from_events(cls, events: list[Event]) -> "TimeSlot":
        """Erzeugt einen Slot mit Spanne min(Beginn) bis max(Ende)."""
        if not events:
            raise ValueError("Ein TimeSlot braucht mindestens einen Termin.")
        ordered = tuple(sorted(events, key=lambda e: (e.start_minutes, e.end_minutes, e.id)))
        return cls(
            events=ordered,
            start_minutes=min(e.start_minutes for e in ordered),
            end_minutes=max(e.end_minutes for e in ordered),
        )

    @property
    def start_time(self) -> str:
        """Beginn als "HH:MM"."""
        return format_minutes(self.start_minutes)

    @property
    def end_time(self) -> str:
        """Ende als "HH:MM"."""
        return format_minutes(self.end_minutes)

    @property
    def is_overlapping(self) -> bool:
        """True wenn mehr als ein Termin im Slot liegt (Anzeige als Sammel-Badge)."""
        return len(self.events) > 1

    @property
    def event_ids(self) -> list[str]:
        return [e.id for e in self.events]

    @property
    def label(self) -> str:
        return f"{self.start_time}–{self.end_time}"

    @property
    def count_label(self) -> str:
        n = len(self.events)
        return f"{n} Termin" if n == 1 else f"{n} Termine"

    def __len__(self) -> int:
        return len(self.events)

    def __repr__(self) -> str:
        return f"TimeSlot({self.label}, {self.event_ids})"

    def __str__(self) -> str:
        return f"{self.label} • {self.count_label}"
