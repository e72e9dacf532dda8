"""CalendarData: Terminliste laden/speichern (Pydantic v2)."""

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from models.event import Event

logger = logging.getLogger(__name__)


class CalendarData(BaseModel):
    """Alle Termine eines Zeitraums, wie sie von der API geliefert wurden."""

    events: list[Event]
    created_at: Optional[datetime] = None
    data_version: str = "1.0"

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über den Datensatz."""
        days = sorted({e.date for e in self.events if e.date is not None})
        lines = [f"Termine: {len(self.events)}"]
        if days:
            lines.append(f"Zeitraum: {days[0].isoformat()} bis {days[-1].isoformat()} ({len(days)} Tage)")
        undated = sum(1 for e in self.events if e.date is None)
        if undated:
            lines.append(f"Ohne Datum: {undated}")
        return "\n".join(lines)

    def dates(self) -> list[date]:
        """Alle Tage mit mindestens einem Termin, aufsteigend."""
        return sorted({e.date for e in self.events if e.date is not None})

    # ─── Persistenz ───

    def save_json(self, path: Path) -> None:
        """Speichert die Termine als JSON-Datei."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        updated = self.model_copy(update={
            "created_at": self.created_at or datetime.now(timezone.utc),
        })
        with open(path, "w", encoding="utf-8") as f:
            f.write(updated.model_dump_json(indent=2))

    @classmethod
    def load_json(cls, path: Path) -> "CalendarData":
        """Lädt Termine aus einer JSON-Datei.

        Akzeptierte Formen:
        - Liste von Terminen
        - {"events": [...]} (eigenes Format)
        - {"items": [...]} (paginierte Antwort der Schul-API)
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"JSON-Datei nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        if isinstance(raw, list):
            raw = {"events": raw}
        elif isinstance(raw, dict) and "events" not in raw and "items" in raw:
            raw = {"events": raw["items"]}
        if not isinstance(raw, dict) or "events" not in raw:
            raise ValueError(
                f"Unbekanntes Format in {path}: erwartet Liste, "
                f"{{\"events\": [...]}} oder {{\"items\": [...]}}"
            )

        data = cls.model_validate(raw)
        logger.info(f"{len(data.events)} Termine geladen aus {path}")
        return data
