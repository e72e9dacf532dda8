"""Datenmodell für einen Termin (Unterrichtsstunde / Stundenplan-Eintrag) (Pydantic v2)."""

from datetime import date as Date
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.clock import format_time, parse_time


LessonStatus = Literal["Planned", "Completed", "Cancelled", "Moved"]


class Event(BaseModel):
    """Ein einzelnes Vorkommen eines Termins an einem Tag.

    Für Gruppierung und Layout zählen nur id, start_time und end_time, alle
    anderen Felder sind Anzeige-Informationen. Das Intervall ist halboffen:
    [start_time, end_time).

    Akzeptiert auch die camelCase-Felder der Schul-API (startTime, endTime,
    lessonStatus) sowie verschachtelte Objekte ({"id": ..., "name": ...}).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    start_time: str = Field(alias="startTime")   # "09:00" oder "09:00:00"
    end_time: str = Field(alias="endTime")
    date: Optional[Date] = None                   # Tag des Termins (für Wochen-/Monatsansicht)
    title: str = ""                               # Fachname
    group: Optional[str] = None
    teacher: Optional[str] = None
    room: Optional[str] = None
    status: LessonStatus = Field("Planned", alias="lessonStatus")
    note: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_api_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        subject = data.pop("subject", None)
        if not data.get("title"):
            if isinstance(subject, dict):
                data["title"] = subject.get("subjectName") or subject.get("name") or ""
            elif isinstance(subject, str):
                data["title"] = subject
        for key in ("group", "teacher", "room"):
            value = data.get(key)
            if isinstance(value, dict):
                data[key] = value.get("name")
        return data

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, v: str) -> str:
        # TimeFormatError ist ein ValueError → Pydantic meldet ValidationError
        parse_time(v)
        return v

    @property
    def start_minutes(self) -> int:
        """Beginn in Minuten seit Mitternacht."""
        return parse_time(self.start_time)

    @property
    def end_minutes(self) -> int:
        """Ende in Minuten seit Mitternacht."""
        return parse_time(self.end_time)

    @property
    def duration_minutes(self) -> int:
        # Negativ bei invertiertem Intervall
        return self.end_minutes - self.start_minutes

    @property
    def time_label(self) -> str:
        return f"{format_time(self.start_time)}–{format_time(self.end_time)}"

    def __str__(self) -> str:
        return f"{self.title or self.id} ({self.time_label})"
