from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum

from models.clock import parse_time


class CalendarView(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    RANGE = "range"
    LIST = "list"


# ─── STUNDENRASTER (pro Ansicht konfigurierbar) ───

class GridConfig(BaseModel):
    """Stundenraster einer Kalenderansicht.

    Definiert:
    - Welche Uhrzeit der Pixel-Position 0 entspricht (Raster-Ursprung)
    - Wie viele Pixel eine Stunde hoch ist
    - Die Mindesthöhe eines Termins (damit kurze Termine klickbar bleiben)
    - Bis zu welcher Stunde Zeilen beschriftet werden
    """
    # Uhrzeit des Raster-Ursprungs in Minuten seit Mitternacht (08:00 → 480).
    # Im YAML darf auch "08:00" stehen.
    grid_origin_minutes: int = Field(480, ge=0, le=1439,
        description="Raster-Ursprung (Minuten seit Mitternacht)")
    # Pixel pro Stunde
    pixels_per_hour: float = Field(60, gt=0,
        description="Pixel pro Stunde")
    # Mindesthöhe eines Termins in Pixel
    minimum_height_pixels: float = Field(25, ge=0,
        description="Mindesthöhe eines Termins (Pixel)")
    # Letzte beschriftete Stunde im Raster (23 → letzte Zeile 23:00)
    last_hour: int = Field(23, ge=0, le=23,
        description="Letzte beschriftete Stunde")

    @field_validator("grid_origin_minutes", mode="before")
    @classmethod
    def _accept_clock_string(cls, v):
        if isinstance(v, str):
            return parse_time(v)
        return v

    @model_validator(mode="after")
    def validate_hours(self):
        """Prüfe dass die letzte Stunde nicht vor dem Ursprung liegt."""
        if self.last_hour < self.first_hour:
            raise ValueError(
                f"last_hour ({self.last_hour}) liegt vor dem Raster-Ursprung "
                f"({self.first_hour}:00)")
        return self

    @property
    def first_hour(self) -> int:
        """Erste beschriftete Stunde (volle Stunde des Ursprungs)."""
        return self.grid_origin_minutes // 60

    @property
    def pixels_per_minute(self) -> float:
        return self.pixels_per_hour / 60


# ─── GESAMT-CONFIG ───

class CalendarConfig(BaseModel):
    """Gesamtkonfiguration der Kalenderansichten."""
    # Name der Einrichtung (nur Anzeige)
    organization_name: str = Field("Bildungszentrum",
        description="Name der Einrichtung")
    # Ansicht beim Start
    default_view: CalendarView = Field(CalendarView.WEEK)
    # Tagesansicht: Mindesthöhe 60 px
    day: GridConfig = Field(default_factory=lambda: GridConfig(minimum_height_pixels=60))
    # Wochenansicht: Mindesthöhe 58 px
    week: GridConfig = Field(default_factory=lambda: GridConfig(minimum_height_pixels=58))
    # Zeitraum-Ansicht: Mindesthöhe 25 px
    range: GridConfig = Field(default_factory=lambda: GridConfig(minimum_height_pixels=25))

    def grid_for(self, view: CalendarView) -> GridConfig:
        """Gibt das Stundenraster einer Ansicht zurück.

        Monats- und Listenansicht positionieren nicht → ValueError.
        """
        view = CalendarView(view)
        if view == CalendarView.DAY:
            return self.day
        if view == CalendarView.WEEK:
            return self.week
        if view == CalendarView.RANGE:
            return self.range
        raise ValueError(f"Ansicht '{view.value}' hat kein Stundenraster")
