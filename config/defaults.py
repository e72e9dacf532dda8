from config.schema import (
    CalendarConfig,
    CalendarView,
    GridConfig,
)

# Raster-Ursprung aller Ansichten: 08:00
DEFAULT_GRID_ORIGIN = 8 * 60
DEFAULT_PIXELS_PER_HOUR = 60

# Mindesthöhe pro Ansicht (Pixel)
MINIMUM_HEIGHTS: dict[CalendarView, int] = {
    CalendarView.DAY: 60,
    CalendarView.WEEK: 58,
    CalendarView.RANGE: 25,
}


def default_grid(view: CalendarView) -> GridConfig:
    """Standard-Stundenraster einer Ansicht.

    Zeilen 08:00 bis 23:00, 60 px pro Stunde. Die Mindesthöhe unterscheidet
    sich je Ansicht:
      Tag       60 px  (volle Details im Block)
      Woche     58 px
      Zeitraum  25 px  (schmale Spalten, viele Tage)
    """
    if view not in MINIMUM_HEIGHTS:
        raise ValueError(f"Ansicht '{CalendarView(view).value}' hat kein Stundenraster")
    return GridConfig(
        grid_origin_minutes=DEFAULT_GRID_ORIGIN,
        pixels_per_hour=DEFAULT_PIXELS_PER_HOUR,
        minimum_height_pixels=MINIMUM_HEIGHTS[view],
        last_hour=23,
    )


def default_calendar_config() -> CalendarConfig:
    """Vollständige Default-Konfiguration aller Kalenderansichten."""
    return CalendarConfig(
        organization_name="Bildungszentrum",
        default_view=CalendarView.WEEK,
        day=default_grid(CalendarView.DAY),
        week=default_grid(CalendarView.WEEK),
        range=default_grid(CalendarView.RANGE),
    )
